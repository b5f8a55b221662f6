# models/evaluation_tool.py

"""
Reusable evaluation instruments: checklists, rating scales and rubrics.

Every tool is a list of weighted items, each optionally linked to one or more criteria.
Rating scales and rubrics also define a set of levels; a student's result for an item is
the id of the selected level. Checklist results are booleans.

`EvaluationTool.from_dict()` dispatches on the "type" key and returns the matching subclass.

Notes:
- Level points need not be sequential integers but must be distinct within a tool.
- Scoring lives in `core.tool_scoring`; these classes only describe the instrument.
"""

from __future__ import annotations

import math
from typing import Any


class EvaluationLevel:

    def __init__(self, id: str, name: str, points: float):
        self._id = id
        self._name = name
        self._points = EvaluationLevel.validate_points_input(points)

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def points(self) -> float:
        return self._points

    def to_dict(self) -> dict:
        return {"id": self._id, "name": self._name, "points": self._points}

    @classmethod
    def from_dict(cls, data: dict) -> EvaluationLevel:
        return cls(id=data["id"], name=data.get("name", ""), points=data["points"])

    def __repr__(self) -> str:
        return f"EvaluationLevel({self._id}, {self._name}, {self._points})"

    @staticmethod
    def validate_points_input(points: Any) -> float:
        try:
            points = float(points)

        except (TypeError, ValueError):
            raise TypeError("Invalid input. Level points must be a number.") from None

        if not math.isfinite(points):
            raise ValueError("Invalid input. Level points must be a finite number.")

        return points


class EvaluationItem:

    def __init__(
        self,
        id: str,
        description: str,
        weight: float = 1.0,
        linked_criteria_ids: list[str] | None = None,
    ):
        self._id = id
        self._description = description
        self._weight = EvaluationItem.validate_weight_input(weight)
        self._linked_criteria_ids = tuple(linked_criteria_ids or ())

    # === properties ===

    @property
    def id(self) -> str:
        return self._id

    @property
    def description(self) -> str:
        return self._description

    @property
    def weight(self) -> float:
        return self._weight

    @property
    def linked_criteria_ids(self) -> tuple[str, ...]:
        return self._linked_criteria_ids

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "description": self._description,
            "weight": self._weight,
            "linkedCriteriaIds": list(self._linked_criteria_ids),
        }

    @classmethod
    def from_dict(cls, data: dict) -> EvaluationItem:
        return cls(
            id=data["id"],
            description=data.get("description", ""),
            weight=data.get("weight", 1.0),
            linked_criteria_ids=data.get("linkedCriteriaIds") or [],
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._id}, {self._weight}, {list(self._linked_criteria_ids)})"

    # === data validators ===

    @staticmethod
    def validate_weight_input(weight: Any) -> float:
        """
        Validates and normalizes an item weight.

        Raises:
            TypeError: If the input cannot be cast to float.
            ValueError: If the input is non-finite or negative.
        """
        try:
            weight = float(weight)

        except (TypeError, ValueError):
            raise TypeError("Invalid input. Item weight must be a number.") from None

        if not math.isfinite(weight):
            raise ValueError("Invalid input. Item weight must be a finite number.")

        if weight < 0:
            raise ValueError("Invalid input. Item weight cannot be less than zero.")

        return weight


class RubricItem(EvaluationItem):

    def __init__(
        self,
        id: str,
        description: str,
        weight: float = 1.0,
        linked_criteria_ids: list[str] | None = None,
        level_descriptions: dict[str, str] | None = None,
    ):
        super().__init__(id, description, weight, linked_criteria_ids)
        self._level_descriptions = dict(level_descriptions or {})

    @property
    def level_descriptions(self) -> dict[str, str]:
        return dict(self._level_descriptions)

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["levelDescriptions"] = dict(self._level_descriptions)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> RubricItem:
        return cls(
            id=data["id"],
            description=data.get("description", ""),
            weight=data.get("weight", 1.0),
            linked_criteria_ids=data.get("linkedCriteriaIds") or [],
            level_descriptions=data.get("levelDescriptions") or {},
        )


class EvaluationTool:
    tool_type: str = ""
    item_class: type[EvaluationItem] = EvaluationItem
    uses_levels: bool = False

    def __init__(
        self,
        id: str,
        name: str,
        items: list[EvaluationItem] | None = None,
        levels: list[EvaluationLevel] | None = None,
    ):
        self._id = id
        self._name = name
        self._items = tuple(items or ())
        self._levels = tuple(EvaluationTool.validate_levels_input(levels or []))

    # === properties ===

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def items(self) -> tuple[EvaluationItem, ...]:
        return self._items

    @property
    def levels(self) -> tuple[EvaluationLevel, ...]:
        return self._levels

    @property
    def max_level_points(self) -> float:
        """Highest level points of the tool, or 0 when no level is positive."""
        return max([level.points for level in self._levels] + [0.0])

    def find_level(self, level_id: Any) -> EvaluationLevel | None:
        return next((lvl for lvl in self._levels if lvl.id == level_id), None)

    # === persistence and import ===

    def to_dict(self) -> dict:
        data: dict[str, Any] = {
            "id": self._id,
            "type": self.tool_type,
            "name": self._name,
            "items": [item.to_dict() for item in self._items],
        }

        if self.uses_levels:
            data["levels"] = [level.to_dict() for level in self._levels]

        return data

    @classmethod
    def from_dict(cls, data: dict) -> EvaluationTool:
        """
        Builds the concrete tool subclass named by `data["type"]`.

        Raises:
            ValueError: If the tool type is not recognized.
        """
        tool_class = _TOOL_TYPES.get(data.get("type", ""))

        if tool_class is None:
            raise ValueError(f"Unrecognized evaluation tool type: {data.get('type')}")

        return tool_class(
            id=data["id"],
            name=data.get("name", ""),
            items=[tool_class.item_class.from_dict(i) for i in data.get("items") or []],
            levels=[EvaluationLevel.from_dict(lvl) for lvl in data.get("levels") or []],
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._id}, {self._name}, {len(self._items)} items, {len(self._levels)} levels)"

    def __str__(self) -> str:
        return f"EVALUATION TOOL: type: {self.tool_type}, name: {self._name}, id: {self._id}"

    # === data validators ===

    @staticmethod
    def validate_levels_input(levels: list[EvaluationLevel]) -> list[EvaluationLevel]:
        """
        Ensures level points are distinct within a tool.

        Raises:
            ValueError: If two levels share the same points value.
        """
        seen: set[float] = set()

        for level in levels:
            if level.points in seen:
                raise ValueError(
                    f"Duplicate level points within a tool: {level.points}."
                )
            seen.add(level.points)

        return list(levels)


class Checklist(EvaluationTool):
    tool_type = "checklist"

    def __init__(
        self,
        id: str,
        name: str,
        items: list[EvaluationItem] | None = None,
        levels: list[EvaluationLevel] | None = None,
    ):
        # checklists are scored by booleans only
        super().__init__(id, name, items, None)


class RatingScale(EvaluationTool):
    tool_type = "rating_scale"
    uses_levels = True


class Rubric(EvaluationTool):
    tool_type = "rubric"
    item_class = RubricItem
    uses_levels = True


_TOOL_TYPES: dict[str, type[EvaluationTool]] = {
    Checklist.tool_type: Checklist,
    RatingScale.tool_type: RatingScale,
    Rubric.tool_type: Rubric,
}
