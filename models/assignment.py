# models/assignment.py

"""
The Assignment model represents any graded task: an exam, a project, an observation
recorded with an evaluation tool, or a recovery task.

An `Assignment` belongs to exactly one `Category` and one `EvaluationPeriod`. How a
student's recorded `Grade` turns into a single score depends on `evaluation_method`,
`evaluation_tool_id` and `linked_criteria` (see `core.assignment_scoring`).

`linked_criteria` splits one overall score across several criteria. Ratios are relative
weights normalized by their sum, so `[1, 3]` and `[25, 75]` are equivalent.

`recovers_assignment_ids` is only meaningful on assignments whose category is of type
recovery; it names earlier assignments whose criterion scores this one may raise.
"""

from __future__ import annotations

import datetime
import math
from enum import Enum
from typing import Any


class EvaluationMethod(str, Enum):
    DIRECT_GRADE = "direct_grade"
    CHECKLIST = "checklist"
    RATING_SCALE = "rating_scale"
    RUBRIC = "rubric"


class LinkedCriterion:

    def __init__(
        self,
        criterion_id: str,
        ratio: float = 1.0,
        selected_descriptor_ids: list[str] | None = None,
    ):
        self._criterion_id = criterion_id
        self._ratio = LinkedCriterion.validate_ratio_input(ratio)
        self._selected_descriptor_ids = tuple(selected_descriptor_ids or ())

    @property
    def criterion_id(self) -> str:
        return self._criterion_id

    @property
    def ratio(self) -> float:
        return self._ratio

    @property
    def selected_descriptor_ids(self) -> tuple[str, ...]:
        return self._selected_descriptor_ids

    def to_dict(self) -> dict:
        return {
            "criterionId": self._criterion_id,
            "ratio": self._ratio,
            "selectedDescriptorIds": list(self._selected_descriptor_ids),
        }

    @classmethod
    def from_dict(cls, data: dict) -> LinkedCriterion:
        return cls(
            criterion_id=data["criterionId"],
            ratio=data.get("ratio", 1.0),
            selected_descriptor_ids=data.get("selectedDescriptorIds") or [],
        )

    def __repr__(self) -> str:
        return f"LinkedCriterion({self._criterion_id}, {self._ratio})"

    @staticmethod
    def validate_ratio_input(ratio: Any) -> float:
        """
        Validates and normalizes a linked criterion ratio.

        Raises:
            TypeError: If the input cannot be cast to float.
            ValueError: If the input is non-finite or negative.
        """
        try:
            ratio = float(ratio)

        except (TypeError, ValueError):
            raise TypeError("Invalid input. Ratio must be a number.") from None

        if not math.isfinite(ratio):
            raise ValueError("Invalid input. Ratio must be a finite number.")

        if ratio < 0:
            raise ValueError("Invalid input. Ratio cannot be less than zero.")

        return ratio


class Assignment:

    def __init__(
        self,
        id: str,
        name: str,
        category_id: str,
        evaluation_period_id: str,
        evaluation_method: EvaluationMethod | str = EvaluationMethod.DIRECT_GRADE,
        linked_criteria: list[LinkedCriterion] | None = None,
        evaluation_tool_id: str | None = None,
        date: datetime.date | None = None,
        recovers_assignment_ids: list[str] | None = None,
    ):
        self._id = id
        self._name = name
        self._category_id = category_id
        self._evaluation_period_id = evaluation_period_id
        self._evaluation_method = Assignment.validate_method_input(evaluation_method)
        self._linked_criteria = tuple(linked_criteria or ())
        self._evaluation_tool_id = evaluation_tool_id
        self._date = date
        self._recovers_assignment_ids = tuple(recovers_assignment_ids or ())

    # === properties ===

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def category_id(self) -> str:
        return self._category_id

    @property
    def evaluation_period_id(self) -> str:
        return self._evaluation_period_id

    @property
    def evaluation_method(self) -> EvaluationMethod:
        return self._evaluation_method

    @property
    def is_direct_grade(self) -> bool:
        return self._evaluation_method is EvaluationMethod.DIRECT_GRADE

    @property
    def linked_criteria(self) -> tuple[LinkedCriterion, ...]:
        return self._linked_criteria

    @property
    def linked_criterion_ids(self) -> list[str]:
        return [lc.criterion_id for lc in self._linked_criteria]

    @property
    def evaluation_tool_id(self) -> str | None:
        return self._evaluation_tool_id

    @property
    def date(self) -> datetime.date | None:
        return self._date

    @property
    def date_str(self) -> str | None:
        return self._date.isoformat() if self._date else None

    @property
    def recovers_assignment_ids(self) -> tuple[str, ...]:
        return self._recovers_assignment_ids

    @property
    def is_recovery_task(self) -> bool:
        return len(self._recovers_assignment_ids) > 0

    # === persistence and import ===

    def to_dict(self) -> dict:
        data: dict[str, Any] = {
            "id": self._id,
            "name": self._name,
            "categoryId": self._category_id,
            "evaluationPeriodId": self._evaluation_period_id,
            "evaluationMethod": self._evaluation_method.value,
            "linkedCriteria": [lc.to_dict() for lc in self._linked_criteria],
        }

        if self._evaluation_tool_id:
            data["evaluationToolId"] = self._evaluation_tool_id
        if self._date:
            data["date"] = self.date_str
        if self._recovers_assignment_ids:
            data["recoversAssignmentIds"] = list(self._recovers_assignment_ids)

        return data

    @classmethod
    def from_dict(cls, data: dict) -> Assignment:
        return cls(
            id=data["id"],
            name=data["name"],
            category_id=data["categoryId"],
            evaluation_period_id=data["evaluationPeriodId"],
            evaluation_method=data.get("evaluationMethod")
            or EvaluationMethod.DIRECT_GRADE,
            linked_criteria=[
                LinkedCriterion.from_dict(lc) for lc in data.get("linkedCriteria") or []
            ],
            evaluation_tool_id=data.get("evaluationToolId") or None,
            date=Assignment.validate_date_input(data.get("date")),
            recovers_assignment_ids=data.get("recoversAssignmentIds") or [],
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Assignment({self._id}, {self._name}, {self._category_id}, {self._evaluation_method.value}, {self.linked_criterion_ids})"

    def __str__(self) -> str:
        return f"ASSIGNMENT: name: {self._name}, id: {self._id}"

    # === data validators ===

    @staticmethod
    def validate_method_input(method: Any) -> EvaluationMethod:
        try:
            return EvaluationMethod(method)

        except ValueError:
            raise ValueError(f"Invalid evaluation method: {method}.") from None

    @staticmethod
    def validate_date_input(date_str: str | None) -> datetime.date | None:
        """
        Validates and normalizes an optional assignment date.

        Args:
            date_str (str | None): A date formatted as YYYY-MM-DD, or None.

        Returns:
            A `datetime.date`, or None if no date was given.

        Raises:
            TypeError: If the string is not a valid YYYY-MM-DD date.
        """
        if not date_str:
            return None

        try:
            return datetime.date.fromisoformat(date_str)

        except (ValueError, TypeError):
            raise TypeError(
                "Invalid input. The date must be formatted as YYYY-MM-DD."
            ) from None
