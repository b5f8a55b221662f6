# models/category.py

"""
Represents a weighted bucket of `Assignment` records within one evaluation period.

Each `Category` is owned by exactly one `EvaluationPeriod` and carries a weight used
when category averages are combined into a period grade.

Key behaviors:
- `weight`: A float from 0 to 100. Weights are relative; they need not sum to 100.
- `type`: `CategoryType.NORMAL` or `CategoryType.RECOVERY`. Assignments in a recovery
  category never count toward the weighted sum directly; they raise the scores of the
  assignments they recover.
- `to_dict()` / `from_dict()`: Used for snapshot import.

Notes:
- Snapshots without a "type" key are treated as normal categories.
- All weight validation is handled through `validate_weight_input()`.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any


class CategoryType(str, Enum):
    NORMAL = "normal"
    RECOVERY = "recovery"


class Category:

    def __init__(
        self,
        id: str,
        name: str,
        weight: float,
        evaluation_period_id: str,
        type: CategoryType | str = CategoryType.NORMAL,
    ):
        self._id = id
        self._name = name
        self._weight = Category.validate_weight_input(weight)
        self._evaluation_period_id = evaluation_period_id
        self._type = Category.validate_type_input(type)

    # === properties ===

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def weight(self) -> float:
        return self._weight

    @property
    def evaluation_period_id(self) -> str:
        return self._evaluation_period_id

    @property
    def type(self) -> CategoryType:
        return self._type

    @property
    def is_recovery(self) -> bool:
        return self._type is CategoryType.RECOVERY

    @property
    def status(self) -> str:
        return "'RECOVERY'" if self.is_recovery else "'NORMAL'"

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "name": self._name,
            "weight": self._weight,
            "evaluationPeriodId": self._evaluation_period_id,
            "type": self._type.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Category:
        return cls(
            id=data["id"],
            name=data["name"],
            weight=data["weight"],
            evaluation_period_id=data["evaluationPeriodId"],
            type=data.get("type") or CategoryType.NORMAL,
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Category({self._id}, {self._name}, {self._weight}, {self._evaluation_period_id}, {self._type.value})"

    def __str__(self) -> str:
        return f"CATEGORY: name: {self._name}, weight: {self._weight}, id: {self._id}"

    # === data validators ===

    @staticmethod
    def validate_weight_input(weight: Any) -> float:
        """
        Validates and normalizes input for a `Category` weight.

        Accepts any input, and then:
            - Casts to float.
            - Ensures the number is finite.
            - Ensures it is between 0 and 100, inclusive.

        Args:
            weight (Any): The input value to validate.

        Returns:
            The normalized weight value (float).

        Raises:
            TypeError: If the input cannot be cast to float.
            ValueError: If the input is non-finite or out of bounds.
        """
        try:
            weight = float(weight)

        except (TypeError, ValueError):
            raise TypeError("Weight must be a number.") from None

        if not math.isfinite(weight):
            raise ValueError("Weight must be a finite number.")

        if weight < 0 or weight > 100:
            raise ValueError("Weight must be between 0 and 100.")

        return weight

    @staticmethod
    def validate_type_input(category_type: Any) -> CategoryType:
        try:
            return CategoryType(category_type)

        except ValueError:
            raise ValueError(
                f"Invalid category type: {category_type}. Expected 'normal' or 'recovery'."
            ) from None
