# models/academic_configuration.py

"""
The academic configuration carries the settings that shape course-level aggregation:

- `evaluation_periods`: the terms of the academic year, in display order.
- `evaluation_period_weights`: relative weight of each period in the overall course grade.
  Weights need not sum to 100; periods without a weight contribute nothing.
- `grade_scale`: the classification table used to style computed grades.

When a snapshot omits the grade scale, `core.config.DEFAULT_GRADE_SCALE` is used.
"""

from __future__ import annotations

import datetime
import math
from typing import Any

from core.config import DEFAULT_GRADE_SCALE, GRADE_SCALE_COLORS
from models.evaluation_period import EvaluationPeriod


class GradeScaleRule:

    def __init__(self, min: float, color: str, label: str | None = None):
        self._min = GradeScaleRule.validate_min_input(min)
        self._color = GradeScaleRule.validate_color_input(color)
        self._label = label

    # === properties ===

    @property
    def min(self) -> float:
        return self._min

    @property
    def color(self) -> str:
        return self._color

    @property
    def label(self) -> str | None:
        return self._label

    # === persistence and import ===

    def to_dict(self) -> dict:
        data: dict[str, Any] = {"min": self._min, "color": self._color}
        if self._label is not None:
            data["label"] = self._label
        return data

    @classmethod
    def from_dict(cls, data: dict) -> GradeScaleRule:
        return cls(min=data["min"], color=data["color"], label=data.get("label"))

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"GradeScaleRule({self._min}, {self._color}, {self._label})"

    # === data validators ===

    @staticmethod
    def validate_min_input(minimum: Any) -> float:
        try:
            minimum = float(minimum)

        except (TypeError, ValueError):
            raise TypeError("Invalid input. Grade scale minimum must be a number.") from None

        if not math.isfinite(minimum):
            raise ValueError("Invalid input. Grade scale minimum must be a finite number.")

        return minimum

    @staticmethod
    def validate_color_input(color: Any) -> str:
        if color not in GRADE_SCALE_COLORS:
            raise ValueError(
                f"Invalid input. Grade scale color must be one of: {', '.join(GRADE_SCALE_COLORS)}."
            )

        return color


def default_grade_scale() -> list[GradeScaleRule]:
    return [GradeScaleRule.from_dict(rule) for rule in DEFAULT_GRADE_SCALE]


class AcademicConfiguration:

    def __init__(
        self,
        evaluation_periods: list[EvaluationPeriod] | None = None,
        evaluation_period_weights: dict[str, float] | None = None,
        grade_scale: list[GradeScaleRule] | None = None,
        academic_year_start: datetime.date | None = None,
        academic_year_end: datetime.date | None = None,
    ):
        self._evaluation_periods = tuple(evaluation_periods or ())
        self._evaluation_period_weights = {
            period_id: AcademicConfiguration.validate_period_weight_input(weight)
            for period_id, weight in (evaluation_period_weights or {}).items()
        }
        self._grade_scale = tuple(grade_scale) if grade_scale else tuple(default_grade_scale())
        self._academic_year_start = academic_year_start
        self._academic_year_end = academic_year_end

    # === properties ===

    @property
    def evaluation_periods(self) -> tuple[EvaluationPeriod, ...]:
        return self._evaluation_periods

    @property
    def evaluation_period_weights(self) -> dict[str, float]:
        return dict(self._evaluation_period_weights)

    @property
    def grade_scale(self) -> tuple[GradeScaleRule, ...]:
        return self._grade_scale

    @property
    def academic_year_start(self) -> datetime.date | None:
        return self._academic_year_start

    @property
    def academic_year_end(self) -> datetime.date | None:
        return self._academic_year_end

    def period_weight(self, period_id: str) -> float:
        return self._evaluation_period_weights.get(period_id, 0.0)

    def find_period(self, period_id: str) -> EvaluationPeriod | None:
        return next((p for p in self._evaluation_periods if p.id == period_id), None)

    def period_for_date(self, date: datetime.date) -> EvaluationPeriod | None:
        return next((p for p in self._evaluation_periods if p.contains(date)), None)

    # === persistence and import ===

    def to_dict(self) -> dict:
        data: dict[str, Any] = {
            "evaluationPeriods": [p.to_dict() for p in self._evaluation_periods],
            "evaluationPeriodWeights": dict(self._evaluation_period_weights),
            "gradeScale": [rule.to_dict() for rule in self._grade_scale],
        }

        if self._academic_year_start:
            data["academicYearStart"] = self._academic_year_start.isoformat()
        if self._academic_year_end:
            data["academicYearEnd"] = self._academic_year_end.isoformat()

        return data

    @classmethod
    def from_dict(cls, data: dict) -> AcademicConfiguration:
        def parse_date(key: str) -> datetime.date | None:
            value = data.get(key)
            return datetime.date.fromisoformat(value) if value else None

        return cls(
            evaluation_periods=[
                EvaluationPeriod.from_dict(p) for p in data.get("evaluationPeriods") or []
            ],
            evaluation_period_weights=data.get("evaluationPeriodWeights") or {},
            grade_scale=[
                GradeScaleRule.from_dict(rule) for rule in data.get("gradeScale") or []
            ],
            academic_year_start=parse_date("academicYearStart"),
            academic_year_end=parse_date("academicYearEnd"),
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"AcademicConfiguration({len(self._evaluation_periods)} periods, {self._evaluation_period_weights})"

    # === data validators ===

    @staticmethod
    def validate_period_weight_input(weight: Any) -> float:
        """
        Validates and normalizes an evaluation period weight.

        Raises:
            TypeError: If the input cannot be cast to float.
            ValueError: If the input is non-finite or negative.
        """
        try:
            weight = float(weight)

        except (TypeError, ValueError):
            raise TypeError("Period weight must be a number.") from None

        if not math.isfinite(weight):
            raise ValueError("Period weight must be a finite number.")

        if weight < 0:
            raise ValueError("Period weight cannot be less than zero.")

        return weight
