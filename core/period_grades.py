# core/period_grades.py

"""
Category-weighted period grades and the period-weighted overall course grade.

- `evaluation_period_grade()`: averages assignment scores per normal category, substituting
  recovery scores for recovered assignments, then combines category averages by weight.
- `overall_final_grade()`: combines period grades using the configured period weights and
  formats the result to two decimals, or "N/A" when nothing can be computed.

Both return a `GradeResult` carrying the grade and its style classes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from core.assignment_scoring import single_assignment_score
from core.classification import color_class
from core.config import NO_DATA_STYLE, NO_FINAL_GRADE
from core.recovery import apply_best_of, assignment_recovery_scores
from models.academic_configuration import AcademicConfiguration, GradeScaleRule
from models.category import Category
from models.class_data import ClassData

logger = logging.getLogger(__name__)


class GradeResult:

    def __init__(self, grade: float | str | None, style_classes: str):
        self._grade = grade
        self._style_classes = style_classes

    @property
    def grade(self) -> float | str | None:
        return self._grade

    @property
    def style_classes(self) -> str:
        return self._style_classes

    def to_dict(self) -> dict:
        return {"grade": self._grade, "styleClasses": self._style_classes}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GradeResult):
            return NotImplemented
        return (self._grade, self._style_classes) == (other._grade, other._style_classes)

    def __repr__(self) -> str:
        return f"GradeResult({self._grade}, {self._style_classes})"


def _weighted_mean(pairs: Iterable[tuple[float, float]]) -> float | None:
    weighted_sum = 0.0
    total_weight = 0.0

    for value, weight in pairs:
        weighted_sum += value * weight
        total_weight += weight

    if total_weight == 0:
        return None

    return weighted_sum / total_weight


def category_assignment_scores(
    student_id: str,
    class_data: ClassData,
    category: Category,
    recovery_scores: dict[str, float] | None = None,
) -> dict[str, float | None]:
    """
    Scores the assignments of one category, raising recovered ones to their recovery score.

    Returns:
        dict[str, float | None]: Assignment id to post-recovery score.
    """
    recovery_scores = recovery_scores or {}
    scores: dict[str, float | None] = {}

    for assignment in class_data.assignments_in_category(category.id):
        score = single_assignment_score(
            assignment, class_data.grade_for(student_id, assignment.id)
        )
        scores[assignment.id] = apply_best_of(score, recovery_scores.get(assignment.id))

    return scores


def category_average(
    student_id: str,
    class_data: ClassData,
    category: Category,
    recovery_scores: dict[str, float] | None = None,
) -> float | None:
    scores = category_assignment_scores(
        student_id, class_data, category, recovery_scores
    ).values()
    present = [s for s in scores if s is not None]

    return sum(present) / len(present) if present else None


def evaluation_period_grade_value(
    student_id: str,
    class_data: ClassData,
    period_id: str,
) -> float | None:
    """
    Computes the numeric period grade for one student.

    Args:
        student_id (str): The student to grade.
        class_data (ClassData): The class snapshot.
        period_id (str): The evaluation period.

    Returns:
        The weighted mean of the normal category averages, or None when no category
        produced an average or every contributing category has weight 0.
    """
    recovery_scores = assignment_recovery_scores(student_id, class_data, period_id)
    pairs: list[tuple[float, float]] = []

    for category in class_data.categories_in_period(period_id):
        if category.is_recovery:
            continue

        average = category_average(student_id, class_data, category, recovery_scores)

        if average is not None:
            pairs.append((average, category.weight))

    grade = _weighted_mean(pairs)

    if grade is None and pairs:
        logger.debug(
            "Period %s: categories with grades for %s all have weight 0.",
            period_id,
            student_id,
        )

    return grade


def evaluation_period_grade(
    student_id: str,
    class_data: ClassData,
    period_id: str,
    grade_scale: Iterable[GradeScaleRule] | None = None,
) -> GradeResult:
    grade = evaluation_period_grade_value(student_id, class_data, period_id)
    return GradeResult(grade, color_class(grade, grade_scale))


def overall_final_grade(
    student_id: str,
    class_data: ClassData,
    academic_configuration: AcademicConfiguration,
) -> GradeResult:
    """
    Combines a student's period grades into the overall course grade.

    Args:
        student_id (str): The student to grade.
        class_data (ClassData): The class snapshot.
        academic_configuration (AcademicConfiguration): Periods, period weights and grade scale.

    Returns:
        GradeResult: `grade` is the weighted mean formatted to two decimals, or "N/A" when
        no weighted period has a grade.

    Notes:
        - Periods without a configured weight, or with weight 0, contribute nothing.
    """
    pairs: list[tuple[float, float]] = []

    for period in academic_configuration.evaluation_periods:
        weight = academic_configuration.period_weight(period.id)
        if not weight:
            continue

        grade = evaluation_period_grade_value(student_id, class_data, period.id)
        if grade is not None:
            pairs.append((grade, weight))

    final = _weighted_mean(pairs)

    if final is None:
        return GradeResult(NO_FINAL_GRADE, NO_DATA_STYLE)

    # exact binary value, ties rounded up
    rounded = Decimal(final).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)

    return GradeResult(
        str(rounded), color_class(final, academic_configuration.grade_scale)
    )
