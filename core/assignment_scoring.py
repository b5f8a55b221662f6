# core/assignment_scoring.py

"""
Computes the single 0-10 score of one assignment for one student.

The scoring rule is chosen by `resolve_scoring_mode()`, in strict priority order:

1. RECOVERY_OVERRIDE: the grade carries a non-null recovery value.
2. GLOBAL_TOOL: tool-based assignment with a tool and linked criteria. Every linked
   criterion was stored with the same global tool score, so the first one is read.
3. INTERNAL_TOOL: any other tool-based assignment. Mean of the stored criterion scores.
4. DIRECT_GRADE: ratio-weighted mean of the linked criteria that have a score.

The order is load-bearing: a recovery value wins over everything else.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum

from models.assignment import Assignment
from models.grade import Grade

logger = logging.getLogger(__name__)


class ScoringMode(Enum):
    RECOVERY_OVERRIDE = "recovery_override"
    GLOBAL_TOOL = "global_tool"
    INTERNAL_TOOL = "internal_tool"
    DIRECT_GRADE = "direct_grade"


def resolve_scoring_mode(assignment: Assignment, grade: Grade) -> ScoringMode:
    if grade.recovery_grade is not None:
        return ScoringMode.RECOVERY_OVERRIDE

    if (
        not assignment.is_direct_grade
        and assignment.evaluation_tool_id
        and assignment.linked_criteria
    ):
        return ScoringMode.GLOBAL_TOOL

    if not assignment.is_direct_grade:
        return ScoringMode.INTERNAL_TOOL

    return ScoringMode.DIRECT_GRADE


def _mean(values: list[float]) -> float | None:
    return sum(values) / len(values) if values else None


def _direct_grade_score(assignment: Assignment, grade: Grade) -> float | None:
    weighted_sum = 0.0
    total_ratio = 0.0

    for linked in assignment.linked_criteria:
        score = grade.score_for(linked.criterion_id)

        if score is not None:
            weighted_sum += score * linked.ratio
            total_ratio += linked.ratio

    if total_ratio == 0:
        logger.debug(
            "Assignment %s has no scored criteria with a positive ratio.", assignment.id
        )
        return None

    return weighted_sum / total_ratio


def single_assignment_score(
    assignment: Assignment, grade: Grade | None
) -> float | None:
    """
    Computes one student's score for one assignment.

    Args:
        assignment (Assignment): The assignment definition.
        grade (Grade | None): The student's recorded grade, or None if ungraded.

    Returns:
        The score on the 0-10 scale, or None when there is no grade or no usable data.
    """
    if grade is None:
        return None

    match resolve_scoring_mode(assignment, grade):
        case ScoringMode.RECOVERY_OVERRIDE:
            return grade.recovery_grade

        case ScoringMode.GLOBAL_TOOL:
            return grade.score_for(assignment.linked_criteria[0].criterion_id)

        case ScoringMode.INTERNAL_TOOL:
            return _mean(grade.non_null_scores())

        case ScoringMode.DIRECT_GRADE:
            return _direct_grade_score(assignment, grade)


def assignment_scores_for_student(
    student_id: str,
    assignments: Iterable[Assignment],
    grades: Iterable[Grade],
) -> dict[str, float | None]:
    """
    Scores every given assignment for one student.

    Args:
        student_id (str): The student whose grades are used.
        assignments (Iterable[Assignment]): The assignments to score.
        grades (Iterable[Grade]): Any grades; only those of `student_id` are considered.

    Returns:
        dict[str, float | None]: Assignment id to score, with None for ungraded assignments.
    """
    grades_by_assignment = {
        grade.assignment_id: grade for grade in grades if grade.student_id == student_id
    }

    return {
        assignment.id: single_assignment_score(
            assignment, grades_by_assignment.get(assignment.id)
        )
        for assignment in assignments
    }
