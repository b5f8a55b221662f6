# core/criterion_grades.py

"""
Per-criterion grades for one student, the base of the competency hierarchy.

Phase 1 averages every recorded score of each criterion over the normal (non-recovery)
assignments of the requested period. Phase 2 lets recovery tasks raise, never lower, the
criteria of the assignments they recover (see `core.recovery`).
"""

from __future__ import annotations

from collections.abc import Iterable

from core.recovery import apply_best_of, criterion_recovery_scores
from models.class_data import ClassData
from models.criterion import Criterion


def base_criterion_grades(
    student_id: str,
    class_data: ClassData,
    criteria: Iterable[Criterion],
    period_id: str | None = None,
) -> dict[str, float | None]:
    """Unweighted mean of each criterion's non-null scores over normal assignments."""
    grades = class_data.grades_for_student(student_id)
    normal_grades = [
        grades[assignment.id]
        for assignment in class_data.assignments_in_period(period_id)
        if not class_data.is_recovery_assignment(assignment)
        and assignment.id in grades
    ]

    result: dict[str, float | None] = {}

    for criterion in criteria:
        scores = [grade.score_for(criterion.id) for grade in normal_grades]
        scores = [s for s in scores if s is not None]
        result[criterion.id] = sum(scores) / len(scores) if scores else None

    return result


def student_criterion_grades(
    student_id: str,
    class_data: ClassData,
    criteria: Iterable[Criterion],
    period_id: str | None = None,
) -> dict[str, float | None]:
    """
    Computes the post-recovery grade of each criterion for one student.

    Args:
        student_id (str): The student to grade.
        class_data (ClassData): The class snapshot.
        criteria (Iterable[Criterion]): The criteria to report on.
        period_id (str | None): Restrict to one evaluation period, or the whole course if None.

    Returns:
        dict[str, float | None]: Criterion id to grade on the 0-10 scale, None when the
        criterion has no data. Keys are exactly the ids of `criteria`.

    Notes:
        - Recovery tasks are filtered by `period_id` like every other assignment; the
          assignments they recover are resolved across the whole snapshot.
        - Recovery reaching a criterion outside `criteria` is ignored.
    """
    criteria = list(criteria)
    result = base_criterion_grades(student_id, class_data, criteria, period_id)
    recovery_scores = criterion_recovery_scores(student_id, class_data, period_id)

    for criterion_id in result:
        result[criterion_id] = apply_best_of(
            result[criterion_id], recovery_scores.get(criterion_id)
        )

    return result
