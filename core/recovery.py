# core/recovery.py

"""
Recovery semantics shared by the criterion and period aggregators.

A recovery task is an assignment in a recovery-type category. When a student has a usable
score on it, that score may replace earlier results of the assignments it names in
`recovers_assignment_ids`:

- `criterion_recovery_scores()` keys the override by criterion, for the criterion aggregator.
- `assignment_recovery_scores()` keys it by recovered assignment, for the period aggregator.

Recovery never lowers a result. When several recovery tasks reach the same key, the highest
score is kept, so the outcome does not depend on iteration order.
"""

from __future__ import annotations

import logging

from core.assignment_scoring import single_assignment_score
from models.assignment import Assignment
from models.class_data import ClassData
from models.grade import Grade

logger = logging.getLogger(__name__)


def recovery_results(
    student_id: str,
    class_data: ClassData,
    period_id: str | None = None,
) -> list[tuple[Assignment, float]]:
    """
    Lists the recovery tasks a student has a usable score on, with that score.

    Args:
        student_id (str): The student whose grades are read.
        class_data (ClassData): The class snapshot.
        period_id (str | None): Restrict to recovery tasks of one period, or all periods if None.

    Returns:
        list[tuple[Assignment, float]]: (recovery assignment, recovery score) pairs in snapshot order.
    """
    results: list[tuple[Assignment, float]] = []

    for assignment in class_data.assignments_in_period(period_id):
        if not class_data.is_recovery_assignment(assignment):
            continue

        score = single_assignment_score(
            assignment, class_data.grade_for(student_id, assignment.id)
        )

        if score is not None:
            results.append((assignment, score))

    return results


def recovered_assignments(
    recovery_assignment: Assignment, class_data: ClassData
) -> list[Assignment]:
    """Resolves `recovers_assignment_ids` against the whole snapshot, skipping dangling ids."""
    resolved = []

    for assignment_id in recovery_assignment.recovers_assignment_ids:
        assignment = class_data.assignment(assignment_id)
        if assignment is not None:
            resolved.append(assignment)

    return resolved


def criteria_touched(assignment: Assignment, grade: Grade | None) -> set[str]:
    """
    Collects the criteria a recovered assignment covers.

    Union of the criterion keys stored on the student's grade (minus the recovery sentinel)
    and the assignment's own linked criteria. A never-graded tool assignment without linked
    criteria therefore touches nothing.
    """
    criterion_ids = set(assignment.linked_criterion_ids)

    if grade is not None:
        criterion_ids.update(grade.scored_criterion_ids())

    return criterion_ids


def _keep_best(best: dict[str, float], key: str, score: float) -> None:
    if key not in best or score > best[key]:
        best[key] = score


def criterion_recovery_scores(
    student_id: str,
    class_data: ClassData,
    period_id: str | None = None,
) -> dict[str, float]:
    """
    Maps each recovered criterion to the best recovery score reaching it.

    Returns:
        dict[str, float]: Criterion id to recovery score. Criteria no recovery task reaches are absent.
    """
    best: dict[str, float] = {}

    for recovery_assignment, score in recovery_results(student_id, class_data, period_id):
        for recovered in recovered_assignments(recovery_assignment, class_data):
            grade = class_data.grade_for(student_id, recovered.id)

            for criterion_id in criteria_touched(recovered, grade):
                _keep_best(best, criterion_id, score)

    return best


def assignment_recovery_scores(
    student_id: str,
    class_data: ClassData,
    period_id: str | None = None,
) -> dict[str, float]:
    """
    Maps each recovered assignment to the best recovery score naming it.

    Returns:
        dict[str, float]: Recovered assignment id to recovery score.
    """
    best: dict[str, float] = {}

    for recovery_assignment, score in recovery_results(student_id, class_data, period_id):
        for recovered in recovered_assignments(recovery_assignment, class_data):
            _keep_best(best, recovered.id, score)

    return best


def apply_best_of(current: float | None, recovery: float | None) -> float | None:
    """Returns the recovery score when it fills a gap or beats `current`, else `current`."""
    if recovery is None:
        return current

    if current is None or recovery > current:
        logger.debug("Recovery score %s replaces %s.", recovery, current)
        return recovery

    return current
