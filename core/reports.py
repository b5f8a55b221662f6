# core/reports.py

"""
Read-only report builders on top of the aggregators.

Covers the class-level and drill-down views of a gradebook:
- class averages per criterion
- the assignments behind one student's criterion grade
- descriptor coverage (which key competence descriptors have been worked on)
- a per-category breakdown of one student's period

Every builder recomputes from the snapshot and returns plain dictionaries and lists.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from core.assignment_scoring import assignment_scores_for_student
from core.classification import color_class
from core.criterion_grades import student_criterion_grades
from core.period_grades import category_average, evaluation_period_grade
from core.recovery import assignment_recovery_scores
from models.academic_configuration import GradeScaleRule
from models.class_data import ClassData
from models.competence import KeyCompetence
from models.criterion import Criterion


def class_criterion_averages(
    class_data: ClassData,
    criteria: Iterable[Criterion],
    period_id: str | None = None,
) -> dict[str, float | None]:
    """
    Averages each criterion's post-recovery grade over the students that have one.

    Returns:
        dict[str, float | None]: Criterion id to class average, None when no student has a grade.
    """
    criteria = list(criteria)
    per_student = [
        student_criterion_grades(student.id, class_data, criteria, period_id)
        for student in class_data.students
    ]

    averages: dict[str, float | None] = {}

    for criterion in criteria:
        grades = [g[criterion.id] for g in per_student if g[criterion.id] is not None]
        averages[criterion.id] = sum(grades) / len(grades) if grades else None

    return averages


def criterion_drilldown(
    student_id: str,
    class_data: ClassData,
    criterion: Criterion,
    period_id: str | None = None,
) -> dict[str, Any]:
    """
    Lists the recorded scores behind one student's grade for one criterion.

    Returns:
        dict[str, Any]: Payload with the following keys:
            - "items" (list[dict]): One entry per assignment with a non-null score for the
              criterion: "assignment_id", "name", "grade" and "is_recovery".
            - "final_grade" (float | None): The post-recovery criterion grade.
    """
    items = []

    for assignment in class_data.assignments_in_period(period_id):
        grade = class_data.grade_for(student_id, assignment.id)
        score = grade.score_for(criterion.id) if grade else None

        if score is None:
            continue

        items.append(
            {
                "assignment_id": assignment.id,
                "name": assignment.name,
                "grade": score,
                "is_recovery": class_data.is_recovery_assignment(assignment),
            }
        )

    final_grade = student_criterion_grades(
        student_id, class_data, [criterion], period_id
    )[criterion.id]

    return {"items": items, "final_grade": final_grade}


def used_descriptor_ids(class_data: ClassData) -> set[str]:
    """Descriptor ids selected on any linked criterion of any assignment."""
    return {
        descriptor_id
        for assignment in class_data.assignments
        for linked in assignment.linked_criteria
        for descriptor_id in linked.selected_descriptor_ids
    }


def descriptor_coverage(
    class_data: ClassData,
    key_competences: Iterable[KeyCompetence],
) -> dict[str, dict[str, bool]]:
    """
    Marks, per key competence, which of its descriptors some assignment has worked on.

    Returns:
        dict[str, dict[str, bool]]: Key competence id to {descriptor id: used}.
    """
    used = used_descriptor_ids(class_data)

    return {
        key_competence.id: {d.id: d.id in used for d in key_competence.descriptors}
        for key_competence in key_competences
    }


def student_period_breakdown(
    student_id: str,
    class_data: ClassData,
    period_id: str,
    grade_scale: Iterable[GradeScaleRule] | None = None,
) -> dict[str, Any]:
    """
    Breaks one student's period grade down by category and assignment.

    Returns:
        dict[str, Any]: Payload with the following keys:
            - "grade" (GradeResult): The period grade.
            - "categories" (list[dict]): One entry per category of the period that has
              assignments, with "category", "average" (None for recovery categories) and
              "assignments", a list of {"assignment", "score", "style_classes"} using the
              assignment's own score before recovery.
    """
    grade_scale = list(grade_scale) if grade_scale is not None else None
    assignments = class_data.assignments_in_period(period_id)
    scores = assignment_scores_for_student(student_id, assignments, class_data.grades)
    recovery_scores = assignment_recovery_scores(student_id, class_data, period_id)

    categories = []

    for category in class_data.categories_in_period(period_id):
        in_category = [a for a in assignments if a.category_id == category.id]
        if not in_category:
            continue

        average = (
            None
            if category.is_recovery
            else category_average(student_id, class_data, category, recovery_scores)
        )

        categories.append(
            {
                "category": category,
                "average": average,
                "assignments": [
                    {
                        "assignment": assignment,
                        "score": scores[assignment.id],
                        "style_classes": color_class(scores[assignment.id], grade_scale),
                    }
                    for assignment in in_category
                ],
            }
        )

    return {
        "grade": evaluation_period_grade(student_id, class_data, period_id, grade_scale),
        "categories": categories,
    }
