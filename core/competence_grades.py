# core/competence_grades.py

"""
Specific-competence and key-competence grades for one student.

Both layers are unweighted means over whatever non-null children exist; missing children
are excluded, never counted as 0.

The specific competence / key competence relation is derived on every call from the
intersection of descriptor ids (`linked_specific_competences()`); it is never stored.
"""

from __future__ import annotations

from collections.abc import Iterable

from core.criterion_grades import student_criterion_grades
from models.class_data import ClassData
from models.competence import KeyCompetence, SpecificCompetence
from models.criterion import Criterion


def _mean_of_present(values: Iterable[float | None]) -> float | None:
    present = [v for v in values if v is not None]
    return sum(present) / len(present) if present else None


def linked_specific_competences(
    key_competence: KeyCompetence,
    competences: Iterable[SpecificCompetence],
) -> list[SpecificCompetence]:
    """Specific competences sharing at least one descriptor id with `key_competence`."""
    descriptor_ids = key_competence.descriptor_ids

    return [
        competence
        for competence in competences
        if any(d in descriptor_ids for d in competence.descriptor_ids)
    ]


def key_competence_links(
    key_competences: Iterable[KeyCompetence],
    competences: Iterable[SpecificCompetence],
) -> dict[str, list[str]]:
    """Groups specific competence ids under every key competence they are linked to."""
    competences = list(competences)

    return {
        key_competence.id: [
            c.id for c in linked_specific_competences(key_competence, competences)
        ]
        for key_competence in key_competences
    }


def student_competence_grades(
    student_id: str,
    class_data: ClassData,
    criteria: Iterable[Criterion],
    competences: Iterable[SpecificCompetence],
    period_id: str | None = None,
) -> dict[str, float | None]:
    """
    Averages each specific competence's criterion grades for one student.

    Args:
        student_id (str): The student to grade.
        class_data (ClassData): The class snapshot.
        criteria (Iterable[Criterion]): Every criterion that may belong to `competences`.
        competences (Iterable[SpecificCompetence]): The competences to report on.
        period_id (str | None): Restrict to one evaluation period, or the whole course if None.

    Returns:
        dict[str, float | None]: Competence id to grade, None for competences with no
        criteria or no graded criteria.
    """
    criteria = list(criteria)
    criterion_grades = student_criterion_grades(
        student_id, class_data, criteria, period_id
    )

    return {
        competence.id: _mean_of_present(
            criterion_grades.get(c.id) for c in criteria if c.competence_id == competence.id
        )
        for competence in competences
    }


def student_key_competence_grades(
    student_id: str,
    class_data: ClassData,
    criteria: Iterable[Criterion],
    competences: Iterable[SpecificCompetence],
    key_competences: Iterable[KeyCompetence],
    period_id: str | None = None,
) -> dict[str, float | None]:
    """
    Averages the grades of the specific competences linked to each key competence.

    Returns:
        dict[str, float | None]: Key competence id to grade, None when no linked specific
        competence has a grade.
    """
    competences = list(competences)
    competence_grades = student_competence_grades(
        student_id, class_data, criteria, competences, period_id
    )
    links = key_competence_links(key_competences, competences)

    return {
        key_id: _mean_of_present(competence_grades.get(cid) for cid in competence_ids)
        for key_id, competence_ids in links.items()
    }
