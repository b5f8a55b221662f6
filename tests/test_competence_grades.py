# tests/test_competence_grades.py

import pytest

from core.competence_grades import (
    key_competence_links,
    linked_specific_competences,
    student_competence_grades,
    student_key_competence_grades,
)
from models.assignment import Assignment, LinkedCriterion
from models.competence import Descriptor, KeyCompetence
from models.grade import Grade


@pytest.fixture
def graded_class(make_class, exams_category):
    assignment = Assignment(
        "A1",
        "Term project",
        "cat-exams",
        "ep-1",
        linked_criteria=[LinkedCriterion("C1"), LinkedCriterion("C2"), LinkedCriterion("C3")],
    )
    return make_class(
        categories=[exams_category],
        assignments=[assignment],
        grades=[
            Grade("s1", "A1", {"C1": 6, "C2": 8, "C3": 5}),
            Grade("s2", "A1", {"C1": 6}),
        ],
    )


def test_competence_grade_is_mean_of_criterion_grades(
    graded_class, sample_criteria, sample_competences
):
    grades = student_competence_grades(
        "s1", graded_class, sample_criteria, sample_competences
    )

    assert grades == {
        "SC1": pytest.approx(7.0),
        "SC2": pytest.approx(5.0),
        "SC3": None,
    }


def test_missing_criterion_grades_are_excluded(
    graded_class, sample_criteria, sample_competences
):
    grades = student_competence_grades(
        "s2", graded_class, sample_criteria, sample_competences
    )

    assert grades["SC1"] == pytest.approx(6.0)
    assert grades["SC2"] is None


def test_linked_specific_competences(sample_key_competences, sample_competences):
    stem = sample_key_competences[0]

    linked = linked_specific_competences(stem, sample_competences)

    assert [c.id for c in linked] == ["SC1", "SC2"]


def test_key_competence_links(sample_key_competences, sample_competences):
    assert key_competence_links(sample_key_competences, sample_competences) == {
        "KC1": ["SC1", "SC2"],
        "KC2": ["SC2"],
        "KC3": [],
    }


def test_key_competence_grades(
    graded_class, sample_criteria, sample_competences, sample_key_competences
):
    grades = student_key_competence_grades(
        "s1",
        graded_class,
        sample_criteria,
        sample_competences,
        sample_key_competences,
    )

    assert grades == {
        "KC1": pytest.approx(6.0),
        "KC2": pytest.approx(5.0),
        "KC3": None,
    }


def test_key_competence_grades_follow_recovery(
    scenario_class, sample_criteria, sample_competences, sample_key_competences
):
    grades = student_key_competence_grades(
        "s1",
        scenario_class,
        sample_criteria,
        sample_competences,
        sample_key_competences,
    )

    # C1 is recovered to 9; SC2 has no grades so KC1 only sees SC1
    assert grades["KC1"] == pytest.approx(9.0)
    assert grades["KC2"] is None


def test_competence_sharing_several_descriptors_is_linked_once(sample_competences):
    inquiry = KeyCompetence(
        "KC4",
        "INQ",
        "Inquiry",
        [Descriptor("D2", "INQ1", ""), Descriptor("D3", "INQ2", "")],
    )

    assert key_competence_links([inquiry], sample_competences) == {"KC4": ["SC2"]}
    assert [c.id for c in linked_specific_competences(inquiry, sample_competences)] == [
        "SC2"
    ]
