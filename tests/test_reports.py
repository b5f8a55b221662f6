# tests/test_reports.py

import pytest

from core.period_grades import GradeResult
from core.reports import (
    class_criterion_averages,
    criterion_drilldown,
    descriptor_coverage,
    student_period_breakdown,
    used_descriptor_ids,
)
from models.assignment import Assignment, LinkedCriterion
from models.grade import Grade


def test_class_criterion_averages(
    make_class,
    exams_category,
    retake_category,
    sample_assignment,
    sample_recovery_assignment,
    sample_criteria,
):
    class_data = make_class(
        categories=[exams_category, retake_category],
        assignments=[sample_assignment, sample_recovery_assignment],
        grades=[
            Grade("s1", "A1", {"C1": 6}),
            Grade("s1", "R1", {"recovery_grade": 9}),
            Grade("s2", "A1", {"C1": 4}),
        ],
    )

    averages = class_criterion_averages(class_data, sample_criteria)

    assert averages == {"C1": pytest.approx(6.5), "C2": None, "C3": None}


def test_criterion_drilldown(scenario_class, sample_criteria):
    drilldown = criterion_drilldown("s1", scenario_class, sample_criteria[0])

    assert drilldown["items"] == [
        {"assignment_id": "A1", "name": "Unit 1 exam", "grade": 6.0, "is_recovery": False}
    ]
    assert drilldown["final_grade"] == pytest.approx(9.0)


def test_criterion_drilldown_without_grades(scenario_class, sample_criteria):
    drilldown = criterion_drilldown("s2", scenario_class, sample_criteria[0])

    assert drilldown == {"items": [], "final_grade": None}


@pytest.fixture
def descriptor_class(make_class, exams_category):
    assignment = Assignment(
        "A1",
        "Field work",
        "cat-exams",
        "ep-1",
        linked_criteria=[LinkedCriterion("C1", 1, ["D1", "D3"])],
    )
    return make_class(categories=[exams_category], assignments=[assignment])


def test_used_descriptor_ids(descriptor_class):
    assert used_descriptor_ids(descriptor_class) == {"D1", "D3"}


def test_descriptor_coverage(descriptor_class, sample_key_competences):
    assert descriptor_coverage(descriptor_class, sample_key_competences) == {
        "KC1": {"D1": True, "D2": False},
        "KC2": {"D3": True},
        "KC3": {"D7": False},
    }


def test_student_period_breakdown(scenario_class):
    breakdown = student_period_breakdown("s1", scenario_class, "ep-1")

    assert breakdown["grade"] == GradeResult(9.0, "bg-emerald-200 text-emerald-900")

    exams, retake = breakdown["categories"]

    assert exams["category"].id == "cat-exams"
    assert exams["average"] == pytest.approx(9.0)
    assert exams["assignments"][0]["assignment"].id == "A1"
    # the assignment row shows the score before recovery
    assert exams["assignments"][0]["score"] == pytest.approx(6.0)
    assert exams["assignments"][0]["style_classes"] == "bg-lime-200 text-lime-900"

    assert retake["category"].id == "cat-retake"
    assert retake["average"] is None
    assert retake["assignments"][0]["score"] == pytest.approx(9.0)


def test_breakdown_skips_empty_categories(make_class, exams_category, retake_category, sample_assignment):
    class_data = make_class(
        categories=[exams_category, retake_category],
        assignments=[sample_assignment],
    )

    breakdown = student_period_breakdown("s1", class_data, "ep-1")

    assert [c["category"].id for c in breakdown["categories"]] == ["cat-exams"]
    assert breakdown["grade"].grade is None
