# tests/test_class_data.py

from core.response import ErrorCode
from models.class_data import ClassData
from models.grade import Grade


def test_class_data_lookups(scenario_class):
    response = scenario_class.find_assignment_by_id("A1")

    assert response.success
    assert response.data["record"].name == "Unit 1 exam"
    assert scenario_class.find_student_by_id("s2").data["record"].name == "Marcos Rodríguez"
    assert scenario_class.find_category_by_id("cat-retake").data["record"].is_recovery


def test_missing_record(scenario_class):
    response = scenario_class.find_tool_by_id("tool-missing")

    assert not response.success
    assert response.error is ErrorCode.NOT_FOUND
    assert response.status_code == 404


def test_find_grade_by_assignment_and_student(scenario_class):
    found = scenario_class.find_grade_by_assignment_and_student("A1", "s1")
    missing = scenario_class.find_grade_by_assignment_and_student("A1", "s2")

    assert found.data["record"].score_for("C1") == 6.0
    assert missing.error is ErrorCode.NOT_FOUND


def test_engine_accessors(scenario_class, sample_recovery_assignment):
    assert scenario_class.is_recovery_assignment(sample_recovery_assignment)
    assert scenario_class.category_for(sample_recovery_assignment).id == "cat-retake"
    assert scenario_class.tool_for(sample_recovery_assignment) is None
    assert scenario_class.assignment("ghost") is None
    assert [a.id for a in scenario_class.assignments_in_category("cat-exams")] == ["A1"]
    assert [c.id for c in scenario_class.categories_in_period("ep-2")] == []
    assert scenario_class.grade_for("s2", "A1") is None
    assert set(scenario_class.grades_for_student("s1")) == {"A1", "R1"}


def test_assignment_without_category_is_not_recovery(make_class, sample_assignment):
    class_data = make_class(assignments=[sample_assignment])

    assert class_data.category_for(sample_assignment) is None
    assert not class_data.is_recovery_assignment(sample_assignment)


def test_later_duplicate_grade_replaces_earlier(make_class):
    class_data = make_class(
        grades=[Grade("s1", "A1", {"C1": 2}), Grade("s1", "A1", {"C1": 8})]
    )

    assert len(class_data.grades) == 1
    assert class_data.grade_for("s1", "A1").score_for("C1") == 8.0


def test_class_data_from_dict(snapshot_data):
    class_data = ClassData.from_dict(snapshot_data["classData"])

    assert class_data.course_id == "course-1"
    assert len(class_data.assignments_in_period("ep-1")) == 2
    assert class_data.to_dict()["evaluationTools"] == []
    assert class_data.__str__() == "CLASS: name: Biology 3A, id: class-1"
