# tests/conftest.py

import json

import pytest

from models.academic_configuration import AcademicConfiguration, GradeScaleRule
from models.assignment import Assignment, LinkedCriterion
from models.category import Category
from models.class_data import ClassData
from models.competence import Descriptor, KeyCompetence, SpecificCompetence
from models.criterion import Criterion
from models.evaluation_period import EvaluationPeriod
from models.evaluation_tool import (
    Checklist,
    EvaluationItem,
    EvaluationLevel,
    RatingScale,
    Rubric,
    RubricItem,
)
from models.grade import Grade
from models.student import Student

PERIOD_1 = "ep-1"
PERIOD_2 = "ep-2"


@pytest.fixture
def sample_students():
    return [
        Student("s1", "Elena García"),
        Student("s2", "Marcos Rodríguez", ["re"]),
    ]


@pytest.fixture
def sample_criteria():
    return [
        Criterion("C1", "1.1", "Analyze a process", "SC1", "course-1"),
        Criterion("C2", "1.2", "Describe a model", "SC1", "course-1"),
        Criterion("C3", "2.1", "Design an experiment", "SC2", "course-1"),
    ]


@pytest.fixture
def sample_competences():
    return [
        SpecificCompetence("SC1", "CE1", "Scientific reasoning", ["D1"], "course-1"),
        SpecificCompetence("SC2", "CE2", "Inquiry", ["D2", "D3"], "course-1"),
        SpecificCompetence("SC3", "CE3", "Unlinked", ["D9"], "course-1"),
    ]


@pytest.fixture
def sample_key_competences():
    return [
        KeyCompetence(
            "KC1",
            "STEM",
            "Mathematical and science competence",
            [Descriptor("D1", "STEM1", ""), Descriptor("D2", "STEM2", "")],
        ),
        KeyCompetence("KC2", "CD", "Digital competence", [Descriptor("D3", "CD1", "")]),
        KeyCompetence("KC3", "CPSAA", "Personal competence", [Descriptor("D7", "CP1", "")]),
    ]


@pytest.fixture
def exams_category():
    return Category("cat-exams", "Exams", 100.0, PERIOD_1)


@pytest.fixture
def retake_category():
    return Category("cat-retake", "Retake", 0.0, PERIOD_1, "recovery")


@pytest.fixture
def sample_assignment():
    return Assignment(
        id="A1",
        name="Unit 1 exam",
        category_id="cat-exams",
        evaluation_period_id=PERIOD_1,
        linked_criteria=[LinkedCriterion("C1", 1.0)],
    )


@pytest.fixture
def sample_recovery_assignment():
    return Assignment(
        id="R1",
        name="Unit 1 retake",
        category_id="cat-retake",
        evaluation_period_id=PERIOD_1,
        recovers_assignment_ids=["A1"],
    )


@pytest.fixture
def sample_checklist():
    return Checklist(
        "tool-check",
        "Lab checklist",
        items=[
            EvaluationItem("i1", "Safety", 1.0, ["C1"]),
            EvaluationItem("i2", "Report", 1.0, ["C1", "C2"]),
        ],
    )


@pytest.fixture
def sample_rating_scale():
    return RatingScale(
        "tool-scale",
        "Oral presentation",
        items=[
            EvaluationItem("i1", "Clarity", 1.0, ["C1"]),
            EvaluationItem("i2", "Rigor", 3.0, ["C2"]),
        ],
        levels=[
            EvaluationLevel("l1", "Started", 1),
            EvaluationLevel("l2", "In progress", 2),
            EvaluationLevel("l3", "Achieved", 4),
        ],
    )


@pytest.fixture
def sample_rubric():
    return Rubric(
        "tool-rubric",
        "Project rubric",
        items=[
            RubricItem("i1", "Research", 2.0, ["C3"], {"l1": "Little", "l2": "Thorough"}),
        ],
        levels=[EvaluationLevel("l1", "Low", 0), EvaluationLevel("l2", "High", 5)],
    )


@pytest.fixture
def sample_periods():
    return [
        EvaluationPeriod.from_dict(
            {"id": PERIOD_1, "name": "1st Term", "startDate": "2024-09-09", "endDate": "2024-12-20"}
        ),
        EvaluationPeriod.from_dict(
            {"id": PERIOD_2, "name": "2nd Term", "startDate": "2025-01-08", "endDate": "2025-03-28"}
        ),
    ]


@pytest.fixture
def sample_configuration(sample_periods):
    return AcademicConfiguration(
        evaluation_periods=sample_periods,
        evaluation_period_weights={PERIOD_1: 100},
    )


@pytest.fixture
def traffic_light_scale():
    return [
        GradeScaleRule(0, "red"),
        GradeScaleRule(5, "yellow"),
        GradeScaleRule(7, "green"),
    ]


@pytest.fixture
def make_class(sample_students):
    def _make_class(categories=(), assignments=(), grades=(), tools=()):
        return ClassData(
            id="class-1",
            name="Biology 3A",
            course_id="course-1",
            students=sample_students,
            categories=list(categories),
            assignments=list(assignments),
            grades=list(grades),
            evaluation_tools=list(tools),
        )

    return _make_class


@pytest.fixture
def scenario_class(
    make_class,
    exams_category,
    retake_category,
    sample_assignment,
    sample_recovery_assignment,
):
    """S1 scores 6 on A1; R1 recovers A1 with 9."""
    return make_class(
        categories=[exams_category, retake_category],
        assignments=[sample_assignment, sample_recovery_assignment],
        grades=[
            Grade("s1", "A1", {"C1": 6}),
            Grade("s1", "R1", {"recovery_grade": 9}),
        ],
    )


@pytest.fixture
def snapshot_data():
    return {
        "classData": {
            "id": "class-1",
            "name": "Biology 3A",
            "courseId": "course-1",
            "students": [
                {"id": "s1", "name": "Elena García"},
                {"id": "s2", "name": "Marcos Rodríguez", "acneae": ["RE"]},
            ],
            "categories": [
                {"id": "cat-exams", "name": "Exams", "weight": 100, "evaluationPeriodId": PERIOD_1},
                {
                    "id": "cat-retake",
                    "name": "Retake",
                    "weight": 0,
                    "evaluationPeriodId": PERIOD_1,
                    "type": "recovery",
                },
            ],
            "assignments": [
                {
                    "id": "A1",
                    "name": "Unit 1 exam",
                    "categoryId": "cat-exams",
                    "evaluationPeriodId": PERIOD_1,
                    "evaluationMethod": "direct_grade",
                    "linkedCriteria": [{"criterionId": "C1", "ratio": 1}],
                },
                {
                    "id": "R1",
                    "name": "Unit 1 retake",
                    "categoryId": "cat-retake",
                    "evaluationPeriodId": PERIOD_1,
                    "recoversAssignmentIds": ["A1"],
                },
            ],
            "grades": [
                {"studentId": "s1", "assignmentId": "A1", "criterionScores": {"C1": 6}},
                {
                    "studentId": "s1",
                    "assignmentId": "R1",
                    "criterionScores": {"recovery_grade": 9},
                },
                {"studentId": "s2", "assignmentId": "A1", "criterionScores": {"C1": 4.5}},
            ],
            "evaluationTools": [],
        },
        "academicConfiguration": {
            "evaluationPeriods": [
                {"id": PERIOD_1, "name": "1st Term", "startDate": "2024-09-09", "endDate": "2024-12-20"},
                {"id": PERIOD_2, "name": "2nd Term", "startDate": "2025-01-08", "endDate": "2025-03-28"},
            ],
            "evaluationPeriodWeights": {PERIOD_1: 100},
        },
        "criteria": [
            {"id": "C1", "code": "1.1", "description": "Analyze a process", "competenceId": "SC1"},
        ],
        "competences": [
            {"id": "SC1", "code": "CE1", "keyCompetenceDescriptorIds": ["D1"]},
        ],
        "keyCompetences": [
            {
                "id": "KC1",
                "code": "STEM",
                "descriptors": [{"id": "D1", "code": "STEM1"}],
            },
        ],
    }


@pytest.fixture
def snapshot_file(tmp_path, snapshot_data):
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(snapshot_data), encoding="utf-8")
    return path
