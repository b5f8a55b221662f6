# tests/test_student.py

import pytest

from models.student import Student


def test_student_to_dict(sample_students):
    assert sample_students[1].to_dict() == {
        "id": "s2",
        "name": "Marcos Rodríguez",
        "acneae": ["RE"],
    }


def test_student_from_dict():
    student = Student.from_dict(
        {"id": "s3", "name": "  Lucía Fernández ", "acneae": ["PAC", "re ec", "PAC"]}
    )

    assert student.id == "s3"
    assert student.name == "Lucía Fernández"
    assert student.needs_tags == ("PAC", "RE EC")
    assert student.has_needs_tags


def test_student_to_str(sample_students):
    assert sample_students[0].__str__() == "STUDENT: name: Elena García, id: s1"


def test_empty_name_rejected():
    with pytest.raises(ValueError):
        Student("s9", "   ")
