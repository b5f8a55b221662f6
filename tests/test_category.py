# tests/test_category.py

import pytest

from models.category import Category, CategoryType


def test_category_to_dict(exams_category):
    assert exams_category.to_dict() == {
        "id": "cat-exams",
        "name": "Exams",
        "weight": 100.0,
        "evaluationPeriodId": "ep-1",
        "type": "normal",
    }


def test_category_from_dict_defaults_to_normal():
    category = Category.from_dict(
        {
            "id": "cat1",
            "name": "Projects",
            "weight": 50,
            "evaluationPeriodId": "ep-1",
        }
    )

    assert category.id == "cat1"
    assert category.weight == 50.0
    assert category.type is CategoryType.NORMAL
    assert not category.is_recovery


def test_recovery_category(retake_category):
    assert retake_category.is_recovery
    assert retake_category.status == "'RECOVERY'"
    assert retake_category.to_dict()["type"] == "recovery"


def test_category_to_str(exams_category):
    assert (
        exams_category.__str__()
        == "CATEGORY: name: Exams, weight: 100.0, id: cat-exams"
    )


@pytest.mark.parametrize("weight", [-1, 100.5, float("inf")])
def test_category_rejects_out_of_range_weight(weight):
    with pytest.raises(ValueError):
        Category("cat1", "Projects", weight, "ep-1")


def test_category_rejects_non_numeric_weight():
    with pytest.raises(TypeError):
        Category("cat1", "Projects", "heavy", "ep-1")


def test_category_rejects_unknown_type():
    with pytest.raises(ValueError):
        Category("cat1", "Projects", 10, "ep-1", "bonus")
