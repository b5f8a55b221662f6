# tests/test_evaluation_tool.py

import pytest

from models.evaluation_tool import (
    Checklist,
    EvaluationItem,
    EvaluationLevel,
    EvaluationTool,
    RatingScale,
    Rubric,
)


def test_tool_from_dict_dispatches_on_type():
    tool = EvaluationTool.from_dict(
        {
            "id": "tool-rubric",
            "type": "rubric",
            "name": "Project rubric",
            "items": [
                {
                    "id": "i1",
                    "description": "Research",
                    "weight": 2,
                    "linkedCriteriaIds": ["C3"],
                    "levelDescriptions": {"l1": "Little"},
                }
            ],
            "levels": [{"id": "l1", "name": "Low", "points": 0}],
        }
    )

    assert isinstance(tool, Rubric)
    assert tool.items[0].level_descriptions == {"l1": "Little"}
    assert tool.items[0].linked_criteria_ids == ("C3",)
    assert tool.find_level("l1").points == 0.0


def test_unknown_tool_type():
    with pytest.raises(ValueError):
        EvaluationTool.from_dict({"id": "t1", "type": "portfolio"})


def test_checklist_ignores_levels(sample_checklist):
    checklist = Checklist("t1", "Check", levels=[EvaluationLevel("l1", "Yes", 1)])

    assert checklist.levels == ()
    assert "levels" not in sample_checklist.to_dict()


def test_max_level_points(sample_rating_scale, sample_rubric):
    assert sample_rating_scale.max_level_points == 4.0
    assert sample_rubric.max_level_points == 5.0
    assert RatingScale("t1", "Empty").max_level_points == 0.0


def test_find_level_unknown_id(sample_rating_scale):
    assert sample_rating_scale.find_level("nope") is None
    assert sample_rating_scale.find_level(None) is None


def test_duplicate_level_points_rejected():
    with pytest.raises(ValueError):
        RatingScale(
            "t1",
            "Scale",
            levels=[EvaluationLevel("a", "A", 2), EvaluationLevel("b", "B", 2)],
        )


def test_negative_item_weight_rejected():
    with pytest.raises(ValueError):
        EvaluationItem("i1", "Item", -1)


def test_tool_to_str(sample_rating_scale):
    assert (
        sample_rating_scale.__str__()
        == "EVALUATION TOOL: type: rating_scale, name: Oral presentation, id: tool-scale"
    )
