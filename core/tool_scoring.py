# core/tool_scoring.py

"""
Converts raw evaluation tool results into 0-10 scores.

Two independent projections of the same results:
- `tool_global_score()`: one normalized score for the whole instrument.
- `criterion_scores_from_tool()`: one score per criterion linked from the tool's items.

Results map item ids to a boolean (checklists) or a selected level id (rating scales and
rubrics). Missing results never raise; they simply add nothing to the earned points.
"""

from __future__ import annotations

import logging
from typing import Any

from core.config import SCORE_MAX
from models.evaluation_tool import Checklist, EvaluationLevel, EvaluationTool

logger = logging.getLogger(__name__)


def tool_global_score(tool: EvaluationTool, results: dict[str, Any] | None) -> float:
    """
    Computes the normalized global score of an instrument result.

    Checklist items contribute their weight to the maximum, and to the total when checked.
    Rating scale and rubric items contribute `max level points * weight` to the maximum,
    and `selected level points * weight` to the total when a known level is selected.

    Args:
        tool (EvaluationTool): The instrument definition.
        results (dict[str, Any] | None): Item id to a boolean or a level id.

    Returns:
        The score on the 0-10 scale, or 0.0 when the tool has no gradeable points.

    Notes:
        - Unlike the per-criterion projection this returns 0.0, not None, for a degenerate
          tool. The global score is display-only.
    """
    results = results or {}
    total_points = 0.0
    max_points = 0.0

    for item in tool.items:
        result = results.get(item.id)

        if isinstance(tool, Checklist):
            max_points += item.weight
            if result is True:
                total_points += item.weight

        else:
            max_points += tool.max_level_points * item.weight

            level = tool.find_level(result)
            if level is not None:
                total_points += level.points * item.weight

    if max_points == 0:
        logger.debug("Tool %s has no gradeable points; global score is 0.", tool.id)
        return 0.0

    return (total_points / max_points) * SCORE_MAX


def _item_score(tool: EvaluationTool, result: Any) -> float | None:
    if isinstance(tool, Checklist):
        return SCORE_MAX if result is True else 0.0

    level = tool.find_level(result)
    if level is None:
        # unanswered scale items do not address their criteria at all
        return None

    max_points = tool.max_level_points
    if max_points <= 0:
        return 0.0

    return (level.points / max_points) * SCORE_MAX


def criterion_scores_from_tool(
    tool: EvaluationTool, results: dict[str, Any] | None
) -> dict[str, float]:
    """
    Projects an instrument result onto the criteria linked from its items.

    Each item gets a 0-10 score (checked 10 / unchecked 0, or selected level points
    relative to the tool's highest level). The item score is then averaged into every
    criterion in `item.linked_criteria_ids`, weighted by `item.weight`.

    Args:
        tool (EvaluationTool): The instrument definition.
        results (dict[str, Any] | None): Item id to a boolean or a level id.

    Returns:
        dict[str, float]: Criterion id to score. Criteria the result did not address
        (no selected level, or zero accumulated weight) are absent, never None.
    """
    results = results or {}
    weighted_sums: dict[str, float] = {}
    total_weights: dict[str, float] = {}

    for item in tool.items:
        item_score = _item_score(tool, results.get(item.id))

        if item_score is None:
            continue

        for criterion_id in item.linked_criteria_ids:
            weighted_sums[criterion_id] = (
                weighted_sums.get(criterion_id, 0.0) + item_score * item.weight
            )
            total_weights[criterion_id] = (
                total_weights.get(criterion_id, 0.0) + item.weight
            )

    return {
        criterion_id: weighted_sums[criterion_id] / total_weight
        for criterion_id, total_weight in total_weights.items()
        if total_weight > 0
    }


def closest_level(tool: EvaluationTool, score: float) -> EvaluationLevel | None:
    """
    Finds the level whose points are nearest to a 0-10 score rescaled to the tool's levels.

    Returns:
        The nearest `EvaluationLevel` (the first one on ties), or None for checklists
        and tools without levels.
    """
    if isinstance(tool, Checklist) or not tool.levels:
        return None

    target_points = (score / SCORE_MAX) * tool.max_level_points
    best = tool.levels[0]

    for level in tool.levels[1:]:
        if abs(level.points - target_points) < abs(best.points - target_points):
            best = level

    return best


def tool_results_from_single_grade(
    tool: EvaluationTool, score: float
) -> dict[str, str]:
    """Selects the level closest to `score` for every item of a rating scale or rubric."""
    level = closest_level(tool, score)

    if level is None:
        return {}

    return {item.id: level.id for item in tool.items}
