# core/grade_entry.py

"""
Builds the canonical `criterion_scores` stored on a `Grade`, whatever the evaluation method.

The aggregators only read `criterion_scores`, so every way of entering a result must be
projected onto it first:

- recovery task graded directly: `{RECOVERY_GRADE_KEY: value}`
- direct grade: per linked criterion, or one single grade copied to every linked criterion
- tool with linked criteria: the tool's global score copied to every linked criterion
- tool without linked criteria: the tool's per-criterion projection

Entered values are clamped to the 0-10 scale; unparseable entries become None.
"""

from __future__ import annotations

import math
from typing import Any

from core.config import RECOVERY_GRADE_KEY, SCORE_MAX, SCORE_MIN
from core.tool_scoring import criterion_scores_from_tool, tool_global_score
from models.assignment import Assignment
from models.evaluation_tool import EvaluationTool
from models.grade import Grade


def clamp_score(value: Any) -> float | None:
    """
    Parses and clamps an entered score to the 0-10 scale.

    Accepts numbers and numeric strings, including a comma decimal separator ("7,5").
    Returns None for None, empty strings, booleans and anything that does not parse to a
    finite number.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, str):
        value = value.strip().replace(",", ".")
        if not value:
            return None

    try:
        score = float(value)

    except (TypeError, ValueError):
        return None

    if not math.isfinite(score):
        return None

    return max(SCORE_MIN, min(SCORE_MAX, score))


def derive_criterion_scores(
    assignment: Assignment,
    tool: EvaluationTool | None = None,
    tool_results: dict[str, Any] | None = None,
    scores: dict[str, Any] | None = None,
    single_grade: Any = None,
) -> dict[str, float | None]:
    """
    Projects an entered result onto criterion scores.

    Args:
        assignment (Assignment): The assignment being graded.
        tool (EvaluationTool | None): The assignment's tool, for tool-based assignments.
        tool_results (dict[str, Any] | None): Item id to boolean or level id.
        scores (dict[str, Any] | None): Per-criterion entries for direct grades.
        single_grade (Any): One grade for the whole assignment (recovery tasks, or a
            shortcut applied to every linked criterion of a direct grade).

    Returns:
        dict[str, float | None]: The criterion scores to store.

    Notes:
        - A tool-based assignment whose tool is missing yields an empty projection.
    """
    if assignment.is_direct_grade:
        if assignment.is_recovery_task:
            value = clamp_score(single_grade)
            return {RECOVERY_GRADE_KEY: value} if value is not None else {}

        single = clamp_score(single_grade)
        if single is not None:
            return {cid: single for cid in assignment.linked_criterion_ids}

        entered = scores or {}
        return {
            cid: clamp_score(entered.get(cid)) for cid in assignment.linked_criterion_ids
        }

    if tool is None:
        return {}

    if assignment.linked_criteria:
        global_score = tool_global_score(tool, tool_results)
        return {cid: global_score for cid in assignment.linked_criterion_ids}

    return dict(criterion_scores_from_tool(tool, tool_results))


def build_grade(
    student_id: str,
    assignment: Assignment,
    tool: EvaluationTool | None = None,
    tool_results: dict[str, Any] | None = None,
    scores: dict[str, Any] | None = None,
    single_grade: Any = None,
) -> Grade | None:
    """
    Builds the `Grade` record for an entered result.

    Returns:
        The new `Grade`, or None when there is nothing to store: no non-null criterion
        score and no tool results.
    """
    criterion_scores = derive_criterion_scores(
        assignment, tool, tool_results, scores, single_grade
    )

    has_scores = any(score is not None for score in criterion_scores.values())
    has_tool_results = bool(tool_results) and not assignment.is_direct_grade

    if not has_scores and not has_tool_results:
        return None

    return Grade(
        student_id=student_id,
        assignment_id=assignment.id,
        criterion_scores=criterion_scores,
        tool_results=tool_results if has_tool_results else None,
    )
