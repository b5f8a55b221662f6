# core/classification.py

"""
Maps a numeric grade to a display bucket of a configurable grade scale.

The scale is a list of `GradeScaleRule` (`min`, `color`, optional `label`). The matching
rule is the one with the highest `min` not above the grade, whatever order the rules are
given in. A missing grade, or one below every rule, maps to the no-data style.
"""

from __future__ import annotations

from collections.abc import Iterable

from core.config import NO_DATA_STYLE
from models.academic_configuration import GradeScaleRule, default_grade_scale


def style_for_color(color: str) -> str:
    return f"bg-{color}-200 text-{color}-900"


def matching_rule(
    grade: float | None,
    grade_scale: Iterable[GradeScaleRule] | None = None,
) -> GradeScaleRule | None:
    """
    Finds the rule with the highest `min` such that `grade >= min`.

    Args:
        grade (float | None): The grade to classify.
        grade_scale (Iterable[GradeScaleRule] | None): The scale; the default scale if None or empty.

    Returns:
        The matching `GradeScaleRule`, or None if the grade is None or below every rule.
    """
    if grade is None:
        return None

    rules = list(grade_scale or []) or default_grade_scale()
    best: GradeScaleRule | None = None

    for rule in rules:
        if grade >= rule.min and (best is None or rule.min > best.min):
            best = rule

    return best


def color_class(
    grade: float | None,
    grade_scale: Iterable[GradeScaleRule] | None = None,
) -> str:
    rule = matching_rule(grade, grade_scale)
    return style_for_color(rule.color) if rule else NO_DATA_STYLE


def grade_label(
    grade: float | None,
    grade_scale: Iterable[GradeScaleRule] | None = None,
) -> str | None:
    rule = matching_rule(grade, grade_scale)
    return rule.label if rule else None
