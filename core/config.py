# core/config.py

"""
Program-wide defaults for the grade aggregation engine and logging setup.

Per-class configuration (evaluation periods, period weights, grade scale) travels with the
snapshot as an `AcademicConfiguration`; the values here only apply when a caller leaves
them out.
"""

from __future__ import annotations

import logging
import os

# all scores live on a closed 0-10 scale
SCORE_MIN = 0.0
SCORE_MAX = 10.0

# sentinel criterion key used by recovery tasks that carry a single override value
RECOVERY_GRADE_KEY = "recovery_grade"

# style token for a missing grade
NO_DATA_STYLE = "bg-transparent text-slate-500"

# displayed for a missing final course grade
NO_FINAL_GRADE = "N/A"

GRADE_SCALE_COLORS = (
    "red",
    "orange",
    "yellow",
    "lime",
    "green",
    "emerald",
    "teal",
    "blue",
    "indigo",
    "violet",
    "gray",
)

DEFAULT_GRADE_SCALE: list[dict] = [
    {"min": 0, "color": "red", "label": "Insufficient"},
    {"min": 5, "color": "yellow", "label": "Sufficient"},
    {"min": 6, "color": "lime", "label": "Good"},
    {"min": 7, "color": "green", "label": "Notable"},
    {"min": 9, "color": "emerald", "label": "Outstanding"},
]

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> int:
    """
    Configures root logging from an explicit level or the `LOG_LEVEL` environment variable.

    Args:
        level (str | None): A level name such as "DEBUG". Falls back to `LOG_LEVEL`, then "WARNING".

    Returns:
        The numeric logging level that was applied.

    Notes:
        - Unknown level names fall back to WARNING.
        - Only entry points call this; importing the engine never configures logging.
    """
    level_name = (level or os.environ.get("LOG_LEVEL", "WARNING")).upper()
    actual_level = logging.getLevelName(level_name)

    if not isinstance(actual_level, int):
        actual_level = logging.WARNING

    logging.basicConfig(level=actual_level, format=_LOG_FORMAT)

    return actual_level
