# models/grade.py

"""
Represents the recorded result of one student on one assignment.

There is at most one `Grade` per (student, assignment) pair; a missing `Grade` means the
assignment is ungraded for that student.

`criterion_scores` is the canonical projection used by every aggregator, whatever the
assignment's evaluation method. Tool-based assignments store their derived per-criterion
scores here as well (see `core.grade_entry`). A pure recovery task with no criteria stores
its single value under the `RECOVERY_GRADE_KEY` sentinel.

Notes:
- A score of None and a missing key both mean "no data"; neither is ever treated as 0.
- `tool_results` maps item ids to a boolean (checklists) or a level id (scales, rubrics).
"""

from __future__ import annotations

import math
from typing import Any

from core.config import RECOVERY_GRADE_KEY, SCORE_MAX, SCORE_MIN


class Grade:

    def __init__(
        self,
        student_id: str,
        assignment_id: str,
        criterion_scores: dict[str, float | None] | None = None,
        tool_results: dict[str, bool | str] | None = None,
    ):
        self._student_id = student_id
        self._assignment_id = assignment_id
        self._criterion_scores = {
            key: Grade.validate_score_input(value)
            for key, value in (criterion_scores or {}).items()
        }
        self._tool_results = dict(tool_results) if tool_results is not None else None

    # === properties ===

    @property
    def student_id(self) -> str:
        return self._student_id

    @property
    def assignment_id(self) -> str:
        return self._assignment_id

    @property
    def criterion_scores(self) -> dict[str, float | None]:
        return dict(self._criterion_scores)

    @property
    def tool_results(self) -> dict[str, bool | str] | None:
        return dict(self._tool_results) if self._tool_results is not None else None

    @property
    def recovery_grade(self) -> float | None:
        return self._criterion_scores.get(RECOVERY_GRADE_KEY)

    def score_for(self, criterion_id: str) -> float | None:
        return self._criterion_scores.get(criterion_id)

    def scored_criterion_ids(self) -> list[str]:
        """Criterion keys present in `criterion_scores`, excluding the recovery sentinel."""
        return [key for key in self._criterion_scores if key != RECOVERY_GRADE_KEY]

    def non_null_scores(self) -> list[float]:
        return [s for s in self._criterion_scores.values() if s is not None]

    # === persistence and import ===

    def to_dict(self) -> dict:
        data: dict[str, Any] = {
            "studentId": self._student_id,
            "assignmentId": self._assignment_id,
            "criterionScores": dict(self._criterion_scores),
        }

        if self._tool_results is not None:
            data["toolResults"] = dict(self._tool_results)

        return data

    @classmethod
    def from_dict(cls, data: dict) -> Grade:
        return cls(
            student_id=data["studentId"],
            assignment_id=data["assignmentId"],
            criterion_scores=data.get("criterionScores") or {},
            tool_results=data.get("toolResults"),
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Grade({self._student_id}, {self._assignment_id}, {self._criterion_scores})"

    def __str__(self) -> str:
        return f"GRADE: student id: {self._student_id}, assignment id: {self._assignment_id}"

    # === data validators ===

    @staticmethod
    def validate_score_input(score: Any) -> float | None:
        """
        Validates and normalizes a single criterion score.

        Accepts None as a valid input, otherwise:
            - Casts to float.
            - Ensures the number is finite.
            - Ensures it lies on the closed 0-10 scale.

        Args:
            score (Any): The input value to validate.

        Returns:
            The normalized score (float or None).

        Raises:
            TypeError: If the input is not None and cannot be cast to float.
            ValueError: If the input is non-finite or outside 0-10.
        """
        if score is None:
            return None

        if isinstance(score, bool):
            raise TypeError("Invalid input. Score must be a number or None.")

        try:
            score = float(score)

        except (TypeError, ValueError):
            raise TypeError("Invalid input. Score must be a number or None.") from None

        if not math.isfinite(score):
            raise ValueError("Invalid input. Score must be a finite number.")

        if score < SCORE_MIN or score > SCORE_MAX:
            raise ValueError(
                f"Invalid input. Score must be between {SCORE_MIN:g} and {SCORE_MAX:g}."
            )

        return score
