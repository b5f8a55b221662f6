# models/criterion.py

"""
Represents an evaluation criterion, the leaf unit of competency measurement.

Each `Criterion` belongs to exactly one `SpecificCompetence` (via `competence_id`)
and is scoped to a single course. Criterion grades are never stored on the record;
they are computed by `core.criterion_grades` from the recorded `Grade` snapshots.
"""

from __future__ import annotations


class Criterion:

    def __init__(
        self,
        id: str,
        code: str,
        description: str,
        competence_id: str,
        course_id: str,
    ):
        self._id = id
        self._code = code
        self._description = description
        self._competence_id = competence_id
        self._course_id = course_id

    # === properties ===

    @property
    def id(self) -> str:
        return self._id

    @property
    def code(self) -> str:
        return self._code

    @property
    def description(self) -> str:
        return self._description

    @property
    def competence_id(self) -> str:
        return self._competence_id

    @property
    def course_id(self) -> str:
        return self._course_id

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "code": self._code,
            "description": self._description,
            "competenceId": self._competence_id,
            "courseId": self._course_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Criterion:
        return cls(
            id=data["id"],
            code=data.get("code", ""),
            description=data.get("description", ""),
            competence_id=data["competenceId"],
            course_id=data.get("courseId", ""),
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Criterion({self._id}, {self._code}, {self._competence_id})"

    def __str__(self) -> str:
        return f"CRITERION: code: {self._code}, id: {self._id}"
