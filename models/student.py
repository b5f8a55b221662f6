# models/student.py

"""
Represents a student enrolled in a class.

Stores the identifying information the aggregators and reports need: a unique ID, a
display name, and optional educational-needs tags (e.g. "RE", "ACS").

Includes functionality for:
- Validating and normalizing the name and tags
- Serializing to and from JSON-compatible dictionaries

Notes:
- Students carry no grade data. Grades reference students by id.
- Tags are normalized to stripped, upper-case strings with duplicates removed, preserving order.
"""

from __future__ import annotations

from typing import Any


class Student:

    def __init__(
        self,
        id: str,
        name: str,
        needs_tags: list[str] | None = None,
    ):
        self._id: str = id
        self._name: str = Student.validate_name_input(name)
        self._needs_tags: tuple[str, ...] = Student.validate_tags_input(needs_tags)

    # === properties ===

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def needs_tags(self) -> tuple[str, ...]:
        return self._needs_tags

    @property
    def has_needs_tags(self) -> bool:
        return len(self._needs_tags) > 0

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "name": self._name,
            "acneae": list(self._needs_tags),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Student:
        return cls(
            id=data["id"],
            name=data["name"],
            needs_tags=data.get("acneae") or [],
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Student({self._id}, {self._name}, {list(self._needs_tags)})"

    def __str__(self) -> str:
        return f"STUDENT: name: {self._name}, id: {self._id}"

    # === data validators ===

    @staticmethod
    def validate_name_input(name: Any) -> str:
        """
        Validates and normalizes a Student name.

        Raises:
            TypeError: If the name is not a string.
            ValueError: If the name is empty after stripping whitespace.
        """
        if not isinstance(name, str):
            raise TypeError("Invalid input. Student name must be a string.")

        name = name.strip()
        if not name:
            raise ValueError("Invalid input. Student name cannot be empty.")

        return name

    @staticmethod
    def validate_tags_input(tags: list[str] | None) -> tuple[str, ...]:
        normalized: list[str] = []

        for tag in tags or []:
            tag = str(tag).strip().upper()
            if tag and tag not in normalized:
                normalized.append(tag)

        return tuple(normalized)
