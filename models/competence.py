# models/competence.py

"""
Curriculum competences above the criterion level.

- `SpecificCompetence` groups criteria (each `Criterion.competence_id` points at one) and
  lists the descriptor ids it contributes to.
- `KeyCompetence` is a cross-curricular competence made of `Descriptor` records.

A specific competence is linked to a key competence when their descriptor id sets
intersect. The link is never stored; see `core.competence_grades.linked_specific_competences()`.
"""

from __future__ import annotations


class Descriptor:

    def __init__(self, id: str, code: str, description: str):
        self._id = id
        self._code = code
        self._description = description

    @property
    def id(self) -> str:
        return self._id

    @property
    def code(self) -> str:
        return self._code

    @property
    def description(self) -> str:
        return self._description

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "code": self._code,
            "description": self._description,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Descriptor:
        return cls(
            id=data["id"],
            code=data.get("code", ""),
            description=data.get("description", ""),
        )

    def __repr__(self) -> str:
        return f"Descriptor({self._id}, {self._code})"


class SpecificCompetence:

    def __init__(
        self,
        id: str,
        code: str,
        description: str,
        descriptor_ids: list[str] | None = None,
        course_id: str = "",
    ):
        self._id = id
        self._code = code
        self._description = description
        self._descriptor_ids = tuple(descriptor_ids or ())
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
    def descriptor_ids(self) -> tuple[str, ...]:
        return self._descriptor_ids

    @property
    def course_id(self) -> str:
        return self._course_id

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "code": self._code,
            "description": self._description,
            "keyCompetenceDescriptorIds": list(self._descriptor_ids),
            "courseId": self._course_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> SpecificCompetence:
        # older snapshots used "descriptorIds"
        descriptor_ids = data.get("keyCompetenceDescriptorIds")
        if descriptor_ids is None:
            descriptor_ids = data.get("descriptorIds", [])

        return cls(
            id=data["id"],
            code=data.get("code", ""),
            description=data.get("description", ""),
            descriptor_ids=descriptor_ids,
            course_id=data.get("courseId", ""),
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"SpecificCompetence({self._id}, {self._code}, {list(self._descriptor_ids)})"

    def __str__(self) -> str:
        return f"SPECIFIC COMPETENCE: code: {self._code}, id: {self._id}"


class KeyCompetence:

    def __init__(
        self,
        id: str,
        code: str,
        description: str,
        descriptors: list[Descriptor] | None = None,
    ):
        self._id = id
        self._code = code
        self._description = description
        self._descriptors = tuple(descriptors or ())

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
    def descriptors(self) -> tuple[Descriptor, ...]:
        return self._descriptors

    @property
    def descriptor_ids(self) -> set[str]:
        return {descriptor.id for descriptor in self._descriptors}

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "code": self._code,
            "description": self._description,
            "descriptors": [d.to_dict() for d in self._descriptors],
        }

    @classmethod
    def from_dict(cls, data: dict) -> KeyCompetence:
        return cls(
            id=data["id"],
            code=data.get("code", ""),
            description=data.get("description", ""),
            descriptors=[Descriptor.from_dict(d) for d in data.get("descriptors") or []],
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"KeyCompetence({self._id}, {self._code}, {len(self._descriptors)} descriptors)"

    def __str__(self) -> str:
        return f"KEY COMPETENCE: code: {self._code}, id: {self._id}"
