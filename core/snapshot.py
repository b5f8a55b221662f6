# core/snapshot.py

"""
Reads a complete gradebook snapshot from a JSON document.

A snapshot bundles everything the aggregators consume:

    {
        "classData": {...},
        "academicConfiguration": {...},
        "criteria": [...],
        "competences": [...],
        "keyCompetences": [...]
    }

Only "classData" is required. The engine itself never reads files; this module is the
boundary used by the CLI and by any caller holding a serialized snapshot.
"""

from __future__ import annotations

import json
from typing import Any

from core.response import ErrorCode, Response
from models.academic_configuration import AcademicConfiguration
from models.class_data import ClassData
from models.competence import KeyCompetence, SpecificCompetence
from models.criterion import Criterion


class Snapshot:

    def __init__(
        self,
        class_data: ClassData,
        academic_configuration: AcademicConfiguration | None = None,
        criteria: list[Criterion] | None = None,
        competences: list[SpecificCompetence] | None = None,
        key_competences: list[KeyCompetence] | None = None,
    ):
        self._class_data = class_data
        self._academic_configuration = academic_configuration or AcademicConfiguration()
        self._criteria = list(criteria or [])
        self._competences = list(competences or [])
        self._key_competences = list(key_competences or [])

    # === properties ===

    @property
    def class_data(self) -> ClassData:
        return self._class_data

    @property
    def academic_configuration(self) -> AcademicConfiguration:
        return self._academic_configuration

    @property
    def criteria(self) -> list[Criterion]:
        return list(self._criteria)

    @property
    def competences(self) -> list[SpecificCompetence]:
        return list(self._competences)

    @property
    def key_competences(self) -> list[KeyCompetence]:
        return list(self._key_competences)

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "classData": self._class_data.to_dict(),
            "academicConfiguration": self._academic_configuration.to_dict(),
            "criteria": [c.to_dict() for c in self._criteria],
            "competences": [c.to_dict() for c in self._competences],
            "keyCompetences": [k.to_dict() for k in self._key_competences],
        }

    @classmethod
    def from_dict(cls, data: dict) -> Snapshot:
        if not isinstance(data, dict):
            raise ValueError("A snapshot must be a JSON object.")

        if "classData" not in data:
            raise KeyError("classData")

        return cls(
            class_data=ClassData.from_dict(data["classData"]),
            academic_configuration=AcademicConfiguration.from_dict(
                data.get("academicConfiguration") or {}
            ),
            criteria=[Criterion.from_dict(c) for c in data.get("criteria") or []],
            competences=[
                SpecificCompetence.from_dict(c) for c in data.get("competences") or []
            ],
            key_competences=[
                KeyCompetence.from_dict(k) for k in data.get("keyCompetences") or []
            ],
        )

    def __repr__(self) -> str:
        return f"Snapshot({self._class_data!r}, {len(self._criteria)} criteria)"


def parse_snapshot(data: Any) -> Response:
    """
    Builds a `Snapshot` from already-decoded JSON data.

    Args:
        data (Any): The decoded JSON document.

    Returns:
        Response: A structured response with the following contract:
            - success (bool):
                - True if every record deserialized successfully.
                - False for missing keys, invalid values, or unexpected errors.
            - detail (str | None):
                - On failure, a human-readable description of the error.
                - On success, None.
            - error (ErrorCode | str | None):
                - `ErrorCode.MISSING_REQUIRED_FIELD` if a required key is missing.
                - `ErrorCode.INVALID_FIELD_VALUE` if a model validator rejects a value.
                - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
            - status_code (int | None):
                - 200 on success
                - 400 on failure
            - data (dict | None): Payload with the following keys:
                - On success:
                    - "snapshot" (Snapshot): The deserialized snapshot.
                - On failure:
                    - None

    Notes:
        - This method is read-only and does not raise.
    """
    try:
        snapshot = Snapshot.from_dict(data)

    except KeyError as e:
        return Response.fail(
            detail=f"Missing required field: {e}",
            error=ErrorCode.MISSING_REQUIRED_FIELD,
        )

    except (ValueError, TypeError) as e:
        return Response.fail(
            detail=f"Invalid field value: {e}",
            error=ErrorCode.INVALID_FIELD_VALUE,
        )

    except Exception as e:
        return Response.fail(
            detail=f"Unexpected error: {e}",
            error=ErrorCode.INTERNAL_ERROR,
        )

    else:
        return Response.succeed(
            data={
                "snapshot": snapshot,
            },
        )


def load_snapshot(path: str) -> Response:
    """
    Reads and parses a snapshot file.

    Args:
        path (str): Path to a JSON snapshot.

    Returns:
        Response: Same contract as `parse_snapshot()`, plus:
            - `ErrorCode.INVALID_INPUT` if the file is not valid JSON.
            - `ErrorCode.NOT_FOUND` (status 404) if the file does not exist.

    Notes:
        - The caller is responsible for ensuring that `path` is readable.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

    except FileNotFoundError:
        return Response.fail(
            detail=f"Snapshot file not found: {path}",
            error=ErrorCode.NOT_FOUND,
            status_code=404,
        )

    except json.JSONDecodeError as e:
        return Response.fail(
            detail=f"Failed to parse JSON data: {e}",
            error=ErrorCode.INVALID_INPUT,
        )

    except OSError as e:
        return Response.fail(
            detail=f"Failed to read snapshot: {e}",
            error=ErrorCode.INTERNAL_ERROR,
        )

    return parse_snapshot(data)
