# models/evaluation_period.py

"""
Represents an evaluation period (a term or trimester) used to scope and weight aggregation.

Categories and assignments point at the period that owns them. Period weights for the
overall course grade live on `AcademicConfiguration`, not here.
"""

from __future__ import annotations

import datetime


class EvaluationPeriod:

    def __init__(
        self,
        id: str,
        name: str,
        start_date: datetime.date,
        end_date: datetime.date,
    ):
        if end_date < start_date:
            raise ValueError(
                f"Invalid evaluation period {name}: end date precedes start date."
            )

        self._id = id
        self._name = name
        self._start_date = start_date
        self._end_date = end_date

    # === properties ===

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def start_date(self) -> datetime.date:
        return self._start_date

    @property
    def end_date(self) -> datetime.date:
        return self._end_date

    def contains(self, date: datetime.date) -> bool:
        return self._start_date <= date <= self._end_date

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "name": self._name,
            "startDate": self._start_date.isoformat(),
            "endDate": self._end_date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> EvaluationPeriod:
        return cls(
            id=data["id"],
            name=data["name"],
            start_date=datetime.date.fromisoformat(data["startDate"]),
            end_date=datetime.date.fromisoformat(data["endDate"]),
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"EvaluationPeriod({self._id}, {self._name}, {self._start_date}, {self._end_date})"

    def __str__(self) -> str:
        return f"EVALUATION PERIOD: name: {self._name}, id: {self._id}"
