# models/class_data.py

"""
The ClassData model is the read-only snapshot handed to the grade aggregation engine.

Students, categories, assignments, grades and evaluation tools are stored in dictionaries keyed
by id (grades by `(student_id, assignment_id)`), preserving the order in which they appear in
the source snapshot so every aggregate is computed in a deterministic order.

Provides lookup helpers in two flavors:
- `find_*_by_id()` methods that return a structured `Response`, for callers at the edges
  (reports, the CLI) that need to surface a missing record.
- Plain accessors (`category_for()`, `grades_for_student()`, ...) used by the engine, which
  return None or empty collections for missing data and never raise.

Nothing here mutates the snapshot after construction.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from core.response import ErrorCode, Response
from models.assignment import Assignment
from models.category import Category
from models.evaluation_tool import EvaluationTool
from models.grade import Grade
from models.student import Student

RecordType = TypeVar("RecordType", Assignment, Category, EvaluationTool, Student)


class ClassData:

    def __init__(
        self,
        id: str,
        name: str,
        course_id: str = "",
        students: list[Student] | None = None,
        categories: list[Category] | None = None,
        assignments: list[Assignment] | None = None,
        grades: list[Grade] | None = None,
        evaluation_tools: list[EvaluationTool] | None = None,
    ):
        self._id = id
        self._name = name
        self._course_id = course_id
        self._students: dict[str, Student] = {s.id: s for s in students or []}
        self._categories: dict[str, Category] = {c.id: c for c in categories or []}
        self._assignments: dict[str, Assignment] = {
            a.id: a for a in assignments or []
        }
        # one grade per (student, assignment); a later duplicate replaces an earlier one
        self._grades: dict[tuple[str, str], Grade] = {
            (g.student_id, g.assignment_id): g for g in grades or []
        }
        self._evaluation_tools: dict[str, EvaluationTool] = {
            t.id: t for t in evaluation_tools or []
        }

    # === properties ===

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def course_id(self) -> str:
        return self._course_id

    @property
    def students(self) -> list[Student]:
        return list(self._students.values())

    @property
    def categories(self) -> list[Category]:
        return list(self._categories.values())

    @property
    def assignments(self) -> list[Assignment]:
        return list(self._assignments.values())

    @property
    def grades(self) -> list[Grade]:
        return list(self._grades.values())

    @property
    def evaluation_tools(self) -> list[EvaluationTool]:
        return list(self._evaluation_tools.values())

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "name": self._name,
            "courseId": self._course_id,
            "students": [s.to_dict() for s in self._students.values()],
            "categories": [c.to_dict() for c in self._categories.values()],
            "assignments": [a.to_dict() for a in self._assignments.values()],
            "grades": [g.to_dict() for g in self._grades.values()],
            "evaluationTools": [t.to_dict() for t in self._evaluation_tools.values()],
        }

    @classmethod
    def from_dict(cls, data: dict) -> ClassData:
        """
        Builds a `ClassData` snapshot from a JSON-compatible dictionary.

        Args:
            data (dict): The serialized class, using the camel-case keys of the snapshot format.

        Returns:
            ClassData: The deserialized snapshot.

        Raises:
            - KeyError:
                - If a record is missing a required key.
            - ValueError / TypeError:
                - If a record fails its model validators.

        Notes:
            - This method fails fast: the first invalid record aborts the import.
            - Wrap calls in `core.snapshot.load_snapshot()` for a `Response`-based contract.
        """

        def build(key: str, from_dict_fn: Callable[[dict[str, Any]], Any]) -> list:
            records = data.get(key) or []

            if not isinstance(records, list):
                raise ValueError(f"Expected '{key}' to contain a list.")

            return [from_dict_fn(record) for record in records]

        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            course_id=data.get("courseId", ""),
            students=build("students", Student.from_dict),
            categories=build("categories", Category.from_dict),
            assignments=build("assignments", Assignment.from_dict),
            grades=build("grades", Grade.from_dict),
            evaluation_tools=build("evaluationTools", EvaluationTool.from_dict),
        )

    # === data accessors ===

    # --- find record by id ---

    def find_record_by_id(
        self,
        id: str,
        dictionary: dict[str, RecordType],
    ) -> Response:
        """
        Finds a record by id within a given dictionary.

        Args:
            id (str): The unique ID of the record.
            dictionary (dict[str, RecordType]): The dictionary of records to search.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the record was found.
                    - False if no match is found.
                - detail (str | None):
                    - On failure, a human-readable explanation of the problem.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no match is found.
                - status_code (int | None):
                    - 200 on success
                    - 404 if not found
                - data (dict): Payload with the following keys:
                    - On success:
                        - "record" (RecordType): The matched record object.
                    - On failure:
                        - None

        Notes:
            - This method is read-only and does not raise.
            - The caller is responsible for extracting the record from `response.data["record"]`.
        """
        record = dictionary.get(id)

        if record is None:
            return Response.fail(
                detail=f"No matching record found for {id}.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        return Response.succeed(
            data={
                "record": record,
            },
        )

    def find_student_by_id(self, id: str) -> Response:
        return self.find_record_by_id(id, self._students)

    def find_category_by_id(self, id: str) -> Response:
        return self.find_record_by_id(id, self._categories)

    def find_assignment_by_id(self, id: str) -> Response:
        return self.find_record_by_id(id, self._assignments)

    def find_tool_by_id(self, id: str) -> Response:
        return self.find_record_by_id(id, self._evaluation_tools)

    def find_grade_by_assignment_and_student(
        self, assignment_id: str, student_id: str
    ) -> Response:
        """
        Finds the `Grade` recorded for a given assignment and student.

        Returns:
            Response: On success, data["record"] holds the `Grade`. On failure, `ErrorCode.NOT_FOUND` with status 404.

        Notes:
            - This method is read-only and does not raise.
            - A missing grade means the assignment is ungraded for that student.
        """
        grade = self._grades.get((student_id, assignment_id))

        if grade is None:
            return Response.fail(
                detail=f"No matching grade could be found: assignment id {assignment_id}, student id {student_id}.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        return Response.succeed(
            data={
                "record": grade,
            },
        )

    # --- engine accessors ---

    def category_for(self, assignment: Assignment) -> Category | None:
        return self._categories.get(assignment.category_id)

    def is_recovery_assignment(self, assignment: Assignment) -> bool:
        category = self.category_for(assignment)
        return category is not None and category.is_recovery

    def tool_for(self, assignment: Assignment) -> EvaluationTool | None:
        if assignment.evaluation_tool_id is None:
            return None
        return self._evaluation_tools.get(assignment.evaluation_tool_id)

    def assignment(self, id: str) -> Assignment | None:
        return self._assignments.get(id)

    def assignments_in_period(self, period_id: str | None = None) -> list[Assignment]:
        """All assignments of a period, or every assignment when `period_id` is None."""
        if period_id is None:
            return self.assignments
        return [
            a for a in self._assignments.values() if a.evaluation_period_id == period_id
        ]

    def assignments_in_category(self, category_id: str) -> list[Assignment]:
        return [a for a in self._assignments.values() if a.category_id == category_id]

    def categories_in_period(self, period_id: str) -> list[Category]:
        return [
            c for c in self._categories.values() if c.evaluation_period_id == period_id
        ]

    def grade_for(self, student_id: str, assignment_id: str) -> Grade | None:
        return self._grades.get((student_id, assignment_id))

    def grades_for_student(self, student_id: str) -> dict[str, Grade]:
        """Maps assignment id to the student's `Grade`, for graded assignments only."""
        return {
            assignment_id: grade
            for (sid, assignment_id), grade in self._grades.items()
            if sid == student_id
        }

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"ClassData({self._id}, {self._name}, {len(self._students)} students, {len(self._assignments)} assignments, {len(self._grades)} grades)"

    def __str__(self) -> str:
        return f"CLASS: name: {self._name}, id: {self._id}"
