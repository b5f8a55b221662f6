# cli/model_formatters.py

# anything that renders domain objects or computed grades for the report
from textwrap import dedent

import core.formatters as formatters
from models.class_data import ClassData
from models.criterion import Criterion
from models.evaluation_period import EvaluationPeriod
from models.student import Student

FINAL_COLUMN = "FINAL"

# === class formatters ===


def format_class_multiline(class_data: ClassData) -> str:
    return dedent(
        f"""\
        Class: {class_data.name}
        ... Students: {len(class_data.students)}
        ... Categories: {len(class_data.categories)}
        ... Assignments: {len(class_data.assignments)}
        ... Grades recorded: {len(class_data.grades)}"""
    )


# === student formatters ===


def format_student_label(student: Student) -> str:
    tags = f" [{', '.join(student.needs_tags)}]" if student.has_needs_tags else ""
    return f"{student.name}{tags}"


# === grade table formatters ===


def format_period_header(periods: list[EvaluationPeriod]) -> str:
    headers = [period.name for period in periods] + [FINAL_COLUMN]
    return formatters.format_header_row("Student", headers)


def format_student_period_row(
    student: Student,
    period_grades: list[float | None],
    final_grade: str | None,
) -> str:
    return formatters.format_grade_row(
        format_student_label(student), [*period_grades, final_grade]
    )


def format_criterion_header(criteria: list[Criterion]) -> str:
    return formatters.format_header_row(
        "Student", [criterion.code or criterion.id for criterion in criteria]
    )


def format_student_criterion_row(
    student: Student,
    criteria: list[Criterion],
    criterion_grades: dict[str, float | None],
) -> str:
    return formatters.format_grade_row(
        format_student_label(student),
        [criterion_grades.get(criterion.id) for criterion in criteria],
    )
