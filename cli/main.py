# cli/main.py

"""
Report command for the gradebook engine.

Loads a snapshot file and prints, per student, every evaluation period grade and the
overall course grade. With `--period`, prints that period's grade and the student's
criterion grades for it instead.

Usage:
    python -m cli.main SNAPSHOT.json [--period PERIOD_ID] [--log-level LEVEL]
"""

from __future__ import annotations

import argparse
import logging
import sys

import cli.model_formatters as model_formatters
import core.formatters as formatters
from core.config import NO_FINAL_GRADE, configure_logging
from core.criterion_grades import student_criterion_grades
from core.period_grades import evaluation_period_grade_value, overall_final_grade
from core.snapshot import Snapshot, load_snapshot

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print computed grades for a class snapshot.")
    parser.add_argument("snapshot", help="Path to a JSON snapshot file")
    parser.add_argument("--period", help="Evaluation period id to report on")
    parser.add_argument("--log-level", help="Overrides the LOG_LEVEL environment variable")
    return parser


def print_course_report(snapshot: Snapshot) -> None:
    class_data = snapshot.class_data
    configuration = snapshot.academic_configuration
    periods = list(configuration.evaluation_periods)

    print(model_formatters.format_period_header(periods))

    for student in class_data.students:
        period_grades = [
            evaluation_period_grade_value(student.id, class_data, period.id)
            for period in periods
        ]
        final = overall_final_grade(student.id, class_data, configuration)

        print(
            model_formatters.format_student_period_row(
                student,
                period_grades,
                None if final.grade == NO_FINAL_GRADE else final.grade,
            )
        )


def print_period_report(snapshot: Snapshot, period_id: str) -> bool:
    """
    Prints one period's grades and criterion grades.

    Returns:
        False if the period is not part of the academic configuration, True otherwise.
    """
    class_data = snapshot.class_data
    period = snapshot.academic_configuration.find_period(period_id)

    if period is None:
        known = [p.id for p in snapshot.academic_configuration.evaluation_periods]
        logger.error("Unknown evaluation period: %s", period_id)
        print(
            f"No evaluation period '{period_id}'. "
            f"Known periods: {formatters.format_list_with_and(known) or 'none'}."
        )
        return False

    criteria = snapshot.criteria

    print(f"\n{period.name}")
    print(model_formatters.format_period_header([period]))

    for student in class_data.students:
        grade = evaluation_period_grade_value(student.id, class_data, period.id)
        print(model_formatters.format_student_period_row(student, [grade], ""))

    if criteria:
        print()
        print(model_formatters.format_criterion_header(criteria))

        for student in class_data.students:
            grades = student_criterion_grades(student.id, class_data, criteria, period.id)
            print(
                model_formatters.format_student_criterion_row(student, criteria, grades)
            )

    return True


def run_cli(argv: list[str] | None = None) -> int:
    """
    Entry point for the report command.

    Returns:
        The process exit status: 0 on success, 1 if the snapshot or period cannot be loaded.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    response = load_snapshot(args.snapshot)

    if not response.success:
        logger.error("Could not load snapshot %s: %s", args.snapshot, response.detail)
        print(response)
        return 1

    snapshot: Snapshot = response.data["snapshot"]

    print(formatters.format_banner_text("GRADEBOOK REPORT"))
    print(model_formatters.format_class_multiline(snapshot.class_data))
    print()

    if args.period:
        return 0 if print_period_report(snapshot, args.period) else 1

    print_course_report(snapshot)
    return 0


if __name__ == "__main__":
    sys.exit(run_cli())
