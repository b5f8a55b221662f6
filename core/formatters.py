# core/formatters.py

# pure text helpers for report output
# must never import from models!

from typing import Any

NO_GRADE_TEXT = "—"

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_list_with_and(items: list[Any]) -> str:
    items = [str(item) for item in items]

    if not items:
        return ""

    if len(items) == 1:
        return items[0]

    if len(items) == 2:
        return " and ".join(items)

    return ", ".join(items[:-1]) + ", and " + items[-1]


# === grade formatters ===


def format_grade(grade: float | str | None) -> str:
    if grade is None:
        return NO_GRADE_TEXT

    if isinstance(grade, str):
        return grade

    return f"{grade:.2f}"


def format_grade_row(label: str, grades: list[float | str | None], width: int = 24) -> str:
    cells = " | ".join(f"{format_grade(g):>6}" for g in grades)
    return f"{label:<{width}} | {cells}"


def format_header_row(label: str, headers: list[str], width: int = 24) -> str:
    cells = " | ".join(f"{h[:6]:>6}" for h in headers)
    return f"{label:<{width}} | {cells}"
