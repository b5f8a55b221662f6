# tests/test_formatters.py

import core.formatters as formatters


def test_format_grade():
    assert formatters.format_grade(None) == formatters.NO_GRADE_TEXT
    assert formatters.format_grade(6) == "6.00"
    assert formatters.format_grade("N/A") == "N/A"


def test_format_list_with_and():
    assert formatters.format_list_with_and([]) == ""
    assert formatters.format_list_with_and(["ep-1"]) == "ep-1"
    assert formatters.format_list_with_and(["ep-1", "ep-2", "ep-3"]) == "ep-1, ep-2, and ep-3"


def test_format_grade_row():
    row = formatters.format_grade_row("Elena", [9.0, None], width=8)

    assert row == "Elena    |   9.00 |      —"
