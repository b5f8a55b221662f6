# tests/test_cli.py

import json

import core.formatters as formatters
from cli.main import run_cli


def test_course_report(snapshot_file, capsys):
    exit_code = run_cli([str(snapshot_file)])

    out = capsys.readouterr().out

    assert exit_code == 0
    assert "GRADEBOOK REPORT" in out
    assert "Class: Biology 3A" in out
    assert "1st Te" in out
    assert "FINAL" in out
    assert "Marcos Rodríguez [RE]" in out
    # s1 is recovered to 9, s2 keeps 4.5
    assert "9.00" in out
    assert "4.50" in out


def test_period_report(snapshot_file, capsys):
    exit_code = run_cli([str(snapshot_file), "--period", "ep-1"])

    out = capsys.readouterr().out

    assert exit_code == 0
    assert "1st Term" in out
    assert "1.1" in out


def test_unknown_period(snapshot_file, capsys):
    assert run_cli([str(snapshot_file), "--period", "ep-9"]) == 1


def test_missing_snapshot(tmp_path, capsys):
    exit_code = run_cli([str(tmp_path / "missing.json")])

    out = capsys.readouterr().out

    assert exit_code == 1
    assert "NOT_FOUND" in out


def test_unknown_period_lists_known_periods(snapshot_file, capsys):
    run_cli([str(snapshot_file), "--period", "ep-9"])

    out = capsys.readouterr().out

    assert "Known periods: ep-1 and ep-2." in out


def test_missing_final_grade_shows_no_grade_text(tmp_path, snapshot_data, capsys):
    snapshot_data["classData"]["grades"] = []
    path = tmp_path / "ungraded.json"
    path.write_text(json.dumps(snapshot_data), encoding="utf-8")

    run_cli([str(path)])

    rows = [line for line in capsys.readouterr().out.splitlines() if "Elena" in line]

    assert rows[0].endswith(formatters.NO_GRADE_TEXT)
    assert "N/A" not in rows[0]
