from __future__ import annotations

import json
import runpy
import sys
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "find_dates.py"


def _run(monkeypatch: pytest.MonkeyPatch, *argv: str) -> None:
    monkeypatch.setattr(sys, "argv", [str(SCRIPT), *argv])
    runpy.run_path(str(SCRIPT), run_name="__main__")


def test_script_prints_sorted_dates(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    p = tmp_path / "notes.txt"
    p.write_text("paid 2023-10-05 x due 11/2024 y 1/2 z 2023 5 7", encoding="utf-8")

    _run(monkeypatch, str(p), "--sort")
    out = capsys.readouterr().out.splitlines()
    assert out == ["2023-05-07", "2023-10-05", "2024-11-??"]


def test_script_errors_and_json(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    p = tmp_path / "notes.txt"
    p.write_text("on 12/10/05 x", encoding="utf-8")

    _run(monkeypatch, str(p), "--errors", "--json")
    data = json.loads(capsys.readouterr().out)
    assert data == [
        {"error": "UndecidedDate", "message": "unable to determine date from values: 12 10 5"},
    ]


def test_script_last_without_dates_exits(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    p = tmp_path / "empty.txt"
    p.write_text("no dates", encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        _run(monkeypatch, str(p), "--last")
    assert exc.value.code == "ERROR: No dates found from no dates"


def test_script_missing_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    with pytest.raises(SystemExit):
        _run(monkeypatch, str(tmp_path / "nope.txt"))
