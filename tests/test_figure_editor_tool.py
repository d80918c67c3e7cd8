from __future__ import annotations

import io
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tools.figure_editor import main


def test_tool_runs_session_from_stdin(monkeypatch, capsys, tmp_path) -> None:
    monkeypatch.delenv("FIGED_DIAG_JSONL", raising=False)
    source = tmp_path / "box.json"
    source.write_text('{"name": "Box", "width": 3.5, "height": 2}', encoding="utf-8")
    target = tmp_path / "box.txt"
    monkeypatch.setattr(sys, "stdin", io.StringIO(f"save\n{target}\nquit\n"))

    status = main([str(source)])

    out = capsys.readouterr().out
    assert status == 0
    assert "File loaded successfully." in out
    assert "File saved successfully." in out
    assert target.read_bytes() == b"Box\n3.5\n2"


def test_tool_writes_diagnostics_and_summary(monkeypatch, capsys, tmp_path) -> None:
    monkeypatch.delenv("FIGED_DIAG_JSONL", raising=False)
    source = tmp_path / "box.txt"
    source.write_text("Box\n3.5\n2", encoding="utf-8")
    diag_path = tmp_path / "diag.jsonl"
    monkeypatch.setattr(sys, "stdin", io.StringIO("\n\nabc\n\nq\n"))

    status = main([str(source), "--diag-jsonl", str(diag_path), "--summary"])

    out = capsys.readouterr().out
    assert status == 0
    summary = json.loads(out[out.index("{\n"):])
    assert summary["by_code"]["FIELD_REJECTED"] == 1
    assert summary["by_code"]["FIGURE_LOADED"] == 1
    codes = [json.loads(line)["code"] for line in diag_path.read_text(encoding="utf-8").splitlines()]
    assert codes[:2] == ["STRATEGY_SELECTED", "FIGURE_LOADED"]


def test_tool_load_failure_exit_status(monkeypatch, capsys, tmp_path) -> None:
    monkeypatch.delenv("FIGED_DIAG_JSONL", raising=False)
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    status = main([str(tmp_path / "figure.xml")])
    assert status == 1
    assert "Error: XML deserialization is not implemented." in capsys.readouterr().out
