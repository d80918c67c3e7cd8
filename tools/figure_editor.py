"""Run the console figure editor.

Usage:
python tools/figure_editor.py [path/to/figure.txt|.json] [--diag-jsonl out/diag.jsonl] [--summary]

Env vars:
- FIGED_DIAG_JSONL: default for --diag-jsonl
"""

from __future__ import annotations

import argparse
import json
import os
import sys

# --- ensure repo root in sys.path so "src.*" imports work ---
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from src.editor import StdConsole, run_session  # noqa: E402
from src.persistence.diagnostics import (  # noqa: E402
    DiagnosticsSink,
    FanoutDiagnosticsSink,
    JsonlDiagnosticsSink,
    ListDiagnosticsSink,
    build_diagnostics_summary,
)
from src.persistence.service import DIAG_ENV_VAR, PersistenceService  # noqa: E402


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Edit a figure stored as .txt, .json or .xml")
    parser.add_argument("path", nargs="?", default=None, help="figure file to load (prompted if omitted)")
    parser.add_argument(
        "--diag-jsonl",
        type=str,
        default=os.environ.get(DIAG_ENV_VAR, ""),
        help="append diagnostics events to this JSONL file",
    )
    parser.add_argument("--summary", action="store_true", help="print a diagnostics summary on exit")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    collected = ListDiagnosticsSink()
    sinks: list[DiagnosticsSink] = [collected]
    if args.diag_jsonl.strip():
        sinks.append(JsonlDiagnosticsSink(args.diag_jsonl.strip()))
    diag = FanoutDiagnosticsSink(*sinks)

    status = run_session(
        StdConsole(),
        args.path,
        service=PersistenceService(diag=diag),
        diag=diag,
    )

    if args.summary:
        print(json.dumps(build_diagnostics_summary(collected.events), indent=2, sort_keys=True))
    return status


if __name__ == "__main__":
    raise SystemExit(main())
