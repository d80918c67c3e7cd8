"""Load and save figures, dispatching on the path suffix."""

from __future__ import annotations

import os
import uuid
from pathlib import Path

from src.persistence.diagnostics import DiagnosticsSink, Severity, emit_simple
from src.persistence.registry import FormatRegistry, default_registry
from src.schema import Figure

DIAG_ENV_VAR = "FIGED_DIAG_JSONL"


def diag_sink_from_env() -> DiagnosticsSink:
    # Diagnostics are opt-in: JSONL sink only when FIGED_DIAG_JSONL is set.
    from src.persistence.diagnostics import JsonlDiagnosticsSink, NoopDiagnosticsSink

    path = os.environ.get(DIAG_ENV_VAR, "")
    if isinstance(path, str) and path.strip():
        return JsonlDiagnosticsSink(path.strip())
    return NoopDiagnosticsSink()


class PersistenceService:
    """Stateless dispatcher between file paths and format codecs.

    Errors raised by the registry, the codecs or the file system propagate
    unchanged.
    """

    def __init__(
        self,
        registry: FormatRegistry | None = None,
        diag: DiagnosticsSink | None = None,
    ) -> None:
        self.registry = registry if registry is not None else default_registry()
        self.diag = diag if diag is not None else diag_sink_from_env()

    def _select(self, path: str | Path, stage: str, run_id: str):
        codec = self.registry.resolve(path)
        emit_simple(
            self.diag,
            run_id=run_id,
            stage=stage,
            component="registry",
            code="STRATEGY_SELECTED",
            severity=Severity.INFO,
            path=str(path),
            source="path",
            payload={"suffix": codec.suffix, "handler": codec.handler},
            reason="dispatch figure format strategy",
        )
        return codec

    def load(self, path: str | Path) -> Figure:
        run_id = uuid.uuid4().hex
        codec = self._select(path, "load", run_id)
        figure = codec.load(path)
        emit_simple(
            self.diag,
            run_id=run_id,
            stage="load",
            component=codec.suffix.lstrip("."),
            code="FIGURE_LOADED",
            path=str(path),
            source="path",
            resolved_value=figure.model_dump(),
            reason="figure decoded",
        )
        return figure

    def save(self, path: str | Path, figure: Figure) -> None:
        run_id = uuid.uuid4().hex
        codec = self._select(path, "save", run_id)
        codec.save(path, figure)
        emit_simple(
            self.diag,
            run_id=run_id,
            stage="save",
            component=codec.suffix.lstrip("."),
            code="FIGURE_SAVED",
            path=str(path),
            source="path",
            input_value=figure.model_dump(),
            reason="figure encoded",
        )


def load_figure(path: str | Path) -> Figure:
    return PersistenceService().load(path)


def save_figure(path: str | Path, figure: Figure) -> None:
    PersistenceService().save(path, figure)
