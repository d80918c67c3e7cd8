"""Top-level editor session: load once, then save/edit/quit on command."""

from __future__ import annotations

import uuid

from src.editor.console import Console
from src.editor.edit_loop import edit_figure
from src.persistence.diagnostics import DiagnosticsSink, NoopDiagnosticsSink, Severity, emit_simple
from src.persistence.service import PersistenceService
from src.schema import Figure

SAVE_COMMANDS = frozenset({"save", "s"})
QUIT_COMMANDS = frozenset({"quit", "q", "exit"})

COMMAND_PROMPT = "Type 'save' to save, 'quit' to exit, or press Enter to edit the figure."


class EditorSession:
    """Owns the current figure; the persistence service stays stateless."""

    def __init__(
        self,
        console: Console,
        service: PersistenceService | None = None,
        diag: DiagnosticsSink | None = None,
    ) -> None:
        self.console = console
        self.diag = diag if diag is not None else NoopDiagnosticsSink()
        self.service = service if service is not None else PersistenceService(diag=self.diag)
        self.run_id = uuid.uuid4().hex
        self.figure: Figure | None = None

    def _report_failure(self, code: str, path: str, exc: Exception) -> None:
        self.console.write_line(f"Error: {exc}")
        emit_simple(
            self.diag,
            run_id=self.run_id,
            stage="session",
            component="session",
            code=code,
            severity=Severity.ERROR,
            path=path,
            source="user",
            reason=str(exc),
            error_type=type(exc).__name__,
        )

    def load(self, path: str) -> bool:
        try:
            self.figure = self.service.load(path)
        except Exception as exc:
            self._report_failure("LOAD_FAILED", path, exc)
            return False
        self.console.write_line("File loaded successfully.")
        return True

    def save(self, path: str) -> bool:
        if self.figure is None:
            raise RuntimeError("No figure loaded")
        try:
            self.service.save(path, self.figure)
        except Exception as exc:
            self._report_failure("SAVE_FAILED", path, exc)
            return False
        self.console.write_line("File saved successfully.")
        return True

    def edit(self) -> Figure:
        if self.figure is None:
            raise RuntimeError("No figure loaded")
        return edit_figure(self.figure, self.console, diag=self.diag, run_id=self.run_id)

    def loop(self) -> None:
        while True:
            try:
                command = self.console.read_line(COMMAND_PROMPT).strip().lower()
            except EOFError:
                return
            if command in QUIT_COMMANDS:
                return
            try:
                if command in SAVE_COMMANDS:
                    self.save(self.console.read_line("Enter the file path to save:"))
                else:
                    self.edit()
            except EOFError:
                return

    def run(self, path: str | None = None) -> int:
        self.console.write_line("Text Editor Console Application")
        if path is None:
            try:
                path = self.console.read_line("Enter the file path to load:")
            except EOFError:
                return 1
        if not self.load(path):
            return 1
        self.loop()
        self.console.write_line("Text Editor is closed.")
        return 0


def run_session(
    console: Console,
    path: str | None = None,
    *,
    service: PersistenceService | None = None,
    diag: DiagnosticsSink | None = None,
) -> int:
    return EditorSession(console, service=service, diag=diag).run(path)
