"""Interactive field-by-field editing of the current figure."""

from __future__ import annotations

from src.editor.console import Console
from src.persistence.codecs.text_codec import parse_number
from src.persistence.diagnostics import DiagnosticsSink, NoopDiagnosticsSink, Severity, emit_simple
from src.schema import Figure


def _parse_float(raw: str) -> float | None:
    try:
        return parse_number(raw)
    except ValueError:
        return None


def _edit_number(
    figure: Figure,
    field: str,
    console: Console,
    diag: DiagnosticsSink,
    run_id: str,
) -> None:
    raw = console.read_line(f"Enter new {field} (or press Enter to keep the current value):")
    if not raw:
        return
    value = _parse_float(raw)
    if value is None:
        console.write_line(f"Invalid input for {field}. {field.capitalize()} not changed.")
        emit_simple(
            diag,
            run_id=run_id,
            stage="edit",
            component="editor",
            code="FIELD_REJECTED",
            severity=Severity.WARN,
            path=field,
            source="user",
            input_value=raw,
            resolved_value=getattr(figure, field),
            reason="not a number",
        )
        return
    setattr(figure, field, value)


def edit_figure(
    figure: Figure,
    console: Console,
    *,
    diag: DiagnosticsSink | None = None,
    run_id: str = "",
) -> Figure:
    """Prompt for name, width and height; empty input keeps the current value.

    Mutates ``figure`` in place and returns it.
    """
    sink = diag if diag is not None else NoopDiagnosticsSink()

    console.write_line("Editing Figure:")
    console.write_line(f"Name: {figure.name}")
    console.write_line(f"Width: {figure.width}")
    console.write_line(f"Height: {figure.height}")

    name = console.read_line("Enter new name (or press Enter to keep the current value):")
    if name:
        figure.name = name

    _edit_number(figure, "width", console, sink, run_id)
    _edit_number(figure, "height", console, sink, run_id)

    emit_simple(
        sink,
        run_id=run_id,
        stage="edit",
        component="editor",
        code="FIGURE_EDITED",
        source="user",
        resolved_value=figure.model_dump(),
        reason="edit pass finished",
    )
    console.write_line("Figure edited successfully.")
    return figure
