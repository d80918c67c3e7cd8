"""Console collaborators around the persistence service."""

from src.editor.command_loop import EditorSession, run_session
from src.editor.console import Console, StdConsole
from src.editor.edit_loop import edit_figure

__all__ = ["Console", "EditorSession", "StdConsole", "edit_figure", "run_session"]
