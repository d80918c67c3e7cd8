"""Console I/O seam for the interactive editor."""

from __future__ import annotations

import sys
from typing import Protocol, TextIO


class Console(Protocol):
    def read_line(self, prompt: str) -> str:
        """Show ``prompt`` and return one line without its line break.

        Raises EOFError when input is exhausted.
        """

    def write_line(self, text: str) -> None:
        """Write one line of output."""


class StdConsole:
    """Console backed by text streams (stdin/stdout by default)."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout

    def write_line(self, text: str) -> None:
        self._stdout.write(f"{text}\n")
        self._stdout.flush()

    def read_line(self, prompt: str) -> str:
        if prompt:
            self.write_line(prompt)
        line = self._stdin.readline()
        if line == "":
            raise EOFError
        return line.rstrip("\r\n")
