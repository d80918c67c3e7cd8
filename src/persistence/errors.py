"""Failure taxonomy shared by the registry, the service and the codecs."""

from __future__ import annotations

from typing import Iterable


class PersistenceError(Exception):
    """Base class for figure persistence failures (I/O errors are not wrapped)."""


class UnsupportedFormatError(PersistenceError, ValueError):
    """Raised when the path suffix has no registered strategy."""

    def __init__(self, path: str, suffix: str) -> None:
        label = suffix or "<none>"
        super().__init__(f"Unsupported file format: {label}")
        self.path = path
        self.suffix = suffix


class FormatNotImplementedError(PersistenceError, NotImplementedError):
    """Raised by registered formats whose codec is a placeholder."""

    def __init__(self, suffix: str, operation: str) -> None:
        fmt = suffix.lstrip(".").upper() or "format"
        super().__init__(f"{fmt} {operation} is not implemented.")
        self.suffix = suffix
        self.operation = operation


class InvalidDataError(PersistenceError, ValueError):
    """Raised when the payload does not satisfy the format contract."""

    def __init__(self, message: str, *, suffix: str = "") -> None:
        super().__init__(message)
        self.suffix = suffix


class NumericParseError(InvalidDataError):
    """A numeric field could not be parsed as a float."""

    def __init__(self, field: str, line_number: int, raw_value: str, *, suffix: str = "") -> None:
        super().__init__(
            f"Invalid {field} on line {line_number}: {raw_value!r} is not a number",
            suffix=suffix,
        )
        self.field = field
        self.line_number = line_number
        self.raw_value = raw_value


class StructuredDataError(InvalidDataError):
    """Malformed or mistyped structured-data payload."""

    def __init__(self, errors: Iterable[str], *, suffix: str = "") -> None:
        self.errors = tuple(errors)
        joined = "; ".join(self.errors) or "malformed payload"
        super().__init__(f"Invalid structured data: {joined}", suffix=suffix)
