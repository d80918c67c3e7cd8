"""Plain-text figure strategy: name, width and height on the first three lines."""

from __future__ import annotations

from src.persistence.codecs.base import FigureCodec
from src.persistence.errors import InvalidDataError, NumericParseError
from src.schema import Figure

TXT_SUFFIX = ".txt"
_REQUIRED_LINES = 3


def format_number(value: float) -> str:
    """Shortest round-trippable text; integral values drop the trailing ``.0``."""
    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text


def _split_lines(text: str) -> list[str]:
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = normalized.split("\n")
    if lines and lines[-1] == "":
        # A trailing line break terminates the last line, it does not open a new one.
        lines.pop()
    return lines


def parse_number(raw: str) -> float:
    """Parse a decimal number; Python-only digit separators (`1_5`) are rejected."""
    if "_" in raw:
        raise ValueError(f"could not convert string to float: {raw!r}")
    return float(raw)


def _parse_number(raw: str, *, field: str, line_number: int) -> float:
    try:
        return parse_number(raw)
    except ValueError as exc:
        raise NumericParseError(field, line_number, raw, suffix=TXT_SUFFIX) from exc


class TextFigureCodec(FigureCodec):
    suffix = TXT_SUFFIX
    handler = "txt_lines"

    def decode(self, data: bytes) -> Figure:
        try:
            text = data.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise InvalidDataError("Invalid TXT file format: not UTF-8 text", suffix=self.suffix) from exc

        lines = _split_lines(text)
        if len(lines) < _REQUIRED_LINES:
            raise InvalidDataError(
                f"Invalid TXT file format: expected {_REQUIRED_LINES} lines, got {len(lines)}",
                suffix=self.suffix,
            )

        # Lines past the third are ignored.
        return Figure(
            name=lines[0],
            width=_parse_number(lines[1], field="width", line_number=2),
            height=_parse_number(lines[2], field="height", line_number=3),
        )

    def encode(self, figure: Figure) -> bytes:
        text = "\n".join(
            [figure.name, format_number(figure.width), format_number(figure.height)]
        )
        return text.encode("utf-8")
