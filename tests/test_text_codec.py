from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.persistence.codecs import TextFigureCodec, format_number
from src.persistence.errors import InvalidDataError, NumericParseError
from src.schema import Figure


CODEC = TextFigureCodec()


def test_encode_box_example_bytes() -> None:
    data = CODEC.encode(Figure(name="Box", width=3.5, height=2.0))
    assert data == b"Box\n3.5\n2"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (2.0, "2"),
        (3.5, "3.5"),
        (0.1, "0.1"),
        (-12.0, "-12"),
        (1e16, "1e+16"),
        (1.0 / 3.0, "0.3333333333333333"),
    ],
)
def test_format_number_is_shortest_round_trip(value: float, expected: str) -> None:
    text = format_number(value)
    assert text == expected
    assert float(text) == value


def test_decode_reads_first_three_lines() -> None:
    figure = CODEC.decode(b"Box\n3.5\n2")
    assert figure == Figure(name="Box", width=3.5, height=2.0)


def test_decode_ignores_extra_lines() -> None:
    figure = CODEC.decode(b"Box\n1.5\n2.5\nnot a number\n\nmore")
    assert figure == Figure(name="Box", width=1.5, height=2.5)


def test_decode_accepts_crlf_bom_and_trailing_newline() -> None:
    figure = CODEC.decode(b"\xef\xbb\xbfBox\r\n3.5\r\n2\r\n")
    assert figure == Figure(name="Box", width=3.5, height=2.0)


def test_decode_keeps_name_untrimmed_and_allows_padded_numbers() -> None:
    figure = CODEC.decode(b"  Big box  \n 3.5 \n\t2\t")
    assert figure.name == "  Big box  "
    assert figure.width == 3.5
    assert figure.height == 2.0


@pytest.mark.parametrize("data", [b"", b"Box", b"Box\n3.5", b"Box\n3.5\n"])
def test_decode_fewer_than_three_lines_is_invalid(data: bytes) -> None:
    with pytest.raises(InvalidDataError) as excinfo:
        CODEC.decode(data)
    assert not isinstance(excinfo.value, NumericParseError)


def test_decode_non_numeric_width_is_numeric_parse_error() -> None:
    with pytest.raises(NumericParseError) as excinfo:
        CODEC.decode(b"Box\nabc\n2.0")
    err = excinfo.value
    assert isinstance(err, InvalidDataError)
    assert err.field == "width"
    assert err.line_number == 2
    assert err.raw_value == "abc"


@pytest.mark.parametrize("raw", ["1_5", "1_000.5", "_1"])
def test_decode_rejects_digit_separators(raw: str) -> None:
    with pytest.raises(NumericParseError) as excinfo:
        CODEC.decode(f"Box\n{raw}\n2".encode("utf-8"))
    assert excinfo.value.field == "width"
    assert excinfo.value.raw_value == raw


def test_decode_empty_height_line_is_numeric_parse_error() -> None:
    with pytest.raises(NumericParseError) as excinfo:
        CODEC.decode(b"Box\n2.0\n\n")
    assert excinfo.value.field == "height"
    assert excinfo.value.line_number == 3


def test_decode_rejects_non_utf8() -> None:
    with pytest.raises(InvalidDataError):
        CODEC.decode(b"\xff\xfe\x00\n1\n2")


@pytest.mark.parametrize(
    "figure",
    [
        Figure(name="Box", width=3.5, height=2.0),
        Figure(name="", width=0.0, height=-0.5),
        Figure(name="Квадрат 💠", width=1e-9, height=123456789.125),
        Figure(name="  spaced  ", width=0.1, height=0.2),
    ],
)
def test_round_trip(figure: Figure) -> None:
    assert CODEC.decode(CODEC.encode(figure)) == figure
