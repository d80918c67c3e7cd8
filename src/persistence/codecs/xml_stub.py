"""Placeholder strategy for the XML figure format."""

from __future__ import annotations

from pathlib import Path

from src.persistence.codecs.base import FigureCodec
from src.persistence.errors import FormatNotImplementedError
from src.schema import Figure

XML_SUFFIX = ".xml"

# TODO: replace with a real codec once an XML layout for figures is agreed on.


class XmlFigureStub(FigureCodec):
    """Registered so ``.xml`` is recognized; every operation refuses."""

    suffix = XML_SUFFIX
    handler = "xml_stub"

    def decode(self, data: bytes) -> Figure:
        del data
        raise FormatNotImplementedError(self.suffix, "deserialization")

    def encode(self, figure: Figure) -> bytes:
        del figure
        raise FormatNotImplementedError(self.suffix, "serialization")

    def load(self, path: str | Path) -> Figure:
        del path
        raise FormatNotImplementedError(self.suffix, "deserialization")

    def save(self, path: str | Path, figure: Figure) -> None:
        del path, figure
        raise FormatNotImplementedError(self.suffix, "serialization")
