"""Suffix -> strategy table used to dispatch figure persistence."""

from __future__ import annotations

from pathlib import PurePath
from types import MappingProxyType
from typing import Iterable, Mapping

from src.persistence.codecs import FigureCodec, JsonFigureCodec, TextFigureCodec, XmlFigureStub
from src.persistence.errors import UnsupportedFormatError


def path_suffix(path: str | PurePath) -> str:
    """Return the format key for ``path`` exactly as written (no case folding)."""
    return PurePath(path).suffix


class FormatRegistry:
    """Immutable mapping of suffix token to codec.

    Lookups are exact and case-sensitive; there is no fallback strategy.
    """

    def __init__(self, codecs: Iterable[FigureCodec] = ()) -> None:
        table: dict[str, FigureCodec] = {}
        for codec in codecs:
            if not codec.suffix.startswith("."):
                raise ValueError(f"Codec suffix must start with '.': {codec.suffix!r}")
            if codec.suffix in table:
                raise ValueError(f"Duplicate codec for suffix {codec.suffix!r}")
            table[codec.suffix] = codec
        self._table: Mapping[str, FigureCodec] = MappingProxyType(table)

    @property
    def strategies(self) -> Mapping[str, FigureCodec]:
        return self._table

    def suffixes(self) -> tuple[str, ...]:
        return tuple(self._table)

    def with_codec(self, codec: FigureCodec) -> "FormatRegistry":
        """Return a new registry with ``codec`` added or replacing its suffix."""
        codecs = [existing for existing in self._table.values() if existing.suffix != codec.suffix]
        codecs.append(codec)
        return FormatRegistry(codecs)

    def get(self, suffix: str) -> FigureCodec | None:
        return self._table.get(suffix)

    def resolve(self, path: str | PurePath) -> FigureCodec:
        suffix = path_suffix(path)
        codec = self._table.get(suffix)
        if codec is None:
            raise UnsupportedFormatError(str(path), suffix)
        return codec

    def __contains__(self, suffix: object) -> bool:
        return suffix in self._table

    def __len__(self) -> int:
        return len(self._table)


def default_registry() -> FormatRegistry:
    return FormatRegistry([TextFigureCodec(), JsonFigureCodec(), XmlFigureStub()])
