"""Shared codec contract: bytes <-> Figure, plus whole-file load/save."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from src.schema import Figure


class FigureCodec(ABC):
    """One format strategy.

    Subclasses implement ``decode``/``encode``. ``load`` reads the whole file
    before decoding; ``save`` encodes fully before the file is opened, then
    overwrites it.
    """

    suffix: str = ""
    handler: str = ""

    @abstractmethod
    def decode(self, data: bytes) -> Figure:
        ...

    @abstractmethod
    def encode(self, figure: Figure) -> bytes:
        ...

    def load(self, path: str | Path) -> Figure:
        return self.decode(Path(path).read_bytes())

    def save(self, path: str | Path, figure: Figure) -> None:
        data = self.encode(figure)
        Path(path).write_bytes(data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(suffix={self.suffix!r})"
