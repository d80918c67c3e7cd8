from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# =========================
# Figure (edited record)
# =========================

class Figure(BaseModel):
    """
    The single record edited by the console editor.

    All three fields are required: a Figure only exists as the result of a
    successful decode (or explicit construction), never as an empty default.
    Serialization is owned by the format codecs, not by the model.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str
    width: float
    height: float


# =========================
# Structured-data payload (lenient input)
# =========================

class FigurePayload(BaseModel):
    """
    Wire shape of the ``.json`` format.

    Absent keys are default-filled (empty name, zero sizes) to keep older
    files loadable; type mismatches still fail validation. Unknown keys are
    ignored.
    """

    name: str = ""
    width: float = Field(default=0.0)
    height: float = Field(default=0.0)

    def to_figure(self) -> Figure:
        return Figure(name=self.name, width=self.width, height=self.height)

    @classmethod
    def from_figure(cls, figure: Figure) -> "FigurePayload":
        return cls(name=figure.name, width=figure.width, height=figure.height)
