"""Structured-data (JSON) figure strategy."""

from __future__ import annotations

import json

from pydantic import ValidationError

from src.persistence.codecs.base import FigureCodec
from src.persistence.errors import StructuredDataError
from src.schema import Figure, FigurePayload

JSON_SUFFIX = ".json"


def _describe_errors(exc: ValidationError) -> list[str]:
    described: list[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
        described.append(f"{location}: {error.get('msg', 'invalid value')}")
    return described


class JsonFigureCodec(FigureCodec):
    suffix = JSON_SUFFIX
    handler = "json_object"

    def decode(self, data: bytes) -> Figure:
        try:
            text = data.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise StructuredDataError(["<root>: payload is not UTF-8 text"], suffix=self.suffix) from exc
        try:
            payload = FigurePayload.model_validate_json(text)
        except ValidationError as exc:
            raise StructuredDataError(_describe_errors(exc), suffix=self.suffix) from exc
        return payload.to_figure()

    def encode(self, figure: Figure) -> bytes:
        payload = FigurePayload.from_figure(figure).model_dump()
        return json.dumps(payload, ensure_ascii=False, indent=2).encode("utf-8")
