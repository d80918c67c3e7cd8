"""Figure format strategies."""

from src.persistence.codecs.base import FigureCodec
from src.persistence.codecs.json_codec import JSON_SUFFIX, JsonFigureCodec
from src.persistence.codecs.text_codec import TXT_SUFFIX, TextFigureCodec, format_number, parse_number
from src.persistence.codecs.xml_stub import XML_SUFFIX, XmlFigureStub

__all__ = [
    "FigureCodec",
    "JSON_SUFFIX",
    "JsonFigureCodec",
    "TXT_SUFFIX",
    "TextFigureCodec",
    "XML_SUFFIX",
    "XmlFigureStub",
    "format_number",
    "parse_number",
]
