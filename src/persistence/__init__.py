"""Format-dispatching persistence for figures."""

from src.persistence.errors import (
    FormatNotImplementedError,
    InvalidDataError,
    NumericParseError,
    PersistenceError,
    StructuredDataError,
    UnsupportedFormatError,
)
from src.persistence.registry import FormatRegistry, default_registry, path_suffix
from src.persistence.service import PersistenceService, load_figure, save_figure

__all__ = [
    "FormatNotImplementedError",
    "FormatRegistry",
    "InvalidDataError",
    "NumericParseError",
    "PersistenceError",
    "PersistenceService",
    "StructuredDataError",
    "UnsupportedFormatError",
    "default_registry",
    "load_figure",
    "path_suffix",
    "save_figure",
]
