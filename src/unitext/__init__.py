"""Unicode text values addressed by codepoint offsets."""

from .text import (
    BadIndex,
    ConversionFailed,
    DecodeError,
    EncodeError,
    MutableText,
    NotFound,
    Text,
    TextError,
    TextProtocol,
    TextTooShort,
    as_text,
)

__all__ = [
    "text",
    "runtime",
    "Text",
    "MutableText",
    "TextProtocol",
    "as_text",
    "TextError",
    "BadIndex",
    "TextTooShort",
    "NotFound",
    "ConversionFailed",
    "DecodeError",
    "EncodeError",
]

__version__ = "0.1.0"
