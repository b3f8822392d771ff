"""Codepoint-indexed text values and the mutable cell wrapping them."""

from .errors import (
    BadIndex,
    ConversionFailed,
    DecodeError,
    EncodeError,
    NotFound,
    TextError,
    TextTooShort,
)
from .mutable import MutableText
from .protocol import TextProtocol
from .scalars import is_ascii_digit, is_letter, is_numeric, is_whitespace
from .value import LINE_SEPARATORS, Text, TextInput, as_text

__all__ = [
    "Text",
    "TextInput",
    "MutableText",
    "TextProtocol",
    "LINE_SEPARATORS",
    "as_text",
    "is_ascii_digit",
    "is_letter",
    "is_numeric",
    "is_whitespace",
    "TextError",
    "BadIndex",
    "TextTooShort",
    "NotFound",
    "ConversionFailed",
    "DecodeError",
    "EncodeError",
]
