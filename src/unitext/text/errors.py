"""Error taxonomy shared by ``Text`` and ``MutableText``."""

from __future__ import annotations

from typing import Optional


class TextError(RuntimeError):
    """Base class for every failure raised by text operations."""


class BadIndex(TextError, IndexError):
    """Raised when a codepoint offset falls outside the valid range."""

    def __init__(self, offset: int, *, message: Optional[str] = None) -> None:
        super().__init__(message or f"Codepoint offset {offset} is out of range")
        self.offset = offset


class TextTooShort(BadIndex):
    """Raised when an operation needs at least one codepoint."""

    def __init__(self, operation: str) -> None:
        super().__init__(1, message=f"'{operation}' requires a non-empty text")
        self.operation = operation


class NotFound(TextError, LookupError):
    """Raised when a search needle does not occur in the haystack."""

    def __init__(self, needle: object) -> None:
        super().__init__(f"{needle!r} not found")
        self.needle = needle


class ConversionFailed(TextError, ValueError):
    """Raised when a codec cannot convert between bytes, text and values."""

    def __init__(self, source: str, reason: str = "") -> None:
        message = f"{source} conversion failed"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.source = source
        self.reason = reason


class DecodeError(ConversionFailed):
    """Raised when bytes or JSON cannot be decoded."""


class EncodeError(ConversionFailed):
    """Raised when a value cannot be encoded as JSON."""


__all__ = [
    "TextError",
    "BadIndex",
    "TextTooShort",
    "NotFound",
    "ConversionFailed",
    "DecodeError",
    "EncodeError",
]
