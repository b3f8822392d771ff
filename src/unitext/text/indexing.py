"""Codepoint to byte offset translation for UTF-8 storage.

Every slicing operation on ``Text`` goes through this module. A ``Starts``
table lists the byte offset at which each codepoint begins, followed by the
total byte length, so ``starts[i]`` is the byte offset of codepoint ``i`` for
every ``i`` in ``[0, count]``.
"""

from __future__ import annotations

import operator
from bisect import bisect_left
from typing import Tuple

from .errors import BadIndex

Starts = Tuple[int, ...]


def codepoint_starts(data: bytes) -> Starts:
    """Build the offset table for already validated UTF-8 ``data``."""

    # continuation bytes are 0b10xxxxxx
    offsets = [index for index, byte in enumerate(data) if byte & 0xC0 != 0x80]
    offsets.append(len(data))
    return tuple(offsets)


def codepoint_count(starts: Starts) -> int:
    return len(starts) - 1


def ensure_offset(starts: Starts, offset: int) -> int:
    """Return ``offset`` as an int if it lies in ``[0, count]``."""

    value = operator.index(offset)
    if value < 0 or value > codepoint_count(starts):
        raise BadIndex(value)
    return value


def byte_offset(starts: Starts, offset: int) -> int:
    return starts[ensure_offset(starts, offset)]


def byte_range(starts: Starts, start: int, end: int) -> Tuple[int, int]:
    """Translate the half-open codepoint range ``[start, end)`` to bytes."""

    start = ensure_offset(starts, start)
    end = ensure_offset(starts, end)
    if start > end:
        raise BadIndex(
            start, message=f"Range start {start} is past range end {end}"
        )
    return starts[start], starts[end]


def codepoint_offset(starts: Starts, offset: int) -> int:
    """Translate a byte offset that sits on a codepoint boundary."""

    position = bisect_left(starts, offset)
    if position == len(starts) or starts[position] != offset:
        raise BadIndex(
            offset, message=f"Byte offset {offset} is inside a codepoint"
        )
    return position


__all__ = [
    "Starts",
    "codepoint_starts",
    "codepoint_count",
    "ensure_offset",
    "byte_offset",
    "byte_range",
    "codepoint_offset",
]
