"""Immutable, codepoint-indexed Unicode text value."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import (
    Any,
    Callable,
    Iterator,
    List,
    Optional,
    Pattern,
    Sequence,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from . import codecs
from .errors import BadIndex, NotFound, TextTooShort
from .indexing import (
    Starts,
    byte_range,
    codepoint_count,
    codepoint_offset,
    codepoint_starts,
    ensure_offset,
)
from .scalars import WHITE_SPACE

T = TypeVar("T")
Y = TypeVar("Y")

TextInput = Union["Text", str, bytes, bytearray, memoryview]
RegexInput = Union[str, Pattern[str]]

LINE_SEPARATORS = ("\r\n", "\n\r", "\r", "\n")


@dataclass(frozen=True, slots=True, order=True, init=False, repr=False)
class Text:
    """Immutable Unicode text addressed by codepoint offsets.

    The value owns validated UTF-8 bytes. Positions accepted and returned by
    every method are codepoint offsets in ``[0, count()]``; the translation to
    byte offsets lives in :mod:`unitext.text.indexing`. Ordering is
    lexicographic over codepoints, which for UTF-8 matches byte ordering.
    """

    data: bytes
    _starts: Starts = field(compare=False)

    __pydantic_serializer__ = codecs.STRING_SERIALIZER

    def __init__(self, value: str = "") -> None:
        if not isinstance(value, str):
            raise TypeError(
                f"Text() takes a str, got {type(value).__name__}; "
                "use Text.from_utf8_bytes for bytes"
            )
        data = codecs.encode_utf8(value)
        object.__setattr__(self, "data", data)
        object.__setattr__(self, "_starts", codepoint_starts(data))

    @classmethod
    def _wrap(cls, data: bytes) -> "Text":
        # caller guarantees ``data`` is valid UTF-8
        text = cls.__new__(cls)
        object.__setattr__(text, "data", data)
        object.__setattr__(text, "_starts", codepoint_starts(data))
        return text

    def _slice(self, byte_start: int, byte_end: int) -> "Text":
        return Text._wrap(self.data[byte_start:byte_end])

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> Any:
        # JSON form is the plain string, never the dataclass fields
        return codecs.string_schema(cls)

    # -- construction & conversion -------------------------------------

    @classmethod
    def from_utf8_bytes(cls, data: Union[bytes, bytearray, memoryview]) -> "Text":
        """Validate ``data`` as UTF-8; raises ``DecodeError`` otherwise."""

        raw = bytes(data)
        codecs.decode_utf8(raw)
        return cls._wrap(raw)

    @classmethod
    def from_hex(cls, text: TextInput) -> "Text":
        return cls.from_utf8_bytes(codecs.decode_hex(as_text(text).data))

    @classmethod
    def from_base64(cls, text: TextInput) -> "Text":
        return cls.from_utf8_bytes(codecs.decode_base64(as_text(text).data))

    @classmethod
    def to_json(cls, value: Any, type_: Optional[Any] = None) -> "Text":
        """Serialize any JSON-compatible value (or pydantic/dataclass model)."""

        return cls._wrap(codecs.encode_json(value, type_))

    def from_json(self, type_: Type[T] = Any) -> T:  # type: ignore[assignment]
        """Parse this text as JSON and validate it as ``type_``."""

        return codecs.decode_json(self.data, type_)

    def to_utf8_bytes(self) -> bytes:
        return self.data

    def to_utf8_string(self) -> str:
        return self.data.decode("utf-8")

    def to_text(self) -> "Text":
        return self

    def to_hex(self) -> "Text":
        return Text._wrap(codecs.encode_hex(self.data))

    def to_base64(self) -> "Text":
        return Text._wrap(codecs.encode_base64(self.data))

    def to_int(self) -> int:
        return codecs.parse_int(self.to_utf8_string())

    # -- size -----------------------------------------------------------

    def count(self) -> int:
        """Number of codepoints (not bytes, not grapheme clusters)."""

        return codepoint_count(self._starts)

    def is_empty(self) -> bool:
        return not self.data

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator["Text"]:
        return iter(self.fan())

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, (Text, str, bytes, bytearray, memoryview)):
            return False
        return self.contains_substring(item)

    def __add__(self, other: object) -> "Text":
        if not isinstance(other, (Text, str)):
            return NotImplemented
        return self.append(other)

    def __str__(self) -> str:
        return self.to_utf8_string()

    def __repr__(self) -> str:
        return f"Text({self.to_utf8_string()!r})"

    # -- slicing & search -----------------------------------------------

    def substring(self, start_inclusive: int, end_exclusive: int) -> "Text":
        """Return codepoints ``[start_inclusive, end_exclusive)``.

        Raises ``BadIndex`` unless ``0 <= start <= end <= count()``.
        """

        byte_start, byte_end = byte_range(self._starts, start_inclusive, end_exclusive)
        return self._slice(byte_start, byte_end)

    def index_of(self, needle: TextInput) -> int:
        """Codepoint offset of the first occurrence of ``needle``.

        An empty needle matches at every position, so it is found at 0.
        """

        target = as_text(needle)
        # a valid UTF-8 needle can only match on codepoint boundaries
        position = self.data.find(target.data)
        if position < 0:
            raise NotFound(target)
        return codepoint_offset(self._starts, position)

    def last_index_of(self, needle: TextInput) -> int:
        """Codepoint offset of the last occurrence.

        An empty needle matches at every position, so it is found at ``count()``.
        """

        target = as_text(needle)
        position = self.data.rfind(target.data)
        if position < 0:
            raise NotFound(target)
        return codepoint_offset(self._starts, position)

    def split_at(self, index: int, gap_length: int = 0) -> Tuple["Text", "Text"]:
        """Cut at ``index``, dropping ``gap_length`` codepoints at the cut."""

        head_end = ensure_offset(self._starts, index)
        if gap_length < 0:
            raise BadIndex(
                gap_length, message=f"Gap length {gap_length} must not be negative"
            )
        tail_start = ensure_offset(self._starts, head_end + gap_length)
        return (
            self._slice(0, self._starts[head_end]),
            self._slice(self._starts[tail_start], len(self.data)),
        )

    def split_on(self, value: TextInput) -> Tuple["Text", "Text"]:
        target = as_text(value)
        return self.split_at(self.index_of(target), target.count())

    def split_on_last(self, value: TextInput) -> Tuple["Text", "Text"]:
        target = as_text(value)
        return self.split_at(self.last_index_of(target), target.count())

    def split(self, separator: TextInput) -> List["Text"]:
        """Split on every non-overlapping ``separator``.

        An empty separator leaves the text whole and yields ``[self]``.
        """

        target = as_text(separator)
        if target.is_empty():
            return [self]
        return [Text._wrap(part) for part in self.data.split(target.data)]

    def contains_substring(self, subtext: TextInput) -> bool:
        return as_text(subtext).data in self.data

    def starts_with(self, prefix: TextInput) -> bool:
        return self.data.startswith(as_text(prefix).data)

    def ends_with(self, suffix: TextInput) -> bool:
        return self.data.endswith(as_text(suffix).data)

    def surrounded_by(self, prefix: TextInput, suffix: TextInput) -> bool:
        """True when ``prefix`` and ``suffix`` fit at the ends without overlapping."""

        head, tail = as_text(prefix), as_text(suffix)
        if len(head.data) + len(tail.data) > len(self.data):
            return False
        return self.starts_with(head) and self.ends_with(tail)

    def substring_regex(self, pattern: RegexInput) -> "Text":
        match = re.search(pattern, self.to_utf8_string())
        if match is None:
            raise NotFound(pattern)
        return Text(match.group(0))

    def contains_regex(self, pattern: RegexInput) -> bool:
        return re.search(pattern, self.to_utf8_string()) is not None

    def first(self) -> "Text":
        if self.is_empty():
            raise TextTooShort("first")
        return self.substring(0, 1)

    def last(self) -> "Text":
        if self.is_empty():
            raise TextTooShort("last")
        count = self.count()
        return self.substring(count - 1, count)

    def drop_first(self) -> "Text":
        if self.is_empty():
            raise TextTooShort("drop_first")
        return self.substring(1, self.count())

    def drop_last(self) -> "Text":
        if self.is_empty():
            raise TextTooShort("drop_last")
        return self.substring(0, self.count() - 1)

    def drop_prefix(self, prefix: TextInput) -> "Text":
        target = as_text(prefix)
        if not self.starts_with(target):
            return self
        return self._slice(len(target.data), len(self.data))

    def drop_suffix(self, suffix: TextInput) -> "Text":
        target = as_text(suffix)
        if not self.ends_with(target):
            return self
        return self._slice(0, len(self.data) - len(target.data))

    def fan(self) -> List["Text"]:
        """One single-codepoint ``Text`` per codepoint, in order."""

        starts = self._starts
        return [self._slice(a, b) for a, b in zip(starts, starts[1:])]

    # -- structural transforms ------------------------------------------

    def trim(self) -> "Text":
        """Strip Unicode White_Space scalars (line breaks included) from both ends."""

        return Text(self.to_utf8_string().strip(WHITE_SPACE))

    def join(self, parts: Sequence[TextInput]) -> "Text":
        return Text._wrap(self.data.join(as_text(part).data for part in parts))

    def prepend(self, prefix: TextInput) -> "Text":
        return as_text(prefix).append(self)

    def append(self, suffix: TextInput) -> "Text":
        return Text._wrap(self.data + as_text(suffix).data)

    def uppercase(self) -> "Text":
        return Text(self.to_utf8_string().upper())

    def lowercase(self) -> "Text":
        return Text(self.to_utf8_string().lower())

    def uppercase_first_letter(self) -> "Text":
        if self.is_empty():
            raise TextTooShort("uppercase_first_letter")
        return self.first().uppercase().append(self.drop_first())

    def reverse(self) -> "Text":
        return Text(self.to_utf8_string()[::-1])

    def lines(self, separator: Optional[TextInput] = None) -> List["Text"]:
        """Split into trimmed lines.

        Without ``separator`` the first of ``LINE_SEPARATORS`` found in the
        text is used; text without any line break yields a single line.
        """

        if separator is not None:
            return [part.trim() for part in self.split(separator)]
        for candidate in LINE_SEPARATORS:
            if self.contains_substring(candidate):
                return self.lines(candidate)
        return [self.trim()]

    def filter(self, keep: Callable[[str], bool]) -> "Text":
        """Keep the codepoints for which ``keep(scalar)`` is true."""

        kept = (scalar for scalar in self.to_utf8_string() if keep(scalar))
        return Text("".join(kept))

    def compact_map(self, transform: Callable[["Text"], Optional[Y]]) -> List[Y]:
        results = (transform(scalar) for scalar in self.fan())
        return [result for result in results if result is not None]

    def try_compact_map(
        self,
        transform: Callable[["Text"], Optional[Y]],
        exceptions: Tuple[Type[BaseException], ...] = (Exception,),
    ) -> List[Y]:
        """Like ``compact_map``, but elements whose ``transform`` raises are dropped."""

        results: List[Y] = []
        for scalar in self.fan():
            try:
                result = transform(scalar)
            except exceptions:
                continue
            if result is not None:
                results.append(result)
        return results


def as_text(value: TextInput) -> Text:
    """Coerce ``str``, UTF-8 bytes or ``Text`` into ``Text``."""

    if isinstance(value, Text):
        return value
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return Text.from_utf8_bytes(value)
    raise TypeError(f"Cannot interpret {type(value).__name__} as text")


__all__ = ["Text", "TextInput", "LINE_SEPARATORS", "as_text"]
