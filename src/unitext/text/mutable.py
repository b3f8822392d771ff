"""Single-owner mutable cell holding one ``Text``."""

from __future__ import annotations

from functools import total_ordering
from typing import (
    Any,
    Callable,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    Type,
    TypeVar,
)

from unitext.runtime.telemetry import operation_span

from . import codecs
from .errors import BadIndex
from .value import RegexInput, Text, TextInput, as_text

T = TypeVar("T")
Y = TypeVar("Y")


@total_ordering
class MutableText:
    """Replaceable holder of exactly one current ``Text``.

    Reads forward to the held value. Every ``become_*`` method computes the
    matching pure operation and swaps the result in with a single rebinding;
    when the operation raises, the held value is left untouched.

    Instances are meant for one writer at a time. Callers that share a cell
    across threads must provide their own locking.
    """

    __slots__ = ("_text", "_logger_name")

    __pydantic_serializer__ = codecs.STRING_SERIALIZER

    def __init__(
        self, value: Optional[TextInput] = None, *, logger_name: Optional[str] = None
    ) -> None:
        self._text = Text() if value is None else as_text(value)
        self._logger_name = logger_name

    @classmethod
    def empty(cls) -> "MutableText":
        return cls()

    @classmethod
    def from_text(cls, text: Text) -> "MutableText":
        return cls(text)

    @classmethod
    def from_utf8_bytes(cls, data: bytes) -> "MutableText":
        return cls(Text.from_utf8_bytes(data))

    @classmethod
    def from_hex(cls, text: TextInput) -> "MutableText":
        return cls(Text.from_hex(text))

    @classmethod
    def from_base64(cls, text: TextInput) -> "MutableText":
        return cls(Text.from_base64(text))

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> Any:
        return codecs.string_schema(cls)

    @property
    def text(self) -> Text:
        return self._text

    def become(self, value: TextInput) -> None:
        """Replace the held value unconditionally."""

        self._become("become", lambda: value)

    def _become(
        self, operation: str, compute: Callable[[], TextInput], **arguments: Any
    ) -> None:
        with operation_span(
            operation,
            arguments={"count": self._text.count(), **arguments},
            logger_name=self._logger_name,
        ) as handle:
            result = as_text(compute())
            handle.note("result_count", result.count())
        self._text = result

    # -- value protocol ---------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MutableText):
            return NotImplemented
        return self._text == other._text

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MutableText):
            return NotImplemented
        return self._text < other._text

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return self._text.count()

    def __iter__(self) -> Iterator[Text]:
        return iter(self._text)

    def __contains__(self, item: object) -> bool:
        return item in self._text

    def __str__(self) -> str:
        return str(self._text)

    def __repr__(self) -> str:
        return f"MutableText({self._text.to_utf8_string()!r})"

    # -- reads --------------------------------------------------------------

    def to_text(self) -> Text:
        return self._text

    def to_utf8_bytes(self) -> bytes:
        return self._text.to_utf8_bytes()

    def to_utf8_string(self) -> str:
        return self._text.to_utf8_string()

    def to_hex(self) -> Text:
        return self._text.to_hex()

    def to_base64(self) -> Text:
        return self._text.to_base64()

    def to_int(self) -> int:
        return self._text.to_int()

    def from_json(self, type_: Type[T] = Any) -> T:  # type: ignore[assignment]
        return self._text.from_json(type_)

    def count(self) -> int:
        return self._text.count()

    def is_empty(self) -> bool:
        return self._text.is_empty()

    def substring(self, start_inclusive: int, end_exclusive: int) -> Text:
        return self._text.substring(start_inclusive, end_exclusive)

    def index_of(self, needle: TextInput) -> int:
        return self._text.index_of(needle)

    def last_index_of(self, needle: TextInput) -> int:
        return self._text.last_index_of(needle)

    def split_at(self, index: int, gap_length: int = 0) -> Tuple[Text, Text]:
        return self._text.split_at(index, gap_length)

    def split_on(self, value: TextInput) -> Tuple[Text, Text]:
        return self._text.split_on(value)

    def split_on_last(self, value: TextInput) -> Tuple[Text, Text]:
        return self._text.split_on_last(value)

    def split(self, separator: TextInput) -> List[Text]:
        return self._text.split(separator)

    def contains_substring(self, subtext: TextInput) -> bool:
        return self._text.contains_substring(subtext)

    def starts_with(self, prefix: TextInput) -> bool:
        return self._text.starts_with(prefix)

    def ends_with(self, suffix: TextInput) -> bool:
        return self._text.ends_with(suffix)

    def surrounded_by(self, prefix: TextInput, suffix: TextInput) -> bool:
        return self._text.surrounded_by(prefix, suffix)

    def substring_regex(self, pattern: RegexInput) -> Text:
        return self._text.substring_regex(pattern)

    def contains_regex(self, pattern: RegexInput) -> bool:
        return self._text.contains_regex(pattern)

    def first(self) -> Text:
        return self._text.first()

    def last(self) -> Text:
        return self._text.last()

    def drop_first(self) -> Text:
        return self._text.drop_first()

    def drop_last(self) -> Text:
        return self._text.drop_last()

    def drop_prefix(self, prefix: TextInput) -> Text:
        return self._text.drop_prefix(prefix)

    def drop_suffix(self, suffix: TextInput) -> Text:
        return self._text.drop_suffix(suffix)

    def fan(self) -> List[Text]:
        return self._text.fan()

    def trim(self) -> Text:
        return self._text.trim()

    def join(self, parts: Sequence[TextInput]) -> Text:
        return self._text.join(parts)

    def prepend(self, prefix: TextInput) -> Text:
        return self._text.prepend(prefix)

    def append(self, suffix: TextInput) -> Text:
        return self._text.append(suffix)

    def uppercase(self) -> Text:
        return self._text.uppercase()

    def lowercase(self) -> Text:
        return self._text.lowercase()

    def uppercase_first_letter(self) -> Text:
        return self._text.uppercase_first_letter()

    def reverse(self) -> Text:
        return self._text.reverse()

    def lines(self, separator: Optional[TextInput] = None) -> List[Text]:
        return self._text.lines(separator)

    def filter(self, keep: Callable[[str], bool]) -> Text:
        return self._text.filter(keep)

    def compact_map(self, transform: Callable[[Text], Optional[Y]]) -> List[Y]:
        return self._text.compact_map(transform)

    def try_compact_map(
        self,
        transform: Callable[[Text], Optional[Y]],
        exceptions: Tuple[Type[BaseException], ...] = (Exception,),
    ) -> List[Y]:
        return self._text.try_compact_map(transform, exceptions)

    # -- writes -------------------------------------------------------------

    def become_substring(self, start_inclusive: int, end_exclusive: int) -> None:
        self._become(
            "become_substring",
            lambda: self._text.substring(start_inclusive, end_exclusive),
            start=start_inclusive,
            end=end_exclusive,
        )

    def become_split_head(self, index: int, gap_length: int = 0) -> None:
        self._become(
            "become_split_head",
            lambda: self._text.split_at(index, gap_length)[0],
            index=index,
            gap_length=gap_length,
        )

    def become_split_tail(self, index: int, gap_length: int = 0) -> None:
        self._become(
            "become_split_tail",
            lambda: self._text.split_at(index, gap_length)[1],
            index=index,
            gap_length=gap_length,
        )

    def become_split_head_on(self, value: TextInput) -> None:
        self._become(
            "become_split_head_on", lambda: self._text.split_on(value)[0], value=value
        )

    def become_split_tail_on(self, value: TextInput) -> None:
        self._become(
            "become_split_tail_on", lambda: self._text.split_on(value)[1], value=value
        )

    def become_split_head_on_last(self, value: TextInput) -> None:
        self._become(
            "become_split_head_on_last",
            lambda: self._text.split_on_last(value)[0],
            value=value,
        )

    def become_split_tail_on_last(self, value: TextInput) -> None:
        self._become(
            "become_split_tail_on_last",
            lambda: self._text.split_on_last(value)[1],
            value=value,
        )

    def become_split(self, separator: TextInput, index: int) -> None:
        """Become part ``index`` of ``split(separator)``."""

        self._become(
            "become_split",
            lambda: _pick(self._text.split(separator), index),
            separator=separator,
            index=index,
        )

    def become_line(self, index: int, separator: Optional[TextInput] = None) -> None:
        self._become(
            "become_line",
            lambda: _pick(self._text.lines(separator), index),
            index=index,
            separator=separator,
        )

    def become_first(self) -> None:
        self._become("become_first", self._text.first)

    def become_last(self) -> None:
        self._become("become_last", self._text.last)

    def become_drop_first(self) -> None:
        self._become("become_drop_first", self._text.drop_first)

    def become_drop_last(self) -> None:
        self._become("become_drop_last", self._text.drop_last)

    def become_drop_prefix(self, prefix: TextInput) -> None:
        self._become(
            "become_drop_prefix", lambda: self._text.drop_prefix(prefix), prefix=prefix
        )

    def become_drop_suffix(self, suffix: TextInput) -> None:
        self._become(
            "become_drop_suffix", lambda: self._text.drop_suffix(suffix), suffix=suffix
        )

    def become_trimmed(self) -> None:
        self._become("become_trimmed", self._text.trim)

    def become_joined(self, parts: Sequence[TextInput]) -> None:
        """Become ``parts`` joined with the held value as separator."""

        self._become("become_joined", lambda: self._text.join(parts), parts=len(parts))

    def become_prepended(self, prefix: TextInput) -> None:
        self._become(
            "become_prepended", lambda: self._text.prepend(prefix), prefix=prefix
        )

    def become_appended(self, suffix: TextInput) -> None:
        self._become(
            "become_appended", lambda: self._text.append(suffix), suffix=suffix
        )

    def become_uppercase(self) -> None:
        self._become("become_uppercase", self._text.uppercase)

    def become_lowercase(self) -> None:
        self._become("become_lowercase", self._text.lowercase)

    def become_uppercase_first_letter(self) -> None:
        self._become(
            "become_uppercase_first_letter", self._text.uppercase_first_letter
        )

    def become_reversed(self) -> None:
        self._become("become_reversed", self._text.reverse)

    def become_filtered(self, keep: Callable[[str], bool]) -> None:
        self._become("become_filtered", lambda: self._text.filter(keep))

    def become_substring_regex(self, pattern: RegexInput) -> None:
        self._become(
            "become_substring_regex",
            lambda: self._text.substring_regex(pattern),
            pattern=getattr(pattern, "pattern", pattern),
        )

    def become_hex(self) -> None:
        self._become("become_hex", self._text.to_hex)

    def become_from_hex(self) -> None:
        self._become("become_from_hex", lambda: Text.from_hex(self._text))

    def become_base64(self) -> None:
        self._become("become_base64", self._text.to_base64)

    def become_from_base64(self) -> None:
        self._become("become_from_base64", lambda: Text.from_base64(self._text))


def _pick(parts: List[Text], index: int) -> Text:
    if index < 0 or index >= len(parts):
        raise BadIndex(
            index, message=f"Part {index} out of range for {len(parts)} parts"
        )
    return parts[index]


__all__ = ["MutableText"]
