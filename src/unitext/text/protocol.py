"""Read-only capability surface shared by ``Text`` and ``MutableText``."""

from __future__ import annotations

from typing import (
    Any,
    Callable,
    List,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    TypeVar,
    runtime_checkable,
)

from .value import RegexInput, Text, TextInput

Y = TypeVar("Y")


@runtime_checkable
class TextProtocol(Protocol):
    """Every non-mutating text operation.

    ``Text`` implements it directly; ``MutableText`` forwards each call to its
    current value. Mutation (``become_*``) is deliberately not part of it.
    """

    def to_text(self) -> Text: ...

    def to_utf8_bytes(self) -> bytes: ...

    def to_utf8_string(self) -> str: ...

    def to_hex(self) -> Text: ...

    def to_base64(self) -> Text: ...

    def to_int(self) -> int: ...

    def from_json(self, type_: Any = ...) -> Any: ...

    def count(self) -> int: ...

    def is_empty(self) -> bool: ...

    def substring(self, start_inclusive: int, end_exclusive: int) -> Text: ...

    def index_of(self, needle: TextInput) -> int: ...

    def last_index_of(self, needle: TextInput) -> int: ...

    def split_at(self, index: int, gap_length: int = 0) -> Tuple[Text, Text]: ...

    def split_on(self, value: TextInput) -> Tuple[Text, Text]: ...

    def split_on_last(self, value: TextInput) -> Tuple[Text, Text]: ...

    def split(self, separator: TextInput) -> List[Text]: ...

    def contains_substring(self, subtext: TextInput) -> bool: ...

    def starts_with(self, prefix: TextInput) -> bool: ...

    def ends_with(self, suffix: TextInput) -> bool: ...

    def surrounded_by(self, prefix: TextInput, suffix: TextInput) -> bool: ...

    def substring_regex(self, pattern: RegexInput) -> Text: ...

    def contains_regex(self, pattern: RegexInput) -> bool: ...

    def first(self) -> Text: ...

    def last(self) -> Text: ...

    def drop_first(self) -> Text: ...

    def drop_last(self) -> Text: ...

    def drop_prefix(self, prefix: TextInput) -> Text: ...

    def drop_suffix(self, suffix: TextInput) -> Text: ...

    def fan(self) -> List[Text]: ...

    def trim(self) -> Text: ...

    def join(self, parts: Sequence[TextInput]) -> Text: ...

    def prepend(self, prefix: TextInput) -> Text: ...

    def append(self, suffix: TextInput) -> Text: ...

    def uppercase(self) -> Text: ...

    def lowercase(self) -> Text: ...

    def uppercase_first_letter(self) -> Text: ...

    def reverse(self) -> Text: ...

    def lines(self, separator: Optional[TextInput] = None) -> List[Text]: ...

    def filter(self, keep: Callable[[str], bool]) -> Text: ...

    def compact_map(self, transform: Callable[[Text], Optional[Y]]) -> List[Y]: ...

    def try_compact_map(
        self,
        transform: Callable[[Text], Optional[Y]],
        exceptions: Tuple[type[BaseException], ...] = (Exception,),
    ) -> List[Y]: ...


__all__ = ["TextProtocol"]
