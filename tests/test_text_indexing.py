import pytest

from unitext.text import BadIndex, Text
from unitext.text.indexing import (
    byte_offset,
    byte_range,
    codepoint_offset,
    codepoint_starts,
    ensure_offset,
)


def test_codepoint_starts_tracks_multibyte_scalars() -> None:
    starts = codepoint_starts("aé😀".encode("utf-8"))

    assert starts == (0, 1, 3, 7)


def test_codepoint_starts_empty() -> None:
    assert codepoint_starts(b"") == (0,)


def test_byte_range_translates_codepoint_offsets() -> None:
    starts = codepoint_starts("héllo".encode("utf-8"))

    assert byte_range(starts, 1, 3) == (1, 4)
    assert byte_offset(starts, 5) == 6


def test_ensure_offset_rejects_out_of_range() -> None:
    starts = codepoint_starts(b"abc")

    assert ensure_offset(starts, 3) == 3
    with pytest.raises(BadIndex) as excinfo:
        ensure_offset(starts, 4)
    assert excinfo.value.offset == 4
    with pytest.raises(BadIndex):
        ensure_offset(starts, -1)


def test_codepoint_offset_rejects_mid_codepoint_bytes() -> None:
    starts = codepoint_starts("é".encode("utf-8"))

    assert codepoint_offset(starts, 2) == 1
    with pytest.raises(BadIndex):
        codepoint_offset(starts, 1)


def test_substring_uses_codepoint_offsets() -> None:
    text = Text("héllo wörld")

    assert text.substring(1, 4) == Text("éll")
    assert text.substring(6, 11) == Text("wörld")


def test_substring_with_astral_scalars() -> None:
    text = Text("a😀b😀c")

    assert text.count() == 5
    assert text.substring(1, 4) == Text("😀b😀")


def test_substring_empty_range() -> None:
    assert Text("abc").substring(0, 0) == Text("")
    assert Text("").substring(0, 0).is_empty()
    assert Text("abc").substring(3, 3) == Text()


def test_substring_rejects_bad_bounds() -> None:
    text = Text("abc")

    with pytest.raises(BadIndex) as excinfo:
        text.substring(2, 1)
    assert excinfo.value.offset == 2
    with pytest.raises(BadIndex) as excinfo:
        text.substring(0, 4)
    assert excinfo.value.offset == 4
    with pytest.raises(BadIndex):
        text.substring(5, 10)
    with pytest.raises(IndexError):
        text.substring(-1, 2)


def test_count_is_codepoints_not_graphemes() -> None:
    combining = Text("e\u0301")

    assert combining.count() == 2
    assert len(combining) == 2
    assert len(combining.to_utf8_bytes()) == 3


def test_split_at_gap_length() -> None:
    head, tail = Text("key=value").split_at(3, 1)

    assert head == Text("key")
    assert tail == Text("value")


def test_split_at_end_of_text() -> None:
    head, tail = Text("añb").split_at(3)

    assert head == Text("añb")
    assert tail == Text("")


def test_split_at_rejects_gap_past_end() -> None:
    with pytest.raises(BadIndex) as excinfo:
        Text("abc").split_at(2, 2)
    assert excinfo.value.offset == 4
    with pytest.raises(BadIndex):
        Text("abc").split_at(4)
    with pytest.raises(BadIndex):
        Text("abc").split_at(1, -1)
