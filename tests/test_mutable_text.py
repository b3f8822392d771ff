import pytest

from unitext.text import (
    BadIndex,
    ConversionFailed,
    DecodeError,
    MutableText,
    NotFound,
    Text,
    TextProtocol,
    TextTooShort,
    is_ascii_digit,
)


def make_cell(value: str = "abc") -> MutableText:
    return MutableText(Text(value))


def test_become_uppercase_then_failed_substring_keeps_value() -> None:
    cell = make_cell("abc")

    cell.become_uppercase()
    assert cell.text == Text("ABC")

    with pytest.raises(BadIndex):
        cell.become_substring(5, 10)
    assert cell.text == Text("ABC")


def test_construction_variants() -> None:
    assert MutableText().text == Text("")
    assert MutableText.empty().is_empty()
    assert MutableText("héllo").text == Text("héllo")
    assert MutableText(b"bytes").text == Text("bytes")
    assert MutableText.from_text(Text("t")).text == Text("t")
    assert MutableText.from_utf8_bytes("ü".encode("utf-8")).text == Text("ü")
    assert MutableText.from_hex("6869").text == Text("hi")
    assert MutableText.from_base64("aGk=").text == Text("hi")


def test_factory_conversion_failures() -> None:
    with pytest.raises(ConversionFailed):
        MutableText.from_hex("xyz")
    with pytest.raises(ConversionFailed):
        MutableText.from_base64("***")
    with pytest.raises(ConversionFailed):
        MutableText.from_utf8_bytes(b"\xc0")


def test_become_replaces_unconditionally() -> None:
    cell = make_cell()

    cell.become(Text("next"))
    assert cell.text == Text("next")
    cell.become("plain")
    assert cell.text == Text("plain")


def test_become_with_invalid_bytes_keeps_value() -> None:
    cell = make_cell()

    with pytest.raises(ConversionFailed):
        cell.become(b"\xff")
    assert cell.text == Text("abc")


def test_reads_forward_without_mutating() -> None:
    cell = make_cell("path/to/file")

    assert cell.index_of("/") == 4
    assert cell.last_index_of("/") == 7
    assert cell.split_on_last("/") == (Text("path/to"), Text("file"))
    assert cell.substring(0, 4) == Text("path")
    assert cell.count() == 12
    assert cell.text == Text("path/to/file")


def test_both_types_satisfy_protocol() -> None:
    assert isinstance(Text("x"), TextProtocol)
    assert isinstance(make_cell(), TextProtocol)


def test_become_split_variants() -> None:
    cell = make_cell("key=value")

    cell.become_split_tail(3, 1)
    assert cell.text == Text("value")

    cell.become("key=value")
    cell.become_split_head(3)
    assert cell.text == Text("key")


def test_become_split_on_variants() -> None:
    cell = make_cell("a/b/c")

    cell.become_split_tail_on("/")
    assert cell.text == Text("b/c")
    cell.become_split_head_on("/")
    assert cell.text == Text("b")

    cell.become("a/b/c")
    cell.become_split_head_on_last("/")
    assert cell.text == Text("a/b")
    cell.become("a/b/c")
    cell.become_split_tail_on_last("/")
    assert cell.text == Text("c")


def test_become_split_on_missing_keeps_value() -> None:
    cell = make_cell("abc")

    with pytest.raises(NotFound):
        cell.become_split_head_on("/")
    assert cell.text == Text("abc")


def test_become_split_selects_part() -> None:
    cell = make_cell("x,y,z")

    cell.become_split(",", 0)
    assert cell.text == Text("x")

    cell.become("x,y,z")
    cell.become_split(",", 2)
    assert cell.text == Text("z")

    with pytest.raises(BadIndex):
        cell.become_split(",", 1)
    assert cell.text == Text("z")


def test_become_line() -> None:
    cell = make_cell(" one \n two ")

    cell.become_line(1)
    assert cell.text == Text("two")
    with pytest.raises(BadIndex):
        cell.become_line(-1)


def test_become_first_last_and_drops() -> None:
    cell = make_cell("«abc»")

    cell.become_drop_first()
    cell.become_drop_last()
    assert cell.text == Text("abc")
    cell.become_last()
    assert cell.text == Text("c")

    cell.become("abc")
    cell.become_first()
    assert cell.text == Text("a")


def test_become_on_empty_text_raises_too_short() -> None:
    cell = MutableText()

    for operation in (
        cell.become_first,
        cell.become_last,
        cell.become_drop_first,
        cell.become_drop_last,
        cell.become_uppercase_first_letter,
    ):
        with pytest.raises(TextTooShort):
            operation()
    assert cell.is_empty()


def test_become_prefix_suffix_and_concatenation() -> None:
    cell = make_cell("<body>")

    cell.become_drop_prefix("<")
    cell.become_drop_suffix(">")
    assert cell.text == Text("body")

    cell.become_prepended("[")
    cell.become_appended("]")
    assert cell.text == Text("[body]")


def test_become_joined_uses_value_as_separator() -> None:
    cell = make_cell(", ")

    cell.become_joined([Text("a"), Text("b")])
    assert cell.text == Text("a, b")


def test_become_text_transforms() -> None:
    cell = make_cell("  mixed Case 42  ")

    cell.become_trimmed()
    assert cell.text == Text("mixed Case 42")
    cell.become_lowercase()
    assert cell.text == Text("mixed case 42")
    cell.become_uppercase_first_letter()
    assert cell.text == Text("Mixed case 42")
    cell.become_reversed()
    assert cell.text == Text("24 esac dexiM")
    cell.become_filtered(is_ascii_digit)
    assert cell.text == Text("24")


def test_become_substring_regex() -> None:
    cell = make_cell("id: 7781 (active)")

    cell.become_substring_regex(r"\d+")
    assert cell.text == Text("7781")
    with pytest.raises(NotFound):
        cell.become_substring_regex(r"[a-z]")
    assert cell.text == Text("7781")


def test_become_codec_round_trips() -> None:
    cell = make_cell("hello")

    cell.become_hex()
    assert cell.text == Text("68656c6c6f")
    cell.become_from_hex()
    assert cell.text == Text("hello")

    cell.become_base64()
    assert cell.text == Text("aGVsbG8=")
    cell.become_from_base64()
    assert cell.text == Text("hello")


def test_become_from_hex_failure_keeps_value() -> None:
    cell = make_cell("not hex")

    with pytest.raises(ConversionFailed):
        cell.become_from_hex()
    assert cell.text == Text("not hex")


def test_equality_and_ordering() -> None:
    assert make_cell("a") == make_cell("a")
    assert make_cell("a") != make_cell("b")
    assert make_cell("a") < make_cell("b")
    assert make_cell("b") >= make_cell("a")
    with pytest.raises(TypeError):
        hash(make_cell())


def test_dunder_forwarding() -> None:
    cell = make_cell("añb")

    assert len(cell) == 3
    assert list(cell) == [Text("a"), Text("ñ"), Text("b")]
    assert "ñ" in cell
    assert str(cell) == "añb"
    assert repr(cell) == "MutableText('añb')"


def test_membership_accepts_bytes() -> None:
    cell = make_cell("abc")

    assert b"b" in cell
    assert memoryview(b"bc") in cell
    assert b"x" not in cell


def test_json_uses_plain_string_form() -> None:
    assert Text.to_json(MutableText("ab")) == Text('"ab"')
    assert Text.to_json({"cell": make_cell("é")}) == Text('{"cell":"é"}')
    assert Text('"ab"').from_json(MutableText) == MutableText("ab")
    with pytest.raises(DecodeError):
        Text('{"_text":"ab"}').from_json(MutableText)
