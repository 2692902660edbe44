import pytest

from warehousesim.lineedit import LineEditor


def test_digits_and_letters_accepted():
    editor = LineEditor("", 18, False)
    assert editor.feed_all("abc123") == "abc123"
    assert editor.finished is False


def test_uppercase_is_lowered():
    editor = LineEditor("", 18, False)
    assert editor.feed_all("AbC") == "abc"


def test_limit_is_enforced():
    editor = LineEditor("", 4, False)
    assert editor.feed_all("abcdefg") == "abcd"
    assert len(editor.text) == editor.limit


def test_backspace_removes_last():
    editor = LineEditor("", 18, False)
    assert editor.feed_all("abc\b\bx") == "ax"


def test_backspace_on_empty_is_ignored():
    editor = LineEditor("", 18, False)
    assert editor.feed_all("\b\ba") == "a"


def test_underscore_depends_on_option():
    assert LineEditor("", 18, False).feed_all("a_b") == "ab"
    assert LineEditor("", 18, True).feed_all("a_b") == "a_b"


def test_other_characters_ignored():
    editor = LineEditor("", 18, True)
    assert editor.feed_all("a-b c!") == "abc"


def test_enter_ends_input_and_stops_feeding():
    editor = LineEditor("", 18, False)
    assert editor.feed_all("ab\rcd") == "ab"
    assert editor.finished is True
    assert editor.feed("z") is True
    assert editor.text == "ab"


def test_newline_also_ends_input():
    editor = LineEditor("", 18, False)
    assert editor.feed("\n") is True


def test_feed_returns_false_while_editing():
    editor = LineEditor("", 18, False)
    assert editor.feed("a") is False


def test_existing_text_is_kept_and_editable():
    editor = LineEditor("ab", 18, False)
    assert editor.feed_all("\bz") == "az"


def test_bios_key_codes_use_low_byte():
    editor = LineEditor("", 18, False)
    editor.feed(0x0231)  # the "1" key
    editor.feed(ord("q"))
    assert editor.text == "1q"
    assert editor.feed(0x1C0D) is True  # Enter


def test_multi_character_key_rejected():
    with pytest.raises(ValueError):
        LineEditor("", 18, False).feed("ab")