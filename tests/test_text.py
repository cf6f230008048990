"""Tests for text utilities."""

from gpt_translate.utils.text import normalize_for_display, safe_truncate


def test_short_text_untouched():
    assert safe_truncate("hello", 10) == "hello"


def test_truncates_at_word_boundary():
    assert safe_truncate("hello wonderful world", 12) == "hello..."


def test_truncates_hard_without_boundary():
    assert safe_truncate("abcdefghijklmnop", 5) == "abcde..."


def test_normalize_for_display():
    text = "bad\x00 value   here\n\n\n\nnext"
    assert normalize_for_display(text) == "bad value here\n\nnext"
    assert normalize_for_display("") == ""
