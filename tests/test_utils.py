# tests/test_utils.py
from __future__ import annotations

from textformat._utils import clamp, has_unicode_art, is_blank, normalize_newlines


def test_normalize_newlines():
    assert normalize_newlines("a\r\nb\rc\nd") == "a\nb\nc\nd"


def test_normalize_newlines_keeps_blank_lines():
    assert normalize_newlines("a\r\n\r\nb") == "a\n\nb"


def test_clamp():
    assert clamp(-0.1) == 0.0
    assert clamp(1.3) == 1.0
    assert clamp(0.42) == 0.42


def test_has_unicode_art_ranges():
    assert has_unicode_art("─")
    assert has_unicode_art("█")
    assert has_unicode_art("⣿")
    assert has_unicode_art("■")
    assert not has_unicode_art("plain -+| text")


def test_has_unicode_art_without_geometric():
    assert not has_unicode_art("■", include_geometric=False)
    assert has_unicode_art("┌", include_geometric=False)


def test_is_blank():
    assert is_blank("")
    assert is_blank(" \n\t ")
    assert is_blank("\ufeff")
    assert is_blank("\ufeff  \n")
    assert not is_blank("\ufeffx")
