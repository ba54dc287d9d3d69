# tests/test_enums.py
import enum

from textformat.enums import TextFormat


def test_text_format_is_enum():
    assert issubclass(TextFormat, enum.Enum)


def test_text_format_values():
    assert {f.value for f in TextFormat} == {
        "plain",
        "markdown",
        "ascii",
        "code",
        "html",
        "json",
        "xml",
    }


def test_text_format_lookup_by_value():
    assert TextFormat("ascii") is TextFormat.ASCII
