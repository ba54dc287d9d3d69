"""Enumerations for textformat."""

import enum


class TextFormat(enum.Enum):
    """Structural format assigned to a block of text."""

    PLAIN = "plain"
    MARKDOWN = "markdown"
    ASCII = "ascii"
    CODE = "code"
    HTML = "html"
    JSON = "json"
    XML = "xml"
