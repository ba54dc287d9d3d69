"""Internal shared constants and helpers for textformat."""

from __future__ import annotations

import re

#: Minimum number of lines before ASCII-art scoring is attempted.
MIN_ART_LINES: int = 3

#: Lines at least this long count as "wide" for the ASCII-art scorer.
WIDE_LINE_LENGTH: int = 20

#: Lines longer than this count as "long" for the markdown scorer.
LONG_LINE_LENGTH: int = 140

#: Minimum ASCII-art score for the ``ascii`` format.
ASCII_THRESHOLD: float = 0.35

#: ASCII-art must beat the markdown score by more than this margin.
ASCII_MARGIN: float = 0.1

#: Minimum markdown score for the ``markdown`` format.
MARKDOWN_THRESHOLD: float = 0.08

#: Flat penalty subtracted from the ASCII-art score for code-like text.
CODE_PENALTY: float = 0.15

#: Decimal places kept on the scores surfaced in a detection result.
SCORE_PRECISION: int = 3

BORDER_CHARS: frozenset[str] = frozenset("+|-_=/#\\*<>")
SYMBOL_CHARS: frozenset[str] = frozenset("`~!@#$%^&*()-_=+[]{}|\\;:'\",.<>/?")
# ASCII only; str.isalnum() would also count accented letters.
ALNUM_CHARS: frozenset[str] = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
)

BOX_DRAWING_RE = re.compile("[\u2500-\u257f]")
BLOCK_ELEMENTS_RE = re.compile("[\u2580-\u259f]")
BRAILLE_RE = re.compile("[\u2800-\u28ff]")
GEOMETRIC_SHAPES_RE = re.compile("[\u25a0-\u25ff]")
ANSI_SGR_RE = re.compile("\x1b\\[[0-9;]*m")

_NEWLINE_RE = re.compile(r"\r\n?")


def normalize_newlines(text: str) -> str:
    """Collapse ``\\r\\n`` and lone ``\\r`` line endings to ``\\n``."""
    return _NEWLINE_RE.sub("\n", text)


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    """Clamp *value* into the closed range [*low*, *high*]."""
    return max(low, min(high, value))


def has_unicode_art(text: str, *, include_geometric: bool = True) -> bool:
    """Return True if *text* contains box-drawing, block or Braille characters.

    Geometric shapes (U+25A0-U+25FF) are also considered unless
    *include_geometric* is False.
    """
    if (
        BOX_DRAWING_RE.search(text)
        or BLOCK_ELEMENTS_RE.search(text)
        or BRAILLE_RE.search(text)
    ):
        return True
    return include_geometric and GEOMETRIC_SHAPES_RE.search(text) is not None


def is_blank(text: str) -> bool:
    """Return True if *text* holds nothing but whitespace and byte order marks."""
    return not text.replace("\ufeff", "").strip()
