"""Stage 3: Structural fast paths.

Cheap checks on the raw text that settle the format outright, ahead of the
ASCII-art and markdown score comparison.  None of them parse anything: a
bracket-wrapped body counts as JSON whether or not it is valid JSON.
"""

from __future__ import annotations

import re

from textformat._utils import normalize_newlines
from textformat.enums import TextFormat

_FENCED_BLOCK_RE = re.compile(r"```.*?```|~~~.*?~~~", re.DOTALL)
_XML_DECLARATION_RE = re.compile(r"\s*<\?xml", re.IGNORECASE)
_TAG_PREFIX_RE = re.compile(r"\s*<[^>]+>")
# Some line opens a bracket and some later line closes one.
_JSON_WRAPPED_RE = re.compile(r"^\s*[{\[].*[\]}]\s*$", re.MULTILINE | re.DOTALL)


def has_fenced_block(text: str) -> bool:
    """Return True if *text* contains a triple-backtick or triple-tilde block."""
    return _FENCED_BLOCK_RE.search(text) is not None


def has_xml_declaration(text: str) -> bool:
    """Return True if *text* starts with ``<?xml`` after optional whitespace."""
    return _XML_DECLARATION_RE.match(text) is not None


def has_html_prefix(text: str) -> bool:
    """Return True if *text* starts with a ``<tag ...>`` after optional whitespace."""
    return _TAG_PREFIX_RE.match(text) is not None


def looks_like_json(text: str) -> bool:
    """Return True if *text* has a ``{``/``[`` opened line closed by ``}``/``]``.

    Lone ``\\r`` counts as a line break, like ``\\n`` and ``\\r\\n``.
    """
    return _JSON_WRAPPED_RE.search(normalize_newlines(text)) is not None


# Evaluated in this order; the first match wins.
_FAST_PATHS = (
    (has_fenced_block, TextFormat.CODE),
    (has_xml_declaration, TextFormat.XML),
    (has_html_prefix, TextFormat.HTML),
    (looks_like_json, TextFormat.JSON),
)


def detect_structural_format(text: str) -> TextFormat | None:
    """Return the format settled by the first matching fast path, or ``None``.

    :param text: The raw, non-normalized text.
    """
    for check, text_format in _FAST_PATHS:
        if check(text):
            return text_format
    return None
