"""Stage 2b: Markdown scoring against a fixed catalog of surface patterns."""

from __future__ import annotations

import re
from typing import NamedTuple

from textformat._utils import (
    LONG_LINE_LENGTH,
    clamp,
    has_unicode_art,
    normalize_newlines,
)
from textformat.pipeline import MarkdownScore


class MarkdownFeature(NamedTuple):
    """A named markdown surface pattern and the weight it contributes."""

    name: str
    pattern: re.Pattern[str]
    weight: float


_STRONG = 0.18
_MEDIUM = 0.12
_WEAK = 0.08
_HTML = 0.05

_LONG_LINES_PENALTY = 0.1
_UNICODE_ART_PENALTY = 0.12

_HEADING_RE = re.compile(r"^(#{1,6})\s+\S+", re.MULTILINE)
_SETEXT_RE = re.compile(r"^(.+)\n(=+|-+)\s*$", re.MULTILINE)
_LIST_RE = re.compile(r"^(?:\s{0,3}[-*+]\s+|\s{0,3}\d+\.\s+)", re.MULTILINE)
_BLOCKQUOTE_RE = re.compile(r"^>\s+", re.MULTILINE)
_FENCED_RE = re.compile(r"```.*?```|~~~.*?~~~", re.DOTALL)
_INLINE_CODE_RE = re.compile(r"(^|[^`])`[^`]+`", re.MULTILINE)
_LINK_RE = re.compile(r"\[[^\]]+\]\([^)]+\)")
_IMAGE_RE = re.compile(r"!\[[^\]]*\]\([^)]+\)")
_TABLE_ROW_RE = re.compile(r"^\|?[^|\n]+\|[^|\n]+", re.MULTILINE)
_HR_RE = re.compile(r"^(?:-\s?){3,}$|^(?:\*\s?){3,}$|^(?:_\s?){3,}$", re.MULTILINE)
_EMPHASIS_RE = re.compile(
    r"(^|[^A-Za-z0-9_*])\*{1,2}[^*\n]+\*{1,2}(?!\*)", re.MULTILINE
)
_HTML_TAG_RE = re.compile(
    r"</?(?:div|span|br|img|a|p|h[1-6]|ul|ol|li|code|pre)[^>]*>", re.IGNORECASE
)
_FRONT_MATTER_RE = re.compile(r"^---\n.*?\n---\n", re.MULTILINE | re.DOTALL)

# Catalog order is the order reasons are reported in.
MARKDOWN_FEATURES: tuple[MarkdownFeature, ...] = (
    MarkdownFeature("heading", _HEADING_RE, _STRONG),
    MarkdownFeature("setext", _SETEXT_RE, _MEDIUM),
    MarkdownFeature("list", _LIST_RE, _STRONG),
    MarkdownFeature("blockquote", _BLOCKQUOTE_RE, _MEDIUM),
    MarkdownFeature("fenced", _FENCED_RE, _STRONG),
    MarkdownFeature("inlineCode", _INLINE_CODE_RE, _WEAK),
    MarkdownFeature("link", _LINK_RE, _STRONG),
    MarkdownFeature("image", _IMAGE_RE, _MEDIUM),
    MarkdownFeature("tableRow", _TABLE_ROW_RE, _STRONG),
    MarkdownFeature("hr", _HR_RE, _WEAK),
    MarkdownFeature("emphasis", _EMPHASIS_RE, _WEAK),
    MarkdownFeature("html", _HTML_TAG_RE, _HTML),
    MarkdownFeature("frontMatter", _FRONT_MATTER_RE, _MEDIUM),
)


def score_markdown(text: str) -> MarkdownScore:
    """Return a bounded markdown confidence score for *text*.

    Every catalog feature that matches anywhere in the text contributes its
    weight once.  Two or more very long lines, or any box-drawing, block or
    Braille glyph, pull the score down.

    :param text: The text to score.  Line endings are normalized first.
    :returns: A :class:`MarkdownScore` with matched feature names as reasons.
    """
    raw = normalize_newlines(text)
    score = 0.0
    hits: list[str] = []

    for feature in MARKDOWN_FEATURES:
        if feature.pattern.search(raw):
            hits.append(feature.name)
            score += feature.weight

    long_lines = sum(1 for line in raw.split("\n") if len(line) > LONG_LINE_LENGTH)
    if long_lines >= 2:
        score -= _LONG_LINES_PENALTY

    if has_unicode_art(raw, include_geometric=False):
        score -= _UNICODE_ART_PENALTY

    return MarkdownScore(score=clamp(score), reasons=tuple(hits))
