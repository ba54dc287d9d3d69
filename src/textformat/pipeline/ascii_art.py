"""Stage 2a: ASCII-art scoring.

Scores text for signs of ASCII/Unicode art: uniform line widths, dense
symbols with few letters, long runs of one character, border lines,
trailing padding, ANSI colour codes and box-drawing/block/Braille glyphs.
"""

from __future__ import annotations

import math
import re

from textformat._utils import (
    ALNUM_CHARS,
    ANSI_SGR_RE,
    BORDER_CHARS,
    MIN_ART_LINES,
    SYMBOL_CHARS,
    WIDE_LINE_LENGTH,
    clamp,
    has_unicode_art,
    normalize_newlines,
)
from textformat.pipeline import AsciiArtScore, LineStats

_RUN_RE = re.compile(r"(.)\1{4,}")
_TRAILING_SPACE_RE = re.compile(r"\s$")

# Fraction of a trimmed line that must be border characters.
_BORDER_MAJORITY = 0.8

_TOO_FEW_LINES = AsciiArtScore(score=0.0, reasons=("too_few_lines",))


def _is_border_like(trimmed: str) -> bool:
    """Return True if a trimmed line looks like a frame edge or separator."""
    if len(trimmed) < 3:
        return False
    if trimmed[0] not in BORDER_CHARS or trimmed[-1] not in BORDER_CHARS:
        return False
    # A run of one border character is 100% border, so it passes here too.
    border_count = sum(1 for ch in trimmed if ch in BORDER_CHARS)
    return border_count / len(trimmed) >= _BORDER_MAJORITY


def score_ascii_art(text: str) -> AsciiArtScore:
    """Return a bounded ASCII-art confidence score for *text*.

    Each heuristic below is tested independently against all lines and adds
    (or, for very text-heavy input, subtracts) a fixed weight.  Reasons are
    recorded in evaluation order for every heuristic that fired.

    :param text: The text to score.  Line endings are normalized first.
    :returns: An :class:`AsciiArtScore`; ``stats`` is ``None`` when the text
        has fewer than three lines.
    """
    lines = normalize_newlines(text).split("\n")
    line_count = len(lines)
    if line_count < MIN_ART_LINES:
        return _TOO_FEW_LINES

    lengths = [len(line) for line in lines]
    mean = sum(lengths) / line_count
    std = math.sqrt(sum((n - mean) ** 2 for n in lengths) / line_count)

    total = alnum = sym = 0
    wide = borders = runs = trailing = 0

    for line in lines:
        total += len(line)
        if len(line) >= WIDE_LINE_LENGTH:
            wide += 1

        for ch in line:
            if ch in ALNUM_CHARS:
                alnum += 1
            if ch in SYMBOL_CHARS:
                sym += 1

        trimmed = line.strip()
        if _is_border_like(trimmed):
            borders += 1
        if _RUN_RE.search(line):
            runs += 1
        if trimmed and _TRAILING_SPACE_RE.search(line):
            trailing += 1

    symbol_density = sym / total if total else 0.0
    alpha_ratio = alnum / total if total else 0.0

    score = 0.0
    reasons: list[str] = []

    if wide / line_count >= 0.7:
        score += 0.15
        reasons.append("many_wide_lines")
    if mean >= WIDE_LINE_LENGTH and std / max(1.0, mean) <= 0.22:
        score += 0.2
        reasons.append("consistent_width")
    if symbol_density >= 0.18 and alpha_ratio <= 0.55:
        score += 0.2
        reasons.append("symbol_heavy_low_alpha")
    if runs >= max(2, math.floor(line_count * 0.05)):
        score += 0.15
        reasons.append("long_same_char_runs")
    if borders / line_count >= 0.08:
        score += 0.1
        reasons.append("border_like_lines")
    if trailing / line_count >= 0.1:
        score += 0.07
        reasons.append("trailing_spaces")
    if ANSI_SGR_RE.search(text):
        score += 0.12
        reasons.append("ansi_sequences")
    if has_unicode_art(text):
        score += 0.28
        reasons.append("unicode_art_chars")
    if alpha_ratio > 0.75:
        score -= 0.1
        reasons.append("very_text_heavy")

    return AsciiArtScore(
        score=clamp(score),
        reasons=tuple(reasons),
        stats=LineStats(
            line_count=line_count,
            mean_line_length=mean,
            std_dev_line_length=std,
            symbol_density=symbol_density,
            alpha_ratio=alpha_ratio,
        ),
    )
