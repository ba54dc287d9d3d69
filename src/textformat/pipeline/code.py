"""Stage 2c: Code-likeness penalty.

Source code shares the visual signature of ASCII art (dense symbols,
indented short lines), so text with enough code-looking lines has a flat
penalty taken off its ASCII-art score.
"""

from __future__ import annotations

import math
import re

from textformat._utils import CODE_PENALTY

_LINE_SPLIT_RE = re.compile(r"\r?\n")

_CODE_HINTS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^(?:\s{2,}|\t)"),
    re.compile(r";\s*$"),
    re.compile(
        r"\b(?:function|class|import|export|const|let|var|def|if|for|while)\b",
        re.ASCII,
    ),
    re.compile(r"[{}`]"),
    # Stack traces: "Exception:" or "at foo.bar (app.js:10:5)"
    re.compile(r"\bException:|\bat\s+[\w.]+ \([\w/.:-]+\)", re.ASCII),
)

# Minimum number of code-looking lines, or this fraction of all lines.
_MIN_CODE_LINES = 3
_CODE_LINE_FRACTION = 0.08


def _looks_like_code(line: str) -> bool:
    return any(hint.search(line) for hint in _CODE_HINTS)


def code_like_penalty(text: str) -> float:
    """Return the ASCII-art penalty for *text*: ``CODE_PENALTY`` or ``0.0``."""
    lines = _LINE_SPLIT_RE.split(text)
    hits = sum(1 for line in lines if _looks_like_code(line))
    threshold = max(_MIN_CODE_LINES, math.floor(len(lines) * _CODE_LINE_FRACTION))
    return CODE_PENALTY if hits >= threshold else 0.0
