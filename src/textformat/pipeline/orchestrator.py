"""Pipeline orchestrator — scores the text and picks a single format."""

from __future__ import annotations

import logging

from textformat._utils import (
    ASCII_MARGIN,
    ASCII_THRESHOLD,
    MARKDOWN_THRESHOLD,
    SCORE_PRECISION,
    is_blank,
)
from textformat.enums import TextFormat
from textformat.pipeline import DetectionResult, ReasonSet
from textformat.pipeline.ascii_art import score_ascii_art
from textformat.pipeline.code import code_like_penalty
from textformat.pipeline.markdown import score_markdown
from textformat.pipeline.structural import detect_structural_format

logger = logging.getLogger(__name__)

_EMPTY_RESULT = DetectionResult(
    format=TextFormat.PLAIN,
    ascii_art_score=0.0,
    markdown_score=0.0,
    reasons=ReasonSet(ascii=("empty",)),
)


def _choose_scored_format(ascii_art: float, markdown: float) -> TextFormat:
    """Pick between ascii, markdown and plain from the final scores."""
    if ascii_art >= ASCII_THRESHOLD and ascii_art > markdown + ASCII_MARGIN:
        return TextFormat.ASCII
    if markdown >= MARKDOWN_THRESHOLD and markdown >= ascii_art:
        return TextFormat.MARKDOWN
    return TextFormat.PLAIN


def run_pipeline(text: object) -> DetectionResult:
    """Run the full detection pipeline.

    Anything that is not a string, or holds only whitespace and byte order
    marks, is reported as ``plain`` with an ``empty`` reason.  Otherwise all
    three scorers run, then the structural fast paths (fenced code, XML
    declaration, leading tag, bracket-wrapped JSON) are tried in order on
    the raw text, and only if none fires are the ASCII-art and markdown
    scores compared.

    :param text: The text to classify.
    :returns: A :class:`DetectionResult`.
    """
    if not isinstance(text, str) or is_blank(text):
        return _EMPTY_RESULT

    ascii_art = score_ascii_art(text)
    markdown = score_markdown(text)
    penalty = code_like_penalty(text)
    if penalty:
        logger.debug(
            "code-like text, ascii art score %.3f less %.2f", ascii_art.score, penalty
        )

    ascii_final = max(0.0, ascii_art.score - penalty)
    markdown_final = markdown.score

    text_format = detect_structural_format(text)
    if text_format is not None:
        logger.debug("structural fast path matched: %s", text_format.value)
    else:
        text_format = _choose_scored_format(ascii_final, markdown_final)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "scored %s: ascii_art=%.3f %s markdown=%.3f %s",
                text_format.value,
                ascii_final,
                list(ascii_art.reasons),
                markdown_final,
                list(markdown.reasons),
            )

    return DetectionResult(
        format=text_format,
        ascii_art_score=round(ascii_final, SCORE_PRECISION),
        markdown_score=round(markdown_final, SCORE_PRECISION),
        reasons=ReasonSet(
            ascii=ascii_art.reasons,
            markdown=markdown.reasons,
            code_penalty_applied=penalty > 0,
        ),
        stats=ascii_art.stats,
    )
