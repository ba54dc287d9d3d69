"""Heuristic text format detection for plain, markdown, ASCII art and more."""

from __future__ import annotations

from textformat.enums import TextFormat
from textformat.pipeline import DetectionResult, LineStats, ReasonSet
from textformat.pipeline.orchestrator import run_pipeline

__version__ = "1.0.0"
__all__ = [
    "DetectionResult",
    "LineStats",
    "ReasonSet",
    "TextFormat",
    "detect",
]


def detect(text: object) -> DetectionResult:
    """Detect the structural format of the given text.

    Never raises: non-string or blank input is reported as
    :attr:`TextFormat.PLAIN` with an ``"empty"`` reason.

    :param text: The text to classify.
    :returns: A frozen :class:`DetectionResult`.
    """
    return run_pipeline(text)
