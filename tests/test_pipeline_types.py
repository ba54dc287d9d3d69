# tests/test_pipeline_types.py
from __future__ import annotations

import dataclasses

import pytest

from textformat.enums import TextFormat
from textformat.pipeline import (
    AsciiArtScore,
    DetectionResult,
    LineStats,
    MarkdownScore,
    ReasonSet,
)


def _stats() -> LineStats:
    return LineStats(
        line_count=4,
        mean_line_length=15.0,
        std_dev_line_length=0.0,
        symbol_density=0.0,
        alpha_ratio=0.25,
    )


def test_reason_set_defaults():
    reasons = ReasonSet()
    assert reasons.ascii == ()
    assert reasons.markdown == ()
    assert reasons.code_penalty_applied is False


def test_detection_result_to_dict():
    r = DetectionResult(
        format=TextFormat.ASCII,
        ascii_art_score=0.43,
        markdown_score=0.0,
        reasons=ReasonSet(ascii=("unicode_art_chars",), markdown=()),
        stats=_stats(),
    )
    assert r.to_dict() == {
        "text_format": "ascii",
        "ascii_art": 0.43,
        "markdown": 0.0,
        "reasons": {
            "ascii": ["unicode_art_chars"],
            "markdown": [],
            "code_penalty_applied": False,
        },
        "stats": {
            "lines": 4,
            "mean": 15.0,
            "std": 0.0,
            "symbol_density": 0.0,
            "alpha_ratio": 0.25,
        },
    }


def test_detection_result_is_frozen():
    r = DetectionResult(
        format=TextFormat.PLAIN,
        ascii_art_score=0.0,
        markdown_score=0.0,
        reasons=ReasonSet(),
    )
    with pytest.raises(dataclasses.FrozenInstanceError):
        r.format = TextFormat.JSON


@pytest.mark.parametrize(
    "value",
    [
        _stats(),
        ReasonSet(),
        AsciiArtScore(score=0.0, reasons=()),
        MarkdownScore(score=0.0, reasons=()),
    ],
)
def test_stage_types_are_frozen(value: object):
    field = dataclasses.fields(value)[0].name
    with pytest.raises(dataclasses.FrozenInstanceError):
        setattr(value, field, None)
