"""Detection pipeline stages and shared types."""

from __future__ import annotations

import dataclasses

from textformat.enums import TextFormat


@dataclasses.dataclass(frozen=True, slots=True)
class LineStats:
    """Line-length and character-class statistics from the ASCII-art pass."""

    line_count: int
    mean_line_length: float
    std_dev_line_length: float
    symbol_density: float
    alpha_ratio: float

    def to_dict(self) -> dict[str, int | float]:
        return {
            "lines": self.line_count,
            "mean": self.mean_line_length,
            "std": self.std_dev_line_length,
            "symbol_density": self.symbol_density,
            "alpha_ratio": self.alpha_ratio,
        }


@dataclasses.dataclass(frozen=True, slots=True)
class ReasonSet:
    """Reason tags explaining the scores, in order of evaluation."""

    ascii: tuple[str, ...] = ()
    markdown: tuple[str, ...] = ()
    code_penalty_applied: bool = False

    def to_dict(self) -> dict[str, list[str] | bool]:
        return {
            "ascii": list(self.ascii),
            "markdown": list(self.markdown),
            "code_penalty_applied": self.code_penalty_applied,
        }


@dataclasses.dataclass(frozen=True, slots=True)
class AsciiArtScore:
    """Output of the ASCII-art scorer."""

    score: float
    reasons: tuple[str, ...]
    stats: LineStats | None = None


@dataclasses.dataclass(frozen=True, slots=True)
class MarkdownScore:
    """Output of the markdown scorer."""

    score: float
    reasons: tuple[str, ...]


@dataclasses.dataclass(frozen=True, slots=True)
class DetectionResult:
    """A single text format detection result.

    Frozen dataclass holding the chosen format, the final ASCII-art and
    markdown scores (clamped to [0, 1] and rounded to 3 decimals), the
    reasons behind them and, for inputs of three or more lines, the line
    statistics gathered by the ASCII-art scorer.
    """

    format: TextFormat
    ascii_art_score: float
    markdown_score: float
    reasons: ReasonSet
    stats: LineStats | None = None

    def to_dict(self) -> dict[str, object]:
        """Convert this result to a plain dict.

        :returns: A dict with ``'text_format'``, ``'ascii_art'``,
            ``'markdown'``, ``'reasons'`` and ``'stats'`` keys.
        """
        return {
            "text_format": self.format.value,
            "ascii_art": self.ascii_art_score,
            "markdown": self.markdown_score,
            "reasons": self.reasons.to_dict(),
            "stats": self.stats.to_dict() if self.stats is not None else None,
        }
