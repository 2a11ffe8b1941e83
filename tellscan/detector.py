"""
Detector — Scan Orchestrator

Runs the matcher and the scorer over one text and bundles both
results into a Report that the reporters, the CLI and the API consume.
"""

from __future__ import annotations

import time
from dataclasses import dataclass

from tellscan.catalog import CATEGORIES, PatternCategory
from tellscan.logging import get_logger
from tellscan.matcher import CONTEXT_CHARS, AnalysisResult, scan
from tellscan.scorer import DENSITY_MULTIPLIER, ScoredResult, calculate_score

logger = get_logger("detector")


@dataclass(frozen=True)
class Report:
    """A scan and its score, ready for rendering."""
    analysis: AnalysisResult
    scored: ScoredResult

    @property
    def score(self) -> int:
        return self.scored.score

    @property
    def label(self) -> str:
        return self.scored.label


def analyze_text(
    text: str,
    catalog: tuple[PatternCategory, ...] = CATEGORIES,
    context_chars: int = CONTEXT_CHARS,
    multiplier: float = DENSITY_MULTIPLIER,
) -> Report:
    """
    Scan and score a text.

    Empty or whitespace-only text is not an error here; it scores 0.
    Callers that want to reject empty input do so before calling.
    """
    start = time.perf_counter()
    analysis = scan(text, catalog, context_chars=context_chars)
    scored = calculate_score(analysis, multiplier=multiplier)
    duration_ms = round((time.perf_counter() - start) * 1000, 2)

    logger.debug(
        f"Scan complete: score={scored.score} ({scored.label})",
        extra={
            "score": scored.score,
            "label": scored.label,
            "word_count": analysis.word_count,
            "match_count": analysis.match_count,
            "category_count": len(analysis.categories),
            "duration_ms": duration_ms,
        },
    )
    return Report(analysis=analysis, scored=scored)
