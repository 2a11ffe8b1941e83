"""
AI Score Calculator

Computes a 0-100 AI Score from a catalog scan.
Separated from matcher.py for single-responsibility.

Score = weighted matches per hundred words, times a calibration
multiplier, clamped to 0-100:

  density = total_weight / word_count * 100
  score   = round(clamp(density * 5, 0, 100))

A multiplier of 5 saturates at 20 weighted matches per 100 words.
Labels are fixed bands over the integer score.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from tellscan.matcher import AnalysisResult

# Calibration constant: score points per weighted match per hundred words
DENSITY_MULTIPLIER = 5.0

SCORE_MIN = 0
SCORE_MAX = 100

# (inclusive upper bound, label), checked in order
LABEL_BANDS: tuple[tuple[int, str], ...] = (
    (10, "Very Human"),
    (25, "Mostly Human"),
    (50, "Some AI Patterns"),
    (75, "Likely AI"),
    (SCORE_MAX, "Very AI-like"),
)

LABELS: tuple[str, ...] = tuple(label for _, label in LABEL_BANDS)


@dataclass(frozen=True)
class ScoredResult:
    score: int
    label: str
    density: float   # Weighted matches per hundred words


def weighted_density(result: AnalysisResult) -> float:
    """Weighted matches per hundred words. Zero words means zero density."""
    if result.word_count <= 0:
        return 0.0
    return result.total_weight / result.word_count * 100


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (Python's round() is banker's)."""
    return int(math.floor(value + 0.5))


def score_label(score: int) -> str:
    """Map an integer score to its qualitative band."""
    for upper, label in LABEL_BANDS:
        if score <= upper:
            return label
    return LABEL_BANDS[-1][1]


def calculate_score(
    result: AnalysisResult,
    multiplier: float = DENSITY_MULTIPLIER,
) -> ScoredResult:
    """
    Calculate the AI Score for a scan result.

    Returns:
        ScoredResult with score clamped to [0, 100] and its label.
    """
    density = weighted_density(result)
    raw = density * multiplier
    score = round_half_up(min(SCORE_MAX, max(SCORE_MIN, raw)))
    return ScoredResult(score=score, label=score_label(score), density=density)
