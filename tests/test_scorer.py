"""
Tests for the AI Score calculator — formula, clamping and label bands.
"""

import pytest
from tellscan.matcher import AnalysisResult, scan
from tellscan.scorer import (
    DENSITY_MULTIPLIER,
    LABELS,
    calculate_score,
    round_half_up,
    score_label,
    weighted_density,
)


def _result(word_count: int, total_weight: int) -> AnalysisResult:
    return AnalysisResult(
        word_count=word_count,
        categories={},
        all_matches=(),
        total_weight=total_weight,
    )


class TestFormula:

    def test_multiplier_default(self):
        assert DENSITY_MULTIPLIER == 5.0

    def test_density(self):
        assert weighted_density(_result(100, 3)) == pytest.approx(3.0)

    def test_score_from_density(self):
        scored = calculate_score(_result(100, 3))
        assert scored.score == 15
        assert scored.label == "Mostly Human"
        assert scored.density == pytest.approx(3.0)

    def test_multiplier_override(self):
        assert calculate_score(_result(100, 1)).score == 5
        assert calculate_score(_result(100, 1), multiplier=10).score == 10

    def test_clamped_at_100(self):
        scored = calculate_score(_result(10, 100))
        assert scored.score == 100
        assert scored.label == "Very AI-like"

    def test_zero_words_scores_zero(self):
        scored = calculate_score(_result(0, 0))
        assert scored.score == 0
        assert scored.label == "Very Human"
        assert scored.density == 0.0

    def test_zero_words_with_weight_does_not_divide(self):
        assert calculate_score(_result(0, 5)).score == 0


class TestRounding:

    @pytest.mark.parametrize("value,expected", [
        (0.0, 0),
        (0.5, 1),
        (2.4, 2),
        (12.5, 13),
        (99.5, 100),
    ])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected


class TestLabels:

    @pytest.mark.parametrize("score,label", [
        (0, "Very Human"),
        (10, "Very Human"),
        (11, "Mostly Human"),
        (25, "Mostly Human"),
        (26, "Some AI Patterns"),
        (50, "Some AI Patterns"),
        (51, "Likely AI"),
        (75, "Likely AI"),
        (76, "Very AI-like"),
        (100, "Very AI-like"),
    ])
    def test_band_boundaries(self, score, label):
        assert score_label(score) == label

    def test_five_bands(self):
        assert len(LABELS) == 5


class TestEndToEnd:

    def test_empty_text(self):
        scored = calculate_score(scan(""))
        assert scored.score == 0
        assert scored.label == "Very Human"

    def test_ai_text_scores_high(self):
        scored = calculate_score(scan(
            "This groundbreaking innovation serves as a testament to our commitment to excellence"
        ))
        assert scored.score >= 50
        assert scored.label in ("Likely AI", "Very AI-like")

    def test_human_text_scores_low(self):
        scored = calculate_score(scan("The company released a product. It costs fifty dollars."))
        assert scored.score <= 10

    @pytest.mark.parametrize("text", [
        "",
        "Great question! I would be happy to help you.",
        "delve " * 200,
        "A plain sentence about the weather today.",
        "— — — — —",
    ])
    def test_score_always_in_range(self, text):
        scored = calculate_score(scan(text))
        assert 0 <= scored.score <= 100
        assert scored.label in LABELS
