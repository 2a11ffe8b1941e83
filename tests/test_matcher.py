"""
Tests for the Matcher — the scan that everything else is built on.
"""

import re

from tellscan.catalog import CATEGORIES, PatternCategory
from tellscan.matcher import count_words, get_context, scan


AI_TEXT = "This groundbreaking innovation serves as a testament to our commitment to excellence"
HUMAN_TEXT = "The company released a product. It costs fifty dollars."
SYCOPHANTIC_TEXT = "Great question! I would be happy to help you."
PLAIN_TEXT = "I went to the store. I bought milk."


class TestEmptyInput:

    def test_empty_string(self):
        result = scan("")
        assert result.word_count == 0
        assert len(result.categories) == 0
        assert result.all_matches == ()
        assert result.total_weight == 0

    def test_whitespace_only(self):
        result = scan("   \n\t  ")
        assert result.word_count == 0
        assert result.match_count == 0


class TestWordCount:

    def test_runs_of_whitespace(self):
        assert count_words("  one  two\nthree\t") == 3

    def test_punctuation_is_part_of_tokens(self):
        assert count_words("Hello , world !") == 4

    def test_scan_reports_word_count(self):
        assert scan(HUMAN_TEXT).word_count == 9


class TestContext:

    def test_no_ellipsis_when_whole_text_fits(self):
        assert get_context("We delve deep.", 3, 8) == "We delve deep."

    def test_ellipsis_on_both_sides(self):
        text = "x" * 50 + "delve" + "y" * 50
        context = get_context(text, 50, 55)
        assert context == "..." + "x" * 40 + "delve" + "y" * 40 + "..."

    def test_ellipsis_only_at_end(self):
        text = "delve" + "y" * 50
        context = get_context(text, 0, 5)
        assert context == "delve" + "y" * 40 + "..."

    def test_custom_width(self):
        text = "abcdefghij"
        assert get_context(text, 4, 5, width=2) == "...cdefg..."

    def test_scan_uses_context_override(self):
        text = "x" * 20 + " delve " + "y" * 20
        match = scan(text, context_chars=3).all_matches[0]
        assert match.context == "...xx delve yy..."


class TestMatches:

    def test_position_and_text(self):
        result = scan("We delve deep.")
        match = result.categories["ai_vocabulary"].matches[0]
        assert match.text == "delve"
        assert match.position == 3
        assert match.category_key == "ai_vocabulary"
        assert match.category_name == "AI Vocabulary"

    def test_overlapping_rules_both_count(self):
        result = scan("Let us delve into it.")
        vocab = result.categories["ai_vocabulary"]
        assert vocab.count == 2
        assert [m.text for m in vocab.matches] == ["delve", "delve into"]
        assert result.total_weight == 4

    def test_single_rule_matches_do_not_overlap(self):
        result = scan("-----")
        em_dash = result.categories["em_dash"]
        assert em_dash.count == 2
        assert [m.position for m in em_dash.matches] == [0, 2]

    def test_unicode_em_dash(self):
        result = scan("It was fine — mostly — at least.")
        assert result.categories["em_dash"].count == 2

    def test_global_matching(self):
        result = scan("delve, then delve, then delve again")
        delves = [m for m in result.categories["ai_vocabulary"].matches if m.text == "delve"]
        assert len(delves) == 3

    def test_rule_order_within_category(self):
        # "vibrant" is declared before "groundbreaking"
        result = scan("A groundbreaking and vibrant plan.")
        texts = [m.text for m in result.categories["promotional"].matches]
        assert texts == ["vibrant", "groundbreaking"]

    def test_all_matches_follow_catalog_order(self):
        result = scan(AI_TEXT)
        keys = [m.category_key for m in result.all_matches]
        catalog_keys = [c.key for c in CATEGORIES]
        assert keys == sorted(keys, key=catalog_keys.index)

    def test_categories_follow_catalog_order(self):
        result = scan(AI_TEXT)
        catalog_keys = [c.key for c in CATEGORIES]
        assert list(result.categories) == [k for k in catalog_keys if k in result.categories]

    def test_total_weight(self):
        result = scan(AI_TEXT)
        expected = sum(c.weight * c.count for c in result.categories.values())
        assert result.total_weight == expected
        assert result.match_count == sum(c.count for c in result.categories.values())

    def test_negative_parallelism(self):
        result = scan("Not only is it fast, but also cheap.")
        assert result.categories["negative_parallelism"].count == 1

    def test_custom_catalog(self):
        custom = (
            PatternCategory(
                key="custom",
                name="Custom",
                description="Test category",
                weight=4,
                patterns=(re.compile(r"\bwidget\b", re.IGNORECASE),),
            ),
        )
        result = scan("A Widget and a widget.", catalog=custom)
        assert list(result.categories) == ["custom"]
        assert result.total_weight == 8


class TestCategoryOmission:

    def test_plain_text_has_no_categories(self):
        assert len(scan(PLAIN_TEXT).categories) == 0

    def test_human_text_has_no_categories(self):
        assert len(scan(HUMAN_TEXT).categories) == 0

    def test_no_zero_count_entries(self):
        result = scan(AI_TEXT)
        assert all(c.count > 0 for c in result.categories.values())


class TestDeterminism:

    def test_scan_is_idempotent(self):
        text = AI_TEXT + " " + SYCOPHANTIC_TEXT
        assert scan(text) == scan(text)

    def test_more_matches_never_lower_weight(self):
        base = "word " * 49 + "delve"
        more = "word " * 48 + "delve delve"
        first, second = scan(base), scan(more)
        assert first.word_count == second.word_count
        assert second.total_weight > first.total_weight


class TestScenarios:

    def test_ai_text_categories(self):
        result = scan(AI_TEXT)
        for key in ("promotional", "inflated_significance", "ai_vocabulary"):
            assert key in result.categories

    def test_sycophantic(self):
        result = scan(SYCOPHANTIC_TEXT)
        sycophantic = result.categories["sycophantic"]
        assert sycophantic.count >= 2
        assert sycophantic.matches[0].text == "Great question"

    def test_vague_attribution(self):
        result = scan("Many experts believe this is widely considered important")
        assert result.categories["vague_attribution"].count == 2

    def test_inflated_significance(self):
        result = scan("This stands as a testament to the evolving landscape")
        assert "inflated_significance" in result.categories
