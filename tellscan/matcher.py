"""
Matcher — Catalog Scan

Runs every rule of every category against a text and collects each
occurrence with its position and surrounding context. Pure function
of (text, catalog): no I/O, no shared mutable state.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from tellscan.catalog import CATEGORIES, PatternCategory

# Characters of surrounding text kept on each side of a match
CONTEXT_CHARS = 40

ELLIPSIS = "..."


# ============================================================
# DATA STRUCTURES
# ============================================================

@dataclass(frozen=True)
class Match:
    """One occurrence of one rule within the input."""
    text: str              # The matched substring
    position: int          # Character offset in the original text
    context: str           # Surrounding window, ellipsis-marked when clipped
    category_key: str
    category_name: str

    def to_payload(self) -> dict[str, object]:
        return {
            "text": self.text,
            "position": self.position,
            "context": self.context,
        }


@dataclass(frozen=True)
class CategoryResult:
    """Matches collected for a single category, in discovery order."""
    key: str
    name: str
    description: str
    weight: int
    matches: tuple[Match, ...]

    @property
    def count(self) -> int:
        return len(self.matches)

    @property
    def impact(self) -> int:
        """Weighted contribution of this category to the total."""
        return self.weight * self.count


@dataclass(frozen=True)
class AnalysisResult:
    """Top-level output of one scan."""
    word_count: int
    categories: Mapping[str, CategoryResult]   # Only categories with >= 1 match
    all_matches: tuple[Match, ...]
    total_weight: int

    @property
    def match_count(self) -> int:
        return len(self.all_matches)


# ============================================================
# HELPERS
# ============================================================

def count_words(text: str) -> int:
    """Whitespace-delimited, non-empty tokens. Not punctuation-aware."""
    return len(text.split())


def get_context(text: str, start: int, end: int, width: int = CONTEXT_CHARS) -> str:
    """Return ``width`` characters either side of text[start:end], marking clipped edges."""
    lo = max(0, start - width)
    hi = min(len(text), end + width)
    context = text[lo:hi]
    if lo > 0:
        context = ELLIPSIS + context
    if hi < len(text):
        context = context + ELLIPSIS
    return context


def _match_category(
    text: str, category: PatternCategory, context_chars: int,
) -> list[Match]:
    """Every non-overlapping match of every rule, rule by rule."""
    matches = []
    for rule in category.patterns:
        for found in rule.finditer(text):
            matches.append(Match(
                text=found.group(0),
                position=found.start(),
                context=get_context(text, found.start(), found.end(), context_chars),
                category_key=category.key,
                category_name=category.name,
            ))
    return matches


# ============================================================
# SCAN
# ============================================================

def scan(
    text: str,
    catalog: tuple[PatternCategory, ...] = CATEGORIES,
    context_chars: int = CONTEXT_CHARS,
) -> AnalysisResult:
    """
    Scan text against the catalog.

    Categories are visited in catalog order and rules in declaration
    order. Matches from different rules of one category may overlap;
    all of them count.

    Args:
        text: The text to scan. May be empty.
        catalog: Categories to scan with.
        context_chars: Context window size on each side of a match.

    Returns:
        AnalysisResult with only the categories that matched.
    """
    categories: dict[str, CategoryResult] = {}
    all_matches: list[Match] = []
    total_weight = 0

    for category in catalog:
        matches = _match_category(text, category, context_chars)
        if not matches:
            continue
        result = CategoryResult(
            key=category.key,
            name=category.name,
            description=category.description,
            weight=category.weight,
            matches=tuple(matches),
        )
        categories[category.key] = result
        all_matches.extend(matches)
        total_weight += result.impact

    return AnalysisResult(
        word_count=count_words(text),
        categories=MappingProxyType(categories),
        all_matches=tuple(all_matches),
        total_weight=total_weight,
    )
