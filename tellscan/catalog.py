"""
Pattern Catalog — Frozen Category Table

The catalog defines:
  1. Which stylistic tells count as machine-generated prose
  2. How heavily each tell weighs on the score
  3. The textual rules that detect each tell

This module is FROZEN. Categories are built once at import time,
validated, and never mutated. Rules are compiled regular expressions;
each rule carries its own flags, so a category may mix case-insensitive
rules with case-sensitive ones (fixed capitalized idioms such as
"Additionally" or "Certainly!").

Rules inside one category are allowed to overlap. Every rule's matches
are counted, so two synonyms hitting the same phrase both add weight.

Based on Wikipedia's "Signs of AI writing" guide.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

# --- Catalog Version (stamped on JSON output) ---
CATALOG_VERSION = "1.0.0"

_I = re.IGNORECASE


# ============================================================
# DATA STRUCTURES
# ============================================================

@dataclass(frozen=True)
class PatternCategory:
    """
    A named, weighted group of rules representing one stylistic tell.

    Every match of every rule adds ``weight`` to the weighted total.
    """
    key: str               # e.g., "ai_vocabulary"
    name: str              # e.g., "AI Vocabulary"
    description: str       # One-line rationale
    weight: int            # Relative severity, >= 1
    patterns: tuple[re.Pattern, ...]


def _rules(*specs: str | tuple[str, int]) -> tuple[re.Pattern, ...]:
    """Compile rules. Bare strings are case-insensitive; (regex, flags) pairs keep their flags."""
    compiled = []
    for spec in specs:
        if isinstance(spec, tuple):
            regex, flags = spec
        else:
            regex, flags = spec, _I
        compiled.append(re.compile(regex, flags))
    return tuple(compiled)


# ============================================================
# CATEGORIES (declaration order is reporting order)
# ============================================================

CATEGORIES: tuple[PatternCategory, ...] = (
    PatternCategory(
        key="inflated_significance",
        name="Inflated Significance",
        description="Puffs up importance with vague significance claims",
        weight=3,
        patterns=_rules(
            r"\bstands?\s+as\b",
            r"\bserves?\s+as\b",
            r"\b(is|are)\s+a\s+testament\b",
            r"\bunderscores?\s+(its|the|their)\s+importance\b",
            r"\bhighlights?\s+(its|the|their)\s+significance\b",
            r"\breflects?\s+broader\b",
            r"\bsymboliz(es?|ing)\s+(its|the|their)\s+(ongoing|enduring|lasting)\b",
            r"\bsetting\s+the\s+stage\s+for\b",
            r"\bmarking\s+a\s+(pivotal|key|crucial)\s+moment\b",
            r"\brepresents?\s+a\s+shift\b",
            r"\bevolving\s+landscape\b",
            r"\bindelible\s+mark\b",
            r"\bdeeply\s+rooted\b",
        ),
    ),
    PatternCategory(
        key="superficial_ing",
        name="Superficial -ing Endings",
        description="Tacks -ing phrases for fake depth",
        weight=2,
        patterns=_rules(
            r",\s*(highlighting|underscoring|emphasizing|reflecting|symbolizing"
            r"|showcasing|encompassing|cultivating|fostering)\s+",
            r",\s*ensuring\s+(that\s+)?[^,.]+[,.]",
            r",\s*contributing\s+to\s+",
        ),
    ),
    PatternCategory(
        key="promotional",
        name="Promotional Language",
        description="Advertisement-like, non-neutral tone",
        weight=3,
        patterns=_rules(
            r"\bboasts?\s+a\b",
            r"\bvibrant\b",
            r"\bprofound\b",
            r"\bgroundbreaking\b",
            r"\brenowned\b",
            r"\bbreathtaking\b",
            r"\bmust-visit\b",
            r"\bstunning\b",
            r"\bnestled\b",
            r"\bin\s+the\s+heart\s+of\b",
            r"\brich\s+(cultural\s+)?heritage\b",
            r"\bnatural\s+beauty\b",
            r"\bexemplif(y|ies)\b",
            r"\bcommitment\s+to\b",
        ),
    ),
    PatternCategory(
        key="ai_vocabulary",
        name="AI Vocabulary",
        description="Words overused by AI models",
        weight=2,
        patterns=_rules(
            (r"\bAdditionally\b", 0),
            r"\balign\s+with\b",
            r"\bcrucial\b",
            r"\bdelve\b",
            r"\benduring\b",
            r"\benhance[ds]?\b",
            r"\bfostering\b",
            r"\bgarner[s]?\b",
            r"\binterplay\b",
            r"\bintricat(e|es|ies)\b",
            r"\blandscape\b",
            r"\bpivotal\b",
            r"\bshowcas(e|es|ing)\b",
            r"\btapestry\b",
            r"\bunderscore[sd]?\b",
            r"\bvaluable\b",
            r"\bseamless(ly)?\b",
            r"\brobust\b",
            r"\bleverag(e|es|ing)\b",
            r"\bfacilitat(e|es|ing)\b",
            r"\boptimiz(e|es|ing)\b",
            r"\bholistic\b",
            r"\bsynerg(y|ies|istic)\b",
            r"\bparadigm\b",
            r"\bmeticulously\b",
            r"\bcomprehensive\b",
            r"\bnavigat(e|es|ing)\b",
            r"\bunravel\b",
            r"\bembark\s+on\b",
            r"\bdelve\s+into\b",
            r"\btestament\b",
            r"\bundeniably\b",
            r"\bintricate\b",
            r"\bpivot\b",
        ),
    ),
    PatternCategory(
        key="vague_attribution",
        name="Vague Attributions",
        description="Attributes claims to unnamed experts",
        weight=3,
        patterns=_rules(
            r"\b(Industry|Some|Many)\s+experts?\s+(believe|argue|suggest|say)\b",
            r"\bObservers\s+have\s+cited\b",
            r"\b(Some|Many)\s+critics\s+argue\b",
            r"\bseveral\s+(sources|publications)\b",
            r"\bwidely\s+(believed|considered|regarded)\b",
        ),
    ),
    PatternCategory(
        key="negative_parallelism",
        name="Negative Parallelism",
        description='Overused "not only...but also" constructions',
        weight=2,
        patterns=_rules(
            r"\bNot\s+only\b.*\bbut\s+(also\s+)?",
            r"\bIt'?s\s+not\s+just\s+about\b.*\bit'?s\s+(about\s+)?",
            r"\bIt'?s\s+not\s+(merely|simply)\b.*\bit'?s\b",
        ),
    ),
    PatternCategory(
        key="rule_of_three",
        name="Rule of Three",
        description="Forced groupings of three items",
        weight=1,
        patterns=_rules(
            r"\b\w+,\s+\w+,\s+and\s+\w+\b",
        ),
    ),
    PatternCategory(
        key="em_dash",
        name="Em Dash Overuse",
        description="Excessive use of em dashes",
        weight=1,
        patterns=_rules(
            ("—", 0),
            ("--", 0),
        ),
    ),
    PatternCategory(
        key="copula_avoidance",
        name="Copula Avoidance",
        description='Substitutes "serves as" for simple "is"',
        weight=2,
        patterns=_rules(
            r"\bserves?\s+as\s+(a|an|the)\b",
            r"\bstands?\s+as\s+(a|an|the)\b",
            r"\bmarks?\s+(a|an|the)\b",
            r"\brepresents?\s+(a|an|the)\b",
            r"\bfeatures?\s+(a|an|the)\b",
            r"\boffers?\s+(a|an|the)\b",
        ),
    ),
    PatternCategory(
        key="sycophantic",
        name="Sycophantic Tone",
        description="Overly positive, people-pleasing language",
        weight=3,
        patterns=_rules(
            r"\bGreat\s+question!?\b",
            r"\bExcellent\s+point!?\b",
            r"\bYou'?re\s+absolutely\s+right\b",
            (r"\bOf\s+course!", 0),
            (r"\bCertainly!", 0),
            r"\bI\s+hope\s+this\s+helps\b",
            r"\blet\s+me\s+know\s+if\b",
            r"\bI('d| would)\s+be\s+happy\s+to\b",
            r"\bWould\s+you\s+like\s+me\s+to\b",
            r"\bhappy\s+to\s+help\b",
        ),
    ),
    PatternCategory(
        key="filler",
        name="Filler Phrases",
        description="Unnecessary wordy constructions",
        weight=2,
        patterns=_rules(
            r"\bIn\s+order\s+to\b",
            r"\bDue\s+to\s+the\s+fact\s+that\b",
            r"\bAt\s+this\s+point\s+in\s+time\b",
            r"\bIn\s+the\s+event\s+that\b",
            r"\bhas\s+the\s+ability\s+to\b",
            r"\bIt\s+is\s+important\s+to\s+note\s+that\b",
            r"\bIt\s+should\s+be\s+noted\s+that\b",
            r"\bIt\s+is\s+worth\s+mentioning\s+that\b",
        ),
    ),
    PatternCategory(
        key="generic_conclusion",
        name="Generic Conclusions",
        description="Vague upbeat endings",
        weight=2,
        patterns=_rules(
            r"\bThe\s+future\s+looks\s+bright\b",
            r"\bExciting\s+times\s+(lie|lay)\s+ahead\b",
            r"\bcontinue\s+their\s+journey\b",
            r"\bmajor\s+step\s+in\s+the\s+right\s+direction\b",
            r"\bpave\s+the\s+way\s+for\b",
        ),
    ),
    PatternCategory(
        key="challenges_prospects",
        name="Challenges & Prospects",
        description="Formulaic structure common in AI text",
        weight=2,
        patterns=_rules(
            r"\bDespite\s+(its|these|their)\s+\w+,\s+faces?\s+several\s+challenges\b",
            r"\bDespite\s+these\s+challenges\b",
            (r"\bFuture\s+Outlook\b", 0),
            r"\bChallenges\s+and\s+(Legacy|Opportunities|Future)\b",
        ),
    ),
)


# ============================================================
# VALIDATION (runs once at import)
# ============================================================

def validate_catalog(categories: tuple[PatternCategory, ...]) -> None:
    """Raise ValueError if keys repeat, a weight is below 1, or a category has no rules."""
    seen: set[str] = set()
    for category in categories:
        if category.key in seen:
            raise ValueError(f"Duplicate category key: {category.key}")
        seen.add(category.key)
        if category.weight < 1:
            raise ValueError(
                f"Category {category.key} has weight {category.weight}; weights must be >= 1"
            )
        if not category.patterns:
            raise ValueError(f"Category {category.key} has no patterns")


validate_catalog(CATEGORIES)

_BY_KEY: dict[str, PatternCategory] = {c.key: c for c in CATEGORIES}


def get_category(key: str) -> Optional[PatternCategory]:
    """Look up a category by key."""
    return _BY_KEY.get(key)


def describe_catalog(categories: tuple[PatternCategory, ...] = CATEGORIES) -> list[dict]:
    """
    Return the catalog as plain dicts, in declaration order.

    Used by GET /patterns and ``tellscan patterns`` to expose the
    detection surface without leaking compiled regex objects.
    """
    return [
        {
            "key": c.key,
            "name": c.name,
            "description": c.description,
            "weight": c.weight,
            "rule_count": len(c.patterns),
        }
        for c in categories
    ]
