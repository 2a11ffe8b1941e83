"""
Tellscan — AI Writing Pattern Scanner

A frozen catalog of regex rules for the stylistic tells of
machine-generated prose, folded into a 0-100 AI Score.
Heuristic only: no model, no accuracy guarantee.

Public API:
  - CATEGORIES:      The frozen pattern catalog (13 categories)
  - scan:            Match a text against the catalog
  - calculate_score: Weighted density -> 0-100 score and label
  - analyze_text:    scan + score in one call, returns a Report
  - format_analysis / format_score / format_json: renderers

Usage:
    from tellscan import analyze_text, format_score
    report = analyze_text("This serves as a testament to innovation.")
    print(format_score(report))
"""

__version__ = "1.0.0"

from tellscan.catalog import (
    CATALOG_VERSION,
    CATEGORIES,
    PatternCategory,
    describe_catalog,
    get_category,
)
from tellscan.matcher import AnalysisResult, CategoryResult, Match, scan
from tellscan.scorer import ScoredResult, calculate_score, score_label
from tellscan.detector import Report, analyze_text
from tellscan.reporters import format_analysis, format_json, format_score

__all__ = [
    "CATALOG_VERSION",
    "CATEGORIES",
    "PatternCategory",
    "describe_catalog",
    "get_category",
    "AnalysisResult",
    "CategoryResult",
    "Match",
    "scan",
    "ScoredResult",
    "calculate_score",
    "score_label",
    "Report",
    "analyze_text",
    "format_analysis",
    "format_json",
    "format_score",
]
