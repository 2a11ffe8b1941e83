"""
Reporters — Render a Report

Three output modes:
  - format_analysis: detailed human-readable report
  - format_score:    one tab-separated line for scripts
  - format_json:     full breakdown, every match included
"""

from __future__ import annotations

from tellscan.detector import Report
from tellscan.matcher import CategoryResult
from tellscan.schemas.scan import AnalysisResponse

MAX_EXAMPLES = 3

LABEL_ICONS = {
    "Very Human": "✅",
    "Mostly Human": "👍",
    "Some AI Patterns": "⚠️",
    "Likely AI": "🤖",
    "Very AI-like": "🚨",
}

_RULE = "=" * 60
_THIN_RULE = "-" * 60


def ranked_categories(report: Report) -> list[CategoryResult]:
    """Categories by weight * count, descending. Ties keep catalog order."""
    return sorted(
        report.analysis.categories.values(),
        key=lambda c: -c.impact,
    )


def format_analysis(report: Report, max_examples: int = MAX_EXAMPLES) -> str:
    """Format a report as a human-readable breakdown."""
    analysis = report.analysis
    icon = LABEL_ICONS.get(report.label, "")
    lines = [
        _RULE,
        "AI PATTERN ANALYSIS".center(60).rstrip(),
        _RULE,
        "",
        f"AI Score: {report.score}/100 {icon} {report.label}",
        f"Word Count: {analysis.word_count}",
        f"Patterns Found: {analysis.match_count}",
        "",
    ]

    if not analysis.categories:
        lines.append("✨ No significant AI patterns detected!")
        return "\n".join(lines)

    lines.extend([
        _THIN_RULE,
        "PATTERNS DETECTED".center(60).rstrip(),
        _THIN_RULE,
    ])

    for category in ranked_categories(report):
        lines.extend([
            "",
            f"▸ {category.name} (×{category.count}, weight: {category.weight})",
            f"  {category.description}",
            "",
        ])
        for match in category.matches[:max_examples]:
            lines.append(f'  • "{match.text}"')
            lines.append(f"    └─ {match.context.replace(chr(10), ' ')}")
        remaining = category.count - max_examples
        if remaining > 0:
            lines.append(f"  ... and {remaining} more")

    lines.extend(["", _RULE])
    return "\n".join(lines)


def format_score(report: Report) -> str:
    """Single tab-separated line: score, label, words, patterns."""
    return (
        f"{report.score}\t{report.label}\t"
        f"{report.analysis.word_count} words\t"
        f"{report.analysis.match_count} patterns"
    )


def format_json(report: Report) -> str:
    """Full breakdown as indented JSON."""
    return AnalysisResponse.from_report(report).model_dump_json(indent=2)
