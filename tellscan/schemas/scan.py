"""
Scan Schemas — JSON Output and API Models

Pydantic models shared by the JSON reporter and the HTTP API, so
``tellscan json`` and ``POST /analyze`` emit the same shape.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from tellscan.catalog import CATALOG_VERSION
from tellscan.config import settings
from tellscan.detector import Report


# ============================================================
# ANALYZE
# ============================================================

class AnalyzeRequest(BaseModel):
    """POST /analyze and POST /score request body."""
    text: str = Field(..., min_length=1, max_length=settings.MAX_TEXT_CHARS,
                      description="The text to scan for AI writing patterns.")

    model_config = {"json_schema_extra": {"examples": [
        {"text": "This groundbreaking innovation serves as a testament to our commitment to excellence."},
    ]}}

    @field_validator("text")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("text must contain non-whitespace characters")
        return value


class AnalyzeBatchRequest(BaseModel):
    """POST /analyze/batch request body."""
    items: list[AnalyzeRequest] = Field(..., min_length=1, max_length=100)


class MatchResponse(BaseModel):
    text: str
    position: int
    context: str


class CategoryResponse(BaseModel):
    name: str
    description: str
    weight: int
    count: int
    matches: list[MatchResponse]


class AnalysisResponse(BaseModel):
    """Full breakdown: every match of every category that fired."""
    score: int
    label: str
    word_count: int
    pattern_count: int
    catalog_version: str = CATALOG_VERSION
    patterns: dict[str, CategoryResponse]

    @classmethod
    def from_report(cls, report: Report) -> AnalysisResponse:
        analysis = report.analysis
        return cls(
            score=report.score,
            label=report.label,
            word_count=analysis.word_count,
            pattern_count=analysis.match_count,
            patterns={
                key: CategoryResponse(
                    name=cat.name,
                    description=cat.description,
                    weight=cat.weight,
                    count=cat.count,
                    matches=[MatchResponse(**m.to_payload()) for m in cat.matches],
                )
                for key, cat in analysis.categories.items()
            },
        )


class AnalyzeBatchResponse(BaseModel):
    """POST /analyze/batch response body."""
    results: list[AnalysisResponse]
    total: int
    scanned: int


# ============================================================
# SCORE
# ============================================================

class ScoreResponse(BaseModel):
    """POST /score response body."""
    score: int
    label: str
    word_count: int
    pattern_count: int

    @classmethod
    def from_report(cls, report: Report) -> ScoreResponse:
        return cls(
            score=report.score,
            label=report.label,
            word_count=report.analysis.word_count,
            pattern_count=report.analysis.match_count,
        )


# ============================================================
# CATALOG / HEALTH
# ============================================================

class CategoryInfo(BaseModel):
    key: str
    name: str
    description: str
    weight: int
    rule_count: int


class PatternsResponse(BaseModel):
    catalog_version: str
    total_categories: int
    total_rules: int
    patterns: list[CategoryInfo]


class HealthResponse(BaseModel):
    status: str
    version: str
    catalog_version: str
    categories: int
