"""
Tellscan API — Main Application

POST /analyze        — Full pattern breakdown for one text
POST /analyze/batch  — Full breakdown for several texts
POST /score          — Score and label only
GET  /patterns       — List the pattern catalog
GET  /health         — Health check
"""

from __future__ import annotations

import sys
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.requests import Request

from tellscan import __version__
from tellscan.catalog import CATALOG_VERSION, CATEGORIES, describe_catalog
from tellscan.config import settings
from tellscan.detector import Report, analyze_text
from tellscan.logging import setup_logging, get_logger
from tellscan.schemas.scan import (
    AnalyzeRequest,
    AnalyzeBatchRequest,
    AnalysisResponse,
    AnalyzeBatchResponse,
    ScoreResponse,
    PatternsResponse,
    HealthResponse,
)

logger = get_logger("api")


# ============================================================
# STARTUP / SHUTDOWN
# ============================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging on startup."""
    setup_logging(level="INFO", stream=sys.stdout)
    logger.info("Tellscan API starting", extra={"category_count": len(CATEGORIES)})
    yield
    logger.info("Tellscan API shutting down")


app = FastAPI(
    title="Tellscan API",
    description="Heuristic scanner for AI writing patterns",
    version=f"{__version__} (catalog {CATALOG_VERSION})",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.CORS_ORIGINS.split(",")],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
    allow_credentials=False,
)


# ============================================================
# GLOBAL ERROR HANDLER
# ============================================================

@app.exception_handler(Exception)
async def global_error_handler(request: Request, exc: Exception):
    """Catch unhandled exceptions — return structured error, don't leak internals."""
    logger.error(
        f"Unhandled exception: {type(exc).__name__}",
        extra={"error": str(exc), "path": request.url.path, "method": request.method},
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error. The scan could not be completed."},
    )


def _analyze(text: str) -> Report:
    return analyze_text(
        text,
        context_chars=settings.CONTEXT_CHARS,
        multiplier=settings.DENSITY_MULTIPLIER,
    )


# ============================================================
# ROUTES
# ============================================================

@app.post("/analyze", response_model=AnalysisResponse)
async def analyze(request: AnalyzeRequest):
    """Scan text and return every match of every category that fired."""
    report = _analyze(request.text)
    logger.info(
        f"Analyze complete: score={report.score}",
        extra={
            "score": report.score,
            "word_count": report.analysis.word_count,
            "match_count": report.analysis.match_count,
        },
    )
    return AnalysisResponse.from_report(report)


@app.post("/analyze/batch", response_model=AnalyzeBatchResponse)
async def analyze_batch(request: AnalyzeBatchRequest):
    """Scan several texts. Results keep request order."""
    results = [AnalysisResponse.from_report(_analyze(item.text)) for item in request.items]
    logger.info(
        f"Batch complete: {len(results)} scanned",
        extra={"items": len(request.items)},
    )
    return AnalyzeBatchResponse(
        results=results,
        total=len(request.items),
        scanned=len(results),
    )


@app.post("/score", response_model=ScoreResponse)
async def score(request: AnalyzeRequest):
    """Scan text and return only the score line."""
    return ScoreResponse.from_report(_analyze(request.text))


@app.get("/patterns", response_model=PatternsResponse)
async def get_patterns():
    """Return the detection catalog in declaration order."""
    patterns = describe_catalog()
    return {
        "catalog_version": CATALOG_VERSION,
        "total_categories": len(patterns),
        "total_rules": sum(p["rule_count"] for p in patterns),
        "patterns": patterns,
    }


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check."""
    return {
        "status": "operational",
        "version": __version__,
        "catalog_version": CATALOG_VERSION,
        "categories": len(CATEGORIES),
    }


# --- Version Header + Request Logging Middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every API request with method, path, status, duration."""
    path = request.url.path
    if path == "/health":
        return await call_next(request)

    start = time.time()
    response = await call_next(request)
    duration_ms = round((time.time() - start) * 1000, 1)
    response.headers["X-Tellscan-Version"] = __version__

    logger.info(
        f"{request.method} {path} → {response.status_code} ({duration_ms}ms)",
        extra={
            "method": request.method,
            "path": path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        },
    )
    return response


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    uvicorn.run("api.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
