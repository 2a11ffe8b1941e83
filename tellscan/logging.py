"""
Structured Logging — JSON or Text Output

Configures Python logging for the ``tellscan`` namespace.
Each JSON entry includes timestamp, level, logger, message and
any whitelisted context fields.

The CLI logs to stderr so stdout only carries the rendered report;
the API logs to stdout.

Usage:
    from tellscan.logging import get_logger
    logger = get_logger("detector")
    logger.info("Scan complete", extra={"score": 72, "word_count": 140})
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import IO, Optional


LOG_LEVEL = os.getenv("TELLSCAN_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = os.getenv("TELLSCAN_LOG_FORMAT", "text")  # "json" or "text"

EXTRA_FIELDS = (
    "score", "label", "word_count", "match_count", "category_count",
    "command", "source", "items", "duration_ms", "status_code",
    "method", "path", "error", "error_type",
)


class JSONFormatter(logging.Formatter):
    """Formats log records as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in EXTRA_FIELDS:
            val = getattr(record, key, None)
            if val is not None:
                entry[key] = val

        if record.exc_info and record.exc_info[0]:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable format for terminals."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def setup_logging(
    level: Optional[str] = None,
    stream: Optional[IO[str]] = None,
    fmt: Optional[str] = None,
) -> logging.Logger:
    """Configure the tellscan logger. Call once at startup."""
    root = logging.getLogger("tellscan")
    level_name = (level or LOG_LEVEL).upper()
    root.setLevel(getattr(logging, level_name, logging.WARNING))

    root.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    if (fmt or LOG_FORMAT) == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(TextFormatter())

    root.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    return root


def get_logger(name: str) -> logging.Logger:
    """Get a named logger under the tellscan namespace."""
    return logging.getLogger(f"tellscan.{name}")
