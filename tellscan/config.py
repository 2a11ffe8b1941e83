"""
Tellscan Configuration

Central settings loaded from environment variables.
The scan engine never reads these; the CLI and API pass them in.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Immutable application settings."""

    # --- Versioning ---
    VERSION: str = "1.0.0"

    # --- Scoring calibration ---
    CONTEXT_CHARS: int = int(os.getenv("TELLSCAN_CONTEXT_CHARS", "40"))
    DENSITY_MULTIPLIER: float = float(os.getenv("TELLSCAN_DENSITY_MULTIPLIER", "5.0"))

    # --- Reporting ---
    MAX_EXAMPLES: int = int(os.getenv("TELLSCAN_MAX_EXAMPLES", "3"))

    # --- CLI input ---
    STDIN_TIMEOUT: float = float(os.getenv("TELLSCAN_STDIN_TIMEOUT", "0.1"))

    # --- API ---
    MAX_TEXT_CHARS: int = int(os.getenv("TELLSCAN_MAX_TEXT_CHARS", "50000"))
    HOST: str = os.getenv("TELLSCAN_HOST", "127.0.0.1")
    PORT: int = int(os.getenv("TELLSCAN_PORT", "8000"))

    # --- CORS ---
    CORS_ORIGINS: str = os.getenv("TELLSCAN_CORS_ORIGINS", "*")


settings = Settings()
