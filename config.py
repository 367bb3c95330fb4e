"""
Application configuration read from environment variables.
"""

import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv, find_dotenv

# Load environment variables
load_dotenv(find_dotenv())


def _get_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class AppConfig:
    """Finance tracker configuration."""

    def __init__(self):
        # Server
        self.database_url = os.environ.get("DATABASE_URL", "sqlite://")
        self.host = os.environ.get("HOST", "0.0.0.0")
        self.port = int(os.environ.get("PORT", 8000))
        self.reload = _get_bool("RELOAD", False)
        self.cors_origins = self._get_cors_origins()

        # Logging
        self.log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
        self.log_format = os.environ.get("LOG_FORMAT", "console").lower()
        if self.log_format not in ("console", "json"):
            raise ValueError("LOG_FORMAT must be 'console' or 'json'")

        # Client ledger
        self.api_base_url = os.environ.get("API_BASE_URL", "http://localhost:8000")
        self.mirror_timeout = float(os.environ.get("MIRROR_TIMEOUT", 10))
        self.ledger_dir = os.environ.get(
            "LEDGER_DIR", os.path.join(os.path.expanduser("~"), ".finance-tracker")
        )

    def _get_cors_origins(self) -> List[str]:
        raw = os.environ.get("CORS_ORIGINS", "*")
        return [origin.strip() for origin in raw.split(",") if origin.strip()]


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Return the process configuration, read once."""
    return AppConfig()
