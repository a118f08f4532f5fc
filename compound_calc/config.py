"""
Application configuration.

Settings are read from environment variables prefixed with ``COMPOUND_`` and
from an optional ``.env`` file.
"""

from __future__ import annotations

import threading
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Central configuration loaded from environment variables and defaults."""

    model_config = SettingsConfigDict(
        env_prefix="COMPOUND_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- HTTP ---
    API_PREFIX: str = "/api"
    CORS_ORIGINS: List[str] = Field(
        default_factory=lambda: [
            "http://localhost:3000",
            "http://localhost:5173",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ]
    )

    # --- Logging ---
    LOG_LEVEL: str = "INFO"

    # --- Calculation defaults ---
    DEFAULT_CURRENCY: str = "$"
    DEFAULT_COMPOUNDS_PER_YEAR: int = Field(12, gt=0)


_config_instance: Optional[AppConfig] = None
_config_lock = threading.Lock()


def get_config() -> AppConfig:
    """Return a cached ``AppConfig`` singleton."""
    global _config_instance
    if _config_instance is None:
        with _config_lock:
            if _config_instance is None:
                _config_instance = AppConfig()
    return _config_instance
