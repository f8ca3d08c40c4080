"""
Simple configuration management.

``Settings`` reads every value from environment variables when the
module is imported, with defaults for all fields. ``create_app`` and
``run_cli`` accept an explicit ``Settings`` so tests can override
values without touching the environment.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    title: str = os.getenv("CATALOG_TITLE", "Book Catalog System")
    version: str = os.getenv("CATALOG_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Populate a fresh store with the four sample books at startup.
    seed_on_startup: bool = _env_flag("SEED_ON_STARTUP", "true")

    host: str = os.getenv("CATALOG_HOST", "127.0.0.1")
    port: int = int(os.getenv("CATALOG_PORT", "8000"))


settings = Settings()
