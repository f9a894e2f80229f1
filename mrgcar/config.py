# =============================================================================
# File: mrgcar/config.py
# Purpose: Settings read from the environment (.env is loaded if present).
# =============================================================================
from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_DATABASE_URL = "sqlite:///mrgcar.db"
DEFAULT_ADMIN_EMAIL = "admin@mrgcar.com"
DEFAULT_ADMIN_PASSWORD = "admin123"


@dataclass(frozen=True)
class Settings:
    database_url: str
    app_env: str
    log_level: str | None
    admin_email: str
    admin_password: str | None

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def is_test(self) -> bool:
        return self.app_env == "test"


def get_settings() -> Settings:
    """Read settings from the current environment.

    Read on every call so that scripts and tests see the variables
    they set before calling in.
    """
    return Settings(
        database_url=os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL,
        app_env=(os.getenv("APP_ENV") or "development").strip().lower(),
        log_level=(os.getenv("LOG_LEVEL") or "").strip() or None,
        admin_email=(os.getenv("ADMIN_EMAIL") or "").strip() or DEFAULT_ADMIN_EMAIL,
        admin_password=os.getenv("ADMIN_PASSWORD") or None,
    )
