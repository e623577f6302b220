"""Application settings loaded from environment variables via Pydantic."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """Central configuration for the App Links directory."""

    model_config = {"env_prefix": "APP_", "case_sensitive": False}

    # Storage
    storage_backend: Literal["sql", "memory"] = "sql"
    database_url: str = "sqlite:///./app_links.db"
    db_echo: bool = False

    # HTTP
    cors_origins: str = "*"
    cache_max_age: int = 60

    # API client
    api_base_url: str = "http://localhost:8000"
    api_timeout_seconds: float = 10.0

    # List views
    admin_page_size: int = Field(default=10, gt=0)
    public_page_size: int = Field(default=20, gt=0)

    # Logging
    log_level: str = "INFO"


def get_settings() -> AppSettings:
    """Build settings from the current environment."""
    return AppSettings()
