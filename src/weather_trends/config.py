"""
Application settings.

Values come from environment variables prefixed with ``WEATHER_TRENDS_``
(or a local ``.env`` file), e.g. ``WEATHER_TRENDS_API_PORT=8000``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the API, report flow, and CLI."""

    model_config = SettingsConfigDict(
        env_prefix="WEATHER_TRENDS_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "weather-trends"
    app_env: str = "development"
    debug: bool = False

    # API server
    api_host: str = "127.0.0.1"
    api_port: int = 5031
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Outbound HTTP
    http_timeout: float = Field(default=15.0, gt=0)

    # Request limits and chart smoothing
    max_range_days: int = Field(default=370, ge=0)
    moving_average_window: int = Field(default=7, ge=1)

    # Report output
    site_dir: Path = Path("site")


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (read once)."""
    return Settings()
