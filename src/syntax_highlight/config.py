"""Process configuration, read once at startup from the environment and ``.env``."""

from __future__ import annotations

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.logging import RichHandler


class Settings(BaseSettings):
    """Service settings.

    Variable names carry no prefix (``API_KEY``, ``PORT``, ``LOG_REQUESTS``),
    so an existing ``.env`` for the service keeps working.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(default=None, description="Shared secret expected in the x-api-key header.")
    host: str = Field(default="0.0.0.0", description="Listen host.")
    port: int = Field(default=3000, description="Listen port.")
    log_requests: bool = Field(default=False, description="Log method, path, status and duration per request.")
    log_level: str = Field(default="INFO", description="Root log level.")
    default_theme: str = Field(default="github-dark", description="Theme used when a request omits one.")
    inline_styles: bool = Field(
        default=False, description="Emit inline span styles instead of a themed <style> block."
    )
    engine_cache_size: int = Field(default=32, ge=1, description="Maximum number of cached engines.")


def load_settings() -> Settings:
    return Settings()


def configure_logging(level: str = "INFO") -> None:
    """Route log records through rich. Safe to call more than once."""
    root = logging.getLogger()
    root.setLevel(level.upper())
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(RichHandler(rich_tracebacks=True, show_path=False))
