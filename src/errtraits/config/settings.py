"""Environment-based configuration using pydantic-settings.

Example:
    >>> from errtraits.config import get_settings
    >>> get_settings().logging.logger_name
    'errtraits'

    # Or with environment variables:
    # ERRTRAITS_LOG_FORMAT=json
    # ERRTRAITS_LOG_LEVEL=ERROR
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..observability import LogRenderer, configure_logging


class LoggingSettings(BaseSettings):
    """Logging configuration for the log_err side-channel."""

    model_config = SettingsConfigDict(
        env_prefix="ERRTRAITS_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "stdlib", "none"] = Field(
        default="none",
        description="Renderer installed by configure_from_settings",
    )
    colors: bool | None = Field(default=None, description="Force ANSI colors on console output (None = auto-detect)")
    logger_name: str = Field(default="errtraits", min_length=1, description="Logger name used by log_err")

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class ErrtraitsSettings(BaseSettings):
    """Root settings for errtraits.

    Loads configuration from environment variables with ERRTRAITS_ prefix.
    Supports nested configuration and .env files.
    """

    model_config = SettingsConfigDict(
        env_prefix="ERRTRAITS_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> ErrtraitsSettings:
    """Get the global settings instance (cached)."""
    return ErrtraitsSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()


def configure_from_settings(settings: ErrtraitsSettings | None = None) -> LogRenderer:
    """Install the logging renderer described by settings (defaults to get_settings())."""
    cfg = (settings or get_settings()).logging
    return configure_logging(cfg.format, cfg.level, colors=cfg.colors, logger_name=cfg.logger_name)
