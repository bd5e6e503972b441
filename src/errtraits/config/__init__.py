"""Configuration management using pydantic-settings."""

from .settings import (
    ErrtraitsSettings,
    LoggingSettings,
    clear_settings_cache,
    configure_from_settings,
    get_settings,
)

__all__ = [
    "ErrtraitsSettings",
    "LoggingSettings",
    "clear_settings_cache",
    "configure_from_settings",
    "get_settings",
]
