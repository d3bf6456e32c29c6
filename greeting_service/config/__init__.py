"""Configuration package for runtime settings and startup validation."""

from .settings import (
    DEFAULT_APP_ENVIRONMENT,
    DEFAULT_GREETING_MESSAGE,
    AppSettings,
    SettingsLoadError,
    config_load_settings,
)

__all__ = [
    "AppSettings",
    "DEFAULT_APP_ENVIRONMENT",
    "DEFAULT_GREETING_MESSAGE",
    "SettingsLoadError",
    "config_load_settings",
]
