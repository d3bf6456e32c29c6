"""Typed runtime settings with dotenv support and startup validation."""

import logging
from pathlib import Path
from typing import Final

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_GREETING_MESSAGE: Final[str] = "Hello from Quarkus!"
DEFAULT_APP_ENVIRONMENT: Final[str] = "unknown"


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the greeting resource and its HTTP runtime.

    Environment variable names map directly to field names in uppercase.
    Example: `greeting_message` reads from `GREETING_MESSAGE`.

    Empty environment values are ignored, so an unset or blank override
    always resolves to the field default.

    Attributes:
        greeting_message: Greeting text served by the greeting resource (`greeting.message`).
        app_environment: Runtime environment label reported by the info endpoint (`app.environment`).
        application_host: Host interface for web server binding.
        application_port: Web server port.
        log_level: Root logging level name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    greeting_message: str = Field(default=DEFAULT_GREETING_MESSAGE)
    app_environment: str = Field(default=DEFAULT_APP_ENVIRONMENT)
    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(default=8080, ge=1, le=65535)
    log_level: str = Field(default="INFO")

    @field_validator("greeting_message")
    @classmethod
    def _validate_greeting_message(cls, value: str) -> str:
        if not value.strip():
            return DEFAULT_GREETING_MESSAGE
        return value

    @field_validator("app_environment")
    @classmethod
    def _validate_app_environment(cls, value: str) -> str:
        if not value.strip():
            return DEFAULT_APP_ENVIRONMENT
        return value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if not isinstance(logging.getLevelName(normalized_value), int):
            raise ValueError(f"unknown log level: {value}")
        return normalized_value


def config_load_settings(env_file: str | Path | None = ".env") -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Sources are resolved in priority order: process environment, the dotenv
    property file, then compiled-in defaults. A missing dotenv file is not an
    error.

    Args:
        env_file: Dotenv property file path, or None to skip file loading.

    Returns:
        AppSettings: Validated, immutable runtime settings object.

    Raises:
        SettingsLoadError: Raised when hosting options are invalid.
    """

    try:
        return AppSettings(_env_file=env_file)
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
