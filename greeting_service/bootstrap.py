"""Application bootstrap wiring for startup validation and dependency assembly."""

import logging

from fastapi import FastAPI

from greeting_service.api import create_api_application
from greeting_service.config import AppSettings, config_load_settings
from greeting_service.greeting import GreetingResponder
from greeting_service.logging_setup import logging_configure

logger = logging.getLogger(__name__)


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-resolved settings; loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings if settings is not None else config_load_settings()
    logging_configure(resolved_settings.log_level)
    responder = GreetingResponder(settings=resolved_settings)
    logger.info(
        "Greeting service configured for environment %s on port %d",
        resolved_settings.app_environment,
        resolved_settings.application_port,
    )
    return create_api_application(responder=responder)
