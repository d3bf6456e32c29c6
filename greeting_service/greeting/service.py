"""Greeting responder backed by an immutable settings snapshot."""
# pylint: disable=too-few-public-methods

import logging

from greeting_service.config import AppSettings
from greeting_service.domain import APPLICATION_NAME, APPLICATION_VERSION, AppInfo

logger = logging.getLogger(__name__)


class GreetingResponder:
    """Stateless handler composing greeting and info payloads.

    The settings object is captured at construction and only read afterwards,
    so one instance can serve concurrent requests without coordination.
    """

    def __init__(self, settings: AppSettings) -> None:
        """Initialize responder with resolved runtime settings.

        Args:
            settings: Validated application settings.

        Raises:
            ValueError: Raised when settings is None.
        """

        if settings is None:
            raise ValueError("settings must not be None")
        self._settings = settings

    def greeting_message(self) -> str:
        """Return the configured greeting message.

        Returns:
            str: Resolved `greeting.message` value.
        """

        logger.debug("Serving greeting message")
        return self._settings.greeting_message

    def greeting_info(self) -> AppInfo:
        """Build application info from constants and the settings snapshot.

        Returns:
            AppInfo: New info value for the current request.
        """

        logger.debug("Serving application info for environment %s", self._settings.app_environment)
        return AppInfo(
            name=APPLICATION_NAME,
            version=APPLICATION_VERSION,
            environment=self._settings.app_environment,
            greeting=self._settings.greeting_message,
        )
