"""Typed interfaces for greeting resource handlers."""

from typing import Protocol

from greeting_service.domain import AppInfo


class GreetingResponderPort(Protocol):
    """Port definition for the read-only greeting resource."""

    def greeting_message(self) -> str:
        """Return the resolved greeting message.

        Returns:
            str: Non-empty greeting text.

        Raises:
            RuntimeError: Implementations must not raise.
        """

    def greeting_info(self) -> AppInfo:
        """Return application info built from the resolved configuration.

        Returns:
            AppInfo: Fresh info payload.

        Raises:
            RuntimeError: Implementations must not raise.
        """
