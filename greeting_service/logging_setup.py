"""Process-wide logging configuration for the service runtime."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_NAME = "greeting_service.console"


def logging_configure(level: str | int = logging.INFO) -> logging.Logger:
    """Attach one console handler to the root logger and set its level.

    Repeated calls only update the level; they never stack handlers.

    Args:
        level: Logging level name or numeric value.

    Returns:
        logging.Logger: Configured root logger.
    """

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if not any(handler.get_name() == _HANDLER_NAME for handler in root_logger.handlers):
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.set_name(_HANDLER_NAME)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(console_handler)

    return root_logger
