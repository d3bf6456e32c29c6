"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service.
"""

import argparse

import uvicorn

from greeting_service.bootstrap import bootstrap_create_application
from greeting_service.config import config_load_settings


def main_parse_port(value: str) -> int:
    """Parse a command-line port within the 1..65535 range.

    Args:
        value: Raw argument text.

    Returns:
        int: Validated port number.

    Raises:
        argparse.ArgumentTypeError: Raised when value is not a valid port.
    """

    try:
        port = int(value)
    except ValueError as error:
        raise argparse.ArgumentTypeError(f"invalid port: {value}") from error
    if not 1 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port must be between 1 and 65535: {value}")
    return port


def main_build_argument_parser() -> argparse.ArgumentParser:
    """Build the command-line parser for runtime overrides.

    Returns:
        argparse.ArgumentParser: Parser accepting host and port overrides.
    """

    argument_parser = argparse.ArgumentParser(description="Greeting service runtime entrypoint")
    argument_parser.add_argument(
        "--host",
        dest="host",
        type=str,
        help="Optional bind host override for APPLICATION_HOST",
    )
    argument_parser.add_argument(
        "--port",
        dest="port",
        type=main_parse_port,
        help="Optional bind port override for APPLICATION_PORT",
    )
    return argument_parser


def main(argv: list[str] | None = None) -> None:
    """Run the HTTP server with validated startup configuration.

    Args:
        argv: Optional argument list; defaults to process arguments.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
    """

    parsed_arguments = main_build_argument_parser().parse_args(argv)
    settings = config_load_settings()
    application = bootstrap_create_application(settings=settings)
    uvicorn.run(
        application,
        host=parsed_arguments.host if parsed_arguments.host is not None else settings.application_host,
        port=parsed_arguments.port if parsed_arguments.port is not None else settings.application_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
