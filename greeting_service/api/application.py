"""FastAPI application factory for the greeting service."""

from fastapi import FastAPI

from greeting_service.domain import APPLICATION_NAME, APPLICATION_VERSION
from greeting_service.greeting import GreetingResponderPort

from .routers import api_create_greeting_router, api_create_health_router


def create_api_application(responder: GreetingResponderPort) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        responder: Greeting resource handler shared by all requests.

    Returns:
        FastAPI: Framework application instance with greeting and health routes.

    Raises:
        ValueError: Raised when responder is invalid.
    """

    application = FastAPI(
        title=APPLICATION_NAME,
        version=APPLICATION_VERSION,
        description="Configuration-driven greeting resource",
    )
    application.include_router(api_create_health_router(responder=responder))
    application.include_router(api_create_greeting_router(responder=responder))

    return application
