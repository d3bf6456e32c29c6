"""Greeting resource router exposing plain-text and JSON read endpoints."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse, PlainTextResponse

from greeting_service.greeting import GreetingResponderPort


def api_create_greeting_router(responder: GreetingResponderPort) -> APIRouter:
    """Create greeting router bound to one responder instance.

    Args:
        responder: Greeting resource handler.

    Returns:
        APIRouter: Router exposing `/greeting` and `/greeting/info` endpoints.

    Raises:
        ValueError: Raised when responder is invalid.
    """

    if responder is None:
        raise ValueError("responder must not be None")

    router = APIRouter(prefix="/greeting", tags=["greeting"])

    @router.get("", response_class=PlainTextResponse)
    def api_greeting_message() -> PlainTextResponse:
        """Return the configured greeting as plain text.

        Returns:
            PlainTextResponse: Greeting body with `text/plain` content type.
        """

        return PlainTextResponse(content=responder.greeting_message(), status_code=status.HTTP_200_OK)

    @router.get("/info")
    def api_greeting_info() -> JSONResponse:
        """Return application name, version, environment and greeting.

        Returns:
            JSONResponse: Info payload with `application/json` content type.
        """

        return JSONResponse(content=responder.greeting_info().to_payload(), status_code=status.HTTP_200_OK)

    return router
