"""Health endpoint router composition for liveness and readiness probes."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from greeting_service.domain import HealthCheck, HealthStatus
from greeting_service.greeting import GreetingResponderPort


def api_create_health_router(responder: GreetingResponderPort) -> APIRouter:
    """Create health-check router with liveness and readiness surfaces.

    Readiness reports `DOWN` when the responder yields an empty greeting.
    `AppSettings` never resolves an empty greeting, so this only guards
    injected responders that are not backed by it.

    Args:
        responder: Greeting resource handler probed by the readiness check.

    Returns:
        APIRouter: Router exposing `/health`, `/health/live` and `/health/ready` endpoints.

    Raises:
        ValueError: Raised when responder is invalid.
    """

    if responder is None:
        raise ValueError("responder must not be None")

    router = APIRouter(prefix="/health", tags=["health"])

    def _readiness_checks() -> tuple[HealthCheck, ...]:
        configured = "UP" if responder.greeting_message() else "DOWN"
        return (HealthCheck(name="greeting-configuration", status=configured),)

    def _health_response(checks: tuple[HealthCheck, ...]) -> JSONResponse:
        overall = "UP" if all(check.status == "UP" for check in checks) else "DOWN"
        payload = HealthStatus(status=overall, checks=checks).to_payload()
        status_code = status.HTTP_200_OK if overall == "UP" else status.HTTP_503_SERVICE_UNAVAILABLE
        return JSONResponse(content=payload, status_code=status_code)

    @router.get("")
    def api_health_status() -> JSONResponse:
        """Return combined liveness and readiness state.

        Returns:
            JSONResponse: Aggregated health payload.
        """

        return _health_response(_readiness_checks())

    @router.get("/live")
    def api_health_live() -> JSONResponse:
        """Return liveness state.

        Returns:
            JSONResponse: Liveness payload without checks.
        """

        return _health_response(())

    @router.get("/ready")
    def api_health_ready() -> JSONResponse:
        """Return readiness state.

        Returns:
            JSONResponse: Readiness payload including the configuration check.
        """

        return _health_response(_readiness_checks())

    return router
