"""Tests for API health endpoint behavior.

These tests validate liveness and readiness responses and that greeting
routes leave the health surface untouched.
"""

from fastapi.testclient import TestClient

from greeting_service.api.application import create_api_application
from greeting_service.domain import AppInfo


class _EmptyGreetingResponder:
    """Test double that simulates a responder without a greeting."""

    def greeting_message(self) -> str:
        """Return an empty greeting.

        Returns:
            str: Empty greeting text.

        Raises:
            RuntimeError: Never raised by this test double.
        """

        return ""

    def greeting_info(self) -> AppInfo:
        """Return info with an empty greeting.

        Returns:
            AppInfo: Info payload.

        Raises:
            RuntimeError: Never raised by this test double.
        """

        return AppInfo(name="quarkus-demo", version="1.0.0", environment="test", greeting="")


class _StaticGreetingResponder(_EmptyGreetingResponder):
    """Test double that returns a fixed greeting."""

    def greeting_message(self) -> str:
        """Return deterministic greeting.

        Returns:
            str: Greeting text.

        Raises:
            RuntimeError: Never raised by this test double.
        """

        return "Hello from tests"


def test_api_health_live_returns_up() -> None:
    """Return HTTP 200 and an empty check list for liveness.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    client = TestClient(create_api_application(_StaticGreetingResponder()))

    response = client.get("/health/live")

    assert response.status_code == 200
    assert response.json() == {"status": "UP", "checks": []}


def test_api_health_ready_reports_configuration_check() -> None:
    """Return HTTP 200 with the greeting configuration check for readiness.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    client = TestClient(create_api_application(_StaticGreetingResponder()))

    ready_response = client.get("/health/ready")
    health_response = client.get("/health")

    assert ready_response.status_code == 200
    assert ready_response.json() == {
        "status": "UP",
        "checks": [{"name": "greeting-configuration", "status": "UP"}],
    }
    assert health_response.json() == ready_response.json()


def test_api_health_ready_returns_service_unavailable_without_greeting() -> None:
    """Return HTTP 503 and DOWN status when the responder has no greeting.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    client = TestClient(create_api_application(_EmptyGreetingResponder()))

    response = client.get("/health/ready")

    assert response.status_code == 503
    assert response.json()["status"] == "DOWN"
    assert client.get("/health/live").status_code == 200


def test_api_health_routes_coexist_with_greeting_routes() -> None:
    """Serve health and greeting routes side by side.

    Returns:
        None: Assertions validate routing.

    Raises:
        AssertionError: Raised when a route is shadowed.
    """

    client = TestClient(create_api_application(_StaticGreetingResponder()))

    assert client.get("/greeting").text == "Hello from tests"
    for path in ("/health", "/health/live", "/health/ready"):
        assert client.get(path).headers["content-type"].startswith("application/json")
