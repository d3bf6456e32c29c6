"""Typed domain models shared across runtime layers.

This module provides simple immutable data contracts for the info and health
response payloads.
"""

from dataclasses import asdict, dataclass, field
from typing import Final

APPLICATION_NAME: Final[str] = "quarkus-demo"
APPLICATION_VERSION: Final[str] = "1.0.0"


@dataclass(frozen=True)
class AppInfo:
    """Application info payload returned by the info endpoint.

    Attributes:
        name: Constant application name.
        version: Constant application version.
        environment: Resolved runtime environment label.
        greeting: Resolved greeting message.
    """

    name: str
    version: str
    environment: str
    greeting: str

    def to_payload(self) -> dict[str, str]:
        """Return the JSON-ready mapping in declared field order.

        Returns:
            dict[str, str]: Mapping with `name`, `version`, `environment` and `greeting` keys.
        """

        return asdict(self)


@dataclass(frozen=True)
class HealthCheck:
    """Single named check reported by health surfaces.

    Attributes:
        name: Check identifier.
        status: `UP` or `DOWN`.
    """

    name: str
    status: str


@dataclass(frozen=True)
class HealthStatus:
    """Health response contract used by health-check surfaces.

    Attributes:
        status: Overall status text for service health.
        checks: Individual checks contributing to the overall status.
    """

    status: str
    checks: tuple[HealthCheck, ...] = field(default_factory=tuple)

    def to_payload(self) -> dict[str, object]:
        """Return the JSON-ready health mapping.

        Returns:
            dict[str, object]: Mapping with `status` and a `checks` list.
        """

        return {
            "status": self.status,
            "checks": [{"name": check.name, "status": check.status} for check in self.checks],
        }
