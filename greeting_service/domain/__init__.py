"""Domain models used across application layer boundaries."""

from .models import APPLICATION_NAME, APPLICATION_VERSION, AppInfo, HealthCheck, HealthStatus

__all__ = ["APPLICATION_NAME", "APPLICATION_VERSION", "AppInfo", "HealthCheck", "HealthStatus"]
