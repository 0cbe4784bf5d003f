"""Health checks for the site and its external statistics feed.

Example:
    checker = HealthChecker(version="1.0.0")
    checker.add_check("stats_feed", check_stats_feed)
    report = await checker.check_all()
"""

import asyncio
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any

# Seconds a single check may take before it is reported unhealthy
CHECK_TIMEOUT = 10.0


class ServiceStatus(Enum):
    """Status of an individual service."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    DEGRADED = "degraded"
    UNKNOWN = "unknown"


@dataclass
class ServiceCheck:
    """Result of a single service health check."""

    name: str
    status: ServiceStatus
    latency_ms: float | None = None
    message: str | None = None
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class HealthReport:
    """Aggregated health report for all services."""

    status: ServiceStatus
    timestamp: str
    checks: list[ServiceCheck]
    version: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "status": self.status.value,
            "timestamp": self.timestamp,
            "version": self.version,
            "checks": [
                {
                    "name": check.name,
                    "status": check.status.value,
                    "latency_ms": check.latency_ms,
                    "message": check.message,
                    "details": check.details,
                }
                for check in self.checks
            ],
        }


HealthCheckFunc = Callable[[], Coroutine[Any, Any, ServiceCheck]]


def aggregate_status(checks: list[ServiceCheck]) -> ServiceStatus:
    """Overall status: any unhealthy wins, then any degraded."""
    if all(c.status == ServiceStatus.HEALTHY for c in checks):
        return ServiceStatus.HEALTHY
    if any(c.status == ServiceStatus.UNHEALTHY for c in checks):
        return ServiceStatus.UNHEALTHY
    if any(c.status == ServiceStatus.DEGRADED for c in checks):
        return ServiceStatus.DEGRADED
    return ServiceStatus.UNKNOWN


class HealthChecker:
    """Runs registered health checks and aggregates the results."""

    def __init__(self, version: str | None = None) -> None:
        self._checks: dict[str, HealthCheckFunc] = {}
        self._version = version

    def add_check(self, name: str, check_func: HealthCheckFunc) -> None:
        """Register a health check function.

        Args:
            name: Name of the service to check.
            check_func: Async function that returns a ServiceCheck.
        """
        self._checks[name] = check_func

    def remove_check(self, name: str) -> None:
        self._checks.pop(name, None)

    async def check_one(self, name: str) -> ServiceCheck:
        """Run a single health check.

        Raises:
            KeyError: If no check is registered with that name.
        """
        if name not in self._checks:
            raise KeyError(f"No health check registered for: {name}")

        check_func = self._checks[name]
        loop = asyncio.get_running_loop()
        start = loop.time()

        try:
            result = await asyncio.wait_for(check_func(), timeout=CHECK_TIMEOUT)
        except TimeoutError:
            return ServiceCheck(
                name=name,
                status=ServiceStatus.UNHEALTHY,
                latency_ms=round((loop.time() - start) * 1000, 2),
                message="Health check timed out",
            )
        except Exception as ex:
            return ServiceCheck(
                name=name,
                status=ServiceStatus.UNHEALTHY,
                latency_ms=round((loop.time() - start) * 1000, 2),
                message=str(ex),
            )

        if result.latency_ms is None:
            result.latency_ms = round((loop.time() - start) * 1000, 2)
        return result

    async def check_all(self) -> HealthReport:
        """Run all registered health checks concurrently."""
        timestamp = datetime.now(UTC).isoformat()
        checks = list(await asyncio.gather(*(self.check_one(name) for name in self._checks)))

        return HealthReport(
            status=aggregate_status(checks),
            timestamp=timestamp,
            checks=checks,
            version=self._version,
        )
