"""Tests for health check functionality."""

import asyncio
from unittest.mock import patch

import pytest

from portfolio.core.health import (
    HealthChecker,
    HealthReport,
    ServiceCheck,
    ServiceStatus,
    aggregate_status,
)


class TestServiceStatus:
    """Tests for ServiceStatus enum."""

    def test_status_values(self) -> None:
        """Should have correct string values."""
        assert ServiceStatus.HEALTHY.value == "healthy"
        assert ServiceStatus.UNHEALTHY.value == "unhealthy"
        assert ServiceStatus.DEGRADED.value == "degraded"
        assert ServiceStatus.UNKNOWN.value == "unknown"


class TestHealthReport:
    """Tests for HealthReport dataclass."""

    def test_to_dict(self) -> None:
        """Should convert to dictionary correctly."""
        report = HealthReport(
            status=ServiceStatus.DEGRADED,
            timestamp="2024-01-01T00:00:00Z",
            checks=[
                ServiceCheck(
                    name="stats_feed",
                    status=ServiceStatus.DEGRADED,
                    latency_ms=1.5,
                    details={"languages": "no_data"},
                )
            ],
            version="1.0.0",
        )
        result = report.to_dict()

        assert result["status"] == "degraded"
        assert result["version"] == "1.0.0"
        assert result["checks"] == [
            {
                "name": "stats_feed",
                "status": "degraded",
                "latency_ms": 1.5,
                "message": None,
                "details": {"languages": "no_data"},
            }
        ]


class TestAggregateStatus:
    """Tests for aggregate_status."""

    def test_empty_is_healthy(self) -> None:
        assert aggregate_status([]) == ServiceStatus.HEALTHY

    def test_unhealthy_wins(self) -> None:
        checks = [
            ServiceCheck("a", ServiceStatus.DEGRADED),
            ServiceCheck("b", ServiceStatus.UNHEALTHY),
        ]
        assert aggregate_status(checks) == ServiceStatus.UNHEALTHY

    def test_degraded(self) -> None:
        checks = [
            ServiceCheck("a", ServiceStatus.HEALTHY),
            ServiceCheck("b", ServiceStatus.DEGRADED),
        ]
        assert aggregate_status(checks) == ServiceStatus.DEGRADED

    def test_unknown(self) -> None:
        checks = [
            ServiceCheck("a", ServiceStatus.HEALTHY),
            ServiceCheck("b", ServiceStatus.UNKNOWN),
        ]
        assert aggregate_status(checks) == ServiceStatus.UNKNOWN


class TestHealthChecker:
    """Tests for HealthChecker class."""

    async def test_no_checks_healthy(self) -> None:
        """Should report healthy when no checks are registered."""
        checker = HealthChecker(version="1.0.0")
        report = await checker.check_all()
        assert report.status == ServiceStatus.HEALTHY
        assert report.checks == []
        assert report.version == "1.0.0"

    async def test_check_one_fills_latency(self) -> None:
        async def healthy() -> ServiceCheck:
            return ServiceCheck(name="stats_feed", status=ServiceStatus.HEALTHY)

        checker = HealthChecker()
        checker.add_check("stats_feed", healthy)
        result = await checker.check_one("stats_feed")
        assert result.status == ServiceStatus.HEALTHY
        assert result.latency_ms is not None

    async def test_check_one_unknown_name(self) -> None:
        checker = HealthChecker()
        with pytest.raises(KeyError):
            await checker.check_one("missing")

    async def test_failing_check_is_unhealthy(self) -> None:
        """Should turn an exception into an unhealthy result."""

        async def broken() -> ServiceCheck:
            raise RuntimeError("feed exploded")

        checker = HealthChecker()
        checker.add_check("stats_feed", broken)
        result = await checker.check_one("stats_feed")
        assert result.status == ServiceStatus.UNHEALTHY
        assert result.message == "feed exploded"

    async def test_slow_check_times_out(self) -> None:
        """Should report unhealthy when a check exceeds the timeout."""

        async def slow() -> ServiceCheck:
            await asyncio.sleep(1)
            return ServiceCheck(name="slow", status=ServiceStatus.HEALTHY)

        checker = HealthChecker()
        checker.add_check("slow", slow)
        with patch("portfolio.core.health.CHECK_TIMEOUT", 0.01):
            result = await checker.check_one("slow")
        assert result.status == ServiceStatus.UNHEALTHY
        assert result.message == "Health check timed out"

    async def test_remove_check(self) -> None:
        async def broken() -> ServiceCheck:
            raise RuntimeError("nope")

        checker = HealthChecker()
        checker.add_check("stats_feed", broken)
        checker.remove_check("stats_feed")
        checker.remove_check("stats_feed")
        report = await checker.check_all()
        assert report.status == ServiceStatus.HEALTHY

    async def test_check_all_aggregates(self) -> None:
        async def healthy() -> ServiceCheck:
            return ServiceCheck(name="a", status=ServiceStatus.HEALTHY)

        async def degraded() -> ServiceCheck:
            return ServiceCheck(name="b", status=ServiceStatus.DEGRADED)

        checker = HealthChecker()
        checker.add_check("a", healthy)
        checker.add_check("b", degraded)
        report = await checker.check_all()
        assert report.status == ServiceStatus.DEGRADED
        assert {check.name for check in report.checks} == {"a", "b"}
