"""Tests for the HTTP API module."""

from contextlib import asynccontextmanager
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from portfolio.api.app import _create_health_checker, create_app
from portfolio.api.dependencies import (
    PANEL_CODING_HOURS,
    PANEL_LANGUAGES,
    PANEL_SKILLS,
    AppState,
    get_app_state,
)
from portfolio.core.health import HealthChecker, ServiceCheck, ServiceStatus
from portfolio.core.stats import PanelStatus
from tests.mocks.providers import MockStatsFeed


def _app_with_checker(checker: HealthChecker):
    app = create_app()

    @asynccontextmanager
    async def test_lifespan(app):
        app.state.health_checker = checker
        yield

    app.router.lifespan_context = test_lifespan
    return app


class TestAppState:
    """Tests for AppState class."""

    def test_initial_state(self) -> None:
        """Should start uninitialized."""
        state = AppState()
        assert state.is_initialized is False

    def test_feed_raises_before_init(self) -> None:
        """Should raise when accessing the feed before init."""
        state = AppState()
        with pytest.raises(RuntimeError, match="App state not initialized"):
            _ = state.feed

    def test_panels_raise_before_init(self) -> None:
        state = AppState()
        with pytest.raises(RuntimeError, match="App state not initialized"):
            _ = state.panels

    async def test_initialize_mounts_panels(self) -> None:
        """Should create one mounted panel per endpoint and fetch each once."""
        feed = MockStatsFeed()
        state = AppState()
        await state.initialize(feed, theme_cookie_max_age=60)

        assert state.is_initialized is True
        assert state.feed is feed
        assert state.theme_cookie_max_age == 60
        assert set(state.panels) == {PANEL_CODING_HOURS, PANEL_LANGUAGES, PANEL_SKILLS}
        for panel in state.panels.values():
            assert panel.mounted is True
            assert await panel.wait() is PanelStatus.READY
        assert sorted(feed.calls) == ["daily", "languages", "skills"]

    async def test_initialize_twice_is_ignored(self) -> None:
        first = MockStatsFeed()
        state = AppState()
        await state.initialize(first)
        await state.initialize(MockStatsFeed())
        assert state.feed is first
        for panel in state.panels.values():
            await panel.wait()

    async def test_shutdown_unmounts(self) -> None:
        """Should unmount panels and leave their fetches to be discarded."""
        state = AppState()
        await state.initialize(MockStatsFeed())
        await state.shutdown()

        assert state.is_initialized is False
        for panel in state.panels.values():
            assert panel.mounted is False
            await panel.wait()
            assert panel.status is PanelStatus.LOADING

    def test_get_app_state_is_shared(self) -> None:
        assert get_app_state() is get_app_state()


class TestCreateApp:
    """Tests for create_app factory."""

    def test_creates_app_with_defaults(self) -> None:
        """Should create app with default configuration."""
        app = create_app()
        assert app.title == "Portfolio"
        assert app.version is not None

    def test_creates_app_with_custom_title(self) -> None:
        app = create_app(title="Custom Site")
        assert app.title == "Custom Site"

    def test_creates_app_with_custom_cors(self) -> None:
        """Should add middleware for custom CORS origins."""
        app = create_app(cors_origins=["http://localhost:3000"])
        assert len(app.user_middleware) > 0

    def test_includes_routes(self) -> None:
        """Should include health, API, chart and page routes."""
        app = create_app()
        routes = {getattr(route, "path", None) for route in app.routes}
        for path in (
            "/health",
            "/ready",
            "/live",
            "/api/theme",
            "/api/theme/toggle",
            "/api/theme/marker",
            "/api/carousel",
            "/api/carousel/navigate",
            "/api/carousel/open",
            "/api/content/home",
            "/api/stats/{panel_path}",
            "/charts/coding-hours.png",
            "/charts/languages.png",
            "/",
            "/about",
            "/projects",
            "/uses",
        ):
            assert path in routes


class TestHealthRoutes:
    """Tests for health check routes without full initialization."""

    def test_liveness_endpoint(self) -> None:
        """Should return alive status without initialization."""
        app = _app_with_checker(HealthChecker(version="test"))
        with TestClient(app) as client:
            response = client.get("/live")
            assert response.status_code == 200
            assert response.json() == {"alive": True}

    def test_health_endpoint_with_no_checks(self) -> None:
        """Should return healthy when no checks registered."""
        app = _app_with_checker(HealthChecker(version="test"))
        with TestClient(app) as client:
            response = client.get("/health")
            assert response.status_code == 200
            data = response.json()
            assert data["status"] == "healthy"
            assert data["version"] == "test"
            assert data["checks"] == []

    def test_degraded_is_unhealthy_but_ready(self) -> None:
        """Should return 503 from /health but 200 from /ready when degraded."""

        async def degraded_check() -> ServiceCheck:
            return ServiceCheck(name="stats_feed", status=ServiceStatus.DEGRADED)

        checker = HealthChecker(version="test")
        checker.add_check("stats_feed", degraded_check)
        app = _app_with_checker(checker)

        with TestClient(app) as client:
            assert client.get("/health").status_code == 503
            response = client.get("/ready")
            assert response.status_code == 200
            assert response.json() == {"ready": True, "status": "degraded"}

    def test_unhealthy_is_not_ready(self) -> None:
        async def unhealthy_check() -> ServiceCheck:
            return ServiceCheck(name="stats_feed", status=ServiceStatus.UNHEALTHY)

        checker = HealthChecker(version="test")
        checker.add_check("stats_feed", unhealthy_check)
        app = _app_with_checker(checker)

        with TestClient(app) as client:
            response = client.get("/ready")
            assert response.status_code == 503
            assert response.json()["ready"] is False


class TestStatsFeedCheck:
    """Tests for the stats_feed health check."""

    async def test_uninitialized_is_unhealthy(self) -> None:
        checker = _create_health_checker(AppState())
        result = await checker.check_one("stats_feed")
        assert result.status == ServiceStatus.UNHEALTHY

    async def test_all_panels_ready_is_healthy(self) -> None:
        state = AppState()
        await state.initialize(MockStatsFeed())
        for panel in state.panels.values():
            await panel.wait()

        result = await _create_health_checker(state).check_one("stats_feed")
        assert result.status == ServiceStatus.HEALTHY
        assert result.details == {
            PANEL_CODING_HOURS: "ready",
            PANEL_LANGUAGES: "ready",
            PANEL_SKILLS: "ready",
        }

    async def test_failed_panel_is_degraded(self) -> None:
        state = AppState()
        await state.initialize(MockStatsFeed(failures={"languages"}))
        for panel in state.panels.values():
            await panel.wait()

        result = await _create_health_checker(state).check_one("stats_feed")
        assert result.status == ServiceStatus.DEGRADED
        assert result.details[PANEL_LANGUAGES] == "no_data"


class TestLifespan:
    """Tests for application startup and shutdown."""

    def test_startup_mounts_panels_and_registers_check(self) -> None:
        """Should mount the panels against the configured feed."""
        feed = MockStatsFeed()
        state = AppState()
        app = create_app()

        with (
            patch("portfolio.api.app.get_app_state", return_value=state),
            patch("portfolio.api.app.WakaTimeProvider", return_value=feed),
        ):
            with TestClient(app) as client:
                assert state.is_initialized is True
                response = client.get("/ready")
                assert response.status_code == 200

        assert state.is_initialized is False
        assert all(not panel.mounted for panel in state.panels.values())
