"""FastAPI application factory and configuration.

Example:
    from portfolio.api import create_app

    app = create_app()

    # Run with uvicorn:
    # uvicorn portfolio.api.app:app --reload
"""

import os
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from portfolio.adapters.preferences import DEFAULT_COOKIE_MAX_AGE
from portfolio.api.dependencies import AppState, get_app_state
from portfolio.api.routes import (
    carousel_router,
    content_router,
    health_router,
    pages_router,
    stats_router,
    theme_router,
)
from portfolio.core.health import HealthChecker, ServiceCheck, ServiceStatus
from portfolio.core.logging import bind_contextvars, clear_contextvars, get_logger
from portfolio.core.stats import PanelStatus
from portfolio.providers.wakatime_provider import DEFAULT_TIMEOUT_SECONDS, WakaTimeProvider

logger = get_logger(__name__)

APP_VERSION = os.getenv("APP_VERSION", "1.0.0")


def _create_health_checker(app_state: AppState) -> HealthChecker:
    """Create health checker with a check for the statistics feed.

    Args:
        app_state: The application state container.

    Returns:
        Configured HealthChecker instance.
    """
    checker = HealthChecker(version=APP_VERSION)

    async def check_stats_feed() -> ServiceCheck:
        """Healthy once every panel has data; degraded while any has none."""
        if not app_state.is_initialized:
            return ServiceCheck(
                name="stats_feed",
                status=ServiceStatus.UNHEALTHY,
                message="App state not initialized",
            )
        statuses = {name: panel.status.value for name, panel in app_state.panels.items()}
        if all(value == PanelStatus.READY.value for value in statuses.values()):
            return ServiceCheck(
                name="stats_feed",
                status=ServiceStatus.HEALTHY,
                message="All panels loaded",
                details=statuses,
            )
        return ServiceCheck(
            name="stats_feed",
            status=ServiceStatus.DEGRADED,
            message="Some panels have no data",
            details=statuses,
        )

    checker.add_check("stats_feed", check_stats_feed)
    return checker


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Mount the statistics panels on startup, unmount them on shutdown."""
    logger.info("site_starting")

    app_state = get_app_state()

    timeout = float(os.getenv("STATS_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS)))
    cookie_max_age = int(os.getenv("THEME_COOKIE_MAX_AGE", str(DEFAULT_COOKIE_MAX_AGE)))

    await app_state.initialize(
        feed=WakaTimeProvider(timeout=timeout),
        theme_cookie_max_age=cookie_max_age,
    )
    app.state.health_checker = _create_health_checker(app_state)

    logger.info("site_started", version=APP_VERSION)

    yield

    logger.info("site_shutting_down")
    await app_state.shutdown()
    logger.info("site_shutdown_complete")


async def _bind_request_context(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Tag every log event of a request with its method and path."""
    bind_contextvars(method=request.method, path=request.url.path)
    try:
        return await call_next(request)
    finally:
        clear_contextvars()


def create_app(
    title: str = "Portfolio",
    description: str = "Personal portfolio site with theme, carousel and coding stats",
    cors_origins: list[str] | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        title: Title for the OpenAPI docs.
        description: Description for the OpenAPI docs.
        cors_origins: Allowed CORS origins. Defaults to the CORS_ORIGINS
            environment variable, "*" when unset.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title=title,
        description=description,
        version=APP_VERSION,
        lifespan=lifespan,
    )

    if cors_origins is None:
        cors_origins_env = os.getenv("CORS_ORIGINS", "*")
        if cors_origins_env == "*":
            cors_origins = ["*"]
        else:
            cors_origins = [origin.strip() for origin in cors_origins_env.split(",")]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(_bind_request_context)

    app.include_router(health_router)
    app.include_router(theme_router)
    app.include_router(carousel_router)
    app.include_router(content_router)
    app.include_router(stats_router)
    app.include_router(pages_router)

    logger.info(
        "app_configured",
        title=title,
        cors_origins=cors_origins,
    )

    return app


# Default app instance for uvicorn
app = create_app()
