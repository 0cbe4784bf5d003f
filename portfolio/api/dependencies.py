"""FastAPI dependency injection for shared state and per-request theme.

Example:
    from fastapi import Depends
    from portfolio.api.dependencies import ThemeSession, get_theme_session

    @router.get("/theme")
    async def read_theme(session: ThemeSession = Depends(get_theme_session)):
        return {"theme": session.controller.state.value}
"""

from collections.abc import AsyncGenerator
from dataclasses import dataclass
from typing import Any

from fastapi import Request
from starlette.responses import Response

from portfolio.adapters.preferences import (
    COLOR_SCHEME_HINT,
    DEFAULT_COOKIE_MAX_AGE,
    ClientHintProbe,
    CookiePreferenceStore,
)
from portfolio.core.errors import PreferenceUnavailableError
from portfolio.core.logging import get_logger
from portfolio.core.stats import (
    StatsPanel,
    parse_daily_durations,
    parse_languages,
    parse_skills,
)
from portfolio.core.theme import ThemeController, ThemeState
from portfolio.ports.preferences import THEME_KEY
from portfolio.ports.stats import StatsFeed

logger = get_logger(__name__)

PANEL_CODING_HOURS = "coding_hours"
PANEL_LANGUAGES = "languages"
PANEL_SKILLS = "skills"


class AppState:
    """Application state container for shared resources.

    Holds the statistics feed and its panels, which live for the whole
    process and are shared by every request.
    """

    def __init__(self) -> None:
        self._feed: StatsFeed | None = None
        self._panels: dict[str, StatsPanel[Any]] = {}
        self.theme_cookie_max_age = DEFAULT_COOKIE_MAX_AGE
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    async def initialize(
        self,
        feed: StatsFeed,
        theme_cookie_max_age: int = DEFAULT_COOKIE_MAX_AGE,
    ) -> None:
        """Create the statistics panels and start their one-time fetches.

        Args:
            feed: Source of the coding statistics.
            theme_cookie_max_age: Lifetime of the theme cookie in seconds.
        """
        if self._initialized:
            logger.warning("app_state_already_initialized")
            return

        self._feed = feed
        self.theme_cookie_max_age = theme_cookie_max_age
        self._panels = {
            PANEL_CODING_HOURS: StatsPanel(
                PANEL_CODING_HOURS, feed.fetch_daily_durations, parse_daily_durations
            ),
            PANEL_LANGUAGES: StatsPanel(PANEL_LANGUAGES, feed.fetch_languages, parse_languages),
            PANEL_SKILLS: StatsPanel(PANEL_SKILLS, feed.fetch_skills, parse_skills),
        }
        for panel in self._panels.values():
            panel.mount()
        logger.info("stats_panels_mounted", panels=list(self._panels))

        self._initialized = True
        logger.info("app_state_initialized")

    async def shutdown(self) -> None:
        """Unmount the panels. In-flight fetches are left to finish and be dropped."""
        for panel in self._panels.values():
            panel.unmount()
        self._initialized = False
        logger.info("app_state_shutdown")

    @property
    def feed(self) -> StatsFeed:
        if self._feed is None:
            raise RuntimeError("App state not initialized")
        return self._feed

    @property
    def panels(self) -> dict[str, StatsPanel[Any]]:
        if not self._panels:
            raise RuntimeError("App state not initialized")
        return self._panels

    def panel(self, name: str) -> StatsPanel[Any]:
        return self.panels[name]


_app_state = AppState()


def get_app_state() -> AppState:
    """Get the global app state instance."""
    return _app_state


@dataclass
class ThemeSession:
    """The theme controller for one request, plus the cookie store behind it."""

    controller: ThemeController
    store: CookiePreferenceStore
    from_storage: bool

    def apply(self, response: Response) -> None:
        """Write pending cookies and colour-scheme hint headers to a response."""
        self.store.apply(response)
        response.headers["Accept-CH"] = COLOR_SCHEME_HINT
        response.headers["Critical-CH"] = COLOR_SCHEME_HINT
        response.headers["Vary"] = COLOR_SCHEME_HINT


async def get_theme_session(request: Request) -> AsyncGenerator[ThemeSession, None]:
    """FastAPI dependency for an initialized, request-scoped theme controller."""
    store = CookiePreferenceStore(request, max_age=_app_state.theme_cookie_max_age)
    controller = ThemeController(store, ClientHintProbe(request))
    controller.initialize()
    try:
        from_storage = ThemeState.parse(store.get(THEME_KEY)) is not None
    except PreferenceUnavailableError:
        from_storage = False
    try:
        yield ThemeSession(controller=controller, store=store, from_storage=from_storage)
    finally:
        controller.close()


async def get_panels() -> AsyncGenerator[dict[str, StatsPanel[Any]], None]:
    """FastAPI dependency for the statistics panels."""
    yield _app_state.panels
