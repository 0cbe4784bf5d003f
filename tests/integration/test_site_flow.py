"""Integration tests for a visitor session against the full application.

The statistics feed is replaced with the mock feed; everything else runs
as it does in production, including startup and shutdown.
"""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from portfolio.adapters.preferences import COLOR_SCHEME_HINT
from portfolio.api.app import create_app
from portfolio.api.dependencies import AppState
from portfolio.core.content import COURSEWORK
from portfolio.core.stats import PanelStatus
from tests.mocks.providers import MockStatsFeed


def _run_site(feed: MockStatsFeed) -> Iterator[tuple[TestClient, AppState]]:
    state = AppState()
    with (
        patch("portfolio.api.app.get_app_state", return_value=state),
        patch("portfolio.api.dependencies._app_state", state),
        patch("portfolio.api.app.WakaTimeProvider", return_value=feed),
    ):
        with TestClient(create_app()) as client:
            for panel in state.panels.values():
                client.portal.call(panel.wait)
            yield client, state


@pytest.fixture
def site() -> Iterator[tuple[TestClient, AppState]]:
    """A running site whose statistics have loaded."""
    yield from _run_site(MockStatsFeed())


@pytest.fixture
def site_without_stats() -> Iterator[tuple[TestClient, AppState]]:
    """A running site whose statistics feed is unreachable."""
    yield from _run_site(MockStatsFeed(failures={"daily", "languages", "skills"}))


class TestThemeFlow:
    """A visitor toggling the theme across page loads."""

    def test_toggle_sticks_across_pages(self, site) -> None:
        client, _ = site

        first = client.get("/", headers={COLOR_SCHEME_HINT: "light"})
        assert '<html lang="en" class="">' in first.text

        toggled = client.post("/api/theme/toggle")
        assert toggled.json()["theme"] == "dark"

        # OS still says light, but the stored choice wins
        about = client.get("/about", headers={COLOR_SCHEME_HINT: "light"})
        assert '<html lang="en" class="dark">' in about.text
        assert "/charts/" not in about.text

        home = client.get("/")
        assert "/charts/coding-hours.png?theme=dark" in home.text

    def test_toggle_refreshes_charts(self, site) -> None:
        client, _ = site
        body = client.post("/api/theme/toggle").json()
        for url in body["refresh"].values():
            response = client.get(url)
            assert response.status_code == 200
            assert response.headers["content-type"] == "image/png"


class TestCarouselFlow:
    """A visitor paging through the coursework carousel."""

    def test_round_trip(self, site) -> None:
        client, _ = site
        index = client.get("/api/carousel").json()["active_index"]

        seen = []
        for _ in range(len(COURSEWORK)):
            body = client.post(
                "/api/carousel/navigate",
                json={"active_index": index, "action": "key", "key": "ArrowRight"},
            ).json()
            index = body["active_index"]
            seen.append(body["item"]["title"])

        assert index == 0
        assert seen[-1] == COURSEWORK[0].title

        link = client.post("/api/carousel/open", json={"active_index": index}).json()
        assert link["url"] == COURSEWORK[0].link


class TestStatsFlow:
    """Statistics loading at startup."""

    def test_panels_ready_and_healthy(self, site) -> None:
        client, state = site
        assert all(p.status is PanelStatus.READY for p in state.panels.values())
        assert client.get("/health").status_code == 200
        assert client.get("/api/stats/skills").json()["status"] == "ready"

    def test_feed_down_degrades_quietly(self, site_without_stats) -> None:
        """Should keep serving pages with placeholders when the feed fails."""
        client, _ = site_without_stats

        home = client.get("/")
        assert home.status_code == 200
        assert "No data available" in home.text

        assert client.get("/api/stats/languages").json()["status"] == "no_data"
        assert client.get("/charts/languages.png").status_code == 200

        assert client.get("/health").status_code == 503
        assert client.get("/ready").status_code == 200
