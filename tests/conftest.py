"""Shared pytest fixtures for portfolio tests."""

import asyncio
from typing import Any

import pytest

from portfolio.adapters.preferences import MemoryPreferenceStore, StaticColorSchemeProbe
from portfolio.core.carousel_logic import CarouselItem
from portfolio.core.stats import (
    StatsPanel,
    parse_daily_durations,
    parse_languages,
    parse_skills,
)
from tests.mocks.providers import MockStatsFeed

pytest_plugins = ["pytest_asyncio"]


@pytest.fixture
def three_items() -> list[CarouselItem]:
    """Slides A, B and C."""
    return [
        CarouselItem(title="A", description="First", link="https://example.com/a"),
        CarouselItem(title="B", description="Second", link="https://example.com/b"),
        CarouselItem(title="C", description="Third", link="https://example.com/c"),
    ]


@pytest.fixture
def memory_store() -> MemoryPreferenceStore:
    """An empty, accessible preference store."""
    return MemoryPreferenceStore()


@pytest.fixture
def no_signal_probe() -> StaticColorSchemeProbe:
    """A colour-scheme probe with no OS signal."""
    return StaticColorSchemeProbe(dark=None)


@pytest.fixture
def mock_feed() -> MockStatsFeed:
    """A statistics feed returning the sample payloads.

    Example:
        def test_failure():
            feed = MockStatsFeed(failures={"languages"})
    """
    return MockStatsFeed()


@pytest.fixture
def ready_panels(mock_feed: MockStatsFeed) -> dict[str, StatsPanel[Any]]:
    """Panels whose fetches have already completed successfully.

    Loaded on a throwaway loop so sync TestClient tests can use them.
    """
    panels: dict[str, StatsPanel[Any]] = {
        "coding_hours": StatsPanel(
            "coding_hours", mock_feed.fetch_daily_durations, parse_daily_durations
        ),
        "languages": StatsPanel("languages", mock_feed.fetch_languages, parse_languages),
        "skills": StatsPanel("skills", mock_feed.fetch_skills, parse_skills),
    }

    async def load() -> None:
        for panel in panels.values():
            panel.mount()
            await panel.wait()

    asyncio.run(load())
    return panels
