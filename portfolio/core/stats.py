"""Coding statistics: feed payload parsing and panel lifecycle.

The feed is an opaque external collaborator. This module only reads the
handful of fields the charts and the skills widget display, and wraps
each endpoint in a StatsPanel that fetches once when mounted.

Example:
    panel = StatsPanel("languages", feed.fetch_languages, parse_languages)
    panel.mount()          # fire-and-forget fetch
    ...
    if panel.status is PanelStatus.READY:
        render(panel.data)
"""

import asyncio
from collections.abc import Awaitable, Callable, Collection
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Any, Generic, TypeVar

from portfolio.core.content import (
    DEFAULT_LANGUAGE_ICON,
    LANGUAGE_DOCS,
    LANGUAGE_ICONS,
    RELEVANT_SKILLS,
)
from portfolio.core.errors import ErrorCategory, StatsFeedError, classify_error
from portfolio.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

SECONDS_PER_HOUR = 3600


@dataclass(frozen=True)
class DailyCodingEntry:
    """Hours spent coding on one day."""

    label: str
    hours: float


@dataclass(frozen=True)
class LanguageShare:
    """Share of coding time spent in one language."""

    name: str
    percent: float
    icon: str
    docs_url: str | None


@dataclass(frozen=True)
class SkillLevel:
    """Progress toward proficiency in one language, as a percentage."""

    name: str
    proficiency: float


def _entries(payload: Any) -> list[dict[str, Any]]:
    if not isinstance(payload, dict) or not isinstance(payload.get("data"), list):
        raise StatsFeedError(
            "Payload has no 'data' list",
            category=ErrorCategory.INVALID_PAYLOAD,
        )
    return payload["data"]


def _invalid(ex: Exception) -> StatsFeedError:
    return StatsFeedError(
        f"Malformed statistics payload: {ex}",
        category=ErrorCategory.INVALID_PAYLOAD,
        original_error=ex,
    )


def format_day_label(day: date) -> str:
    """Short US-style label, e.g. ``Mon, Jan 6``."""
    return f"{day:%a}, {day:%b} {day.day}"


def parse_daily_durations(payload: Any) -> list[DailyCodingEntry]:
    """Turn the daily-duration series into chart entries.

    Dates are shifted forward one day: the feed reports each range by its
    UTC start, which lands on the previous local day for the site owner.

    Raises:
        StatsFeedError: If the payload does not have the expected shape.
    """
    entries = []
    try:
        for item in _entries(payload):
            day = date.fromisoformat(item["range"]["date"]) + timedelta(days=1)
            seconds = float(item["grand_total"]["total_seconds"])
            entries.append(DailyCodingEntry(format_day_label(day), seconds / SECONDS_PER_HOUR))
    except (KeyError, TypeError, ValueError) as ex:
        raise _invalid(ex) from ex
    return entries


def parse_languages(payload: Any) -> list[LanguageShare]:
    """Turn the language breakdown into chart slices.

    Raises:
        StatsFeedError: If the payload does not have the expected shape.
    """
    shares = []
    try:
        for item in _entries(payload):
            name = str(item["name"])
            shares.append(
                LanguageShare(
                    name=name,
                    percent=float(item["percent"]),
                    icon=LANGUAGE_ICONS.get(name, DEFAULT_LANGUAGE_ICON),
                    docs_url=LANGUAGE_DOCS.get(name),
                )
            )
    except (KeyError, TypeError, ValueError) as ex:
        raise _invalid(ex) from ex
    return shares


def parse_skills(
    payload: Any,
    relevant: Collection[str] = RELEVANT_SKILLS,
) -> list[SkillLevel]:
    """Filter the breakdown to relevant languages and score each one.

    Proficiency is the language's share of the target practice hours,
    which works out to its percent, capped at 100 and rounded to two
    places.

    Raises:
        StatsFeedError: If the payload does not have the expected shape.
    """
    levels = []
    try:
        for item in _entries(payload):
            name = str(item["name"])
            if name not in relevant:
                continue
            proficiency = min(round(float(item["percent"]), 2), 100.0)
            levels.append(SkillLevel(name=name, proficiency=proficiency))
    except (KeyError, TypeError, ValueError) as ex:
        raise _invalid(ex) from ex
    return levels


class PanelStatus(Enum):
    """Display state of a statistics panel."""

    LOADING = "loading"
    READY = "ready"
    NO_DATA = "no_data"


class StatsPanel(Generic[T]):
    """One feed endpoint bound to the widget that displays it.

    The fetch is issued once on ``mount()`` and never retried. ``unmount()``
    does not cancel it; a response that arrives afterwards is dropped.
    """

    def __init__(
        self,
        name: str,
        fetch: Callable[[], Awaitable[Any]],
        parse: Callable[[Any], T],
    ) -> None:
        self.name = name
        self._fetch = fetch
        self._parse = parse
        self._status = PanelStatus.LOADING
        self._data: T | None = None
        self._mounted = False
        self._task: asyncio.Task[None] | None = None

    @property
    def status(self) -> PanelStatus:
        return self._status

    @property
    def data(self) -> T | None:
        return self._data

    @property
    def mounted(self) -> bool:
        return self._mounted

    def mount(self) -> "asyncio.Task[None]":
        """Start the one-time fetch. Must be called from a running loop."""
        self._mounted = True
        if self._task is None:
            self._task = asyncio.get_running_loop().create_task(self._load())
        return self._task

    def unmount(self) -> None:
        self._mounted = False

    async def wait(self) -> PanelStatus:
        """Wait for the fetch to settle and return the resulting status."""
        if self._task is not None:
            await asyncio.shield(self._task)
        return self._status

    async def _load(self) -> None:
        try:
            payload = await self._fetch()
            data = self._parse(payload)
        except StatsFeedError as ex:
            logger.warning(
                "stats_fetch_failed",
                panel=self.name,
                category=ex.category.name,
                error=str(ex),
            )
            if self._mounted:
                self._status = PanelStatus.NO_DATA
            return
        except Exception as ex:
            logger.warning(
                "stats_fetch_failed",
                panel=self.name,
                category=classify_error(ex).name,
                error=str(ex),
                error_type=type(ex).__name__,
            )
            if self._mounted:
                self._status = PanelStatus.NO_DATA
            return

        if not self._mounted:
            logger.debug("stats_response_discarded", panel=self.name)
            return

        self._data = data
        self._status = PanelStatus.READY
        logger.info("stats_panel_ready", panel=self.name)
