"""Statistics feed protocol."""

from typing import Any, Protocol


class StatsFeed(Protocol):
    """Protocol for the read-only coding statistics feed.

    Each method returns the raw decoded JSON payload of one endpoint.
    Parsing into display records happens in portfolio.core.stats so the
    feed stays an opaque collaborator.
    """

    async def fetch_daily_durations(self) -> dict[str, Any]:
        """Fetch the daily coding-duration series.

        Raises:
            StatsFeedError: If the endpoint cannot be read.
        """
        ...

    async def fetch_languages(self) -> dict[str, Any]:
        """Fetch the per-language percentage breakdown.

        Raises:
            StatsFeedError: If the endpoint cannot be read.
        """
        ...

    async def fetch_skills(self) -> dict[str, Any]:
        """Fetch the language breakdown used by the skills widget.

        Raises:
            StatsFeedError: If the endpoint cannot be read.
        """
        ...
