"""WakaTime share-link statistics feed.

WakaTime publishes a user's stats as public JSON "share" URLs. Each panel
on the site reads one of them; no API key is needed.
"""

from __future__ import annotations

import os
from typing import Any

import aiohttp

from portfolio.core.errors import StatsFeedError
from portfolio.core.logging import get_logger

logger = get_logger(__name__)

_SHARE_BASE = "https://wakatime.com/share/@d433fbcd-a22c-46e5-a337-915af96350af"

DEFAULT_CODING_URL = f"{_SHARE_BASE}/de46c6b9-0541-461d-a875-34f320f676c0.json"
DEFAULT_LANGUAGES_URL = f"{_SHARE_BASE}/36dd175a-87f1-40d1-9f96-1597ea8bab62.json"
DEFAULT_SKILLS_URL = f"{_SHARE_BASE}/85f200f4-ca48-4103-af6c-05702458ffe1.json"

DEFAULT_TIMEOUT_SECONDS = 30.0


class WakaTimeProvider:
    """Reads the three share endpoints the site displays.

    Args:
        coding_url: Daily coding-duration series. Falls back to the
            WAKATIME_CODING_URL environment variable.
        languages_url: Language breakdown. Falls back to WAKATIME_LANGUAGES_URL.
        skills_url: Breakdown used by the skills widget. Falls back to
            WAKATIME_SKILLS_URL.
        timeout: Total request timeout in seconds.
    """

    def __init__(
        self,
        coding_url: str | None = None,
        languages_url: str | None = None,
        skills_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.coding_url = coding_url or os.getenv("WAKATIME_CODING_URL", DEFAULT_CODING_URL)
        self.languages_url = languages_url or os.getenv(
            "WAKATIME_LANGUAGES_URL", DEFAULT_LANGUAGES_URL
        )
        self.skills_url = skills_url or os.getenv("WAKATIME_SKILLS_URL", DEFAULT_SKILLS_URL)
        self.timeout = timeout

    async def fetch_daily_durations(self) -> dict[str, Any]:
        return await self._get_json(self.coding_url)

    async def fetch_languages(self) -> dict[str, Any]:
        return await self._get_json(self.languages_url)

    async def fetch_skills(self) -> dict[str, Any]:
        return await self._get_json(self.skills_url)

    async def _get_json(self, url: str) -> dict[str, Any]:
        """GET a share URL and decode its JSON body.

        Raises:
            StatsFeedError: On network errors, non-200 responses or a body
                that is not a JSON object.
        """
        logger.debug("stats_fetch_started", url=url)

        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(
                    url,
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as response:
                    if response.status != 200:
                        error_text = await response.text()
                        raise StatsFeedError.from_exception(
                            RuntimeError(
                                f"Statistics feed returned {response.status}: {error_text[:200]}"
                            )
                        )
                    data = await response.json(content_type=None)
        except aiohttp.ClientError as ex:
            raise StatsFeedError.from_exception(ex) from ex
        except TimeoutError as ex:
            raise StatsFeedError.from_exception(ex) from ex
        except ValueError as ex:
            raise StatsFeedError.from_exception(ex) from ex

        if not isinstance(data, dict):
            raise StatsFeedError.from_exception(
                ValueError(f"Expected a JSON object, got {type(data).__name__}")
            )

        logger.debug("stats_fetch_finished", url=url)
        return data
