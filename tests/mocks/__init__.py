"""Test doubles for external collaborators."""

from tests.mocks.providers import (
    DAILY_PAYLOAD,
    LANGUAGES_PAYLOAD,
    SKILLS_PAYLOAD,
    MockStatsFeed,
)

__all__ = [
    "DAILY_PAYLOAD",
    "LANGUAGES_PAYLOAD",
    "SKILLS_PAYLOAD",
    "MockStatsFeed",
]
