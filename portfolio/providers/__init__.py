"""External data providers."""

from portfolio.providers.wakatime_provider import WakaTimeProvider

__all__ = ["WakaTimeProvider"]
