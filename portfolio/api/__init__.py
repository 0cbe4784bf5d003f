"""HTTP layer: HTML pages plus a JSON API for the interactive widgets."""

from portfolio.api.app import create_app
from portfolio.api.dependencies import get_app_state, get_panels, get_theme_session

__all__ = [
    "create_app",
    "get_app_state",
    "get_panels",
    "get_theme_session",
]
