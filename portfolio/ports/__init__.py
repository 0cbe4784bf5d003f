"""Ports (interfaces) for the application.

Protocol definitions that separate the core controllers from the HTTP
layer and the external statistics feed.
"""

from portfolio.ports.preferences import THEME_KEY, ColorSchemeProbe, PreferenceStore
from portfolio.ports.stats import StatsFeed

__all__ = [
    "THEME_KEY",
    "ColorSchemeProbe",
    "PreferenceStore",
    "StatsFeed",
]
