"""Adapters for external systems.

Implementations of the preference protocols for HTTP requests and for
in-memory use.
"""

from portfolio.adapters.preferences import (
    COLOR_SCHEME_HINT,
    ClientHintProbe,
    CookiePreferenceStore,
    MemoryPreferenceStore,
    StaticColorSchemeProbe,
)

__all__ = [
    "COLOR_SCHEME_HINT",
    "ClientHintProbe",
    "CookiePreferenceStore",
    "MemoryPreferenceStore",
    "StaticColorSchemeProbe",
]
