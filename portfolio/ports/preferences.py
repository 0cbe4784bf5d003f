"""Preference protocols for theme state.

These define the boundary between the theme controller and wherever the
user's choice and the OS colour-scheme signal actually live (cookies and
client-hint headers in the web app, dictionaries in tests).
"""

from typing import Protocol

# Key under which the theme choice is persisted
THEME_KEY = "theme"


class PreferenceStore(Protocol):
    """Protocol for persisted key/value preferences.

    Implementations raise PreferenceUnavailableError when the underlying
    storage cannot be accessed at all. A missing key is not an error.
    """

    def get(self, key: str) -> str | None:
        """Read a stored preference.

        Args:
            key: The preference key (e.g., "theme").

        Returns:
            The stored value, or None when nothing is stored.

        Raises:
            PreferenceUnavailableError: If storage cannot be read.
        """
        ...

    def set(self, key: str, value: str) -> None:
        """Persist a preference.

        Args:
            key: The preference key.
            value: The value to store.

        Raises:
            PreferenceUnavailableError: If storage cannot be written.
        """
        ...


class ColorSchemeProbe(Protocol):
    """Protocol for the read-only OS colour-scheme preference signal."""

    def prefers_dark(self) -> bool:
        """Report whether the user prefers a dark colour scheme.

        Raises:
            PreferenceUnavailableError: If the signal cannot be read.
        """
        ...
