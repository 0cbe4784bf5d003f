"""Preference adapters.

Cookie and client-hint adapters back the theme controller during an HTTP
request. The memory adapters serve tests and non-web callers.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from starlette.requests import Request
from starlette.responses import Response

from portfolio.core.errors import PreferenceUnavailableError

# Client hint carrying the OS colour-scheme preference
COLOR_SCHEME_HINT = "Sec-CH-Prefers-Color-Scheme"

DEFAULT_COOKIE_MAX_AGE = 60 * 60 * 24 * 365


class MemoryPreferenceStore:
    """Dictionary-backed preference store.

    ``available=False`` simulates storage that cannot be accessed.
    """

    def __init__(self, initial: Mapping[str, str] | None = None, available: bool = True) -> None:
        self.values: dict[str, str] = dict(initial or {})
        self.available = available

    def get(self, key: str) -> str | None:
        if not self.available:
            raise PreferenceUnavailableError("Preference storage is not accessible")
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        if not self.available:
            raise PreferenceUnavailableError("Preference storage is not accessible")
        self.values[key] = value


@dataclass
class StaticColorSchemeProbe:
    """Probe returning a fixed answer; ``None`` means no signal."""

    dark: bool | None = None

    def prefers_dark(self) -> bool:
        if self.dark is None:
            raise PreferenceUnavailableError("No colour-scheme signal")
        return self.dark


class CookiePreferenceStore:
    """Preferences kept in browser cookies.

    Reads come from the incoming request. Writes are collected and applied
    to the outgoing response by ``apply()``, and are visible to later
    reads within the same request.
    """

    def __init__(self, request: Request, max_age: int = DEFAULT_COOKIE_MAX_AGE) -> None:
        self._request = request
        self._max_age = max_age
        self._pending: dict[str, str] = {}

    @property
    def pending(self) -> dict[str, str]:
        return dict(self._pending)

    def get(self, key: str) -> str | None:
        if key in self._pending:
            return self._pending[key]
        try:
            return self._request.cookies.get(key)
        except (KeyError, ValueError) as ex:
            raise PreferenceUnavailableError(f"Unreadable cookie header: {ex}") from ex

    def set(self, key: str, value: str) -> None:
        self._pending[key] = value

    def apply(self, response: Response) -> None:
        for key, value in self._pending.items():
            response.set_cookie(
                key,
                value,
                max_age=self._max_age,
                samesite="lax",
                httponly=False,
            )


class ClientHintProbe:
    """OS colour-scheme preference from the ``Sec-CH-Prefers-Color-Scheme`` hint."""

    def __init__(self, request: Request) -> None:
        self._request = request

    def prefers_dark(self) -> bool:
        value = self._request.headers.get(COLOR_SCHEME_HINT)
        if value is None:
            raise PreferenceUnavailableError(f"{COLOR_SCHEME_HINT} header not sent")
        value = value.strip().strip('"').lower()
        if value not in ("dark", "light"):
            raise PreferenceUnavailableError(f"Unrecognised colour-scheme hint: {value!r}")
        return value == "dark"
