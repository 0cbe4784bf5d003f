"""Tests for preference store and colour-scheme probe adapters."""

import pytest
from starlette.requests import Request
from starlette.responses import Response

from portfolio.adapters.preferences import (
    COLOR_SCHEME_HINT,
    ClientHintProbe,
    CookiePreferenceStore,
    MemoryPreferenceStore,
    StaticColorSchemeProbe,
)
from portfolio.core.errors import PreferenceUnavailableError


def make_request(headers: dict[str, str] | None = None) -> Request:
    """Build a bare GET request with the given headers."""
    raw = [(k.lower().encode("latin-1"), v.encode("latin-1")) for k, v in (headers or {}).items()]
    return Request({"type": "http", "method": "GET", "path": "/", "headers": raw})


class TestMemoryPreferenceStore:
    """Tests for MemoryPreferenceStore."""

    def test_round_trip(self) -> None:
        store = MemoryPreferenceStore()
        assert store.get("theme") is None
        store.set("theme", "dark")
        assert store.get("theme") == "dark"

    def test_unavailable_raises(self) -> None:
        store = MemoryPreferenceStore(available=False)
        with pytest.raises(PreferenceUnavailableError):
            store.get("theme")
        with pytest.raises(PreferenceUnavailableError):
            store.set("theme", "dark")


class TestStaticColorSchemeProbe:
    """Tests for StaticColorSchemeProbe."""

    @pytest.mark.parametrize("dark", [True, False])
    def test_fixed_answer(self, dark: bool) -> None:
        assert StaticColorSchemeProbe(dark=dark).prefers_dark() is dark

    def test_no_signal_raises(self) -> None:
        with pytest.raises(PreferenceUnavailableError):
            StaticColorSchemeProbe().prefers_dark()


class TestCookiePreferenceStore:
    """Tests for CookiePreferenceStore."""

    def test_reads_request_cookie(self) -> None:
        store = CookiePreferenceStore(make_request({"cookie": "theme=dark; other=1"}))
        assert store.get("theme") == "dark"

    def test_missing_cookie(self) -> None:
        store = CookiePreferenceStore(make_request())
        assert store.get("theme") is None

    def test_write_visible_to_later_reads(self) -> None:
        """Should return a pending write before the response is sent."""
        store = CookiePreferenceStore(make_request({"cookie": "theme=light"}))
        store.set("theme", "dark")
        assert store.get("theme") == "dark"
        assert store.pending == {"theme": "dark"}

    def test_apply_sets_cookie(self) -> None:
        """Should emit a long-lived, script-readable cookie."""
        store = CookiePreferenceStore(make_request(), max_age=3600)
        store.set("theme", "dark")
        response = Response()
        store.apply(response)

        header = response.headers["set-cookie"]
        assert header.startswith("theme=dark")
        assert "Max-Age=3600" in header
        assert "SameSite=lax" in header
        assert "HttpOnly" not in header

    def test_apply_without_writes(self) -> None:
        store = CookiePreferenceStore(make_request({"cookie": "theme=dark"}))
        response = Response()
        store.apply(response)
        assert "set-cookie" not in response.headers


class TestClientHintProbe:
    """Tests for ClientHintProbe."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("dark", True), ("light", False), ('"dark"', True), (" Light ", False)],
    )
    def test_reads_hint(self, value: str, expected: bool) -> None:
        probe = ClientHintProbe(make_request({COLOR_SCHEME_HINT: value}))
        assert probe.prefers_dark() is expected

    def test_missing_hint_raises(self) -> None:
        with pytest.raises(PreferenceUnavailableError):
            ClientHintProbe(make_request()).prefers_dark()

    def test_unrecognised_hint_raises(self) -> None:
        with pytest.raises(PreferenceUnavailableError):
            ClientHintProbe(make_request({COLOR_SCHEME_HINT: "no-preference"})).prefers_dark()
