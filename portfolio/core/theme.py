"""Light/dark theme state - platform agnostic.

The ThemeMarker is the root-level flag style rules react to (rendered as
``<html class="dark">``). The ThemeController owns the user's choice: it
resolves the initial value, persists toggles, and fans out every marker
change to its subscribers, including changes made to the marker by
something other than the controller itself.

Example:
    controller = ThemeController(store, probe)
    controller.initialize()

    with controller.subscribe(lambda state: print(state.value)):
        controller.toggle()  # prints "dark" or "light"
"""

from collections.abc import Callable
from enum import Enum
from types import TracebackType

from portfolio.core.errors import PreferenceUnavailableError
from portfolio.core.logging import get_logger
from portfolio.ports.preferences import THEME_KEY, ColorSchemeProbe, PreferenceStore

logger = get_logger(__name__)


class ThemeState(Enum):
    """Current light/dark appearance selection."""

    LIGHT = "light"
    DARK = "dark"

    @property
    def opposite(self) -> "ThemeState":
        return ThemeState.DARK if self is ThemeState.LIGHT else ThemeState.LIGHT

    @property
    def css_class(self) -> str:
        """Class applied to the document root for this state."""
        return "dark" if self is ThemeState.DARK else ""

    @classmethod
    def parse(cls, value: str | None) -> "ThemeState | None":
        """Parse a stored value, returning None for anything unrecognised."""
        if value is None:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


DEFAULT_THEME = ThemeState.LIGHT

ThemeObserver = Callable[[ThemeState], None]


class Subscription:
    """Handle for an observer registration.

    Releases the registration on ``unsubscribe()`` or when used as a
    context manager. Releasing twice is harmless.
    """

    def __init__(self, release: Callable[[], None]) -> None:
        self._release: Callable[[], None] | None = release

    @property
    def active(self) -> bool:
        return self._release is not None

    def unsubscribe(self) -> None:
        if self._release is not None:
            release, self._release = self._release, None
            release()

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.unsubscribe()


class _ObserverList:
    """Ordered observer registry shared by the marker and the controller."""

    def __init__(self) -> None:
        self._observers: list[ThemeObserver] = []

    def __len__(self) -> int:
        return len(self._observers)

    def add(self, observer: ThemeObserver) -> Subscription:
        self._observers.append(observer)

        def release() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return Subscription(release)

    def notify(self, state: ThemeState) -> None:
        # Copy so observers may unsubscribe while being notified
        for observer in list(self._observers):
            observer(state)


class ThemeMarker:
    """Observable root-level theme flag.

    Anything may set the marker; watchers are told about every actual
    change. Setting the current value again is not a change.
    """

    def __init__(self, state: ThemeState = DEFAULT_THEME) -> None:
        self._state = state
        self._watchers = _ObserverList()

    @property
    def state(self) -> ThemeState:
        return self._state

    @property
    def css_class(self) -> str:
        return self._state.css_class

    def set(self, state: ThemeState) -> bool:
        """Set the flag, returning True if the value changed."""
        if state is self._state:
            return False
        self._state = state
        self._watchers.notify(state)
        return True

    def watch(self, callback: ThemeObserver) -> Subscription:
        """Register a change callback."""
        return self._watchers.add(callback)


class ThemeController:
    """Single source of truth for the light/dark appearance."""

    def __init__(
        self,
        store: PreferenceStore,
        probe: ColorSchemeProbe,
        marker: ThemeMarker | None = None,
    ) -> None:
        self._store = store
        self._probe = probe
        self._marker = marker or ThemeMarker()
        self._observers = _ObserverList()
        self._marker_watch = self._marker.watch(self._on_marker_change)

    @property
    def state(self) -> ThemeState:
        return self._marker.state

    @property
    def marker(self) -> ThemeMarker:
        return self._marker

    def initialize(self) -> ThemeState:
        """Resolve the starting theme and apply it to the marker.

        A stored preference wins over the OS signal. When neither can be
        read the default (light) theme is used.
        """
        state = self._resolve_initial()
        self._marker.set(state)
        logger.debug("theme_initialized", theme=state.value)
        return state

    def toggle(self) -> ThemeState:
        """Flip the theme, persist the choice and update the marker."""
        new_state = self.state.opposite
        try:
            self._store.set(THEME_KEY, new_state.value)
        except PreferenceUnavailableError as ex:
            logger.warning("theme_persist_failed", theme=new_state.value, error=str(ex))
        self._marker.set(new_state)
        logger.info("theme_toggled", theme=new_state.value)
        return new_state

    def subscribe(self, observer: ThemeObserver) -> Subscription:
        """Register an observer called with the new state on every change."""
        return self._observers.add(observer)

    def close(self) -> None:
        """Stop watching the marker and drop all observers."""
        self._marker_watch.unsubscribe()
        self._observers = _ObserverList()

    def _resolve_initial(self) -> ThemeState:
        try:
            stored = ThemeState.parse(self._store.get(THEME_KEY))
        except PreferenceUnavailableError as ex:
            logger.warning("theme_storage_unavailable", error=str(ex))
            return DEFAULT_THEME
        if stored is not None:
            return stored

        try:
            prefers_dark = self._probe.prefers_dark()
        except PreferenceUnavailableError as ex:
            logger.info("color_scheme_unavailable", error=str(ex))
            return DEFAULT_THEME
        return ThemeState.DARK if prefers_dark else ThemeState.LIGHT

    def _on_marker_change(self, state: ThemeState) -> None:
        self._observers.notify(state)
