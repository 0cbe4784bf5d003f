"""Carousel business logic - platform agnostic."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from urllib.parse import urlparse

from portfolio.core.errors import InvalidInputError, OutOfRangeError

# Keys the carousel region responds to
KEY_PREVIOUS = "ArrowLeft"
KEY_NEXT = "ArrowRight"

ITEM_FIELDS = ("title", "description", "link")


@dataclass(frozen=True)
class CarouselItem:
    """A slide: title, short description and the link it opens."""

    title: str
    description: str
    link: str

    def __post_init__(self) -> None:
        for name in ITEM_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise InvalidInputError(f"Carousel item field '{name}' must be a non-empty string")
        parsed = urlparse(self.link)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise InvalidInputError(f"Carousel item link is not an http(s) URL: {self.link!r}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "CarouselItem":
        """Build an item from a loosely typed record, requiring all fields."""
        missing = [name for name in ITEM_FIELDS if name not in data]
        if missing:
            raise InvalidInputError(f"Carousel item missing fields: {', '.join(missing)}")
        return cls(
            title=data["title"],  # type: ignore[arg-type]
            description=data["description"],  # type: ignore[arg-type]
            link=data["link"],  # type: ignore[arg-type]
        )


@dataclass(frozen=True)
class LinkTarget:
    """A link to open, and the browsing context to open it in."""

    url: str
    target: str = "_blank"


@dataclass(frozen=True)
class CarouselState:
    """Snapshot of a carousel: its items and the active position."""

    items: tuple[CarouselItem, ...]
    active_index: int = 0

    @property
    def total_items(self) -> int:
        return len(self.items)

    @property
    def current_item(self) -> CarouselItem:
        return self.items[self.active_index]


def _coerce_items(items: Sequence[CarouselItem | Mapping[str, object]]) -> tuple[CarouselItem, ...]:
    coerced = []
    for item in items:
        if isinstance(item, CarouselItem):
            coerced.append(item)
        elif isinstance(item, Mapping):
            coerced.append(CarouselItem.from_mapping(item))
        else:
            raise InvalidInputError(f"Unsupported carousel item: {item!r}")
    return tuple(coerced)


class CarouselController:
    """Bounded, cyclic cursor over a fixed list of slides.

    Navigation wraps at both ends. Once ``initialize`` has succeeded the
    active index is always in range and navigation never raises.
    """

    def __init__(self) -> None:
        self._items: tuple[CarouselItem, ...] = ()
        self._active_index = 0

    @classmethod
    def from_state(
        cls,
        items: Sequence[CarouselItem | Mapping[str, object]],
        active_index: int = 0,
    ) -> "CarouselController":
        """Rebuild a controller from a client-held position."""
        controller = cls()
        controller.initialize(items)
        controller.go_to(active_index)
        return controller

    @property
    def active_index(self) -> int:
        return self._active_index

    @property
    def total_items(self) -> int:
        return len(self._items)

    def initialize(self, items: Sequence[CarouselItem | Mapping[str, object]]) -> None:
        """Load the slides and reset to the first one.

        Raises:
            InvalidInputError: If items is empty or any item is malformed.
        """
        if not items:
            raise InvalidInputError("Carousel requires at least one item")
        self._items = _coerce_items(items)
        self._active_index = 0

    def next(self) -> int:
        """Advance one slide, wrapping from the last back to the first."""
        length = self._require_items()
        self._active_index = (self._active_index + 1) % length
        return self._active_index

    def previous(self) -> int:
        """Step back one slide, wrapping from the first to the last."""
        length = self._require_items()
        self._active_index = (self._active_index - 1 + length) % length
        return self._active_index

    def go_to(self, index: int) -> int:
        """Jump to a specific slide.

        Raises:
            OutOfRangeError: If index is not an integer in ``[0, total_items)``.
        """
        length = self._require_items()
        if isinstance(index, bool) or not isinstance(index, int):
            raise OutOfRangeError(index, length)
        if not 0 <= index < length:
            raise OutOfRangeError(index, length)
        self._active_index = index
        return self._active_index

    def current_item(self) -> CarouselItem:
        self._require_items()
        return self._items[self._active_index]

    def handle_key(self, key: str) -> bool:
        """Apply a key press from the focused carousel region.

        Returns:
            True if the key was handled and the page's default scroll
            should be suppressed.
        """
        if key == KEY_PREVIOUS:
            self.previous()
            return True
        if key == KEY_NEXT:
            self.next()
            return True
        return False

    def open_current(self) -> LinkTarget:
        """Link for the active slide, opened in a new browsing context."""
        return LinkTarget(url=self.current_item().link)

    def snapshot(self) -> CarouselState:
        self._require_items()
        return CarouselState(items=self._items, active_index=self._active_index)

    def _require_items(self) -> int:
        if not self._items:
            raise InvalidInputError("Carousel has not been initialized")
        return len(self._items)
