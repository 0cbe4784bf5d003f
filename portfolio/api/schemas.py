"""Pydantic schemas for API request/response validation."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from portfolio.core.carousel_logic import CarouselItem as CarouselItemRecord
from portfolio.core.theme import ThemeState


class ThemeResponse(BaseModel):
    """Current theme and the surfaces that render with it."""

    theme: ThemeState
    css_class: str
    persisted: bool = Field(..., description="Whether the theme came from the stored choice")
    changes: list[ThemeState] = Field(
        default_factory=list,
        description="State changes observed while handling the request, in order",
    )
    refresh: dict[str, str] = Field(
        default_factory=dict,
        description="Theme-dependent resources the client should reload",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "theme": "dark",
                "css_class": "dark",
                "persisted": True,
                "changes": ["dark"],
                "refresh": {"coding_hours_chart": "/charts/coding-hours.png?theme=dark"},
            }
        }
    )


class MarkerUpdate(BaseModel):
    """A change made to the page's theme marker outside the theme toggle."""

    theme: ThemeState


class CarouselItem(BaseModel):
    """A carousel slide as supplied by a client."""

    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    link: str = Field(..., min_length=1)

    @classmethod
    def from_record(cls, item: CarouselItemRecord) -> "CarouselItem":
        return cls(title=item.title, description=item.description, link=item.link)


class CarouselAction(str, Enum):
    NEXT = "next"
    PREVIOUS = "previous"
    GO_TO = "go_to"
    KEY = "key"


class CarouselNavigateRequest(BaseModel):
    """Navigation applied to a client-held carousel position."""

    active_index: int = 0
    action: CarouselAction
    index: int | None = Field(None, description="Target index for go_to")
    key: str | None = Field(None, description="Key name for key, e.g. ArrowLeft")
    items: list[CarouselItem] | None = Field(
        None,
        description="Slides to navigate; defaults to the coursework carousel",
    )

    model_config = ConfigDict(
        json_schema_extra={"example": {"active_index": 0, "action": "previous"}}
    )


class CarouselOpenRequest(BaseModel):
    active_index: int = 0
    items: list[CarouselItem] | None = None


class CarouselResponse(BaseModel):
    active_index: int
    total_items: int
    item: CarouselItem
    handled: bool = Field(
        True,
        description="False when a key was ignored; true means suppress default scrolling",
    )


class LinkResponse(BaseModel):
    url: str
    target: str
    active_index: int


class PanelResponse(BaseModel):
    """A statistics panel's display state."""

    name: str
    status: str
    data: list[dict[str, Any]] | None = None


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    error: str
    detail: str | None = None
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "Index out of range",
                "detail": "Index 5 out of range for 3 items",
                "code": "OUT_OF_RANGE",
            }
        }
    )
