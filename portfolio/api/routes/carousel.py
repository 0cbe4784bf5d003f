"""Carousel API routes.

The position lives with the client; each call rebuilds a controller from
the items and the client's active index, applies one operation and
returns the new position.
"""

from fastapi import APIRouter, HTTPException, status

from portfolio.api.schemas import (
    CarouselAction,
    CarouselItem,
    CarouselNavigateRequest,
    CarouselOpenRequest,
    CarouselResponse,
    ErrorResponse,
    LinkResponse,
)
from portfolio.core.carousel_logic import CarouselController
from portfolio.core.content import COURSEWORK
from portfolio.core.errors import InvalidInputError, OutOfRangeError
from portfolio.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/carousel", tags=["carousel"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Index out of range"},
    422: {"model": ErrorResponse, "description": "Invalid carousel items"},
}


def _controller(items: list[CarouselItem] | None, active_index: int) -> CarouselController:
    """Build a controller, translating contract violations to HTTP errors."""
    source = COURSEWORK if items is None else [item.model_dump() for item in items]
    try:
        return CarouselController.from_state(source, active_index)
    except InvalidInputError as ex:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"error": "Invalid carousel items", "detail": str(ex), "code": "INVALID_INPUT"},
        ) from ex
    except OutOfRangeError as ex:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "Index out of range", "detail": str(ex), "code": "OUT_OF_RANGE"},
        ) from ex


def _response(controller: CarouselController, handled: bool = True) -> CarouselResponse:
    return CarouselResponse(
        active_index=controller.active_index,
        total_items=controller.total_items,
        item=CarouselItem.from_record(controller.current_item()),
        handled=handled,
    )


@router.get("", response_model=CarouselResponse)
async def read_carousel() -> CarouselResponse:
    """The coursework carousel at its first slide."""
    return _response(_controller(None, 0))


@router.post("/navigate", response_model=CarouselResponse, responses=ERROR_RESPONSES)
async def navigate(request: CarouselNavigateRequest) -> CarouselResponse:
    """Apply one navigation step to the client's position.

    ``key`` actions report ``handled=False`` for keys the carousel ignores,
    in which case the client should let the page scroll as usual.
    """
    controller = _controller(request.items, request.active_index)
    handled = True

    if request.action is CarouselAction.NEXT:
        controller.next()
    elif request.action is CarouselAction.PREVIOUS:
        controller.previous()
    elif request.action is CarouselAction.GO_TO:
        if request.index is None:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail={"error": "Missing index", "code": "INVALID_INPUT"},
            )
        try:
            controller.go_to(request.index)
        except OutOfRangeError as ex:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={"error": "Index out of range", "detail": str(ex), "code": "OUT_OF_RANGE"},
            ) from ex
    else:
        handled = controller.handle_key(request.key or "")

    logger.debug(
        "carousel_navigated",
        action=request.action.value,
        active_index=controller.active_index,
        handled=handled,
    )
    return _response(controller, handled)


@router.post("/open", response_model=LinkResponse, responses=ERROR_RESPONSES)
async def open_slide(request: CarouselOpenRequest) -> LinkResponse:
    """The active slide's link, to be opened in a new browsing context."""
    controller = _controller(request.items, request.active_index)
    link = controller.open_current()
    return LinkResponse(url=link.url, target=link.target, active_index=controller.active_index)
