"""Theme API routes.

The theme is resolved per request from the ``theme`` cookie and the
colour-scheme client hint. Every change seen by the request's controller
is reported back together with the theme-dependent resources to reload.
"""

from fastapi import APIRouter, Depends, Response

from portfolio.api.dependencies import ThemeSession, get_theme_session
from portfolio.api.schemas import MarkerUpdate, ThemeResponse
from portfolio.core.logging import get_logger
from portfolio.core.theme import ThemeState

logger = get_logger(__name__)

router = APIRouter(prefix="/api/theme", tags=["theme"])


def theme_surfaces(theme: ThemeState) -> dict[str, str]:
    """Theme-dependent resources, keyed by the element id that shows them."""
    return {
        "coding_hours_chart": f"/charts/coding-hours.png?theme={theme.value}",
        "languages_chart": f"/charts/languages.png?theme={theme.value}",
    }


def _theme_response(
    session: ThemeSession,
    changes: list[ThemeState],
    persisted: bool,
) -> ThemeResponse:
    state = session.controller.state
    return ThemeResponse(
        theme=state,
        css_class=state.css_class,
        persisted=persisted,
        changes=changes,
        refresh=theme_surfaces(state) if changes else {},
    )


@router.get("", response_model=ThemeResponse)
async def read_theme(
    response: Response,
    session: ThemeSession = Depends(get_theme_session),
) -> ThemeResponse:
    """Current theme: the stored choice, else the OS preference, else light."""
    session.apply(response)
    result = _theme_response(session, [], persisted=session.from_storage)
    result.refresh = theme_surfaces(session.controller.state)
    return result


@router.post("/toggle", response_model=ThemeResponse)
async def toggle_theme(
    response: Response,
    session: ThemeSession = Depends(get_theme_session),
) -> ThemeResponse:
    """Flip the theme and persist the new choice in the ``theme`` cookie."""
    changes: list[ThemeState] = []
    with session.controller.subscribe(changes.append):
        session.controller.toggle()
    session.apply(response)
    return _theme_response(session, changes, persisted=True)


@router.put("/marker", response_model=ThemeResponse)
async def update_marker(
    update: MarkerUpdate,
    response: Response,
    session: ThemeSession = Depends(get_theme_session),
) -> ThemeResponse:
    """Report a marker change made outside the toggle (e.g. by another widget).

    Subscribers see the change, but it is not persisted.
    """
    changes: list[ThemeState] = []
    with session.controller.subscribe(changes.append):
        session.controller.marker.set(update.theme)
    if changes:
        logger.info("theme_marker_changed", theme=update.theme.value)
    session.apply(response)
    return _theme_response(session, changes, persisted=False)
