"""Statistics API routes.

Panels report ``loading`` until their one-time fetch lands and ``no_data``
if it failed. A failed feed never turns into an HTTP error.
"""

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import Response

from portfolio.api.dependencies import (
    PANEL_CODING_HOURS,
    PANEL_LANGUAGES,
    PANEL_SKILLS,
    ThemeSession,
    get_panels,
    get_theme_session,
)
from portfolio.api.schemas import PanelResponse
from portfolio.core.chart_utils import generate_coding_hours_chart, generate_language_chart
from portfolio.core.stats import PanelStatus, StatsPanel
from portfolio.core.theme import ThemeState

router = APIRouter(tags=["stats"])

_PANEL_PATHS = {
    "coding-hours": PANEL_CODING_HOURS,
    "languages": PANEL_LANGUAGES,
    "skills": PANEL_SKILLS,
}


def panel_response(panel: StatsPanel[Any]) -> PanelResponse:
    data = None
    if panel.status is PanelStatus.READY and panel.data is not None:
        data = [asdict(entry) for entry in panel.data]
    return PanelResponse(name=panel.name, status=panel.status.value, data=data)


def _ready_data(panel: StatsPanel[Any]) -> list[Any]:
    if panel.status is PanelStatus.READY and panel.data is not None:
        return list(panel.data)
    return []


@router.get("/api/stats/{panel_path}", response_model=PanelResponse)
async def read_panel(
    panel_path: str,
    panels: dict[str, StatsPanel[Any]] = Depends(get_panels),
) -> PanelResponse:
    """Display state and data of one statistics panel."""
    name = _PANEL_PATHS.get(panel_path)
    if name is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "Unknown panel", "detail": panel_path, "code": "NOT_FOUND"},
        )
    return panel_response(panels[name])


def _chart_theme(theme: ThemeState | None, session: ThemeSession) -> ThemeState:
    return theme if theme is not None else session.controller.state


@router.get("/charts/coding-hours.png", response_class=Response)
async def coding_hours_chart(
    theme: ThemeState | None = Query(None),
    panels: dict[str, StatsPanel[Any]] = Depends(get_panels),
    session: ThemeSession = Depends(get_theme_session),
) -> Response:
    """Bar chart of the last seven days; a placeholder while there is no data."""
    image = await generate_coding_hours_chart(
        _ready_data(panels[PANEL_CODING_HOURS]),
        theme=_chart_theme(theme, session),
    )
    return Response(content=image, media_type="image/png", headers={"Cache-Control": "no-store"})


@router.get("/charts/languages.png", response_class=Response)
async def languages_chart(
    theme: ThemeState | None = Query(None),
    panels: dict[str, StatsPanel[Any]] = Depends(get_panels),
    session: ThemeSession = Depends(get_theme_session),
) -> Response:
    """Pie chart of the language breakdown."""
    image = await generate_language_chart(
        _ready_data(panels[PANEL_LANGUAGES]),
        theme=_chart_theme(theme, session),
    )
    return Response(content=image, media_type="image/png", headers={"Cache-Control": "no-store"})
