"""HTML page routes."""

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from portfolio.api.dependencies import (
    PANEL_CODING_HOURS,
    PANEL_LANGUAGES,
    PANEL_SKILLS,
    ThemeSession,
    get_panels,
    get_theme_session,
)
from portfolio.api.templates import render_page
from portfolio.core.carousel_logic import CarouselController
from portfolio.core.content import (
    ABOUT_PARAGRAPHS,
    COURSEWORK,
    PROJECTS,
    SKILLS_TARGET_HOURS,
    TYPEWRITER_WORDS,
    USES_SECTIONS,
)
from portfolio.core.stats import PanelStatus, StatsPanel
from portfolio.core.typewriter import typewriter_cycle

router = APIRouter(tags=["pages"], default_response_class=HTMLResponse)


def _page(session: ThemeSession, template: str, **context: Any) -> HTMLResponse:
    response = HTMLResponse(render_page(template, session.controller.state, **context))
    session.apply(response)
    return response


def _data(panel: StatsPanel[Any]) -> list[Any]:
    return list(panel.data or []) if panel.status is PanelStatus.READY else []


@router.get("/")
async def home_page(
    session: ThemeSession = Depends(get_theme_session),
    panels: dict[str, StatsPanel[Any]] = Depends(get_panels),
) -> HTMLResponse:
    return _page(
        session,
        "home.html",
        words=TYPEWRITER_WORDS,
        frames=[asdict(frame) for frame in typewriter_cycle(TYPEWRITER_WORDS)],
        panels={
            "coding_hours": panels[PANEL_CODING_HOURS].status.value,
            "languages": panels[PANEL_LANGUAGES].status.value,
        },
        languages=_data(panels[PANEL_LANGUAGES]),
    )


@router.get("/about")
async def about_page(
    session: ThemeSession = Depends(get_theme_session),
    panels: dict[str, StatsPanel[Any]] = Depends(get_panels),
) -> HTMLResponse:
    carousel = CarouselController()
    carousel.initialize(COURSEWORK)
    skills = panels[PANEL_SKILLS]
    return _page(
        session,
        "about.html",
        paragraphs=ABOUT_PARAGRAPHS,
        target_hours=SKILLS_TARGET_HOURS,
        skills_status=skills.status.value,
        skills=_data(skills),
        carousel=carousel.snapshot(),
    )


@router.get("/projects")
async def projects_page(session: ThemeSession = Depends(get_theme_session)) -> HTMLResponse:
    return _page(session, "projects.html", projects=PROJECTS)


@router.get("/uses")
async def uses_page(session: ThemeSession = Depends(get_theme_session)) -> HTMLResponse:
    return _page(session, "uses.html", sections=USES_SECTIONS)
