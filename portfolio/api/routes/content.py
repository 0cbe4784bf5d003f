"""Content API routes.

JSON versions of the page content for clients that render their own UI.
"""

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter

from portfolio.core.content import (
    ABOUT_PARAGRAPHS,
    COURSEWORK,
    PROJECTS,
    TYPEWRITER_WORDS,
    USES_SECTIONS,
)
from portfolio.core.typewriter import typewriter_cycle

router = APIRouter(prefix="/api/content", tags=["content"])


@router.get("/home")
async def home_content() -> dict[str, Any]:
    """Hero words and one cycle of typewriter frames."""
    return {
        "words": list(TYPEWRITER_WORDS),
        "frames": [asdict(frame) for frame in typewriter_cycle(TYPEWRITER_WORDS)],
    }


@router.get("/about")
async def about_content() -> dict[str, Any]:
    return {
        "paragraphs": list(ABOUT_PARAGRAPHS),
        "coursework": [asdict(item) for item in COURSEWORK],
    }


@router.get("/projects")
async def projects_content() -> list[dict[str, Any]]:
    return [asdict(project) for project in PROJECTS]


@router.get("/uses")
async def uses_content() -> list[dict[str, Any]]:
    return [asdict(section) for section in USES_SECTIONS]
