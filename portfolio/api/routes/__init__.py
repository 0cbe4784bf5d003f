"""API routes package."""

from portfolio.api.routes.carousel import router as carousel_router
from portfolio.api.routes.content import router as content_router
from portfolio.api.routes.health import router as health_router
from portfolio.api.routes.pages import router as pages_router
from portfolio.api.routes.stats import router as stats_router
from portfolio.api.routes.theme import router as theme_router

__all__ = [
    "carousel_router",
    "content_router",
    "health_router",
    "pages_router",
    "stats_router",
    "theme_router",
]
