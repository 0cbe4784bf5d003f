"""Core site logic.

Platform-agnostic controllers (theme, carousel), content, statistics
parsing and chart rendering. Nothing here depends on the HTTP layer.
"""

from portfolio.core.carousel_logic import (
    CarouselController,
    CarouselItem,
    CarouselState,
    LinkTarget,
)
from portfolio.core.errors import (
    ErrorCategory,
    InvalidInputError,
    OutOfRangeError,
    PortfolioError,
    PreferenceUnavailableError,
    StatsFeedError,
    classify_error,
    is_recoverable,
)
from portfolio.core.health import (
    HealthChecker,
    HealthReport,
    ServiceCheck,
    ServiceStatus,
)
from portfolio.core.logging import (
    bind_contextvars,
    clear_contextvars,
    configure_logging,
    get_logger,
    unbind_contextvars,
)
from portfolio.core.stats import (
    DailyCodingEntry,
    LanguageShare,
    PanelStatus,
    SkillLevel,
    StatsPanel,
    parse_daily_durations,
    parse_languages,
    parse_skills,
)
from portfolio.core.theme import (
    DEFAULT_THEME,
    Subscription,
    ThemeController,
    ThemeMarker,
    ThemeState,
)
from portfolio.core.typewriter import TypewriterFrame, typewriter_cycle, typewriter_frames

__all__ = [
    # Carousel
    "CarouselController",
    "CarouselItem",
    "CarouselState",
    "LinkTarget",
    # Error handling
    "ErrorCategory",
    "InvalidInputError",
    "OutOfRangeError",
    "PortfolioError",
    "PreferenceUnavailableError",
    "StatsFeedError",
    "classify_error",
    "is_recoverable",
    # Health checks
    "HealthChecker",
    "HealthReport",
    "ServiceCheck",
    "ServiceStatus",
    # Logging
    "bind_contextvars",
    "clear_contextvars",
    "configure_logging",
    "get_logger",
    "unbind_contextvars",
    # Statistics
    "DailyCodingEntry",
    "LanguageShare",
    "PanelStatus",
    "SkillLevel",
    "StatsPanel",
    "parse_daily_durations",
    "parse_languages",
    "parse_skills",
    # Theme
    "DEFAULT_THEME",
    "Subscription",
    "ThemeController",
    "ThemeMarker",
    "ThemeState",
    # Typewriter
    "TypewriterFrame",
    "typewriter_cycle",
    "typewriter_frames",
]
