"""Error taxonomy for the portfolio site.

Caller contract violations (an empty carousel, an index outside the
carousel) fail fast so defects surface during development. Environment
problems (no stored preference access, no colour-scheme signal, an
unreachable statistics feed) are recoverable and handled by falling back
to a safe default.

Example:
    from portfolio.core.errors import OutOfRangeError, classify_error

    try:
        controller.go_to(7)
    except OutOfRangeError as ex:
        logger.warning("carousel_index_rejected", index=ex.index)
"""

import asyncio
from enum import Enum, auto


class ErrorCategory(Enum):
    """Classification of error types for handling decisions."""

    # Caller contract violations
    INVALID_INPUT = auto()
    OUT_OF_RANGE = auto()

    # Host environment
    PREFERENCE_UNAVAILABLE = auto()

    # Statistics feed failures
    TIMEOUT = auto()
    NETWORK = auto()
    SERVICE_UNAVAILABLE = auto()
    NOT_FOUND = auto()
    INVALID_PAYLOAD = auto()
    UNKNOWN = auto()


# Categories recovered from by falling back to a default
RECOVERABLE_CATEGORIES = {
    ErrorCategory.PREFERENCE_UNAVAILABLE,
    ErrorCategory.TIMEOUT,
    ErrorCategory.NETWORK,
    ErrorCategory.SERVICE_UNAVAILABLE,
    ErrorCategory.NOT_FOUND,
    ErrorCategory.INVALID_PAYLOAD,
    ErrorCategory.UNKNOWN,
}


class PortfolioError(Exception):
    """Base class for all portfolio errors.

    Attributes:
        category: The specific type of error.
        original_error: The underlying exception, if any.
    """

    default_category = ErrorCategory.UNKNOWN

    def __init__(
        self,
        message: str,
        category: ErrorCategory | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.category = category or self.default_category
        self.original_error = original_error


class InvalidInputError(PortfolioError):
    """An item list or item record violates the caller contract."""

    default_category = ErrorCategory.INVALID_INPUT


class OutOfRangeError(PortfolioError):
    """A direct index selection falls outside ``[0, length)``.

    Attributes:
        index: The rejected index.
        length: Number of items the index was checked against.
    """

    default_category = ErrorCategory.OUT_OF_RANGE

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Index {index} out of range for {length} items")
        self.index = index
        self.length = length


class PreferenceUnavailableError(PortfolioError):
    """Stored preference or OS colour-scheme signal cannot be read."""

    default_category = ErrorCategory.PREFERENCE_UNAVAILABLE


class StatsFeedError(PortfolioError):
    """The external statistics feed could not be read."""

    @classmethod
    def from_exception(cls, ex: Exception) -> "StatsFeedError":
        """Wrap an exception, classifying it on the way."""
        return cls(str(ex), category=classify_error(ex), original_error=ex)


def classify_error(error: Exception) -> ErrorCategory:
    """Classify an exception into an error category.

    Args:
        error: The exception to classify.

    Returns:
        The ErrorCategory that best matches the error.
    """
    if isinstance(error, PortfolioError):
        return error.category

    if isinstance(error, (TimeoutError, asyncio.TimeoutError)):
        return ErrorCategory.TIMEOUT

    if isinstance(error, (ValueError, KeyError, TypeError)):
        return ErrorCategory.INVALID_PAYLOAD

    error_str = str(error).lower()

    if "timeout" in error_str or "timed out" in error_str:
        return ErrorCategory.TIMEOUT
    if "connection" in error_str or "network" in error_str:
        return ErrorCategory.NETWORK
    if "404" in error_str or "not found" in error_str:
        return ErrorCategory.NOT_FOUND
    if "503" in error_str or "service unavailable" in error_str:
        return ErrorCategory.SERVICE_UNAVAILABLE
    if "502" in error_str or "bad gateway" in error_str:
        return ErrorCategory.SERVICE_UNAVAILABLE

    return ErrorCategory.UNKNOWN


def is_recoverable(category: ErrorCategory) -> bool:
    """Check whether an error category is handled by falling back to a default.

    Args:
        category: The error category to check.

    Returns:
        True if callers should degrade instead of propagating.
    """
    return category in RECOVERABLE_CATEGORIES
