"""
Errors Module - Exception types raised by the search engine.
"""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .plan import SearchMetrics


class CrossingError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(CrossingError):
    """Puzzle configuration is inconsistent. Raised at setup, never mid-search."""


class UnknownEntity(ConfigurationError, KeyError):
    """An identifier was used as an entity but is not in the entity set."""

    def __init__(self, entity: object):
        super().__init__(entity)
        self.entity = entity

    def __str__(self) -> str:
        return f"Unknown entity: {self.entity!r}"


class UnknownLocation(ConfigurationError, KeyError):
    """An identifier was used as a location but is not in the location set."""

    def __init__(self, location: object):
        super().__init__(location)
        self.location = location

    def __str__(self) -> str:
        return f"Unknown location: {self.location!r}"


class MalformedAction(CrossingError):
    """
    An action was invoked with an unknown kind or an argument outside
    its declared domain. Always a programming error.
    """


class SearchExhausted(CrossingError):
    """
    The search ended without reaching a goal state.

    Attributes:
        metrics: Statistics gathered up to the point the search stopped
    """

    def __init__(self, message: str, metrics: Optional["SearchMetrics"] = None):
        super().__init__(message)
        self.metrics = metrics


class SearchLimitReached(SearchExhausted):
    """The search was stopped by a round/frontier limit, a timeout or cancellation."""
