"""Exception types raised by statkit operations.

Every failure derives from ``StatisticsError`` so callers can catch the whole
family at once, or branch on the specific cause.
"""

from __future__ import annotations


class StatisticsError(ValueError):
    """Base class for all statkit failures."""

    default_message = "Statistical operation failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class EmptyDataError(StatisticsError):
    """Raised when a dataset has no elements."""

    default_message = "Data cannot be empty"


class InvalidDataError(StatisticsError):
    """Raised for non-numeric values, out-of-range parameters or degenerate input."""

    default_message = "Data must contain only finite numeric values"


class InsufficientDataError(StatisticsError):
    """Raised when a dataset has fewer elements than an operation requires."""

    default_message = "Insufficient data points for this operation"
