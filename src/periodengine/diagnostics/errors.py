"""Calendar exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Each concrete error also derives from the matching builtin so that
callers catching ValueError / TypeError / LookupError keep working.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "CalendarError",
    "CalendarLocaleError",
    "CalendarRangeError",
    "MissingProviderError",
    "ProviderRequiredError",
]


class CalendarError(Exception):
    """Base exception for all periodengine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CalendarError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class CalendarRangeError(CalendarError, ValueError):
    """A value falls outside its valid domain.

    Raised for inputs (year, month, day, quarter index, ISO week, ordinal,
    fiscal-week offset) outside their domain, and for computed results that
    would leave the representable range 0001-01-01..9999-12-31.
    Values are never clamped or wrapped.
    """


class ProviderRequiredError(CalendarError):
    """A built-in resolver was asked to handle QuarterDefinition.CUSTOM.

    This is a usage error, not a data error: pass a QuarterProvider to
    the *_of_provider functions instead.
    """


class MissingProviderError(CalendarError, TypeError):
    """A required provider argument was None."""


class CalendarLocaleError(CalendarError, LookupError):
    """Locale code is unknown or malformed (strict lookups only)."""
