"""Diagnostic system for calendar errors.

Provides structured error diagnostics with codes, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CalendarError,
    CalendarLocaleError,
    CalendarRangeError,
    MissingProviderError,
    ProviderRequiredError,
)
from .formatter import format_diagnostic
from .templates import ErrorTemplate

__all__ = [
    "CalendarError",
    "CalendarLocaleError",
    "CalendarRangeError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "MissingProviderError",
    "ProviderRequiredError",
    "format_diagnostic",
]
