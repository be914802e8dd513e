"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by every
periodengine exception.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Range errors (input or computed value outside its domain)
        2000-2999: Usage errors (missing or required provider)
        3000-3999: Locale errors (unknown locale, unusable CLDR data)
    """

    # Range errors (1000-1999)
    YEAR_OUT_OF_RANGE = 1001
    MONTH_OUT_OF_RANGE = 1002
    DAY_OUT_OF_RANGE = 1003
    DAY_NUMBER_OUT_OF_RANGE = 1004
    WEEKDAY_OUT_OF_RANGE = 1005
    QUARTER_OUT_OF_RANGE = 1006
    ISO_WEEK_OUT_OF_RANGE = 1007
    ORDINAL_NOT_IN_PERIOD = 1008
    DATE_OUTSIDE_FISCAL_YEAR = 1009
    ANCHOR_DAY_OUT_OF_RANGE = 1010
    PROVIDER_RESULT_OUT_OF_RANGE = 1011
    NO_WORKING_DAYS = 1012
    RESULT_OUT_OF_RANGE = 1013
    FISCAL_WEEKS_OUT_OF_RANGE = 1014
    WEEK_NOT_IN_YEAR = 1015

    # Usage errors (2000-2999)
    PROVIDER_REQUIRED = 2001
    PROVIDER_MISSING = 2002

    # Locale errors (3000-3999)
    LOCALE_UNKNOWN = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        function_name: Public function where the error was detected
        argument_name: Argument name that caused the error
        received_value: repr() of the offending value
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    function_name: str | None = None
    argument_name: str | None = None
    received_value: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to format_diagnostic() for consistent output.

        Example output:
            error[DAY_OUT_OF_RANGE]: Day 29 is out of range for 2023-02 (1-28)
              = argument: day
              = received: 29
              = help: February has 29 days only in leap years

        Returns:
            Formatted error message
        """
        from .formatter import format_diagnostic  # noqa: PLC0415 - circular

        return format_diagnostic(self)
