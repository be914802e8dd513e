"""Argument validation shared by every public operation.

All checks run before any arithmetic, so a failing call never produces a
partial result. Type errors raise plain TypeError; domain errors raise
CalendarRangeError with a Diagnostic.

Python 3.13+.
"""

from __future__ import annotations

from calendar import Day
from datetime import date

from periodengine.constants import (
    MAX_DAY_NUMBER,
    MAX_YEAR,
    MIN_DAY_NUMBER,
    MIN_YEAR,
    MONTHS_PER_YEAR,
    QUARTERS_PER_YEAR,
)
from periodengine.diagnostics import CalendarRangeError, ErrorTemplate

__all__ = [
    "require_date",
    "require_day_number",
    "require_int",
    "require_month",
    "require_quarter",
    "require_weekday",
    "require_year",
]


def require_int(value: object, name: str) -> int:
    """Return value if it is an int (bool excluded), else raise TypeError.

    Args:
        value: Value to check
        name: Argument name for the error message

    Returns:
        The value, typed as int

    Raises:
        TypeError: If value is not an int, or is a bool
    """
    # bool is an int subclass; True as a month is always a caller bug
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be int, got {type(value).__name__}"
        raise TypeError(msg)
    return value


def require_year(value: object, name: str = "year") -> int:
    """Validate a calendar year (1-9999)."""
    year = require_int(value, name)
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise CalendarRangeError(ErrorTemplate.year_out_of_range(year, argument=name))
    return year


def require_month(value: object, name: str = "month") -> int:
    """Validate a month (1-12)."""
    month = require_int(value, name)
    if not 1 <= month <= MONTHS_PER_YEAR:
        raise CalendarRangeError(ErrorTemplate.month_out_of_range(month, argument=name))
    return month


def require_quarter(value: object, name: str = "quarter") -> int:
    """Validate a quarter index (1-4)."""
    quarter = require_int(value, name)
    if not 1 <= quarter <= QUARTERS_PER_YEAR:
        raise CalendarRangeError(ErrorTemplate.quarter_out_of_range(quarter, argument=name))
    return quarter


def require_day_number(value: object, name: str = "day_number") -> int:
    """Validate a day number (0 = 0001-01-01 through 9999-12-31)."""
    day_number = require_int(value, name)
    if not MIN_DAY_NUMBER <= day_number <= MAX_DAY_NUMBER:
        raise CalendarRangeError(
            ErrorTemplate.day_number_out_of_range(day_number, MIN_DAY_NUMBER, MAX_DAY_NUMBER)
        )
    return day_number


def require_weekday(value: object, name: str = "weekday") -> Day:
    """Coerce value to calendar.Day.

    Accepts calendar.Day members and plain ints 0-6 (Monday=0), the
    numbering used by date.weekday().

    Raises:
        TypeError: If value is not an int (bool excluded)
        CalendarRangeError: If value is outside 0-6
    """
    if isinstance(value, Day):
        return value
    number = require_int(value, name)
    if not 0 <= number <= 6:
        raise CalendarRangeError(ErrorTemplate.weekday_out_of_range(number, argument=name))
    return Day(number)


def require_date(value: object, name: str = "value") -> date:
    """Validate that value is a date (datetime accepted, it is a date subclass)."""
    if not isinstance(value, date):
        msg = f"{name} must be date, got {type(value).__name__}"
        raise TypeError(msg)
    return value
