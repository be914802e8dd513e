"""Day-number core: linear day counts over the proleptic Gregorian calendar.

A day number is the count of days since 0001-01-01 (day 0). Every
higher-level resolver converts through this value, so all calendar
arithmetic lives here and nowhere else.

Conversion uses cumulative month tables and the 400/100/4/1-year cycle
decomposition; everything is pure integer arithmetic.

Day 0 is a Monday, which makes ``day_number % 7`` equal to the
``calendar.Day`` numbering used by ``date.weekday()``.

Python 3.13+.
"""

from __future__ import annotations

from calendar import Day
from datetime import date, timedelta
from typing import NamedTuple, TypeVar

from periodengine.constants import (
    DAYS_PER_4_YEARS,
    DAYS_PER_100_YEARS,
    DAYS_PER_400_YEARS,
    DAYS_PER_WEEK,
    DAYS_PER_YEAR,
    MAX_DAY_NUMBER,
    MIN_DAY_NUMBER,
)
from periodengine.core.validation import (
    require_date,
    require_day_number,
    require_int,
    require_month,
    require_year,
)
from periodengine.diagnostics import CalendarRangeError, ErrorTemplate

__all__ = [
    "CalendarDate",
    "DateT",
    "DayNumber",
    "date_from_day_number",
    "day_number_of",
    "days_in_month",
    "days_in_year",
    "from_day_number",
    "is_leap_year",
    "move_to_day_number",
    "shift_days",
    "to_day_number",
    "weekday_of",
]

type DayNumber = int

# date or datetime; navigation results keep the caller's type and time of day
DateT = TypeVar("DateT", bound=date)

# Days before the first of each month; index 12 is the year length.
_DAYS_TO_MONTH_365 = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365)
_DAYS_TO_MONTH_366 = (0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335, 366)


class CalendarDate(NamedTuple):
    """A validated (year, month, day) triple.

    Compares equal to a plain ``(year, month, day)`` tuple.
    """

    year: int
    month: int
    day: int

    def to_date(self) -> date:
        """Return the equivalent datetime.date."""
        return date(self.year, self.month, self.day)


def _is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _month_table(year: int) -> tuple[int, ...]:
    return _DAYS_TO_MONTH_366 if _is_leap(year) else _DAYS_TO_MONTH_365


def is_leap_year(year: int) -> bool:
    """Return True if year is a Gregorian leap year.

    Divisible by 4, except centuries, except centuries divisible by 400.

    Raises:
        CalendarRangeError: If year is outside 1-9999
    """
    return _is_leap(require_year(year))


def days_in_year(year: int) -> int:
    """Return 365 or 366."""
    return _month_table(require_year(year))[12]


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in month of year.

    Args:
        year: Calendar year (1-9999)
        month: Month (1-12)

    Returns:
        28, 29, 30 or 31

    Raises:
        CalendarRangeError: If year or month is out of range
    """
    table = _month_table(require_year(year))
    month = require_month(month)
    return table[month] - table[month - 1]


def to_day_number(year: int, month: int, day: int) -> DayNumber:
    """Convert a calendar date to its day number.

    Args:
        year: Calendar year (1-9999)
        month: Month (1-12)
        day: Day of month (1..days_in_month)

    Returns:
        Days since 0001-01-01

    Raises:
        TypeError: If an argument is not an int
        CalendarRangeError: If the triple is not a valid date

    Example:
        >>> to_day_number(1, 1, 1)
        0
        >>> to_day_number(2024, 2, 29)
        738944
    """
    year = require_year(year)
    month = require_month(month)
    day = require_int(day, "day")
    table = _month_table(year)
    month_length = table[month] - table[month - 1]
    if not 1 <= day <= month_length:
        raise CalendarRangeError(ErrorTemplate.day_out_of_range(year, month, day, month_length))

    y = year - 1
    return y * DAYS_PER_YEAR + y // 4 - y // 100 + y // 400 + table[month - 1] + day - 1


def from_day_number(day_number: DayNumber) -> CalendarDate:
    """Convert a day number back to (year, month, day).

    Args:
        day_number: Days since 0001-01-01 (0-3652058)

    Returns:
        CalendarDate for that day

    Raises:
        CalendarRangeError: If day_number is outside the supported range

    Example:
        >>> from_day_number(738944)
        CalendarDate(year=2024, month=2, day=29)
    """
    n = require_day_number(day_number)

    y400, n = divmod(n, DAYS_PER_400_YEARS)
    # The last day of a 400-year cycle would otherwise land in a fifth century.
    y100 = min(n // DAYS_PER_100_YEARS, 3)
    n -= y100 * DAYS_PER_100_YEARS
    y4, n = divmod(n, DAYS_PER_4_YEARS)
    # Same for the last day of a 4-year cycle (Dec 31 of the leap year).
    y1 = min(n // DAYS_PER_YEAR, 3)
    n -= y1 * DAYS_PER_YEAR

    year = y400 * 400 + y100 * 100 + y4 * 4 + y1 + 1
    leap = y1 == 3 and (y4 != 24 or y100 == 3)
    table = _DAYS_TO_MONTH_366 if leap else _DAYS_TO_MONTH_365

    # Every month has at least 28 days, so n // 32 never overshoots.
    month = n // 32 + 1
    while n >= table[month]:
        month += 1
    return CalendarDate(year, month, n - table[month - 1] + 1)


def weekday_of(day_number: DayNumber) -> Day:
    """Return the weekday of a day number (Monday=0)."""
    return Day(require_day_number(day_number) % DAYS_PER_WEEK)


def day_number_of(value: date) -> DayNumber:
    """Return the day number of a date (time of day is ignored)."""
    value = require_date(value)
    return to_day_number(value.year, value.month, value.day)


def date_from_day_number(day_number: DayNumber) -> date:
    """Return the datetime.date for a day number."""
    return from_day_number(day_number).to_date()


def shift_days(value: DateT, days: int) -> DateT:
    """Move a date by whole days, preserving type and time of day.

    Args:
        value: date or datetime
        days: Signed day offset

    Returns:
        Same type as value; a datetime keeps its time and tzinfo

    Raises:
        CalendarRangeError: If the result leaves 0001-01-01..9999-12-31
    """
    days = require_int(days, "days")
    target = day_number_of(value) + days
    if not MIN_DAY_NUMBER <= target <= MAX_DAY_NUMBER:
        raise CalendarRangeError(ErrorTemplate.result_out_of_range(value.isoformat(), days))
    return value + timedelta(days=days)


def move_to_day_number(value: DateT, day_number: DayNumber) -> DateT:
    """Replace the calendar day of value, keeping its type and time of day."""
    return shift_days(value, require_day_number(day_number) - day_number_of(value))
