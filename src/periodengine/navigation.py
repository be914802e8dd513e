"""Weekday navigation: next/previous/nearest and Nth occurrences.

Two distinct families of search are provided and must not be confused:

- Inclusive (``*_on_or_after`` / ``*_on_or_before``): a reference date that
  already falls on the target weekday is returned unchanged.
- Strict (``strictly_*``): the result is never the reference date; a matching
  reference date moves a full week.

All functions accept ``date`` or ``datetime`` and return the same type; a
datetime keeps its time of day. Results outside 0001-01-01..9999-12-31 raise
CalendarRangeError.

Python 3.13+.
"""

from __future__ import annotations

from calendar import MONDAY, Day
from datetime import date

from periodengine.constants import DAYS_PER_WEEK
from periodengine.core.daynumber import (
    DateT,
    date_from_day_number,
    day_number_of,
    days_in_month,
    shift_days,
    to_day_number,
)
from periodengine.core.validation import require_int, require_weekday, require_year
from periodengine.diagnostics import CalendarRangeError, ErrorTemplate
from periodengine.enums import WeekOfMonthOrdinal

__all__ = [
    "count_occurrences_in_month",
    "first_day_of_week",
    "last_day_of_week",
    "nearest_occurrence",
    "next_occurrence_on_or_after",
    "nth_occurrence_between",
    "nth_occurrence_in_month",
    "nth_occurrence_in_year",
    "previous_occurrence_on_or_before",
    "strictly_next_occurrence",
    "strictly_previous_occurrence",
]

_MONTH_ORDINALS = frozenset(WeekOfMonthOrdinal)


def _days_forward(value: date, target: Day) -> int:
    """Days from value to the next target weekday (0 if value matches)."""
    return (target - day_number_of(value)) % DAYS_PER_WEEK


def _days_backward(value: date, target: Day) -> int:
    """Days from the previous target weekday to value (0 if value matches)."""
    return (day_number_of(value) - target) % DAYS_PER_WEEK


def next_occurrence_on_or_after(value: DateT, weekday: int) -> DateT:
    """Return the first date on or after value that falls on weekday.

    Example:
        >>> next_occurrence_on_or_after(date(2024, 4, 3), calendar.FRIDAY)
        datetime.date(2024, 4, 5)
        >>> next_occurrence_on_or_after(date(2024, 4, 5), calendar.FRIDAY)
        datetime.date(2024, 4, 5)
    """
    return shift_days(value, _days_forward(value, require_weekday(weekday)))


def previous_occurrence_on_or_before(value: DateT, weekday: int) -> DateT:
    """Return the last date on or before value that falls on weekday."""
    return shift_days(value, -_days_backward(value, require_weekday(weekday)))


def strictly_next_occurrence(value: DateT, weekday: int) -> DateT:
    """Return the first date strictly after value that falls on weekday.

    A reference date already on weekday yields the date exactly 7 days later.
    """
    return shift_days(value, _days_forward(value, require_weekday(weekday)) or DAYS_PER_WEEK)


def strictly_previous_occurrence(value: DateT, weekday: int) -> DateT:
    """Return the last date strictly before value that falls on weekday.

    A reference date already on weekday yields the date exactly 7 days earlier.
    """
    days = _days_backward(value, require_weekday(weekday)) or DAYS_PER_WEEK
    return shift_days(value, -days)


def nearest_occurrence(value: DateT, weekday: int) -> DateT:
    """Return the occurrence of weekday closest to value.

    A matching reference date is returned unchanged. Otherwise the previous
    and next occurrences are 7 days apart and one of them is strictly closer;
    ties (not reachable with a 7-day cycle) resolve to the earlier date.
    """
    target = require_weekday(weekday)
    forward = _days_forward(value, target)
    backward = _days_backward(value, target)
    if backward <= forward:
        return shift_days(value, -backward)
    return shift_days(value, forward)


def first_day_of_week(value: DateT, first_weekday: int = MONDAY) -> DateT:
    """Return the start of the week containing value.

    Args:
        value: Reference date
        first_weekday: Weekday on which weeks start (default Monday)
    """
    return previous_occurrence_on_or_before(value, first_weekday)


def last_day_of_week(value: DateT, first_weekday: int = MONDAY) -> DateT:
    """Return the last day of the week containing value."""
    start = require_weekday(first_weekday, "first_weekday")
    return next_occurrence_on_or_after(value, (start + DAYS_PER_WEEK - 1) % DAYS_PER_WEEK)


def _count_in_window(first: int, last: int, weekday: Day) -> int:
    first_match = first + (weekday - first) % DAYS_PER_WEEK
    if first_match > last:
        return 0
    return (last - first_match) // DAYS_PER_WEEK + 1


def _nth_in_window(first: int, last: int, weekday: Day, occurrence: int, period: str) -> int:
    """Day number of the Nth weekday between first and last (inclusive).

    Positive occurrences count from first; negative ones count back from
    last (-1 is the final occurrence).
    """
    if occurrence > 0:
        result = first + (weekday - first) % DAYS_PER_WEEK + (occurrence - 1) * DAYS_PER_WEEK
    elif occurrence < 0:
        result = last - (last - weekday) % DAYS_PER_WEEK + (occurrence + 1) * DAYS_PER_WEEK
    else:
        result = first - 1
    if not first <= result <= last:
        raise CalendarRangeError(
            ErrorTemplate.ordinal_not_in_period(
                occurrence, weekday.name, period, _count_in_window(first, last, weekday)
            )
        )
    return result


def nth_occurrence_between(first: date, last: date, weekday: int, occurrence: int) -> date:
    """Return the Nth occurrence of weekday in the inclusive window first..last.

    Args:
        first: First day of the window
        last: Last day of the window
        weekday: Target weekday (calendar.Day or 0-6)
        occurrence: 1-based from the start, or negative from the end (-1 = last)

    Raises:
        CalendarRangeError: If the window does not contain that occurrence
    """
    target = require_weekday(weekday)
    occurrence = require_int(occurrence, "occurrence")
    start, end = day_number_of(first), day_number_of(last)
    period = f"{first.isoformat()}..{last.isoformat()}"
    return date_from_day_number(_nth_in_window(start, end, target, occurrence, period))


def nth_occurrence_in_month(year: int, month: int, weekday: int, ordinal: int) -> date:
    """Return the Nth occurrence of weekday in a month.

    Numbered ordinals take the first occurrence and add (ordinal - 1) weeks;
    LAST counts back from the last day of the month.

    Args:
        year: Calendar year
        month: Month (1-12)
        weekday: Target weekday (calendar.Day or 0-6)
        ordinal: WeekOfMonthOrdinal (or its int value)

    Returns:
        The matching date

    Raises:
        CalendarRangeError: If the month does not contain that ordinal
            (e.g. a FIFTH Wednesday in February 2023)

    Example:
        >>> nth_occurrence_in_month(2024, 4, calendar.MONDAY, WeekOfMonthOrdinal.LAST)
        datetime.date(2024, 4, 29)
    """
    length = days_in_month(year, month)
    target = require_weekday(weekday)
    ordinal = require_int(ordinal, "ordinal")
    first = to_day_number(year, month, 1)
    period = f"{year:04d}-{month:02d}"
    if ordinal not in _MONTH_ORDINALS:
        raise CalendarRangeError(
            ErrorTemplate.ordinal_not_in_period(
                ordinal, target.name, period, _count_in_window(first, first + length - 1, target)
            )
        )
    return date_from_day_number(_nth_in_window(first, first + length - 1, target, ordinal, period))


def nth_occurrence_in_year(year: int, weekday: int, occurrence: int) -> date:
    """Return the Nth occurrence of weekday in a calendar year (-1 = last)."""
    year = require_year(year)
    return nth_occurrence_between(date(year, 1, 1), date(year, 12, 31), weekday, occurrence)


def count_occurrences_in_month(year: int, month: int, weekday: int) -> int:
    """Return how many times weekday occurs in a month (4 or 5)."""
    length = days_in_month(year, month)
    first = to_day_number(year, month, 1)
    return _count_in_window(first, first + length - 1, require_weekday(weekday))
