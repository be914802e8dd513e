"""Enumerations for periodengine type-safe constants.

Uses StrEnum for definitions that are selected by name (quarter and weekend
definitions) and IntEnum where the numeric value carries meaning
(ordinals, minimum days of week 1).

Python 3.13+.
"""

from enum import IntEnum, StrEnum

__all__ = [
    "CalendarWeekendDefinition",
    "QuarterDefinition",
    "WeekOfMonthOrdinal",
    "WeekRule",
]


class QuarterDefinition(StrEnum):
    """How a year is partitioned into four 3-month quarters.

    StrEnum provides automatic string conversion:
    str(QuarterDefinition.FINANCIAL_JULY) == "financial_july"
    """

    CALENDAR_YEAR = "calendar_year"
    """Quarters start in January, April, July and October."""

    FINANCIAL_JULY = "financial_july"
    """Fiscal year starts 1 July (Australia, New Zealand)."""

    FINANCIAL_APRIL = "financial_april"
    """Fiscal year starts 1 April (UK corporation tax, Japan, India)."""

    FINANCIAL_OCTOBER = "financial_october"
    """Fiscal year starts 1 October (US federal government)."""

    FINANCIAL_FEBRUARY = "financial_february"
    """Fiscal year starts 1 February (US retail)."""

    CUSTOM = "custom"
    """Boundaries come from a QuarterProvider; built-in resolvers reject it."""


class WeekOfMonthOrdinal(IntEnum):
    """Ordinal position of a weekday within a month.

    Positive members count from the start of the month; LAST counts from
    the end and always exists.
    """

    FIRST = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4
    FIFTH = 5
    LAST = -1


class CalendarWeekendDefinition(StrEnum):
    """Which weekdays count as the weekend.

    StrEnum provides automatic string conversion:
    str(CalendarWeekendDefinition.SATURDAY_SUNDAY) == "saturday_sunday"
    """

    SATURDAY_SUNDAY = "saturday_sunday"
    """Saturday and Sunday (most of the Americas and Europe)."""

    FRIDAY_SATURDAY = "friday_saturday"
    """Friday and Saturday (much of the Middle East)."""

    THURSDAY_FRIDAY = "thursday_friday"
    """Thursday and Friday (historical Gulf-state weekend)."""

    SUNDAY_ONLY = "sunday_only"
    """Sunday only (six-day working week)."""

    FRIDAY_ONLY = "friday_only"
    """Friday only."""

    CUSTOM = "custom"
    """Delegate to a WeekendProvider."""


class WeekRule(IntEnum):
    """Rule that decides which week of a year is week 1.

    The value is the minimum number of days week 1 must have in the new
    year, which is how CLDR publishes it (``minDays``).
    """

    FIRST_DAY = 1
    """Week 1 contains January 1."""

    FIRST_FOUR_DAY_WEEK = 4
    """Week 1 is the first week with at least four days in the year (ISO 8601)."""

    FIRST_FULL_WEEK = 7
    """Week 1 is the first week that lies entirely in the year."""
