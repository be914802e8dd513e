"""ISO 8601 weeks and culture-defined week numbering.

ISO 8601: weeks start on Monday and week 1 is the week containing the
year's first Thursday (equivalently, 4 January). Early-January dates can
therefore belong to the previous ISO year's last week, and late-December
dates to the next ISO year's week 1.

Culture weeks are described by a WeekConvention: the weekday on which
weeks start and the WeekRule deciding which week is week 1. Days before
week 1 report the last week number of the previous year.

Python 3.13+.
"""

from __future__ import annotations

from calendar import MONDAY, THURSDAY, WEDNESDAY, Day
from dataclasses import dataclass
from datetime import date
from typing import NamedTuple

from periodengine.constants import DAYS_PER_WEEK, MAX_DAY_NUMBER, MIN_YEAR
from periodengine.core.daynumber import (
    date_from_day_number,
    day_number_of,
    from_day_number,
    is_leap_year,
    to_day_number,
)
from periodengine.core.validation import require_int, require_weekday, require_year
from periodengine.diagnostics import CalendarRangeError, ErrorTemplate
from periodengine.enums import WeekRule

__all__ = [
    "ISO_WEEK_CONVENTION",
    "IsoWeek",
    "WeekConvention",
    "first_date_of_iso_week",
    "first_date_of_week",
    "get_iso_week",
    "get_iso_weeks_in_year",
    "last_date_of_iso_week",
    "week_of_month",
    "week_of_year",
]


class IsoWeek(NamedTuple):
    """ISO week-numbering year and week (1-53)."""

    year: int
    week: int


@dataclass(frozen=True, slots=True)
class WeekConvention:
    """How a culture numbers the weeks of a year.

    Attributes:
        first_weekday: Weekday on which weeks start
        rule: Which week of the year is week 1
    """

    first_weekday: Day = MONDAY
    rule: WeekRule = WeekRule.FIRST_FOUR_DAY_WEEK

    def __post_init__(self) -> None:
        """Normalize first_weekday to calendar.Day and validate rule.

        Raises:
            TypeError: If rule is not a WeekRule
            CalendarRangeError: If first_weekday is outside 0-6
        """
        object.__setattr__(
            self, "first_weekday", require_weekday(self.first_weekday, "first_weekday")
        )
        if not isinstance(self.rule, WeekRule):
            msg = f"rule must be WeekRule, got {type(self.rule).__name__}"
            raise TypeError(msg)


ISO_WEEK_CONVENTION = WeekConvention(MONDAY, WeekRule.FIRST_FOUR_DAY_WEEK)


def get_iso_weeks_in_year(iso_year: int) -> int:
    """Return the number of ISO weeks (52 or 53) in iso_year.

    53 exactly when 1 January is a Thursday, or is a Wednesday in a leap year.
    """
    iso_year = require_year(iso_year, "iso_year")
    jan1 = Day(to_day_number(iso_year, 1, 1) % DAYS_PER_WEEK)
    if jan1 == THURSDAY or (jan1 == WEDNESDAY and is_leap_year(iso_year)):
        return 53
    return 52


def get_iso_week(value: date) -> IsoWeek:
    """Return the ISO year and week of value.

    The ISO year is the calendar year of the Thursday in value's week.

    Example:
        >>> get_iso_week(date(2024, 1, 1))
        IsoWeek(year=2024, week=1)
        >>> get_iso_week(date(2023, 1, 1))
        IsoWeek(year=2022, week=52)
    """
    day_number = day_number_of(value)
    # Every Monday-Sunday week of 0001..9999 has its Thursday inside the range.
    thursday = day_number - day_number % DAYS_PER_WEEK + THURSDAY
    iso_year = from_day_number(thursday).year
    return IsoWeek(iso_year, (thursday - to_day_number(iso_year, 1, 1)) // DAYS_PER_WEEK + 1)


def _iso_week_monday(iso_year: int, iso_week: int) -> int:
    iso_year = require_year(iso_year, "iso_year")
    iso_week = require_int(iso_week, "iso_week")
    weeks = get_iso_weeks_in_year(iso_year)
    if not 1 <= iso_week <= weeks:
        raise CalendarRangeError(ErrorTemplate.iso_week_out_of_range(iso_year, iso_week, weeks))
    jan4 = to_day_number(iso_year, 1, 4)
    return jan4 - jan4 % DAYS_PER_WEEK + (iso_week - 1) * DAYS_PER_WEEK


def first_date_of_iso_week(iso_year: int, iso_week: int) -> date:
    """Return the Monday of an ISO week.

    Args:
        iso_year: ISO week-numbering year
        iso_week: Week, validated against get_iso_weeks_in_year(iso_year)

    Raises:
        CalendarRangeError: If iso_week is outside 1..52/53, or the Monday
            falls before 0001-01-01
    """
    return date_from_day_number(_iso_week_monday(iso_year, iso_week))


def last_date_of_iso_week(iso_year: int, iso_week: int) -> date:
    """Return the Sunday of an ISO week.

    Raises:
        CalendarRangeError: As first_date_of_iso_week, or if the Sunday falls
            after 9999-12-31 (ISO 9999 week 52)
    """
    return date_from_day_number(_iso_week_monday(iso_year, iso_week) + DAYS_PER_WEEK - 1)


def _week_one_start(jan1: int, first_weekday: Day, rule: WeekRule) -> int:
    """Day number on which week 1 of the year starting at jan1 begins."""
    jan1_weekday = jan1 % DAYS_PER_WEEK
    if rule is WeekRule.FIRST_DAY:
        # Week 1 is the week containing 1 January.
        return jan1 - (jan1_weekday - first_weekday) % DAYS_PER_WEEK

    # Days from 1 January to the first first_weekday of the year.
    offset = (first_weekday - jan1_weekday) % DAYS_PER_WEEK
    if offset != 0 and offset >= rule.value:
        # The partial week before it is long enough to be week 1.
        offset -= DAYS_PER_WEEK
    return jan1 + offset


def _week_of_year(day_number: int, first_weekday: Day, rule: WeekRule) -> int:
    year = from_day_number(day_number).year
    jan1 = to_day_number(year, 1, 1)
    day = day_number - _week_one_start(jan1, first_weekday, rule)
    if day >= 0:
        return day // DAYS_PER_WEEK + 1
    if year == MIN_YEAR:
        raise CalendarRangeError(
            ErrorTemplate.result_out_of_range(date_from_day_number(day_number).isoformat(), -1)
        )
    return _week_of_year(jan1 - 1, first_weekday, rule)


def _require_convention(convention: object) -> None:
    if not isinstance(convention, WeekConvention):
        msg = f"convention must be WeekConvention, got {type(convention).__name__}"
        raise TypeError(msg)


def week_of_year(value: date, convention: WeekConvention = ISO_WEEK_CONVENTION) -> int:
    """Return the week number of value under a culture week convention.

    Days before week 1 return the previous year's last week number, so the
    result is 1-53 (FIRST_DAY can reach 54 in a leap year starting on the
    last weekday of the week). Late-December days are never moved into the
    next year, so under the ISO convention the result can differ from
    get_iso_week(): 2024-12-30 is week 53 here and ISO week 1 of 2025.

    Args:
        value: date or datetime
        convention: First weekday and week-1 rule (default ISO 8601)

    Raises:
        CalendarRangeError: If value precedes week 1 of year 1
    """
    _require_convention(convention)
    return _week_of_year(day_number_of(value), convention.first_weekday, convention.rule)


def week_of_month(value: date, first_weekday: int = MONDAY) -> int:
    """Return the week of the month (1-6) containing value.

    Week 1 is the (possibly partial) week containing the 1st of the month;
    subsequent weeks start on first_weekday.
    """
    start = require_weekday(first_weekday, "first_weekday")
    day_number = day_number_of(value)
    first_of_month = day_number - (value.day - 1)
    lead = (first_of_month - start) % DAYS_PER_WEEK
    return (value.day - 1 + lead) // DAYS_PER_WEEK + 1


def first_date_of_week(
    year: int, week: int, convention: WeekConvention = ISO_WEEK_CONVENTION
) -> date:
    """Return the first day of a culture week; the inverse of week_of_year().

    Week 1 starts on convention.first_weekday and may begin in the previous
    December. A week is accepted only when week_of_year() of its first day
    inside ``year`` gives it back: a week whose first day falls in the next
    year is rejected, and week 54 occurs only under FIRST_DAY.

    Example:
        >>> first_date_of_week(2024, 53)
        datetime.date(2024, 12, 30)
        >>> first_date_of_week(2000, 1, WeekConvention(SUNDAY, WeekRule.FIRST_DAY))
        datetime.date(1999, 12, 26)

    Raises:
        CalendarRangeError: If the week does not occur in year, or its first
            day falls before 0001-01-01
    """
    year = require_year(year)
    week = require_int(week, "week")
    _require_convention(convention)
    first_weekday, rule = convention.first_weekday, convention.rule

    jan1 = to_day_number(year, 1, 1)
    start = _week_one_start(jan1, first_weekday, rule) + (week - 1) * DAYS_PER_WEEK

    # Check the week's first day inside the year; week 1 can start in December.
    in_year = max(start, jan1)
    if (
        week < 1
        or in_year > MAX_DAY_NUMBER
        or from_day_number(in_year).year != year
        or _week_of_year(in_year, first_weekday, rule) != week
    ):
        raise CalendarRangeError(
            ErrorTemplate.week_not_in_year(year, week, f"{first_weekday.name}/{rule.name}")
        )
    return date_from_day_number(start)
