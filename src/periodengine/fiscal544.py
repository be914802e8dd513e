"""Week-based 5-4-4 retail fiscal calendar.

A retail fiscal year is made of whole weeks: four 13-week quarters, each
split into "months" of 5, 4 and 4 weeks. The year starts on a fixed weekday
near a nominal date (e.g. the Sunday on or before 1 February), so most years
have 52 weeks and some have 53; the extra week is folded into Q4 and its
last month.

One provider instance covers exactly one fiscal year. Dates before its
start or after its last week are rejected rather than wrapped; use
``next_fiscal_year()`` (or a new instance) for adjacent years.

Python 3.13+.
"""

from __future__ import annotations

import logging
from calendar import SUNDAY, Day
from dataclasses import dataclass
from datetime import date

from periodengine.constants import (
    DAYS_PER_FISCAL_YEAR,
    DAYS_PER_WEEK,
    MAX_YEAR,
    QUARTERS_PER_YEAR,
    WEEKS_PER_FISCAL_YEAR,
    WEEKS_PER_QUARTER,
)
from periodengine.core.daynumber import (
    date_from_day_number,
    day_number_of,
    days_in_month,
    from_day_number,
)
from periodengine.core.validation import (
    require_date,
    require_int,
    require_quarter,
    require_weekday,
)
from periodengine.diagnostics import CalendarRangeError, ErrorTemplate
from periodengine.navigation import first_day_of_week

__all__ = ["FISCAL_MONTH_WEEKS", "Fiscal544QuarterProvider"]

logger = logging.getLogger(__name__)

# Weeks per fiscal month within each quarter.
FISCAL_MONTH_WEEKS: tuple[int, int, int] = (5, 4, 4)


def _same_day_next_year(value: date) -> date:
    """value moved one calendar year later; 29 February becomes 28 February."""
    year = value.year + 1
    return date(year, value.month, min(value.day, days_in_month(year, value.month)))


def _plain_date(value: date) -> date:
    return date(value.year, value.month, value.day)


def _derived_weeks(aligned: date, nominal: date, first_weekday: Day) -> int:
    """52, or 53 when the next year's aligned start is more than 364 days away."""
    if nominal.year >= MAX_YEAR:
        return WEEKS_PER_FISCAL_YEAR
    next_start = first_day_of_week(_same_day_next_year(nominal), first_weekday)
    if day_number_of(next_start) - day_number_of(aligned) > DAYS_PER_FISCAL_YEAR:
        return WEEKS_PER_FISCAL_YEAR + 1
    return WEEKS_PER_FISCAL_YEAR


@dataclass(frozen=True, slots=True)
class Fiscal544QuarterProvider:
    """QuarterProvider for a single 52/53-week 5-4-4 fiscal year.

    The fiscal year is fully described by its fields. Construction snaps
    ``fiscal_year_start`` back to ``first_weekday``. When ``weeks`` is
    omitted, the length is derived from ``nominal_start`` (default: the
    caller's unaligned start): the year has 53 weeks when the next year's
    aligned start, ``nominal_start`` plus one calendar year, is more than
    364 days away. An anchor that is already aligned is its own nominal
    date, so rebuilding a provider from ``fiscal_year_start`` alone keeps
    its length only when ``weeks`` (or ``nominal_start``) is passed along.

    Attributes:
        fiscal_year_start: First day of the fiscal year (aligned to first_weekday)
        first_weekday: Weekday on which fiscal weeks start (default Sunday)
        weeks: 52 or 53; derived from nominal_start when None
        nominal_start: Date the year length and successor years are derived from

    Example:
        >>> provider = Fiscal544QuarterProvider(date(2023, 1, 29))
        >>> provider.get_quarter(date(2023, 5, 14))
        2
        >>> provider.get_quarter_start(date(2023, 5, 14))
        datetime.date(2023, 4, 30)
        >>> Fiscal544QuarterProvider(date(2025, 1, 26), weeks=53).fiscal_year_end
        datetime.date(2026, 1, 31)
    """

    fiscal_year_start: date
    first_weekday: Day = SUNDAY
    weeks: int | None = None
    nominal_start: date | None = None

    def __post_init__(self) -> None:
        """Validate inputs, align the anchor and settle the year length.

        Raises:
            TypeError: If a date argument is not a date, or first_weekday or
                weeks is not an int
            CalendarRangeError: If first_weekday is outside 0-6, weeks is not
                52 or 53, or alignment leaves the supported date range
        """
        start = _plain_date(require_date(self.fiscal_year_start, "fiscal_year_start"))
        nominal = start
        if self.nominal_start is not None:
            nominal = _plain_date(require_date(self.nominal_start, "nominal_start"))
        first_weekday = require_weekday(self.first_weekday, "first_weekday")
        aligned = first_day_of_week(start, first_weekday)
        if aligned != start:
            logger.debug(
                "Fiscal year start %s aligned back to %s %s",
                start.isoformat(),
                first_weekday.name,
                aligned.isoformat(),
            )

        if self.weeks is None:
            weeks = _derived_weeks(aligned, nominal, first_weekday)
        else:
            weeks = require_int(self.weeks, "weeks")
            if weeks not in (WEEKS_PER_FISCAL_YEAR, WEEKS_PER_FISCAL_YEAR + 1):
                raise CalendarRangeError(ErrorTemplate.fiscal_weeks_out_of_range(weeks))

        object.__setattr__(self, "fiscal_year_start", aligned)
        object.__setattr__(self, "first_weekday", first_weekday)
        object.__setattr__(self, "weeks", weeks)
        object.__setattr__(self, "nominal_start", nominal)

    @property
    def fiscal_year_end(self) -> date:
        """Last day of the fiscal year (last day of week 52 or 53)."""
        return date_from_day_number(self._start + self._weeks * DAYS_PER_WEEK - 1)

    @property
    def _start(self) -> int:
        return day_number_of(self.fiscal_year_start)

    @property
    def _weeks(self) -> int:
        return self.weeks or WEEKS_PER_FISCAL_YEAR

    def weeks_in_fiscal_year(self) -> int:
        """Return 52 or 53."""
        return self._weeks

    def is_53_week_fiscal_year(self) -> bool:
        """Return True if the fiscal year contains a 53rd week."""
        return self._weeks > WEEKS_PER_FISCAL_YEAR

    def _week_index(self, value: date) -> int:
        """Zero-based fiscal week of value.

        Raises:
            CalendarRangeError: If value lies outside this fiscal year
        """
        day_number = day_number_of(value)
        aligned = day_number - (day_number - self.first_weekday) % DAYS_PER_WEEK
        total_weeks = (aligned - self._start) // DAYS_PER_WEEK
        if total_weeks < 0 or total_weeks >= self._weeks:
            raise CalendarRangeError(
                ErrorTemplate.date_outside_fiscal_year(
                    from_day_number(day_number).to_date().isoformat(),
                    self.fiscal_year_start.isoformat(),
                    self.fiscal_year_end.isoformat(),
                )
            )
        return total_weeks

    def get_quarter(self, value: date) -> int:
        """Return the fiscal quarter (1-4) of value; week 53 belongs to Q4."""
        return min(self._week_index(value) // WEEKS_PER_QUARTER + 1, QUARTERS_PER_YEAR)

    def get_quarter_start(self, value: date) -> date:
        """Return the first day of the fiscal quarter containing value."""
        quarter = self.get_quarter(value)
        return self._quarter_start(quarter)

    def get_quarter_end(self, value: date) -> date:
        """Return the last day of the fiscal quarter containing value.

        Quarters are 13 weeks; in a 53-week year Q4 runs 14 weeks.
        """
        quarter = self.get_quarter(value)
        if quarter == QUARTERS_PER_YEAR:
            return self.fiscal_year_end
        return date_from_day_number(
            self._start + quarter * WEEKS_PER_QUARTER * DAYS_PER_WEEK - 1
        )

    def get_start_month_from_quarter(self, quarter: int) -> int:
        """Return the calendar month in which fiscal quarter starts.

        This projects a week-based boundary onto a calendar month label; the
        quarter does not start on the 1st of that month.
        """
        return self._quarter_start(require_quarter(quarter)).month

    def get_fiscal_week(self, value: date) -> int:
        """Return the fiscal week (1-52, or 1-53 in a long year)."""
        return self._week_index(value) + 1

    def get_fiscal_month(self, value: date) -> int:
        """Return the fiscal month (1-12) under the 5-4-4 pattern.

        Week 53 is part of the twelfth month.
        """
        week_index = self._week_index(value)
        quarter = min(week_index // WEEKS_PER_QUARTER, QUARTERS_PER_YEAR - 1)
        week_in_quarter = week_index - quarter * WEEKS_PER_QUARTER
        month_in_quarter = 0
        boundary = FISCAL_MONTH_WEEKS[0]
        while month_in_quarter < len(FISCAL_MONTH_WEEKS) - 1 and week_in_quarter >= boundary:
            month_in_quarter += 1
            boundary += FISCAL_MONTH_WEEKS[month_in_quarter]
        return quarter * len(FISCAL_MONTH_WEEKS) + month_in_quarter + 1

    def next_fiscal_year(self) -> Fiscal544QuarterProvider:
        """Return the provider for the following fiscal year.

        The successor starts the day after fiscal_year_end; its length is
        derived from nominal_start plus one calendar year.

        Raises:
            CalendarRangeError: If the following year is beyond 9999
        """
        nominal = self.nominal_start or self.fiscal_year_start
        if nominal.year >= MAX_YEAR:
            raise CalendarRangeError(
                ErrorTemplate.year_out_of_range(nominal.year + 1, argument="fiscal_year")
            )
        return Fiscal544QuarterProvider(
            date_from_day_number(day_number_of(self.fiscal_year_end) + 1),
            self.first_weekday,
            nominal_start=_same_day_next_year(nominal),
        )

    def _quarter_start(self, quarter: int) -> date:
        return date_from_day_number(
            self._start + (quarter - 1) * WEEKS_PER_QUARTER * DAYS_PER_WEEK
        )
