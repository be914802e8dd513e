"""Quarter resolution for calendar and fiscal-year definitions.

A quarter definition reduces to an anchor (month, day): the first day of
the fiscal year. Quarters are the three-month spans starting at the anchor,
at anchor + 3 months, + 6 months and + 9 months, always on the anchor day.
Boundaries are computed directly from the anchor, never by iterating.

The quarter's ``year`` is the calendar year in which its fiscal year starts:
under FINANCIAL_JULY, 2024-07-01..2025-06-30 is fiscal year 2024, so
2025-02-10 resolves to (2024, Q3).

Built-in resolvers reject QuarterDefinition.CUSTOM with
ProviderRequiredError. Custom systems go through the explicit
``*_of_provider`` functions, which validate what the provider returns.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from periodengine.constants import (
    MAX_ANCHOR_DAY,
    MAX_DAY_NUMBER,
    MAX_YEAR,
    MIN_YEAR,
    MONTHS_PER_QUARTER,
    MONTHS_PER_YEAR,
    QUARTERS_PER_YEAR,
)
from periodengine.core.daynumber import date_from_day_number, day_number_of, to_day_number
from periodengine.core.validation import (
    require_date,
    require_int,
    require_month,
    require_quarter,
    require_year,
)
from periodengine.diagnostics import (
    CalendarRangeError,
    ErrorTemplate,
    MissingProviderError,
    ProviderRequiredError,
)
from periodengine.enums import QuarterDefinition
from periodengine.navigation import nth_occurrence_between
from periodengine.providers import QuarterProvider

__all__ = [
    "Quarter",
    "QuarterAnchor",
    "first_occurrence_in_quarter",
    "last_occurrence_in_quarter",
    "nth_occurrence_in_quarter",
    "quarter_anchor",
    "quarter_end",
    "quarter_end_of_provider",
    "quarter_of",
    "quarter_of_provider",
    "quarter_start",
    "quarter_start_of_provider",
    "quarters_of_year",
    "resolve_quarter",
    "start_month_of_provider",
    "start_month_of_quarter",
]


@dataclass(frozen=True, slots=True)
class QuarterAnchor:
    """First day of a fiscal year, as (month, day).

    Month-aligned definitions use day 1. Day-aligned definitions such as the
    UK personal tax year (6 April) use ``QuarterAnchor(4, 6)``; their quarter
    boundaries fall on the 6th of each quarter's start month.

    Attributes:
        month: Anchor month (1-12)
        day: Anchor day of month (1-28)
    """

    month: int
    day: int = 1

    def __post_init__(self) -> None:
        """Validate anchor fields.

        Raises:
            TypeError: If month or day is not an int
            CalendarRangeError: If month is outside 1-12 or day outside 1-28
        """
        require_month(self.month)
        day = require_int(self.day, "day")
        if not 1 <= day <= MAX_ANCHOR_DAY:
            raise CalendarRangeError(ErrorTemplate.anchor_day_out_of_range(day, MAX_ANCHOR_DAY))


_DEFINITION_ANCHORS: dict[QuarterDefinition, QuarterAnchor] = {
    QuarterDefinition.CALENDAR_YEAR: QuarterAnchor(1),
    QuarterDefinition.FINANCIAL_JULY: QuarterAnchor(7),
    QuarterDefinition.FINANCIAL_APRIL: QuarterAnchor(4),
    QuarterDefinition.FINANCIAL_OCTOBER: QuarterAnchor(10),
    QuarterDefinition.FINANCIAL_FEBRUARY: QuarterAnchor(2),
}


@dataclass(frozen=True, slots=True, order=True)
class Quarter:
    """One resolved quarter.

    Attributes:
        year: Calendar year in which the quarter's fiscal year starts
        quarter: Quarter index (1-4)
        start: First day of the quarter
        end: Last day of the quarter (inclusive)
    """

    year: int
    quarter: int
    start: date
    end: date

    def __post_init__(self) -> None:
        """Validate quarter index and boundary order.

        Raises:
            CalendarRangeError: If quarter is outside 1-4
            ValueError: If end precedes start
        """
        require_quarter(self.quarter)
        if self.end < self.start:
            msg = f"Quarter.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    @property
    def start_day_number(self) -> int:
        """Day number of the first day."""
        return day_number_of(self.start)

    @property
    def end_day_number(self) -> int:
        """Day number of the last day."""
        return day_number_of(self.end)

    @property
    def days(self) -> int:
        """Length of the quarter in days (89-92)."""
        return self.end_day_number - self.start_day_number + 1

    def __contains__(self, value: object) -> bool:
        """Return True if the date (or datetime) falls inside the quarter."""
        if not isinstance(value, date):
            return False
        return self.start_day_number <= day_number_of(value) <= self.end_day_number


def quarter_anchor(
    definition: QuarterDefinition | QuarterAnchor, function_name: str = "quarter_anchor"
) -> QuarterAnchor:
    """Return the anchor of a quarter definition.

    Args:
        definition: Built-in definition or an explicit QuarterAnchor
        function_name: Public function name reported in diagnostics

    Raises:
        ProviderRequiredError: If definition is QuarterDefinition.CUSTOM
        TypeError: If definition is neither a QuarterDefinition nor a QuarterAnchor
    """
    if isinstance(definition, QuarterAnchor):
        return definition
    if not isinstance(definition, QuarterDefinition):
        msg = (
            "definition must be QuarterDefinition or QuarterAnchor, "
            f"got {type(definition).__name__}"
        )
        raise TypeError(msg)
    match definition:
        case QuarterDefinition.CUSTOM:
            raise ProviderRequiredError(ErrorTemplate.provider_required(function_name))
        case _:
            return _DEFINITION_ANCHORS[definition]


def _start_of(year: int, quarter: int, anchor: QuarterAnchor) -> int:
    """Day number of the start of quarter in fiscal year.

    quarter may be 5, meaning the first quarter of the next fiscal year.
    The day after 9999-12-31 is returned as an exclusive bound.
    """
    offset = anchor.month - 1 + (quarter - 1) * MONTHS_PER_QUARTER
    start_year = year + offset // MONTHS_PER_YEAR
    start_month = offset % MONTHS_PER_YEAR + 1
    if start_year == MAX_YEAR + 1 and (start_month, anchor.day) == (1, 1):
        return MAX_DAY_NUMBER + 1
    return to_day_number(start_year, start_month, anchor.day)


def _quarter(year: int, quarter: int, anchor: QuarterAnchor) -> Quarter:
    start = _start_of(year, quarter, anchor)
    end = _start_of(year, quarter + 1, anchor) - 1
    return Quarter(year, quarter, date_from_day_number(start), date_from_day_number(end))


def _locate(value: date, anchor: QuarterAnchor) -> tuple[int, int]:
    """Return (fiscal year, quarter) of value under anchor."""
    quarter = (value.month - anchor.month + MONTHS_PER_YEAR) % MONTHS_PER_YEAR
    quarter = quarter // MONTHS_PER_QUARTER + 1
    # Days before the anchor day in a quarter's start month belong to the previous quarter.
    if (value.month - anchor.month) % MONTHS_PER_QUARTER == 0 and value.day < anchor.day:
        quarter = quarter - 1 or QUARTERS_PER_YEAR
    if (value.month, value.day) >= (anchor.month, anchor.day):
        return value.year, quarter
    return value.year - 1, quarter


def resolve_quarter(value: date, definition: QuarterDefinition | QuarterAnchor) -> Quarter:
    """Resolve the quarter containing value.

    Args:
        value: date or datetime (time of day is ignored)
        definition: Built-in definition or an explicit QuarterAnchor

    Returns:
        Quarter with fiscal year, index and inclusive boundaries

    Raises:
        ProviderRequiredError: If definition is QuarterDefinition.CUSTOM
        CalendarRangeError: If the quarter starts before 0001-01-01

    Example:
        >>> q = resolve_quarter(date(2025, 2, 10), QuarterDefinition.FINANCIAL_JULY)
        >>> (q.year, q.quarter, q.start, q.end)
        (2024, 3, datetime.date(2025, 1, 1), datetime.date(2025, 3, 31))
    """
    anchor = quarter_anchor(definition, "resolve_quarter")
    day_number_of(value)
    year, quarter = _locate(value, anchor)
    if year < MIN_YEAR:
        raise CalendarRangeError(ErrorTemplate.year_out_of_range(year, argument="fiscal_year"))
    return _quarter(year, quarter, anchor)


def quarter_of(value: date, definition: QuarterDefinition | QuarterAnchor) -> int:
    """Return only the quarter index (1-4) of value under definition."""
    anchor = quarter_anchor(definition, "quarter_of")
    day_number_of(value)
    return _locate(value, anchor)[1]


def quarter_start(year: int, quarter: int, definition: QuarterDefinition | QuarterAnchor) -> date:
    """Return the first day of quarter in fiscal year.

    Example:
        >>> quarter_start(2024, 3, QuarterDefinition.FINANCIAL_JULY)
        datetime.date(2025, 1, 1)
    """
    anchor = quarter_anchor(definition, "quarter_start")
    year = require_year(year)
    quarter = require_quarter(quarter)
    return date_from_day_number(_start_of(year, quarter, anchor))


def quarter_end(year: int, quarter: int, definition: QuarterDefinition | QuarterAnchor) -> date:
    """Return the last day of quarter in fiscal year (the next quarter's start minus one day)."""
    anchor = quarter_anchor(definition, "quarter_end")
    year = require_year(year)
    quarter = require_quarter(quarter)
    return date_from_day_number(_start_of(year, quarter + 1, anchor) - 1)


def start_month_of_quarter(quarter: int, definition: QuarterDefinition | QuarterAnchor) -> int:
    """Return the calendar month (1-12) in which quarter starts."""
    anchor = quarter_anchor(definition, "start_month_of_quarter")
    quarter = require_quarter(quarter)
    return (anchor.month - 1 + (quarter - 1) * MONTHS_PER_QUARTER) % MONTHS_PER_YEAR + 1


def quarters_of_year(
    year: int, definition: QuarterDefinition | QuarterAnchor
) -> tuple[Quarter, ...]:
    """Return the four quarters of fiscal year, in order."""
    anchor = quarter_anchor(definition, "quarters_of_year")
    year = require_year(year)
    return tuple(_quarter(year, quarter, anchor) for quarter in range(1, QUARTERS_PER_YEAR + 1))


def nth_occurrence_in_quarter(
    year: int,
    quarter: int,
    weekday: int,
    occurrence: int,
    definition: QuarterDefinition | QuarterAnchor = QuarterDefinition.CALENDAR_YEAR,
) -> date:
    """Return the Nth occurrence of weekday in a quarter (-1 = last).

    Raises:
        CalendarRangeError: If the quarter does not contain that occurrence
    """
    anchor = quarter_anchor(definition, "nth_occurrence_in_quarter")
    year = require_year(year)
    quarter = require_quarter(quarter)
    span = _quarter(year, quarter, anchor)
    return nth_occurrence_between(span.start, span.end, weekday, occurrence)


def first_occurrence_in_quarter(
    year: int,
    quarter: int,
    weekday: int,
    definition: QuarterDefinition | QuarterAnchor = QuarterDefinition.CALENDAR_YEAR,
) -> date:
    """Return the first occurrence of weekday in a quarter."""
    return nth_occurrence_in_quarter(year, quarter, weekday, 1, definition)


def last_occurrence_in_quarter(
    year: int,
    quarter: int,
    weekday: int,
    definition: QuarterDefinition | QuarterAnchor = QuarterDefinition.CALENDAR_YEAR,
) -> date:
    """Return the last occurrence of weekday in a quarter."""
    return nth_occurrence_in_quarter(year, quarter, weekday, -1, definition)


# ============================================================================
# PROVIDER RESOLUTION
# ============================================================================


def _require_provider(provider: QuarterProvider | None, function_name: str) -> QuarterProvider:
    if provider is None:
        raise MissingProviderError(ErrorTemplate.provider_missing(function_name))
    if not isinstance(provider, QuarterProvider):
        msg = f"provider must implement QuarterProvider, got {type(provider).__name__}"
        raise TypeError(msg)
    return provider


def _checked_int(method: str, result: object, minimum: int, maximum: int) -> int:
    if isinstance(result, bool) or not isinstance(result, int) or not minimum <= result <= maximum:
        raise CalendarRangeError(
            ErrorTemplate.provider_result_out_of_range(method, result, minimum, maximum)
        )
    return result


def _checked_date(method: str, result: object) -> date:
    if not isinstance(result, date):
        msg = f"Provider {method}() must return date, got {type(result).__name__}"
        raise TypeError(msg)
    return result


def quarter_of_provider(value: date, provider: QuarterProvider) -> int:
    """Return the quarter index of value as computed by provider.

    Raises:
        MissingProviderError: If provider is None
        CalendarRangeError: If the provider returns a quarter outside 1-4
    """
    provider = _require_provider(provider, "quarter_of_provider")
    value = require_date(value)
    return _checked_int("get_quarter", provider.get_quarter(value), 1, QUARTERS_PER_YEAR)


def quarter_start_of_provider(value: date, provider: QuarterProvider) -> date:
    """Return the start of the quarter containing value as computed by provider."""
    provider = _require_provider(provider, "quarter_start_of_provider")
    value = require_date(value)
    return _checked_date("get_quarter_start", provider.get_quarter_start(value))


def quarter_end_of_provider(value: date, provider: QuarterProvider) -> date:
    """Return the end of the quarter containing value as computed by provider."""
    provider = _require_provider(provider, "quarter_end_of_provider")
    value = require_date(value)
    return _checked_date("get_quarter_end", provider.get_quarter_end(value))


def start_month_of_provider(quarter: int, provider: QuarterProvider) -> int:
    """Return the start month of quarter as computed by provider.

    Raises:
        MissingProviderError: If provider is None
        CalendarRangeError: If quarter is outside 1-4 or the provider
            returns a month outside 1-12
    """
    provider = _require_provider(provider, "start_month_of_provider")
    quarter = require_quarter(quarter)
    return _checked_int(
        "get_start_month_from_quarter",
        provider.get_start_month_from_quarter(quarter),
        1,
        MONTHS_PER_YEAR,
    )
