"""Weekend classification and working-day stepping.

Python 3.13+.
"""

from __future__ import annotations

from calendar import FRIDAY, SATURDAY, SUNDAY, THURSDAY, Day
from collections.abc import Callable
from datetime import date

from periodengine.constants import DAYS_PER_WEEK
from periodengine.core.daynumber import DateT, day_number_of, shift_days
from periodengine.core.validation import require_weekday
from periodengine.diagnostics import CalendarRangeError, ErrorTemplate, MissingProviderError
from periodengine.enums import CalendarWeekendDefinition
from periodengine.providers import WeekendProvider

__all__ = [
    "WEEKEND_DAYS",
    "is_weekend",
    "is_weekend_date",
    "next_weekday",
    "previous_weekday",
]

WEEKEND_DAYS: dict[CalendarWeekendDefinition, frozenset[Day]] = {
    CalendarWeekendDefinition.SATURDAY_SUNDAY: frozenset({SATURDAY, SUNDAY}),
    CalendarWeekendDefinition.FRIDAY_SATURDAY: frozenset({FRIDAY, SATURDAY}),
    CalendarWeekendDefinition.THURSDAY_FRIDAY: frozenset({THURSDAY, FRIDAY}),
    CalendarWeekendDefinition.SUNDAY_ONLY: frozenset({SUNDAY}),
    CalendarWeekendDefinition.FRIDAY_ONLY: frozenset({FRIDAY}),
}


def _weekend_predicate(
    definition: CalendarWeekendDefinition,
    provider: WeekendProvider | None,
    function_name: str,
) -> Callable[[Day], bool]:
    """Resolve definition (and provider) to a weekday predicate."""
    if not isinstance(definition, CalendarWeekendDefinition):
        msg = f"definition must be CalendarWeekendDefinition, got {type(definition).__name__}"
        raise TypeError(msg)
    if definition is not CalendarWeekendDefinition.CUSTOM:
        return WEEKEND_DAYS[definition].__contains__
    if provider is None:
        raise MissingProviderError(ErrorTemplate.provider_missing(function_name))
    if not isinstance(provider, WeekendProvider):
        msg = f"provider must implement WeekendProvider, got {type(provider).__name__}"
        raise TypeError(msg)
    return lambda day: bool(provider.is_weekend(day))


def is_weekend(
    weekday: int,
    definition: CalendarWeekendDefinition = CalendarWeekendDefinition.SATURDAY_SUNDAY,
    provider: WeekendProvider | None = None,
) -> bool:
    """Return True if weekday is a weekend day under definition.

    Args:
        weekday: calendar.Day or 0-6 (Monday=0)
        definition: Weekend definition (default Saturday/Sunday)
        provider: Required when definition is CUSTOM; ignored otherwise

    Raises:
        MissingProviderError: If definition is CUSTOM and provider is None
        TypeError: If provider does not implement WeekendProvider
    """
    day = require_weekday(weekday)
    return _weekend_predicate(definition, provider, "is_weekend")(day)


def is_weekend_date(
    value: date,
    definition: CalendarWeekendDefinition = CalendarWeekendDefinition.SATURDAY_SUNDAY,
    provider: WeekendProvider | None = None,
) -> bool:
    """Return True if value falls on a weekend day under definition."""
    day = Day(day_number_of(value) % DAYS_PER_WEEK)
    return _weekend_predicate(definition, provider, "is_weekend_date")(day)


def _step_to_weekday(
    value: DateT,
    step: int,
    definition: CalendarWeekendDefinition,
    provider: WeekendProvider | None,
    function_name: str,
) -> DateT:
    is_weekend_day = _weekend_predicate(definition, provider, function_name)
    start = day_number_of(value)
    for offset in range(1, DAYS_PER_WEEK + 1):
        if not is_weekend_day(Day((start + step * offset) % DAYS_PER_WEEK)):
            return shift_days(value, step * offset)
    raise CalendarRangeError(ErrorTemplate.no_working_days(str(definition)))


def next_weekday(
    value: DateT,
    definition: CalendarWeekendDefinition = CalendarWeekendDefinition.SATURDAY_SUNDAY,
    provider: WeekendProvider | None = None,
) -> DateT:
    """Return the first non-weekend day strictly after value.

    Steps one day at a time, at most seven times.

    Raises:
        MissingProviderError: If definition is CUSTOM and provider is None
        CalendarRangeError: If every weekday is a weekend, or the result
            leaves the supported range
    """
    return _step_to_weekday(value, 1, definition, provider, "next_weekday")


def previous_weekday(
    value: DateT,
    definition: CalendarWeekendDefinition = CalendarWeekendDefinition.SATURDAY_SUNDAY,
    provider: WeekendProvider | None = None,
) -> DateT:
    """Return the last non-weekend day strictly before value."""
    return _step_to_weekday(value, -1, definition, provider, "previous_weekday")
