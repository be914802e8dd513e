"""Provider protocols: the extension points for custom period rules.

A QuarterProvider replaces the built-in quarter arithmetic wherever
QuarterDefinition.CUSTOM would otherwise be needed; a WeekendProvider
replaces the built-in weekend sets for CalendarWeekendDefinition.CUSTOM.

Both are structural (typing.Protocol): any object with the right methods
qualifies, no inheritance required.

Python 3.13+.
"""

from __future__ import annotations

from calendar import Day
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from typing import Protocol, runtime_checkable

from periodengine.core.validation import require_weekday

__all__ = [
    "QuarterProvider",
    "WeekendDays",
    "WeekendProvider",
]


# pylint: disable=unnecessary-ellipsis
# Reason: Ellipsis (...) is the standard Protocol method body per PEP 544
@runtime_checkable
class QuarterProvider(Protocol):
    """Pluggable quarter boundary computation.

    Implementations must return quarters in 1-4 and months in 1-12; the
    resolver functions in periodengine.quarters verify both.
    """

    def get_quarter(self, value: date) -> int:
        """Return the quarter index (1-4) containing value."""
        ...

    def get_quarter_start(self, value: date) -> date:
        """Return the first day of the quarter containing value."""
        ...

    def get_quarter_end(self, value: date) -> date:
        """Return the last day of the quarter containing value."""
        ...

    def get_start_month_from_quarter(self, quarter: int) -> int:
        """Return the calendar month (1-12) in which quarter starts."""
        ...


@runtime_checkable
class WeekendProvider(Protocol):
    """Pluggable weekend classification."""

    def is_weekend(self, weekday: Day) -> bool:
        """Return True if weekday is a weekend day."""
        ...
# pylint: enable=unnecessary-ellipsis


@dataclass(frozen=True, slots=True)
class WeekendDays:
    """WeekendProvider backed by an explicit set of weekdays.

    Attributes:
        days: Weekdays that count as weekend

    Example:
        >>> provider = WeekendDays.of(calendar.FRIDAY)
        >>> provider.is_weekend(calendar.FRIDAY)
        True
    """

    days: frozenset[Day]

    def __post_init__(self) -> None:
        """Normalize days to a frozenset of calendar.Day.

        Raises:
            TypeError: If days is not iterable or contains non-int values
            CalendarRangeError: If a weekday is outside 0-6
        """
        if isinstance(self.days, (str, bytes)) or not isinstance(self.days, Iterable):
            msg = f"days must be an iterable of weekdays, got {type(self.days).__name__}"
            raise TypeError(msg)
        normalized = frozenset(require_weekday(day, "days") for day in self.days)
        object.__setattr__(self, "days", normalized)

    @classmethod
    def of(cls, *days: int) -> WeekendDays:
        """Build from weekday arguments."""
        return cls(frozenset(require_weekday(day, "days") for day in days))

    def is_weekend(self, weekday: Day) -> bool:
        """Return True if weekday is in the configured set."""
        return require_weekday(weekday) in self.days
