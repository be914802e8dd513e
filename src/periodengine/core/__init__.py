"""Core utilities shared by every resolver.

This package provides the foundation the resolvers depend on:

    core <- navigation <- quarters / weeks / weekend / fiscal544

Exports:
    CalendarDate: Validated (year, month, day) triple
    to_day_number / from_day_number: Day-number conversion
    is_leap_year / days_in_month / days_in_year: Gregorian tables

Python 3.13+.
"""

from .daynumber import (
    CalendarDate,
    date_from_day_number,
    day_number_of,
    days_in_month,
    days_in_year,
    from_day_number,
    is_leap_year,
    shift_days,
    to_day_number,
    weekday_of,
)

__all__ = [
    "CalendarDate",
    "date_from_day_number",
    "day_number_of",
    "days_in_month",
    "days_in_year",
    "from_day_number",
    "is_leap_year",
    "shift_days",
    "to_day_number",
    "weekday_of",
]
