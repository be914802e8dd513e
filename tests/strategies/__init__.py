"""Hypothesis strategies for periodengine property-based testing.

Strategies are organized by domain:

- calendar: dates, weekdays, quarter definitions and fiscal configurations

Usage:
    from tests.strategies import any_dates, weekdays
    from tests.strategies.calendar import fiscal_year_starts

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - date_by_boundary, definition_or_anchor, fiscal_year_starts
"""

from .calendar import (
    any_dates,
    builtin_definitions,
    date_by_boundary,
    definition_or_anchor,
    fiscal_year_starts,
    interior_dates,
    interior_years,
    months,
    quarter_anchors,
    quarters,
    reasonable_dates,
    weekdays,
    years,
)

__all__ = [
    "any_dates",
    "builtin_definitions",
    "date_by_boundary",
    "definition_or_anchor",
    "fiscal_year_starts",
    "interior_dates",
    "interior_years",
    "months",
    "quarter_anchors",
    "quarters",
    "reasonable_dates",
    "weekdays",
    "years",
]
