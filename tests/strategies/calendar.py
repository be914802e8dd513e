"""Hypothesis strategies for calendar-period testing.

Provides strategies for generating valid dates, weekdays, quarter
definitions and fiscal provider configurations for property-based testing.

Usage:
    from hypothesis import given
    from tests.strategies.calendar import any_dates, weekdays

    @given(d=any_dates, weekday=weekdays)
    def test_navigation_property(d, weekday):
        ...
"""

from __future__ import annotations

import calendar
from datetime import date
from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from periodengine import QuarterAnchor, QuarterDefinition

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy

# ============================================================================
# DATE STRATEGIES
# ============================================================================

# Every representable date; use for properties that must hold at the range edges.
any_dates: SearchStrategy[date] = st.dates(
    min_value=date(1, 1, 1),
    max_value=date(9999, 12, 31),
)

# Dates with at least a year of headroom on both sides, so that navigation
# and quarter lookups never reach the range limits.
interior_dates: SearchStrategy[date] = st.dates(
    min_value=date(2, 1, 1),
    max_value=date(9998, 12, 31),
)

# Dates within a reasonable range for business applications.
reasonable_dates: SearchStrategy[date] = st.dates(
    min_value=date(1900, 1, 1),
    max_value=date(2100, 12, 31),
)

years: SearchStrategy[int] = st.integers(min_value=1, max_value=9999)
interior_years: SearchStrategy[int] = st.integers(min_value=2, max_value=9998)
months: SearchStrategy[int] = st.integers(min_value=1, max_value=12)
quarters: SearchStrategy[int] = st.integers(min_value=1, max_value=4)

# ============================================================================
# WEEKDAY STRATEGIES
# ============================================================================

weekdays: SearchStrategy[calendar.Day] = st.sampled_from(list(calendar.Day))


@composite
def date_by_boundary(draw: st.DrawFn) -> date:
    """Generate date with event emission for boundary category.

    Events emitted:
    - date_boundary={month_end|year_start|year_end|leap_day|normal}
    """
    boundary = draw(
        st.sampled_from([
            "month_end",
            "year_start",
            "year_end",
            "leap_day",
            "normal",
        ])
    )

    match boundary:
        case "month_end":
            year = draw(interior_years)
            month = draw(months)
            d = date(year, month, calendar.monthrange(year, month)[1])
        case "year_start":
            d = date(draw(interior_years), 1, draw(st.integers(min_value=1, max_value=7)))
        case "year_end":
            d = date(draw(interior_years), 12, draw(st.integers(min_value=25, max_value=31)))
        case "leap_day":
            year = draw(interior_years.filter(calendar.isleap))
            d = date(year, 2, 29)
        case _:  # normal
            d = draw(interior_dates)

    event(f"date_boundary={boundary}")
    return d


# ============================================================================
# QUARTER DEFINITION STRATEGIES
# ============================================================================

builtin_definitions: SearchStrategy[QuarterDefinition] = st.sampled_from(
    [d for d in QuarterDefinition if d is not QuarterDefinition.CUSTOM]
)

quarter_anchors: SearchStrategy[QuarterAnchor] = st.builds(
    QuarterAnchor,
    month=months,
    day=st.integers(min_value=1, max_value=28),
)


@composite
def definition_or_anchor(draw: st.DrawFn) -> QuarterDefinition | QuarterAnchor:
    """Generate a built-in definition or a day-aligned anchor.

    Events emitted:
    - quarter_definition={builtin|anchor_first|anchor_mid_month}
    """
    kind = draw(st.sampled_from(["builtin", "anchor_first", "anchor_mid_month"]))
    match kind:
        case "builtin":
            result: QuarterDefinition | QuarterAnchor = draw(builtin_definitions)
        case "anchor_first":
            result = QuarterAnchor(draw(months))
        case _:
            result = QuarterAnchor(draw(months), draw(st.integers(min_value=2, max_value=28)))
    event(f"quarter_definition={kind}")
    return result


# ============================================================================
# FISCAL 5-4-4 STRATEGIES
# ============================================================================


@composite
def fiscal_year_starts(draw: st.DrawFn) -> tuple[date, calendar.Day]:
    """Generate (nominal fiscal year start, first weekday).

    Nominal starts cluster around the retail convention (late January /
    early February) but cover the whole year.

    Events emitted:
    - fiscal_start={retail|any}
    """
    kind = draw(st.sampled_from(["retail", "any"]))
    year = draw(st.integers(min_value=1900, max_value=2100))
    if kind == "retail":
        start = date(year, 1, 25) if draw(st.booleans()) else date(year, 2, 1)
    else:
        start = draw(st.dates(min_value=date(year, 1, 1), max_value=date(year, 12, 31)))
    event(f"fiscal_start={kind}")
    return start, draw(weekdays)
