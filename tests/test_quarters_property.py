"""Hypothesis property-based tests for quarter resolution.

Properties:
- The resolved quarter contains the date
- The four quarters of a fiscal year tile it with no gaps or overlaps
- quarter_start / quarter_end / quarter_of agree with resolve_quarter
- Calendar-year quarters agree with the (month - 1) // 3 + 1 formula
"""

from __future__ import annotations

from datetime import date, timedelta

import pytest
from hypothesis import event, given

from periodengine import (
    ProviderRequiredError,
    QuarterAnchor,
    QuarterDefinition,
    quarter_end,
    quarter_of,
    quarter_start,
    quarters_of_year,
    resolve_quarter,
    start_month_of_quarter,
)
from tests.strategies.calendar import (
    builtin_definitions,
    date_by_boundary,
    definition_or_anchor,
    interior_dates,
    interior_years,
    quarters,
)


class TestQuarterProperties:
    """Containment, tiling and agreement properties."""

    @given(d=date_by_boundary(), definition=definition_or_anchor())
    def test_quarter_contains_date(
        self, d: date, definition: QuarterDefinition | QuarterAnchor
    ) -> None:
        """resolve_quarter(d) contains d and lasts 89-92 days."""
        result = resolve_quarter(d, definition)
        assert d in result
        assert 89 <= result.days <= 92
        event(f"quarter={result.quarter}")

    @given(year=interior_years, definition=definition_or_anchor())
    def test_quarters_tile_the_year(
        self, year: int, definition: QuarterDefinition | QuarterAnchor
    ) -> None:
        """Each quarter starts the day after the previous one ends."""
        result = quarters_of_year(year, definition)
        assert len(result) == 4
        for previous, current in zip(result, result[1:], strict=False):
            assert current.start == previous.end + timedelta(days=1)
        total = sum(q.days for q in result)
        assert total in (365, 366)
        event(f"fiscal_year_days={total}")

    @given(d=interior_dates, definition=definition_or_anchor())
    def test_boundaries_agree(self, d: date, definition: QuarterDefinition | QuarterAnchor) -> None:
        """quarter_start, quarter_end and quarter_of match resolve_quarter."""
        result = resolve_quarter(d, definition)
        assert quarter_of(d, definition) == result.quarter
        assert quarter_start(result.year, result.quarter, definition) == result.start
        assert quarter_end(result.year, result.quarter, definition) == result.end

    @given(d=interior_dates)
    def test_calendar_year_formula(self, d: date) -> None:
        """CALENDAR_YEAR quarters are (month - 1) // 3 + 1 of the same year."""
        result = resolve_quarter(d, QuarterDefinition.CALENDAR_YEAR)
        assert result.year == d.year
        assert result.quarter == (d.month - 1) // 3 + 1

    @given(quarter=quarters, definition=builtin_definitions)
    def test_start_month_matches_boundary(
        self, quarter: int, definition: QuarterDefinition
    ) -> None:
        """start_month_of_quarter is the month of quarter_start, on the 1st."""
        start = quarter_start(2024, quarter, definition)
        assert start.day == 1
        assert start_month_of_quarter(quarter, definition) == start.month

    @given(d=interior_dates)
    def test_custom_always_rejected(self, d: date) -> None:
        """CUSTOM never resolves without a provider."""
        with pytest.raises(ProviderRequiredError):
            resolve_quarter(d, QuarterDefinition.CUSTOM)

    @given(d=interior_dates, definition=builtin_definitions)
    def test_fiscal_year_starts_on_or_before(self, d: date, definition: QuarterDefinition) -> None:
        """The fiscal year label is d's year or the year before."""
        result = resolve_quarter(d, definition)
        assert result.year in (d.year, d.year - 1)
        event(f"same_year={result.year == d.year}")
        if definition is QuarterDefinition.CALENDAR_YEAR:
            assert result.year == d.year
