"""Hypothesis property-based tests for the 5-4-4 fiscal provider.

Properties:
- The aligned start falls on first_weekday, at most 6 days before the nominal start
- The fiscal year is 364 or 371 days; next_fiscal_year() is contiguous
- Rebuilding from the aligned start and weeks covers the same year
- Every day of the fiscal year resolves to a consistent quarter, week and month
- Quarter boundaries are 13 weeks apart (14 for a 53-week Q4)
"""

from __future__ import annotations

import calendar
from datetime import date, timedelta

from hypothesis import assume, event, given
from hypothesis import strategies as st

from periodengine import Fiscal544QuarterProvider
from tests.strategies.calendar import fiscal_year_starts


class TestFiscalYearShape:
    """Shape of a single fiscal year."""

    @given(config=fiscal_year_starts())
    def test_alignment(self, config: tuple[date, calendar.Day]) -> None:
        """fiscal_year_start is the first_weekday on or before the nominal start."""
        nominal, first_weekday = config
        provider = Fiscal544QuarterProvider(nominal, first_weekday)
        assert provider.fiscal_year_start.weekday() == first_weekday
        assert 0 <= (nominal - provider.fiscal_year_start).days <= 6

    @given(config=fiscal_year_starts())
    def test_length_and_contiguity(self, config: tuple[date, calendar.Day]) -> None:
        """52 or 53 weeks; the next year starts the day after this one ends."""
        provider = Fiscal544QuarterProvider(*config)
        length = (provider.fiscal_year_end - provider.fiscal_year_start).days + 1
        assert length == provider.weeks_in_fiscal_year() * 7
        assert provider.weeks_in_fiscal_year() in (52, 53)
        following = provider.next_fiscal_year()
        assert following.fiscal_year_start == provider.fiscal_year_end + timedelta(days=1)
        event(f"weeks={provider.weeks_in_fiscal_year()}")

    @given(config=fiscal_year_starts(), offset=st.integers(min_value=0, max_value=370))
    def test_day_resolution_consistent(
        self, config: tuple[date, calendar.Day], offset: int
    ) -> None:
        """Quarter, week and month of any day in the year agree with each other."""
        provider = Fiscal544QuarterProvider(*config)
        value = provider.fiscal_year_start + timedelta(days=offset)
        assume(value <= provider.fiscal_year_end)

        quarter = provider.get_quarter(value)
        week = provider.get_fiscal_week(value)
        month = provider.get_fiscal_month(value)
        assert week == offset // 7 + 1
        assert quarter == min((week - 1) // 13 + 1, 4)
        assert (month - 1) // 3 + 1 == quarter
        assert provider.get_quarter_start(value) <= value <= provider.get_quarter_end(value)
        event(f"quarter={quarter}")

    @given(config=fiscal_year_starts())
    def test_quarter_lengths(self, config: tuple[date, calendar.Day]) -> None:
        """Q1-Q3 are 91 days; Q4 is 91 or 98 days."""
        provider = Fiscal544QuarterProvider(*config)
        starts = [
            provider.fiscal_year_start + timedelta(weeks=13 * index) for index in range(4)
        ]
        lengths = [
            (provider.get_quarter_end(start) - provider.get_quarter_start(start)).days + 1
            for start in starts
        ]
        assert lengths[:3] == [91, 91, 91]
        assert lengths[3] == 91 + 7 * (provider.weeks_in_fiscal_year() - 52)

    @given(config=fiscal_year_starts(), offset=st.integers(min_value=0, max_value=370))
    def test_rebuild_from_aligned_start(
        self, config: tuple[date, calendar.Day], offset: int
    ) -> None:
        """An aligned anchor plus an explicit length reproduces the fiscal year."""
        provider = Fiscal544QuarterProvider(*config)
        rebuilt = Fiscal544QuarterProvider(
            provider.fiscal_year_start, provider.first_weekday, provider.weeks
        )
        assert rebuilt.fiscal_year_start == provider.fiscal_year_start
        assert rebuilt.fiscal_year_end == provider.fiscal_year_end
        value = provider.fiscal_year_start + timedelta(days=offset)
        assume(value <= provider.fiscal_year_end)
        assert rebuilt.get_quarter(value) == provider.get_quarter(value)
        assert rebuilt.get_fiscal_month(value) == provider.get_fiscal_month(value)
        event(f"weeks={provider.weeks_in_fiscal_year()}")
