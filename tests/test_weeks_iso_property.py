"""Hypothesis property-based tests for ISO and culture weeks.

Properties:
- get_iso_week agrees with date.isocalendar()
- first/last_date_of_iso_week bracket the date they were derived from
- Week counts agree with get_iso_weeks_in_year
- week_of_year stays within 1-54 and never decreases inside a year
- first_date_of_week inverts week_of_year (whole-year sweep marked fuzz)
- week_of_month stays within 1-6
"""

from __future__ import annotations

import calendar
from datetime import date, timedelta

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from periodengine import (
    CalendarRangeError,
    WeekConvention,
    WeekRule,
    first_date_of_iso_week,
    first_date_of_week,
    get_iso_week,
    get_iso_weeks_in_year,
    last_date_of_iso_week,
    week_of_month,
    week_of_year,
)
from tests.strategies.calendar import date_by_boundary, interior_dates, interior_years, weekdays

conventions = st.builds(WeekConvention, weekdays, st.sampled_from(list(WeekRule)))


class TestIsoWeekProperties:
    """ISO 8601 week properties."""

    @given(d=date_by_boundary())
    def test_matches_isocalendar(self, d: date) -> None:
        """get_iso_week agrees with the standard library."""
        iso = d.isocalendar()
        result = get_iso_week(d)
        assert (result.year, result.week) == (iso.year, iso.week)
        event(f"iso_year_shift={result.year - d.year}")

    @given(d=interior_dates)
    def test_week_brackets_date(self, d: date) -> None:
        """The date lies between the Monday and Sunday of its ISO week."""
        iso_year, iso_week = get_iso_week(d)
        monday = first_date_of_iso_week(iso_year, iso_week)
        sunday = last_date_of_iso_week(iso_year, iso_week)
        assert monday.weekday() == calendar.MONDAY
        assert (sunday - monday).days == 6
        assert monday <= d <= sunday

    @given(year=interior_years)
    def test_weeks_in_year_matches_december_28(self, year: int) -> None:
        """28 December always lies in the last ISO week of its year."""
        weeks = get_iso_weeks_in_year(year)
        assert get_iso_week(date(year, 12, 28)) == (year, weeks)
        event(f"weeks={weeks}")

    @given(year=interior_years)
    def test_consecutive_iso_years_contiguous(self, year: int) -> None:
        """Week 1 of year + 1 starts the day after the last week of year ends."""
        last_week = last_date_of_iso_week(year, get_iso_weeks_in_year(year))
        assert first_date_of_iso_week(year + 1, 1) == last_week + timedelta(days=1)


class TestCultureWeekProperties:
    """week_of_year / week_of_month properties."""

    @given(d=interior_dates, convention=conventions)
    def test_week_of_year_bounds(self, d: date, convention: WeekConvention) -> None:
        """Week numbers are 1-54."""
        week = week_of_year(d, convention)
        assert 1 <= week <= 54
        event(f"rule={convention.rule.name}")

    @given(d=interior_dates)
    def test_iso_convention_matches_iso_before_december(self, d: date) -> None:
        """Outside late December the ISO convention equals the ISO week."""
        if d.month == 12 and d.day >= 29:
            event("late_december")
            return
        assert week_of_year(d) == get_iso_week(d).week

    @given(d=interior_dates, convention=conventions)
    def test_week_increments_on_first_weekday(self, d: date, convention: WeekConvention) -> None:
        """Within a year, the week number only changes on first_weekday, by one."""
        following = d + timedelta(days=1)
        if following.year != d.year:
            return
        before = week_of_year(d, convention)
        after = week_of_year(following, convention)
        if following.weekday() == convention.first_weekday:
            assert after in (before + 1, 1)
        else:
            assert after == before

    @given(d=interior_dates, first_weekday=weekdays)
    def test_week_of_month_bounds(self, d: date, first_weekday: calendar.Day) -> None:
        """Weeks of the month are 1-6; the 1st is always in week 1."""
        assert 1 <= week_of_month(d, first_weekday) <= 6
        assert week_of_month(d.replace(day=1), first_weekday) == 1

    @given(d=interior_dates, convention=conventions)
    def test_first_date_of_week_contains_date(self, d: date, convention: WeekConvention) -> None:
        """The week start of a date's own week number brackets the date."""
        if d < date(d.year, 1, 8):
            # Early January can still belong to the previous year's last week.
            event("early_january")
            return
        start = first_date_of_week(d.year, week_of_year(d, convention), convention)
        assert start.weekday() == convention.first_weekday
        assert start <= d < start + timedelta(days=7)
        event(f"rule={convention.rule.name}")

    @given(
        year=interior_years,
        week=st.integers(min_value=1, max_value=54),
        convention=conventions,
    )
    def test_first_date_of_week_round_trip(
        self, year: int, week: int, convention: WeekConvention
    ) -> None:
        """Accepted weeks map back to themselves through week_of_year."""
        try:
            start = first_date_of_week(year, week, convention)
        except CalendarRangeError:
            event("outcome=rejected")
            assert week >= 53
            return
        in_year = max(start, date(year, 1, 1))
        assert in_year.year == year
        assert week_of_year(in_year, convention) == week
        assert start.weekday() == convention.first_weekday
        event("outcome=accepted")


@pytest.mark.fuzz
class TestWeekYearSweep:
    """Every day of a year under a random convention."""

    @given(year=interior_years, convention=conventions)
    @settings(max_examples=200)
    def test_every_day_lies_in_its_week(self, year: int, convention: WeekConvention) -> None:
        """From 8 January on, each day falls inside the week first_date_of_week returns."""
        day = date(year, 1, 8)
        weeks_seen: set[int] = set()
        while day.year == year:
            week = week_of_year(day, convention)
            start = first_date_of_week(year, week, convention)
            assert start <= day < start + timedelta(days=7)
            weeks_seen.add(week)
            day += timedelta(days=1)
        assert weeks_seen == set(range(min(weeks_seen), max(weeks_seen) + 1))
        event(f"last_week={max(weeks_seen)}")
