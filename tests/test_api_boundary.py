"""Public API boundary tests.

Verifies the exported surface and that every public entry point validates
argument types before doing any arithmetic.

Python 3.13+.
"""

from __future__ import annotations

import calendar
from datetime import date

import pytest

import periodengine
from periodengine import (
    CalendarRangeError,
    QuarterDefinition,
    first_date_of_iso_week,
    from_day_number,
    get_iso_week,
    is_weekend_date,
    nth_occurrence_in_month,
    quarter_start,
    resolve_quarter,
    to_day_number,
    week_of_month,
)


class TestExports:
    """The package namespace."""

    def test_all_names_resolve(self) -> None:
        """Every name in __all__ is importable from the package."""
        for name in periodengine.__all__:
            assert hasattr(periodengine, name), name

    def test_version(self) -> None:
        """__version__ is a non-empty string."""
        assert isinstance(periodengine.__version__, str)
        assert periodengine.__version__


class TestTypeValidation:
    """Wrong argument types raise TypeError, never CalendarRangeError."""

    @pytest.mark.parametrize(
        ("function", "args"),
        [
            (to_day_number, (2024.0, 1, 1)),
            (from_day_number, ("0",)),
            (from_day_number, (True,)),
            (quarter_start, (2024, "1", QuarterDefinition.CALENDAR_YEAR)),
            (first_date_of_iso_week, (None, 1)),
            (nth_occurrence_in_month, (2024, 1, calendar.MONDAY, 1.5)),
            (get_iso_week, ("2024-01-01",)),
            (resolve_quarter, (20240101, QuarterDefinition.CALENDAR_YEAR)),
            (is_weekend_date, (None,)),
            (week_of_month, (date(2024, 1, 1), "MONDAY")),
        ],
    )
    def test_type_errors(self, function: object, args: tuple[object, ...]) -> None:
        """Each call raises a plain TypeError."""
        with pytest.raises(TypeError) as exc_info:
            function(*args)  # type: ignore[operator]
        assert not isinstance(exc_info.value, CalendarRangeError)
