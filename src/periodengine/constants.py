"""Shared constants for periodengine.

This module provides centralized calendar limits and cycle lengths used
across the core and resolver modules. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Calendar limits: Supported year and day-number range
- Gregorian cycles: Day counts of the 400/100/4/1-year cycles
- Period lengths: Week, quarter and fiscal-year sizes
- Locale: Default locale and cache bounds for CLDR lookups

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Calendar limits
    "MIN_YEAR",
    "MAX_YEAR",
    "MIN_DAY_NUMBER",
    "MAX_DAY_NUMBER",
    # Gregorian cycles
    "DAYS_PER_YEAR",
    "DAYS_PER_4_YEARS",
    "DAYS_PER_100_YEARS",
    "DAYS_PER_400_YEARS",
    # Period lengths
    "DAYS_PER_WEEK",
    "MONTHS_PER_YEAR",
    "MONTHS_PER_QUARTER",
    "QUARTERS_PER_YEAR",
    "WEEKS_PER_QUARTER",
    "WEEKS_PER_FISCAL_YEAR",
    "DAYS_PER_FISCAL_YEAR",
    "MAX_ANCHOR_DAY",
    # Locale
    "DEFAULT_LOCALE",
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# CALENDAR LIMITS
# ============================================================================

# Same bounds as datetime.date; every valid day number maps to a date.
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# Day number 0 is 0001-01-01 (a Monday); MAX_DAY_NUMBER is 9999-12-31.
MIN_DAY_NUMBER: int = 0
MAX_DAY_NUMBER: int = 3_652_058

# ============================================================================
# GREGORIAN CYCLES
# ============================================================================

DAYS_PER_YEAR: int = 365
DAYS_PER_4_YEARS: int = DAYS_PER_YEAR * 4 + 1  # 1461
DAYS_PER_100_YEARS: int = DAYS_PER_4_YEARS * 25 - 1  # 36524
DAYS_PER_400_YEARS: int = DAYS_PER_100_YEARS * 4 + 1  # 146097

# ============================================================================
# PERIOD LENGTHS
# ============================================================================

DAYS_PER_WEEK: int = 7
MONTHS_PER_YEAR: int = 12
MONTHS_PER_QUARTER: int = 3
QUARTERS_PER_YEAR: int = 4

# 5-4-4 fiscal calendar: 13-week quarters, 52-week base year.
WEEKS_PER_QUARTER: int = 13
WEEKS_PER_FISCAL_YEAR: int = WEEKS_PER_QUARTER * QUARTERS_PER_YEAR
DAYS_PER_FISCAL_YEAR: int = WEEKS_PER_FISCAL_YEAR * DAYS_PER_WEEK  # 364

# Day-aligned quarter anchors stop at 28 so that every month has the anchor day.
MAX_ANCHOR_DAY: int = 28

# ============================================================================
# LOCALE
# ============================================================================

# Fallback locale for week conventions when a locale is unknown.
DEFAULT_LOCALE: str = "en_US"

# Maximum cached Babel Locale / WeekConvention lookups.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128
