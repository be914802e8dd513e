"""Locale utilities: CLDR week conventions via Babel.

The week resolvers never read ambient locale state; callers obtain a
WeekConvention here and pass it explicitly. Locale codes are normalized
from BCP-47 (en-US) to POSIX (en_US) at this boundary.

Requires the optional Babel dependency: ``pip install periodengine[babel]``.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from calendar import Day
from typing import TYPE_CHECKING

from periodengine.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE
from periodengine.core.babel_compat import (
    get_locale_class,
    get_unknown_locale_error,
    require_babel,
)
from periodengine.diagnostics import CalendarLocaleError, ErrorTemplate
from periodengine.enums import WeekRule
from periodengine.weeks import WeekConvention

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_week_convention",
    "get_week_convention_or_raise",
    "normalize_locale",
    "week_convention_from_babel",
]

logger = logging.getLogger(__name__)

_RULES_BY_MIN_DAYS: dict[int, WeekRule] = {rule.value: rule for rule in WeekRule}


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    if not isinstance(locale_code, str):
        msg = f"locale_code must be str, got {type(locale_code).__name__}"
        raise TypeError(msg)
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    locale_class = get_locale_class()
    return locale_class.parse(normalize_locale(locale_code))


def week_convention_from_babel(babel_locale: Locale) -> WeekConvention:
    """Build a WeekConvention from a Babel Locale's CLDR week data.

    CLDR publishes the first weekday (Monday=0, matching calendar.Day) and
    the minimum number of days in week 1. Minimum-day values without a
    WeekRule counterpart fall back to the ISO rule with a warning.
    """
    min_days = babel_locale.min_week_days
    rule = _RULES_BY_MIN_DAYS.get(min_days)
    if rule is None:
        logger.warning(
            "Locale '%s' has min_week_days=%s; using %s",
            babel_locale,
            min_days,
            WeekRule.FIRST_FOUR_DAY_WEEK.name,
        )
        rule = WeekRule.FIRST_FOUR_DAY_WEEK
    return WeekConvention(Day(babel_locale.first_week_day), rule)


def get_week_convention(locale_code: str) -> WeekConvention:
    """Return the week convention of a locale, falling back to en_US.

    For unknown or invalid locales, logs a warning and uses the default
    locale. Use get_week_convention_or_raise() for strict validation.

    Args:
        locale_code: BCP-47 or POSIX locale code (e.g. 'de-DE', 'en_US')

    Raises:
        BabelImportError: If Babel is not installed

    Example:
        >>> get_week_convention("de-DE")
        WeekConvention(first_weekday=<Day.MONDAY: 0>, rule=<WeekRule.FIRST_FOUR_DAY_WEEK: 4>)
    """
    require_babel("get_week_convention")
    unknown_locale_error = get_unknown_locale_error()
    try:
        babel_locale = get_babel_locale(locale_code)
    except unknown_locale_error as e:
        logger.warning(
            "Unknown locale '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE
        )
        babel_locale = get_babel_locale(DEFAULT_LOCALE)
    except ValueError as e:
        logger.warning(
            "Invalid locale format '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE
        )
        babel_locale = get_babel_locale(DEFAULT_LOCALE)
    return week_convention_from_babel(babel_locale)


def get_week_convention_or_raise(locale_code: str) -> WeekConvention:
    """Return the week convention of a locale or raise.

    Raises:
        BabelImportError: If Babel is not installed
        CalendarLocaleError: If locale code is invalid or unknown
    """
    require_babel("get_week_convention_or_raise")
    unknown_locale_error = get_unknown_locale_error()
    try:
        babel_locale = get_babel_locale(locale_code)
    except (unknown_locale_error, ValueError) as e:
        raise CalendarLocaleError(ErrorTemplate.locale_unknown(locale_code, str(e))) from None
    return week_convention_from_babel(babel_locale)
