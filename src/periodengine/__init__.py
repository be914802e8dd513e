"""periodengine - calendar-period arithmetic over the proleptic Gregorian calendar.

Resolves boundaries and ordinal positions of quarters, weeks and fiscal
years for any date in 0001-01-01..9999-12-31, under pluggable definitions.
Every operation is a pure function; the only configured object, the 5-4-4
fiscal provider, is immutable.

Public API:
    to_day_number / from_day_number - Day-number conversion (day 0 = 0001-01-01)
    next_occurrence_on_or_after, strictly_next_occurrence, ... - Weekday navigation
    nth_occurrence_in_month - Nth (or last) weekday of a month
    resolve_quarter, quarter_start, quarter_end - Quarter resolution
    quarter_of_provider, ... - Quarter resolution through a QuarterProvider
    Fiscal544QuarterProvider - 52/53-week 5-4-4 retail fiscal year
    get_iso_week, first_date_of_iso_week, get_iso_weeks_in_year - ISO 8601 weeks
    week_of_year, first_date_of_week, WeekConvention - Culture-defined week numbering
    is_weekend, next_weekday, previous_weekday - Weekend classification

Exceptions:
    CalendarError - Base exception class
    CalendarRangeError - Value outside its domain (also a ValueError)
    ProviderRequiredError - QuarterDefinition.CUSTOM given to a built-in resolver
    MissingProviderError - Provider argument was None (also a TypeError)
    CalendarLocaleError - Unknown locale in strict lookups (also a LookupError)

Submodules:
    periodengine.locale_utils - CLDR week conventions (requires Babel)
    periodengine.diagnostics - Diagnostic codes, templates and formatter
"""

from .core.daynumber import (
    CalendarDate,
    date_from_day_number,
    day_number_of,
    days_in_month,
    days_in_year,
    from_day_number,
    is_leap_year,
    to_day_number,
    weekday_of,
)
from .diagnostics import (
    CalendarError,
    CalendarLocaleError,
    CalendarRangeError,
    MissingProviderError,
    ProviderRequiredError,
)
from .enums import CalendarWeekendDefinition, QuarterDefinition, WeekOfMonthOrdinal, WeekRule
from .fiscal544 import Fiscal544QuarterProvider
from .navigation import (
    count_occurrences_in_month,
    first_day_of_week,
    last_day_of_week,
    nearest_occurrence,
    next_occurrence_on_or_after,
    nth_occurrence_between,
    nth_occurrence_in_month,
    nth_occurrence_in_year,
    previous_occurrence_on_or_before,
    strictly_next_occurrence,
    strictly_previous_occurrence,
)
from .providers import QuarterProvider, WeekendDays, WeekendProvider
from .quarters import (
    Quarter,
    QuarterAnchor,
    first_occurrence_in_quarter,
    last_occurrence_in_quarter,
    nth_occurrence_in_quarter,
    quarter_end,
    quarter_end_of_provider,
    quarter_of,
    quarter_of_provider,
    quarter_start,
    quarter_start_of_provider,
    quarters_of_year,
    resolve_quarter,
    start_month_of_provider,
    start_month_of_quarter,
)
from .weekend import is_weekend, is_weekend_date, next_weekday, previous_weekday
from .weeks import (
    ISO_WEEK_CONVENTION,
    IsoWeek,
    WeekConvention,
    first_date_of_iso_week,
    first_date_of_week,
    get_iso_week,
    get_iso_weeks_in_year,
    last_date_of_iso_week,
    week_of_month,
    week_of_year,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("periodengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ISO_WEEK_CONVENTION",
    "CalendarDate",
    "CalendarError",
    "CalendarLocaleError",
    "CalendarRangeError",
    "CalendarWeekendDefinition",
    "Fiscal544QuarterProvider",
    "IsoWeek",
    "MissingProviderError",
    "ProviderRequiredError",
    "Quarter",
    "QuarterAnchor",
    "QuarterDefinition",
    "QuarterProvider",
    "WeekConvention",
    "WeekOfMonthOrdinal",
    "WeekRule",
    "WeekendDays",
    "WeekendProvider",
    "__version__",
    "count_occurrences_in_month",
    "date_from_day_number",
    "day_number_of",
    "days_in_month",
    "days_in_year",
    "first_date_of_iso_week",
    "first_date_of_week",
    "first_day_of_week",
    "first_occurrence_in_quarter",
    "from_day_number",
    "get_iso_week",
    "get_iso_weeks_in_year",
    "is_leap_year",
    "is_weekend",
    "is_weekend_date",
    "last_date_of_iso_week",
    "last_day_of_week",
    "last_occurrence_in_quarter",
    "nearest_occurrence",
    "next_occurrence_on_or_after",
    "next_weekday",
    "nth_occurrence_between",
    "nth_occurrence_in_month",
    "nth_occurrence_in_quarter",
    "nth_occurrence_in_year",
    "previous_occurrence_on_or_before",
    "previous_weekday",
    "quarter_end",
    "quarter_end_of_provider",
    "quarter_of",
    "quarter_of_provider",
    "quarter_start",
    "quarter_start_of_provider",
    "quarters_of_year",
    "resolve_quarter",
    "start_month_of_provider",
    "start_month_of_quarter",
    "strictly_next_occurrence",
    "strictly_previous_occurrence",
    "to_day_number",
    "week_of_month",
    "week_of_year",
    "weekday_of",
]
