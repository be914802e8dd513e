"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    _ISO_WEEK_URL = "https://en.wikipedia.org/wiki/ISO_week_date"

    @staticmethod
    def year_out_of_range(year: int, *, argument: str = "year") -> Diagnostic:
        """Year outside 1-9999.

        Args:
            year: The rejected year
            argument: Name of the argument that carried it

        Returns:
            Diagnostic for YEAR_OUT_OF_RANGE
        """
        return Diagnostic(
            code=DiagnosticCode.YEAR_OUT_OF_RANGE,
            message=f"{argument} must be 1-9999, got {year}",
            hint="Only proleptic Gregorian years 1 through 9999 are supported",
            argument_name=argument,
            received_value=repr(year),
        )

    @staticmethod
    def month_out_of_range(month: int, *, argument: str = "month") -> Diagnostic:
        """Month outside 1-12.

        Args:
            month: The rejected month
            argument: Name of the argument that carried it

        Returns:
            Diagnostic for MONTH_OUT_OF_RANGE
        """
        return Diagnostic(
            code=DiagnosticCode.MONTH_OUT_OF_RANGE,
            message=f"{argument} must be 1-12, got {month}",
            argument_name=argument,
            received_value=repr(month),
        )

    @staticmethod
    def day_out_of_range(year: int, month: int, day: int, days_in_month: int) -> Diagnostic:
        """Day outside 1..days_in_month(year, month).

        Args:
            year: Year of the rejected date
            month: Month of the rejected date
            day: The rejected day
            days_in_month: Number of days in that month

        Returns:
            Diagnostic for DAY_OUT_OF_RANGE
        """
        hint = None
        if month == 2 and day == 29:
            hint = "February has 29 days only in leap years"
        return Diagnostic(
            code=DiagnosticCode.DAY_OUT_OF_RANGE,
            message=(
                f"Day {day} is out of range for {year:04d}-{month:02d} (1-{days_in_month})"
            ),
            hint=hint,
            argument_name="day",
            received_value=repr(day),
        )

    @staticmethod
    def day_number_out_of_range(day_number: int, minimum: int, maximum: int) -> Diagnostic:
        """Day number outside the representable range.

        Args:
            day_number: The rejected day number
            minimum: Smallest valid day number
            maximum: Largest valid day number

        Returns:
            Diagnostic for DAY_NUMBER_OUT_OF_RANGE
        """
        return Diagnostic(
            code=DiagnosticCode.DAY_NUMBER_OUT_OF_RANGE,
            message=f"Day number {day_number} is outside {minimum}-{maximum}",
            hint="Day numbers count days since 0001-01-01 and end at 9999-12-31",
            argument_name="day_number",
            received_value=repr(day_number),
        )

    @staticmethod
    def weekday_out_of_range(value: int, *, argument: str = "weekday") -> Diagnostic:
        """Weekday integer outside 0-6.

        Args:
            value: The rejected weekday value
            argument: Name of the argument that carried it

        Returns:
            Diagnostic for WEEKDAY_OUT_OF_RANGE
        """
        return Diagnostic(
            code=DiagnosticCode.WEEKDAY_OUT_OF_RANGE,
            message=f"{argument} must be 0-6 (Monday=0), got {value}",
            hint="Use calendar.Day members such as calendar.MONDAY",
            argument_name=argument,
            received_value=repr(value),
        )

    @staticmethod
    def quarter_out_of_range(quarter: int, *, argument: str = "quarter") -> Diagnostic:
        """Quarter index outside 1-4.

        Args:
            quarter: The rejected quarter index
            argument: Name of the argument that carried it

        Returns:
            Diagnostic for QUARTER_OUT_OF_RANGE
        """
        return Diagnostic(
            code=DiagnosticCode.QUARTER_OUT_OF_RANGE,
            message=f"{argument} must be 1-4, got {quarter}",
            argument_name=argument,
            received_value=repr(quarter),
        )

    @staticmethod
    def iso_week_out_of_range(iso_year: int, iso_week: int, weeks_in_year: int) -> Diagnostic:
        """ISO week outside 1..weeks_in_year for its ISO year.

        Args:
            iso_year: ISO week-numbering year
            iso_week: The rejected week
            weeks_in_year: 52 or 53

        Returns:
            Diagnostic for ISO_WEEK_OUT_OF_RANGE
        """
        return Diagnostic(
            code=DiagnosticCode.ISO_WEEK_OUT_OF_RANGE,
            message=f"ISO year {iso_year} has weeks 1-{weeks_in_year}, got {iso_week}",
            hint="Check get_iso_weeks_in_year() before building week inputs",
            help_url=ErrorTemplate._ISO_WEEK_URL,
            argument_name="iso_week",
            received_value=repr(iso_week),
        )

    @staticmethod
    def ordinal_not_in_period(
        occurrence: int, weekday_name: str, period: str, available: int
    ) -> Diagnostic:
        """Requested Nth weekday does not exist in the period.

        Args:
            occurrence: Requested ordinal (negative counts from the end)
            weekday_name: Weekday name, e.g. "MONDAY"
            period: Human description of the period, e.g. "2023-02"
            available: How many instances the period actually contains

        Returns:
            Diagnostic for ORDINAL_NOT_IN_PERIOD
        """
        return Diagnostic(
            code=DiagnosticCode.ORDINAL_NOT_IN_PERIOD,
            message=(
                f"Occurrence {occurrence} of {weekday_name} does not exist in {period} "
                f"({available} available)"
            ),
            hint="Use WeekOfMonthOrdinal.LAST for the final occurrence",
            argument_name="ordinal",
            received_value=repr(occurrence),
        )

    @staticmethod
    def date_outside_fiscal_year(value: str, start: str, end: str) -> Diagnostic:
        """Date lies outside the single fiscal year a provider covers.

        Args:
            value: ISO text of the rejected date
            start: ISO text of the fiscal year's first day
            end: ISO text of the fiscal year's last day

        Returns:
            Diagnostic for DATE_OUTSIDE_FISCAL_YEAR
        """
        return Diagnostic(
            code=DiagnosticCode.DATE_OUTSIDE_FISCAL_YEAR,
            message=f"Date {value} is outside the fiscal year {start}..{end}",
            hint="Construct a provider anchored at that year's start",
            argument_name="value",
            received_value=value,
        )

    @staticmethod
    def fiscal_weeks_out_of_range(weeks: int) -> Diagnostic:
        """Explicit fiscal year length other than 52 or 53 weeks.

        Args:
            weeks: The rejected week count

        Returns:
            Diagnostic for FISCAL_WEEKS_OUT_OF_RANGE
        """
        return Diagnostic(
            code=DiagnosticCode.FISCAL_WEEKS_OUT_OF_RANGE,
            message=f"A 5-4-4 fiscal year has 52 or 53 weeks, got {weeks}",
            hint="Omit weeks to derive the length from nominal_start",
            argument_name="weeks",
            received_value=repr(weeks),
        )

    @staticmethod
    def week_not_in_year(year: int, week: int, rule: str) -> Diagnostic:
        """Culture week number that does not occur in the year.

        Args:
            year: Calendar year
            week: The rejected week number
            rule: Week convention description, e.g. "SUNDAY/FIRST_DAY"

        Returns:
            Diagnostic for WEEK_NOT_IN_YEAR
        """
        return Diagnostic(
            code=DiagnosticCode.WEEK_NOT_IN_YEAR,
            message=f"Week {week} is invalid for the year {year} under {rule}",
            hint="week_of_year() of the returned date must give the requested week",
            argument_name="week",
            received_value=repr(week),
        )

    @staticmethod
    def anchor_day_out_of_range(day: int, maximum: int) -> Diagnostic:
        """Quarter anchor day outside 1..maximum.

        Args:
            day: The rejected anchor day
            maximum: Largest accepted anchor day

        Returns:
            Diagnostic for ANCHOR_DAY_OUT_OF_RANGE
        """
        return Diagnostic(
            code=DiagnosticCode.ANCHOR_DAY_OUT_OF_RANGE,
            message=f"Anchor day must be 1-{maximum}, got {day}",
            hint="Anchor days beyond the 28th do not exist in every month",
            argument_name="day",
            received_value=repr(day),
        )

    @staticmethod
    def provider_result_out_of_range(
        method: str, value: object, minimum: int, maximum: int
    ) -> Diagnostic:
        """Custom provider returned a value outside its contract.

        Args:
            method: Provider method name
            value: The returned value
            minimum: Smallest valid value
            maximum: Largest valid value

        Returns:
            Diagnostic for PROVIDER_RESULT_OUT_OF_RANGE
        """
        return Diagnostic(
            code=DiagnosticCode.PROVIDER_RESULT_OUT_OF_RANGE,
            message=f"Provider {method}() returned {value!r}, expected {minimum}-{maximum}",
            function_name=method,
            received_value=repr(value),
        )

    @staticmethod
    def no_working_days(definition: str) -> Diagnostic:
        """Weekend definition classifies every weekday as weekend.

        Args:
            definition: Weekend definition (or provider) description

        Returns:
            Diagnostic for NO_WORKING_DAYS
        """
        return Diagnostic(
            code=DiagnosticCode.NO_WORKING_DAYS,
            message=f"Weekend definition {definition} leaves no working days",
            hint="A weekend provider must report at least one weekday as non-weekend",
        )

    @staticmethod
    def result_out_of_range(value: str, days: int) -> Diagnostic:
        """Computed date would leave the representable range.

        Args:
            value: ISO text of the starting date
            days: Day offset that was applied

        Returns:
            Diagnostic for RESULT_OUT_OF_RANGE
        """
        return Diagnostic(
            code=DiagnosticCode.RESULT_OUT_OF_RANGE,
            message=f"Moving {value} by {days} day(s) leaves the range 0001-01-01..9999-12-31",
            received_value=value,
        )

    @staticmethod
    def provider_required(function_name: str) -> Diagnostic:
        """QuarterDefinition.CUSTOM passed to a built-in resolver.

        Args:
            function_name: The built-in resolver that was called

        Returns:
            Diagnostic for PROVIDER_REQUIRED
        """
        return Diagnostic(
            code=DiagnosticCode.PROVIDER_REQUIRED,
            message=f"{function_name}() cannot resolve QuarterDefinition.CUSTOM: provider required",
            hint="Pass a QuarterProvider to the matching *_of_provider() function",
            function_name=function_name,
            argument_name="definition",
            received_value="QuarterDefinition.CUSTOM",
        )

    @staticmethod
    def provider_missing(function_name: str, argument: str = "provider") -> Diagnostic:
        """Provider argument was None.

        Args:
            function_name: Function that required the provider
            argument: Name of the provider argument

        Returns:
            Diagnostic for PROVIDER_MISSING
        """
        return Diagnostic(
            code=DiagnosticCode.PROVIDER_MISSING,
            message=f"{function_name}() requires {argument}, got None",
            function_name=function_name,
            argument_name=argument,
            received_value="None",
        )

    @staticmethod
    def locale_unknown(locale_code: str, reason: str) -> Diagnostic:
        """Locale code could not be resolved to CLDR data.

        Args:
            locale_code: The locale as supplied by the caller
            reason: Underlying Babel error text

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=f"Unknown locale identifier '{locale_code}': {reason}",
            hint="Use a BCP-47 or POSIX locale code such as 'en-US' or 'de_DE'",
            argument_name="locale_code",
            received_value=repr(locale_code),
        )
