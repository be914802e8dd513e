"""Rust compiler-style rendering of diagnostics.

This is the text every CalendarError carries as its message.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = ["format_diagnostic"]


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """Render a diagnostic as a headline plus ``= label: value`` lines.

    Example:
        >>> print(format_diagnostic(ErrorTemplate.iso_week_out_of_range(2023, 53, 52)))
        error[ISO_WEEK_OUT_OF_RANGE]: ISO year 2023 has weeks 1-52, got 53
          = argument: iso_week
          = received: 53
          = help: Check get_iso_weeks_in_year() before building week inputs
          = note: see https://en.wikipedia.org/wiki/ISO_week_date
    """
    lines = [f"{diagnostic.severity}[{diagnostic.code.name}]: {diagnostic.message}"]
    details = (
        ("function", diagnostic.function_name),
        ("argument", diagnostic.argument_name),
        ("received", diagnostic.received_value),
        ("help", diagnostic.hint),
    )
    lines.extend(f"  = {label}: {value}" for label, value in details if value)
    if diagnostic.help_url:
        lines.append(f"  = note: see {diagnostic.help_url}")
    return "\n".join(lines)
