"""
Date portion formatting for encoded serials.

Renders a date as a fixed-width run of decimal digits:
yyMMdd / yyyyMMdd, optionally followed by HHmm.
"""

from datetime import date as date_type

from .constants import FULL_YEAR_WIDTH, SHORT_YEAR_WIDTH


def format_year(value: date_type, two_digit_year: bool = True) -> str:
    """
    Format the year component.

    Args:
        value: Date or datetime to read the year from
        two_digit_year: Use the last two digits only (default True)

    Returns:
        Zero-padded year, e.g. "25" or "2025"
    """
    if two_digit_year:
        return f"{value.year % 100:0{SHORT_YEAR_WIDTH}d}"
    return f"{value.year:0{FULL_YEAR_WIDTH}d}"


def format_date_portion(
    value: date_type,
    include_time: bool = False,
    two_digit_year: bool = True,
) -> str:
    """
    Format the date portion of an encoded serial.

    A plain ``date`` has no time of day, so it contributes "0000"
    when time is requested.

    Args:
        value: Date or datetime to format
        include_time: Append hour and minute (HHmm)
        two_digit_year: Use a 2-digit instead of 4-digit year

    Returns:
        Digit string, e.g. "250511" or "2505112200"
        Example: format_date_portion(datetime(2025, 5, 11, 22, 0), True) -> "2505112200"
    """
    parts = [
        format_year(value, two_digit_year),
        f"{value.month:02d}",
        f"{value.day:02d}",
    ]
    if include_time:
        parts.append(f"{getattr(value, 'hour', 0):02d}")
        parts.append(f"{getattr(value, 'minute', 0):02d}")
    return "".join(parts)


def digit_count(value: int) -> int:
    """Number of decimal digits in a non-negative integer (0 has one digit)."""
    return len(str(value))
