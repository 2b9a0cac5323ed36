"""Parsing and formatting of decimal dates.

Some texts give date-time references as a calendar date whose day carries a
decimal fraction, e.g. ``1957-10-04.81`` for 1957-10-04T19:26:24. Negative
years are allowed and both ``.`` and ``,`` are accepted as the decimal
separator. The fraction is mandatory: midnight of 2000-11-01 is written
``2000-11-01.0`` or ``2000-11-1.0``.
"""

import re
from decimal import Decimal
from typing import Tuple, Union

from .calendar import CalendarDate, CalendarDateTime
from .decimal_time import time_from_decimal_time

DECIMAL_DATE_PATTERN = re.compile(
    r"([+-]?\d{1,4})-(\d{1,2})-(\d{1,2})[.,](\d+)", re.ASCII
)

# Fractional digits written by format_decimal_date
DECIMAL_DATE_DIGITS = 6


class DecimalDateParseError(ValueError):
    """Raised when text is not a valid decimal date."""

    def __init__(self, message: str, text: str, error_index: int = 0) -> None:
        super().__init__(message)
        self.text = text
        self.error_index = error_index


def _match(text: str) -> Tuple[CalendarDate, str]:
    m = DECIMAL_DATE_PATTERN.fullmatch(text.strip())
    if m is None:
        raise DecimalDateParseError(f"Cannot parse text: {text}", text)
    return _calendar_date(m, text), m.group(4)


def _calendar_date(m: "re.Match[str]", text: str) -> CalendarDate:
    try:
        return CalendarDate(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError as e:
        raise DecimalDateParseError(f"Cannot parse text: {text}: {e}", text) from e


def parse_decimal_date(text: str) -> Tuple[CalendarDate, float]:
    """Parse a decimal date into a calendar date and a float decimal time.

    Args:
        text: Text such as ``1957-10-04.81``

    Returns:
        Tuple of (CalendarDate, decimal time in [0, 1))

    Raises:
        DecimalDateParseError: If the text is not a decimal date
    """
    calendar_date, digits = _match(text)
    return calendar_date, float("0." + digits)


def parse_hp_decimal_date(text: str) -> Tuple[CalendarDate, Decimal]:
    """Parse a decimal date keeping every digit of the fraction.

    Args:
        text: Text such as ``1957-10-04.81``

    Returns:
        Tuple of (CalendarDate, decimal time as an exact Decimal)

    Raises:
        DecimalDateParseError: If the text is not a decimal date
    """
    calendar_date, digits = _match(text)
    return calendar_date, Decimal("0." + digits)


def parse_decimal_datetime(text: str) -> CalendarDateTime:
    """Parse a decimal date into a CalendarDateTime.

    ``1957-10-04.81`` becomes 1957-10-04T19:26:24.

    Raises:
        DecimalDateParseError: If the text is not a decimal date
    """
    calendar_date, decimal_time = parse_decimal_date(text)
    return CalendarDateTime(calendar_date, time_from_decimal_time(decimal_time))


def format_decimal_date(year: int, month: int, day: Union[float, Decimal]) -> str:
    """Format a year, month and fractional day as a decimal date.

    The day is written with a fixed number of fractional digits, which bounds
    the precision of anything parsed back from the result.

    Args:
        year: Proleptic year
        month: Month (1-12)
        day: Day of month including the fraction of the day

    Returns:
        Text such as ``1957-10-4.810000``
    """
    whole = int(day)
    text = f"{float(day):.{DECIMAL_DATE_DIGITS}f}"
    # Rounding must not carry the last instants of a day into the next day
    if int(text.split(".")[0]) > whole:
        text = f"{whole}." + "9" * DECIMAL_DATE_DIGITS
    return f"{year}-{month}-{text}"
