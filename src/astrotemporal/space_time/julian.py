from datetime import datetime
from decimal import Decimal
from typing import Union

from .calendar import CalendarDateTime
from .decimal_date import parse_decimal_date, parse_hp_decimal_date
from .decimal_time import decimal_time_from, hp_decimal_time_from
from .julian_calc import (
    calendar_to_hp_julian_day,
    calendar_to_julian_day,
    hp_julian_day_to_calendar,
    julian_day_to_calendar,
)
from .precision import DEFAULT_POLICY, PrecisionPolicy

DateTimeLike = Union[datetime, CalendarDateTime]


def _as_calendar_datetime(dt: DateTimeLike) -> CalendarDateTime:
    if isinstance(dt, CalendarDateTime):
        return dt
    return CalendarDateTime.from_datetime(dt)


def julian_from_datetime(dt: DateTimeLike) -> float:
    """Convert a datetime to a Julian day.

    Args:
        dt: datetime or CalendarDateTime; any tzinfo is ignored

    Returns:
        float: Julian day
    """
    cdt = _as_calendar_datetime(dt)
    d = cdt.date
    return calendar_to_julian_day(d.year, d.month, d.day, decimal_time_from(cdt))


def hp_julian_from_datetime(
    dt: DateTimeLike, policy: PrecisionPolicy = DEFAULT_POLICY
) -> Decimal:
    """Convert a datetime to a high-precision Julian day.

    Args:
        dt: datetime or CalendarDateTime; any tzinfo is ignored
        policy: Precision settings for the computation

    Returns:
        Decimal: Julian day
    """
    cdt = _as_calendar_datetime(dt)
    d = cdt.date
    fraction = hp_decimal_time_from(cdt, policy)
    return calendar_to_hp_julian_day(d.year, d.month, d.day, fraction, policy)


def julian_from_decimal_date(text: str) -> float:
    """Convert a decimal date such as ``1957-10-04.81`` to a Julian day."""
    d, fraction = parse_decimal_date(text)
    return calendar_to_julian_day(d.year, d.month, d.day, fraction)


def hp_julian_from_decimal_date(
    text: str, policy: PrecisionPolicy = DEFAULT_POLICY
) -> Decimal:
    """Convert a decimal date to a high-precision Julian day.

    Every digit of the day fraction is kept.
    """
    d, fraction = parse_hp_decimal_date(text)
    return calendar_to_hp_julian_day(d.year, d.month, d.day, fraction, policy)


def julian_to_datetime(jd: float) -> CalendarDateTime:
    """Convert a Julian day to a CalendarDateTime.

    Args:
        jd: Julian day to convert

    Returns:
        CalendarDateTime: Calendar date and time of day
    """
    return julian_day_to_calendar(jd)


def hp_julian_to_datetime(
    jd: Decimal, policy: PrecisionPolicy = DEFAULT_POLICY
) -> CalendarDateTime:
    """Convert a high-precision Julian day to a CalendarDateTime."""
    return hp_julian_day_to_calendar(jd, policy)


def julian_to_python_datetime(jd: float) -> datetime:
    """Convert a Julian day to a naive ``datetime.datetime``.

    Raises:
        ValueError: If the date cannot be represented by datetime
    """
    return julian_day_to_calendar(jd).to_datetime()
