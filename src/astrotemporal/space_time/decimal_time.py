"""Decimal time conversion module.

Astronomical texts often express the time of day as a fraction of the day in
the range [0, 1). This module uses the civil convention, with 0 at midnight
rather than noon; add 0.5 to get the astronomical day fraction.

Time zones are ignored.
"""

import math
from datetime import datetime, time
from decimal import Decimal
from fractions import Fraction
from typing import Union

from .calendar import NANOS_PER_DAY, CalendarDateTime, TimeOfDay
from .precision import DEFAULT_POLICY, PrecisionPolicy

NANOS_PER_DAY_FLOAT = float(NANOS_PER_DAY)
NANOS_PER_DAY_DECIMAL = Decimal(NANOS_PER_DAY)

# Largest float below 1
ONE_BELOW_FLOAT = math.nextafter(1.0, 0.0)

TimeLike = Union[TimeOfDay, CalendarDateTime, time, datetime]


def nano_of_day(value: TimeLike) -> int:
    """Get the nanoseconds elapsed since midnight for a time-like value.

    Args:
        value: TimeOfDay, CalendarDateTime, datetime.time or datetime.datetime

    Returns:
        Nanosecond of the day
    """
    if isinstance(value, CalendarDateTime):
        return value.time.nano_of_day
    if isinstance(value, TimeOfDay):
        return value.nano_of_day
    return TimeOfDay.from_time(value).nano_of_day


def decimal_time_from(value: TimeLike) -> float:
    """Convert a time of day to a decimal time as a float.

    Args:
        value: Time-like value to convert

    Returns:
        Fraction of the day in [0, 1)
    """
    result = nano_of_day(value) / NANOS_PER_DAY_FLOAT
    # The last nanoseconds of the day would otherwise round up to 1
    return min(result, ONE_BELOW_FLOAT)


def hp_decimal_time_from(
    value: TimeLike, policy: PrecisionPolicy = DEFAULT_POLICY
) -> Decimal:
    """Convert a time of day to a high-precision decimal time.

    The quotient is computed with the policy's significant digits and its
    decimal time rounding mode.

    Args:
        value: Time-like value to convert
        policy: Precision settings to use

    Returns:
        Fraction of the day in [0, 1) as a Decimal
    """
    context = policy.decimal_time_context
    result = context.divide(Decimal(nano_of_day(value)), NANOS_PER_DAY_DECIMAL)
    if result >= 1:
        return context.next_minus(Decimal(1))
    return result


def time_from_decimal_time(decimal_time: Union[float, Decimal]) -> TimeOfDay:
    """Convert a decimal time back to a time of day.

    The product with the nanoseconds per day is exact for Decimal input and
    is truncated toward zero. The input must lie in [0, 1); anything else
    makes TimeOfDay raise ValueError.

    Args:
        decimal_time: Fraction of the day, float or Decimal

    Returns:
        The equivalent TimeOfDay
    """
    if isinstance(decimal_time, Decimal):
        nanos = Fraction(decimal_time) * NANOS_PER_DAY
    else:
        nanos = decimal_time * NANOS_PER_DAY_FLOAT
    return TimeOfDay.from_nano_of_day(int(nanos))
