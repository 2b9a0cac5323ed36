"""Julian day calculation module.

This module converts between calendar dates and astronomical Julian days
using the algorithm from Meeus, "Astronomical Algorithms" (2nd ed.), chapter 7.
Dates before 1582-10-15 are interpreted in the proleptic Julian calendar,
later ones in the Gregorian calendar.

Every conversion exists as a float version and as a high-precision
``Decimal`` version. Both run the same algorithm through a NumericOps
implementation from the precision module.

Time zones are ignored: the caller is responsible for supplying dates in the
appropriate time frame.
"""

from decimal import Decimal
from typing import Tuple, Union

from ..logging import get_logger
from .calendar import CalendarDateTime, is_julian
from .decimal_date import format_decimal_date, parse_decimal_datetime
from .precision import (
    DEFAULT_POLICY,
    FLOAT_OPS,
    DecimalOps,
    N,
    NumericOps,
    PrecisionPolicy,
)

logger = get_logger(__name__)


class NegativeJulianDayError(ValueError):
    """Raised when converting a negative Julian day to a calendar date."""

    def __init__(self, julian_day: Union[float, Decimal]) -> None:
        super().__init__(f"Cannot convert a negative julian date: {julian_day}")
        self.julian_day = julian_day


def _to_julian_day(
    ops: NumericOps[N], year: int, month: int, day: int, fraction: N
) -> N:
    k = ops.constants
    julian = is_julian(year, month, day)

    # January and February are months 13 and 14 of the previous year
    y = ops.number(year if month > 2 else year - 1)
    m = ops.number(month if month > 2 else month + 12)
    d = ops.add(fraction, ops.number(day))

    a = ops.div_integral(y, k.c100)
    if julian:
        b = ops.number(0)
    else:
        b = ops.add(ops.sub(k.two, a), ops.div_integral(a, k.four))

    jd = ops.floor(ops.mul(k.c365_25, ops.add(y, k.c4716)))
    jd = ops.add(jd, ops.floor(ops.mul(k.c30_6001, ops.add(m, k.one))))
    jd = ops.add(jd, d)
    jd = ops.add(jd, b)
    return ops.sub(jd, k.c1524_5)


def _from_julian_day(ops: NumericOps[N], jd: N) -> Tuple[int, int, N]:
    if jd < 0:
        raise NegativeJulianDayError(jd)
    k = ops.constants

    jdc = ops.add(jd, k.half)
    z = ops.floor(jdc)
    f = ops.sub(jdc, z)

    if z >= k.c2299161:
        alpha = ops.div_integral(ops.sub(z, k.c1867216_25), k.c36524_25)
        a = ops.sub(ops.add(ops.add(z, k.one), alpha), ops.div_integral(alpha, k.four))
    else:
        a = z

    b = ops.add(a, k.c1524)
    c = ops.div_integral(ops.sub(b, k.c122_1), k.c365_25)
    d = ops.floor(ops.mul(k.c365_25, c))
    e = ops.div_integral(ops.sub(b, d), k.c30_6001)

    day = ops.add(ops.sub(ops.sub(b, d), ops.floor(ops.mul(k.c30_6001, e))), f)
    month = int(e) - 1 if e < 14 else int(e) - 13
    year = int(c) - 4716 if month > 2 else int(c) - 4715
    logger.debug(f"JD {jd}: Z={z} F={f} A={a} B={b} C={c} D={d} E={e}")
    return year, month, day


def calendar_to_julian_day(year: int, month: int, day: int, fraction: float = 0.0) -> float:
    """Convert a calendar date and decimal time to a Julian day.

    Args:
        year: Proleptic year, may be zero or negative
        month: Month (1-12)
        day: Day of month
        fraction: Decimal time in [0, 1), 0 at midnight

    Returns:
        Julian day as a float
    """
    jd = _to_julian_day(FLOAT_OPS, year, month, day, float(fraction))
    logger.debug(f"{year}-{month}-{day} + {fraction} -> JD {jd}")
    return jd


def calendar_to_hp_julian_day(
    year: int,
    month: int,
    day: int,
    fraction: Decimal = Decimal(0),
    policy: PrecisionPolicy = DEFAULT_POLICY,
) -> Decimal:
    """Convert a calendar date and decimal time to a high-precision Julian day.

    Args:
        year: Proleptic year, may be zero or negative
        month: Month (1-12)
        day: Day of month
        fraction: Decimal time in [0, 1), 0 at midnight
        policy: Precision settings for the computation

    Returns:
        Julian day as a Decimal
    """
    jd = _to_julian_day(DecimalOps(policy), year, month, day, Decimal(fraction))
    logger.debug(f"{year}-{month}-{day} + {fraction} -> JD {jd}")
    return jd


def julian_day_to_decimal_date(jd: float) -> str:
    """Convert a Julian day to a decimal date such as ``1957-10-4.810000``.

    Raises:
        NegativeJulianDayError: If jd is negative
    """
    return format_decimal_date(*_from_julian_day(FLOAT_OPS, float(jd)))


def hp_julian_day_to_decimal_date(
    jd: Decimal, policy: PrecisionPolicy = DEFAULT_POLICY
) -> str:
    """Convert a high-precision Julian day to a decimal date.

    Raises:
        NegativeJulianDayError: If jd is negative
    """
    return format_decimal_date(*_from_julian_day(DecimalOps(policy), Decimal(jd)))


def julian_day_to_calendar(jd: float) -> CalendarDateTime:
    """Convert a Julian day to a calendar date and time.

    The fractional day goes through the decimal date text format, so the time
    of day is only as precise as that format (six fractional digits of a day).

    Args:
        jd: Julian day, must not be negative

    Returns:
        The calendar date and time of day

    Raises:
        NegativeJulianDayError: If jd is negative
    """
    return parse_decimal_datetime(julian_day_to_decimal_date(jd))


def hp_julian_day_to_calendar(
    jd: Decimal, policy: PrecisionPolicy = DEFAULT_POLICY
) -> CalendarDateTime:
    """Convert a high-precision Julian day to a calendar date and time.

    The integral steps run in Decimal arithmetic; the time of day has the
    same precision limit as julian_day_to_calendar.

    Raises:
        NegativeJulianDayError: If jd is negative
    """
    return parse_decimal_datetime(hp_julian_day_to_decimal_date(jd, policy))
