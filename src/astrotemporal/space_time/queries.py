"""Astronomical queries over arbitrary date and time values.

Each query has a ``supports_*`` check and an accessor that returns ``None``
when the value lacks the fields the query needs, so callers can probe a value
with several queries without handling exceptions.

Supported values are the package's own CalendarDate, TimeOfDay and
CalendarDateTime plus the standard library ``date``, ``time`` and
``datetime``. Time zones are ignored.
"""

from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Optional

from .calendar import CalendarDate, CalendarDateTime, TimeOfDay
from .decimal_time import decimal_time_from, hp_decimal_time_from
from .julian import hp_julian_from_datetime, julian_from_datetime
from .precision import DEFAULT_POLICY, PrecisionPolicy
from .right_ascension import angle_from_right_ascension


def _has_date(value: Any) -> bool:
    # datetime is a subclass of date
    return isinstance(value, (CalendarDateTime, CalendarDate, date))


def _has_time(value: Any) -> bool:
    return isinstance(value, (CalendarDateTime, TimeOfDay, time, datetime))


def supports_julian_day(value: Any) -> bool:
    """Check whether a value carries both a calendar date and a time of day."""
    return _has_date(value) and _has_time(value)


def supports_decimal_time(value: Any) -> bool:
    """Check whether a value carries a time of day."""
    return _has_time(value)


def supports_right_ascension(value: Any) -> bool:
    """Check whether a value carries hours, minutes and seconds."""
    return _has_time(value)


def julian_day(value: Any) -> Optional[float]:
    """Julian day of a value, or None if the value does not support it."""
    if not supports_julian_day(value):
        return None
    return julian_from_datetime(value)


def hp_julian_day(
    value: Any, policy: PrecisionPolicy = DEFAULT_POLICY
) -> Optional[Decimal]:
    """High-precision Julian day of a value, or None if unsupported."""
    if not supports_julian_day(value):
        return None
    return hp_julian_from_datetime(value, policy)


def decimal_time(value: Any) -> Optional[float]:
    """Decimal time of a value, or None if the value has no time of day."""
    if not supports_decimal_time(value):
        return None
    return decimal_time_from(value)


def hp_decimal_time(
    value: Any, policy: PrecisionPolicy = DEFAULT_POLICY
) -> Optional[Decimal]:
    """High-precision decimal time of a value, or None if unsupported."""
    if not supports_decimal_time(value):
        return None
    return hp_decimal_time_from(value, policy)


def right_ascension(value: Any) -> Optional[float]:
    """Right ascension angle in degrees of a time value, or None."""
    if not supports_right_ascension(value):
        return None
    return angle_from_right_ascension(value)
