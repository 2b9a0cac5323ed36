"""astrotemporal public API.

Conversions between calendar dates, decimal times and astronomical Julian
days, following Meeus, "Astronomical Algorithms", chapter 7.
"""

from .space_time.calendar import CalendarDate, CalendarDateTime, TimeOfDay, is_julian
from .space_time.decimal_date import (
    DecimalDateParseError,
    format_decimal_date,
    parse_decimal_date,
    parse_decimal_datetime,
    parse_hp_decimal_date,
)
from .space_time.decimal_time import (
    decimal_time_from,
    hp_decimal_time_from,
    time_from_decimal_time,
)
from .space_time.julian import (
    hp_julian_from_datetime,
    hp_julian_from_decimal_date,
    hp_julian_to_datetime,
    julian_from_datetime,
    julian_from_decimal_date,
    julian_to_datetime,
    julian_to_python_datetime,
)
from .space_time.julian_calc import (
    NegativeJulianDayError,
    calendar_to_hp_julian_day,
    calendar_to_julian_day,
    hp_julian_day_to_calendar,
    julian_day_to_calendar,
)
from .space_time.precision import DEFAULT_POLICY, PrecisionPolicy
from .space_time import queries
from .space_time.right_ascension import (
    angle_from_right_ascension,
    right_ascension_from_angle,
)

__all__ = [
    "CalendarDate",
    "CalendarDateTime",
    "TimeOfDay",
    "is_julian",
    "DecimalDateParseError",
    "format_decimal_date",
    "parse_decimal_date",
    "parse_decimal_datetime",
    "parse_hp_decimal_date",
    "decimal_time_from",
    "hp_decimal_time_from",
    "time_from_decimal_time",
    "hp_julian_from_datetime",
    "hp_julian_from_decimal_date",
    "hp_julian_to_datetime",
    "julian_from_datetime",
    "julian_from_decimal_date",
    "julian_to_datetime",
    "julian_to_python_datetime",
    "NegativeJulianDayError",
    "calendar_to_hp_julian_day",
    "calendar_to_julian_day",
    "hp_julian_day_to_calendar",
    "julian_day_to_calendar",
    "DEFAULT_POLICY",
    "PrecisionPolicy",
    "queries",
    "angle_from_right_ascension",
    "right_ascension_from_angle",
]
