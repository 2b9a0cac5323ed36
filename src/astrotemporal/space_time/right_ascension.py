from datetime import datetime, time
from typing import Union

from .calendar import NANOS_PER_SECOND, CalendarDateTime, TimeOfDay

# Nanoseconds of right ascension per degree of angle
NANOS_PER_DEGREE = 24.0e10

DEGREES_PER_HOUR = 15.0


def angle_from_right_ascension(
    value: Union[TimeOfDay, CalendarDateTime, time, datetime]
) -> float:
    """Convert a right ascension given as a time to an angle.

    Args:
        value: Right ascension as hours, minutes and seconds

    Returns:
        float: Angle in degrees
    """
    if isinstance(value, CalendarDateTime):
        value = value.time
    elif not isinstance(value, TimeOfDay):
        value = TimeOfDay.from_time(value)
    seconds = value.second + value.nanosecond / NANOS_PER_SECOND
    hours = value.hour + value.minute / 60.0 + seconds / 3600.0
    return hours * DEGREES_PER_HOUR


def right_ascension_from_angle(angle: float) -> TimeOfDay:
    """Convert an angle to a right ascension.

    Args:
        angle: Angle in degrees, in [0, 360)

    Returns:
        TimeOfDay: Right ascension as hours, minutes and seconds
    """
    return TimeOfDay.from_nano_of_day(int(angle * NANOS_PER_DEGREE))
