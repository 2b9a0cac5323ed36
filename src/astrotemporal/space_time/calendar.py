"""Calendar value types.

Python's own ``datetime.date`` cannot hold year zero or negative years, and
``datetime.time`` stops at microseconds, so conversions work on these small
immutable values instead. Adapters to and from the standard library types are
provided for the common case.
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Union

NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MINUTE = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY = 24 * NANOS_PER_HOUR

# First day of the Gregorian calendar
CUTOFF_YEAR = 1582
CUTOFF_MONTH = 10
CUTOFF_DAY = 15


def is_julian(year: int, month: int, day: int) -> bool:
    """Check whether a date falls before the Gregorian calendar cutover.

    Args:
        year: Proleptic year
        month: Month (1-12)
        day: Day of month

    Returns:
        True if the date is interpreted in the Julian calendar. The cutover
        day 1582-10-15 itself is Gregorian.
    """
    return (year, month, day) < (CUTOFF_YEAR, CUTOFF_MONTH, CUTOFF_DAY)


@dataclass(frozen=True)
class CalendarDate:
    """A proleptic calendar date. The year may be zero or negative."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"Month must be between 1 and 12, got {self.month}")
        if not 1 <= self.day <= 31:
            raise ValueError(f"Day must be between 1 and 31, got {self.day}")

    @property
    def is_julian(self) -> bool:
        return is_julian(self.year, self.month, self.day)

    @classmethod
    def from_date(cls, d: date) -> "CalendarDate":
        return cls(d.year, d.month, d.day)

    def isoformat(self) -> str:
        year = f"{self.year:05d}" if self.year < 0 else f"{self.year:04d}"
        return f"{year}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


@dataclass(frozen=True)
class TimeOfDay:
    """A time of day with nanosecond resolution."""

    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.hour <= 23:
            raise ValueError(f"Hour must be between 0 and 23, got {self.hour}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"Minute must be between 0 and 59, got {self.minute}")
        if not 0 <= self.second <= 59:
            raise ValueError(f"Second must be between 0 and 59, got {self.second}")
        if not 0 <= self.nanosecond < NANOS_PER_SECOND:
            raise ValueError(
                f"Nanosecond must be between 0 and 999999999, got {self.nanosecond}"
            )

    @property
    def nano_of_day(self) -> int:
        """Nanoseconds elapsed since midnight."""
        return (
            self.hour * NANOS_PER_HOUR
            + self.minute * NANOS_PER_MINUTE
            + self.second * NANOS_PER_SECOND
            + self.nanosecond
        )

    @classmethod
    def from_nano_of_day(cls, nano_of_day: int) -> "TimeOfDay":
        """Build a time of day from the nanoseconds elapsed since midnight.

        Raises:
            ValueError: If nano_of_day is outside [0, NANOS_PER_DAY)
        """
        if not 0 <= nano_of_day < NANOS_PER_DAY:
            raise ValueError(f"Nano of day out of range: {nano_of_day}")
        hour, rest = divmod(nano_of_day, NANOS_PER_HOUR)
        minute, rest = divmod(rest, NANOS_PER_MINUTE)
        second, nanosecond = divmod(rest, NANOS_PER_SECOND)
        return cls(hour, minute, second, nanosecond)

    @classmethod
    def from_time(cls, t: Union[time, datetime]) -> "TimeOfDay":
        """Build a time of day from a standard library time or datetime.

        Any tzinfo is ignored.
        """
        return cls(t.hour, t.minute, t.second, t.microsecond * 1000)

    def to_time(self) -> time:
        """Convert to ``datetime.time``, truncating to microseconds."""
        return time(self.hour, self.minute, self.second, self.nanosecond // 1000)

    def isoformat(self) -> str:
        text = f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        if self.nanosecond:
            text += "." + f"{self.nanosecond:09d}".rstrip("0")
        return text

    def __str__(self) -> str:
        return self.isoformat()


@dataclass(frozen=True)
class CalendarDateTime:
    """A calendar date combined with a time of day."""

    date: CalendarDate
    time: TimeOfDay = TimeOfDay()

    @classmethod
    def of(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> "CalendarDateTime":
        return cls(
            CalendarDate(year, month, day),
            TimeOfDay(hour, minute, second, nanosecond),
        )

    @classmethod
    def from_datetime(cls, dt: datetime) -> "CalendarDateTime":
        """Build from a standard library datetime. Any tzinfo is ignored."""
        return cls(CalendarDate.from_date(dt), TimeOfDay.from_time(dt))

    def to_datetime(self) -> datetime:
        """Convert to a naive ``datetime.datetime``.

        Raises:
            ValueError: If the year is outside 1-9999 or the day does not
                exist in the proleptic Gregorian calendar
        """
        return datetime.combine(
            date(self.date.year, self.date.month, self.date.day), self.time.to_time()
        )

    @property
    def decimal_time(self) -> float:
        return self.time.nano_of_day / NANOS_PER_DAY

    def isoformat(self) -> str:
        return f"{self.date.isoformat()}T{self.time.isoformat()}"

    def __str__(self) -> str:
        return self.isoformat()
