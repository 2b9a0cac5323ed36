"""Tests for calendar value types."""

import unittest
from datetime import date, datetime, time, timedelta, timezone

from astrotemporal.space_time.calendar import (
    NANOS_PER_DAY,
    CalendarDate,
    CalendarDateTime,
    TimeOfDay,
)


class TestCalendarDate(unittest.TestCase):
    def test_negative_and_zero_years(self):
        self.assertEqual(CalendarDate(-4712, 1, 1).year, -4712)
        self.assertEqual(CalendarDate(0, 2, 29).year, 0)

    def test_invalid_fields(self):
        with self.assertRaises(ValueError):
            CalendarDate(2000, 13, 1)
        with self.assertRaises(ValueError):
            CalendarDate(2000, 0, 1)
        with self.assertRaises(ValueError):
            CalendarDate(2000, 1, 32)
        with self.assertRaises(ValueError):
            CalendarDate(2000, 1, 0)

    def test_is_julian(self):
        self.assertTrue(CalendarDate(1582, 10, 4).is_julian)
        self.assertFalse(CalendarDate(1582, 10, 15).is_julian)

    def test_isoformat(self):
        self.assertEqual(CalendarDate(1957, 10, 4).isoformat(), "1957-10-04")
        self.assertEqual(CalendarDate(333, 1, 27).isoformat(), "0333-01-27")
        self.assertEqual(CalendarDate(-123, 12, 31).isoformat(), "-0123-12-31")

    def test_from_date(self):
        self.assertEqual(CalendarDate.from_date(date(1957, 10, 4)), CalendarDate(1957, 10, 4))

    def test_immutable(self):
        d = CalendarDate(1957, 10, 4)
        with self.assertRaises(AttributeError):
            d.year = 1958


class TestTimeOfDay(unittest.TestCase):
    def test_nano_of_day(self):
        self.assertEqual(TimeOfDay().nano_of_day, 0)
        self.assertEqual(TimeOfDay(12).nano_of_day, NANOS_PER_DAY // 2)
        self.assertEqual(TimeOfDay(23, 59, 59, 999_999_999).nano_of_day, NANOS_PER_DAY - 1)

    def test_from_nano_of_day(self):
        self.assertEqual(TimeOfDay.from_nano_of_day(69_984_000_000_000), TimeOfDay(19, 26, 24))
        self.assertEqual(TimeOfDay.from_nano_of_day(1), TimeOfDay(0, 0, 0, 1))

    def test_from_nano_of_day_out_of_range(self):
        with self.assertRaises(ValueError):
            TimeOfDay.from_nano_of_day(NANOS_PER_DAY)
        with self.assertRaises(ValueError):
            TimeOfDay.from_nano_of_day(-1)

    def test_invalid_fields(self):
        with self.assertRaises(ValueError):
            TimeOfDay(24)
        with self.assertRaises(ValueError):
            TimeOfDay(0, 60)
        with self.assertRaises(ValueError):
            TimeOfDay(0, 0, 60)
        with self.assertRaises(ValueError):
            TimeOfDay(0, 0, 0, 1_000_000_000)

    def test_time_conversion(self):
        self.assertEqual(TimeOfDay.from_time(time(9, 14, 55, 800000)), TimeOfDay(9, 14, 55, 800_000_000))
        self.assertEqual(TimeOfDay(9, 14, 55, 800_000_999).to_time(), time(9, 14, 55, 800000))

    def test_isoformat(self):
        self.assertEqual(TimeOfDay(19, 26, 24).isoformat(), "19:26:24")
        self.assertEqual(TimeOfDay(9, 14, 55, 800_000_000).isoformat(), "09:14:55.8")
        self.assertEqual(TimeOfDay(0, 0, 0, 1).isoformat(), "00:00:00.000000001")


class TestCalendarDateTime(unittest.TestCase):
    def test_from_datetime_ignores_timezone(self):
        naive = datetime(1957, 10, 4, 19, 26, 24)
        aware = datetime(1957, 10, 4, 19, 26, 24, tzinfo=timezone(timedelta(hours=3)))
        expected = CalendarDateTime.of(1957, 10, 4, 19, 26, 24)
        self.assertEqual(CalendarDateTime.from_datetime(naive), expected)
        self.assertEqual(CalendarDateTime.from_datetime(aware), expected)

    def test_to_datetime(self):
        cdt = CalendarDateTime.of(1957, 10, 4, 19, 26, 24, 123_456_789)
        self.assertEqual(cdt.to_datetime(), datetime(1957, 10, 4, 19, 26, 24, 123456))

    def test_to_datetime_out_of_range(self):
        with self.assertRaises(ValueError):
            CalendarDateTime.of(-123, 12, 31).to_datetime()

    def test_decimal_time(self):
        self.assertEqual(CalendarDateTime.of(2000, 1, 1, 12).decimal_time, 0.5)
        self.assertEqual(CalendarDateTime.of(2000, 1, 1).decimal_time, 0.0)

    def test_isoformat(self):
        self.assertEqual(
            CalendarDateTime.of(1957, 10, 4, 19, 26, 24).isoformat(), "1957-10-04T19:26:24"
        )
        self.assertEqual(
            str(CalendarDateTime.of(-123, 12, 31)), "-0123-12-31T00:00:00"
        )


if __name__ == "__main__":
    unittest.main()
