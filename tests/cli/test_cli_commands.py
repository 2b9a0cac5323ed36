"""Tests for the astrotemporal CLI commands."""

import unittest

import click
from click.testing import CliRunner

from astrotemporal.cli import cli
from astrotemporal.cli.common import parse_date_input, parse_time_input
from astrotemporal.space_time.calendar import CalendarDateTime, TimeOfDay


class TestParseInput(unittest.TestCase):
    def test_parse_date_input(self):
        expected = CalendarDateTime.of(1957, 10, 4, 19, 26, 24)
        self.assertEqual(parse_date_input("1957-10-04.81"), expected)
        self.assertEqual(parse_date_input("1957-10-04T19:26:24"), expected)
        self.assertEqual(parse_date_input("'1957-10-04.81'"), expected)
        self.assertEqual(parse_date_input("-123-12-31.0"), CalendarDateTime.of(-123, 12, 31))

        with self.assertRaises(click.BadParameter):
            parse_date_input("invalid")

    def test_parse_time_input(self):
        self.assertEqual(parse_time_input("19:26:24"), TimeOfDay(19, 26, 24))
        self.assertEqual(parse_time_input("09:14:55.800"), TimeOfDay(9, 14, 55, 800_000_000))

        with self.assertRaises(click.BadParameter):
            parse_time_input("25:00")


class TestJulianCLI(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()

    def test_jd(self):
        result = self.runner.invoke(cli, ["jd", "1957-10-04.81"])
        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertAlmostEqual(float(result.output), 2436116.31, places=6)

    def test_jd_hp(self):
        result = self.runner.invoke(cli, ["jd", "--hp", "1957-10-04T19:26:24"])
        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertEqual(result.output.strip(), "2436116.31")

    def test_jd_invalid_date(self):
        result = self.runner.invoke(cli, ["jd", "someday"])
        self.assertNotEqual(result.exit_code, 0)
        self.assertIn("Invalid date format", result.output)

    def test_date(self):
        result = self.runner.invoke(cli, ["date", "2436116.31"])
        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertEqual(result.output.strip(), "1957-10-04T19:26:24")

    def test_date_hp(self):
        result = self.runner.invoke(cli, ["date", "--hp", "1842713.0"])
        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertEqual(result.output.strip(), "0333-01-27T12:00:00")

    def test_date_negative(self):
        result = self.runner.invoke(cli, ["date", "--", "-1.0"])
        self.assertNotEqual(result.exit_code, 0)
        self.assertIn("negative julian date", result.output)

    def test_date_invalid(self):
        result = self.runner.invoke(cli, ["date", "yesterday"])
        self.assertNotEqual(result.exit_code, 0)
        self.assertIn("Invalid Julian day", result.output)

    def test_date_not_finite(self):
        for value in ["nan", "Infinity", "-inf"]:
            for args in (["date", "--", value], ["date", "--hp", "--", value]):
                result = self.runner.invoke(cli, args)
                self.assertEqual(result.exit_code, 2, msg=result.output)
                self.assertIn("Invalid Julian day", result.output)

    def test_decimal_time(self):
        result = self.runner.invoke(cli, ["decimal-time", "12:00:00"])
        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertEqual(result.output.strip(), "0.5")

        result = self.runner.invoke(cli, ["decimal-time", "--hp", "19:26:24"])
        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertEqual(result.output.strip(), "0.81")

    def test_ra(self):
        result = self.runner.invoke(cli, ["ra", "09:14:55.800"])
        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertAlmostEqual(float(result.output), 138.7325, places=5)

        result = self.runner.invoke(cli, ["ra", "--angle", "180"])
        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertEqual(result.output.strip(), "12:00:00")

    def test_ra_requires_input(self):
        result = self.runner.invoke(cli, ["ra"])
        self.assertNotEqual(result.exit_code, 0)

    def test_verbosity_flags(self):
        result = self.runner.invoke(cli, ["--quiet", "decimal-time", "06:00:00"])
        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertEqual(result.output.strip(), "0.25")


if __name__ == "__main__":
    unittest.main()
