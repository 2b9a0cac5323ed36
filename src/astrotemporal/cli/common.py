"""
Command-line utilities for astrotemporal.

This module provides logging configuration and input parsing shared by the
CLI commands.
"""

import logging
from datetime import datetime, time
from typing import Any, Dict

import click

from ..logging import set_log_level
from ..space_time.calendar import CalendarDateTime, TimeOfDay
from ..space_time.decimal_date import DecimalDateParseError, parse_decimal_datetime


def configure_logging(args: Dict[str, Any]) -> None:
    """
    Configure logging based on command line arguments.

    Args:
        args: Parsed command line flags: quiet, debug and verbose
    """
    quiet = args.get("quiet", False)
    debug = args.get("debug", False)
    verbosity = args.get("verbose", 0)

    if quiet:
        log_level = logging.ERROR
    elif debug:
        log_level = logging.DEBUG
    else:
        # 0 -> WARNING, 1 -> INFO, 2+ -> DEBUG
        if verbosity == 0:
            log_level = logging.WARNING
        elif verbosity == 1:
            log_level = logging.INFO
        else:
            log_level = logging.DEBUG

    set_log_level(log_level)
    logging.getLogger("astrotemporal").debug(
        f"Logging configured with level {logging.getLevelName(log_level)}"
    )


def parse_date_input(date_str: str) -> CalendarDateTime:
    """Parse a date given on the command line.

    Args:
        date_str: Date string in one of these formats:
            - decimal date (e.g., "1957-10-04.81" or "-123-12-31.0")
            - ISO format (e.g., "1957-10-04T19:26:24"), any offset is ignored

    Returns:
        The calendar date and time of day

    Raises:
        click.BadParameter: If the date string is invalid
    """
    date_str = date_str.strip("' ")
    try:
        return parse_decimal_datetime(date_str)
    except DecimalDateParseError:
        pass
    try:
        return CalendarDateTime.from_datetime(datetime.fromisoformat(date_str))
    except ValueError:
        raise click.BadParameter(f"Invalid date format: {date_str}")


def parse_time_input(time_str: str) -> TimeOfDay:
    """Parse a time of day such as "19:26:24" or "09:14:55.8".

    Raises:
        click.BadParameter: If the time string is invalid
    """
    try:
        return TimeOfDay.from_time(time.fromisoformat(time_str.strip("' ")))
    except ValueError:
        raise click.BadParameter(f"Invalid time format: {time_str}")
