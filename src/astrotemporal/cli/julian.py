"""CLI commands for Julian day, decimal time and right ascension conversions."""

from decimal import Decimal, InvalidOperation
from typing import Optional

import click

from ..logging import get_logger
from ..space_time.decimal_time import decimal_time_from, hp_decimal_time_from
from ..space_time.julian import (
    hp_julian_from_datetime,
    hp_julian_to_datetime,
    julian_from_datetime,
    julian_to_datetime,
)
from ..space_time.julian_calc import NegativeJulianDayError
from ..space_time.right_ascension import (
    angle_from_right_ascension,
    right_ascension_from_angle,
)
from .common import parse_date_input, parse_time_input

logger = get_logger(__name__)


@click.command()
@click.argument("date")
@click.option("--hp", is_flag=True, help="Use high-precision decimal arithmetic")
def jd(date: str, hp: bool) -> None:
    """Convert a calendar DATE to a Julian day.

    DATE is a decimal date (1957-10-04.81) or an ISO date-time
    (1957-10-04T19:26:24).
    """
    cdt = parse_date_input(date)
    logger.info(f"Converting {cdt} to Julian day")
    if hp:
        click.echo(str(hp_julian_from_datetime(cdt)))
    else:
        click.echo(repr(julian_from_datetime(cdt)))


@click.command()
@click.argument("julian_day")
@click.option("--hp", is_flag=True, help="Use high-precision decimal arithmetic")
def date(julian_day: str, hp: bool) -> None:
    """Convert a JULIAN_DAY to a calendar date and time."""
    try:
        value = Decimal(julian_day.strip("' "))
    except InvalidOperation:
        raise click.BadParameter(f"Invalid Julian day: {julian_day}")
    if not value.is_finite():
        raise click.BadParameter(f"Invalid Julian day: {julian_day}")
    logger.info(f"Converting Julian day {value} to calendar date")
    try:
        if hp:
            result = hp_julian_to_datetime(value)
        else:
            result = julian_to_datetime(float(value))
    except NegativeJulianDayError as e:
        raise click.BadParameter(str(e))
    click.echo(result.isoformat())


@click.command(name="decimal-time")
@click.argument("time")
@click.option("--hp", is_flag=True, help="Use high-precision decimal arithmetic")
def decimal_time(time: str, hp: bool) -> None:
    """Convert a TIME of day (HH:MM:SS) to a decimal time."""
    tod = parse_time_input(time)
    if hp:
        click.echo(str(hp_decimal_time_from(tod)))
    else:
        click.echo(repr(decimal_time_from(tod)))


@click.command()
@click.argument("time", required=False)
@click.option("--angle", type=float, help="Convert an angle in degrees to a time")
def ra(time: Optional[str], angle: Optional[float]) -> None:
    """Convert a right ascension TIME to degrees, or --angle to a time."""
    if angle is not None:
        if time is not None:
            raise click.UsageError("Give either TIME or --angle, not both")
        try:
            click.echo(right_ascension_from_angle(angle).isoformat())
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--angle")
    elif time is not None:
        click.echo(repr(angle_from_right_ascension(parse_time_input(time))))
    else:
        raise click.UsageError("Missing TIME or --angle")
