"""CLI entry point for astrotemporal."""

import click

from .julian import date, decimal_time, jd, ra
from . import common as common
from ..logging import get_logger


logger = get_logger(__name__)


@click.group()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times: -v, -vv)",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging (equivalent to -vv)",
)
@click.option(
    "--quiet",
    is_flag=True,
    help="Suppress all logging except errors",
)
def cli(verbose: int, debug: bool, quiet: bool) -> None:
    """Astronomical date and time conversions."""
    common.configure_logging(
        {
            "quiet": quiet,
            "debug": debug,
            "verbose": verbose,
        }
    )
    logger.debug("Debug logging enabled")


cli.add_command(jd)
cli.add_command(date)
cli.add_command(decimal_time)
cli.add_command(ra)

if __name__ == "__main__":
    cli()
