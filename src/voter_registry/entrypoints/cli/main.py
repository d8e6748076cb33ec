"""VOTER REGISTRY CLI entry point.

The top-level ``voter-registry`` group (Click-Extra) sets up logging and
carries the subcommands:

- ``voter-registry db``: schema setup and maintenance
  (init/upgrade/current/status/reset).
- ``voter-registry register``: run the registration use case for one person.
- ``voter-registry lookup``: show a registered person.

Examples
    $ voter-registry --version
    $ voter-registry db init
    $ voter-registry register "Ana" --id 100 --age 30 --gender female
"""

import logging
from pathlib import Path

import click
import click_extra as clickx

from voter_registry import __version__
from voter_registry.logging import (
    DEFAULT_FLIGHT_RECORDER_CAPACITY,
    LoggingSettings,
    configure_logging,
    console_level_from_counts,
)

from .db import db as db_group
from .helpers.log_level_parser import parse_log_level
from .register import lookup, register

HELP = """VOTER REGISTRY command-line interface.

    Registers voters after checking eligibility: a non-negative identifier,
    legal voting age, alive status, and no previous registration under the
    same identifier. Accepted voters are stored in the database named by
    VOTER_REGISTRY_DB_URL.
    """


@clickx.extra_group(
    name="voter-registry",
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "-v",
    "--verbose",
    "verbose_count",
    count=True,
    help="More console output; repeat for more (-vv reaches DEBUG).",
)
@click.option(
    "-q",
    "--quiet",
    "quiet_count",
    count=True,
    help="Less console output; repeat for less (-qq shows only CRITICAL).",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Console at DEBUG with timestamps, logger names and source locations.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar="VOTER_REGISTRY_LOG_PATH",
    show_envvar=True,
    help="File the flight recorder writes to. Defaults to the user log directory.",
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=DEFAULT_FLIGHT_RECORDER_CAPACITY,
    hidden=True,
    envvar="VOTER_REGISTRY_FLIGHT_RECORDER_CAPACITY",
    help="Number of records the flight recorder keeps in memory.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    show_envvar=True,
    help=(
        "Buffer recent records at DEBUG, whatever the console level, and dump "
        "them to --log-path as soon as a WARNING or ERROR is logged."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush",
    default=False,
    show_default=True,
    show_envvar=True,
    help="Also dump the flight recorder on exit, even if nothing went wrong.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    show_envvar=True,
    help=(
        "NAME=LEVEL minimum level for a named logger, applied to the console "
        "and the flight recorder alike. Repeatable. sqlalchemy and alembic "
        "default to WARNING."
    ),
)
@clickx.pass_context
def registry_cli(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path | None,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """VOTER REGISTRY command-line interface."""
    settings = LoggingSettings(
        console_level=console_level_from_counts(verbose_count, quiet_count),
        debug=debug,
        color=ctx.color is not False,
        flight_recorder=flight_recorder,
        log_path=log_path,
        flight_recorder_capacity=flight_recorder_capacity,
        force_flush=force_flush,
        logger_levels=logger_levels,
    )
    configure_logging(settings)
    ctx.call_on_close(logging.shutdown)


registry_cli.add_command(db_group)
registry_cli.add_command(register)
registry_cli.add_command(lookup)
