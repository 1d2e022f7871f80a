"""DRILLS CLI entry point.

The top-level ``drills`` group (built with Click-Extra) only owns logging:
verbosity, per-logger levels and the flight recorder. The exercise commands
live in `drills.entrypoints.cli.commands` and are registered below.

Examples
    $ drills --version
    $ drills discount 10 SAVE10
    $ drills -v status
    $ DRILLS_OPEN_HOUR=9 drills status
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from drills import __version__
from drills.logging import configure_logging, log_startup, verbosity_to_level

from .commands import COMMANDS
from .helpers import parse_log_level

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = Path(user_log_dir("drills", appauthor=False)) / "latest.log"

HELP = """DRILLS command-line interface.

    Run the exercise set from the terminal: apply coupons, validate sign-up
    input, check driving ages, and see whether the shop is open.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    default=0,
    help="Show more console logging (INFO, then DEBUG). Repeatable.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    default=0,
    help="Show less console logging (ERROR, then CRITICAL). Repeatable.",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Log everything with timestamps, logger names and source locations.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar="DRILLS_LOG_PATH",
    show_default=True,
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=2000,
    hidden=True,
    envvar="DRILLS_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Number of log records the flight recorder keeps.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    default=True,
    show_envvar=True,
    help=(
        "Keep recent DEBUG records in memory (regardless of -v/-q) and write "
        "them to --log-path once a WARNING or ERROR is logged."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    default=False,
    show_default=True,
    show_envvar=True,
    help="Also write the flight recorder to --log-path on exit.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    default=("asyncio=WARNING",),
    show_default=True,
    show_envvar=True,
    help=(
        "Minimum level for a logger as NAME=LEVEL, applied to console and "
        "flight recorder alike. Repeatable, or a comma/space list in "
        "DRILLS_LOGGER_LEVEL."
    ),
)
@clickx.pass_context
def drills(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """DRILLS command-line interface."""
    level = verbosity_to_level(verbose_count, quiet_count)
    if flight_recorder:
        log_path.parent.mkdir(parents=True, exist_ok=True)

    handlers = configure_logging(
        level=level,
        debug_mode=debug,
        color=ctx.color is not False,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


for _command in COMMANDS:
    drills.add_command(_command)
