"""toolshed CLI entry point.

Defines the top-level ``toolshed`` command (via Click-Extra), configures
logging, and registers the subcommands.

Examples
    $ toolshed sort --ignore-case versions.txt
    $ toolshed tokens "a, b" "B c"
    $ toolshed duration parse "1d 2h"
    $ echo '{"a": 1}' | toolshed save --pretty state/settings.json
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from toolshed import __version__
from toolshed.logging import config_console_handler, config_flight_recorder, log_startup
from toolshed.shutdown import ShutdownSequence

from .duration import duration as duration_group
from .files import resolve_cmd, save_cmd
from .helpers import parse_log_level
from .sequences import sort_cmd, tokens_cmd, unique_cmd
from .state import state_cmd

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """toolshed command-line interface.

    Small everyday helpers: natural sorting and de-duplication of lines,
    token splitting, duration parsing, on/off interpretation and atomic file
    writes.
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
    help="Increase the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Decrease the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps, logger names and source paths).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path the flight recorder writes to.",
    default=Path(user_log_dir("toolshed", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="TOOLSHED_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="TOOLSHED_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity and write them to "
        "--log-path when a WARNING/ERROR occurs."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar="TOOLSHED_LOGGER_LEVELS",
    help=(
        "Set the minimum level of specific loggers (NAME=LEVEL). Repeatable, "
        "or a comma/space list via TOOLSHED_LOGGER_LEVELS."
    ),
    show_envvar=True,
)
@clickx.pass_context
def toolshed(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """toolshed command-line interface."""

    # 0) compute effective verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) console handler, plus flight recorder when enabled
    handlers: list[Handler] = [
        config_console_handler(
            level=level, debug_mode=debug, color=ctx.color is not False
        )
    ]
    if flight_recorder:
        handlers.append(
            config_flight_recorder(path=log_path, capacity=flight_recorder_capacity)
        )

    # 2) root logger captures everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path if flight_recorder else None,
        flight_recorder=flight_recorder,
        logger_levels=logger_levels,
    )

    # 3) cleanup runs after the subcommand returns
    shutdown = ShutdownSequence()
    shutdown.push(logging.shutdown)
    ctx.call_on_close(shutdown.run)


toolshed.add_command(sort_cmd)
toolshed.add_command(unique_cmd)
toolshed.add_command(tokens_cmd)
toolshed.add_command(duration_group)
toolshed.add_command(state_cmd)
toolshed.add_command(save_cmd)
toolshed.add_command(resolve_cmd)
