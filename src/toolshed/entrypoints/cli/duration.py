"""Duration commands: ``duration parse`` and ``duration format``."""

import logging
from datetime import timedelta

import click
import click_extra as clickx

from toolshed.durations import format_duration, parse_duration_with_default_unit
from toolshed.errors import DurationParseError

from .helpers import error

logger = logging.getLogger(__name__)


@click.group(cls=clickx.ExtraGroup)
def duration() -> None:
    """Parse and format human-friendly durations (e.g. 1d2h30m)."""


@duration.command("parse")
@click.argument("text")
@click.option(
    "--default-unit",
    default="s",
    show_default=True,
    help="Unit applied to a bare number.",
)
@click.option(
    "--seconds", "as_seconds", is_flag=True, help="Print total seconds instead."
)
@click.pass_context
def parse_cmd(
    ctx: click.Context, text: str, default_unit: str, as_seconds: bool
) -> None:
    """Parse TEXT and print it in canonical form."""
    try:
        td = parse_duration_with_default_unit(text, default_unit)
    except DurationParseError as e:
        logger.debug("Could not parse duration", exc_info=True)
        error(str(e))
        ctx.exit(1)
    click.echo(f"{td.total_seconds():g}" if as_seconds else format_duration(td))


@duration.command("format")
@click.argument("seconds", type=float)
def format_cmd(seconds: float) -> None:
    """Format a number of SECONDS, e.g. 90061 -> 1d1h1m1s."""
    try:
        td = timedelta(seconds=seconds)
    except (OverflowError, ValueError) as e:
        raise click.BadParameter(
            f"{seconds:g} seconds is not a representable duration",
            param_hint="SECONDS",
        ) from e
    click.echo(format_duration(td))
