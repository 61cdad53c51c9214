"""Line-oriented sequence commands: ``sort``, ``unique`` and ``tokens``."""

import logging
from typing import TextIO

import click

from toolshed import sequences

logger = logging.getLogger(__name__)


def _read_lines(stream: TextIO) -> list[str]:
    return [line.rstrip("\r\n") for line in stream]


def _echo_lines(lines: list[str]) -> None:
    for line in lines:
        click.echo(line)


@click.command("sort")
@click.argument("source", type=click.File("r"), default="-")
@click.option(
    "--natural/--plain",
    default=True,
    show_default=True,
    help="Compare embedded numbers by value (v1.5 < v1.10) or plain text.",
)
@click.option("--ignore-case", "-i", is_flag=True, help="Fold case when comparing.")
@click.option("--unique", "-u", "dedup", is_flag=True, help="Drop duplicate lines.")
def sort_cmd(source: TextIO, natural: bool, ignore_case: bool, dedup: bool) -> None:
    """Sort the lines of SOURCE (default: stdin)."""
    lines = _read_lines(source)
    if dedup:
        lines = sequences.unique(lines) or []
    if natural:
        result = sequences.sort_natural(lines, ignore_case=ignore_case)
    elif ignore_case:
        result = sorted(lines, key=str.lower)
    else:
        result = sequences.sort(lines)
    logger.debug("Sorted %d line(s)", len(result))
    _echo_lines(result)


@click.command("unique")
@click.argument("source", type=click.File("r"), default="-")
def unique_cmd(source: TextIO) -> None:
    """Print the lines of SOURCE without duplicates, in first-seen order."""
    _echo_lines(sequences.unique(_read_lines(source)) or [])


@click.command("tokens")
@click.argument("values", nargs=-1)
def tokens_cmd(values: tuple[str, ...]) -> None:
    """Split VALUES at whitespace/commas and print unique lower-cased tokens."""
    _echo_lines(sequences.tokens(*values))
