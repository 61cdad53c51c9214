"""File commands: ``save`` (atomic write from stdin) and ``resolve``."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from toolshed.errors import AtomicWriteError
from toolshed.fileio import resolve_files, resolve_path, save_bytes, save_json

from .helpers import error, parse_mode, success, warn

logger = logging.getLogger(__name__)


@click.command("save")
@click.argument("destination", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--mode",
    "mode",
    callback=parse_mode,
    help="Octal permissions of the written file [default: TOOLSHED_FILE_MODE or 644].",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Validate stdin as JSON and re-encode it.",
)
@click.option("--pretty", is_flag=True, help="Indent JSON output (implies --json).")
@click.pass_context
def save_cmd(
    ctx: click.Context, destination: Path, mode: int, as_json: bool, pretty: bool
) -> None:
    """Atomically write stdin to DESTINATION.

    Readers of DESTINATION see either the old content or the new content,
    never a partial file. One missing parent directory is created.
    """
    data = click.get_binary_stream("stdin").read()

    if destination.exists():
        warn(f"Replacing existing file {destination}")

    try:
        if as_json or pretty:
            try:
                value = json.loads(data)
            except json.JSONDecodeError as e:
                raise click.BadParameter(f"stdin is not valid JSON: {e}") from e
            save_json(destination, value, pretty=pretty, mode=mode)
        else:
            save_bytes(destination, data, mode=mode)
    except AtomicWriteError as e:
        logger.debug("Atomic write failed", exc_info=True)
        error(f"{e} ({e.__cause__})")
        ctx.exit(1)

    success(f"Wrote {destination}")


@click.command("resolve")
@click.argument("pattern")
@click.option("--files-only", "-f", is_flag=True, help="Only list regular files.")
def resolve_cmd(pattern: str, files_only: bool) -> None:
    """List paths matching PATTERN (a path or a glob)."""
    try:
        paths = resolve_files(pattern) if files_only else resolve_path(pattern)
    except FileNotFoundError as e:
        raise click.ClickException(f"No such file or directory: {pattern}") from e
    for path in paths:
        click.echo(str(path))
