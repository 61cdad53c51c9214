"""Click callback for octal file-mode options."""

import click

from toolshed import config
from toolshed.errors import InvalidFileModeError


def parse_mode(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | None,
) -> int:
    """Parse an octal mode such as ``600``; fall back to the configured default.

    Raises:
        click.BadParameter: If the value (or ``TOOLSHED_FILE_MODE``) is not octal.
    """
    try:
        if value is None:
            return config.get_file_mode()
        return config.parse_file_mode(value)
    except InvalidFileModeError as e:
        raise click.BadParameter(str(e)) from e
