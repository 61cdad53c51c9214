"""Configuration utilities for toolshed.

This module centralizes small helpers and constants related to configuration.
Configuration is read from the environment only.
"""

import os

from toolshed.errors import InvalidFileModeError

DEFAULT_FILE_MODE = 0o644
MAX_FILE_MODE = 0o7777

FILE_MODE_ENVVAR = "TOOLSHED_FILE_MODE"  # pragma: no mutate


def parse_file_mode(value: str) -> int:
    """Parse an octal permission string such as ``"644"`` or ``"0o600"``.

    Args:
        value: The textual mode.

    Returns:
        The numeric permission bits.

    Raises:
        InvalidFileModeError: If the value is not octal or out of range.
    """
    text = value.strip().lower().removeprefix("0o")
    try:
        mode = int(text, 8)
    except ValueError as e:
        raise InvalidFileModeError(value) from e
    if not 0 <= mode <= MAX_FILE_MODE:
        raise InvalidFileModeError(value)
    return mode


def get_file_mode() -> int:
    """Get the default file mode from the environment.

    Returns:
        The value of `TOOLSHED_FILE_MODE` parsed as octal, or
        `DEFAULT_FILE_MODE` when the variable is unset or empty.

    Raises:
        InvalidFileModeError: If `TOOLSHED_FILE_MODE` is set but invalid.
    """
    if not (value := os.environ.get(FILE_MODE_ENVVAR)):
        return DEFAULT_FILE_MODE
    return parse_file_mode(value)
