"""Coerce loosely typed values (env vars, CLI flags, config) to on/off states."""

import re
from typing import Any

ON_WORDS = frozenset({"1", "on", "yes", "y", "enabled", "active", "true", "t", "+"})
OFF_WORDS = frozenset(
    {"0", "off", "no", "n", "disabled", "inactive", "false", "f", "-"}
)

_INTEGER = re.compile(r"[+-]?\d+")


def _check_state(value: Any, condition: bool, default: bool) -> bool:
    s = str(value).lower()

    if s in ON_WORDS:
        return condition
    if s in OFF_WORDS:
        return not condition

    if _INTEGER.fullmatch(s):
        n = int(s)
        return n > 0 if condition else n <= 0
    return default


def is_on(value: Any, default: bool) -> bool:
    """Check if `value` indicates an enabled state.

    Recognizes words such as ``yes``, ``on``, ``enabled`` and ``true`` (any
    case), and integers greater than zero. Returns `default` when the state
    cannot be determined.
    """
    return _check_state(value, True, default)


def is_off(value: Any, default: bool) -> bool:
    """Check if `value` indicates a disabled state.

    Recognizes words such as ``no``, ``off``, ``disabled`` and ``false`` (any
    case), and integers less than or equal to zero. Returns `default` when the
    state cannot be determined.
    """
    return _check_state(value, False, default)
