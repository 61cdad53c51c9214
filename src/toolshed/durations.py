"""Human-friendly duration strings.

`parse_duration` accepts compact strings such as ``"1h30m"``, ``"2 days 4h"``
or ``"-1.5w"``; `format_duration` renders a `timedelta` back into the same
notation using the largest units first (``"1d1h1m30s"``).

Years are 365 days and weeks 7 days; there is no calendar awareness.
Resolution is that of `timedelta` (microseconds), so nanosecond inputs are
rounded.
"""

import re
from datetime import timedelta

from toolshed.errors import DurationParseError

_NUMBER_UNIT = r"(\d+(?:\.\d+)?)([a-zµμ]+)"
_DURATION_PART = re.compile(_NUMBER_UNIT)
_VALID_DURATION = re.compile(rf"[+-]?({_NUMBER_UNIT})+")

_US_PER_MS = 1_000
_US_PER_SECOND = 1_000_000
_US_PER_MINUTE = 60 * _US_PER_SECOND
_US_PER_HOUR = 60 * _US_PER_MINUTE
_US_PER_DAY = 24 * _US_PER_HOUR
_US_PER_WEEK = 7 * _US_PER_DAY
_US_PER_YEAR = 365 * _US_PER_DAY

# unit alias -> microseconds
UNITS: dict[str, float] = {}
for _aliases, _us in (
    (("ns", "nsec", "nsecs", "nanosecond", "nanoseconds"), 0.001),
    (("µs", "μs", "us", "musec", "musecs", "microsecond", "microseconds"), 1),
    (("ms", "msec", "msecs", "millisecond", "milliseconds"), _US_PER_MS),
    (("s", "sec", "secs", "second", "seconds"), _US_PER_SECOND),
    (("m", "min", "mins", "minute", "minutes"), _US_PER_MINUTE),
    (("h", "hr", "hrs", "hour", "hours"), _US_PER_HOUR),
    (("d", "day", "days"), _US_PER_DAY),
    (("w", "wk", "wks", "week", "weeks"), _US_PER_WEEK),
    (("y", "yr", "yrs", "year", "years"), _US_PER_YEAR),
):
    UNITS.update(dict.fromkeys(_aliases, _us))


def _clean(text: str) -> str:
    return "".join(text.split()).lower()


def parse_duration(text: str) -> timedelta:
    """Parse a duration string such as ``"1h30m"`` or ``"2.5 days"``.

    Whitespace is ignored and units are case-insensitive. A leading ``-``
    negates the whole duration.

    Raises:
        DurationParseError: If the string is malformed, uses an unknown unit
            or exceeds the range of `timedelta`.
    """
    cleaned = _clean(text)
    if not _VALID_DURATION.fullmatch(cleaned):
        raise DurationParseError(text)

    total_us = 0.0
    for number, unit in _DURATION_PART.findall(cleaned):
        if (factor := UNITS.get(unit)) is None:
            raise DurationParseError(text, f"invalid unit {unit!r} in duration")
        total_us += float(number) * factor

    if cleaned.startswith("-"):
        total_us = -total_us
    try:
        return timedelta(microseconds=total_us)
    except OverflowError as e:
        raise DurationParseError(text, "duration out of range") from e


def parse_duration_with_default_unit(text: str, default_unit: str) -> timedelta:
    """Like `parse_duration`, but a bare number is read in `default_unit`.

    Example:
        ``parse_duration_with_default_unit("90", "s") == timedelta(seconds=90)``
    """
    cleaned = _clean(text)
    try:
        float(cleaned)
    except ValueError:
        return parse_duration(text)
    return parse_duration(cleaned + default_unit)


def _trim_fraction(whole: int, fraction: int, digits: int) -> str:
    if not fraction:
        return str(whole)
    return f"{whole}.{fraction:0{digits}d}".rstrip("0")


def _format_sub_day(us: int) -> str:
    """Render less than a day in ``1h2m3.5s`` / ``1.5ms`` / ``250µs`` notation."""
    if us < _US_PER_MS:
        return f"{us}µs"
    if us < _US_PER_SECOND:
        return _trim_fraction(us // _US_PER_MS, us % _US_PER_MS, 3) + "ms"

    out = _trim_fraction((us % _US_PER_MINUTE) // _US_PER_SECOND, us % _US_PER_SECOND, 6)
    out += "s"
    if us >= _US_PER_MINUTE:
        out = f"{(us % _US_PER_HOUR) // _US_PER_MINUTE}m{out}"
    if us >= _US_PER_HOUR:
        out = f"{us // _US_PER_HOUR}h{out}"
    return out


def format_duration(duration: timedelta) -> str:
    """Format `duration` in the notation accepted by `parse_duration`.

    The largest suitable unit comes first, followed by the next largest, and
    so on: 25 hours and 90 seconds is ``"1d1h1m30s"``. Zero is ``"0s"``.
    """
    us = (duration.days * 86_400 + duration.seconds) * _US_PER_SECOND
    us += duration.microseconds

    parts: list[str] = []
    if us < 0:
        us = -us
        parts.append("-")

    for size, suffix in ((_US_PER_YEAR, "y"), (_US_PER_WEEK, "w"), (_US_PER_DAY, "d")):
        count, us = divmod(us, size)
        if count:
            parts.append(f"{count}{suffix}")

    if us:
        parts.append(_format_sub_day(us))

    if not parts:
        return "0s"
    return "".join(parts)
