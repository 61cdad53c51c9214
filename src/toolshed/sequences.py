"""Ordering and set-like operations over sequences.

Every function treats its inputs as read-only and returns a new list. Where
duplicates are removed, output keeps *first-seen* order. None of the functions
raise on empty input.

Natural ordering
----------------
`sort_natural` splits strings into alternating runs of decimal digits and
non-digits ("chunks") and compares them position by position: two numeric
chunks compare by magnitude, any other pairing compares as plain text. A string
that runs out of chunks sorts first, so ``"item2" < "item10"`` and
``"v1" < "v1.1"``.
"""

import functools
import re
import unicodedata
from collections.abc import Callable, Hashable, Iterable, Sequence
from dataclasses import fields, is_dataclass
from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

type MapFunc[T] = Callable[[T], T]
type SelectFunc[T] = Callable[[T], bool]
type KeyValueGenerator[K, V] = Callable[[K], tuple[K, V]]

_TOKEN_SEPARATORS = re.compile(r"[\s,]+")
_SCALAR_TYPES = (str, bytes, int, float, complex, list, dict, set, frozenset)


# ============================================================================
#                               Emptiness
# ============================================================================


@runtime_checkable
class SupportsIsEmpty(Protocol):  # pylint: disable=too-few-public-methods
    """Values that define their own notion of "empty"."""

    def is_empty(self) -> bool:
        """Return True if the value should be treated as empty."""


def is_zero(value: Any) -> bool:
    """Check whether `value` is empty / the default for its type.

    Rules, first match wins:

    * ``None`` is empty.
    * Objects implementing `SupportsIsEmpty` decide for themselves.
    * Dataclass instances and tuples are empty when all members are empty.
    * Builtin scalars and containers are empty when equal to their type's
      default (``0``, ``""``, ``b""``, ``[]``, ``{}``, ...).
    * Anything else is not empty.
    """
    if value is None:
        return True
    if isinstance(value, SupportsIsEmpty):
        return value.is_empty()
    if is_dataclass(value) and not isinstance(value, type):
        return all(is_zero(getattr(value, f.name)) for f in fields(value))
    if isinstance(value, tuple):
        return all(is_zero(v) for v in value)
    for base in _SCALAR_TYPES:
        # compare against the builtin default, not the subclass (enum members)
        if isinstance(value, base):
            return value == base()
    return False


def is_not_zero(value: Any) -> bool:
    """Inverse of `is_zero`."""
    return not is_zero(value)


def first_non_empty(*values: T) -> T | None:
    """Return the first non-empty argument, or None.

    To use a fallback, pass it as the last argument.
    """
    for v in values:
        if not is_zero(v):
            return v
    return None


# ============================================================================
#                               Map / select
# ============================================================================


def map_values(values: Sequence[T] | None, *funcs: MapFunc[T]) -> list[T] | None:
    """Apply `funcs` in order to every value and return the results.

    ``None`` input yields ``None``.
    """
    if values is None:
        return None

    mapped = list(values)
    for i, v in enumerate(mapped):
        for f in funcs:
            v = f(v)
        mapped[i] = v
    return mapped


def select(
    values: Sequence[T] | None, *funcs: SelectFunc[T] | None
) -> list[T] | None:
    """Return the values for which any of `funcs` returns True.

    Without predicates, `is_not_zero` is used to drop empty values. ``None``
    predicates are ignored and ``None`` input yields ``None``.
    """
    if values is None:
        return None

    predicates = [f for f in funcs if f is not None] if funcs else [is_not_zero]
    return [v for v in values if any(f(v) for f in predicates)]


# ============================================================================
#                               Set-like operations
# ============================================================================


def unique(values: Iterable[H] | None) -> list[H] | None:
    """Return `values` with duplicates removed, keeping first-seen order.

    ``None`` input yields ``None`` so callers can keep absent and empty apart.
    """
    if values is None:
        return None
    return list(dict.fromkeys(values))


def includes(values: Iterable[T], value: T) -> bool:
    """Return True if `value` is one of `values`."""
    for v in values:
        if v == value:
            return True
    return False


def minus(s1: Iterable[H], s2: Iterable[H]) -> list[H]:
    """Return the elements of `s1` that are not present in `s2`, in `s1` order.

    Example:
        ``minus([1, 2, 3, 4], [1, 3]) == [2, 4]``
    """
    excluded = set(s2)
    return [v for v in s1 if v not in excluded]


def merge(*sequences: Iterable[H]) -> list[H]:
    """Return the union of all sequences in first-seen order.

    Example:
        ``merge([1, 2], [2, 3, 4]) == [1, 2, 3, 4]``
    """
    seen: dict[H, None] = {}
    for s in sequences:
        seen.update(dict.fromkeys(s))
    return list(seen)


def tokens(*values: str) -> list[str]:
    """Split values at whitespace or commas and return lower-cased unique tokens.

    Example:
        ``tokens("a, b", "B c") == ["a", "b", "c"]``
    """
    found: dict[str, None] = {}
    for v in values:
        for token in _TOKEN_SEPARATORS.split(v):
            if token:
                found.setdefault(token.lower())
    return list(found)


# ============================================================================
#                               Ordering
# ============================================================================


def sort(values: Iterable[T]) -> list[T]:
    """Return a sorted copy of `values`.

    Example:
        ``sort([3, 2, 4, 1]) == [1, 2, 3, 4]``
    """
    return sorted(values)  # type: ignore[type-var]


def _next_chunk(s: str, start: int) -> tuple[str, bool, int]:
    """Return ``(chunk, is_numeric, end)`` for the run starting at `start`."""
    numeric = s[start].isdecimal()
    end = start + 1
    while end < len(s) and s[end].isdecimal() == numeric:
        end += 1
    chunk = s[start:end]
    if numeric:
        # ASCII digits without leading zeros, so any two numeric chunks compare
        # by length then text
        chunk = "".join(str(unicodedata.decimal(c)) for c in chunk)
        chunk = chunk.lstrip("0") or "0"
    return chunk, numeric, end


def natural_compare(s1: str, s2: str) -> int:
    """Compare two strings in natural order.

    Returns:
        A negative number, zero or a positive number when `s1` sorts before,
        together with, or after `s2`.
    """
    i = j = 0
    while True:
        if i >= len(s1) or j >= len(s2):
            # an exhausted string sorts first
            return (i < len(s1)) - (j < len(s2))

        chunk1, numeric1, i = _next_chunk(s1, i)
        chunk2, numeric2, j = _next_chunk(s2, j)
        if chunk1 == chunk2:
            continue
        if numeric1 and numeric2 and len(chunk1) != len(chunk2):
            return -1 if len(chunk1) < len(chunk2) else 1
        return -1 if chunk1 < chunk2 else 1


def natural_less(s1: str, s2: str) -> bool:
    """Return True if `s1` sorts strictly before `s2` in natural order."""
    return natural_compare(s1, s2) < 0


def sort_natural(values: Iterable[str], ignore_case: bool = False) -> list[str]:
    """Return a naturally sorted copy of `values`.

    Args:
        values: Strings to sort.
        ignore_case: Compare lower-cased strings; returned values keep their case.

    Example:
        ``sort_natural(["v1.10.3", "v1.5.1", "v1.10.1"])``
        returns ``["v1.5.1", "v1.10.1", "v1.10.3"]``.
    """
    if ignore_case:
        key = functools.cmp_to_key(lambda a, b: natural_compare(a.lower(), b.lower()))
    else:
        key = functools.cmp_to_key(natural_compare)
    return sorted(values, key=key)


# ============================================================================
#                               Mapping helpers
# ============================================================================


def to_map(keys: Iterable[K], gen: KeyValueGenerator[K, V]) -> dict[K, V]:
    """Build a dict from the ``(key, value)`` pairs `gen` returns for each key.

    Pairs whose generated key is empty (see `is_zero`) are skipped.
    """
    m: dict[K, V] = {}
    for key in keys:
        new_key, val = gen(key)
        if not is_zero(new_key):
            m[new_key] = val
    return m


def to_map_with_value(keys: Iterable[K], value: V) -> dict[K, V]:
    """Return a dict with every (non-empty) key mapped to `value`."""
    return to_map(keys, lambda k: (k, value))
