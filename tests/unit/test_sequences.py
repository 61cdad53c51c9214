"""Unit tests for toolshed.sequences."""

from dataclasses import dataclass
from enum import IntEnum, StrEnum

import pytest

from toolshed.sequences import (
    first_non_empty,
    includes,
    is_not_zero,
    is_zero,
    map_values,
    merge,
    minus,
    natural_compare,
    natural_less,
    select,
    sort,
    sort_natural,
    to_map,
    to_map_with_value,
    tokens,
    unique,
)

# pylint: disable=missing-class-docstring, magic-value-comparison


# ============================================================================
#                               Emptiness
# ============================================================================


@dataclass
class Point:
    x: int
    y: int


class Color(StrEnum):
    NONE = ""
    RED = "red"


class Level(IntEnum):
    OFF = 0
    LOW = 1


class Bag:
    def __init__(self, items):
        self.items = items

    def is_empty(self) -> bool:
        """Empty when it holds no items."""
        return not self.items


@pytest.mark.parametrize(
    "value",
    [
        None,
        0,
        0.0,
        "",
        b"",
        False,
        [],
        {},
        set(),
        (),
        (0, ""),
        Point(0, 0),
        Bag([]),
        Color.NONE,
        Level.OFF,
    ],
)
def test_is_zero_true(value):
    """Defaults, empty containers and structurally empty records are zero."""
    assert is_zero(value)
    assert not is_not_zero(value)


@pytest.mark.parametrize(
    "value",
    [
        1,
        -0.5,
        "a",
        b"x",
        True,
        [0],
        {"a": 0},
        (0, 1),
        Point(0, 1),
        Bag([1]),
        object(),
        Color.RED,
        Level.LOW,
    ],
)
def test_is_zero_false(value):
    """Anything carrying a value is not zero."""
    assert not is_zero(value)
    assert is_not_zero(value)


def test_first_non_empty():
    """The first non-empty argument wins; a trailing value acts as fallback."""
    assert first_non_empty("", None, "x", "y") == "x"
    assert first_non_empty(0, 0, 7) == 7
    assert first_non_empty("", "") is None
    assert first_non_empty() is None


# ============================================================================
#                               Map / select
# ============================================================================


def test_map_values_applies_funcs_in_order():
    """Functions are applied left to right to every element."""
    values = ["a", "b"]
    assert map_values(values, str.upper, lambda s: s + "!") == ["A!", "B!"]
    assert values == ["a", "b"]


def test_map_values_none_and_no_funcs():
    """None stays None; without functions a copy is returned."""
    assert map_values(None, str.upper) is None
    values = [1, 2]
    copied = map_values(values)
    assert copied == [1, 2]
    assert copied is not values


def test_select_default_drops_empty_values():
    """Without predicates, empty values are filtered out."""
    assert select(["a", "", "b", ""]) == ["a", "b"]
    assert select([0, 1, 0, 2]) == [1, 2]
    assert select([Level.OFF, Level.LOW]) == [Level.LOW]
    assert first_non_empty(Color.NONE, Color.RED) is Color.RED


def test_select_any_predicate_matches():
    """A value is kept when any predicate accepts it; None predicates are ignored."""
    values = [1, 2, 3, 4, 5, 6]
    assert select(values, lambda v: v % 2 == 0, None, lambda v: v == 5) == [2, 4, 5, 6]


def test_select_none_and_empty():
    """None input gives None, empty input gives an empty list."""
    assert select(None) is None
    assert select([]) == []


# ============================================================================
#                               Set-like operations
# ============================================================================


def test_unique_keeps_first_seen_order():
    """Duplicates are dropped, first occurrences keep their position."""
    assert unique([3, 1, 3, 2, 1]) == [3, 1, 2]
    assert unique(["b", "a", "b"]) == ["b", "a"]


def test_unique_none_vs_empty():
    """None and empty inputs stay distinguishable."""
    assert unique(None) is None
    assert unique([]) == []


def test_unique_does_not_mutate_input():
    """The input list is left unchanged."""
    values = [1, 1, 2]
    unique(values)
    assert values == [1, 1, 2]


def test_includes():
    """Membership is a plain equality scan."""
    assert includes([1, 2, 3], 2)
    assert not includes([1, 2, 3], 4)
    assert not includes([], 1)


def test_minus():
    """Elements of the first sequence absent from the second, in order."""
    assert minus([1, 2, 3, 4], [1, 3]) == [2, 4]
    assert minus([4, 3, 2, 1, 2], [3]) == [4, 2, 1, 2]
    assert minus([1, 2], []) == [1, 2]
    assert minus([], [1]) == []


def test_minus_keeps_empty_values():
    """Zero values are compared like any other value."""
    assert minus([0, 1, ""], [1]) == [0, ""]
    assert minus([0, 1], [0]) == [1]


def test_merge():
    """Union of all inputs in first-seen order."""
    assert merge([1, 2], [2, 3, 4]) == [1, 2, 3, 4]
    assert merge([3, 3], [1], [], [3, 2]) == [3, 1, 2]
    assert merge() == []


@pytest.mark.parametrize(
    "values, expected",
    [
        (("a, b", "B c"), ["a", "b", "c"]),
        (("  Foo,,bar\tBAZ\nfoo ",), ["foo", "bar", "baz"]),
        (("", " , "), []),
        ((), []),
    ],
)
def test_tokens(values, expected):
    """Split at whitespace/comma runs, lower-case, dedupe across inputs."""
    assert tokens(*values) == expected


# ============================================================================
#                               Ordering
# ============================================================================


def test_sort_returns_sorted_copy():
    """Sort returns a new ascending list and leaves the input alone."""
    values = [3, 2, 4, 1]
    assert sort(values) == [1, 2, 3, 4]
    assert values == [3, 2, 4, 1]
    assert sort([]) == []


def test_sort_natural_versions():
    """Embedded numbers compare by magnitude."""
    assert sort_natural(["v1.10.3", "v1.5.1", "v1.10.1"]) == [
        "v1.5.1",
        "v1.10.1",
        "v1.10.3",
    ]


@pytest.mark.parametrize(
    "values, expected",
    [
        (["item10", "item2", "item1"], ["item1", "item2", "item10"]),
        (["a10b", "a9b", "a10a"], ["a9b", "a10a", "a10b"]),
        (["file007", "file7", "file10"], ["file007", "file7", "file10"]),
        (["v1.1", "v1"], ["v1", "v1.1"]),
        (["b", "a1", "1a"], ["1a", "a1", "b"]),
        (["", "a", ""], ["", "", "a"]),
    ],
)
def test_sort_natural_cases(values, expected):
    """Natural order edge cases: shorter strings first, zero padding ignored."""
    assert sort_natural(values) == expected


def test_sort_natural_ignore_case_preserves_original_values():
    """Case folding only affects comparison, not the returned strings."""
    values = ["b2", "B1", "a10", "A9"]
    assert sort_natural(values) == ["A9", "B1", "a10", "b2"]
    assert sort_natural(values, ignore_case=True) == ["A9", "a10", "B1", "b2"]


def test_sort_natural_does_not_mutate_input():
    """The input list is left unchanged."""
    values = ["x2", "x1"]
    sort_natural(values)
    assert values == ["x2", "x1"]


@pytest.mark.parametrize(
    "s1, s2, expected",
    [
        ("a2", "a10", -1),
        ("a10", "a2", 1),
        ("a01", "a1", 0),
        ("abc", "abc", 0),
        ("", "", 0),
        ("", "a", -1),
        ("a", "", 1),
        ("10", "a", -1),
    ],
)
def test_natural_compare(s1, s2, expected):
    """The comparison result has the expected sign."""
    result = natural_compare(s1, s2)
    assert (result > 0) - (result < 0) == expected
    assert natural_less(s1, s2) is (expected < 0)


def test_natural_compare_unicode_digits():
    """Non-ASCII decimal digits form numeric chunks too."""
    assert natural_less("x٢", "x١٠")  # Arabic-Indic 2 < 10
    assert natural_compare("x٠٥", "x٥") == 0  # leading Arabic-Indic zero
    assert natural_compare("x٣", "x3") == 0
    assert natural_less("item٩", "item10")


def test_natural_order_is_consistent_across_digit_scripts():
    """Mixing ASCII and non-ASCII digits with text still gives a total order."""
    assert natural_less("10", "a")
    assert natural_less("٣", "10")
    assert natural_less("٣", "a")
    assert sort_natural(["a", "10", "٣"]) == ["٣", "10", "a"]
    assert sort_natural(["10", "٣", "a"]) == ["٣", "10", "a"]


# ============================================================================
#                               Mapping helpers
# ============================================================================


def test_to_map_uses_generator_and_skips_empty_keys():
    """Generated pairs become entries; empty generated keys are dropped."""
    result = to_map(["a", "", "bb"], lambda k: (k.upper(), len(k)))
    assert result == {"A": 1, "BB": 2}


def test_to_map_with_value():
    """Every non-empty key maps to the same value."""
    assert to_map_with_value([1, 0, 2], True) == {1: True, 2: True}
