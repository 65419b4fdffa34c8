"""Unit tests for `tidbits.arrays`."""

import re
from datetime import date

import pytest

from tidbits.arrays import dedupe_array, deep_flatten, filter_null_array, to_string_deep_force

# ---------------------------------------------------------------------------
# filter_null_array
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("items", "expected"),
    [
        ([1, None, 2], [1, 2]),
        ([1, None, [None], [2, None]], [1, [2]]),
        ([[None, [None]], 0, "", False], [0, "", False]),
        ((None, 3), [3]),
        ([], []),
        (None, None),
        ("abc", []),
        ({"a": None}, []),
    ],
)
def test_filter_null_array(items, expected):
    """None is removed at every depth and emptied nested lists are dropped."""
    assert filter_null_array(items) == expected


# ---------------------------------------------------------------------------
# deep_flatten
# ---------------------------------------------------------------------------


def test_deep_flatten():
    """Lists, tuples and sets are flattened; mappings stay whole."""
    assert deep_flatten([1, [2, (3, [4])], {"a": [5]}]) == [1, 2, 3, 4, {"a": [5]}]
    assert deep_flatten(7) == [7]


# ---------------------------------------------------------------------------
# dedupe_array
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("items", "kwargs", "expected"),
    [
        ([3, 1, 3, 2, 1], {}, [3, 1, 2]),
        ([1, "1", 1.0], {}, [1, "1"]),
        ([True, 1], {}, [True, 1]),
        ([{"a": 1}, {"a": 1}, {"a": 2}], {}, [{"a": 1}, {"a": 2}]),
        ([[1, 1], [1]], {}, [[1]]),
        ([float("nan"), float("nan")], {}, [float("nan")]),
        ([1, "1", [2, 2], [2]], {"force_to_string": "string_or_number"}, ["1", ["2"]]),
        ([None, "None", True, "True"], {"force_to_string": "primitives"}, ["None", "True"]),
        ([1, [2, [1, 3]]], {"flatten": True}, [1, 2, 3]),
    ],
)
def test_dedupe_array(items, kwargs, expected):
    """First occurrences are kept, in order, using deep equality."""
    result = dedupe_array(items, **kwargs)
    assert repr(result) == repr(expected)


def test_dedupe_array_returns_a_new_list():
    """The input is never modified."""
    items = [1, 1, 2]
    assert dedupe_array(items) == [1, 2]
    assert items == [1, 1, 2]


@pytest.mark.parametrize(
    ("items", "kwargs"),
    [
        ("abc", {}),
        (None, {}),
        ([1], {"force_to_string": True}),
        ([1], {"force_to_string": "everything"}),
        ([1], {"flatten": "yes"}),
    ],
)
def test_dedupe_array_rejects_invalid_arguments(items, kwargs):
    """Invalid arguments raise TypeError."""
    with pytest.raises(TypeError):
        dedupe_array(items, **kwargs)


# ---------------------------------------------------------------------------
# to_string_deep_force
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("value", "mode", "expected"),
    [
        (1, False, 1),
        (1, "string_or_number", "1"),
        (True, "string_or_number", True),
        (True, "primitives", "True"),
        (None, "primitives", "None"),
        (float("nan"), "primitives", "NaN"),
        ({"a": [1, None]}, "primitives", {"a": ["1", "None"]}),
        (date(2024, 1, 31), "primitives", date(2024, 1, 31)),
        (date(2024, 1, 31), "all", "2024-01-31"),
        (re.compile(r"\d+"), "all", r"\d+"),
        (ValueError("boom"), "all", "ValueError: boom"),
        ({3}, "all", ["3"]),
    ],
)
def test_to_string_deep_force(value, mode, expected):
    """Each mode converts a wider range of values."""
    assert to_string_deep_force(value, mode) == expected
