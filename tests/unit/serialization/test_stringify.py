"""Unit tests for `tidbits.serialization.stringify`."""

import json
import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone

import pytest

from tidbits.serialization import CIRCULAR_MARKER, safe_stable_stringify


def test_keys_are_sorted_by_default():
    """Equal mappings serialize identically whatever their insertion order."""
    assert safe_stable_stringify({"b": 1, "a": 2}) == '{"a":2,"b":1}'
    assert safe_stable_stringify({"b": 1, "a": 2}) == safe_stable_stringify({"a": 2, "b": 1})


def test_key_order_can_be_kept():
    """sort_keys=False keeps insertion order."""
    assert safe_stable_stringify({"b": 1, "a": 2}, sort_keys=False) == '{"b":1,"a":2}'


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, "null"),
        (float("nan"), "null"),
        ([1, float("inf"), -float("inf")], "[1,null,null]"),
        (10**30, "1000000000000000000000000000000"),
        ("héllo", '"héllo"'),
        (True, "true"),
        (date(2024, 1, 31), '"2024-01-31"'),
        (datetime(2024, 1, 31, 10, 0, tzinfo=timezone.utc), '"2024-01-31T10:00:00+00:00"'),
        ({1, 1}, '{"set":[1]}'),
        ((1, 2), "[1,2]"),
    ],
)
def test_awkward_values(value, expected):
    """Non-JSON values get stable, documented representations."""
    assert safe_stable_stringify(value) == expected


def test_callables_are_omitted():
    """Functions disappear from mappings and become null in lists."""
    assert safe_stable_stringify({"a": 1, "f": len}) == '{"a":1}'
    assert safe_stable_stringify([len, 1]) == "[null,1]"


def test_circular_references():
    """Reference cycles are replaced by a marker instead of recursing forever."""
    data: dict = {"name": "root"}
    data["self"] = data
    assert json.loads(safe_stable_stringify(data)) == {"name": "root", "self": CIRCULAR_MARKER}


def test_shared_references_are_not_circular():
    """The same object appearing twice (without a cycle) is serialized twice."""
    shared = {"x": 1}
    assert safe_stable_stringify([shared, shared]) == '[{"x":1},{"x":1}]'


def test_ignore_order():
    """ignore_order sorts primitives first so reordered lists match."""
    a = safe_stable_stringify([3, {"k": 1}, 1, "b"], ignore_order=True)
    b = safe_stable_stringify(["b", 1, {"k": 1}, 3], ignore_order=True)
    assert a == b == '[1,3,"b",{"k":1}]'


def test_pretty():
    """pretty=True indents by two spaces."""
    assert safe_stable_stringify({"a": [1]}, pretty=True) == '{\n  "a": [\n    1\n  ]\n}'


def test_objects_are_serialized_by_their_attributes():
    """Dataclasses and plain objects are treated as mappings."""

    @dataclass
    class Money:
        """Amount with currency."""

        currency: str
        amount: int

    class Tag:  # pylint: disable=too-few-public-methods
        """Plain object."""

        def __init__(self) -> None:
            self.name = "vip"

    assert safe_stable_stringify(Money("IDR", 1500)) == '{"amount":1500,"currency":"IDR"}'
    assert safe_stable_stringify(Tag()) == '{"name":"vip"}'


@pytest.mark.parametrize("flag", ["sort_keys", "ignore_order", "pretty"])
def test_flags_must_be_bools(flag):
    """Non-bool flags are programming errors."""
    with pytest.raises(TypeError):
        safe_stable_stringify({}, **{flag: "yes"})


def test_failures_fall_back_to_empty_object(caplog):
    """A serialization failure is logged and yields '{}'."""
    deep: list = []
    node = deep
    for _ in range(100_000):
        node.append([])
        node = node[0]
    with caplog.at_level(logging.WARNING, logger="tidbits.serialization.stringify"):
        assert safe_stable_stringify(deep) == "{}"
    assert "safe_stable_stringify failed" in caplog.text
