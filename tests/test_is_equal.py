import logging
import math
from collections import OrderedDict
from collections.abc import Mapping

import numpy as np
import pytest

from fnkit import Nil
from fnkit.types.table import Table, set_metadata
from fnkit.values import is_equal, primitive_equal


def _fn(x):
    return x


@pytest.mark.parametrize(
    "a,b,expected",
    [
        # Primitives
        (1, 1, True),
        (1, 1.0, True),
        (1, 2, False),
        ("a", "a", True),
        ("a", "b", False),
        (True, True, True),
        (True, 1, False),          # different kinds
        (False, 0, False),
        (None, None, True),
        (None, Nil, True),
        (_fn, _fn, True),
        (_fn, lambda x: x, False),
        # Containers vs non-containers
        ({}, None, False),
        ([], "", False),
        ({}, 0, False),
        # Containers
        ({}, {}, True),
        ([], [], True),
        ([], {}, True),            # both empty containers
        ({"a": 1, "b": {"c": 2}}, {"a": 1, "b": {"c": 2}}, True),
        ({"a": 1, "b": {"c": 2}}, {"a": 1, "b": {"c": 3}}, False),
        ({"a": 1}, {"a": 1, "b": 2}, False),
        ({"a": 1, "b": 2}, {"a": 1}, False),
        ({"a": 1}, {"b": 1}, False),
        ({"a": None}, {}, False),
        ({"a": None}, {"a": None}, True),
        ([1, 2, [3, 4]], [1, 2, [3, 4]], True),
        ([1, 2, [3, 4]], [1, 2, [3, 5]], False),
        ([1, 2], [2, 1], False),
        ([1, 2], (1, 2), True),
        ([1, 2], {1: 1, 2: 2}, True),
        ([1, 2], {0: 1, 1: 2}, False),
        ({1: "x", 2: "y"}, Table({1: "x", 2: "y"}), True),
        (OrderedDict([("a", 1), ("b", 2)]), {"b": 2, "a": 1}, True),
        ({"k": [1, {"deep": True}]}, {"k": [1, {"deep": 1}]}, False),
    ]
)
def test_is_equal(a, b, expected):
    assert is_equal(a, b) is expected
    assert is_equal(b, a) is expected


def test_is_equal_distinct_instances():
    a = {"a": 1, "b": {"c": 2}}
    b = {"a": 1, "b": {"c": 2}}
    assert a is not b
    assert is_equal(a, b)


def test_nan_is_not_equal_to_itself():
    assert not is_equal(math.nan, math.nan)
    # The identity fast path only exists for containers
    box = [math.nan]
    assert is_equal(box, box)
    assert not is_equal([math.nan], [math.nan])


def test_numpy_arrays_compare_elementwise():
    assert is_equal(np.arange(3), np.arange(3))
    assert not is_equal(np.arange(3), np.arange(4))
    assert is_equal({"w": np.ones(2)}, {"w": np.ones(2)})


def test_primitive_equal_uses_reference_for_containers():
    a = [1]
    assert primitive_equal(a, a)
    assert not primitive_equal(a, [1])
    assert primitive_equal(3, 3.0)
    assert not primitive_equal(1, True)


def test_acyclic_results_match_in_both_modes(cycle_mode):
    a = {"list": [1, 2, {"x": (3, 4)}], "n": None}
    b = {"list": [1, 2, {"x": [3, 4]}], "n": None}
    assert is_equal(a, b)
    b["list"][2]["x"].append(5)
    assert not is_equal(a, b)


# -------------------------------
# Self-referential containers
# -------------------------------
def test_direct_self_reference_uses_identity(cycle_mode):
    a = []
    a.append(a)
    assert is_equal(a, a)


def test_distinct_cyclic_structures():
    a = {"name": "node"}
    a["self"] = a
    b = {"name": "node"}
    b["self"] = b
    assert is_equal(a, b)

    c = {"name": "other"}
    c["self"] = c
    assert not is_equal(a, c)


def test_indirect_cycle():
    a = {"id": 1}
    b = {"id": 2, "back": a}
    a["next"] = b

    x = {"id": 1}
    y = {"id": 2, "back": x}
    x["next"] = y

    assert is_equal(a, x)
    y["id"] = 3
    assert not is_equal(a, x)


class Fresh(Mapping):
    """Hands out a new one-item list on every lookup."""

    def __init__(self, values):
        self._values = values

    def __getitem__(self, key):
        return [self._values[key]]

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)


def test_children_created_during_comparison_are_compared(cycle_mode):
    # Each lookup builds a list that is dropped right after its comparison
    assert not is_equal(Fresh({"x": 1, "y": 1}), Fresh({"x": 1, "y": 2}))
    assert is_equal(Fresh({"x": 1, "y": 2}), Fresh({"x": 1, "y": 2}))


def test_indirect_cycle_without_guard_recurses_forever(naive_mode):
    a = {}
    a["self"] = a
    b = {}
    b["self"] = b
    with pytest.raises(RecursionError):
        is_equal(a, b)


def test_cycle_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="fnkit.values")
    a = []
    a.append(a)
    b = []
    b.append(b)
    assert is_equal(a, b)
    assert any("Cycle detected" in record.getMessage() for record in caplog.records)


# -------------------------------
# Metadata overrides
# -------------------------------
def _same_id(a, b):
    return a["id"] == b["id"]


def test_is_equal_defers_to_shared_override():
    meta = {"__eq": _same_id}
    a = set_metadata(Table(id=1, name="left"), meta)
    b = set_metadata(Table(id=1, name="right"), meta)
    assert is_equal(a, b)
    b["id"] = 2
    assert not is_equal(a, b)


def test_override_is_not_structural():
    # Identical contents, but the override says no
    meta = {"__eq": lambda a, b: False}
    a = set_metadata(Table(x=1), meta)
    b = set_metadata(Table(x=1), meta)
    assert not is_equal(a, b)
    assert is_equal(a, a)


def test_one_sided_or_different_overrides_are_unequal():
    a = set_metadata(Table(id=1), {"__eq": _same_id})
    b = set_metadata(Table(id=1), {"__eq": lambda x, y: True})
    plain = Table(id=1)
    assert not is_equal(a, b)
    assert not is_equal(a, plain)
    assert not is_equal(plain, a)
    assert not is_equal(a, {"id": 1})


def test_metadata_without_eq_compares_structurally():
    a = set_metadata(Table(x=1), {"__index": {"y": 2}})
    b = set_metadata(Table(x=1), {"__index": {"y": 2}})
    assert is_equal(a, b)


def test_prototype_fields_count_as_present():
    # b answers "y" through its prototype, so a's "y" is matched
    a = {"x": 1, "y": 2}
    b = set_metadata(Table(x=1), {"__index": {"y": 2}})
    assert is_equal(a, b)
    assert is_equal(b, a)
