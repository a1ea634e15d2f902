"""Generic value operations: deep equality and deep copy.

Both walk arbitrarily nested containers. A mapping and a sequence are compared
through the same key/value view (see fnkit.types.container), so ``[a, b]`` equals
``{1: a, 2: b}``. Self-referential structures are handled by tracking what has
already been visited; setting FNKIT_CYCLE_SAFE=0 turns that bookkeeping off and
leaves the plain recursion, which only terminates on acyclic input.
"""

from __future__ import annotations

import logging
from collections import OrderedDict, defaultdict, deque
from collections.abc import MutableMapping, MutableSequence
from types import MappingProxyType
from typing import Optional

import numpy as np

from fnkit import Value
from fnkit.config import cycle_safe
from fnkit.errors import FnInvalidArgument
from fnkit.predicates import is_array, is_container
from fnkit.types.container import MISSING, entries, get_field, is_mapping, raw_get
from fnkit.types.kind import ValueKind, kind_of
from fnkit.types.table import Table, equality_override, set_metadata

logger = logging.getLogger(__name__)


# -------------------------------
# Primitive equality
# -------------------------------
def primitive_equal(a: Value, b: Value) -> bool:
    """Host-level ``==``: containers by reference, numpy arrays element-wise, the rest by value."""
    if kind_of(a) is not kind_of(b):
        return False
    if is_container(a):
        return a is b
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return bool(np.array_equal(a, b))
    return bool(a == b)


# -------------------------------
# Deep equality
# -------------------------------
def is_equal(a: Value, b: Value) -> bool:
    """Structural equality of two values, recursing into containers.

    Values of different kinds are never equal. Non-containers use
    primitive_equal. Containers are equal when they are the same object, when a
    shared ``"__eq"`` metadata override says so, or when every key of either side
    is present in the other with a deeply equal value.
    """
    visiting = {} if cycle_safe() else None
    return _is_equal(a, b, visiting)


def _is_equal(a: Value, b: Value, visiting: Optional[dict]) -> bool:
    kind = kind_of(a)
    if kind is not kind_of(b):
        return False
    if kind is not ValueKind.CONTAINER:
        return primitive_equal(a, b)

    if a is b:
        return True

    override = equality_override(a)
    other_override = equality_override(b)
    if override is not None or other_override is not None:
        # Only an override shared by both sides may decide; otherwise distinct objects differ
        logger.debug("Deferring equality of %s to its metadata override", type(a).__name__)
        return override is other_override and bool(override(a, b))

    if visiting is not None:
        pair = (id(a), id(b))
        if pair in visiting:
            # Already being compared further up; the outer comparison decides
            logger.debug("Cycle detected while comparing %s and %s", type(a).__name__, type(b).__name__)
            return True
        # Holding both sides keeps their ids from being reused mid-comparison
        visiting[pair] = (a, b)

    for key, value_a in entries(a):
        value_b = get_field(b, key)
        if value_b is MISSING or not _is_equal(value_a, value_b, visiting):
            return False

    # b may hold keys a never visited
    for key, _ in entries(b):
        if get_field(a, key) is MISSING:
            return False

    return True


# -------------------------------
# Deep copy
# -------------------------------
def copy(value: Value) -> Value:
    """Return a structural copy of ``value`` that shares no container with it.

    Non-containers (numbers, strings, booleans, nil, functions, opaque handles)
    come back as-is. Containers are rebuilt with the same type where that type
    can be built from its entries; Table metadata is deep-copied along with the
    entries. The source is never modified.
    """
    memo = _CopyMemo() if cycle_safe() else None
    return _copy(value, memo)


deep_copy = copy


class _CopyMemo:
    """Copies made so far, keyed by the id of their source.

    ``rebuilding`` holds the containers that can only be built once all their
    entries are copied, mapped to the number of copies that existed when their
    rebuild started. Coming back to one of them without any new copy in between
    means the cycle never passes through a container that was registered first.
    """

    __slots__ = ("copies", "rebuilding", "sources")

    def __init__(self):
        self.copies = {}
        self.rebuilding = {}
        # Keeps every source alive so its id is not reused mid-copy
        self.sources = []

    def remember(self, original, duplicate) -> None:
        self.copies[id(original)] = duplicate
        self.sources.append(original)


def _copy(value: Value, memo: Optional[_CopyMemo]) -> Value:
    if not is_container(value):
        return value
    if memo is not None and id(value) in memo.copies:
        logger.debug("Reusing copy of already visited %s", type(value).__name__)
        return memo.copies[id(value)]
    # Immutable and only ever holds ints
    if isinstance(value, range):
        return value

    if is_array(value):
        if is_mapping(value):
            items = [(index, raw_get(value, index)) for index in range(1, len(value) + 1)]
            return _copy_mapping(value, items, memo)
        return _copy_sequence(value, memo)
    return _copy_mapping(value, list(entries(value)), memo)


def _empty_like(container):
    """A new empty container of the same type, or None when it has to be rebuilt from its entries."""
    cls = type(container)
    if isinstance(container, Table) or cls in (dict, list, OrderedDict, bytearray):
        return cls()
    if isinstance(container, defaultdict):
        return cls(container.default_factory)
    if isinstance(container, deque):
        return cls(maxlen=container.maxlen)
    if isinstance(container, (MutableMapping, MutableSequence)):
        try:
            return cls()
        except TypeError:
            # e.g. os.environ, whose type needs its encoders
            return None
    return None


def _copy_sequence(sequence, memo: Optional[_CopyMemo]):
    result = _empty_like(sequence)
    if result is None:
        return _rebuild(sequence, memo, _build_sequence, (_copy(item, memo) for item in sequence))

    if memo is not None:
        memo.remember(sequence, result)
    for item in sequence:
        result.append(_copy(item, memo))
    return result


def _copy_mapping(mapping, items, memo: Optional[_CopyMemo]):
    if isinstance(mapping, MappingProxyType):
        # A live view: register it before filling so cycles through it resolve
        backing = {}
        result = MappingProxyType(backing)
        if memo is not None:
            memo.remember(mapping, result)
        for key, item in items:
            backing[key] = _copy(item, memo)
        return result

    result = _empty_like(mapping)
    if result is None:
        return _rebuild(mapping, memo, _build_mapping, ((key, _copy(item, memo)) for key, item in items))

    if memo is not None:
        memo.remember(mapping, result)
    if isinstance(mapping, Table) and mapping.metadata is not None:
        set_metadata(result, _copy(mapping.metadata, memo))
    for key, item in items:
        result[key] = _copy(item, memo)
    return result


def _rebuild(container, memo: Optional[_CopyMemo], build, copied):
    """Copy the entries of ``container`` first, then build the new container from them."""
    if memo is None:
        return build(container, list(copied))

    key = id(container)
    started = memo.rebuilding.get(key)
    if started is not None and started == len(memo.copies):
        raise FnInvalidArgument(
            f"cannot copy a cycle through {type(container).__name__} that only passes containers built from their entries"
        )
    memo.rebuilding[key] = len(memo.copies)
    try:
        filled = list(copied)
    finally:
        if started is None:
            del memo.rebuilding[key]
        else:
            memo.rebuilding[key] = started

    # Re-entered through a mutable container that is already registered
    if key in memo.copies:
        return memo.copies[key]
    result = build(container, filled)
    memo.remember(container, result)
    return result


def _build_sequence(sequence, items):
    cls = type(sequence)
    # namedtuples take their fields positionally
    if hasattr(cls, "_make"):
        return cls._make(items)
    try:
        return cls(items)
    except TypeError:
        logger.debug("Cannot build %s from its items, copying as a plain sequence", cls.__name__)
        return list(items) if isinstance(sequence, MutableSequence) else tuple(items)


def _build_mapping(mapping, items):
    cls = type(mapping)
    filled = dict(items)
    try:
        return cls(filled)
    except TypeError:
        logger.debug("Cannot build %s from a dict, copying as a plain dict", cls.__name__)
        return filled
