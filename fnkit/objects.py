"""Object helpers built on the value model: matching, field access and iteratees."""

from __future__ import annotations

from typing import Callable

from fnkit import Key, Predicate, Value
from fnkit.errors import FnInvalidArgument
from fnkit.predicates import is_boolean, is_container, is_function, is_nil
from fnkit.types.container import MISSING, entries, get_field
from fnkit.values import primitive_equal


def _require_container(value: Value, name: str) -> None:
    if not is_container(value):
        raise FnInvalidArgument(f"{name} requires a container, got {type(value).__name__}")


def is_match(obj: Value, properties: Value) -> bool:
    """True if every key of ``properties`` is in ``obj`` with a primitively equal value.

    This is a shallow test: nested containers only match when they are the same
    object.
    """
    _require_container(obj, "is_match")
    _require_container(properties, "is_match")
    for key, expected in entries(properties):
        actual = get_field(obj, key)
        if actual is MISSING or not primitive_equal(actual, expected):
            return False
    return True


def matcher(properties: Value) -> Predicate:
    _require_container(properties, "matcher")

    def match(obj: Value) -> bool:
        return is_match(obj, properties)

    return match


matches = matcher


def has(obj: Value, key: Key) -> bool:
    _require_container(obj, "has")
    return get_field(obj, key) is not MISSING


def property(key: Key) -> Callable[[Value], Value]:
    """Return a getter for ``key``; absent keys read as ``None``."""
    def get(obj: Value) -> Value:
        _require_container(obj, "property")
        return get_field(obj, key, None)

    return get


def identity(value: Value) -> Value:
    return value


def negate(predicate: Predicate) -> Predicate:
    def negated(*args, **kwargs) -> bool:
        return not predicate(*args, **kwargs)

    return negated


def iteratee(value: Value) -> Callable[[Value], Value]:
    """Turn ``value`` into a callable.

    nil or false -> identity; a function -> itself; a container -> matcher;
    anything else -> a property getter for that key.
    """
    if is_nil(value) or (is_boolean(value) and not value):
        return identity
    if is_function(value):
        return value
    if is_container(value):
        return matcher(value)
    return property(value)
