"""The ``fn`` namespace: every operation under its camelCase name, aliases included."""

from __future__ import annotations

from collections.abc import MutableMapping
from types import SimpleNamespace
from typing import Any

from fnkit import VERSION
from fnkit.objects import has, identity, is_match, iteratee, matcher, matches, negate, property
from fnkit.predicates import (
    is_array,
    is_boolean,
    is_empty,
    is_finite,
    is_function,
    is_infinite,
    is_integer,
    is_nan,
    is_nil,
    is_number,
    is_string,
    is_table,
    is_user_data,
)
from fnkit.values import copy, is_equal


def bindings() -> dict[str, Any]:
    return {
        'VERSION': VERSION,
        # Objects
        'has': has,
        'property': property,
        'matcher': matcher,
        'matches': matches,
        'isEqual': is_equal,
        'isMatch': is_match,
        'isEmpty': is_empty,
        'isArray': is_array,
        'isUserData': is_user_data,
        'isOpaqueHandle': is_user_data,
        'isTable': is_table,
        'isContainer': is_table,
        'isArrayShaped': is_array,
        'isString': is_string,
        'isFunction': is_function,
        'isNumber': is_number,
        'isBoolean': is_boolean,
        'isNil': is_nil,
        'isFinite': is_finite,
        'isInfinite': is_infinite,
        'isNaN': is_nan,
        'isInteger': is_integer,
        'copy': copy,
        'deepCopy': copy,
        # Functions
        'negate': negate,
        # Utilities
        'identity': identity,
        'iteratee': iteratee,
    }


def register(target: MutableMapping) -> MutableMapping:
    """Bind every operation into ``target`` and return it."""
    target.update(bindings())
    return target


def build_namespace() -> SimpleNamespace:
    return SimpleNamespace(**bindings())
