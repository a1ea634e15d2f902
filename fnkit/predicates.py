"""Type predicates for fnkit values.

The kind predicates are thin views over kind_of and never raise. Container
predicates reject non-containers with FnInvalidArgument (except is_array, which
answers False), and the numeric predicates reject anything that is not a number
with FnTypeMismatch rather than coercing it.
"""

from __future__ import annotations

import cmath
import math
import numbers
from decimal import Decimal

import numpy as np

from fnkit import Value
from fnkit.errors import FnInvalidArgument, FnTypeMismatch
from fnkit.types.container import is_mapping
from fnkit.types.kind import ValueKind, kind_of


# -------------------------------
# Kind predicates
# -------------------------------
def is_container(value: Value) -> bool:
    return kind_of(value) is ValueKind.CONTAINER


def is_string(value: Value) -> bool:
    return kind_of(value) is ValueKind.STRING


def is_function(value: Value) -> bool:
    return kind_of(value) is ValueKind.FUNCTION


def is_number(value: Value) -> bool:
    return kind_of(value) is ValueKind.NUMBER


def is_boolean(value: Value) -> bool:
    return kind_of(value) is ValueKind.BOOLEAN


def is_opaque_handle(value: Value) -> bool:
    return kind_of(value) is ValueKind.OPAQUE


def is_nil(value: Value) -> bool:
    return kind_of(value) is ValueKind.NIL


is_table = is_container
is_user_data = is_opaque_handle


# -------------------------------
# Container shape
# -------------------------------
def is_array(value: Value) -> bool:
    """True if ``value`` is a container keyed exactly by ``1..N``.

    Sequences always qualify. A mapping qualifies when every index from 1 up to
    its entry count is one of its keys; booleans are not indices even though
    ``True == 1``. The empty container qualifies. Keys are read by iteration,
    so mappings that reject lookups of non-string keys are handled too.
    """
    if not is_container(value):
        return False
    if not is_mapping(value):
        return True
    size = len(value)
    indices = 0
    for key in value:
        if isinstance(key, bool) or not isinstance(key, numbers.Integral):
            return False
        if not 1 <= key <= size:
            return False
        indices += 1
    return indices == size


def is_empty(value: Value) -> bool:
    if not is_container(value):
        raise FnInvalidArgument(f"is_empty requires a container, got {type(value).__name__}")
    return len(value) == 0


# -------------------------------
# Numeric predicates
# -------------------------------
def _require_number(value: Value, name: str) -> None:
    if kind_of(value) is not ValueKind.NUMBER:
        raise FnTypeMismatch(f"{name} requires a number, got {type(value).__name__}")


def _is_complex(value: Value) -> bool:
    return isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real)


def is_finite(value: Value) -> bool:
    """True unless ``value`` is an infinity or NaN."""
    _require_number(value, "is_finite")
    if isinstance(value, np.generic):
        return bool(np.isfinite(value))
    # int and Fraction have no infinities, and may be too large for float()
    if isinstance(value, numbers.Rational):
        return True
    if isinstance(value, Decimal):
        return value.is_finite()
    if _is_complex(value):
        return cmath.isfinite(value)
    return math.isfinite(value)


def is_infinite(value: Value) -> bool:
    """True for positive or negative infinity only; NaN is not infinite."""
    _require_number(value, "is_infinite")
    if isinstance(value, np.generic):
        return bool(np.isinf(value))
    if isinstance(value, numbers.Rational):
        return False
    if isinstance(value, Decimal):
        return value.is_infinite()
    if _is_complex(value):
        return cmath.isinf(value)
    return math.isinf(value)


def is_nan(value: Value) -> bool:
    _require_number(value, "is_nan")
    return bool(value != value)


def is_integer(value: Value) -> bool:
    """True if ``value % 1 == 0``; always False for NaN and the infinities."""
    _require_number(value, "is_integer")
    if _is_complex(value):
        raise FnTypeMismatch("is_integer is undefined for complex numbers")
    if not is_finite(value):
        return False
    return bool(value % 1 == 0)
