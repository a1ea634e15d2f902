"""Value kinds for fnkit.

Every Python object falls into exactly one ValueKind. The order of the checks in
kind_of matters: booleans are numbers to Python and strings are sequences, but
neither is treated that way here.
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping, Sequence
from enum import Enum

import numpy as np

from fnkit import Value
from fnkit.types.nil import NilType


class ValueKind(str, Enum):
    NIL = "nil"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    CONTAINER = "container"
    FUNCTION = "function"
    OPAQUE = "opaque"


STRING_TYPES = (str, bytes)
BOOLEAN_TYPES = (bool, np.bool_)


def kind_of(value: Value) -> ValueKind:
    if value is None or isinstance(value, NilType):
        return ValueKind.NIL
    if isinstance(value, BOOLEAN_TYPES):
        return ValueKind.BOOLEAN
    if isinstance(value, STRING_TYPES):
        return ValueKind.STRING
    if isinstance(value, numbers.Number):
        return ValueKind.NUMBER
    # A buffer view, not a container of values
    if isinstance(value, memoryview):
        return ValueKind.OPAQUE
    if isinstance(value, (Mapping, Sequence)):
        return ValueKind.CONTAINER
    # Classes are callable but they are not functions
    if isinstance(value, type):
        return ValueKind.OPAQUE
    if callable(value):
        return ValueKind.FUNCTION
    return ValueKind.OPAQUE
