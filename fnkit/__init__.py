# Core type aliases for fnkit's value model.
# Values are plain Python objects (None/Nil, bool, numbers, str/bytes, lists, tuples,
# dicts, Tables, callables, anything else). No wrapper type is imposed on callers;
# classification happens structurally through fnkit.types.kind.kind_of.
#
# Naming guidance:
# - Value: any datum handled by fnkit operations.
# - Key:   a key of a Container (1-based index for sequences, any hashable for mappings).

from typing import Any, Callable

# Runtime value alias
Value = Any
Key = Any

Predicate = Callable[..., bool]

VERSION = "0.2.0"
__version__ = VERSION

from fnkit.errors import FnError, FnInvalidArgument, FnTypeMismatch  # noqa: E402
from fnkit.types.nil import Nil, NilType  # noqa: E402
from fnkit.types.kind import ValueKind, kind_of  # noqa: E402
from fnkit.types.table import Table, get_metadata, set_metadata, equality_override  # noqa: E402
from fnkit.predicates import (  # noqa: E402
    is_array,
    is_boolean,
    is_container,
    is_empty,
    is_finite,
    is_function,
    is_infinite,
    is_integer,
    is_nan,
    is_nil,
    is_number,
    is_opaque_handle,
    is_string,
    is_table,
    is_user_data,
)
from fnkit.values import copy, deep_copy, is_equal, primitive_equal  # noqa: E402
from fnkit.objects import (  # noqa: E402
    has,
    identity,
    is_match,
    iteratee,
    matcher,
    matches,
    negate,
    property,
)
from fnkit.namespace import build_namespace, register  # noqa: E402

# Namespace object exposing every operation under its camelCase name
fn = build_namespace()

__all__ = [
    "Value",
    "Key",
    "Predicate",
    "VERSION",
    "fn",
    "build_namespace",
    "register",
    "FnError",
    "FnInvalidArgument",
    "FnTypeMismatch",
    "Nil",
    "NilType",
    "ValueKind",
    "kind_of",
    "Table",
    "get_metadata",
    "set_metadata",
    "equality_override",
    "is_array",
    "is_boolean",
    "is_container",
    "is_empty",
    "is_finite",
    "is_function",
    "is_infinite",
    "is_integer",
    "is_nan",
    "is_nil",
    "is_number",
    "is_opaque_handle",
    "is_string",
    "is_table",
    "is_user_data",
    "copy",
    "deep_copy",
    "is_equal",
    "primitive_equal",
    "has",
    "identity",
    "is_match",
    "iteratee",
    "matcher",
    "matches",
    "negate",
    "property",
]
