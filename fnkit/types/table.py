"""Tables: dicts that can carry one Metadata mapping.

Metadata is the attached behaviour descriptor of a Table. Two entries are
understood:

- ``"__eq"``: a callable ``(a, b) -> bool`` used for equality between two Tables
  whose metadata carry the very same callable. Tables with different (or one-sided)
  overrides are never equal unless they are the same object.
- ``"__index"``: shared fields for keys the Table does not hold itself. A mapping
  is searched (and may chain through further Tables); a callable is invoked as
  ``(table, key)`` and a ``None`` result counts as absent.

Only indexing (``table[key]``) consults ``"__index"``. Membership, ``get`` and
iteration always see the raw entries.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Callable, Optional

from fnkit import Key, Value
from fnkit.errors import FnInvalidArgument

EqualityFn = Callable[[Value, Value], bool]


class Table(dict):
    """A dict with an optional Metadata mapping."""

    __slots__ = ("metadata",)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.metadata: Optional[Mapping] = None

    def __missing__(self, key: Key) -> Value:
        metadata = self.metadata
        if metadata is None or "__index" not in metadata:
            raise KeyError(key)
        index = metadata["__index"]
        if isinstance(index, Mapping):
            return index[key]
        if callable(index):
            value = index(self, key)
            if value is None:
                raise KeyError(key)
            return value
        raise KeyError(key)

    def __eq__(self, other):
        if self is other:
            return True
        override = equality_override(self)
        if override is None:
            if equality_override(other) is not None:
                return False
            return dict.__eq__(self, other)
        if override is not equality_override(other):
            return False
        return bool(override(self, other))

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self) -> str:
        return f"Table({dict.__repr__(self)})"


def set_metadata(table: Table, metadata: Optional[Mapping]) -> Table:
    """Attach ``metadata`` to ``table`` (``None`` detaches it) and return the table."""
    if not isinstance(table, Table):
        raise FnInvalidArgument(f"Cannot attach metadata to {type(table).__name__}")
    if metadata is not None and not isinstance(metadata, Mapping):
        raise FnInvalidArgument(f"Metadata must be a mapping, got {type(metadata).__name__}")
    table.metadata = metadata
    return table


def get_metadata(value: Value) -> Optional[Mapping]:
    if isinstance(value, Table):
        return value.metadata
    return None


def equality_override(value: Value) -> Optional[EqualityFn]:
    """Return the custom equality callable carried by ``value``, if any."""
    metadata = get_metadata(value)
    if metadata is None:
        return None
    eq = metadata.get("__eq")
    return eq if callable(eq) else None
