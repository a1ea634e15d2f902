"""Key/value view over the two container shapes.

Mappings expose their own keys. Sequences expose the 1-based indices ``1..N`` so
that a list and a mapping keyed ``1..N`` read the same way.
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping, Sequence
from typing import Iterator

from fnkit import Key, Value
from fnkit.types.kind import STRING_TYPES
from fnkit.types.table import Table


class _Missing:
    __slots__ = ()

    def __repr__(self): return "<missing>"
    def __bool__(self): return False


MISSING = _Missing()


def is_mapping(value: Value) -> bool:
    return isinstance(value, Mapping)


def is_sequence(value: Value) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, STRING_TYPES)


def entries(container) -> Iterator[tuple[Key, Value]]:
    if is_mapping(container):
        yield from container.items()
    else:
        yield from enumerate(container, 1)


def _sequence_offset(container, key: Key) -> int | None:
    if isinstance(key, bool) or not isinstance(key, numbers.Integral):
        return None
    if 1 <= key <= len(container):
        return int(key) - 1
    return None


def raw_get(container, key: Key, default: Value = MISSING) -> Value:
    """Look ``key`` up without any prototype fallback."""
    if is_mapping(container):
        try:
            present = key in container
        except TypeError:
            # Mappings such as os.environ only accept keys of one type
            return default
        if not present:
            return default
        return dict.__getitem__(container, key) if isinstance(container, Table) else container[key]
    offset = _sequence_offset(container, key)
    return default if offset is None else container[offset]


def get_field(container, key: Key, default: Value = MISSING) -> Value:
    """Look ``key`` up the way indexing does, following Table ``"__index"`` metadata."""
    if isinstance(container, Table):
        try:
            return container[key]
        except KeyError:
            return default
    return raw_get(container, key, default)
