from __future__ import annotations


class NilType:
    """The absent value. Equal to itself and to ``None``, and to nothing else."""

    __slots__ = ()

    def __repr__(self): return "nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return other is None or isinstance(other, NilType)

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(None)


Nil = NilType()
