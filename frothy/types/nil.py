from __future__ import annotations


class NilType:
    """The single Nil value. Falsy, equal only to itself."""

    __slots__ = ()
    _instance: NilType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "Nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


Nil = NilType()
