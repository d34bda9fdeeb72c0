class ContextKey:
    """
    The last ``order`` values seen, used to look up a distribution.

    Keys are immutable: ``advance`` builds a new key and leaves the old one
    alone, since older keys live on in the transition table.
    """
    __slots__ = ('_values',)

    def __init__(self, values):
        object.__setattr__(self, '_values', tuple(values))

    @classmethod
    def initial(cls, order, sentinel=None):
        """A key made of ``order`` sentinel copies."""
        return cls((sentinel,) * order)

    def advance(self, value):
        """Drops the oldest value and appends ``value``."""
        return ContextKey((*self._values[1:], value))

    @property
    def values(self):
        return self._values

    def __setattr__(self, name, value):
        raise AttributeError("ContextKey is immutable")

    def __eq__(self, other):
        if not isinstance(other, ContextKey):
            return NotImplemented
        return self._values == other._values

    def __hash__(self):
        return hash(self._values)

    def __len__(self):
        return len(self._values)

    def __iter__(self):
        return iter(self._values)

    def __repr__(self):
        return f"ContextKey({list(self._values)!r})"
