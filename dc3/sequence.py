import numpy as np

MIN = "min"
WRAP = "wrap"
POLICIES = (MIN, WRAP)


class SymbolSequence(object):
    """
    Read-only view of a sequence of non-negative integer symbols.

    Reads at or beyond the end follow the termination policy:

    - ``min``: every index >= length yields the sentinel 0. Real symbols must
      therefore be greater than 0.
    - ``wrap``: the index is taken modulo length, the sequence is circular.
    """

    def __init__(self, symbol_at, length, policy=MIN):
        if length < 0:
            raise ValueError(f"length must be >= 0, got {length}")
        if policy not in POLICIES:
            raise ValueError(f"policy must be one of {POLICIES}, got {policy!r}")
        self._symbol_at = symbol_at
        self._length = length
        self._policy = policy

    @property
    def length(self):
        return self._length

    @property
    def policy(self):
        return self._policy

    def __len__(self):
        return self._length

    def __call__(self, i):
        return self.symbol_at(i)

    def symbol_at(self, i):
        if i >= self._length:
            if self._policy == MIN:
                return 0
            i %= self._length
        return self._symbol_at(i)

    def symbols(self):
        """The first length symbols as a list."""
        return [self._symbol_at(i) for i in range(self._length)]

    def __repr__(self):
        return f"SymbolSequence(length={self._length}, policy={self._policy!r})"

    @classmethod
    def from_text(cls, text, length=None, policy=MIN):
        """Code points of a str, or byte values of bytes/bytearray."""
        if isinstance(text, str):
            values = [ord(ch) for ch in text]
        else:
            values = list(bytes(text))
        return cls(values.__getitem__, _check_length(length, len(values)), policy)

    @classmethod
    def from_array(cls, values, length=None, policy=MIN):
        """Any one-dimensional integer sequence, numpy arrays included."""
        arr = np.asarray(values)
        if arr.ndim != 1:
            raise ValueError(f"symbols must be one-dimensional, got shape {arr.shape}")
        if arr.size and arr.dtype.kind not in "iub":
            raise TypeError(f"symbols must be integers, got dtype {arr.dtype}")
        symbols = [int(v) for v in arr.tolist()]
        return cls(symbols.__getitem__, _check_length(length, len(symbols)), policy)

    @classmethod
    def from_function(cls, fn, length, policy=MIN):
        if length is None:
            raise TypeError("a length is required when symbols come from a function")
        return cls(fn, length, policy)


def _check_length(length, natural):
    if length is None:
        return natural
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
    if length > natural:
        raise ValueError(f"length {length} exceeds input length {natural}")
    return length


def as_sequence(s, length=None, policy=None):
    """Wraps text, bytes, integer arrays or a function into a SymbolSequence."""
    if isinstance(s, SymbolSequence):
        if length is not None:
            raise ValueError("length cannot be given together with a SymbolSequence")
        if policy is not None and policy != s.policy:
            raise ValueError(f"sequence has policy {s.policy!r}, not {policy!r}")
        return s

    if policy is None:
        policy = MIN
    if isinstance(s, (str, bytes, bytearray)):
        return SymbolSequence.from_text(s, length, policy)
    if callable(s):
        return SymbolSequence.from_function(s, length, policy)
    return SymbolSequence.from_array(s, length, policy)
