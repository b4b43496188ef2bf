from dc3.sequence import MIN, as_sequence
from dc3.suffix_array import suffix_array


class SuffixArrayIndex:
    """Substring search over a text by binary search on its suffix array."""

    def __init__(self, text, length=None):
        self.text = text
        self.sequence = as_sequence(text, length, MIN)
        self.symbols = self.sequence.symbols()
        self.suffix_array = suffix_array(self.sequence)

    def __len__(self):
        return len(self.suffix_array)

    def __contains__(self, query):
        return self.count(query) > 0

    def find(self, query):
        l, r = self.find_range(query)
        if l == -1 or r == -1:
            return []
        return [self.suffix_array[i] for i in range(l, r + 1)]

    def locate(self, query):
        return sorted(self.find(query))

    def count(self, query):
        l, r = self.find_range(query)
        if l == -1 or r == -1:
            return 0
        return r - l + 1

    def find_range(self, query):
        """
        Returns the inclusive interval of the suffix array whose suffixes
        start with query, or (-1, -1) if query does not occur.
        """
        pattern = self._symbols_of(query)
        l = self._bound(pattern, upper=False)
        r = self._bound(pattern, upper=True) - 1
        if l > r:
            return -1, -1
        return l, r

    def _bound(self, pattern, upper):
        # First position whose suffix prefix is >= pattern (> for upper).
        m = len(pattern)
        low, high = 0, len(self.suffix_array)
        while low < high:
            mid = (low + high) // 2
            start = self.suffix_array[mid]
            prefix = self.symbols[start:start + m]
            if prefix < pattern or (upper and prefix == pattern):
                low = mid + 1
            else:
                high = mid
        return low

    def _symbols_of(self, query):
        return as_sequence(query).symbols()
