"""
Linear time suffix array construction of Karkkainen & Sanders:

"Simple Linear Work Suffix Array Construction", Karkkainen and Sanders.

>>> suffix_array("banana")
[5, 3, 1, 0, 4, 2]
>>> suffix_array("baa", policy="wrap")
[1, 2, 0]
"""
import logging

from dc3.radix_sort import bsort
from dc3.sequence import MIN, WRAP, SymbolSequence, as_sequence

logger = logging.getLogger(__name__)


def suffix_array(s, length=None, policy=None):
    """
    Returns the suffix array of s: the start indexes of its suffixes in
    lexicographical order.

    :param s: A str, bytes, integer sequence, SymbolSequence, or a function
        mapping indexes in [0, length) to non-negative integers.
    :param length: Length of s. Optional except when s is a function.
    :param policy: "min" (default) treats everything past the end as a
        symbol smaller than any real one, "wrap" treats s as circular.
    :return: A permutation of range(length) as a list.
    """
    seq = as_sequence(s, length, policy)
    if seq.policy == WRAP:
        return _circular_suffix_array(seq)
    return _ksa(seq)


def _circular_suffix_array(seq):
    # Rotations of s are ordered as the suffixes of ss starting in [0, n).
    n = len(seq)
    doubled = SymbolSequence.from_function(lambda i: seq(i) + 1, 2 * n)
    return [i for i in _ksa(doubled) if i < n]


def _triple(s, i):
    return s(i), s(i + 1), s(i + 2)


def _ksa(s):
    """DC3 on a min-policy sequence s."""
    length = len(s)
    if length == 0:
        return []
    if length == 1:
        return [0]

    # Sample suffixes, i % 3 != 0. When length % 3 == 1 the sample also holds
    # the empty suffix at length, whose triple (0, 0, 0) is unique. It ends
    # the i % 3 == 1 block of the reduced problem with a unique name.
    sample = list(range(1, length + 1, 3)) + list(range(2, length, 3))
    n1 = (length + 2) // 3
    m = len(sample)

    def rpos(i):
        return i // 3 if i % 3 == 1 else i // 3 + n1

    # Sort the sample by its triples, least significant symbol first.
    for k in (2, 1, 0):
        sample = bsort(sample, lambda i: s(i + k))

    # Lexicographical names of the triples, in order of appearance in s.
    ranks = [0] * m
    rank = 0
    prev = _triple(s, sample[0])
    for i in sample:
        cur = _triple(s, i)
        if cur != prev:
            rank += 1
            prev = cur
        ranks[rpos(i)] = rank

    logger.debug("dc3 level: length=%d, sample=%d, names=%d", length, m, rank + 1)

    if rank < m - 1:
        # Names are shifted by one so that 0 stays a sentinel in the
        # reduced problem.
        names = [r + 1 for r in ranks]
        reduced = SymbolSequence.from_function(names.__getitem__, m)
        order = _ksa(reduced)
        original = list(range(1, length + 1, 3)) + list(range(2, length, 3))
        sample = [original[p] for p in order]

    # Rank of every sample suffix by its original index. Suffixes starting
    # past the end are smaller than everything.
    lookup = [-1] * (length + 3)
    for r, i in enumerate(sample):
        lookup[i] = r

    # Sort nonsample suffixes, i % 3 == 0, by first symbol and then by the
    # already known order of the suffix following them.
    nonsample = bsort([i - 1 for i in sample if i % 3 == 1], s)
    sample = [i for i in sample if i < length]

    def sample_first(a, b):
        if a % 3 == 1:
            return (s(a), lookup[a + 1]) < (s(b), lookup[b + 1])
        return (s(a), s(a + 1), lookup[a + 2]) < (s(b), s(b + 1), lookup[b + 2])

    result = []
    i = j = 0
    while i < len(sample) and j < len(nonsample):
        if sample_first(sample[i], nonsample[j]):
            result.append(sample[i])
            i += 1
        else:
            result.append(nonsample[j])
            j += 1
    result.extend(sample[i:])
    result.extend(nonsample[j:])
    return result


def build_suffix_array(s, length=None, policy=None):
    """Naive approach to build the suffix array."""
    seq = as_sequence(s, length, policy)
    symbols = seq.symbols()
    if seq.policy == MIN:
        return sorted(range(len(symbols)), key=lambda i: symbols[i:])
    return sorted(range(len(symbols)), key=lambda i: symbols[i:] + symbols[:i])
