import random

import pytest

from dc3.search import SuffixArrayIndex
from dc3.sequence import SymbolSequence
from tests.test_patterns import generate_random_patterns, generate_random_text


def occurrences(text, pattern):
    m = len(pattern)
    return [i for i in range(len(text) - m + 1) if text[i:i + m] == pattern]


def test_banana():
    index = SuffixArrayIndex('banana')
    assert index.suffix_array == [5, 3, 1, 0, 4, 2]
    assert index.find_range('ana') == (1, 2)
    assert index.find('ana') == [3, 1]
    assert index.locate('ana') == [1, 3]
    assert index.count('a') == 3
    assert 'nan' in index
    assert 'nab' not in index
    assert index.find_range('x') == (-1, -1)
    assert index.find('bananas') == []


def test_empty_query_matches_everything():
    index = SuffixArrayIndex('abc')
    assert index.find_range('') == (0, 2)
    assert index.count('') == 3


def test_empty_text():
    index = SuffixArrayIndex('')
    assert len(index) == 0
    assert index.count('a') == 0
    assert index.find('') == []


@pytest.mark.parametrize('seed', range(5))
def test_matches_brute_force(seed):
    rng = random.Random(seed)
    text = generate_random_text(300, 'abc', rng)
    index = SuffixArrayIndex(text)
    patterns = generate_random_patterns(text, [1, 2, 3, 5, 8, 13, 300], rng)
    patterns += [generate_random_text(k, 'abcd', rng) for k in range(1, 8)]
    for pattern in patterns:
        expected = occurrences(text, pattern)
        assert index.locate(pattern) == expected, pattern
        assert index.count(pattern) == len(expected)
        assert (pattern in index) == bool(expected)


def test_integer_text():
    text = [3, 1, 2, 3, 1, 2, 3]
    index = SuffixArrayIndex(text)
    assert index.locate([3, 1]) == [0, 3]
    assert index.locate([2, 3]) == [2, 5]
    assert index.count([4]) == 0


def test_bytes_text():
    index = SuffixArrayIndex(b'abracadabra')
    assert index.locate(b'abra') == [0, 7]
    assert index.count(b'a') == 5


def test_symbol_sequence_text():
    index = SuffixArrayIndex(SymbolSequence.from_text('bbbbbababba'))
    assert index.locate('ab') == occurrences('bbbbbababba', 'ab')


def test_circular_sequence_rejected():
    with pytest.raises(ValueError):
        SuffixArrayIndex(SymbolSequence.from_text('bbbbbababba', policy='wrap'))
