import pytest

from dc3.bwt import bwt, bwt_transform, inverse_bwt
from dc3.suffix_array import suffix_array


def test_banana():
    assert bwt('banana') == ('nnbaaa', 3)


def test_transform_with_sentinel():
    text = 'banana$'
    assert bwt_transform(text, suffix_array(text)) == 'annb$aa'


def test_empty():
    assert bwt('') == ('', -1)


@pytest.mark.parametrize('text', [
    'banana', 'mississippi', 'abracadabra', 'thequickbrownfoxjumpsoverthelazydog', 'a'])
def test_inverse(text):
    last, primary = bwt(text)
    assert sorted(last) == sorted(text)
    assert inverse_bwt(last, primary) == text


def test_integer_symbols():
    values = [5, 2, 9, 2, 5, 1]
    last, primary = bwt(values)
    assert isinstance(last, list)
    assert inverse_bwt(last, primary) == values
