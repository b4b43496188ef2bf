from dc3.sequence import WRAP
from dc3.suffix_array import suffix_array
from utils.utils import build_count


def bwt_transform(text, suffix_array):
    n = len(text)
    bwt = [None] * n

    for i in range(n):
        pos = suffix_array[i] - 1
        if pos < 0:
            pos = n - 1
        bwt[i] = text[pos]

    if isinstance(text, str):
        return ''.join(bwt)
    return bwt


def bwt(text):
    """
    Circular Burrows-Wheeler transform of text.

    Returns the last column of the sorted rotations and the row holding the
    rotation that starts at 0, which inverse_bwt needs.
    """
    sa = suffix_array(text, policy=WRAP)
    return bwt_transform(text, sa), sa.index(0) if sa else -1


def inverse_bwt(last, primary):
    """Rebuilds the text from the last column with the LF-mapping."""
    n = len(last)
    count = build_count(last)
    seen = {}
    lf = [0] * n
    for i, ch in enumerate(last):
        lf[i] = count[ch] + seen.get(ch, 0)
        seen[ch] = seen.get(ch, 0) + 1

    out = [None] * n
    row = primary
    for k in range(n - 1, -1, -1):
        out[k] = last[row]
        row = lf[row]

    if isinstance(last, str):
        return ''.join(out)
    return out
