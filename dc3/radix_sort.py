DIGIT_BITS = 4
RADIX = 1 << DIGIT_BITS
MASK = RADIX - 1

identity = lambda x: x


def bits_needed(value):
    """Bits covering value, rounded up to whole bytes (at least 8)."""
    return max(8, (value.bit_length() + 7) // 8 * 8)


def bsort(items, key=None):
    """
    Sorts items by a non-negative integer key in linear time.

    The sort is a least significant digit radix sort with 4 bit digits, so
    it is stable: items with equal keys keep their relative order. Calling it
    several times with different keys sorts lexicographically by the keys,
    last call most significant.

    :param items: Iterable of items to sort.
    :param key: Function mapping an item to a non-negative integer.
    :return: A new sorted list.
    """
    if key is None:
        key = identity
    keyed = [(key(item), item) for item in items]
    if not keyed:
        return []

    smallest = largest = keyed[0][0]
    for k, _ in keyed:
        if k < smallest:
            smallest = k
        elif k > largest:
            largest = k
    if smallest < 0:
        raise ValueError(f"radix sort keys must be non-negative, got {smallest}")

    for shift in range(0, bits_needed(largest), DIGIT_BITS):
        buckets = [[] for _ in range(RADIX)]
        for pair in keyed:
            buckets[(pair[0] >> shift) & MASK].append(pair)
        keyed = [pair for bucket in buckets for pair in bucket]

    return [item for _, item in keyed]
