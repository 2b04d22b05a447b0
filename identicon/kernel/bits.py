"""
Bit extraction - the single source of randomness for colors and patterns
"""


def _value(element) -> int:
    # text digests are read by character code, byte digests by byte value
    return ord(element) if isinstance(element, str) else int(element)


def is_odd(digest, index: int) -> bool:
    """True if the digest element at ``index`` (wrapping) has an odd value."""
    return _value(digest[index % len(digest)]) % 2 == 1


def read_byte(digest, start: int) -> int:
    """
    8-bit value read backwards from ``start``: the element at ``start - i``
    contributes ``2**i`` when it is odd.
    """
    value = 0
    for i in range(8):
        if is_odd(digest, start - i):
            value += 1 << i
    return value
