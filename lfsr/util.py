# Copyright (c) 2025, lfsr authors; All Rights Reserved
# lfsr is published under the PSF license.
"""
Useful utilities built on LFSR sequences.
"""
from itertools import islice

from lfsr.core import maximal_sequence, custom_sequence

__all__ = ['period', 'scramble', 'unscramble']


def period(mask, start=1):
    """period(mask, /, start=1) -> int

Return the number of terms in the cycle through `start` of the LFSR
with the given xor `mask`.  For a maximum-length mask of bit length
`n`, this is `2 ** n - 1`.  The whole cycle is walked, so this is only
practical for short registers.
"""
    return sum(1 for _ in custom_sequence(mask, start))


def _positions(n, width, start):
    # Return iterator over the first n terms (minus one) which fall
    # into range(n).  A maximum-length sequence of sufficient width
    # visits every such position exactly once.
    if width is None:
        width = max(2, n.bit_length())
    seq = maximal_sequence(width, start)
    if seq.width < n.bit_length():
        raise ValueError("%d-bit register too narrow for %d bytes" %
                         (width, n))
    return islice((t - 1 for t in seq if t <= n), n)


def scramble(__data, width=None, start=1):
    """scramble(data, /, width=None, start=1) -> bytes

Permute the bytes of `data` by walking the maximum-length LFSR of
register `width`: the k-th byte of `data` is moved to position `t - 1`,
where `t` is the k-th term not exceeding `len(data)`.  When `width` is
None, the narrowest register able to address all bytes is used.
`unscramble()` with the same `width` and `start` reverses the process.
"""
    data = memoryview(__data).tobytes()
    n = len(data)
    if n == 0:
        return b''
    res = bytearray(n)
    for k, i in enumerate(_positions(n, width, start)):
        res[i] = data[k]
    return bytes(res)


def unscramble(__data, width=None, start=1):
    """unscramble(data, /, width=None, start=1) -> bytes

Inverse of `scramble()`.
"""
    data = memoryview(__data).tobytes()
    n = len(data)
    if n == 0:
        return b''
    return bytes(data[i] for i in _positions(n, width, start))
