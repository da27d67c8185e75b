# Copyright (c) 2025, lfsr authors; All Rights Reserved
# lfsr is published under the PSF license.
"""
Linear feedback shift register sequences.

Each step shifts the register one bit to the right and, when the bit
shifted out is 1, xors the register with the tap mask.  The iterators
below yield the register state *before* each step, and stop once the
register returns to its starting state.
"""
from bitarray import frozenbitarray
from bitarray.util import ba2int, int2ba

from lfsr.polys import MAX_POLYS, check_width

__all__ = ['LFSRIterator', 'BigLFSRIterator',
           'maximal_sequence', 'fixed_sequence', 'custom_sequence']


def _check_int(name, x):
    if not isinstance(x, int):
        raise TypeError("int expected for %s, got '%s'" %
                        (name, type(x).__name__))


class _Register:

    # Subclasses hold the register in self._state and the sentinel in
    # self._init.  The state type must support in-place '>>=' (logical
    # shift right by one) and '^=' (xor with self._mask), and '==' with
    # the sentinel.  The subclass supplies _lsb() and _value().

    def __iter__(self):
        return self

    def __next__(self):
        if self._done:
            raise StopIteration

        term = self._value()
        lsb = self._lsb()
        self._state >>= 1
        if lsb:
            self._state ^= self._mask

        # back at the starting state - no more terms to yield
        self._done = self._state == self._init
        self._count += 1
        return term

    def has_next(self):
        "Return False once the full cycle has been yielded."
        return not self._done

    @property
    def done(self):
        return self._done

    @property
    def width(self):
        return self._width

    def __repr__(self):
        return '%s(mask=%#x, start=%#x, width=%d)' % (
            type(self).__name__, self.mask, self.start, self.width)


class LFSRIterator(_Register):
    """LFSRIterator(width, start=1, mask=None) -> iterator

Iterator over the terms of a fixed-width LFSR, `2 <= width <= 64`.
When `mask` is None, the maximum-length mask for `width` is used and
the iterator yields each integer in `range(1, 2 ** width)` exactly once.
Otherwise, the terms of the cycle through `start` are yielded.
"""
    def __init__(self, width, start=1, mask=None):
        check_width(width)
        _check_int('start', start)
        if start < 1:
            raise ValueError("start must be positive, got %d" % start)
        if start.bit_length() > width:
            raise ValueError("start %#x out of range for %d-bit register" %
                             (start, width))
        self._sized = mask is None
        if mask is None:
            mask = MAX_POLYS[width]
        else:
            _check_int('mask', mask)
            if mask < 1:
                raise ValueError("mask must be positive, got %d" % mask)
            if mask.bit_length() > width:
                raise ValueError("mask %#x out of range for %d-bit "
                                 "register" % (mask, width))

        self._width = width
        self._mask = mask
        self._init = self._state = start
        self._done = False
        self._count = 0

    def _lsb(self):
        return self._state & 1

    def _value(self):
        return self._state

    @property
    def mask(self):
        return self._mask

    @property
    def start(self):
        return self._init

    def __length_hint__(self):
        if not self._sized or self._width > 62:
            # custom cycle length unknown, or too large for Py_ssize_t
            return NotImplemented
        return (1 << self._width) - 1 - self._count


class BigLFSRIterator(_Register):
    """BigLFSRIterator(mask, start) -> iterator

Iterator over the terms of an LFSR of arbitrary width, given by the
bit length of `mask`.  The register is held in a big-endian bitarray,
the terms are yielded as integers.  No table of maximum-length masks
exists for this iterator, so the caller decides the cycle length by
the choice of `mask`.
"""
    def __init__(self, mask, start):
        _check_int('mask', mask)
        _check_int('start', start)
        if mask < 1 or start < 1:
            raise ValueError("mask and start must be positive, "
                             "got mask=%d, start=%d" % (mask, start))
        if start.bit_length() > mask.bit_length():
            raise ValueError("start %#x out of range for mask %#x" %
                             (start, mask))

        n = mask.bit_length()
        self._width = n
        self._mask = int2ba(mask, length=n, endian='big')
        # start is zero-padded on the left to the width of the mask
        self._state = int2ba(start, length=n, endian='big')
        self._init = frozenbitarray(self._state)
        self._done = False
        self._count = 0

    def _lsb(self):
        return self._state[-1]

    def _value(self):
        return ba2int(self._state)

    @property
    def mask(self):
        return ba2int(self._mask)

    @property
    def start(self):
        return ba2int(self._init)


def maximal_sequence(width, start=1):
    """maximal_sequence(width, /, start=1) -> LFSRIterator

Return iterator over all `2 ** width - 1` nonzero `width`-bit integers,
in the order produced by the maximum-length LFSR for `width`.
"""
    return LFSRIterator(width, start)


def fixed_sequence(mask, start, width=64):
    """fixed_sequence(mask, start, /, width=64) -> LFSRIterator

Return iterator over the cycle through `start` of the `width`-bit LFSR
with the given xor `mask`.
"""
    return LFSRIterator(width, start, mask)


def custom_sequence(mask, start):
    """custom_sequence(mask, start, /) -> BigLFSRIterator

Return iterator over the cycle through `start` of the LFSR with the
given xor `mask`.  The register width is `mask.bit_length()`, which
may exceed 64.
"""
    return BigLFSRIterator(mask, start)
