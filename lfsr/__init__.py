# Copyright (c) 2025, lfsr authors; All Rights Reserved
# lfsr is published under the PSF license.
"""
This package generates the output sequences of linear feedback shift
registers (LFSRs).  Given a tap mask and a nonzero starting state, the
register visits a cycle of states, which is produced lazily, one term
at a time.

Registers of up to 64 bits come with a table of maximum-length masks,
see `maximal_sequence()`.  Wider registers (or any custom mask) are
handled by `custom_sequence()`, which keeps the register in a bitarray.
"""
from lfsr.polys import MAX_POLYS, max_poly
from lfsr.core import (
    LFSRIterator, BigLFSRIterator,
    maximal_sequence, fixed_sequence, custom_sequence,
)

__version__ = '1.0.0'

__all__ = ['MAX_POLYS', 'max_poly',
           'LFSRIterator', 'BigLFSRIterator',
           'maximal_sequence', 'fixed_sequence', 'custom_sequence']


def test(verbosity=1):
    """test(verbosity=1) -> TextTestResult

Run self-test, and return `unittest.runner.TextTestResult` object.
"""
    from lfsr import test_lfsr
    return test_lfsr.run(verbosity=verbosity)
