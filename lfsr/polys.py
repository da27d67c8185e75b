# Copyright (c) 2025, lfsr authors; All Rights Reserved
# lfsr is published under the PSF license.
"""
Table of xor masks which yield maximum-length LFSRs for register widths
from 2 to 64.  Values courtesy of:

    https://users.ece.cmu.edu/~koopman/lfsr/index.html
"""

__all__ = ['MAX_POLYS', 'max_poly']


MAX_POLYS = (
    0x0,                 #  0 invalid
    0x0,                 #  1 invalid
    0x3,                 #  2
    0x6,                 #  3
    0x9,                 #  4
    0x12,                #  5
    0x21,                #  6
    0x41,                #  7
    0x8e,                #  8
    0x108,               #  9
    0x204,               # 10
    0x402,               # 11
    0x829,               # 12
    0x100d,              # 13
    0x2015,              # 14
    0x4001,              # 15
    0x8016,              # 16
    0x10004,             # 17
    0x20013,             # 18
    0x40013,             # 19
    0x80004,             # 20
    0x100002,            # 21
    0x200001,            # 22
    0x400010,            # 23
    0x80000d,            # 24
    0x1000004,           # 25
    0x2000023,           # 26
    0x4000013,           # 27
    0x8000004,           # 28
    0x10000002,          # 29
    0x20000029,          # 30
    0x40000004,          # 31
    0x80000057,          # 32
    0x100000029,         # 33
    0x200000073,         # 34
    0x400000002,         # 35
    0x80000003b,         # 36
    0x100000001f,        # 37
    0x2000000031,        # 38
    0x4000000008,        # 39
    0x800000001c,        # 40
    0x10000000004,       # 41
    0x2000000001f,       # 42
    0x4000000002c,       # 43
    0x80000000032,       # 44
    0x10000000000d,      # 45
    0x200000000097,      # 46
    0x400000000010,      # 47
    0x80000000005b,      # 48
    0x1000000000038,     # 49
    0x200000000000e,     # 50
    0x4000000000025,     # 51
    0x8000000000004,     # 52
    0x10000000000023,    # 53
    0x2000000000003e,    # 54
    0x40000000000023,    # 55
    0x8000000000004a,    # 56
    0x100000000000016,   # 57
    0x200000000000031,   # 58
    0x40000000000003d,   # 59
    0x800000000000001,   # 60
    0x1000000000000013,  # 61
    0x2000000000000034,  # 62
    0x4000000000000001,  # 63
    0x800000000000000d,  # 64
)

MIN_WIDTH = 2
MAX_WIDTH = len(MAX_POLYS) - 1


def check_width(width):
    "raise TypeError or ValueError unless width is a tabulated register width"
    if not isinstance(width, int):
        raise TypeError("int expected for width, got '%s'" %
                        type(width).__name__)
    if not MIN_WIDTH <= width <= MAX_WIDTH:
        raise ValueError("width must be in range %d <= width <= %d, "
                         "got %d" % (MIN_WIDTH, MAX_WIDTH, width))


def max_poly(width):
    """max_poly(width, /) -> int

Return the xor mask of a maximum-length LFSR with register `width`,
which must be in range 2 <= width <= 64.
"""
    check_width(width)
    return MAX_POLYS[width]
