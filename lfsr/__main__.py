# Copyright (c) 2025, lfsr authors; All Rights Reserved
# lfsr is published under the PSF license.
"""
Scramble text by permuting its bytes along a maximum-length LFSR
sequence, or print the terms of an LFSR.

    python -m lfsr                       # demo: scramble "demonstration"
    python -m lfsr -w 5 "some text"      # scramble using a 5-bit register
    python -m lfsr -u -w 5 "SCRAMBLED"   # unscramble
    python -m lfsr --terms -w 4          # print all 15 terms
"""
import sys
from argparse import ArgumentParser
from itertools import islice

from lfsr import LFSRIterator, __version__
from lfsr.util import scramble, unscramble


def int_arg(s):
    "accept decimal, hex (0x), octal (0o) and binary (0b) integers"
    return int(s, 0)


def print_terms(args):
    seq = LFSRIterator(args.width, args.start, args.mask)
    for t in islice(seq, args.count):
        print(t)


def main(argv=None):
    p = ArgumentParser(prog='python -m lfsr',
                       description="LFSR sequences and scrambling")

    p.add_argument('-w', '--width', action="store", type=int,
                   help="register width in bits, 2 to 64")

    p.add_argument('-s', '--start', action="store", type=int_arg,
                   default=1, help="starting state (default 1)")

    p.add_argument('-m', '--mask', action="store", type=int_arg,
                   help="xor mask (--terms only), defaults to the "
                        "maximum-length mask for WIDTH")

    p.add_argument('-n', '--count', action="store", type=int,
                   help="number of terms to print (--terms only)")

    p.add_argument('-u', '--unscramble', action="store_true",
                   help="unscramble TEXT instead of scrambling it")

    p.add_argument('-t', '--terms', action="store_true",
                   help="print terms of the LFSR, one per line")

    p.add_argument('-V', '--version', action="version",
                   version="lfsr %s" % __version__)

    p.add_argument(dest='text', metavar='TEXT', nargs='?')

    args = p.parse_args(argv)

    try:
        if args.terms:
            if args.width is None:
                p.error("--terms requires --width")
            print_terms(args)
            return

        if args.text is None:
            # demo round trip
            scrambled = scramble(b"demonstration", args.width, args.start)
            print(scrambled.decode('latin-1'))
            print(unscramble(scrambled, args.width,
                             args.start).decode('latin-1'))
            return

        data = args.text.encode('utf-8')
        f = unscramble if args.unscramble else scramble
        # byte permutations may split multi-byte characters
        print(f(data, args.width, args.start).decode('utf-8', 'replace'))

    except (TypeError, ValueError) as e:
        p.error(str(e))


if __name__ == '__main__':
    sys.exit(main())
