import sys
assert sys.version_info[0] == 3, "This program requires Python 3"

import re
import doctest
from io import StringIO

import lfsr
import lfsr.util


sig_pat = re.compile(r'(\w+\([^()]*\))( -> (.+))?')
def write_doc(fo, name):
    doc = eval('lfsr.%s.__doc__' % name)
    assert doc, name
    lines = doc.splitlines()
    m = sig_pat.match(lines[0])
    if m is None:
        raise Exception("signature line invalid: %r" % lines[0])
    s = '``%s``' %  m.group(1)
    if m.group(3):
        s += ' -> %s' % m.group(3)
    fo.write('%s\n' % s)
    assert lines[1] == ''
    for line in lines[2:]:
        out = line.rstrip()
        fo.write("   %s\n" % out.replace('`', '``') if out else "\n")
    fo.write('\n\n')


def write_reference(fo):
    fo.write("""\
Reference
=========

lfsr version: %s

In the following, ``mask`` is the xor mask of the register taps, and
``start`` its (nonzero) starting state.


Iterator objects:
-----------------

""" % lfsr.__version__)
    for name in 'LFSRIterator', 'BigLFSRIterator':
        write_doc(fo, name)

    fo.write("Functions defined in the `lfsr` module:\n"
             "---------------------------------------\n\n")
    for func in ['maximal_sequence', 'fixed_sequence', 'custom_sequence',
                 'max_poly', 'test']:
        write_doc(fo, func)

    fo.write("Functions defined in `lfsr.util` module:\n"
             "----------------------------------------\n\n")
    for func in lfsr.util.__all__:
        write_doc(fo, 'util.%s' % func)


def write_readme():
    with open('README.rst', 'r') as fi:
        data = fi.read()

    with StringIO() as fo:
        for line in data.splitlines():
            if line == 'Reference':
                break
            fo.write("%s\n" % line.rstrip())

        write_reference(fo)
        new_data = fo.getvalue()

    if new_data == data:
        print("already up-to-date")
    else:
        with open('README.rst', 'w') as f:
            f.write(new_data)


def main():
    if len(sys.argv) > 1:
        sys.exit("no arguments expected")

    write_readme()
    doctest.testfile('README.rst')


if __name__ == '__main__':
    main()
