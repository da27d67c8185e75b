import timeit

def bench_sequence():
    print('Benchmarking LFSR iterators (terms per run: 2 ** 16 - 1)')
    for name, stmt in [
            ('LFSRIterator', 'for _ in maximal_sequence(16): pass'),
            ('BigLFSRIterator', 'for _ in custom_sequence(0x8016, 1): pass'),
            ('reference loop', 's = 1\n'
                               'while True:\n'
                               '    s = (s >> 1) ^ 0x8016 if s & 1 '
                               'else s >> 1\n'
                               '    if s == 1: break'),
    ]:
        t = min(timeit.repeat(stmt,
                              'from lfsr import maximal_sequence, '
                              'custom_sequence',
                              number=3, repeat=3)) / 3
        print('%-24s %.6f sec' % (name + ' took:', t))

def run():
    bench_sequence()

if __name__ == '__main__':
    run()
