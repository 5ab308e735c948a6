#!/usr/bin/env python
#
# Copyright (c), 2024-2025, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from timeit import timeit
from seqkit import shared_empty, typed_empty, fill_all, fill_range, generate  # noqa


def run_timeit(stmt='pass', setup='pass', number=1000):
    seconds = timeit(stmt, setup=setup, number=number)
    print("{}: {}s".format(stmt, seconds))


if __name__ == '__main__':
    print('*' * 64)
    print("*** Timing profile of empty sequences and bulk assignments ***")
    print('*' * 64)
    print()

    NUMBER = 1000
    SETUP = 'from __main__ import shared_empty, typed_empty, fill_all, fill_range, generate'

    print("*** Empty sequences ***\n")

    run_timeit('[[] for _ in range(10000)]', SETUP, NUMBER)
    run_timeit('[() for _ in range(10000)]', SETUP, NUMBER)
    run_timeit('[shared_empty() for _ in range(10000)]', SETUP, NUMBER)
    run_timeit('[typed_empty(int) for _ in range(10000)]', SETUP, NUMBER)

    print("\n*** Bulk assignments ***\n")

    SETUP += '\nv = list(range(10000))'
    run_timeit('fill_all(v, 0)', SETUP, NUMBER)
    run_timeit('v[:] = [0] * len(v)', SETUP, NUMBER)
    run_timeit('fill_range(v, 100, 9000, 1)', SETUP, NUMBER)
    run_timeit('generate(v, lambda i: i * 2)', SETUP, NUMBER)
    run_timeit('v[:] = [i * 2 for i in range(len(v))]', SETUP, NUMBER)
