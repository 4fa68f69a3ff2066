#!/usr/bin/env python3
"""
Benchmark the nth-prime search.

Compares:
1. Sequential counting (one process, pieces bound memory only)
2. Parallel counting (pieces dispatched to a process pool)

Run at n=10^6 or 10^7 for a quick comparison.
"""

import argparse
import time
from multiprocessing import cpu_count

from nthprime.nth_prime import nth_prime


def benchmark(n: int, pieces: int, workers: int):
    """Time sequential vs parallel runs for one ordinal."""
    print("=" * 60)
    print(f"nth-prime Benchmark: n = {n:,}")
    print("=" * 60)

    print("Sequential...", end=" ", flush=True)
    t0 = time.time()
    seq = nth_prime(n, pieces=pieces, num_workers=1)
    t_seq = time.time() - t0
    print(f"{t_seq:.2f}s")

    print(f"Parallel ({workers} workers)...", end=" ", flush=True)
    t0 = time.time()
    par = nth_prime(n, pieces=pieces, search_pieces=workers, num_workers=workers)
    t_par = time.time() - t0
    print(f"{t_par:.2f}s")

    assert seq.value == par.value, "Results don't match!"
    assert seq.primes_counted == par.primes_counted, "Counts don't match!"

    print()
    print(f"  p_{n} = {seq.value:,}")
    print(f"  window [{seq.lower:,}, {seq.upper:,})")
    print(f"  Speedup: {t_seq / t_par:.1f}x")


def main():
    parser = argparse.ArgumentParser(description='Benchmark nth-prime search')
    parser.add_argument('--n', type=float, default=1e6,
                        help='Prime ordinal (default 1e6)')
    parser.add_argument('--pieces', type=int, default=None,
                        help='Counting pieces (default: 4 per worker)')
    parser.add_argument('--workers', type=int, default=cpu_count(),
                        help='Worker processes (default: CPU count)')
    args = parser.parse_args()

    pieces = args.pieces or 4 * args.workers
    benchmark(int(args.n), pieces, args.workers)


if __name__ == '__main__':
    main()
