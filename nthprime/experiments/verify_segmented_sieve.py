#!/usr/bin/env python3
"""
Verify the segmented sieve against the plain base sieve.

Compares:
1. pi(x) from count_primes over [0, x) vs len(primes_table(x))
2. Sum over partitions of [2, x) vs a single count
3. nth_prime(n) vs primes_table()[n - 1]

Run at small limits first to verify correctness before scaling up.
"""

import time
from typing import List

from ..nth_prime import nth_prime
from ..parallel_sieve import count_primes_parallel
from ..primes import crossing_primes_for, primes_table
from ..segmented_sieve import count_primes


def verify_counts(limits: List[int], verbose: bool = True) -> bool:
    """Verify segmented counts match the base sieve."""
    if verbose:
        print(f"\n=== Verifying pi(x) for x in {limits} ===")

    errors = 0
    for x in limits:
        expected = len(primes_table(x))
        got = count_primes(0, x).count
        if got != expected:
            errors += 1
            print(f"  MISMATCH at x={x}: segmented={got}, base={expected}")
        elif verbose:
            print(f"  pi({x}) = {got}")

    return errors == 0


def verify_partitions(limit: int, piece_counts: List[int], num_workers: int = 1,
                      verbose: bool = True) -> bool:
    """Verify partitioned counts of [2, limit) match a single count."""
    if verbose:
        print(f"\n=== Verifying partitions of [2, {limit}) ===")

    crossing = crossing_primes_for(limit)
    whole = count_primes(2, limit, crossing).count

    errors = 0
    for pieces in piece_counts:
        t0 = time.time()
        total = count_primes_parallel(2, limit, crossing, pieces, num_workers)
        if total != whole:
            errors += 1
            print(f"  MISMATCH with {pieces} pieces: {total} != {whole}")
        elif verbose:
            print(f"  {pieces:>4} pieces: {total} primes ({time.time() - t0:.2f}s)")

    return errors == 0


def verify_nth(n_values: List[int], verbose: bool = True) -> bool:
    """Verify nth_prime against direct indexing into the base sieve."""
    if verbose:
        print(f"\n=== Verifying nth_prime for n in {n_values} ===")

    results = {n: nth_prime(n).value for n in n_values}
    table = primes_table(max(results.values()) + 1)

    errors = 0
    for n, value in results.items():
        expected = int(table[n - 1])
        if value != expected:
            errors += 1
            print(f"  MISMATCH at n={n}: nth_prime={value}, base={expected}")
        elif verbose:
            print(f"  p_{n} = {value}")

    return errors == 0


if __name__ == '__main__':
    from ..config import load_config

    config = load_config()
    ok = verify_counts(config['verify_limits'])
    ok = verify_partitions(max(config['verify_limits']), [1, 2, 3, 7, 10, 64]) and ok
    ok = verify_nth([1, 2, 3, 5, 6, 100, 1000, 6077, 8602, 100000]) and ok

    print()
    print("✓ All checks passed" if ok else "✗ Verification failed")
    raise SystemExit(0 if ok else 1)
