"""
Base sieve for crossing primes.

Responsibility: prime generation below 2^32 only. No segmenting, no counting
over arbitrary ranges.
"""

from math import isqrt

import numpy as np

# Table values must fit uint32.
MAX_SIEVE_LIMIT = 1 << 32

# Past 2^16, n*n no longer fits 32 bits. Every composite below a 32-bit
# limit has a factor below 2^16, so crossing stops there.
CROSSING_CUTOFF = 1 << 16


def odd_prime_flags(limit: int) -> np.ndarray:
    """
    Return odd-only primality flags below limit.

    flags[i] is True iff 2*i + 1 is prime. 2 is not represented.

    Parameters
    ----------
    limit : int
        Exclusive upper bound (limit <= 2^32).

    Returns
    -------
    np.ndarray
        Boolean array of length limit // 2.
    """
    if limit > MAX_SIEVE_LIMIT:
        raise ValueError(f"sieve limit {limit} exceeds 2^32")

    flags = np.ones(max(limit // 2, 0), dtype=bool)
    if len(flags) == 0:
        return flags
    flags[0] = False  # 1

    last = min(isqrt(limit - 1), CROSSING_CUTOFF - 1)
    for n in range(3, last + 1, 2):
        if flags[n // 2]:
            # n*n, n*n + 2n, ... sit n slots apart in the odd-only layout
            flags[n * n // 2::n] = False
    return flags


def primes_table(limit: int) -> np.ndarray:
    """
    Return all primes below limit in ascending order.

    Uses the Sieve of Eratosthenes over odd candidates. Index 0 holds 2.

    Parameters
    ----------
    limit : int
        Exclusive upper bound (limit <= 2^32).

    Returns
    -------
    np.ndarray
        uint32 array of primes p < limit.
    """
    if limit <= 2:
        return np.array([], dtype=np.uint32)

    flags = odd_prime_flags(limit)
    table = np.empty(int(np.count_nonzero(flags)) + 1, dtype=np.uint32)
    table[0] = 2
    table[1:] = 2 * np.flatnonzero(flags) + 1
    return table


def crossing_primes_for(range_end: int) -> np.ndarray:
    """
    Return the crossing primes needed to sieve any window ending at range_end.

    These are the primes p with p*p < range_end.
    """
    if range_end <= 4:
        return primes_table(0)
    return primes_table(isqrt(range_end - 1) + 1)
