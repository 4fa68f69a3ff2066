"""
Shared reference data.

The reference sieve is a plain full-width Sieve of Eratosthenes, kept
independent of the odd-only code under test.
"""

import numpy as np
import pytest

REFERENCE_LIMIT = 2_000_000


def plain_sieve(limit: int) -> np.ndarray:
    """Return all primes < limit using a full boolean array."""
    flags = np.ones(max(limit, 2), dtype=bool)
    flags[0] = flags[1] = False
    for p in range(2, int((limit - 1) ** 0.5) + 1):
        if flags[p]:
            flags[p*p::p] = False
    return np.nonzero(flags[:limit])[0]


def is_probable_prime(n: int) -> bool:
    """Deterministic Miller-Rabin for n < 3.3e24."""
    if n < 2:
        return False
    small = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37]
    for p in small:
        if n % p == 0:
            return n == p
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for a in small:
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = x * x % n
            if x == n - 1:
                break
        else:
            return False
    return True


@pytest.fixture(scope='session')
def reference_primes() -> np.ndarray:
    """All primes below REFERENCE_LIMIT (p_n = reference_primes[n - 1])."""
    return plain_sieve(REFERENCE_LIMIT)


@pytest.fixture(scope='session')
def is_prime():
    """Independent primality test for values beyond the reference sieve."""
    return is_probable_prime
