"""
Analytic bounds on the nth prime and on the prime-counting function.

Responsibility: pure estimates. No sieving, no allocation.

The lower and upper bounds bracket the nth prime p_n:

    prime_lower_bound(n) <= p_n < prime_upper_bound(n)

The untightened forms n (ln n + ln ln n - 1) and n (ln n + ln ln n) are
Dusart's. The crossover points (5, 6077 for the lower bound; 6, 8602 for the
upper bound) mark where each tighter formula takes over. The 0.9385 form
still fails at n = 8601, so the 7022 crossover quoted elsewhere is too low.
"""

import math

# Lower bound: n (ln n + ln ln n - 1) holds for n >= 2; the 0.9718 form
# takes over at n >= 6077.
LOWER_SMALL_CUTOFF = 5
LOWER_TIGHT_CUTOFF = 6077
LOWER_TIGHT_CONSTANT = 0.9718

# Upper bound: n (ln n + ln ln n) holds for n >= 6; the 0.9385 form is
# documented from n >= 8602.
UPPER_SMALL_CUTOFF = 6
UPPER_SMALL_VALUE = 12.0
UPPER_TIGHT_CUTOFF = 8602
UPPER_TIGHT_CONSTANT = 0.9385

# The 0.9718 form overshoots p_n once below 2.1e7, at n = 30392 (by 1.46).
# Integer windows start this much lower, relative to the bound.
LOWER_WINDOW_MARGIN = 1e-5

# pi(x) < 1.25506 x / ln x for x > 1
PRIME_COUNT_CONSTANT = 1.25506


def prime_lower_bound(n: float) -> float:
    """
    Return L such that the nth prime is >= L.

    Parameters
    ----------
    n : float
        Prime ordinal (n >= 1).

    Returns
    -------
    float
        Lower bound; callers floor it before sieving.

    Note
    ----
    Exceeds p_n at n = 30392 (see LOWER_WINDOW_MARGIN). Search windows
    should come from bound_pair(), which absorbs that.
    """
    if n < LOWER_SMALL_CUTOFF:
        return 2.0
    log_n = math.log(n)
    if n < LOWER_TIGHT_CUTOFF:
        return n * (log_n + math.log(log_n) - 1.0)
    return n * (log_n + math.log(log_n) - LOWER_TIGHT_CONSTANT)


def prime_upper_bound(n: float) -> float:
    """
    Return U such that the nth prime is < U.

    Parameters
    ----------
    n : float
        Prime ordinal (n >= 1).

    Returns
    -------
    float
        Upper bound; callers ceil it before sieving.
    """
    if n < UPPER_SMALL_CUTOFF:
        return UPPER_SMALL_VALUE
    log_n = math.log(n)
    if n < UPPER_TIGHT_CUTOFF:
        return n * log_n + n * math.log(log_n)
    return n * (log_n + math.log(log_n) - UPPER_TIGHT_CONSTANT)


def prime_count_upper_bound(x: float) -> float:
    """Return an upper bound on the number of primes below x."""
    if x < 2:
        return 0.0
    return PRIME_COUNT_CONSTANT * x / math.log(x)


def bound_pair(n: int):
    """
    Return the integer search window (lower, upper) for the nth prime.

    lower is floored after widening by LOWER_WINDOW_MARGIN, upper is ceiled,
    so the half-open range [lower, upper) contains p_n. lower never drops
    below 2.
    """
    lower = max(2, int(math.floor(prime_lower_bound(n) * (1.0 - LOWER_WINDOW_MARGIN))))
    upper = int(math.ceil(prime_upper_bound(n)))
    return lower, upper
