"""
Segmented sieve over an arbitrary window [range_start, range_end).

Counts the primes in the window and optionally locates the prime at a
given ordinal inside it. Only odd candidates are stored, so the window
needs (range_end - range_start) / 2 flags regardless of where it sits
below 2^64.

Index mapping (range_start odd):
- Index i -> range_start + 2i
- n -> (n - range_start) // 2
"""

from math import isqrt
from typing import NamedTuple, Optional, Sequence

import numpy as np

from .ordinals import ordinal
from .primes import crossing_primes_for

MAX_RANGE_END = 1 << 64


class SegmentResult(NamedTuple):
    """Count of primes in a window, plus the located prime if one was asked for and found."""
    count: int
    located: Optional[int] = None


def count_primes(range_start: int, range_end: int,
                 crossing_primes: Optional[Sequence[int]] = None,
                 nth: int = 0, verbose: bool = False) -> SegmentResult:
    """
    Count the primes in [range_start, range_end).

    Parameters
    ----------
    range_start : int
        Inclusive start of the window.
    range_end : int
        Exclusive end of the window (<= 2^64).
    crossing_primes : sequence of int, optional
        Ascending primes covering sqrt(range_end), e.g. from
        crossing_primes_for(). Built on demand if omitted.
    nth : int
        1-based ordinal of the prime to locate within the window.
        0 means count only.
    verbose : bool
        Print progress lines.

    Returns
    -------
    SegmentResult
        count, and located (None unless nth > 0 and the window holds at
        least nth primes).
    """
    if range_start < 0 or range_start > range_end:
        raise ValueError(f"{range_start}..{range_end} is not a valid range")
    if range_end > MAX_RANGE_END:
        raise ValueError(f"range end {range_end} exceeds 2^64")
    if nth < 0:
        raise ValueError(f"ordinal must be non-negative, got {nth}")

    if verbose:
        if nth:
            print(f"- Counting the primes in {range_start}..{range_end} "
                  f"and finding the {ordinal(nth)} ...")
        else:
            print(f"- Counting the primes in {range_start}..{range_end} ...")

    count = 0
    located = None
    remaining = nth

    # 2 is the only even prime and never lives in the window
    if range_start < 3:
        if range_end > 2:
            count += 1
            if remaining:
                remaining -= 1
                if remaining == 0:
                    located = 2
        range_start = 3

    # Odd start
    range_start += 1 - range_start % 2

    if range_start >= range_end:
        if verbose:
            print(f"\t{count} primes found")
        return SegmentResult(count, located)

    if crossing_primes is None:
        crossing_primes = crossing_primes_for(range_end)
    crossing = np.asarray(crossing_primes)
    # Only primes with p*p < range_end can cross anything off
    crossing = crossing[:np.searchsorted(crossing, isqrt(range_end - 1), side='right')].tolist()

    if verbose and crossing:
        print(f"\tUsing {len(crossing)} primes ({crossing[0]}..{crossing[-1]}) "
              f"for crossing off")

    size = (range_end - range_start + 1) // 2
    is_prime = np.ones(size, dtype=bool)

    for p in crossing:
        if p == 2:
            continue
        p2 = p * p

        # First odd multiple of p in the window, not below p^2
        first = -(-range_start // p) * p
        if first % 2 == 0:
            first += p
        if first < p2:
            first = p2
        if first >= range_end:
            continue

        # Odd multiples are 2p apart in value, p apart in index
        is_prime[(first - range_start) // 2::p] = False

    found = int(np.count_nonzero(is_prime))
    count += found

    if 0 < remaining <= found:
        idx = int(np.flatnonzero(is_prime)[remaining - 1])
        located = range_start + 2 * idx

    del is_prime

    if verbose:
        print(f"\t{count} primes found")

    return SegmentResult(count, located)


def prime_count(x: int, crossing_primes: Optional[Sequence[int]] = None) -> int:
    """pi(x): number of primes strictly below x."""
    return count_primes(0, max(x, 0), crossing_primes).count
