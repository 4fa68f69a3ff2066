"""
Exact nth prime via bounded segmented sieving.

Pipeline:
1. Bracket p_n between analytic lower and upper bounds.
2. Count the primes below the lower bound, piece by piece.
3. Sieve [lower, upper) once more to locate the remaining ordinal.

Peak memory is one window of (lower / pieces) / 2 flags plus the crossing
table, which holds the primes up to sqrt(upper).
"""

from typing import NamedTuple, Optional

from .bounds import bound_pair
from .errors import InvariantError
from .ordinals import ordinal
from .parallel_sieve import count_primes_parallel, locate_nth_prime
from .primes import crossing_primes_for
from .segmented_sieve import MAX_RANGE_END

DEFAULT_PIECES = 10


class NthPrimeResult(NamedTuple):
    n: int
    value: int
    primes_counted: int  # primes below lower plus all primes in [lower, upper)
    lower: int
    upper: int


def nth_prime(n: int, pieces: int = DEFAULT_PIECES, search_pieces: int = 1,
              num_workers: Optional[int] = 1, verbose: bool = False) -> NthPrimeResult:
    """
    Compute the nth prime (p_1 = 2, p_2 = 3, ...).

    Parameters
    ----------
    n : int
        Prime ordinal (n >= 1).
    pieces : int
        Number of pieces [2, lower) is split into for counting.
    search_pieces : int
        Number of pieces [lower, upper) is split into for the final search.
    num_workers : int, optional
        Worker processes for counting pieces. None means CPU count.
    verbose : bool
        Print progress lines.

    Returns
    -------
    NthPrimeResult

    Raises
    ------
    ValueError
        If n < 1, a piece count is < 1, or p_n cannot be bracketed below 2^64.
    InvariantError
        If the analytic bounds fail to bracket p_n.
    """
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    if pieces < 1 or search_pieces < 1:
        raise ValueError("piece counts must be >= 1")

    lower, upper = bound_pair(n)

    if not 2 <= lower < upper:
        raise InvariantError(f"{lower}..{upper} is not a valid range!")
    if upper > MAX_RANGE_END:
        raise ValueError(f"the {ordinal(n)} prime cannot be bracketed below 2^64")

    crossing = crossing_primes_for(upper)

    if verbose:
        print(f"+ Will break counting into {pieces} pieces...")

    count = count_primes_parallel(2, lower, crossing, pieces, num_workers, verbose)

    if verbose:
        print(f"+ Counted {count} noncandidate primes, now finishing up...")

    if not count < n:
        raise InvariantError(f"we found {count} primes below {lower}, "
                             f"expected fewer than {n}!")

    final = locate_nth_prime(lower, upper, n - count, crossing, search_pieces,
                             num_workers, verbose)

    if final.located is None:
        raise InvariantError(f"prime #{n} is not below the upper bound {upper}!")

    return NthPrimeResult(n, final.located, count + final.count, lower, upper)
