"""
Partitioned segmented sieve.

Splits a range into contiguous pieces and counts each one independently,
merging by summation. Pieces share one read-only crossing-prime table; each
worker allocates its own window. Uses multiprocessing to spread pieces
across CPU cores.
"""

import numpy as np
from multiprocessing import Pool, cpu_count
from typing import List, Optional, Tuple

from .segmented_sieve import SegmentResult, count_primes

# Global variables for worker processes (set via initializer)
_worker_crossing = None
_worker_verbose = False


def split_range(range_start: int, range_end: int, pieces: int) -> List[Tuple[int, int]]:
    """
    Partition [range_start, range_end) into at most `pieces` contiguous pieces.

    All pieces share the same width (rounded up) except possibly the last.
    """
    if pieces < 1:
        raise ValueError(f"pieces must be >= 1, got {pieces}")
    if range_end <= range_start:
        return []

    step = (range_end - range_start + pieces - 1) // pieces  # round up
    segments = []
    for start in range(range_start, range_end, step):
        segments.append((start, min(start + step, range_end)))
    return segments


def _init_worker(crossing_primes: np.ndarray, verbose: bool):
    """Initialize worker with the shared crossing-prime table."""
    global _worker_crossing, _worker_verbose
    _worker_crossing = crossing_primes
    _worker_verbose = verbose


def _count_segment(segment: Tuple[int, int]) -> int:
    """Count primes in one piece using the worker's crossing table."""
    start, end = segment
    return count_primes(start, end, _worker_crossing, verbose=_worker_verbose).count


def count_segments(segments: List[Tuple[int, int]], crossing_primes: np.ndarray,
                   num_workers: Optional[int] = 1, verbose: bool = False) -> List[int]:
    """
    Count primes in each segment, in segment order.

    Parameters
    ----------
    segments : list of (int, int)
        Disjoint half-open ranges.
    crossing_primes : np.ndarray
        Crossing primes covering sqrt of the largest segment end.
    num_workers : int, optional
        Number of worker processes. None means CPU count; 1 runs in-process.
    verbose : bool
        Print per-segment progress.

    Returns
    -------
    list of int
        Prime count per segment.
    """
    if num_workers is None:
        num_workers = cpu_count()

    if num_workers <= 1 or len(segments) <= 1:
        return [count_primes(start, end, crossing_primes, verbose=verbose).count
                for start, end in segments]

    with Pool(min(num_workers, len(segments)), initializer=_init_worker,
              initargs=(crossing_primes, verbose)) as pool:
        return pool.map(_count_segment, segments)


def count_primes_parallel(range_start: int, range_end: int, crossing_primes: np.ndarray,
                          pieces: int = 10, num_workers: Optional[int] = 1,
                          verbose: bool = False) -> int:
    """
    Count the primes in [range_start, range_end) piece by piece.

    Equals count_primes(range_start, range_end).count for any number of
    pieces; only peak memory and parallelism change.
    """
    segments = split_range(range_start, range_end, pieces)
    return sum(count_segments(segments, crossing_primes, num_workers, verbose))


def locate_nth_prime(range_start: int, range_end: int, nth: int,
                     crossing_primes: np.ndarray, pieces: int = 1,
                     num_workers: Optional[int] = 1,
                     verbose: bool = False) -> SegmentResult:
    """
    Locate the nth prime (1-based) within [range_start, range_end).

    With pieces > 1, every piece is counted first; only the piece holding
    the target is scanned again to locate it.

    Returns
    -------
    SegmentResult
        count of all primes in the range, and the located prime (None if
        the range holds fewer than nth primes).
    """
    if nth < 1:
        raise ValueError(f"ordinal must be >= 1, got {nth}")

    if pieces <= 1:
        return count_primes(range_start, range_end, crossing_primes, nth=nth,
                            verbose=verbose)

    segments = split_range(range_start, range_end, pieces)
    counts = count_segments(segments, crossing_primes, num_workers, verbose)

    located = None
    before = 0
    for (start, end), found in zip(segments, counts):
        if before + found >= nth:
            located = count_primes(start, end, crossing_primes, nth=nth - before,
                                   verbose=verbose).located
            break
        before += found

    return SegmentResult(sum(counts), located)
