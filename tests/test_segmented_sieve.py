"""
Tests for counting and locating primes in arbitrary windows.
"""

import numpy as np
import pytest

from nthprime.parallel_sieve import split_range
from nthprime.primes import crossing_primes_for
from nthprime.segmented_sieve import MAX_RANGE_END, SegmentResult, count_primes, prime_count


# pi(x) = number of primes < x
KNOWN_PI = [(25, 9), (100, 25), (10000, 1229), (100000, 9592)]


def reference_count(primes: np.ndarray, start: int, end: int) -> int:
    return int(np.searchsorted(primes, end) - np.searchsorted(primes, start))


class TestPrimeCounting:
    """count_primes over [2, x) matches pi(x)."""

    @pytest.mark.parametrize("x, expected", KNOWN_PI)
    def test_known_prime_counts(self, x, expected):
        assert count_primes(2, x).count == expected
        assert prime_count(x) == expected

    @pytest.mark.parametrize("start, end", [
        (0, 100), (1, 100), (3, 100), (4, 100), (100, 200), (97, 98),
        (98, 101), (999_000, 1_000_000), (123_457, 1_987_653),
    ])
    def test_windows_match_reference(self, start, end, reference_primes):
        expected = reference_count(reference_primes, start, end)
        assert count_primes(start, end).count == expected

    @pytest.mark.parametrize("start, end, expected", [
        (0, 0, 0), (0, 2, 0), (2, 2, 0), (2, 3, 1), (2, 4, 2), (3, 3, 0),
        (4, 5, 0), (9, 10, 0), (9, 11, 0), (9, 12, 1),
    ])
    def test_edge_windows(self, start, end, expected):
        assert count_primes(start, end).count == expected

    def test_crossing_primes_supplied_or_built(self):
        crossing = crossing_primes_for(200_000)
        assert count_primes(150_000, 200_000, crossing) == count_primes(150_000, 200_000)

    def test_oversized_crossing_table(self):
        """A table built for a larger end gives the same count."""
        crossing = crossing_primes_for(10**8)
        assert count_primes(2, 100_000, crossing).count == 9592

    def test_window_far_from_origin(self, is_prime):
        """Window at 10^12 checked against Miller-Rabin."""
        start, end = 10**12, 10**12 + 2000
        expected = sum(1 for n in range(start, end) if is_prime(n))
        assert count_primes(start, end).count == expected

    def test_window_at_2_40(self, is_prime):
        start, end = 2**40 - 1000, 2**40
        expected = [n for n in range(start, end) if is_prime(n)]
        result = count_primes(start, end, nth=len(expected))
        assert result.count == len(expected)
        assert result.located == expected[-1]


class TestLocating:
    """Locating the nth prime within a window."""

    def test_count_only_leaves_located_unset(self):
        result = count_primes(2, 100)
        assert result == SegmentResult(25, None)

    def test_first_prime_is_two(self):
        assert count_primes(2, 100, nth=1).located == 2
        assert count_primes(0, 3, nth=1).located == 2

    def test_second_prime_is_three(self):
        assert count_primes(2, 100, nth=2).located == 3

    def test_last_prime_in_window(self):
        assert count_primes(2, 100, nth=25).located == 97

    @pytest.mark.parametrize("start, nth, expected", [
        (3, 1, 3), (4, 1, 5), (90, 1, 97), (1000, 1, 1009), (1000, 3, 1019),
    ])
    def test_offset_windows(self, start, nth, expected):
        assert count_primes(start, start + 100, nth=nth).located == expected

    @pytest.mark.parametrize("start, end, nth", [(2, 100, 26), (0, 2, 1), (90, 97, 1), (24, 29, 1)])
    def test_too_few_primes_leaves_located_unset(self, start, end, nth):
        """Asking past the last prime must not produce a stale or zero value."""
        result = count_primes(start, end, nth=nth)
        assert result.located is None
        assert result.count < nth

    def test_locate_every_prime_below_1000(self, reference_primes):
        expected = reference_primes[reference_primes < 1000]
        for i, p in enumerate(expected, start=1):
            assert count_primes(2, 1000, nth=i).located == p

    def test_locate_across_boundaries(self, reference_primes):
        """Ordinal within a later window = global ordinal minus earlier counts."""
        n = 5000
        before = count_primes(2, 40_000).count
        located = count_primes(40_000, 60_000, nth=n - before).located
        assert located == reference_primes[n - 1]


class TestPartitionRoundTrip:
    """Summing over contiguous pieces equals one count over the whole range."""

    @pytest.mark.parametrize("pieces", [1, 2, 3, 7, 10, 64, 1000])
    def test_even_partitions(self, pieces):
        limit = 100_000
        crossing = crossing_primes_for(limit)
        whole = count_primes(2, limit, crossing).count
        parts = [count_primes(s, e, crossing).count
                 for s, e in split_range(2, limit, pieces)]
        assert sum(parts) == whole

    def test_uneven_cut_points(self):
        cuts = [2, 3, 4, 10, 11, 97, 98, 1000, 4096, 50_001, 99_999, 100_000]
        total = sum(count_primes(a, b).count for a, b in zip(cuts, cuts[1:]))
        assert total == 9592


class TestValidation:
    """Bad inputs raise ValueError."""

    def test_reversed_range(self):
        with pytest.raises(ValueError):
            count_primes(100, 50)

    def test_negative_start(self):
        with pytest.raises(ValueError):
            count_primes(-1, 50)

    def test_end_beyond_64_bits(self):
        with pytest.raises(ValueError):
            count_primes(MAX_RANGE_END, MAX_RANGE_END + 10)

    def test_negative_ordinal(self):
        with pytest.raises(ValueError):
            count_primes(2, 100, nth=-1)


class TestProgressOutput:
    """Progress lines are printed only when verbose."""

    def test_silent_by_default(self, capsys):
        count_primes(2, 1000)
        assert capsys.readouterr().out == ""

    def test_verbose_lines(self, capsys):
        count_primes(2, 1000, nth=3, verbose=True)
        out = capsys.readouterr().out
        assert "- Counting the primes in 2..1000 and finding the 3rd ..." in out
        assert "\tUsing 11 primes (2..31) for crossing off" in out
        assert "\t168 primes found" in out


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
