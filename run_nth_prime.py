#!/usr/bin/env python3
"""
Compute the exact nth prime.

Usage:
    python run_nth_prime.py 1000              # -> 7919
    python run_nth_prime.py 100000 --workers 4
    python run_nth_prime.py 10000000 --config config/custom.yaml --quiet

Exit codes: 0 success, 1 usage error, 2 internal invariant violated.
"""

import argparse
import sys
import time
from pathlib import Path

from nthprime.config import load_config
from nthprime.errors import InvariantError
from nthprime.nth_prime import nth_prime

EXIT_USAGE = 1
EXIT_INVARIANT = 2


class UsageParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors on stdout with exit code 1."""

    def error(self, message):
        self.print_usage(sys.stdout)
        print(f"{self.prog}: error: {message}")
        sys.exit(EXIT_USAGE)


def build_parser() -> argparse.ArgumentParser:
    parser = UsageParser(description='Compute the exact nth prime')
    parser.add_argument('nth', type=int, help='Prime ordinal (1 -> 2, 2 -> 3, ...)')
    parser.add_argument('--config', type=Path, default=None,
                        help='Path to config file (default: config/default.yaml)')
    parser.add_argument('--pieces', type=int, default=None,
                        help='Pieces to split counting below the lower bound into')
    parser.add_argument('--search-pieces', type=int, default=None,
                        help='Pieces to split the final search window into')
    parser.add_argument('--workers', type=int, default=None,
                        help='Worker processes (0 = CPU count)')
    parser.add_argument('--quiet', action='store_true',
                        help='Only print the result')
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.nth < 1:
        parser.error(f"nth must be >= 1, got {args.nth}")

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        parser.error(str(e))

    if args.pieces is not None:
        config['pieces'] = args.pieces
    if args.search_pieces is not None:
        config['search_pieces'] = args.search_pieces
    if args.workers is not None:
        config['num_workers'] = args.workers or None
    if args.quiet:
        config['verbose'] = False

    t0 = time.time()
    try:
        result = nth_prime(
            args.nth,
            pieces=config['pieces'],
            search_pieces=config['search_pieces'],
            num_workers=config['num_workers'],
            verbose=config['verbose'],
        )
    except ValueError as e:
        parser.error(str(e))
    except InvariantError as e:
        print(f"Assertion failed: {e}")
        return EXIT_INVARIANT

    print(f"Prime #{result.n} = {result.value}")
    print(f"\t({result.primes_counted} primes calculated)")
    if config['verbose']:
        print(f"\tCompleted in {time.time() - t0:.1f}s")

    return 0


if __name__ == '__main__':
    sys.exit(main())
