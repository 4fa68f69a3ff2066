#!/usr/bin/env python3
"""
Full validation script.

Running this file re-checks the sieve against itself and regenerates the
bound tightness table and figures.

Usage:
    python run_all.py
    python run_all.py --config config/custom.yaml
"""

import argparse
from pathlib import Path
import time

from nthprime.config import load_config
from nthprime.experiments.exp_bound_tightness import run_bound_tightness_experiment
from nthprime.experiments.verify_segmented_sieve import (
    verify_counts,
    verify_nth,
    verify_partitions,
)


def main():
    parser = argparse.ArgumentParser(description='Run all nth-prime checks')
    parser.add_argument('--config', type=Path, default=None,
                        help='Path to config file')
    args = parser.parse_args()

    config = load_config(args.config)

    print("=" * 60)
    print("Nth Prime - Validation Suite")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  pieces = {config['pieces']}")
    print(f"  num_workers = {config['num_workers']}")
    print(f"  verify_limits = {config['verify_limits']}")
    print(f"  bound_grid = {config['bound_grid']}")
    print()

    output_dir = Path('data/results')
    output_dir.mkdir(parents=True, exist_ok=True)

    total_start = time.time()

    # 1. Segmented sieve vs base sieve
    print("-" * 60)
    print("1. Segmented sieve consistency")
    print("-" * 60)
    start = time.time()
    ok = verify_counts(config['verify_limits'])
    ok = verify_partitions(max(config['verify_limits']), [1, 2, 3, config['pieces']],
                           num_workers=config['num_workers'] or 1) and ok
    ok = verify_nth([1, 2, 6, 1000, 100000]) and ok
    print(f"   Completed in {time.time() - start:.1f}s")
    print()

    # 2. Bound tightness
    print("-" * 60)
    print("2. Bound tightness")
    print("-" * 60)
    start = time.time()
    figures_dir = output_dir / 'figures'
    df = run_bound_tightness_experiment(config['bound_grid'], output_dir, figures_dir)
    print(f"   Completed in {time.time() - start:.1f}s")
    print()

    # Summary
    total_time = time.time() - total_start
    print("=" * 60)
    print("COMPLETE" if ok and bool((df['lower_ok'] & df['upper_ok']).all()) else "FAILED")
    print("=" * 60)
    print(f"\nTotal runtime: {total_time:.1f}s")
    print(f"\nOutputs saved to: {output_dir.absolute()}")

    for f in sorted(output_dir.glob('*.csv')):
        print(f"  - {f.name}")

    print(f"\nFigures:")
    for f in sorted(figures_dir.glob('*.png')):
        print(f"  - figures/{f.name}")

    print("\n" + "=" * 60)
    print("KEY RESULTS")
    print("=" * 60)
    print(df[['n', 'region', 'p_n', 'lower', 'upper', 'lower_slack', 'upper_slack']]
          .to_string(index=False))


if __name__ == '__main__':
    main()
