"""
Empirical check of the nth-prime bounds.

For each n in a grid, compares p_n (read off a plain sieve) against
prime_lower_bound(n) and prime_upper_bound(n), and the integer window
actually searched. Grid points straddle every formula cutoff.
"""

import numpy as np
import pandas as pd
from math import ceil
from pathlib import Path
from typing import List, Optional

from ..bounds import (
    LOWER_SMALL_CUTOFF, LOWER_TIGHT_CUTOFF, UPPER_SMALL_CUTOFF, UPPER_TIGHT_CUTOFF,
    bound_pair, prime_lower_bound, prime_upper_bound,
)
from ..metrics import relative_slack, summarize_slack, window_ratio
from ..primes import primes_table


def region(n: int) -> str:
    """Label which lower/upper formulas apply at n."""
    if n < LOWER_SMALL_CUTOFF:
        low = 'L0'
    elif n < LOWER_TIGHT_CUTOFF:
        low = 'L1'
    else:
        low = 'L2'
    if n < UPPER_SMALL_CUTOFF:
        up = 'U0'
    elif n < UPPER_TIGHT_CUTOFF:
        up = 'U1'
    else:
        up = 'U2'
    return f'{low}/{up}'


def bound_table(n_grid: List[int]) -> pd.DataFrame:
    """
    Build the bound comparison table.

    Parameters
    ----------
    n_grid : list of int
        Ordinals to check (n >= 1).

    Returns
    -------
    pd.DataFrame
        One row per n with p_n, float and integer bounds, slacks and
        pass/fail flags.
    """
    n_grid = sorted(set(int(n) for n in n_grid))
    if not n_grid or n_grid[0] < 1:
        raise ValueError("grid must hold ordinals >= 1")

    limit = int(ceil(prime_upper_bound(n_grid[-1]))) + 1
    table = primes_table(limit)

    rows = []
    for n in n_grid:
        p_n = int(table[n - 1])
        lower, upper = bound_pair(n)
        rows.append({
            'n': n,
            'region': region(n),
            'p_n': p_n,
            'lower_bound': prime_lower_bound(n),
            'upper_bound': prime_upper_bound(n),
            'lower': lower,
            'upper': upper,
            'lower_ok': lower <= p_n,
            'upper_ok': p_n < upper,
        })

    df = pd.DataFrame(rows)
    df['lower_slack'] = relative_slack(df['p_n'].values, df['lower_bound'].values)
    df['upper_slack'] = relative_slack(df['p_n'].values, df['upper_bound'].values)
    df['window_ratio'] = window_ratio(df['lower'].values, df['upper'].values)
    return df


def run_bound_tightness_experiment(n_grid: List[int], output_dir: Path,
                                   figures_dir: Optional[Path] = None) -> pd.DataFrame:
    """
    Run the bound check and save results.

    Parameters
    ----------
    n_grid : list of int
        Ordinals to check.
    output_dir : Path
        Directory for output files.
    figures_dir : Path, optional
        If given, figures are written there.

    Returns
    -------
    pd.DataFrame
        The bound comparison table.
    """
    df = bound_table(n_grid)

    failures = df[~(df['lower_ok'] & df['upper_ok'])]
    print(f"  Checked {len(df)} ordinals, {len(failures)} bracketing failures")
    for _, row in failures.iterrows():
        print(f"    n={row['n']}: p_n={row['p_n']} not in [{row['lower']}, {row['upper']})")

    for name in ('lower_slack', 'upper_slack'):
        stats = summarize_slack(df[name].values)
        print(f"  {name}: min={stats['min']:.4f} max={stats['max']:.4f} "
              f"median={stats['median']:.4f}")

    output_dir.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_dir / 'bound_tightness.csv', index=False)
    print(f"  Results saved to {output_dir}")

    if figures_dir is not None:
        from ..plotting import plot_bound_slack, plot_window_ratio
        figures_dir.mkdir(parents=True, exist_ok=True)
        plot_bound_slack(df, figures_dir / 'bound_slack.png')
        plot_window_ratio(df, figures_dir / 'window_ratio.png')

    return df


if __name__ == '__main__':
    from ..config import load_config

    config = load_config()
    output_dir = Path('data/results')
    df = run_bound_tightness_experiment(config['bound_grid'], output_dir,
                                        output_dir / 'figures')
    print("\nSummary:")
    print(df[['n', 'region', 'p_n', 'lower', 'upper', 'lower_ok', 'upper_ok']]
          .to_string(index=False))
    if not np.all(df['lower_ok'] & df['upper_ok']):
        raise SystemExit(1)
