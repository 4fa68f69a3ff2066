"""
Visualization utilities.

Responsibility: plots only. No logic, no computation.
"""

import matplotlib
matplotlib.use('Agg')

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from pathlib import Path
from typing import Optional

from .bounds import LOWER_TIGHT_CUTOFF, UPPER_TIGHT_CUTOFF


def plot_bound_slack(df: pd.DataFrame, output_path: Optional[Path] = None) -> plt.Figure:
    """
    Plot relative slack of the lower and upper bounds against n.

    Parameters
    ----------
    df : pd.DataFrame
        DataFrame from exp_bound_tightness with columns:
        n, lower_slack, upper_slack.
    output_path : Path, optional
        If provided, save figure to this path.

    Returns
    -------
    matplotlib.Figure
    """
    fig, ax = plt.subplots(figsize=(10, 6))

    ax.plot(df['n'], df['upper_slack'], 'o-', label='Upper bound')
    ax.plot(df['n'], df['lower_slack'], 's-', label='Lower bound')
    ax.axhline(0.0, color='black', linewidth=0.8)
    ax.axvline(LOWER_TIGHT_CUTOFF, color='gray', linestyle='--', alpha=0.6,
               label=f'n = {LOWER_TIGHT_CUTOFF}')
    ax.axvline(UPPER_TIGHT_CUTOFF, color='gray', linestyle=':', alpha=0.6,
               label=f'n = {UPPER_TIGHT_CUTOFF}')

    ax.set_xscale('log')
    ax.set_xlabel('n')
    ax.set_ylabel('(bound - p_n) / p_n')
    ax.set_title('Bracketing of the nth prime')
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')

    return fig


def plot_window_ratio(df: pd.DataFrame, output_path: Optional[Path] = None) -> plt.Figure:
    """
    Plot the share of [0, upper) left for the final search.

    Parameters
    ----------
    df : pd.DataFrame
        DataFrame with n, window_ratio.
    output_path : Path, optional
        If provided, save figure.

    Returns
    -------
    matplotlib.Figure
    """
    fig, ax = plt.subplots(figsize=(8, 6))

    x = np.arange(len(df))
    ax.bar(x, df['window_ratio'], alpha=0.8)

    ax.set_ylabel('(upper - lower) / upper')
    ax.set_xlabel('n')
    ax.set_title('Final search window')
    ax.set_xticks(x)
    ax.set_xticklabels(df['n'], rotation=45)
    ax.grid(True, alpha=0.3, axis='y')

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')

    return fig
