"""
Definitions of bound-tightness statistics.

Responsibility: reported quantities only. Guarantees that the tables and
figures use the same definitions.
"""

import numpy as np
from typing import Dict


def relative_slack(actual: np.ndarray, bound: np.ndarray) -> np.ndarray:
    """
    Compute (bound - actual) / actual.

    Positive for an upper bound that holds, non-positive for a lower bound
    that holds.

    Parameters
    ----------
    actual : np.ndarray
        True values (e.g. p_n).
    bound : np.ndarray
        Estimated bounds, same shape.

    Returns
    -------
    np.ndarray
        Relative slack per entry.
    """
    actual = np.asarray(actual, dtype=float)
    bound = np.asarray(bound, dtype=float)
    return (bound - actual) / actual


def window_ratio(lower: np.ndarray, upper: np.ndarray) -> np.ndarray:
    """Width of [lower, upper) relative to upper; the share of work left for the final search."""
    lower = np.asarray(lower, dtype=float)
    upper = np.asarray(upper, dtype=float)
    return (upper - lower) / upper


def summarize_slack(slack: np.ndarray) -> Dict[str, float]:
    """
    Compute summary statistics for relative slack values.

    Parameters
    ----------
    slack : np.ndarray
        Array of relative slack values.

    Returns
    -------
    dict
        Dictionary with mean, median, min, max, count.
    """
    if len(slack) == 0:
        return {
            'mean': np.nan,
            'median': np.nan,
            'min': np.nan,
            'max': np.nan,
            'count': 0
        }

    return {
        'mean': float(np.mean(slack)),
        'median': float(np.median(slack)),
        'min': float(np.min(slack)),
        'max': float(np.max(slack)),
        'count': len(slack)
    }
