"""
Run configuration.

YAML file with optional keys; anything missing falls back to DEFAULTS.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULT_CONFIG_PATH = Path('config/default.yaml')

DEFAULTS = {
    'pieces': 10,
    'search_pieces': 1,
    'num_workers': 1,
    'verbose': True,
    'bound_grid': [1, 2, 4, 5, 6, 10, 100, 1000, 6076, 6077, 8601, 8602,
                   10**4, 10**5, 10**6],
    'verify_limits': [25, 100, 10**4, 10**5],
}


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load a YAML config merged over DEFAULTS.

    A missing file is an error only when a path is given explicitly.
    """
    config = dict(DEFAULTS)

    if path is None:
        path = DEFAULT_CONFIG_PATH
        if not path.exists():
            return config

    with open(path) as f:
        loaded = yaml.safe_load(f) or {}

    if not isinstance(loaded, dict):
        raise ValueError(f"{path}: expected a mapping, got {type(loaded).__name__}")

    unknown = set(loaded) - set(DEFAULTS)
    if unknown:
        raise ValueError(f"{path}: unknown keys {sorted(unknown)}")

    config.update(loaded)
    return config
