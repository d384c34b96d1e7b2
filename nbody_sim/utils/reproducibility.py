"""Reproducibility utilities for deterministic simulations."""

import random
from typing import Any, Dict, Optional

import numpy as np


def set_all_seeds(seed: int):
    """Seed Python's and NumPy's global generators.

    Covers the random colour tags of placed bodies as well as any code
    using ``np.random`` directly. Presets take their own seed.
    """
    random.seed(seed)
    np.random.seed(seed)


def get_seed_info(seed: Optional[int] = None) -> Dict[str, Any]:
    """Get information about current seed state.

    Args:
        seed: Optional seed to include in info

    Returns:
        Dictionary with seed information
    """
    info = {}

    if seed is not None:
        info['seed'] = seed

    info['numpy_state'] = int(np.random.get_state()[1][0])
    info['python_random_state'] = random.getstate()[1][0]

    return info
