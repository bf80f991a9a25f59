"""Reproducibility utilities for deterministic simulations."""

import random
import numpy as np
from typing import Optional


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the random source injected into a Simulator.

    Args:
        seed: Random seed; None draws fresh OS entropy

    Returns:
        numpy Generator
    """
    return np.random.default_rng(seed)


def set_all_seeds(seed: int):
    """Set the global Python and NumPy seeds.

    The simulation core never touches global RNG state; this is for drivers
    that mix in their own randomness (e.g. random spawn positions).

    Args:
        seed: Random seed
    """
    random.seed(seed)
    np.random.seed(seed)
