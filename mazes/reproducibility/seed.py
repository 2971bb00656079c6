"""Centralized seed management for reproducible maze runs.

Maze generation itself only draws from the weight source it is handed;
set_seed additionally pins the global RNGs so that any caller code that
reaches for them is reproducible too.
"""

import random

import numpy as np


def set_seed(seed: int) -> None:
    """Seed Python's random module and NumPy's legacy global RNG.

    Args:
        seed: Master seed value (e.g., 42).
    """
    random.seed(seed)
    np.random.seed(seed)


def verify_seed_determinism(seed: int) -> bool:
    """Verify that re-seeding reproduces identical sequences.

    Sets the seed, draws 10 values each from random and numpy, resets and
    draws again.

    Returns:
        True if both sources repeat exactly after re-seeding.
    """
    set_seed(seed)
    r1 = [random.random() for _ in range(10)]
    n1 = np.random.rand(10).tolist()

    set_seed(seed)
    r2 = [random.random() for _ in range(10)]
    n2 = np.random.rand(10).tolist()

    return r1 == r2 and n1 == n2
