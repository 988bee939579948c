"""Seed management for determinism."""

import random

import numpy as np


def seed_everything(seed: int) -> None:
    """Set all random seeds for deterministic behavior.

    Sets seeds for Python random and NumPy's global state. Experiments draw
    keys from a local generator (see ``make_rng``) and do not depend on this.

    Args:
        seed: Random seed value (should be non-negative integer)
    """
    random.seed(seed)
    np.random.seed(seed)
