"""Seed derivation for independent, reproducible graph instances."""

import numpy as np


def derive_seeds(master_seed: int, n: int) -> list[int]:
    """Derive n independent child seeds from a master seed.

    Uses numpy SeedSequence spawning so that parallel Graph instances get
    statistically independent streams while the whole set stays
    reproducible from one number.

    Args:
        master_seed: Seed for the whole run (e.g. PagerankConfig.seed).
        n: Number of child seeds.

    Returns:
        List of n non-negative integer seeds.
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    children = np.random.SeedSequence(master_seed).spawn(n)
    return [int(child.generate_state(1, dtype=np.uint64)[0]) for child in children]

