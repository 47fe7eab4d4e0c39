"""Reproducibility helpers: seed derivation for parallel runs."""

from walkrank.reproducibility.seed import derive_seeds

__all__ = [
    "derive_seeds",
]
