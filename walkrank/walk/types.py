"""Walk run summaries."""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True)
class CalculationStats:
    """Summary of one calculate() pass over a graph."""

    jump_probability: float
    rounds_per_node: int
    starters: int  # starter nodes walked from
    walks: int  # starters * rounds_per_node
    steps: int  # total traverse() calls made
    truncated: int  # walks stopped by max_walk_steps
    config_hash: str | None = None  # set when run from a PagerankConfig

    @property
    def mean_walk_length(self) -> float:
        return self.steps / self.walks if self.walks else 0.0


@dataclass(frozen=True)
class BatchCounts:
    """Traversal counts produced by vectorized CSR walks.

    Omits slots=True since numpy arrays don't interact well with __slots__.
    """

    counts: np.ndarray  # int64 array of length n, visits per vertex
    stats: CalculationStats
