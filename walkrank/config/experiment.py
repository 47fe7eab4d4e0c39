"""PageRank run configuration: frozen and slotted for immutability."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PagerankConfig:
    """Parameters for one random-walk PageRank calculation.

    All fields are frozen and typed. Range validation runs in
    __post_init__ to reject invalid configurations early.
    """

    jump_probability: float = 0.15  # per-step walk termination probability
    rounds_per_node: int = 500  # walks started from each starter node
    seed: int = 31337
    max_walk_steps: int | None = None  # None = walks bounded only by jumps/dead ends
    n_workers: int = 1  # independent graph instances run concurrently
    description: str = ""

    def __post_init__(self) -> None:
        if not 0.0 <= self.jump_probability <= 1.0:
            raise ValueError(
                f"jump_probability must be in [0, 1], got {self.jump_probability}"
            )
        if self.rounds_per_node < 0:
            raise ValueError(
                f"rounds_per_node must be >= 0, got {self.rounds_per_node}"
            )
        if self.max_walk_steps is not None and self.max_walk_steps < 1:
            raise ValueError(
                f"max_walk_steps must be >= 1 or None, got {self.max_walk_steps}"
            )
        if self.n_workers < 1:
            raise ValueError(f"n_workers must be >= 1, got {self.n_workers}")
