"""Default configuration: single source of truth for calculation parameters."""

from walkrank.config.experiment import PagerankConfig

# jump_probability=0.15, rounds_per_node=500, seed=31337, unbounded walks.
DEFAULT_CONFIG = PagerankConfig()
