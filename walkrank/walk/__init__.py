"""Random-walk engine, score accessor, batch and parallel runners."""

from walkrank.walk.batch import batch_pagerank, batch_traversal_counts, normalize_counts
from walkrank.walk.engine import EdgeResolver, Graph
from walkrank.walk.errors import NoTraversalsError, NotCalculatedError, PagerankError
from walkrank.walk.parallel import build_graphs, calculate_parallel, run_config
from walkrank.walk.types import BatchCounts, CalculationStats

__all__ = [
    "Graph",
    "EdgeResolver",
    "PagerankError",
    "NotCalculatedError",
    "NoTraversalsError",
    "CalculationStats",
    "BatchCounts",
    "batch_traversal_counts",
    "batch_pagerank",
    "normalize_counts",
    "calculate_parallel",
    "build_graphs",
    "run_config",
]
