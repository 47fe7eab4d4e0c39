"""Approximate PageRank by counting visits of random walks."""

from walkrank.config import DEFAULT_CONFIG, PagerankConfig
from walkrank.graph import EdgeIndex
from walkrank.node import BaseNode, NamedNode, Node
from walkrank.walk import (
    Graph,
    NoTraversalsError,
    NotCalculatedError,
    PagerankError,
    batch_pagerank,
    calculate_parallel,
    run_config,
)

__all__ = [
    "Node",
    "BaseNode",
    "NamedNode",
    "EdgeIndex",
    "Graph",
    "PagerankConfig",
    "DEFAULT_CONFIG",
    "PagerankError",
    "NotCalculatedError",
    "NoTraversalsError",
    "batch_pagerank",
    "calculate_parallel",
    "run_config",
]
