"""Edge-resolution collaborators for the walk engine."""

from walkrank.graph.adjacency import EdgeIndex

__all__ = [
    "EdgeIndex",
]
