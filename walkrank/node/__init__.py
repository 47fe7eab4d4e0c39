"""Node contract and reference implementations."""

from walkrank.node.base import BaseNode, NamedNode
from walkrank.node.types import Node

__all__ = [
    "Node",
    "BaseNode",
    "NamedNode",
]
