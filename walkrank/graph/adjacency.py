"""In-memory edge index: the default node collection and edge resolver.

The walk engine only needs an ordered node sequence and an edges_for()
function. EdgeIndex provides both from an edge list or a scipy sparse
adjacency matrix, so callers without their own storage can get started.
"""

import logging
from collections.abc import Callable, Hashable, Iterable, Sequence

import scipy.sparse

from walkrank.node.base import NamedNode
from walkrank.node.types import Node

log = logging.getLogger(__name__)


class EdgeIndex:
    """Ordered nodes with per-node ordered outlinks.

    Nodes are registered in first-seen order. Adding the same edge twice
    creates a parallel edge, which doubles its chance of being followed.
    Edges can only be added; there is no removal. by_key maps caller keys
    to nodes for every node registered with a key: all nodes built by
    from_edges() and from_csr(), plus any add_node(node, key) calls.
    """

    def __init__(self) -> None:
        self.nodes: list[Node] = []
        self._positions: dict[Node, int] = {}
        self._edges: list[list[Node]] = []
        self.by_key: dict[Hashable, Node] = {}

    def add_node(self, node: Node, key: Hashable | None = None) -> int:
        """Register node if unseen and return its position.

        When key is given, by_key[key] maps to node from then on.
        """
        if key is not None:
            self.by_key[key] = node
        position = self._positions.get(node)
        if position is None:
            self.nodes.append(node)
            self._edges.append([])
            position = len(self.nodes) - 1
            self._positions[node] = position
        return position

    def add_edge(self, node_from: Node, node_to: Node) -> None:
        """Add a directed edge node_from -> node_to."""
        src = self.add_node(node_from)
        self.add_node(node_to)
        self._edges[src].append(node_to)

    def edges_for(self, node: Node) -> Sequence[Node]:
        """Outgoing neighbors of node, empty for dead ends and unknown nodes."""
        position = self._positions.get(node)
        if position is None:
            return ()
        return self._edges[position]

    def num_edges(self) -> int:
        return sum(len(edges) for edges in self._edges)

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, node: object) -> bool:
        return node in self._positions

    @classmethod
    def from_edges(
        cls,
        pairs: Iterable[tuple[Hashable, Hashable]],
        node_factory: Callable[[Hashable, int], Node] | None = None,
    ) -> "EdgeIndex":
        """Build an index from (source key, target key) pairs.

        Keys are turned into nodes once each by node_factory(key, id), where
        id is the first-seen position. Defaults to NamedNode(str(key), id).
        Keys land in index.by_key and must not be None.
        """
        if node_factory is None:
            node_factory = lambda key, i: NamedNode(str(key), id=i)  # noqa: E731

        index = cls()
        for left, right in pairs:
            for key in (left, right):
                if key not in index.by_key:
                    index.add_node(node_factory(key, len(index.by_key)), key)
            index.add_edge(index.by_key[left], index.by_key[right])
        log.debug("Built edge index: %d nodes, %d edges", len(index), index.num_edges())
        return index

    @classmethod
    def from_csr(
        cls,
        adjacency: scipy.sparse.spmatrix,
        nodes: Sequence[Node] | None = None,
    ) -> "EdgeIndex":
        """Build an index from a square sparse adjacency matrix.

        Row i holds the out-edges of vertex i; stored zeros are dropped and
        weights are ignored. Vertex i maps to nodes[i], or to NamedNode(str(i))
        when nodes is None, and by_key[i] is that node. Every vertex is
        registered, including isolated ones.
        """
        csr = scipy.sparse.csr_matrix(adjacency)
        n = csr.shape[0]
        if csr.shape[1] != n:
            raise ValueError(f"adjacency must be square, got shape {csr.shape}")
        if nodes is None:
            nodes = [NamedNode(str(i), id=i) for i in range(n)]
        elif len(nodes) != n:
            raise ValueError(
                f"expected {n} nodes for adjacency, got {len(nodes)}"
            )
        csr.eliminate_zeros()

        index = cls()
        for i, node in enumerate(nodes):
            index.add_node(node, i)
        indptr, indices = csr.indptr, csr.indices
        for i in range(n):
            for j in indices[indptr[i]:indptr[i + 1]]:
                index.add_edge(nodes[i], nodes[int(j)])
        log.debug("Built edge index from CSR: %d nodes, %d edges", n, index.num_edges())
        return index

    def __repr__(self) -> str:
        return f"EdgeIndex(nodes={len(self)}, edges={self.num_edges()})"
