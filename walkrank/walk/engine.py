"""Random-walk PageRank engine.

Approximates PageRank by counting visits of randomized walks rather than
iterating over a transition matrix (Avrachenkov et al.; see also
http://arxiv.org/pdf/1006.2880.pdf). Each walk starts at a starter node,
visits it, then at every step either terminates with the jump probability,
terminates at a dead end, or moves to a uniformly chosen outgoing neighbor.

Only aggregate traversal counts are kept, not walk histories. New edges and
nodes can therefore be folded in by calling calculate() again, but edge
removal cannot be accounted for.
"""

import logging
from collections.abc import Callable, Hashable, Sequence
from dataclasses import replace

import numpy as np

from walkrank.config.experiment import PagerankConfig
from walkrank.config.hashing import config_hash
from walkrank.node.types import Node
from walkrank.walk.errors import NotCalculatedError, NoTraversalsError
from walkrank.walk.types import CalculationStats

log = logging.getLogger(__name__)

EdgeResolver = Callable[[Node], Sequence[Node]]


class Graph:
    """Walk engine and score accessor over a caller-owned node collection.

    The node sequence is held by reference: nodes the caller appends before
    the next calculate() are walked and scored. edges_for is called on every
    step and never cached.

    A Graph owns its random generator, so it must not be shared across
    threads. Run several Graph instances over the same nodes for
    parallelism; node counters are the only shared state.
    """

    def __init__(
        self,
        seed: int,
        edges_for: EdgeResolver,
        nodes: Sequence[Node],
        max_walk_steps: int | None = None,
    ) -> None:
        if max_walk_steps is not None and max_walk_steps < 1:
            raise ValueError(
                f"max_walk_steps must be >= 1 or None, got {max_walk_steps}"
            )
        self.seed = seed
        self.nodes = nodes
        self.max_walk_steps = max_walk_steps
        self._edges_for = edges_for
        self._rng = np.random.default_rng(seed)
        self.jump_probability = 0.0
        self.calculated = False
        self.last_stats: CalculationStats | None = None
        self._traversals = 0
        self._summed = False

    @classmethod
    def from_config(
        cls,
        config: PagerankConfig,
        edges_for: EdgeResolver,
        nodes: Sequence[Node],
    ) -> "Graph":
        """Build a Graph seeded and step-bounded as the config says."""
        return cls(
            config.seed, edges_for, nodes, max_walk_steps=config.max_walk_steps
        )

    def calculate(self, jump_probability: float, rounds_per_node: int) -> None:
        """Run rounds_per_node walks from every starter node, in place.

        Counts accumulate across calls; nothing is reset. A jump_probability
        of 0 on a graph without dead ends never terminates unless
        max_walk_steps is set.

        Args:
            jump_probability: Per-step termination probability in [0, 1].
                Compared with strict < against a uniform [0, 1) draw.
            rounds_per_node: Walks started from each starter node.
        """
        if not 0.0 <= jump_probability <= 1.0:
            raise ValueError(
                f"jump_probability must be in [0, 1], got {jump_probability}"
            )
        if rounds_per_node < 0:
            raise ValueError(f"rounds_per_node must be >= 0, got {rounds_per_node}")

        self.jump_probability = jump_probability
        # Counts are about to change; any cached total is stale.
        self._summed = False
        self._traversals = 0

        starters = 0
        steps = 0
        truncated = 0
        for node in self.nodes:
            if not node.is_starter():
                continue
            starters += 1
            for _ in range(rounds_per_node):
                walk_steps, was_truncated = self._walk_from(node)
                steps += walk_steps
                truncated += was_truncated

        self.last_stats = CalculationStats(
            jump_probability=jump_probability,
            rounds_per_node=rounds_per_node,
            starters=starters,
            walks=starters * rounds_per_node,
            steps=steps,
            truncated=truncated,
        )
        self.calculated = True

        if truncated:
            log.warning(
                "%d of %d walks truncated at max_walk_steps=%d",
                truncated,
                self.last_stats.walks,
                self.max_walk_steps,
            )
        log.info(
            "Calculated: %d starters x %d rounds, %d steps (mean walk %.2f)",
            starters,
            rounds_per_node,
            steps,
            self.last_stats.mean_walk_length,
        )

    def calculate_with(self, config: PagerankConfig) -> None:
        """calculate() using the config's jump probability and rounds.

        The resulting last_stats carry the config's hash.
        """
        self.calculate(config.jump_probability, config.rounds_per_node)
        self.last_stats = replace(self.last_stats, config_hash=config_hash(config))

    def _walk_from(self, node: Node) -> tuple[int, bool]:
        """Walk from node until a jump, a dead end, or the step bound.

        Returns:
            (number of nodes visited, whether the step bound stopped the walk).
        """
        steps = 0
        while True:
            node.traverse()
            steps += 1

            if self._rng.random() < self.jump_probability:
                return steps, False

            outlinks = self._edges_for(node)
            if len(outlinks) < 1:
                return steps, False

            if self.max_walk_steps is not None and steps >= self.max_walk_steps:
                return steps, True

            node = outlinks[int(self._rng.integers(0, len(outlinks)))]

    def total_traversals(self) -> int:
        """Sum of traversal counts over all nodes, cached per calculation.

        Raises:
            NotCalculatedError: If calculate() has not completed yet.
        """
        if not self.calculated:
            raise NotCalculatedError("Pagerank graph has not yet been calculated")
        if not self._summed:
            self._traversals = sum(node.traversals() for node in self.nodes)
            self._summed = True
            log.debug(
                "Summed %d traversals over %d nodes",
                self._traversals,
                len(self.nodes),
            )
        return self._traversals

    def pagerank(self, node: Node, normalized: bool = True) -> float:
        """Estimated PageRank of node.

        Normalized scores are the node's share of all recorded visits and sum
        to 1 over the graph. Unnormalized scores are scaled by the node count,
        so they sum to len(nodes) and average to 1.

        Raises:
            NotCalculatedError: If calculate() has not completed yet.
            NoTraversalsError: If no traversals were recorded at all.
        """
        total = self.total_traversals()
        if total == 0:
            raise NoTraversalsError(
                "No traversals recorded; run calculate() with starter nodes "
                "and rounds_per_node > 0"
            )
        score = node.traversals() / total
        if normalized:
            return score
        return len(self.nodes) * score

    def pageranks(self, normalized: bool = True) -> dict[Hashable, float]:
        """pagerank() for every node, keyed by node."""
        return {node: self.pagerank(node, normalized) for node in self.nodes}
