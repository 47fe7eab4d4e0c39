"""Concurrent calculation over independent Graph instances.

Each Graph keeps its own random generator, so graphs never share RNG state.
They may share node objects; node counters are the only shared mutable state
and BaseNode increments them under a lock.
"""

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace

from walkrank.config.experiment import PagerankConfig
from walkrank.config.hashing import config_hash
from walkrank.node.types import Node
from walkrank.reproducibility.seed import derive_seeds
from walkrank.walk.engine import EdgeResolver, Graph

log = logging.getLogger(__name__)


def calculate_parallel(
    graphs: Sequence[Graph],
    jump_probability: float,
    rounds_per_node: int,
    max_workers: int | None = None,
) -> None:
    """Run calculate() on every graph concurrently and wait for all of them.

    Exceptions raised inside a worker propagate to the caller.

    Args:
        graphs: Independent Graph instances, one per worker task.
        jump_probability: Per-step termination probability in [0, 1].
        rounds_per_node: Walks started from each starter node, per graph.
        max_workers: Thread pool size (default: one thread per graph).
    """
    if not graphs:
        return
    workers = max_workers or len(graphs)
    log.info(
        "Calculating %d graphs with %d workers (jump=%.3f, rounds=%d)",
        len(graphs),
        workers,
        jump_probability,
        rounds_per_node,
    )
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [
            executor.submit(g.calculate, jump_probability, rounds_per_node)
            for g in graphs
        ]
        for future in futures:
            future.result()

    total_steps = sum(g.last_stats.steps for g in graphs if g.last_stats)
    log.info("Parallel calculation complete: %d steps", total_steps)


def build_graphs(
    config: PagerankConfig,
    edges_for: EdgeResolver,
    nodes: Sequence[Node],
) -> list[Graph]:
    """Build config.n_workers graphs over the same nodes with derived seeds.

    The first graph's seed is derived too, so a run with n_workers=1 does not
    reproduce Graph.from_config(config, ...).
    """
    return [
        Graph(seed, edges_for, nodes, max_walk_steps=config.max_walk_steps)
        for seed in derive_seeds(config.seed, config.n_workers)
    ]


def run_config(
    config: PagerankConfig,
    edges_for: EdgeResolver,
    nodes: Sequence[Node],
) -> list[Graph]:
    """Build n_workers graphs from config and calculate them concurrently.

    Every returned graph is calculated; any of them can be queried, and all
    see the counts accumulated by all workers on the shared nodes. Each
    graph sums the totals lazily on its first query. Each graph's
    last_stats carry the config hash.
    """
    run_hash = config_hash(config)
    log.info("Starting run %s with %d workers", run_hash, config.n_workers)
    graphs = build_graphs(config, edges_for, nodes)
    calculate_parallel(
        graphs, config.jump_probability, config.rounds_per_node, config.n_workers
    )
    for graph in graphs:
        graph.last_stats = replace(graph.last_stats, config_hash=run_hash)
    log.info("Run %s complete", run_hash)
    return graphs
