"""Deterministic directed graph generator for a requested cycle count.

Three construction rules, chosen by the cycle count:

- 0: every node i in [1, n) points at node 0, no self-loop (a star
  converging on node 0, free of directed cycles).
- 1: same star plus a self-loop on node 0. A single node graph gets no
  self-loop, so (1, 1) is indistinguishable from an isolated node.
- c > 1: a ring 0 -> 1 -> ... -> c-1 -> 0 over the first c nodes; every
  node outside the ring points at node 0.
"""

import logging

import numpy as np

from src.config.run import RunConfig
from src.graph.types import AdjacencyMatrix, GenerationRule

log = logging.getLogger(__name__)


class InvalidSpecError(ValueError):
    """Raised when node count or cycle count violates generation preconditions."""


def _check_spec(node_count: int, cycle_count: int) -> None:
    for name, value in (("node_count", node_count), ("cycle_count", cycle_count)):
        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidSpecError(
                f"{name} must be an integer, got {type(value).__name__}"
            )
    if node_count < 1:
        raise InvalidSpecError(f"node_count must be >= 1, got {node_count}")
    if not 0 <= cycle_count <= node_count:
        raise InvalidSpecError(
            f"cycle_count ({cycle_count}) must be in [0, node_count={node_count}]"
        )


def select_rule(cycle_count: int) -> GenerationRule:
    """Map a requested cycle count to its construction rule."""
    if cycle_count == 0:
        return GenerationRule.ACYCLIC
    if cycle_count == 1:
        return GenerationRule.SINGLE_CYCLE
    return GenerationRule.MULTI_CYCLE


def _build_star(adj: np.ndarray, self_loop: bool) -> None:
    n = adj.shape[0]
    adj[1:, 0] = 1
    adj[0, 0] = 1 if (self_loop and n > 1) else 0


def _build_ring(adj: np.ndarray, cycle_count: int) -> None:
    n = adj.shape[0]
    used_nodes: set[int] = set()

    for i in range(cycle_count):
        adj[i, (i + 1) % cycle_count] = 1
        used_nodes.add(i)

    # Outside nodes feed into node 0, which sits on the ring.
    for i in range(n):
        if i not in used_nodes:
            adj[i, 0] = 1


def generate(node_count: int, cycle_count: int) -> AdjacencyMatrix:
    """Build the adjacency matrix for a (node_count, cycle_count) request.

    Construction is deterministic: the same request always yields the
    same matrix.

    Args:
        node_count: Number of nodes, >= 1.
        cycle_count: Requested cycle count, in [0, node_count].

    Returns:
        AdjacencyMatrix with a read-only int64 array of shape
        (node_count, node_count).

    Raises:
        InvalidSpecError: If either count is out of range. Raised before
            any matrix is allocated.
    """
    _check_spec(node_count, cycle_count)
    node_count = int(node_count)
    cycle_count = int(cycle_count)

    rule = select_rule(cycle_count)
    log.debug(
        "Using %s rule for n=%d, cycles=%d", rule.value, node_count, cycle_count
    )

    adj = np.zeros((node_count, node_count), dtype=np.int64)
    if rule is GenerationRule.MULTI_CYCLE:
        _build_ring(adj, cycle_count)
    else:
        _build_star(adj, self_loop=rule is GenerationRule.SINGLE_CYCLE)

    adj.setflags(write=False)

    graph = AdjacencyMatrix(
        matrix=adj, n=node_count, cycle_count=cycle_count, rule=rule
    )
    log.info(
        "Graph generated (n=%d, cycles=%d, rule=%s, edges=%d)",
        node_count,
        cycle_count,
        rule.value,
        graph.edge_count,
    )
    return graph


def generate_from_config(config: RunConfig) -> AdjacencyMatrix:
    """Generate the graph described by a run configuration."""
    return generate(config.graph.node_count, config.graph.cycle_count)
