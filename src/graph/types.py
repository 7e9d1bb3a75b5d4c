"""Graph data structures for deterministic cycle-graph construction."""

import enum
from dataclasses import dataclass

import numpy as np


class GenerationRule(enum.Enum):
    """Construction rule, selected by the requested cycle count."""

    ACYCLIC = "acyclic"  # cycle_count == 0
    SINGLE_CYCLE = "single_cycle"  # cycle_count == 1
    MULTI_CYCLE = "multi_cycle"  # cycle_count > 1


@dataclass(frozen=True)
class AdjacencyMatrix:
    """Immutable container for a generated directed graph.

    Holds the dense 0/1 adjacency matrix alongside the request that
    produced it. Entry (i, j) == 1 means a directed edge i -> j; a 1 on
    the diagonal is a self-loop. The array is C-contiguous int64 and
    flagged read-only, so every consumer borrows it without copying.
    Uses frozen=True but omits slots=True since numpy arrays don't
    interact well with __slots__.
    """

    matrix: np.ndarray  # int64 array of shape (n, n), entries in {0, 1}
    n: int  # number of nodes
    cycle_count: int  # cycle count requested at generation time
    rule: GenerationRule

    @property
    def edge_count(self) -> int:
        return int(self.matrix.sum())

    def edges(self) -> list[tuple[int, int]]:
        """Directed edges (source, target) in row-major order."""
        rows, cols = np.nonzero(self.matrix)
        return list(zip(rows.tolist(), cols.tolist()))

    def self_loops(self) -> list[int]:
        """Indices of nodes carrying a self-loop."""
        return np.flatnonzero(np.diag(self.matrix)).tolist()
