"""Smallest-power cycle search over an adjacency matrix.

trace(A^k) counts the closed directed walks of length k. The search walks
k = 1, 2, ..., node_count and stops at the first k whose trace equals the
target. Any elementary cycle has length <= n, so n steps bound the search.
Each step costs one O(n^3) product.
"""

import logging
import time
from typing import Iterator

import numpy as np

from src.algebra.matrix import DimensionMismatchError, is_square, multiply, trace
from src.config.run import RunConfig
from src.graph.types import AdjacencyMatrix
from src.search.types import CycleSearchResult, Found, NotFound

log = logging.getLogger(__name__)


def _as_array(matrix: AdjacencyMatrix | np.ndarray) -> np.ndarray:
    if isinstance(matrix, AdjacencyMatrix):
        return matrix.matrix
    arr = np.asarray(matrix)
    if not is_square(arr):
        raise DimensionMismatchError(
            f"Adjacency matrix must be square, got shape {arr.shape}"
        )
    return arr


def _check_count(name: str, value: int) -> None:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")


def iter_power_traces(
    matrix: AdjacencyMatrix | np.ndarray, max_steps: int
) -> Iterator[tuple[int, int]]:
    """Yield (k, trace(A^k)) for k = 1 .. max_steps.

    A^1 is a copy of the input; every later power is one multiply() of
    the previous power by A. The input is never modified.

    Args:
        matrix: Square adjacency matrix A.
        max_steps: Largest power to compute.

    Yields:
        (step, trace) pairs in increasing step order.
    """
    adj = _as_array(matrix)
    power = np.array(adj, copy=True)

    for step in range(1, max_steps + 1):
        if step > 1:
            power = multiply(power, adj)
        yield step, trace(power)


def search(
    matrix: AdjacencyMatrix | np.ndarray,
    target_cycle_count: int,
    node_count: int,
) -> CycleSearchResult:
    """Find the smallest k in [1, node_count] with trace(A^k) == target.

    The first match wins. At most node_count - 1 multiplications are
    performed, whether or not a match exists.

    Args:
        matrix: Square adjacency matrix (AdjacencyMatrix or array).
        target_cycle_count: Trace value to look for, >= 0.
        node_count: Step bound, normally the number of nodes.

    Returns:
        Found(step, matched_count, elapsed, multiplications) on a match,
        otherwise NotFound(node_count, elapsed, multiplications).

    Raises:
        ValueError: If target_cycle_count or node_count is negative or
            not an integer.
        DimensionMismatchError: If the matrix is not square.
    """
    _check_count("target_cycle_count", target_cycle_count)
    _check_count("node_count", node_count)
    node_count = int(node_count)

    start = time.perf_counter()
    multiplications = 0

    for step, cycles in iter_power_traces(matrix, node_count):
        multiplications = step - 1
        log.debug("trace(A^%d) = %d", step, cycles)
        if cycles == target_cycle_count:
            elapsed = time.perf_counter() - start
            log.info(
                "Cycle count %d matched at power %d (%.2f ms)",
                cycles,
                step,
                elapsed * 1000.0,
            )
            return Found(
                step=step,
                matched_count=cycles,
                elapsed=elapsed,
                multiplications=multiplications,
            )

    elapsed = time.perf_counter() - start
    log.info(
        "No power up to %d has trace %d (%.2f ms)",
        node_count,
        target_cycle_count,
        elapsed * 1000.0,
    )
    return NotFound(
        steps_exhausted=node_count,
        elapsed=elapsed,
        multiplications=multiplications,
    )


def search_from_config(
    graph: AdjacencyMatrix, config: RunConfig
) -> CycleSearchResult:
    """Search a generated graph for the configured target cycle count."""
    return search(graph, config.search.target_cycle_count, graph.n)
