"""Tests for the matrix-power cycle search."""

from unittest.mock import patch

import numpy as np
import pytest

from src.algebra import DimensionMismatchError
from src.algebra import matrix as matrix_ops
from src.config import GraphConfig, RunConfig, SearchConfig
from src.graph import generate
from src.search import (
    Found,
    NotFound,
    iter_power_traces,
    search,
    search_from_config,
)


class TestIterPowerTraces:
    """iter_power_traces yields trace(A^k) for k = 1 .. max_steps."""

    def test_first_step_is_a_itself(self) -> None:
        graph = generate(4, 1)
        assert next(iter_power_traces(graph, 4)) == (1, 1)

    def test_ring_traces(self) -> None:
        traces = list(iter_power_traces(generate(6, 3), 6))
        assert traces == [(1, 0), (2, 0), (3, 3), (4, 0), (5, 0), (6, 3)]

    def test_zero_steps(self) -> None:
        assert list(iter_power_traces(generate(3, 1), 0)) == []

    def test_accepts_plain_array(self) -> None:
        A = np.array([[0, 1], [1, 0]])
        assert list(iter_power_traces(A, 3)) == [(1, 0), (2, 2), (3, 0)]


class TestSearchFound:
    """First matching power wins."""

    def test_single_cycle_found_at_step_one(self) -> None:
        result = search(generate(4, 1), 1, 4)
        assert isinstance(result, Found)
        assert result.step == 1
        assert result.matched_count == 1
        assert result.multiplications == 0

    def test_ring_found_at_ring_length(self) -> None:
        result = search(generate(10, 3), 3, 10)
        assert isinstance(result, Found)
        assert result.step == 3
        assert result.matched_count == 3
        assert result.multiplications == 2

    def test_full_ring(self) -> None:
        result = search(generate(5, 5), 5, 5)
        assert isinstance(result, Found)
        assert result.step == 5

    def test_zero_target_matches_first_power_of_acyclic(self) -> None:
        result = search(generate(4, 0), 0, 4)
        assert isinstance(result, Found)
        assert result.step == 1
        assert result.matched_count == 0

    def test_elapsed_is_non_negative(self) -> None:
        result = search(generate(6, 2), 2, 6)
        assert result.elapsed >= 0.0
        assert result.elapsed_ms == pytest.approx(result.elapsed * 1000.0)

    def test_self_loop_chain(self) -> None:
        # Complete graph on 2 nodes with self-loops: trace(A^k) = 2^k.
        A = np.ones((2, 2), dtype=np.int64)
        result = search(A, 8, 2)
        assert isinstance(result, NotFound)
        result = search(A, 4, 2)
        assert isinstance(result, Found)
        assert result.step == 2


class TestSearchNotFound:
    """No match within node_count powers yields NotFound."""

    @pytest.mark.parametrize("target", [1, 2, 5])
    def test_acyclic_never_matches(self, target: int) -> None:
        result = search(generate(4, 0), target, 4)
        assert isinstance(result, NotFound)
        assert result.steps_exhausted == 4
        assert result.multiplications == 3

    def test_ring_wrong_target(self) -> None:
        result = search(generate(5, 3), 2, 5)
        assert isinstance(result, NotFound)
        assert result.steps_exhausted == 5

    def test_zero_step_bound(self) -> None:
        result = search(generate(3, 1), 1, 0)
        assert isinstance(result, NotFound)
        assert result.steps_exhausted == 0
        assert result.multiplications == 0


class TestSearchBounds:
    """At most node_count multiplications are performed."""

    @pytest.mark.parametrize("n, c, target", [(6, 0, 1), (6, 3, 3), (7, 1, 1), (8, 2, 99)])
    def test_multiplication_count(self, n: int, c: int, target: int) -> None:
        with patch("src.search.cycles.multiply", wraps=matrix_ops.multiply) as spy:
            result = search(generate(n, c), target, n)
        assert spy.call_count <= n
        assert spy.call_count == result.multiplications

    def test_input_not_mutated(self) -> None:
        A = np.array([[0, 1, 0], [0, 0, 1], [1, 0, 0]], dtype=np.int64)
        before = A.copy()
        search(A, 99, 3)
        np.testing.assert_array_equal(A, before)


class TestSearchErrors:
    def test_negative_target(self) -> None:
        with pytest.raises(ValueError, match="target_cycle_count"):
            search(generate(3, 1), -1, 3)

    @pytest.mark.parametrize("node_count", [-3, -1])
    def test_negative_node_count(self, node_count: int) -> None:
        with pytest.raises(ValueError, match="node_count"):
            search(generate(3, 1), 1, node_count)

    @pytest.mark.parametrize("node_count", [3.0, "3", None, True])
    def test_non_integer_node_count(self, node_count) -> None:
        with pytest.raises(ValueError, match="node_count must be an integer"):
            search(generate(3, 1), 1, node_count)

    def test_non_integer_target(self) -> None:
        with pytest.raises(ValueError, match="target_cycle_count must be an integer"):
            search(generate(3, 1), 1.0, 3)

    def test_numpy_node_count(self) -> None:
        result = search(generate(4, 0), 1, np.int64(4))
        assert isinstance(result, NotFound)
        assert type(result.steps_exhausted) is int

    def test_non_square_matrix(self) -> None:
        with pytest.raises(DimensionMismatchError):
            search(np.zeros((2, 3)), 0, 2)

    def test_multiply_failure_propagates(self) -> None:
        with patch(
            "src.search.cycles.multiply",
            side_effect=DimensionMismatchError("boom"),
        ):
            with pytest.raises(DimensionMismatchError, match="boom"):
                search(generate(3, 2), 5, 3)


class TestSearchFromConfig:
    def test_uses_target_and_graph_size(self) -> None:
        cfg = RunConfig(
            graph=GraphConfig(node_count=8, cycle_count=4),
            search=SearchConfig(target_cycle_count=4),
        )
        graph = generate(8, 4)
        result = search_from_config(graph, cfg)
        assert isinstance(result, Found)
        assert result.step == 4
