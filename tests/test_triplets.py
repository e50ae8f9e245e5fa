"""Tests for closed-triplet (trace) and open-triplet counting."""

import numpy as np
import pytest

from clustering.graph.adjacency import build_adjacency_matrix
from clustering.graph.types import Node
from clustering.metrics.triangles import (
    AccumulatorOverflowError,
    closed_triplet_count,
    cube_diagonal,
    matrix_power_trace,
)
from clustering.metrics.triplets import (
    combinatorial_open_triplets,
    open_triplet_count,
    reference_open_triplets,
)


def complete_graph(n: int) -> np.ndarray:
    """Adjacency matrix of K_n: all off-diagonal entries 1."""
    return np.ones((n, n), dtype=np.int64) - np.eye(n, dtype=np.int64)


class TestMatrixPowerTrace:
    """trace(A^3) counts closed walks of length 3."""

    def test_zero_matrix(self) -> None:
        assert matrix_power_trace(np.zeros((5, 5), dtype=np.int64)) == 0

    def test_empty_matrix(self) -> None:
        assert matrix_power_trace(np.zeros((0, 0), dtype=np.int64)) == 0

    def test_symmetric_triangle(self) -> None:
        assert matrix_power_trace(complete_graph(3)) == 6

    def test_directed_cycle(self, directed_cycle_nodes) -> None:
        matrix = build_adjacency_matrix(directed_cycle_nodes)
        assert matrix_power_trace(matrix) == 3

    def test_complete_graph_closed_form(self) -> None:
        # trace((J - I)^3) = n(n - 1)(n - 2)
        for n in (4, 5, 10):
            assert matrix_power_trace(complete_graph(n)) == n * (n - 1) * (n - 2)

    def test_bipartite_path_has_no_odd_cycles(self, path_nodes) -> None:
        matrix = build_adjacency_matrix(path_nodes)
        assert matrix_power_trace(matrix) == 0

    def test_cube_diagonal_per_vertex(self) -> None:
        assert cube_diagonal(complete_graph(3)).tolist() == [2, 2, 2]


class TestBackends:
    """Sparse and dense products agree."""

    def test_sparse_matches_dense_triangle(self) -> None:
        matrix = complete_graph(3)
        assert matrix_power_trace(matrix, backend="sparse") == 6

    def test_sparse_matches_dense_random(self) -> None:
        rng = np.random.default_rng(7)
        matrix = (rng.random((30, 30)) < 0.2).astype(np.int64)
        np.fill_diagonal(matrix, 0)
        dense = cube_diagonal(matrix, backend="dense")
        sparse = cube_diagonal(matrix, backend="sparse")
        assert np.array_equal(dense, sparse)

    def test_unknown_backend(self) -> None:
        with pytest.raises(ValueError, match="backend"):
            matrix_power_trace(complete_graph(3), backend="gpu")


class TestAccumulatorWidth:
    """Narrow accumulators raise instead of wrapping."""

    def test_uint16_holds_k41(self) -> None:
        # 41 * 40 * 39 = 63960 <= 65535
        assert matrix_power_trace(complete_graph(41), accumulator="uint16") == 63960

    def test_uint16_overflows_on_k42(self) -> None:
        # 42 * 41 * 40 = 68880 > 65535
        with pytest.raises(AccumulatorOverflowError, match="uint16"):
            matrix_power_trace(complete_graph(42), accumulator="uint16")

    def test_int64_handles_k42(self) -> None:
        assert matrix_power_trace(complete_graph(42), accumulator="int64") == 68880

    def test_uint32_handles_k42(self) -> None:
        assert matrix_power_trace(complete_graph(42), accumulator="uint32") == 68880

    def test_sparse_backend_checks_overflow(self) -> None:
        with pytest.raises(AccumulatorOverflowError):
            matrix_power_trace(
                complete_graph(42), accumulator="uint16", backend="sparse"
            )

    def test_unknown_accumulator(self) -> None:
        with pytest.raises(ValueError, match="accumulator"):
            matrix_power_trace(complete_graph(3), accumulator="uint8")


class TestClosedTripletCount:
    """Closed triplets = trace(A^3) // divisor."""

    def test_reference_divisor_on_triangle(self, triangle_nodes) -> None:
        matrix = build_adjacency_matrix(triangle_nodes)
        assert closed_triplet_count(matrix) == 3

    def test_triangle_divisor(self, triangle_nodes) -> None:
        matrix = build_adjacency_matrix(triangle_nodes)
        assert closed_triplet_count(matrix, divisor=6) == 1

    def test_zero_matrix(self) -> None:
        assert closed_triplet_count(np.zeros((4, 4), dtype=np.int64)) == 0

    def test_directed_cycle_reference(self, directed_cycle_nodes) -> None:
        # Only 3 closed walks without symmetrization; 3 // 2 = 1
        matrix = build_adjacency_matrix(directed_cycle_nodes)
        assert closed_triplet_count(matrix) == 1

    def test_directed_cycle_symmetrized(self, directed_cycle_nodes) -> None:
        matrix = build_adjacency_matrix(directed_cycle_nodes, symmetrize=True)
        assert closed_triplet_count(matrix) == 3

    def test_invalid_divisor(self) -> None:
        with pytest.raises(ValueError, match="divisor"):
            closed_triplet_count(complete_graph(3), divisor=3)


class TestReferenceOpenTriplets:
    """Flat +2 for every node with more than one subject.

    Not the textbook count: a node with d > 2 subjects still adds 2 rather
    than C(d, 2).
    """

    def test_triangle(self, triangle_nodes) -> None:
        assert reference_open_triplets(triangle_nodes) == 6

    def test_single_subject_contributes_zero(self) -> None:
        assert reference_open_triplets([Node("A", ("B",)), Node("B")]) == 0

    def test_no_subjects_contributes_zero(self) -> None:
        assert reference_open_triplets([Node("A"), Node("B")]) == 0

    def test_hub_with_three_subjects_adds_two(self, star_nodes) -> None:
        assert reference_open_triplets(star_nodes) == 2

    def test_empty(self) -> None:
        assert reference_open_triplets([]) == 0


class TestCombinatorialOpenTriplets:
    """Sum of C(d, 2) minus closed triplets centred on each node."""

    def test_star_counts_all_pairs(self, star_nodes) -> None:
        matrix = build_adjacency_matrix(star_nodes)
        assert combinatorial_open_triplets(matrix) == 3

    def test_triangle_has_no_open_triplets(self, triangle_nodes) -> None:
        matrix = build_adjacency_matrix(triangle_nodes)
        assert combinatorial_open_triplets(matrix) == 0

    def test_path(self, path_nodes) -> None:
        matrix = build_adjacency_matrix(path_nodes)
        assert combinatorial_open_triplets(matrix) == 1

    def test_self_loop_excluded_from_degree(self) -> None:
        matrix = np.array([[1, 1], [1, 0]], dtype=np.int64)
        assert combinatorial_open_triplets(matrix) == 0

    def test_self_loop_does_not_close_triplets(self) -> None:
        # Path 0 - 1 - 2 with a loop on the centre: one open triplet
        matrix = np.array([[0, 1, 0], [1, 1, 1], [0, 1, 0]], dtype=np.int64)
        assert combinatorial_open_triplets(matrix) == 1

    def test_empty(self) -> None:
        assert combinatorial_open_triplets(np.zeros((0, 0), dtype=np.int64)) == 0

    def test_non_symmetric_warns(self, directed_cycle_nodes, caplog) -> None:
        matrix = build_adjacency_matrix(directed_cycle_nodes)
        combinatorial_open_triplets(matrix)
        assert "non-symmetric" in caplog.text


class TestOpenTripletDispatch:
    """open_triplet_count routes to the configured rule."""

    def test_reference_rule(self, star_nodes) -> None:
        assert open_triplet_count(star_nodes) == 2

    def test_combinatorial_rule(self, star_nodes) -> None:
        matrix = build_adjacency_matrix(star_nodes)
        assert open_triplet_count(star_nodes, "combinatorial", matrix) == 3

    def test_combinatorial_requires_matrix(self, star_nodes) -> None:
        with pytest.raises(ValueError, match="matrix"):
            open_triplet_count(star_nodes, "combinatorial")

    def test_unknown_rule(self, star_nodes) -> None:
        with pytest.raises(ValueError, match="rule"):
            open_triplet_count(star_nodes, "textbook")
