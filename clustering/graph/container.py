"""Graph container orchestrating registry, matrix, triplet counts and ratio.

States move UNINITIALIZED -> LOADED -> TABULATED. Loading a matrix jumps
straight to TABULATED. Metrics are recomputed on every call, so replacing
the matrix with load_matrix is immediately reflected.
"""

import logging
from collections.abc import Sequence

import numpy as np

from clustering.config.settings import ClusteringConfig
from clustering.graph.adjacency import (
    MATRIX_DTYPE,
    build_adjacency_matrix,
    is_symmetric,
    nodes_from_matrix,
)
from clustering.graph.types import GraphState, Node
from clustering.io.output import format_matrix
from clustering.metrics.coefficient import CoefficientResult, clustering_coefficient
from clustering.metrics.triangles import closed_triplet_count
from clustering.metrics.triplets import open_triplet_count

log = logging.getLogger(__name__)


class GraphStateError(RuntimeError):
    """Raised when an operation needs a state the graph has not reached."""


class ClusteringGraph:
    """Nodes, their adjacency matrix, and the clustering metrics over them."""

    def __init__(
        self,
        nodes: Sequence[Node] | None = None,
        config: ClusteringConfig | None = None,
    ) -> None:
        self.config = config if config is not None else ClusteringConfig()
        self.nodes: list[Node] = list(nodes) if nodes is not None else []
        self.matrix: np.ndarray | None = None
        self.state = (
            GraphState.LOADED if nodes is not None else GraphState.UNINITIALIZED
        )

    @classmethod
    def from_nodes(
        cls,
        nodes: Sequence[Node],
        config: ClusteringConfig | None = None,
    ) -> "ClusteringGraph":
        """Load a node list and build its matrix."""
        graph = cls(nodes, config)
        graph.tabulate()
        return graph

    @classmethod
    def from_matrix(
        cls,
        matrix: np.ndarray,
        config: ClusteringConfig | None = None,
    ) -> "ClusteringGraph":
        """Load a prebuilt adjacency matrix, synthesizing its nodes."""
        graph = cls(config=config)
        graph.load_matrix(matrix)
        return graph

    def tabulate(self) -> np.ndarray:
        """Build the adjacency matrix from the current nodes.

        An uninitialized graph tabulates to a 0 x 0 matrix.

        Raises:
            UnknownIdentifierError: If a subject is not a declared node.
            DuplicateIdentifierError: If strict names are configured and a
                name repeats.
        """
        adjacency = self.config.adjacency
        self.matrix = build_adjacency_matrix(
            self.nodes,
            symmetrize=adjacency.symmetrize,
            strict_names=adjacency.strict_names,
        )
        self.state = GraphState.TABULATED

        if self.nodes and not is_symmetric(self.matrix):
            log.info(
                "Adjacency matrix is not symmetric; triangle counts follow "
                "the directed incidence as recorded"
            )
        log.info("Tabulated graph with %d nodes", len(self.nodes))
        return self.matrix

    def load_matrix(self, matrix: np.ndarray) -> None:
        """Replace the matrix and nodes with those of a prebuilt matrix."""
        matrix = np.asarray(matrix, dtype=MATRIX_DTYPE)
        self.nodes = nodes_from_matrix(matrix)
        self.matrix = matrix
        self.state = GraphState.TABULATED
        log.info("Loaded %dx%d adjacency matrix", *matrix.shape)

    def _require_matrix(self) -> np.ndarray:
        if self.state is not GraphState.TABULATED or self.matrix is None:
            raise GraphStateError(
                f"Graph is {self.state.value}; call tabulate() first"
            )
        return self.matrix

    def _counting_matrix(self) -> np.ndarray:
        # The combinatorial rule counts simple triplets, so self-loops must
        # not close walks; the reference rule keeps them.
        matrix = self._require_matrix()
        if self.config.counting.open_rule != "combinatorial":
            return matrix
        matrix = matrix.copy()
        np.fill_diagonal(matrix, 0)
        return matrix

    def closed_triplet_count(self) -> int:
        counting = self.config.counting
        return closed_triplet_count(
            self._counting_matrix(),
            divisor=counting.closed_divisor,
            accumulator=counting.accumulator,
            backend=counting.backend,
        )

    def open_triplet_count(self) -> int:
        counting = self.config.counting
        return open_triplet_count(
            self.nodes,
            rule=counting.open_rule,
            matrix=self._require_matrix(),
            accumulator=counting.accumulator,
            backend=counting.backend,
        )

    def coefficient(self) -> CoefficientResult:
        """Compute the global clustering coefficient.

        Returns:
            CoefficientResult; check ``is_defined`` before formatting, it is
            False when the graph has no closed or open triplets.
        """
        result = clustering_coefficient(
            self.closed_triplet_count(), self.open_triplet_count()
        )
        log.info("%d / %d", result.closed, result.total)
        if not result.is_defined:
            log.warning("Clustering coefficient undefined: graph has no triplets")
        return result

    def draw_table(self) -> list[str]:
        """Return the matrix as printable rows."""
        return format_matrix(self._require_matrix())

    def __len__(self) -> int:
        return len(self.nodes)
