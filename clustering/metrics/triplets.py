"""Open-triplet (connected triple) counting.

Two rules are supported:

- ``reference``: every node with more than one subject adds 2, others add
  nothing. This is a flat proxy, not the number of length-2 paths centred
  on the node; it diverges from the textbook count once a node has more
  than two subjects.
- ``combinatorial``: every node adds C(d, 2) - t, where d is its
  off-diagonal row degree and t = (A^3)_vv / 2 the closed triplets centred
  on it. Needs the adjacency matrix.
"""

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np

from clustering.metrics.triangles import cube_diagonal

if TYPE_CHECKING:
    from clustering.graph.types import Node

log = logging.getLogger(__name__)

REFERENCE_INCREMENT = 2


def reference_open_triplets(nodes: Sequence["Node"]) -> int:
    return sum(REFERENCE_INCREMENT for node in nodes if node.degree > 1)


def combinatorial_open_triplets(
    matrix: np.ndarray,
    accumulator: str = "int64",
    backend: str = "dense",
) -> int:
    """Count connected triples that are not closed, from the matrix.

    Args:
        matrix: Square 0/1 adjacency matrix, expected symmetric.
        accumulator: Accumulator width for the A^3 diagonal.
        backend: "dense" or "sparse".

    Returns:
        Sum over nodes of C(d, 2) - (A^3)_vv // 2, each term floored at 0.
        Self-loops are dropped before both the degree and the cube.
    """
    if matrix.shape[0] == 0:
        return 0

    if not np.array_equal(matrix, matrix.T):
        log.warning(
            "Combinatorial open-triplet count on a non-symmetric matrix; "
            "enable adjacency.symmetrize for a meaningful result"
        )

    off_diagonal = np.asarray(matrix, dtype=np.int64).copy()
    np.fill_diagonal(off_diagonal, 0)
    degrees = off_diagonal.sum(axis=1)

    pairs = degrees * (degrees - 1) // 2
    closed = cube_diagonal(off_diagonal, accumulator, backend) // 2
    per_node = np.maximum(pairs - closed, 0)
    return int(per_node.sum())


def open_triplet_count(
    nodes: Sequence["Node"],
    rule: str = "reference",
    matrix: np.ndarray | None = None,
    accumulator: str = "int64",
    backend: str = "dense",
) -> int:
    """Count open triplets under the given rule.

    Args:
        nodes: Node list (used by the reference rule).
        rule: "reference" or "combinatorial".
        matrix: Adjacency matrix, required by the combinatorial rule.
        accumulator: Accumulator width for the combinatorial rule.
        backend: Product backend for the combinatorial rule.

    Returns:
        Integer count.
    """
    if rule == "reference":
        return reference_open_triplets(nodes)
    if rule == "combinatorial":
        if matrix is None:
            raise ValueError("The combinatorial rule requires the adjacency matrix")
        return combinatorial_open_triplets(matrix, accumulator, backend)
    raise ValueError(f"Unknown open-triplet rule {rule!r}")
