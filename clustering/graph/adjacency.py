"""Adjacency matrix construction from node lists, and its inverse.

The matrix records directed incidence: ``matrix[row, col] = 1`` iff the node
at index ``col`` lists the node at index ``row`` as a subject. Triangle
counting assumes an undirected graph, so either the input must list every
edge from both ends, or the builder must be asked to symmetrize.
"""

import logging
from collections.abc import Sequence

import numpy as np

from clustering.graph.registry import build_registry
from clustering.graph.types import Node

log = logging.getLogger(__name__)

MATRIX_DTYPE = np.int64


def build_adjacency_matrix(
    nodes: Sequence[Node],
    symmetrize: bool = False,
    strict_names: bool = False,
) -> np.ndarray:
    """Build the V x V binary adjacency matrix of a node list.

    Repeated subjects collapse to a single 1. Self-loops land on the
    diagonal and are not treated specially.

    Args:
        nodes: Ordered node list; index of a node is its list position.
        symmetrize: Also set ``matrix[col, row]`` for every subject edge.
        strict_names: Raise on duplicate node names instead of warning.

    Returns:
        int64 array of shape (len(nodes), len(nodes)) with entries 0 or 1.

    Raises:
        UnknownIdentifierError: If a subject is not a declared node name.
        DuplicateIdentifierError: If ``strict_names`` and a name repeats.
    """
    n = len(nodes)
    registry = build_registry(nodes, strict=strict_names)
    matrix = np.zeros((n, n), dtype=MATRIX_DTYPE)

    for node in nodes:
        col = registry.index(node.name)
        for subject in node.subjects:
            row = registry.index(subject)
            matrix[row, col] = 1
            if symmetrize:
                matrix[col, row] = 1

    log.debug(
        "Built %dx%d adjacency matrix with %d nonzero entries (symmetrize=%s)",
        n,
        n,
        int(np.count_nonzero(matrix)),
        symmetrize,
    )
    return matrix


def nodes_from_matrix(matrix: np.ndarray) -> list[Node[int]]:
    """Synthesize a node list from an adjacency matrix.

    Node ``col`` is named by its index and its subjects are the row indices
    holding a 1 in column ``col``, so rebuilding a matrix from the result
    reproduces ``matrix`` exactly for any binary input. For a non-symmetric
    matrix the subjects are therefore in-neighbour lists, so the reference
    open-triplet count follows in-degree.

    Args:
        matrix: Square binary matrix.

    Returns:
        One Node per index, in index order.
    """
    errors = validate_matrix(matrix)
    if errors:
        raise ValueError("; ".join(errors))

    return [
        Node(
            name=col,
            subjects=tuple(int(row) for row in np.flatnonzero(matrix[:, col])),
        )
        for col in range(matrix.shape[0])
    ]


def validate_matrix(matrix: np.ndarray) -> list[str]:
    """Validate an adjacency matrix.

    Checks (cheapest first):
    1. Two-dimensional
    2. Square
    3. Entries are 0 or 1

    Returns:
        List of error strings (empty = valid matrix).
    """
    errors: list[str] = []

    if matrix.ndim != 2:
        errors.append(f"Matrix must be 2-dimensional, got {matrix.ndim} dimensions")
        return errors

    rows, cols = matrix.shape
    if rows != cols:
        errors.append(f"Matrix must be square, got shape {rows}x{cols}")

    if matrix.size and not np.isin(matrix, (0, 1)).all():
        errors.append("Matrix entries must be 0 or 1")

    return errors


def is_symmetric(matrix: np.ndarray) -> bool:
    """Return whether every edge is recorded in both directions."""
    return bool(np.array_equal(matrix, matrix.T))
