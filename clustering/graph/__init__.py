"""Graph model: identifier registry, adjacency matrix construction, container."""

from clustering.graph.adjacency import (
    build_adjacency_matrix,
    is_symmetric,
    nodes_from_matrix,
    validate_matrix,
)
from clustering.graph.registry import (
    DuplicateIdentifierError,
    IdentifierRegistry,
    UnknownIdentifierError,
    build_registry,
)
from clustering.graph.types import GraphState, Node
from clustering.graph.container import ClusteringGraph, GraphStateError

__all__ = [
    "ClusteringGraph",
    "DuplicateIdentifierError",
    "GraphState",
    "GraphStateError",
    "IdentifierRegistry",
    "Node",
    "UnknownIdentifierError",
    "build_adjacency_matrix",
    "build_registry",
    "is_symmetric",
    "nodes_from_matrix",
    "validate_matrix",
]
