"""Triplet counters and the global clustering coefficient."""

from clustering.metrics.coefficient import (
    CoefficientResult,
    UndefinedCoefficientError,
    clustering_coefficient,
)
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

__all__ = [
    "AccumulatorOverflowError",
    "CoefficientResult",
    "UndefinedCoefficientError",
    "closed_triplet_count",
    "clustering_coefficient",
    "combinatorial_open_triplets",
    "cube_diagonal",
    "matrix_power_trace",
    "open_triplet_count",
    "reference_open_triplets",
]
