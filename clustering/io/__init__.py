"""Input loaders and console output formatting."""

from clustering.io.loaders import (
    LenientParseWarning,
    MalformedInputError,
    MatrixParseResult,
    load_matrix,
    load_nodes,
    parse_matrix,
    parse_nodes,
)
from clustering.io.output import format_coefficient, format_matrix, format_ratio

__all__ = [
    "LenientParseWarning",
    "MalformedInputError",
    "MatrixParseResult",
    "format_coefficient",
    "format_matrix",
    "format_ratio",
    "load_matrix",
    "load_nodes",
    "parse_matrix",
    "parse_nodes",
]
