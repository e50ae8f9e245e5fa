"""Console formatting for adjacency matrices and coefficients."""

import numpy as np

from clustering.metrics.coefficient import CoefficientResult

UNDEFINED = "undefined"


def format_matrix(matrix: np.ndarray) -> list[str]:
    """Format each matrix row as ``[0, 1, 1]``."""
    return ["[" + ", ".join(str(int(v)) for v in row) + "]" for row in matrix]


def format_coefficient(result: CoefficientResult, precision: int = 5) -> str:
    """Format the coefficient with fixed decimals, or ``undefined``."""
    if not result.is_defined:
        return UNDEFINED
    return f"{result.value:.{precision}f}"


def format_ratio(result: CoefficientResult) -> str:
    """Format the ``closed / total`` line."""
    return f"{result.closed} / {result.total}"
