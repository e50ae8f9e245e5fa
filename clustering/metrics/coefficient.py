"""Global clustering coefficient from closed and open triplet counts."""

import math
from dataclasses import dataclass


class UndefinedCoefficientError(ArithmeticError):
    """Raised when a defined coefficient is required but no triplets exist."""


@dataclass(frozen=True, slots=True)
class CoefficientResult:
    """Closed and open triplet counts with their ratio.

    ``value`` is NaN when both counts are zero: an empty graph, or one with
    no triangles and no multi-subject nodes. Check ``is_defined`` before
    formatting.
    """

    closed: int
    open: int
    value: float

    @property
    def total(self) -> int:
        return self.closed + self.open

    @property
    def is_defined(self) -> bool:
        return not math.isnan(self.value)

    def require(self) -> float:
        """Return the coefficient, raising if it is undefined."""
        if not self.is_defined:
            raise UndefinedCoefficientError(
                "Clustering coefficient is undefined: "
                "no closed or open triplets"
            )
        return self.value


def clustering_coefficient(closed: int, open_: int) -> CoefficientResult:
    """Compute closed / (closed + open).

    Args:
        closed: Closed-triplet count.
        open_: Open-triplet count.

    Returns:
        CoefficientResult; value is NaN when closed + open == 0.
    """
    if closed < 0 or open_ < 0:
        raise ValueError(
            f"Triplet counts must be non-negative, got closed={closed}, "
            f"open={open_}"
        )

    total = closed + open_
    value = closed / total if total else math.nan
    return CoefficientResult(closed=closed, open=open_, value=value)
