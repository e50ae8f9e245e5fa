"""Clustering configuration dataclasses, all frozen and slotted for immutability."""

from dataclasses import dataclass, field

CLOSED_DIVISORS = (2, 6)
OPEN_RULES = ("reference", "combinatorial")
ACCUMULATORS = ("uint16", "uint32", "int64")
BACKENDS = ("dense", "sparse")


@dataclass(frozen=True, slots=True)
class AdjacencyConfig:
    """Adjacency matrix construction parameters."""

    symmetrize: bool = False  # mirror every subject edge into matrix[col][row]
    strict_names: bool = False  # duplicate node names raise instead of warn


@dataclass(frozen=True, slots=True)
class CountingConfig:
    """Triplet counting parameters."""

    closed_divisor: int = 2  # trace(A^3) divisor: 2 = closed triplets, 6 = triangles
    open_rule: str = "reference"  # "reference" (flat +2) or "combinatorial"
    accumulator: str = "int64"  # widest value allowed in A^2 / A^3 entries
    backend: str = "dense"  # numpy dense or scipy sparse products

    def __post_init__(self) -> None:
        if self.closed_divisor not in CLOSED_DIVISORS:
            raise ValueError(
                f"closed_divisor must be one of {CLOSED_DIVISORS}, "
                f"got {self.closed_divisor}"
            )
        if self.open_rule not in OPEN_RULES:
            raise ValueError(
                f"open_rule must be one of {OPEN_RULES}, got {self.open_rule!r}"
            )
        if self.accumulator not in ACCUMULATORS:
            raise ValueError(
                f"accumulator must be one of {ACCUMULATORS}, "
                f"got {self.accumulator!r}"
            )
        if self.backend not in BACKENDS:
            raise ValueError(
                f"backend must be one of {BACKENDS}, got {self.backend!r}"
            )


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Console output parameters."""

    precision: int = 5  # decimal digits of the printed coefficient

    def __post_init__(self) -> None:
        if self.precision < 0:
            raise ValueError(f"precision must be >= 0, got {self.precision}")


@dataclass(frozen=True, slots=True)
class ClusteringConfig:
    """Top-level configuration composing all sub-configs.

    Cross-parameter validation runs in __post_init__ so that combinations
    which cannot produce a meaningful coefficient are rejected early.
    """

    adjacency: AdjacencyConfig = field(default_factory=AdjacencyConfig)
    counting: CountingConfig = field(default_factory=CountingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    description: str = ""

    def __post_init__(self) -> None:
        if (
            self.counting.open_rule == "combinatorial"
            and self.counting.closed_divisor != 2
        ):
            raise ValueError(
                "open_rule 'combinatorial' counts triplets, so closed_divisor "
                f"must be 2, got {self.counting.closed_divisor}"
            )
