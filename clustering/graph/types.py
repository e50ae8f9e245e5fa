"""Graph data structures for adjacency construction and clustering metrics."""

from collections.abc import Hashable
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

Identifier = TypeVar("Identifier", bound=Hashable)


@dataclass(frozen=True, slots=True)
class Node(Generic[Identifier]):
    """A declared node and the identifiers of the nodes adjacent to it.

    Edge direction follows the input format: each subject points to
    ``name``. Identifiers may be any hashable value, but one graph uses a
    single identifier type throughout.
    """

    name: Identifier
    subjects: tuple[Identifier, ...] = field(default_factory=tuple)

    @property
    def degree(self) -> int:
        return len(self.subjects)


class GraphState(Enum):
    """Lifecycle of a ClusteringGraph: every metric requires TABULATED."""

    UNINITIALIZED = "uninitialized"
    LOADED = "loaded"
    TABULATED = "tabulated"
