"""Dense integer indexing for arbitrary hashable node identifiers."""

import logging
from collections.abc import Hashable, Sequence

from clustering.graph.types import Node

log = logging.getLogger(__name__)


class UnknownIdentifierError(KeyError):
    """Raised when a subject refers to a node that was never declared."""


class DuplicateIdentifierError(ValueError):
    """Raised in strict mode when two nodes share a name."""


class IdentifierRegistry:
    """Mapping from node identifier to its position in the node list.

    Built once per matrix construction and discarded afterwards.
    """

    def __init__(self) -> None:
        self._index: dict[Hashable, int] = {}
        self.duplicates: list[Hashable] = []

    def register(self, identifier: Hashable, position: int) -> None:
        if identifier in self._index:
            self.duplicates.append(identifier)
        self._index[identifier] = position

    def index(self, identifier: Hashable) -> int:
        try:
            return self._index[identifier]
        except KeyError:
            raise UnknownIdentifierError(
                f"Identifier {identifier!r} is not declared as a node name"
            ) from None

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._index

    def __len__(self) -> int:
        return len(self._index)


def build_registry(
    nodes: Sequence[Node], strict: bool = False
) -> IdentifierRegistry:
    """Assign each node name the index of its position in ``nodes``.

    A repeated name overwrites the earlier index (last wins), which silently
    aliases two nodes onto one matrix row and column. The alias is logged and
    recorded in ``registry.duplicates``; with ``strict=True`` it is fatal.

    Args:
        nodes: Ordered node list.
        strict: Raise on duplicate names instead of warning.

    Returns:
        Populated IdentifierRegistry.

    Raises:
        DuplicateIdentifierError: If ``strict`` and a name repeats.
    """
    registry = IdentifierRegistry()
    for position, node in enumerate(nodes):
        registry.register(node.name, position)

    if registry.duplicates:
        names = ", ".join(repr(name) for name in registry.duplicates)
        if strict:
            raise DuplicateIdentifierError(f"Duplicate node names: {names}")
        log.warning(
            "Duplicate node names alias matrix indices (last wins): %s", names
        )

    return registry
