"""Shared node-list fixtures."""

import pytest

from clustering.graph.types import Node


@pytest.fixture
def triangle_nodes() -> list[Node]:
    """A, B, C each listing the other two: a symmetric triangle."""
    return [
        Node("A", ("B", "C")),
        Node("B", ("A", "C")),
        Node("C", ("A", "B")),
    ]


@pytest.fixture
def directed_cycle_nodes() -> list[Node]:
    """A <- B <- C <- A recorded from one end only."""
    return [
        Node("A", ("B",)),
        Node("B", ("C",)),
        Node("C", ("A",)),
    ]


@pytest.fixture
def path_nodes() -> list[Node]:
    """Undirected path A - B - C listed from both ends."""
    return [
        Node("A", ("B",)),
        Node("B", ("A", "C")),
        Node("C", ("B",)),
    ]


@pytest.fixture
def star_nodes() -> list[Node]:
    """Hub X with three leaves, listed from both ends."""
    return [
        Node("X", ("A", "B", "C")),
        Node("A", ("X",)),
        Node("B", ("X",)),
        Node("C", ("X",)),
    ]
