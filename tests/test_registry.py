"""Tests for identifier registry construction and lookup."""

import logging

import pytest

from clustering.graph.registry import (
    DuplicateIdentifierError,
    UnknownIdentifierError,
    build_registry,
)
from clustering.graph.types import Node


class TestBuildRegistry:
    """Identifiers map to their position in the node list."""

    def test_indices_follow_list_order(self, triangle_nodes) -> None:
        registry = build_registry(triangle_nodes)
        assert registry.index("A") == 0
        assert registry.index("B") == 1
        assert registry.index("C") == 2
        assert len(registry) == 3

    def test_integer_identifiers(self) -> None:
        registry = build_registry([Node(10), Node(3), Node(7)])
        assert [registry.index(i) for i in (10, 3, 7)] == [0, 1, 2]

    def test_empty_node_list(self) -> None:
        registry = build_registry([])
        assert len(registry) == 0
        assert "A" not in registry

    def test_contains(self, triangle_nodes) -> None:
        registry = build_registry(triangle_nodes)
        assert "B" in registry
        assert "Z" not in registry


class TestUnknownIdentifier:
    """Lookups of undeclared identifiers fail."""

    def test_unknown_identifier_raises(self, triangle_nodes) -> None:
        registry = build_registry(triangle_nodes)
        with pytest.raises(UnknownIdentifierError, match="not declared"):
            registry.index("Z")

    def test_unknown_identifier_is_key_error(self, triangle_nodes) -> None:
        registry = build_registry(triangle_nodes)
        with pytest.raises(KeyError):
            registry.index("Z")


class TestDuplicateNames:
    """Duplicate names alias indices: last wins, surfaced as a warning."""

    def test_last_wins(self) -> None:
        registry = build_registry([Node("A"), Node("B"), Node("A")])
        assert registry.index("A") == 2
        assert registry.duplicates == ["A"]

    def test_duplicate_logs_warning(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="clustering.graph.registry"):
            build_registry([Node("A"), Node("A")])
        assert "Duplicate node names" in caplog.text

    def test_strict_mode_raises(self) -> None:
        with pytest.raises(DuplicateIdentifierError, match="'A'"):
            build_registry([Node("A"), Node("A")], strict=True)

    def test_no_duplicates_recorded_for_unique_names(self, triangle_nodes) -> None:
        assert build_registry(triangle_nodes).duplicates == []
