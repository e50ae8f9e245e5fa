"""Loaders for node-list JSON files and dense comma-separated matrices.

Node-list format::

    [
        {"name": "A", "subjects": ["B", "C"]},
        ...
    ]

Identifiers are all strings or all integers within one file.

Matrix format: one row per line, values comma-separated. Tokens that are not
integers are tolerated: the cell stays 0 and a LenientParseWarning is
recorded and logged.
"""

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import numpy as np

from clustering.graph.adjacency import MATRIX_DTYPE
from clustering.graph.types import Node

log = logging.getLogger(__name__)

NODE_KEYS = {"name", "subjects"}


class MalformedInputError(ValueError):
    """Raised when an input file cannot be read or has the wrong shape."""


@dataclass(frozen=True, slots=True)
class LenientParseWarning:
    """A matrix cell whose token was not an integer and defaulted to 0."""

    row: int
    col: int
    token: str


@dataclass(frozen=True)
class MatrixParseResult:
    """Parsed matrix and the cells that were defaulted while parsing."""

    matrix: np.ndarray  # int64 array of shape (V, V)
    warnings: list[LenientParseWarning] = field(default_factory=list)


def _read_text(path: Path) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedInputError(f"Cannot read {path}: {e}") from e


def _identifier_type(value: Any, where: str) -> type:
    # bool is an int subclass but never a valid identifier
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise MalformedInputError(
            f"{where}: identifier {value!r} must be a string or an integer"
        )
    return type(value)


def parse_nodes(text: str) -> list[Node]:
    """Parse node-list JSON text into Node records.

    Args:
        text: JSON document, an array of {"name", "subjects"} objects.

    Returns:
        Nodes in document order.

    Raises:
        MalformedInputError: On invalid JSON, a record of the wrong shape,
            or identifiers of mixed types.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedInputError(f"Invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise MalformedInputError(
            f"Expected a JSON array of nodes, got {type(data).__name__}"
        )

    nodes: list[Node] = []
    id_type: type | None = None

    for i, record in enumerate(data):
        where = f"node {i}"
        if not isinstance(record, dict):
            raise MalformedInputError(f"{where}: expected an object")
        keys = set(record)
        if keys != NODE_KEYS:
            raise MalformedInputError(
                f"{where}: expected keys {sorted(NODE_KEYS)}, got {sorted(keys)}"
            )
        subjects = record["subjects"]
        if not isinstance(subjects, list):
            raise MalformedInputError(f"{where}: subjects must be an array")

        for value in [record["name"], *subjects]:
            value_type = _identifier_type(value, where)
            if id_type is None:
                id_type = value_type
            elif value_type is not id_type:
                raise MalformedInputError(
                    f"{where}: identifier {value!r} is {value_type.__name__}, "
                    f"but earlier identifiers are {id_type.__name__}"
                )

        nodes.append(Node(name=record["name"], subjects=tuple(subjects)))

    log.debug("Parsed %d nodes", len(nodes))
    return nodes


def load_nodes(path: Path) -> list[Node]:
    """Read and parse a node-list JSON file."""
    nodes = parse_nodes(_read_text(path))
    log.info("Loaded %d nodes from %s", len(nodes), path)
    return nodes


def parse_matrix(lines: Iterable[str]) -> MatrixParseResult:
    """Parse comma-separated matrix rows.

    Blank lines are ignored. The matrix is square with one row and one
    column per parsed line; shorter rows are zero-padded and longer rows
    truncated, with a logged warning.

    Args:
        lines: Text lines, one matrix row each.

    Returns:
        MatrixParseResult with the int64 matrix and any defaulted cells.

    Raises:
        MalformedInputError: If an integer token is neither 0 nor 1.
    """
    rows = [line.strip() for line in lines if line.strip()]
    n = len(rows)
    matrix = np.zeros((n, n), dtype=MATRIX_DTYPE)
    warnings: list[LenientParseWarning] = []

    for r, line in enumerate(rows):
        tokens = [token.strip() for token in line.split(",")]
        if len(tokens) != n:
            log.warning(
                "Row %d has %d values, expected %d; %s",
                r,
                len(tokens),
                n,
                "padding with zeros" if len(tokens) < n else "truncating",
            )
        for c, token in enumerate(tokens[:n]):
            try:
                value = int(token)
            except ValueError:
                warnings.append(LenientParseWarning(row=r, col=c, token=token))
                log.warning(
                    "Non-numeric token %r at row %d, col %d; using 0", token, r, c
                )
                continue
            if value not in (0, 1):
                raise MalformedInputError(
                    f"Row {r}, col {c}: adjacency value {value} is not 0 or 1"
                )
            matrix[r, c] = value

    return MatrixParseResult(matrix=matrix, warnings=warnings)


def load_matrix(path: Path) -> MatrixParseResult:
    """Read and parse a dense matrix text file."""
    result = parse_matrix(_read_text(path).splitlines())
    log.info(
        "Loaded %dx%d matrix from %s (%d lenient cells)",
        result.matrix.shape[0],
        result.matrix.shape[1],
        path,
        len(result.warnings),
    )
    return result
