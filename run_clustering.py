#!/usr/bin/env python3
"""Entry point for computing the global clustering coefficient of a graph.

Loads a node-list JSON file or a dense comma-separated matrix, prints the
adjacency matrix, the closed / total triplet line and the coefficient.

Usage:
    python run_clustering.py --nodes data/graph_data.json
    python run_clustering.py --matrix data/triangle_matrix.txt
    python run_clustering.py --nodes data/graph_data.json --preset corrected
    python run_clustering.py --nodes data/graph_data.json --config config.json --verbose
"""

import argparse
import logging
import sys
from pathlib import Path

from clustering.config import PRESETS, ClusteringConfig, config_from_json
from clustering.graph import ClusteringGraph
from clustering.io import format_coefficient, format_ratio, load_matrix, load_nodes

log = logging.getLogger(__name__)


def run(
    config: ClusteringConfig,
    nodes_path: Path | None = None,
    matrix_path: Path | None = None,
) -> ClusteringGraph:
    """Build the graph from exactly one input and print its metrics.

    Args:
        config: Clustering configuration.
        nodes_path: Node-list JSON file.
        matrix_path: Dense matrix text file.

    Returns:
        The tabulated graph.
    """
    if matrix_path is not None:
        parsed = load_matrix(matrix_path)
        if parsed.warnings:
            log.warning(
                "%d matrix cells were not integers and default to 0",
                len(parsed.warnings),
            )
        graph = ClusteringGraph.from_matrix(parsed.matrix, config)
    else:
        graph = ClusteringGraph.from_nodes(load_nodes(nodes_path), config)

    for row in graph.draw_table():
        print(row)

    result = graph.coefficient()
    print(format_ratio(result))
    print(format_coefficient(result, config.output.precision))
    return graph


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Compute the global clustering coefficient of a graph"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--nodes",
        type=str,
        help="Path to node-list JSON file",
    )
    source.add_argument(
        "--matrix",
        type=str,
        help="Path to comma-separated adjacency matrix file",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to clustering config JSON file (overrides --preset)",
    )
    parser.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default="reference",
        help="Named configuration preset",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    input_path = Path(args.nodes if args.nodes is not None else args.matrix)
    if not input_path.exists():
        print(f"Error: input file not found: {input_path}", file=sys.stderr)
        sys.exit(1)

    config_path = Path(args.config) if args.config is not None else None
    if config_path is not None and not config_path.exists():
        print(f"Error: config file not found: {config_path}", file=sys.stderr)
        sys.exit(1)

    try:
        if config_path is not None:
            config = config_from_json(config_path.read_text(encoding="utf-8"))
        else:
            config = PRESETS[args.preset]
        log.info("Config: %s", config)

        if args.matrix is not None:
            run(config, matrix_path=input_path)
        else:
            run(config, nodes_path=input_path)
    except Exception:
        log.exception("Clustering run failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
