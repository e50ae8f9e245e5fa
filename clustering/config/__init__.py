"""Clustering configuration system with frozen, serializable dataclasses."""

from clustering.config.settings import (
    AdjacencyConfig,
    ClusteringConfig,
    CountingConfig,
    OutputConfig,
)
from clustering.config.defaults import CORRECTED_CONFIG, PRESETS, REFERENCE_CONFIG
from clustering.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "AdjacencyConfig",
    "ClusteringConfig",
    "CountingConfig",
    "OutputConfig",
    "CORRECTED_CONFIG",
    "PRESETS",
    "REFERENCE_CONFIG",
    "config_from_dict",
    "config_from_json",
    "config_to_dict",
    "config_to_json",
]
