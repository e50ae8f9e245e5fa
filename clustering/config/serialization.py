"""JSON serialization and deserialization for clustering configs."""

import json
from dataclasses import asdict
from typing import Any

from dacite import from_dict, Config as DaciteConfig

from clustering.config.settings import ClusteringConfig

_DACITE_CONFIG = DaciteConfig(check_types=True, strict=True)


def config_to_json(config: ClusteringConfig) -> str:
    """Serialize a ClusteringConfig to a JSON string.

    Uses sorted keys and 2-space indent for human readability and diffability.
    """
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> ClusteringConfig:
    """Deserialize a JSON string to a ClusteringConfig.

    Uses dacite with strict=True to reject unknown keys, so a misspelled
    option fails loudly instead of silently falling back to its default.
    Missing sections take their defaults.
    """
    return config_from_dict(json.loads(json_str))


def config_to_dict(config: ClusteringConfig) -> dict[str, Any]:
    """Convert a ClusteringConfig to a plain dictionary."""
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> ClusteringConfig:
    """Reconstruct a ClusteringConfig from a plain dictionary."""
    return from_dict(data_class=ClusteringConfig, data=d, config=_DACITE_CONFIG)
