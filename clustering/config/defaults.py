"""Configuration presets."""

from clustering.config.settings import (
    AdjacencyConfig,
    ClusteringConfig,
    CountingConfig,
)

# Reproduces the reference output: directed incidence matrix, trace / 2,
# flat +2 open-triplet rule.
REFERENCE_CONFIG = ClusteringConfig(description="reference")

# Symmetrized matrix with combinatorial open triplets; yields the textbook
# transitivity 3 * triangles / connected triples.
CORRECTED_CONFIG = ClusteringConfig(
    adjacency=AdjacencyConfig(symmetrize=True),
    counting=CountingConfig(open_rule="combinatorial"),
    description="corrected",
)

PRESETS = {
    "reference": REFERENCE_CONFIG,
    "corrected": CORRECTED_CONFIG,
}
