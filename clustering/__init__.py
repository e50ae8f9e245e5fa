"""Global clustering coefficient of undirected graphs via dense adjacency matrices."""
