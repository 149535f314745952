"""In-memory graph: identifier registry, adjacency store, builder, BFS engine."""
