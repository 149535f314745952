"""GraphStore: undirected adjacency over internal vertex indices.

Backed by a NetworkX ``Graph`` (adjacency dict-of-dicts), which gives
symmetric storage and idempotent edge insertion for free: re-adding an edge
overwrites the same adjacency entry instead of counting it twice.
Self-loops are stored like any other edge.
"""

from __future__ import annotations

from typing import TypeAlias

import networkx as nx

_Graph: TypeAlias = nx.Graph


class GraphStore:
    """Adjacency-list graph keyed by dense internal indices."""

    def __init__(self) -> None:
        self._graph: _Graph = nx.Graph()

    def add_vertex(self, v: int) -> None:
        self._graph.add_node(v)

    def add_edge(self, u: int, v: int) -> None:
        """Mark *u* and *v* adjacent in both directions. Idempotent."""
        self._graph.add_edge(u, v)

    def has_edge(self, u: int, v: int) -> bool:
        return self._graph.has_edge(u, v)

    def __contains__(self, v: object) -> bool:
        return v in self._graph

    def neighbors(self, v: int) -> list[int]:
        """Vertices adjacent to *v* in ascending index order.

        Ascending order is the canonical tie-break among equally short paths.
        """
        return sorted(self._graph.adj[v])

    def degree(self, v: int) -> int:
        """Number of distinct neighbors of *v* (a self-loop counts once)."""
        return len(self._graph.adj[v])

    @property
    def vertex_count(self) -> int:
        return self._graph.number_of_nodes()

    @property
    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    def component_count(self) -> int:
        """Number of connected components (0 for an empty graph)."""
        if self.vertex_count == 0:
            return 0
        return nx.number_connected_components(self._graph)
