"""GraphBuilder: turns (origin, destination) identifier pairs into edges."""

from __future__ import annotations

from collections.abc import Iterable

from hoppath.domain.errors import GraphFrozenError
from hoppath.infrastructure.graph.network import Network


class GraphBuilder:
    """Resolve both endpoints through the registry, then store a symmetric edge.

    Index assignment follows first-seen order; the resulting edge set does
    not depend on insertion order.
    """

    def __init__(self, network: Network | None = None) -> None:
        self.network = network if network is not None else Network()

    def add_edge(self, origin_id: int, destination_id: int) -> None:
        """Insert one undirected connection between two external identifiers.

        Registry errors propagate.  An origin registered before the
        destination failed stays registered as an isolated vertex.
        """
        if self.network.frozen:
            raise GraphFrozenError("Cannot add edges to a frozen network")

        registry = self.network.registry
        store = self.network.store

        u = registry.resolve_or_create(origin_id)
        store.add_vertex(u)
        v = registry.resolve_or_create(destination_id)
        store.add_edge(u, v)

    def add_edges(self, pairs: Iterable[tuple[int, int]]) -> int:
        """Add every pair in *pairs*; return how many were added."""
        count = 0
        for origin_id, destination_id in pairs:
            self.add_edge(origin_id, destination_id)
            count += 1
        return count

    def build(self) -> Network:
        """Freeze and return the network."""
        self.network.freeze()
        return self.network
