"""Network: the identifier registry and adjacency store of one loaded graph.

Built once by :class:`~hoppath.infrastructure.graph.builder.GraphBuilder`,
then frozen.  After ``freeze()`` the network is shared read-only by every
query; each query owns its own traversal state.
"""

from __future__ import annotations

from hoppath.infrastructure.graph.registry import IdentifierRegistry
from hoppath.infrastructure.graph.store import GraphStore


class Network:
    """Owns the registry and store for the lifetime of one edge-file load."""

    def __init__(self, registry: IdentifierRegistry | None = None) -> None:
        self.registry = registry if registry is not None else IdentifierRegistry()
        self.store = GraphStore()
        # Identifiers registered before the network existed start out isolated.
        for index in range(len(self.registry)):
            self.store.add_vertex(index)
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Mark construction complete; further builder writes are rejected."""
        self._frozen = True

    @property
    def vertex_count(self) -> int:
        return len(self.registry)

    @property
    def edge_count(self) -> int:
        return self.store.edge_count
