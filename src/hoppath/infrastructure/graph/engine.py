"""BfsPathEngine: unweighted shortest paths over a frozen Network.

Level-order traversal from the origin; the first time the destination is
dequeued its predecessor chain is a minimum-hop path.  Neighbors are
expanded in ascending internal index order, so among equally short paths
the engine deterministically returns the one through the earliest-seen
vertices.

Traversal state (visited flags, predecessor links, frontier queue) lives in
a :class:`_Traversal` created per call and dropped on every exit path, so a
frozen network can serve any number of queries.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from hoppath.domain.errors import PathNotFound, VertexNotFound
from hoppath.infrastructure.graph.network import Network

_NO_PREDECESSOR = -1


@dataclass
class _Traversal:
    """Per-query BFS working set over ``size`` vertices."""

    size: int
    visited: list[bool] = field(init=False)
    predecessor: list[int] = field(init=False)
    frontier: deque[int] = field(default_factory=deque)

    def __post_init__(self) -> None:
        self.visited = [False] * self.size
        self.predecessor = [_NO_PREDECESSOR] * self.size

    def discover(self, v: int, parent: int) -> None:
        self.visited[v] = True
        self.predecessor[v] = parent
        self.frontier.append(v)


@dataclass(frozen=True)
class PathSearch:
    """Outcome of one successful query.

    Attributes:
        path: External identifiers from origin to destination inclusive.
        visited: Number of vertices discovered before the search stopped.
    """

    path: list[int]
    visited: int

    @property
    def hops(self) -> int:
        return len(self.path) - 1


class BfsPathEngine:
    """Answer shortest-path queries against one network."""

    def __init__(self, network: Network) -> None:
        self._network = network

    def search(self, origin_id: int, destination_id: int) -> PathSearch:
        """Run BFS between two external identifiers.

        Raises:
            VertexNotFound: either identifier was never registered.
            PathNotFound: both are registered but not connected.
        """
        registry = self._network.registry
        store = self._network.store

        origin = registry.resolve_existing(origin_id)
        destination = registry.resolve_existing(destination_id)
        if origin is None or destination is None:
            missing = [
                ext
                for ext, idx in ((origin_id, origin), (destination_id, destination))
                if idx is None
            ]
            raise VertexNotFound(list(dict.fromkeys(missing)))

        state = _Traversal(len(registry))
        state.discover(origin, _NO_PREDECESSOR)
        discovered = 1

        while state.frontier:
            current = state.frontier.popleft()
            if current == destination:
                break
            for neighbor in store.neighbors(current):
                if not state.visited[neighbor]:
                    state.discover(neighbor, current)
                    discovered += 1

        if not state.visited[destination]:
            raise PathNotFound(origin_id, destination_id)

        chain: list[int] = []
        node = destination
        while node != _NO_PREDECESSOR:
            chain.append(node)
            node = state.predecessor[node]
        chain.reverse()

        return PathSearch(
            path=[registry.external_of(i) for i in chain],
            visited=discovered,
        )

    def shortest_path(self, origin_id: int, destination_id: int) -> list[int]:
        """Minimum-hop path from *origin_id* to *destination_id*, inclusive."""
        return self.search(origin_id, destination_id).path

    def hop_count(self, origin_id: int, destination_id: int) -> int:
        """Number of edges on the shortest path."""
        return self.search(origin_id, destination_id).hops
