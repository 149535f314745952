"""BaseService: foundation for services that query a loaded network."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hoppath.infrastructure.graph.network import Network


class BaseService:
    """Base for all service-layer classes.

    Every service receives a frozen :class:`Network` at construction time
    and only reads from it.

    Usage::

        class PathService(BaseService):
            def shortest_path(self, origin: int, destination: int) -> ServiceResult:
                engine = BfsPathEngine(self._network)
                ...
    """

    def __init__(self, network: Network) -> None:
        self._network = network
