"""PathService: shortest connection chain between two identifiers."""

from __future__ import annotations

import structlog

from hoppath.domain.errors import PathNotFound, VertexNotFound
from hoppath.infrastructure.graph.engine import BfsPathEngine
from hoppath.services.base import BaseService
from hoppath.services.result import ServiceResult
from hoppath.services.telemetry import trace_span, traced

log = structlog.get_logger(__name__)


class PathService(BaseService):
    """Runs BFS queries against the loaded network."""

    @traced
    def shortest_path(self, origin: int, destination: int) -> ServiceResult:
        """Find a minimum-hop path from *origin* to *destination*.

        Failures are reported as results, distinguishable by error code:
        ``VERTEX_NOT_FOUND`` (detail lists the ``missing`` identifiers) or
        ``PATH_NOT_FOUND``.
        """
        engine = BfsPathEngine(self._network)
        with trace_span("bfs") as span:
            try:
                found = engine.search(origin, destination)
            except VertexNotFound as exc:
                log.debug("path.query", origin=origin, destination=destination, outcome=exc.code)
                return ServiceResult.failure("path", exc, missing=exc.missing)
            except PathNotFound as exc:
                log.debug("path.query", origin=origin, destination=destination, outcome=exc.code)
                return ServiceResult.failure(
                    "path", exc, origin=origin, destination=destination
                )
            if span:
                span.annotate("visited", found.visited)
                span.annotate("vertices", self._network.vertex_count)

        log.debug(
            "path.query",
            origin=origin,
            destination=destination,
            visited=found.visited,
            hops=found.hops,
        )
        return ServiceResult(
            ok=True,
            op="path",
            data={
                "origin": origin,
                "destination": destination,
                "hops": found.hops,
                "path": found.path,
            },
        )
