"""GraphService: summary statistics and neighbor lookups on the loaded network."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from hoppath.domain.errors import VertexNotFound
from hoppath.services.base import BaseService
from hoppath.services.result import ServiceResult
from hoppath.services.telemetry import traced

if TYPE_CHECKING:
    from hoppath.infrastructure.edges_file import LoadReport


class GraphService(BaseService):
    """Read-only inspection of the network structure."""

    @traced
    def stats(self, report: LoadReport | None = None) -> ServiceResult:
        """Summarize the network: sizes, connected components, degree extremes.

        When the *report* of the load that produced the network is given,
        the source file and its row counters are included as well, and any
        skipped rows are reported as a warning.
        """
        store = self._network.store
        degrees = [store.degree(v) for v in range(self._network.vertex_count)]
        data: dict[str, Any] = {}
        warnings: list[str] = []
        if report is not None:
            data["file"] = str(report.path)
            data["rows"] = report.rows
            data["skipped"] = report.skipped
            if report.skipped:
                warnings.append(
                    f"{report.skipped} malformed row(s) skipped in {report.path}"
                )
        data.update(
            {
                "vertices": self._network.vertex_count,
                "edges": store.edge_count,
                "components": store.component_count(),
                "isolated": sum(1 for d in degrees if d == 0),
                "max_degree": max(degrees, default=0),
            }
        )
        return ServiceResult(ok=True, op="stats", data=data, warnings=warnings)

    @traced
    def neighbors(self, vertex: int) -> ServiceResult:
        """Identifiers adjacent to *vertex*, in canonical (first-seen) order."""
        registry = self._network.registry
        index = registry.resolve_existing(vertex)
        if index is None:
            return ServiceResult.failure("neighbors", VertexNotFound([vertex]), missing=[vertex])

        ids = [registry.external_of(i) for i in self._network.store.neighbors(index)]
        return ServiceResult(
            ok=True,
            op="neighbors",
            data={"id": vertex, "degree": len(ids), "items": ids},
        )
