"""Error taxonomy for graph construction and path queries.

Every condition the core can report has its own exception class so callers
distinguish them by type, never by message text.  Each class carries a stable
``code`` which the service layer copies into ``ServiceError.code``.

INVARIANT: ``VertexNotFound`` and ``PathNotFound`` are ordinary query
outcomes. Services convert them into failed results; they never escape as
crashes.
"""

from __future__ import annotations


class HoppathError(Exception):
    """Base class for all hoppath errors."""

    code = "ERROR"


# --- Input ---


class MalformedInputLine(HoppathError, ValueError):
    """An edge row does not parse as exactly two comma-separated integers.

    Recovered locally by the reader: the row is skipped, never surfaced.
    """

    code = "MALFORMED_LINE"

    def __init__(self, line: str, reason: str = "expected '<int>,<int>'") -> None:
        super().__init__(f"Malformed edge row {line!r}: {reason}")
        self.line = line
        self.reason = reason


class FileUnreadable(HoppathError):
    """The edge file cannot be opened or decoded."""

    code = "FILE_UNREADABLE"

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot read edge file {path}: {reason}")
        self.path = path
        self.reason = reason


# --- Registry ---


class RegistryError(HoppathError):
    """An identifier could not be registered."""


class IdentifierOutOfRange(RegistryError):
    """An external identifier falls outside the configured value range."""

    code = "ID_OUT_OF_RANGE"

    def __init__(self, external_id: int, min_id: int | None, max_id: int | None) -> None:
        lo = "-inf" if min_id is None else str(min_id)
        hi = "+inf" if max_id is None else str(max_id)
        super().__init__(f"Identifier {external_id} outside supported range [{lo}, {hi}]")
        self.external_id = external_id
        self.min_id = min_id
        self.max_id = max_id


class RegistryCapacityExceeded(RegistryError):
    """Registering another identifier would exceed the vertex limit."""

    code = "CAPACITY_EXCEEDED"

    def __init__(self, external_id: int, max_vertices: int) -> None:
        super().__init__(
            f"Cannot register identifier {external_id}: "
            f"limit of {max_vertices} distinct vertices reached"
        )
        self.external_id = external_id
        self.max_vertices = max_vertices


class GraphFrozenError(HoppathError):
    """A write was attempted on a graph that has been frozen for queries."""

    code = "GRAPH_FROZEN"


# --- Queries ---


class PathError(HoppathError):
    """A shortest-path query could not produce a path."""


class VertexNotFound(PathError):
    """One or both query endpoints never appeared in any ingested edge."""

    code = "VERTEX_NOT_FOUND"

    def __init__(self, missing: list[int]) -> None:
        ids = ", ".join(str(m) for m in missing)
        super().__init__(f"Identifier(s) not found in graph: {ids}")
        self.missing = missing


class PathNotFound(PathError):
    """Both endpoints are known but no edge path connects them."""

    code = "PATH_NOT_FOUND"

    def __init__(self, origin: int, destination: int) -> None:
        super().__init__(f"No path between {origin} and {destination}")
        self.origin = origin
        self.destination = destination

