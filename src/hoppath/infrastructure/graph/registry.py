"""IdentifierRegistry: external integer IDs <-> dense internal vertex indices.

External identifiers come from the edge file and may be sparse, negative,
or arbitrarily large.  Internal indices are zero-based and assigned in
first-seen order, so they can address list-backed per-vertex state.

INVARIANT: ``external_of(resolve_existing(x)) == x`` for every registered x.
An identifier is assigned an index exactly once and the registry never shrinks.
"""

from __future__ import annotations

from collections.abc import Iterator

from hoppath.domain.errors import IdentifierOutOfRange, RegistryCapacityExceeded


class IdentifierRegistry:
    """Bidirectional mapping with optional, explicitly checked bounds.

    Args:
        max_vertices: Maximum number of distinct identifiers, or None.
        min_id: Smallest accepted identifier (inclusive), or None.
        max_id: Largest accepted identifier (inclusive), or None.
    """

    def __init__(
        self,
        *,
        max_vertices: int | None = None,
        min_id: int | None = None,
        max_id: int | None = None,
    ) -> None:
        if max_vertices is not None and max_vertices < 0:
            raise ValueError("max_vertices must be non-negative")
        if min_id is not None and max_id is not None and min_id > max_id:
            raise ValueError("min_id must not exceed max_id")
        self.max_vertices = max_vertices
        self.min_id = min_id
        self.max_id = max_id
        self._index_of: dict[int, int] = {}
        self._external: list[int] = []

    def __len__(self) -> int:
        return len(self._external)

    def __contains__(self, external_id: object) -> bool:
        return external_id in self._index_of

    def __iter__(self) -> Iterator[int]:
        """Iterate external identifiers in internal index order."""
        return iter(self._external)

    def resolve_or_create(self, external_id: int) -> int:
        """Return the index for *external_id*, allocating the next one if unseen.

        Raises:
            IdentifierOutOfRange: *external_id* is outside ``[min_id, max_id]``.
            RegistryCapacityExceeded: ``max_vertices`` identifiers already exist.

        A failed call leaves the registry unchanged.
        """
        index = self._index_of.get(external_id)
        if index is not None:
            return index

        if (self.min_id is not None and external_id < self.min_id) or (
            self.max_id is not None and external_id > self.max_id
        ):
            raise IdentifierOutOfRange(external_id, self.min_id, self.max_id)
        if self.max_vertices is not None and len(self._external) >= self.max_vertices:
            raise RegistryCapacityExceeded(external_id, self.max_vertices)

        index = len(self._external)
        self._index_of[external_id] = index
        self._external.append(external_id)
        return index

    def resolve_existing(self, external_id: int) -> int | None:
        """Read-only lookup; None if *external_id* was never registered."""
        return self._index_of.get(external_id)

    def external_of(self, index: int) -> int:
        """Inverse lookup for an index issued by this registry."""
        if index < 0:
            raise IndexError(f"vertex index {index} was not issued by this registry")
        return self._external[index]
