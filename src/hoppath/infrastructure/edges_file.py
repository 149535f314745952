"""Edge-list file reading.

Format: one header line (discarded), then one ``<int>,<int>`` row per
undirected connection.  Rows that do not parse as exactly two integers
separated by a single comma are skipped and logged at DEBUG, never raised.
Each field is an optionally signed run of ASCII decimal digits; whitespace
around it is accepted.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from hoppath.domain.errors import FileUnreadable, MalformedInputLine
from hoppath.infrastructure.graph.builder import GraphBuilder
from hoppath.infrastructure.graph.network import Network
from hoppath.infrastructure.graph.registry import IdentifierRegistry

logger = logging.getLogger(__name__)

_INTEGER_FIELD = re.compile(r"[+-]?[0-9]+")


def parse_edge_line(line: str) -> tuple[int, int]:
    """Parse one data row into ``(origin_id, destination_id)``.

    Raises:
        MalformedInputLine: the row is not exactly two comma-separated integers.
    """
    parts = line.rstrip("\r\n").split(",")
    if len(parts) != 2:
        raise MalformedInputLine(line, f"expected 2 fields, got {len(parts)}")
    fields = [part.strip() for part in parts]
    for field in fields:
        if not _INTEGER_FIELD.fullmatch(field):
            raise MalformedInputLine(line, f"not an integer: {field!r}")
    return int(fields[0]), int(fields[1])


@dataclass
class ReadStats:
    """Row counters filled in while :func:`read_edge_pairs` iterates."""

    rows: int = 0
    skipped: int = 0


def read_edge_pairs(
    path: Path,
    *,
    skip_header: bool = True,
    stats: ReadStats | None = None,
) -> Iterator[tuple[int, int]]:
    """Yield identifier pairs from *path*, skipping malformed rows.

    Raises:
        FileUnreadable: the file cannot be opened or is not valid UTF-8.
    """
    stats = stats if stats is not None else ReadStats()
    try:
        with path.open(encoding="utf-8") as fh:
            if skip_header:
                fh.readline()
            lineno = 1 if skip_header else 0
            for line in fh:
                lineno += 1
                stats.rows += 1
                try:
                    yield parse_edge_line(line)
                except MalformedInputLine as exc:
                    stats.skipped += 1
                    logger.debug("Skipping row %d: %s", lineno, exc.reason)
    except OSError as exc:
        raise FileUnreadable(str(path), exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise FileUnreadable(str(path), f"not valid UTF-8 ({exc.reason})") from exc


@dataclass(frozen=True)
class LoadReport:
    """Result of loading one edge file into a frozen network."""

    path: Path
    network: Network
    rows: int
    edges: int
    skipped: int


def load_network(
    path: Path,
    *,
    skip_header: bool = True,
    max_vertices: int | None = None,
    min_id: int | None = None,
    max_id: int | None = None,
) -> LoadReport:
    """Read *path* and build a frozen :class:`Network` from its rows.

    Registry bound violations (``IdentifierOutOfRange``,
    ``RegistryCapacityExceeded``) propagate to the caller.
    """
    registry = IdentifierRegistry(max_vertices=max_vertices, min_id=min_id, max_id=max_id)
    builder = GraphBuilder(Network(registry))
    stats = ReadStats()
    edges = builder.add_edges(read_edge_pairs(path, skip_header=skip_header, stats=stats))
    network = builder.build()
    logger.info(
        "Loaded %s: %d rows, %d edges, %d skipped, %d vertices",
        path,
        stats.rows,
        edges,
        stats.skipped,
        network.vertex_count,
    )
    return LoadReport(
        path=path,
        network=network,
        rows=stats.rows,
        edges=edges,
        skipped=stats.skipped,
    )
