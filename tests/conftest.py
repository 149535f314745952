"""Shared pytest fixtures and test helpers for hoppath tests."""

from __future__ import annotations

import logging
from collections.abc import Generator, Iterable
from pathlib import Path

import pytest
from click.testing import CliRunner

from hoppath.infrastructure.graph.builder import GraphBuilder
from hoppath.infrastructure.graph.network import Network
from hoppath.services.telemetry import _current_span, disable_telemetry

HEADER = "origem,destino"

# 1-2, 2-3, 1-4, 4-3: two equally short routes from 1 to 3.
DIAMOND: list[tuple[int, int]] = [(1, 2), (2, 3), (1, 4), (4, 3)]


@pytest.fixture(autouse=True)
def _reset_global_state() -> Generator[None]:
    """Undo logging and telemetry changes made by CLI invocations."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    root_level = root.level
    hop_level = logging.getLogger("hoppath").level
    yield
    root.handlers = handlers
    root.setLevel(root_level)
    logging.getLogger("hoppath").setLevel(hop_level)
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temp working directory with no config discovery leaking in."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("HOPPATH_CONFIG", raising=False)
    for var in ("HOPPATH_EDGES_FILE", "HOPPATH_GRAPH__MAX_VERTICES", "HOPPATH_QUIET"):
        monkeypatch.delenv(var, raising=False)
    return tmp_path


@pytest.fixture
def diamond_csv(workdir: Path) -> Path:
    """``conexoes.csv`` in the working directory holding the diamond graph."""
    return write_edges(workdir / "conexoes.csv", DIAMOND)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def write_edges(
    path: Path,
    pairs: Iterable[tuple[int, int]],
    *,
    extra_lines: Iterable[str] = (),
    header: str = HEADER,
) -> Path:
    """Write an edge file: header, one ``a,b`` row per pair, then *extra_lines*."""
    lines = [header, *(f"{a},{b}" for a, b in pairs), *extra_lines]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def build_network(pairs: Iterable[tuple[int, int]]) -> Network:
    """Build and freeze a network from identifier pairs."""
    builder = GraphBuilder()
    builder.add_edges(pairs)
    return builder.build()
