"""Command group: inspect the loaded network."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hoppath.commands._base import HopGroup
from hoppath.services.graph import GraphService

if TYPE_CHECKING:
    from hoppath.commands._context import AppContext

_GRAPH_EXAMPLES = """\
  hoppath graph stats
  hoppath graph neighbors 101001
  hoppath --json graph stats"""


@click.group(cls=HopGroup, examples=_GRAPH_EXAMPLES)
def graph() -> None:
    """Inspect the network built from the edge file."""


@graph.command(
    examples="""\
  hoppath graph stats
  hoppath -f other.csv graph stats"""
)
@click.pass_obj
def stats(app: AppContext) -> None:
    """Show vertex/edge counts, components, and skipped rows."""
    report = app.report
    app.emit(GraphService(report.network).stats(report))


@graph.command(
    examples="""\
  hoppath graph neighbors 101001
  hoppath -q graph neighbors 7"""
)
@click.argument("vertex", type=int)
@click.pass_obj
def neighbors(app: AppContext, vertex: int) -> None:
    """List the identifiers directly connected to VERTEX."""
    app.emit(GraphService(app.network).neighbors(vertex))
