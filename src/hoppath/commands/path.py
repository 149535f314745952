"""Command: shortest path between two identifiers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hoppath.commands._base import HopCommand
from hoppath.services.path import PathService

if TYPE_CHECKING:
    from hoppath.commands._context import AppContext


def _prompt_id(app: AppContext, value: int | None, label: str) -> int:
    """Return *value*, prompting for it when it was not given on the command line."""
    if value is not None:
        return value
    if app.settings.no_interact:
        raise click.UsageError(f"Missing argument '{label.upper()}' (prompting disabled).")
    return click.prompt(f"{label.capitalize()} (ID)", type=int, err=True)


@click.command(
    cls=HopCommand,
    examples="""\
  hoppath path 101001 101003
  hoppath -f conexoes.csv path 5 6
  hoppath -q path 1 3
  hoppath --json path 1 3
  hoppath path            # prompts for origin and destination""",
)
@click.argument("origin", type=int, required=False)
@click.argument("destination", type=int, required=False)
@click.pass_obj
def path(app: AppContext, origin: int | None, destination: int | None) -> None:
    """Find the shortest connection chain between ORIGIN and DESTINATION."""
    network = app.network
    origin = _prompt_id(app, origin, "origin")
    destination = _prompt_id(app, destination, "destination")
    app.emit(PathService(network).shortest_path(origin, destination))
