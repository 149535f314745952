"""Subcommand modules for hoppath.

Provides register_commands(), which imports command modules lazily so
``hoppath --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``graph`` group and the standalone ``path`` command."""
    from hoppath.commands.graph import graph
    from hoppath.commands.path import path

    cli.add_command(path)
    cli.add_command(graph)
