"""Root CLI group for hoppath with global flags and command registration."""

from __future__ import annotations

import click

from hoppath import __version__
from hoppath.commands import register_commands
from hoppath.commands._context import AppContext
from hoppath.config.settings import HoppathSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="hoppath")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with timing info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-interact", is_flag=True, help="Non-interactive mode (no prompts).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-f",
    "--edges-file",
    default=None,
    type=click.Path(dir_okay=False),
    help="Edge list to load (overrides [graph] edges_file).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    config_path: str | None,
    edges_file: str | None,
) -> None:
    """hoppath: shortest paths over an integer edge list."""
    settings = HoppathSettings.from_cli(
        config_path=config_path,
        edges_file=edges_file,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        no_interact=no_interact,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
