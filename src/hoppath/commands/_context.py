"""AppContext: shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``.  Loads the edge file lazily, so ``--help``,
``--version`` and ``--examples`` never touch the filesystem, and owns
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import click
import structlog

from hoppath.domain.errors import HoppathError
from hoppath.output.formatters import OutputSettings, format_result
from hoppath.services.result import ServiceResult

if TYPE_CHECKING:
    from hoppath.config.settings import HoppathSettings
    from hoppath.infrastructure.edges_file import LoadReport
    from hoppath.infrastructure.graph.network import Network

log = structlog.get_logger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: HoppathSettings) -> None:
        self.settings = settings
        self._report: LoadReport | None = None

        from hoppath.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from hoppath.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def report(self) -> LoadReport:
        """The load report for the configured edge file (loaded on first access).

        An unreadable file or a registry bound violation is emitted as a
        ``load`` failure and ends the run with exit code 1.
        """
        if self._report is None:
            from hoppath.infrastructure.edges_file import load_network

            path = self.settings.edges_path
            graph_cfg = self.settings.graph
            log.debug("loading edges", file=str(path))
            try:
                self._report = load_network(
                    path,
                    skip_header=graph_cfg.skip_header,
                    max_vertices=graph_cfg.max_vertices,
                    min_id=graph_cfg.min_id,
                    max_id=graph_cfg.max_id,
                )
            except HoppathError as exc:
                self.fail(ServiceResult.failure("load", exc, file=str(path)))
        return self._report

    @property
    def network(self) -> Network:
        """The frozen network built from the edge file."""
        return self.report.network

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            separator=self.settings.output.separator,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout, warnings to stderr, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        if not result.ok:
            self.fail(result)
        settings = self.output_settings
        click.echo(format_result(result, settings=settings))
        if not settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)

    def fail(self, result: ServiceResult) -> NoReturn:
        """Write a failed result to stderr and exit with code 1."""
        click.echo(format_result(result, settings=self.output_settings), err=True)
        raise SystemExit(1)
