"""Output mode dispatch.

The CLI renders ServiceResult for humans (Rich), for scripts (``--quiet``),
or for machines (``--json``).  :func:`format_result` picks the mode.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from hoppath.output.renderers import DEFAULT_SEPARATOR, render_quiet, render_result

if TYPE_CHECKING:
    from hoppath.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output flags resolved from the CLI."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    separator: str = DEFAULT_SEPARATOR


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult according to *settings*.

    JSON wins over quiet, quiet wins over the default Rich rendering.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result, separator=settings.separator)
    return render_result(result, verbose=settings.verbose, separator=settings.separator)
