"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from hoppath.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from hoppath.services.result import ServiceResult

DEFAULT_SEPARATOR = " -> "

_Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    separator: str = DEFAULT_SEPARATOR,
) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose, separator=separator)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult, *, separator: str = DEFAULT_SEPARATOR) -> str:
    """Render minimal output for ``--quiet`` mode.

    A path prints as the bare joined chain; neighbor lists print one id per line.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    if result.op == "path":
        return join_path(result.data.get("path", []), separator)
    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(i) for i in items)
    return f"OK: {result.op}"


def join_path(path: list[int], separator: str = DEFAULT_SEPARATOR) -> str:
    """``[1, 2, 3]`` -> ``"1 -> 2 -> 3"``."""
    return separator.join(str(v) for v in path)


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="hop.ok"), Text(f"  {result.op}", style="hop.op"))


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="hop.key")
    style = "hop.id" if key in ("id", "origin", "destination") else ""
    console.print(k, Text(str(value), style=style), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including the telemetry span tree (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_span(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    line = f"{' ' * indent}{span.get('duration_ms', 0.0):>9.3f}ms  {span.get('name', '?')}"
    annotations = span.get("annotations")
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(Text(line, style="dim"))
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="hop.error"),
        Text(f"  {result.op}", style="hop.op"),
        Text(f": {msg}"),
        sep="",
    )
    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Op renderers ──────────────────────────────────────────────────────


def _render_path(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    separator: str = DEFAULT_SEPARATOR,
) -> None:
    """Render a shortest path as the joined identifier chain plus hop count."""
    path = result.data.get("path", [])
    chain = Text()
    for i, vertex in enumerate(path):
        if i:
            chain.append(separator, style="hop.arrow")
        chain.append(str(vertex), style="hop.id")
    console.print(chain)
    console.print(Text(f"Hops: {result.data.get('hops', len(path) - 1)}", style="hop.count"))
    if verbose:
        _render_meta(console, result)


def _render_neighbors(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    separator: str = DEFAULT_SEPARATOR,
) -> None:
    _status_line(console, result)
    _field(console, "id", result.data.get("id"))
    _field(console, "degree", result.data.get("degree", 0))
    items = result.data.get("items", [])
    if items:
        _field(console, "neighbors", ", ".join(str(i) for i in items))
    if verbose:
        _render_meta(console, result)


def _render_stats(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    separator: str = DEFAULT_SEPARATOR,
) -> None:
    """Render network statistics as a two-column table."""
    _status_line(console, result)
    table = Table(show_header=False, pad_edge=False, box=None)
    table.add_column("Key", style="hop.key")
    table.add_column("Value", style="hop.count", justify="right")
    for key, value in result.data.items():
        table.add_row(key.replace("_", " "), str(value))
    console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_generic(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    separator: str = DEFAULT_SEPARATOR,
) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, _Renderer] = {
    "path": _render_path,
    "neighbors": _render_neighbors,
    "stats": _render_stats,
}
