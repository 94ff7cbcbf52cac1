"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from fnrctl.output.console import create_console, get_output, style_for_type

if TYPE_CHECKING:
    from rich.console import Console

    from fnrctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "inspect":
        return str(result.data.get("id_type", ""))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="fnr.ok")
    op = Text(f"  {result.op}", style="fnr.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="fnr.key")
    if key == "id":
        v = Text(str(value), style="fnr.id")
    elif key == "id_type":
        v = Text(str(value), style=style_for_type(str(value)))
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="fnr.error")
    op = Text(f"  {result.op}", style="fnr.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if err is None or not err.detail:
        return

    # Batch failures carry the per-item outcome; show it regardless of verbosity.
    items = err.detail.get("items")
    if isinstance(items, list):
        console.print(_items_table(items))
        return

    if verbose:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


def _items_table(items: list[dict[str, Any]]) -> Table:
    """Build a Rich Table of per-number validation outcomes."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="fnr.id", no_wrap=True)
    table.add_column("Valid")
    table.add_column("Type")
    table.add_column("Error")

    for item in items:
        valid = bool(item.get("valid"))
        id_type = item.get("id_type")
        table.add_row(
            Text(str(item.get("id", ""))),
            Text("yes", style="fnr.valid") if valid else Text("no", style="fnr.invalid"),
            Text(str(id_type or ""), style=style_for_type(id_type)),
            Text(str(item.get("error") or "")),
        )
    return table


# ── Operation renderers ───────────────────────────────────────────────


def _render_inspect(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a single parsed identity number."""
    _status_line(console, result)
    for key in ("id", "id_type", "gender"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render batch validation as a table plus counts."""
    _status_line(console, result)
    items = result.data.get("items", [])
    if items:
        console.print(_items_table(items))
    _field(console, "count", result.data.get("count", len(items)))
    if verbose:
        _field(console, "valid_count", result.data.get("valid_count", 0))
        _field(console, "invalid_count", result.data.get("invalid_count", 0))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback: status line plus every data field."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "inspect": _render_inspect,
    "validate": _render_validate,
}
