"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from emailcheck.domain.rules import describe
from emailcheck.output.console import create_console, get_output, style_for_verdict

if TYPE_CHECKING:
    from rich.console import Console

    from emailcheck.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.op in _ALWAYS_RENDERERS:
        _ALWAYS_RENDERERS[result.op](result, console, verbose=verbose)
    elif result.ok:
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

    address = result.data.get("address")
    if address:
        return str(address)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    if result.ok:
        label = Text("OK", style="ec.ok")
    else:
        label = Text("ERROR", style="ec.error")
    op = Text(f"  {result.op}", style="ec.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="ec.key")
    if key == "address":
        v = Text(str(value), style="ec.address")
    elif key == "rule":
        v = Text(str(value), style="ec.rule")
    else:
        v = Text(str(value))
    console.print(k, v, sep="", end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(Text(f"    {k}: {v}"))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="ec.error")
    op = Text(f"  {result.op}", style="ec.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Validation renderers ──────────────────────────────────────────────


def _render_address(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a single validated or collected address."""
    _status_line(console, result)
    for key in ("address", "attempts"):
        if key in result.data:
            _field(console, key, result.data[key])
    if verbose:
        _render_meta(console, result)


def _render_batch(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render validate_batch results as a verdict table.

    Rendered for both outcomes so rejected batches still list every item.
    """
    _status_line(console, result)
    items: list[dict[str, Any]] = result.data.get("items", [])

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Address", style="ec.address", overflow="fold")
    table.add_column("Verdict")
    table.add_column("Reason", style="ec.rule")

    for item in items:
        valid = bool(item.get("valid"))
        verdict = Text("valid" if valid else "invalid", style=style_for_verdict(valid))
        rule = item.get("rule")
        reason = describe(rule) if (rule and verbose) else (rule or "")
        table.add_row(Text(str(item.get("address", ""))), verdict, Text(reason))

    if items:
        console.print(table)
    _field(console, "valid", result.data.get("valid", 0))
    _field(console, "invalid", result.data.get("invalid", 0))
    if result.error:
        console.print(Text(f"  {result.error.message}", style="ec.error"))
    if verbose:
        _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
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

_OP_RENDERERS: dict[str, Any] = {
    "validate_address": _render_address,
    "collect_address": _render_address,
}

# Ops rendered the same way whether or not the result is ok.
_ALWAYS_RENDERERS: dict[str, Any] = {
    "validate_batch": _render_batch,
}
