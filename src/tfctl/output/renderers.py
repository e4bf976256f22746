"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from tfctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from tfctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to text; plain when not attached to a terminal."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
        for warning in result.warnings if verbose else ():
            console.print(Text(f"  warning: {warning}", style="tf.warning"))
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if result.op == "get_denom":
        return str(result.data.get("denom", ""))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────

_KEY_STYLES: dict[str, str] = {
    "denom": "tf.denom",
    "amount": "tf.amount",
}


def _status_line(console: Console, result: ServiceResult, detail: str = "") -> None:
    parts = [Text("OK", style="tf.ok"), Text(f"  {result.op}", style="tf.op")]
    if detail:
        parts.append(Text(f"  {detail}"))
    console.print(*parts, sep="")


def _field(console: Console, key: str, value: Any) -> None:
    if key.endswith("address") or key == "owner":
        style = "tf.address"
    else:
        style = _KEY_STYLES.get(key, "")
    if isinstance(value, (dict, list, tuple)):
        value = json.dumps(value, separators=(",", ":"))
    console.print(Text(f"  {key}: ", style="tf.key"), Text(str(value), style=style), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the telemetry span tree, if any."""
    telemetry = (result.meta or {}).get("telemetry")
    if not telemetry:
        return
    console.print(Text("  telemetry:", style="dim"))
    _render_span(console, telemetry, indent=4)


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    line = f"{' ' * indent}{span.get('duration_ms', 0.0):>8.2f}ms  {span.get('name', '?')}"
    annotations = span.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(Text(line, style="dim"))
    for child in span.get("children", []):
        _render_span(console, child, indent + 2)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="tf.error"),
        Text(f"  {result.op}", style="tf.op"),
        Text(" — "),
        Text(msg),
        sep="",
    )
    if err is not None:
        console.print(Text(f"  code: {err.code}", style="tf.code"))
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_execute(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Status line with the method, then a table of the action's fields."""
    d = result.data
    _status_line(console, result, str(d.get("method", "")))

    action: dict[str, Any] = d.get("action", {})
    for tag, fields in action.items():
        table = Table(title=tag, show_header=True, pad_edge=False, expand=False)
        table.add_column("Field", style="tf.key", no_wrap=True)
        table.add_column("Value")
        for key, value in fields.items():
            style = _KEY_STYLES.get(key, "tf.address" if key.endswith("address") else "")
            table.add_row(key, Text(str(value), style=style))
        console.print(table)

    if d.get("requires_burn_from"):
        console.print(Text("  requires burn-from on the ledger", style="tf.warning"))
    if verbose:
        for key, value in d.get("attributes", []):
            _field(console, f"attr.{key}", value)


def _render_get_denom(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "denom", result.data.get("denom", ""))


def _render_validate_denom(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    d = result.data
    _status_line(console, result)
    for key in ("denom", "creator_address", "subdenom"):
        _field(console, key, d.get(key, ""))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "execute": _render_execute,
    "get_denom": _render_get_denom,
    "validate_denom": _render_validate_denom,
    "instantiate": _render_generic,
    "state": _render_generic,
}
