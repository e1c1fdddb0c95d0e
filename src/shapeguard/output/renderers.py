"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from shapeguard.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from shapeguard.services.result import ServiceResult

Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    indent: int = 2,
    width: int | None = None,
) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose, indent=indent)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="sg.ok")
    op = Text(f"  {result.op}", style="sg.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="sg.key")
    style = "sg.ref" if key in ("guard", "reference", "default") else ""
    console.print(k, Text(str(value), style=style), end="")
    console.print()


def _dump(value: Any, indent: int) -> str:
    return json.dumps(value, indent=indent or None, ensure_ascii=False, default=str)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="sg.error")
    op = Text(f"  {result.op}", style="sg.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if err:
        console.print(Text(f"  code: {err.code}", style="sg.code"))
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_check(
    result: ServiceResult, console: Console, *, verbose: bool = False, indent: int = 2
) -> None:
    """Print the normalized value as JSON, preceded by the guard in verbose mode."""
    if verbose:
        _status_line(console, result)
        _field(console, "guard", result.data.get("guard", ""))
    console.print(Text(_dump(result.data.get("value"), indent)), soft_wrap=True)


def _render_list_guards(
    result: ServiceResult, console: Console, *, verbose: bool = False, indent: int = 2
) -> None:
    _status_line(console, result)
    default = result.data.get("default")
    _field(console, "default", default if default is not None else "-")
    for entry in result.data.get("aliases", []):
        alias = Text(f"  {entry['alias']}", style="bold")
        target = Text(f" -> {entry['reference']}", style="sg.ref")
        console.print(alias, target, end="")
        console.print()


def _render_generic(
    result: ServiceResult, console: Console, *, verbose: bool = False, indent: int = 2
) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":"), default=str))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    "check": _render_check,
    "list_guards": _render_list_guards,
}
