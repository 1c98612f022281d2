"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich text and tables) or
machines (--json).  Renderers are dispatched by ``result.op``; unknown
ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from envshape.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from envshape.services.result import ServiceResult


def format_result(result: ServiceResult, *, json_output: bool = False) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
    """
    if json_output:
        return result.model_dump_json(indent=2)

    console = create_console()
    if result.ok:
        _status_line(console, result)
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console)
    return get_output(console).rstrip("\n")


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="env.ok"), Text(f"  {result.op}", style="env.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    if isinstance(value, (dict, list)):
        value = _json.dumps(value, separators=(",", ":"))
    console.print(Text(f"  {key}: ", style="env.key"), Text(str(value)), sep="")


def _render_generic(result: ServiceResult, console: Console) -> None:
    for key, value in result.data.items():
        _field(console, key, value)


def _render_check(result: ServiceResult, console: Console) -> None:
    _field(console, "schema", result.data.get("schema", ""))
    for key, value in result.data.get("config", {}).items():
        _field(console, key, value)


def _render_fields(result: ServiceResult, console: Console) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Field", no_wrap=True)
    table.add_column("Variable", style="env.var")
    table.add_column("Kind")
    table.add_column("Set")

    for item in result.data.get("items", []):
        kind = str(item.get("kind", ""))
        table.add_row(
            str(item.get("name", "")),
            item.get("env_var") or Text("-", style="env.unset"),
            Text(kind, style=style_for_kind(kind)),
            "yes" if item.get("present") else Text("no", style="env.unset"),
        )
    console.print(table)


def _render_error(result: ServiceResult, console: Console) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    code = f" [{err.code}]" if err else ""
    console.print(
        Text("ERROR", style="env.error"),
        Text(f"  {result.op}", style="env.op"),
        Text(f"{code} - {msg}"),
        sep="",
    )
    if err is None:
        return
    for entry in err.detail.get("errors", []):
        console.print(f"  {entry.get('loc', '')}: {entry.get('msg', '')}", markup=False)


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "check": _render_check,
    "fields": _render_fields,
}
