"""Render ServiceResult as JSON or as Rich text.

Card payloads (``data`` with ``fields``) get a field table; other
payloads fall back to indented key-value lines.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from tangle.output.console import create_console, get_output, style_for_field_type

if TYPE_CHECKING:
    from rich.console import Console

    from tangle.services.result import ServiceResult


def format_result(result: ServiceResult, *, json_output: bool = False) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: If True, return JSON; otherwise return Rich-rendered text.
    """
    if json_output:
        return result.model_dump_json(indent=2)

    console = create_console()
    if result.ok:
        console.print(Text("OK", style="tangle.ok"), Text(result.op, style="tangle.op"))
        if "fields" in result.data:
            _render_card(console, result.data)
        else:
            for key, value in result.data.items():
                _key_value(console, key, value)
    else:
        message = result.error.message if result.error else "Unknown error"
        console.print(
            Text("ERROR", style="tangle.error"),
            Text(result.op, style="tangle.op"),
            Text(message),
        )
    return get_output(console).rstrip("\n")


def format_warnings(result: ServiceResult) -> str:
    """One ``WARNING:`` line per result warning."""
    return "\n".join(f"WARNING: {w}" for w in result.warnings)


def _key_value(console: Console, key: str, value: Any) -> None:
    style = "tangle.id" if key == "id" else "tangle.name" if key == "name" else ""
    console.print(Text.assemble((f"  {key}: ", "tangle.key"), (str(value), style)))


def _render_card(console: Console, data: dict[str, Any]) -> None:
    for key in ("id", "name", "kind"):
        if key in data:
            _key_value(console, key, data[key])

    fields = data["fields"]
    if not fields:
        console.print(Text("  (no fields)", style="tangle.unset"))
        return

    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Field")
    table.add_column("Type")
    table.add_column("Value")
    for field in fields:
        value = field["value"]
        table.add_row(
            field["name"],
            Text(field["type"], style=style_for_field_type(field["type"])),
            Text("unset", style="tangle.unset") if value is None else Text(value),
        )
    console.print(table)
