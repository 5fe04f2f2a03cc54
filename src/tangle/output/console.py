"""Rich Console factory and theme for tangle output.

Consoles render to a StringIO buffer so formatters can return strings.
In non-TTY environments (tests, pipes) Rich disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TANGLE_THEME = Theme(
    {
        "tangle.ok": "bold green",
        "tangle.error": "bold red",
        "tangle.warning": "bold yellow",
        "tangle.op": "bold cyan",
        "tangle.key": "dim",
        "tangle.id": "bold blue",
        "tangle.name": "bold",
        "tangle.type.text": "green",
        "tangle.type.number": "magenta",
        "tangle.unset": "dim italic",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=TANGLE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_field_type(field_type: str) -> str:
    """Return the Rich style name for a field type value."""
    return f"tangle.type.{field_type}"
