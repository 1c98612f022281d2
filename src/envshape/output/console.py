"""Rich Console factory and theme for envshape output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ENVSHAPE_THEME = Theme(
    {
        "env.ok": "bold green",
        "env.error": "bold red",
        "env.op": "bold cyan",
        "env.key": "dim",
        "env.var": "bold blue",
        "env.unset": "dim",
        "env.kind.number": "magenta",
        "env.kind.boolean": "yellow",
        "env.kind.string": "green",
    }
)

_KIND_STYLES: dict[str, str] = {
    "number": "env.kind.number",
    "boolean": "env.kind.boolean",
    "string": "env.kind.string",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=ENVSHAPE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: str) -> str:
    """Return the Rich style name for a primitive kind."""
    return _KIND_STYLES.get(kind, "")
