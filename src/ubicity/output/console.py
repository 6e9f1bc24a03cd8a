"""Rich Console factory and theme for ubicity output.

Consoles render to a StringIO buffer, preserving the
``format_result() -> str`` contract.  In non-TTY environments (tests,
pipes) Rich disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

UBI_THEME = Theme(
    {
        "ubi.ok": "bold green",
        "ubi.error": "bold red",
        "ubi.warning": "bold yellow",
        "ubi.op": "bold cyan",
        "ubi.key": "dim",
        "ubi.id": "bold blue",
        "ubi.score": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=UBI_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
