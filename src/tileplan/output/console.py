"""Rich Console factory and theme for tileplan output.

Consoles render into a StringIO buffer so every renderer keeps a plain
``-> str`` contract. Rich drops color codes when there is no terminal
(tests, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TILEPLAN_THEME = Theme(
    {
        "tp.ok": "bold green",
        "tp.error": "bold red",
        "tp.warning": "bold yellow",
        "tp.op": "bold cyan",
        "tp.key": "dim",
        "tp.value": "bold",
        "tp.full": "dark_orange",
        "tp.cut": "yellow",
        "tp.money": "green",
        "tp.pattern.grid": "cyan",
        "tp.pattern.brick": "red",
        "tp.pattern.herringbone": "magenta",
    }
)

_PATTERN_STYLES: dict[str, str] = {
    "grid": "tp.pattern.grid",
    "brick": "tp.pattern.brick",
    "herringbone": "tp.pattern.herringbone",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a StringIO-backed Console.

    Args:
        no_color: Disable ANSI escape codes.
        width: Fixed render width (default 120) for stable output.
    """
    return Console(
        file=StringIO(),
        theme=TILEPLAN_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_pattern(pattern: str) -> str:
    return _PATTERN_STYLES.get(pattern, "")
