"""Rich Console factory and theme for tfctl output.

Consoles render into a StringIO buffer so formatting stays a pure
``ServiceResult -> str`` function. Rich drops color codes when not on a TTY.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TF_THEME = Theme(
    {
        "tf.ok": "bold green",
        "tf.error": "bold red",
        "tf.warning": "bold yellow",
        "tf.op": "bold cyan",
        "tf.key": "dim",
        "tf.denom": "bold magenta",
        "tf.address": "blue",
        "tf.amount": "bold",
        "tf.code": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    return Console(
        file=StringIO(),
        theme=TF_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
