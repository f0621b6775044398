"""Rich Console factory and theme for emailcheck output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

EMAILCHECK_THEME = Theme(
    {
        "ec.ok": "bold green",
        "ec.error": "bold red",
        "ec.warning": "bold yellow",
        "ec.op": "bold cyan",
        "ec.key": "dim",
        "ec.address": "bold",
        "ec.rule": "magenta",
        "ec.valid": "green",
        "ec.invalid": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=EMAILCHECK_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_verdict(valid: bool) -> str:
    """Return the Rich style name for a verdict."""
    return "ec.valid" if valid else "ec.invalid"
