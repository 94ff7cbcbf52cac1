"""Rich Console factory and theme for fnrctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

FNR_THEME = Theme(
    {
        "fnr.ok": "bold green",
        "fnr.error": "bold red",
        "fnr.warning": "bold yellow",
        "fnr.op": "bold cyan",
        "fnr.key": "dim",
        "fnr.id": "bold blue",
        "fnr.valid": "green",
        "fnr.invalid": "red",
        "fnr.type.birth_number": "green",
        "fnr.type.d_number": "blue",
        "fnr.type.h_number": "yellow",
        "fnr.type.fh_number": "magenta",
    }
)

_TYPE_STYLES: dict[str, str] = {
    "birth_number": "fnr.type.birth_number",
    "d_number": "fnr.type.d_number",
    "h_number": "fnr.type.h_number",
    "fh_number": "fnr.type.fh_number",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=FNR_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_type(id_type: str | None) -> str:
    """Return the Rich style name for an identifier type."""
    return _TYPE_STYLES.get(id_type or "", "")
