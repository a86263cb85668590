"""Rich Console factory and theme for packdec output.

Consoles render to a StringIO buffer so ``format_result() -> str`` stays
a pure function.  In non-TTY environments (tests, pipes) Rich disables
color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PACKDEC_THEME = Theme(
    {
        "pd.ok": "bold green",
        "pd.error": "bold red",
        "pd.warning": "bold yellow",
        "pd.op": "bold cyan",
        "pd.key": "dim",
        "pd.hex": "bold blue",
        "pd.sign.positive": "green",
        "pd.sign.negative": "red",
        "pd.sign.zero": "dim",
    }
)

_SIGN_STYLES: dict[str, str] = {
    "Positive": "pd.sign.positive",
    "Negative": "pd.sign.negative",
    "Zero": "pd.sign.zero",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=PACKDEC_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_sign(sign: str) -> str:
    """Return the Rich style name for a sign value."""
    return _SIGN_STYLES.get(sign, "")
