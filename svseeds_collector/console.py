"""Shared Rich console instance for CLI output."""

from rich.console import Console
from rich.theme import Theme

# Named styles used by the reporter
THEME = Theme(
    {
        "step": "cyan",
        "success": "green",
        "warning": "yellow",
        "failure": "bold red",
        "hint": "dim",
    }
)

console = Console(theme=THEME, highlight=False)

__all__ = ["console", "THEME"]
