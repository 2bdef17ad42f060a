"""Interactive prompts.

Prompts never raise on cancellation. They return the ``CANCELLED``
sentinel, which callers pass up until the runner turns it into a clean
exit.
"""

import logging
from enum import Enum
from typing import Protocol

from prompt_toolkit.shortcuts import checkboxlist_dialog
from rich.console import Console
from rich.prompt import Confirm

from .console import console as default_console

logger = logging.getLogger(__name__)


class Cancelled(Enum):
    """Marker type for a prompt the user backed out of."""

    TOKEN = "cancelled"


CANCELLED = Cancelled.TOKEN


class Prompter(Protocol):
    """What the collector needs from an interactive terminal."""

    def confirm(self, message: str) -> bool | Cancelled: ...

    def multiselect(self, message: str, options: list[tuple[str, str]]) -> list[str] | Cancelled: ...


class TerminalPrompter:
    """Prompter backed by rich (yes/no) and prompt_toolkit (checkbox list)."""

    def __init__(self, console: Console | None = None, title: str = "SvSeeds Collector"):
        self.console = console or default_console
        self.title = title

    def confirm(self, message: str) -> bool | Cancelled:
        """Ask a yes/no question. Ctrl-C or end of input counts as cancel."""
        try:
            return Confirm.ask(message, default=True, console=self.console)
        except (KeyboardInterrupt, EOFError):
            logger.debug(f"Confirmation cancelled: {message}")
            return CANCELLED

    def multiselect(self, message: str, options: list[tuple[str, str]]) -> list[str] | Cancelled:
        """
        Let the user tick one or more options.

        Args:
            message: Text shown above the list
            options: (value, label) pairs

        Returns:
            Chosen values (never empty), or CANCELLED
        """
        while True:
            selected = checkboxlist_dialog(title=self.title, text=message, values=options).run()
            if selected is None:
                logger.debug("Selection dialog cancelled")
                return CANCELLED
            if selected:
                return list(selected)
            self.console.print("[warning]Select at least one item.[/warning]")
