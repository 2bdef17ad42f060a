"""User-facing progress and result messages."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import NamedTuple

from rich.console import Console
from rich.panel import Panel

from ..console import console as default_console
from ..utils.error_format import escape_markup


class StepMessages(NamedTuple):
    """Messages shown while a step runs, after it succeeds, and after it fails."""

    start: str
    success: str
    fail: str


class Reporter:
    """Writes collector output to a Rich console.

    All dynamic text is escaped, so file names and error messages containing
    brackets are printed literally.
    """

    def __init__(self, console: Console | None = None):
        self.console = console or default_console

    def intro(self, title: str) -> None:
        self.console.print(f"[bold]{escape_markup(title)}[/bold]")

    def outro(self, message: str) -> None:
        self.console.print(f"[hint]{escape_markup(message)}[/hint]")

    def info(self, message: str) -> None:
        self.console.print(escape_markup(message))

    def success(self, message: str) -> None:
        self.console.print(f"[success]✓[/success] {escape_markup(message)}")

    def warn(self, message: str) -> None:
        self.console.print(f"[warning]warn:[/warning] {escape_markup(message)}")

    def error(self, message: str) -> None:
        self.console.print(f"[failure]error:[/failure] {escape_markup(message)}")

    def cancelled(self) -> None:
        self.console.print("[warning]cancelled[/warning]")

    def note(self, body: str, title: str) -> None:
        self.console.print(Panel(escape_markup(body), title=escape_markup(title), title_align="left", expand=False))

    @contextmanager
    def step(self, messages: StepMessages) -> Iterator[None]:
        """Show a spinner while the block runs, then its success or failure line.

        Exceptions are re-raised after the failure line is printed.
        """
        try:
            with self.console.status(f"[step]{escape_markup(messages.start)}[/step]", spinner="dots"):
                yield
        except BaseException:
            self.console.print(f"[failure]✗[/failure] {escape_markup(messages.fail)}")
            raise
        self.console.print(f"[success]✓[/success] {escape_markup(messages.success)}")
