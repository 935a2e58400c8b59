"""Notification collaborator.

Notifications are fire-and-forget messages shown to the user, the CLI
counterpart of the host application's toast notices.
"""

from typing import Protocol, runtime_checkable

from rich.console import Console


@runtime_checkable
class Notifier(Protocol):
    """User-visible notification sink."""

    def notify(self, message: str) -> None: ...


class ConsoleNotifier:
    """Prints notifications to a rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)

    def notify(self, message: str) -> None:
        self._console.print(f"[yellow]![/yellow] {message}", highlight=False)
