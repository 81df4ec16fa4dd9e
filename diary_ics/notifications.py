"""User-visible notifications."""

import logging
from typing import Protocol

from rich.console import Console

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    """Protocol for surfacing short messages to the operator."""

    def info(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...


class ConsoleNotifier:
    """Prints notifications to a Rich console."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(stderr=True)

    def info(self, message: str) -> None:
        self.console.print(f"[green]●[/green] {message}")

    def error(self, message: str) -> None:
        self.console.print(f"[red]✗[/red] {message}")


class LogNotifier:
    """Sends notifications to the log only."""

    def info(self, message: str) -> None:
        logger.info(message)

    def error(self, message: str) -> None:
        logger.error(message)
