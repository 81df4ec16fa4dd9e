"""Shared Rich console instance for consistent terminal output."""

from rich.console import Console

# Shared console used by commands, renderers and the serve notifier
console = Console()
