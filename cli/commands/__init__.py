"""CLI commands package."""

from cli.commands.config import config
from cli.commands.events import events
from cli.commands.export import export
from cli.commands.serve import serve
from cli.commands.set import set_setting
from cli.commands.url import url

__all__ = [
    "config",
    "events",
    "export",
    "serve",
    "set_setting",
    "url",
]
