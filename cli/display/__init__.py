"""Display module for rendering CLI output.

Provides the shared Rich console, the table renderer for events and
settings, and small formatting helpers.
"""

from cli.display.console import console
from cli.display.formatters import (
    first_line,
    format_event_date,
    format_file_size,
    format_path,
)
from cli.display.table_renderer import TableRenderer

__all__ = [
    "console",
    "TableRenderer",
    "first_line",
    "format_event_date",
    "format_file_size",
    "format_path",
]
