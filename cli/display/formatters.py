"""Pure formatting functions for display output."""

from datetime import date
from pathlib import Path


def format_file_size(size_bytes: int) -> str:
    """Format file size in human-readable format.

    Args:
        size_bytes: File size in bytes.

    Returns:
        Formatted size string (e.g., "1.5KB", "2.3MB").
    """
    size = float(size_bytes)
    for unit in ["B", "KB", "MB", "GB"]:
        if size < 1024.0:
            return f"{size:.1f}{unit}"
        size /= 1024.0
    return f"{size:.1f}TB"


def format_path(path: Path) -> str:
    """Path relative to the working directory when possible, else absolute."""
    resolved = path.resolve()
    try:
        return str(resolved.relative_to(Path.cwd()))
    except ValueError:
        return str(resolved)


def format_event_date(d: date) -> str:
    """Format an event date as ``2024-01-01 Mon``."""
    return d.strftime("%Y-%m-%d %a")


def first_line(text: str, width: int = 48) -> str:
    """First non-empty line of ``text``, truncated to ``width`` characters."""
    for line in text.splitlines():
        line = line.strip()
        if line:
            return line if len(line) <= width else line[: width - 1] + "…"
    return ""
