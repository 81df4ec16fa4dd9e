"""Export the diary feed to an ICS file."""

import logging
from pathlib import Path

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import console, format_file_size, format_path
from diary_ics import FEED_FILENAME
from diary_ics.exceptions import DiaryIcsError
from diary_ics.output.ics_writer import ICSWriter
from diary_ics.processing.feed_assembler import build_feed

logger = logging.getLogger(__name__)


def export(
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Path for the output ICS file"),
    ] = Path(FEED_FILENAME),
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Print the calendar instead of writing it"),
    ] = False,
) -> None:
    """Write the feed the server would return to a file.

    Useful for calendar apps that import files instead of subscribing.
    """
    ctx = get_context()
    writer = ICSWriter()

    try:
        vault = ctx.vault
        events = build_feed(vault, ctx.settings)
        if dry_run:
            console.print(writer.to_ical(events, vault.name).decode("utf-8"), markup=False)
            return
        writer.write(events, output, vault.name)
    except DiaryIcsError as e:
        logger.error(f"Export failed: {e}")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Exported {len(events)} events")
    console.print(f"  {format_path(output)} ({format_file_size(output.stat().st_size)})")
