"""Table renderer for feed events and settings."""

from pathlib import Path

from rich.markup import escape
from rich.table import Table

from cli.display.console import console
from cli.display.formatters import first_line, format_event_date, format_path
from diary_ics.models.event import DiaryEvent
from diary_ics.models.settings import FeedSettings


class TableRenderer:
    """Render tables for feed events and settings.

    Uses Rich's Table class for consistent, well-formatted output.
    """

    def render_events(self, events: list[DiaryEvent], vault_name: str) -> None:
        """Render the feed's events as a table.

        Args:
            events: Events in feed order.
            vault_name: Vault name for the header.
        """
        if not events:
            console.print(f"No diary events found in vault '{vault_name}'", markup=False)
            return

        console.print(f"Listing {len(events)} events from vault '{vault_name}':", markup=False)
        console.print()

        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("DATE", style="dim", no_wrap=True)
        table.add_column("TITLE", style="cyan")
        table.add_column("DESCRIPTION", style="dim")
        table.add_column("FILE", style="dim")

        for event in events:
            table.add_row(
                format_event_date(event.date),
                escape(event.title),
                escape(first_line(event.description)),
                escape(event.source_path or "-"),
            )

        console.print(table)

    def render_settings(
        self,
        settings: FeedSettings,
        settings_path: Path,
        vault_dir: Path,
        vault_name: str,
        diary_format: str,
        diary_folder: str,
    ) -> None:
        """Render vault location and feed settings.

        Args:
            settings: Current feed settings.
            settings_path: Where the settings are stored.
            vault_dir: Vault directory.
            vault_name: Vault name used in deep links.
            diary_format: Effective naming pattern (after daily-notes fallback).
            diary_folder: Effective diary folder (after daily-notes fallback).
        """
        console.print("\n[bold cyan]Vault[/bold cyan]")
        vault_table = self._create_table()
        vault_table.add_row("vault_dir", escape(str(vault_dir)))
        vault_table.add_row("vault_name", escape(vault_name))
        vault_table.add_row("settings_file", escape(format_path(settings_path)))
        console.print(vault_table)

        console.print("\n[bold cyan]Feed Settings[/bold cyan]")
        table = self._create_table()
        for name, value in settings.model_dump(mode="json").items():
            shown = repr(value) if isinstance(value, str) else str(value)
            table.add_row(name, escape(shown))
        console.print(table)

        console.print("\n[bold cyan]Effective Diary Naming[/bold cyan]")
        naming_table = self._create_table()
        naming_table.add_row("diary_format", escape(diary_format))
        folder = escape(diary_folder) if diary_folder else "[dim](vault root)[/dim]"
        naming_table.add_row("diary_folder", folder)
        console.print(naming_table)

    def _create_table(self) -> Table:
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("SETTING", style="cyan", min_width=28, no_wrap=True)
        table.add_column("VALUE")
        return table
