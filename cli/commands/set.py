"""Change a feed setting."""

import logging

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import console
from diary_ics.exceptions import SettingsError
from diary_ics.messages import format_string, get_messages
from diary_ics.models.settings import FeedSettings

logger = logging.getLogger(__name__)


def set_setting(
    key: Annotated[
        str,
        typer.Argument(help="Setting name, e.g. port, heading-level, diaryFormat"),
    ],
    value: Annotated[
        str,
        typer.Argument(help="New value"),
    ],
) -> None:
    """Change a feed setting and save it.

    A running server picks the change up from the settings file; changing
    the host or port restarts its listener.
    """
    ctx = get_context()

    try:
        field = FeedSettings.resolve_field(key)
        updated = ctx.settings.with_updates(**{field: value})
    except SettingsError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    ctx.save_settings(updated)
    messages = get_messages(updated.language)
    console.print(f"[green]✓[/green] {format_string(messages.settings_saved, field)}")
    shown = updated.model_dump(mode="json")[field]
    console.print(f"  {field} = {shown!r}", markup=False)
