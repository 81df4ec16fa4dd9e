"""Print the feed subscription link."""

import logging

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import console
from diary_ics.exceptions import SettingsError
from diary_ics.messages import get_messages
from diary_ics.server import subscription_url

logger = logging.getLogger(__name__)


def url(
    plain: Annotated[
        bool,
        typer.Option("--plain", help="Print only the URL"),
    ] = False,
) -> None:
    """Print the ICS subscription link for calendar clients."""
    ctx = get_context()

    try:
        settings = ctx.settings
    except SettingsError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    link = subscription_url(settings)
    if plain:
        print(link)
        return

    messages = get_messages(settings.language)
    console.print(f"\n[bold]{messages.plugin_name}[/bold]")
    console.print(f"[bold cyan]{messages.ics_link_title}[/bold cyan]")
    console.print(f"  {link}\n", markup=False)
    console.print(f"[bold]{messages.instructions_title}[/bold]")
    for line in (messages.instruction1, messages.instruction2, messages.instruction3):
        console.print(f"  {line}")
