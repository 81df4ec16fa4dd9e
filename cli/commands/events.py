"""List the events the feed currently contains."""

import logging

import typer

from cli.context import get_context
from cli.display import TableRenderer
from diary_ics.exceptions import DiaryIcsError
from diary_ics.processing.feed_assembler import build_feed

logger = logging.getLogger(__name__)


def events() -> None:
    """List diary events in feed order."""
    ctx = get_context()

    try:
        vault = ctx.vault
        feed = build_feed(vault, ctx.settings)
    except DiaryIcsError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    TableRenderer().render_events(feed, vault.name)
