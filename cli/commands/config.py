"""Display vault location and feed settings."""

import logging

import typer

from cli.context import get_context
from cli.display import TableRenderer
from diary_ics.exceptions import DiaryIcsError
from diary_ics.processing.feed_assembler import resolve_diary_naming

logger = logging.getLogger(__name__)


def config() -> None:
    """Display vault location, settings file and feed settings."""
    ctx = get_context()

    try:
        vault = ctx.vault
        settings = ctx.settings
    except DiaryIcsError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    diary_format, diary_folder = resolve_diary_naming(vault, settings)
    TableRenderer().render_settings(
        settings,
        ctx.config.settings_path,
        vault.root,
        vault.name,
        diary_format,
        diary_folder,
    )
