"""Serve the diary feed over HTTP until interrupted."""

import logging

import typer

from cli.context import get_context
from cli.display import console
from diary_ics.exceptions import DiaryIcsError, ServerBindError, SettingsError
from diary_ics.messages import format_string
from diary_ics.models.settings import FeedSettings
from diary_ics.notifications import ConsoleNotifier
from diary_ics.server import FeedServer, ServerState
from diary_ics.watcher import SettingsWatcher

logger = logging.getLogger(__name__)


def reload_settings(server: FeedServer, watcher: SettingsWatcher) -> None:
    """Apply the settings file to a running server if it changed on disk.

    A stopped server (after a failed bind) is started again so that fixing
    the port in the settings file is enough to recover.
    """
    if not watcher.poll():
        return

    try:
        settings = FeedSettings.load(watcher.path)
    except SettingsError as e:
        logger.error(f"Keeping previous settings: {e}")
        return

    server.notifier.info(format_string(server.messages.settings_reloaded, watcher.path))
    try:
        server.apply_settings(settings)
        if server.state is ServerState.STOPPED:
            server.start()
    except ServerBindError:
        # start() already notified the operator
        logger.info("Server stays stopped until the settings file changes")


def serve() -> None:
    """Serve the feed at http://HOST:PORT/feed.ics.

    Settings are reloaded whenever the settings file changes; a new host or
    port restarts the listener. The feed has no authentication: anyone who
    can reach the address can read your diary headings.
    """
    ctx = get_context()

    try:
        vault = ctx.vault
        settings = ctx.settings
    except DiaryIcsError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    server = FeedServer(vault, settings, notifier=ConsoleNotifier(console))
    watcher = SettingsWatcher(ctx.config.settings_path)

    try:
        server.start()
    except ServerBindError:
        raise typer.Exit(1)

    watcher.start()
    try:
        while True:
            watcher.wait(ctx.config.poll_interval)
            reload_settings(server, watcher)
    except KeyboardInterrupt:
        pass
    finally:
        watcher.stop()
        server.stop()
