"""Diary ICS: serve dated diary notes as a subscribable calendar feed."""

import logging
from typing import Callable

from flask import Flask, Response

from .ingestion.vault import Vault
from .models.settings import FeedSettings
from .output.ics_writer import ICSWriter
from .processing.feed_assembler import build_feed

logger = logging.getLogger(__name__)

FEED_PATH = "/feed.ics"
FEED_FILENAME = "obsidian-diary.ics"


def create_app(
    vault: Vault, settings: FeedSettings | Callable[[], FeedSettings]
) -> Flask:
    """Create the feed app.

    Args:
        vault: Vault to build the feed from
        settings: Settings, or a callable returning the current settings;
            the callable is read once per request

    The app serves no authentication or origin checks: anyone who can reach
    the bound address can read the feed.
    """
    if callable(settings):
        get_settings = settings
    else:

        def get_settings() -> FeedSettings:
            return settings

    app = Flask(__name__)

    @app.route(FEED_PATH, methods=["GET"])
    def feed():
        """Serve the diary feed, rebuilt from the vault on every request."""
        current = get_settings()
        try:
            events = build_feed(vault, current)
            ical_content = ICSWriter().to_ical(events, vault.name)
        except Exception:
            logger.exception("Error generating ICS file")
            return Response("Error generating ICS file", status=500, mimetype="text/plain")

        logger.info(f"ICS file provided ({len(events)} events)")
        return Response(
            ical_content,
            content_type="text/calendar; charset=utf-8",
            headers={"Content-Disposition": f'attachment; filename="{FEED_FILENAME}"'},
        )

    @app.errorhandler(404)
    @app.errorhandler(405)
    def not_found(error):
        return Response("Not found", status=404, mimetype="text/plain")

    return app


__all__ = ["FEED_FILENAME", "FEED_PATH", "create_app"]
