"""Lifecycle of the local HTTP server that publishes the feed."""

import logging
import socket
import threading
from enum import Enum

from werkzeug.serving import BaseWSGIServer, make_server, select_address_family

from diary_ics import FEED_PATH, create_app
from diary_ics.exceptions import ServerBindError
from diary_ics.ingestion.vault import Vault
from diary_ics.messages import Messages, format_string, get_messages
from diary_ics.models.settings import FeedSettings
from diary_ics.notifications import LogNotifier, Notifier

logger = logging.getLogger(__name__)

WILDCARD_HOSTS = {"0.0.0.0", "::", ""}
LISTEN_BACKLOG = 128


def subscription_url(settings: FeedSettings) -> str:
    """URL calendar clients subscribe to for the given settings."""
    host = "127.0.0.1" if settings.host in WILDCARD_HOSTS else settings.host
    if ":" in host:
        host = f"[{host}]"
    return f"http://{host}:{settings.port}{FEED_PATH}"


class ServerState(str, Enum):
    """Server lifecycle state."""

    STOPPED = "stopped"
    LISTENING = "listening"


class FeedServer:
    """Serves the feed app on a background thread.

    Two states only: ``stopped`` and ``listening``. A bind failure leaves the
    server stopped; there is no retry and no fallback port.
    """

    def __init__(
        self,
        vault: Vault,
        settings: FeedSettings,
        notifier: Notifier | None = None,
    ):
        """
        Initialize FeedServer.

        Args:
            vault: Vault to publish
            settings: Initial feed settings
            notifier: Receives operator-visible messages (defaults to the log)
        """
        self.vault = vault
        self._settings = settings
        self.notifier = notifier or LogNotifier()
        self.app = create_app(vault, lambda: self._settings)
        self._server: BaseWSGIServer | None = None
        self._thread: threading.Thread | None = None

    @property
    def settings(self) -> FeedSettings:
        return self._settings

    @property
    def messages(self) -> Messages:
        return get_messages(self._settings.language)

    @property
    def state(self) -> ServerState:
        if self._server is None:
            return ServerState.STOPPED
        return ServerState.LISTENING

    @property
    def url(self) -> str:
        return subscription_url(self._settings)

    def _bind(self) -> socket.socket:
        host, port = self._settings.host, self._settings.port
        sock = socket.socket(select_address_family(host, port), socket.SOCK_STREAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((host, port))
            sock.listen(LISTEN_BACKLOG)
        except OSError:
            sock.close()
            raise
        return sock

    def start(self) -> None:
        """Bind the configured address and start serving.

        Raises:
            ServerBindError: If the address cannot be bound
        """
        if self._server is not None:
            return

        host, port = self._settings.host, self._settings.port
        try:
            sock = self._bind()
        except OSError as e:
            logger.error(f"Cannot bind {host}:{port}: {e}")
            self.notifier.error(format_string(self.messages.server_error, e))
            raise ServerBindError(f"Cannot bind {host}:{port}: {e}") from e

        try:
            server = make_server(host, port, self.app, threaded=True, fd=sock.fileno())
        finally:
            # make_server keeps its own duplicate of the descriptor
            sock.close()

        thread = threading.Thread(
            target=server.serve_forever, name="diary-ics-http", daemon=True
        )
        thread.start()
        self._server = server
        self._thread = thread

        logger.info(f"ICS HTTP server started: {self.url}")
        self.notifier.info(format_string(self.messages.server_started, self.url))

    def stop(self) -> None:
        """Stop serving and close the socket. In-flight requests may be cut off."""
        if self._server is None:
            return

        server, thread = self._server, self._thread
        self._server = None
        self._thread = None

        server.shutdown()
        server.server_close()
        if thread is not None:
            thread.join()

        logger.info("ICS HTTP server stopped")
        self.notifier.info(self.messages.server_stopped)

    def apply_settings(self, settings: FeedSettings) -> bool:
        """Switch to new settings, rebinding if host or port changed.

        Returns:
            True if the server was restarted

        Raises:
            ServerBindError: If the restart cannot bind the new address
        """
        previous = self._settings
        self._settings = settings

        if self.state is ServerState.STOPPED or not previous.requires_restart(settings):
            return False

        self.stop()
        self.start()
        self.notifier.info(format_string(self.messages.server_restarted, self.url))
        return True

