"""Watchdog watcher for the settings file."""

import logging
import os
import threading
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

logger = logging.getLogger(__name__)


class SettingsFileHandler(FileSystemEventHandler):
    """Flag writes, creation, removal and renames of a single file.

    Open/close events are ignored: reading the file after a change must not
    look like another change.
    """

    def __init__(self, path: Path):
        super().__init__()
        self.path = path
        self.changed = threading.Event()

    def _is_target(self, raw_path) -> bool:
        if not raw_path:
            return False
        return Path(os.fsdecode(raw_path)) == self.path

    def _flag(self, event: FileSystemEvent, *paths) -> None:
        if event.is_directory:
            return
        if any(self._is_target(p) for p in paths):
            logger.debug(f"Settings file {event.event_type}: {self.path}")
            self.changed.set()

    def on_created(self, event) -> None:
        self._flag(event, event.src_path)

    def on_modified(self, event) -> None:
        self._flag(event, event.src_path)

    def on_deleted(self, event) -> None:
        self._flag(event, event.src_path)

    def on_moved(self, event) -> None:
        # Editors that save atomically rename a temp file over the target
        self._flag(event, event.src_path, event.dest_path)


class SettingsWatcher:
    """Reports changes to the settings file observed since the last poll.

    The parent directory is watched (non-recursively) so the file can be
    created, replaced or deleted while watching.
    """

    def __init__(self, path: Path):
        self.path = Path(path).absolute()
        self.handler = SettingsFileHandler(self.path)
        self._observer: Observer | None = None

    def start(self) -> None:
        """Start the observer thread, creating the settings directory if needed."""
        if self._observer is not None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        observer = Observer()
        observer.schedule(self.handler, str(self.path.parent), recursive=False)
        observer.start()
        self._observer = observer
        logger.debug(f"Watching {self.path}")

    def stop(self) -> None:
        if self._observer is None:
            return
        observer = self._observer
        self._observer = None
        observer.stop()
        observer.join()

    def wait(self, timeout: float) -> bool:
        """Block until a change is seen or ``timeout`` seconds pass."""
        return self.handler.changed.wait(timeout)

    def poll(self) -> bool:
        """True if the file changed since the last poll; resets the flag."""
        if not self.handler.changed.is_set():
            return False
        self.handler.changed.clear()
        return True
