import os
import socket
import sys
from pathlib import Path

import pytest

from diary_ics import create_app
from diary_ics.ingestion.vault import Vault
from diary_ics.models.settings import FeedSettings

VAULT_NAME = "MyVault"


@pytest.fixture
def vault_dir(tmp_path):
    """Empty vault directory."""
    root = tmp_path / VAULT_NAME
    root.mkdir()
    return root


@pytest.fixture
def write_note(vault_dir):
    """Write a note into the vault (creating folders) and return its path."""

    def _write(relative_path: str, text: str) -> Path:
        path = vault_dir / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def undecodable_folder(vault_dir):
    """Vault folder whose name is not valid UTF-8."""
    if sys.platform != "linux" or sys.getfilesystemencoding() != "utf-8":
        pytest.skip("needs a UTF-8 filesystem that accepts arbitrary bytes")
    folder = vault_dir / os.fsdecode(b"Diary\xff")
    folder.mkdir()
    return folder


@pytest.fixture
def vault(vault_dir):
    """Vault over the empty vault directory."""
    return Vault(vault_dir)


@pytest.fixture
def settings():
    """Default feed settings."""
    return FeedSettings()


@pytest.fixture
def app(vault, settings):
    """Create and configure a Flask app for testing."""
    app = create_app(vault, settings)
    app.config.update({"TESTING": True})
    return app


@pytest.fixture
def client(app):
    """Create a test client for the app."""
    return app.test_client()


@pytest.fixture
def free_port():
    """A TCP port that was free a moment ago."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]
