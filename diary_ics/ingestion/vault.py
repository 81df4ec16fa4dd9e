"""Read-only access to notes stored in a vault directory."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from diary_ics.exceptions import VaultNotFoundError, VaultReadError
from diary_ics.ingestion.markdown import parse_frontmatter, parse_headings
from diary_ics.models.note import Heading, NoteFile

logger = logging.getLogger(__name__)

DEFAULT_DIARY_FORMAT = "YYYY-MM-DD"
DAILY_NOTES_SETTINGS = Path(".obsidian/daily-notes.json")


@dataclass(frozen=True)
class DailyNoteSettings:
    """Naming settings of the vault's daily-notes core plugin."""

    format: str = DEFAULT_DIARY_FORMAT
    folder: str = ""


@dataclass(frozen=True)
class NoteContent:
    """Heading outline, front matter and raw lines of one note."""

    headings: list[Heading]
    frontmatter: dict[str, Any] | None
    lines: list[str] = field(default_factory=list)


class Vault:
    """A directory of Markdown notes.

    Hidden directories (``.obsidian``, ``.trash``, ...) are never listed.
    Paths handed out are vault-relative POSIX strings.
    """

    def __init__(self, root: Path, name: str | None = None):
        """
        Initialize Vault.

        Args:
            root: Vault directory
            name: Vault name used in deep links (defaults to the directory name)

        Raises:
            VaultNotFoundError: If root is not an existing directory
        """
        root = Path(root).expanduser()
        if not root.is_dir():
            raise VaultNotFoundError(f"Vault directory not found: {root}")
        self.root = root.resolve()
        self.name = name or self.root.name

    def list_notes(self) -> list[NoteFile]:
        """List every file in the vault, sorted by path."""
        notes = []
        for path in self.root.rglob("*"):
            relative = path.relative_to(self.root)
            if any(part.startswith(".") for part in relative.parts):
                continue
            if not path.is_file():
                continue
            try:
                relative.as_posix().encode("utf-8")
            except UnicodeEncodeError:
                logger.warning(f"Skipping file with undecodable name: {relative!r}")
                continue
            notes.append(NoteFile.from_path(relative.as_posix()))
        return sorted(notes, key=lambda note: note.path)

    def path_of(self, note: NoteFile) -> Path:
        return self.root / note.path

    def read(self, note: NoteFile) -> str:
        """Read note text.

        Raises:
            VaultReadError: If the file cannot be read or decoded
        """
        try:
            return self.path_of(note).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise VaultReadError(f"Cannot read {note.path}: {e}") from e

    def load(self, note: NoteFile, with_frontmatter: bool = True) -> NoteContent:
        """Read a note and parse its heading outline and, optionally, front matter.

        Args:
            note: Note to load
            with_frontmatter: Parse the front-matter block (otherwise left as None)

        Raises:
            VaultReadError: If the file cannot be read or its front matter
                is not valid YAML
        """
        text = self.read(note)
        metadata = None
        if with_frontmatter:
            try:
                metadata = parse_frontmatter(text)
            except (yaml.YAMLError, ValueError) as e:
                raise VaultReadError(f"Invalid front matter in {note.path}: {e}") from e
        return NoteContent(
            headings=parse_headings(text),
            frontmatter=metadata,
            lines=text.splitlines(),
        )

    def daily_note_settings(self) -> DailyNoteSettings:
        """Read the daily-notes core plugin settings, falling back to defaults."""
        settings_path = self.root / DAILY_NOTES_SETTINGS
        if not settings_path.exists():
            return DailyNoteSettings()

        try:
            data = json.loads(settings_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.info(f"Cannot read daily-notes settings, using defaults: {e}")
            return DailyNoteSettings()

        if not isinstance(data, dict):
            return DailyNoteSettings()

        fmt = data.get("format")
        folder = data.get("folder")
        return DailyNoteSettings(
            format=fmt.strip() if isinstance(fmt, str) and fmt.strip() else DEFAULT_DIARY_FORMAT,
            folder=folder.strip() if isinstance(folder, str) else "",
        )
