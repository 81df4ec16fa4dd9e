"""Vault ingestion: note listing and Markdown parsing."""

from diary_ics.ingestion.markdown import parse_frontmatter, parse_headings
from diary_ics.ingestion.vault import DailyNoteSettings, NoteContent, Vault

__all__ = [
    "DailyNoteSettings",
    "NoteContent",
    "Vault",
    "parse_frontmatter",
    "parse_headings",
]
