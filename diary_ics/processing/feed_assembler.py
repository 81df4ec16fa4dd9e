"""Assemble calendar events from the diary notes of a vault."""

import logging
from datetime import date

from diary_ics.exceptions import DiaryIcsError
from diary_ics.ingestion.vault import NoteContent, Vault
from diary_ics.models.event import DiaryEvent
from diary_ics.models.note import NoteFile
from diary_ics.models.settings import FeedSettings
from diary_ics.processing.deep_link import build_deep_link
from diary_ics.processing.diary_matcher import DiaryMatcher
from diary_ics.processing.entry_extractor import extract_entries
from diary_ics.processing.frontmatter_renderer import render_frontmatter

logger = logging.getLogger(__name__)


def resolve_diary_naming(vault: Vault, settings: FeedSettings) -> tuple[str, str]:
    """Naming pattern and folder to match diary notes with.

    Empty settings fall back to the vault's daily-notes plugin settings.
    A folder of "/" explicitly selects the whole vault.
    """
    daily = None
    diary_format = settings.diary_format
    diary_folder = settings.diary_folder

    if not diary_format or not diary_folder:
        daily = vault.daily_note_settings()
    if not diary_format:
        diary_format = daily.format
    if not diary_folder:
        diary_folder = daily.folder

    return diary_format, diary_folder


class FeedAssembler:
    """Builds the ordered event list for one feed generation."""

    def __init__(self, vault: Vault, settings: FeedSettings):
        """
        Initialize FeedAssembler.

        Args:
            vault: Vault to read notes from
            settings: Feed settings, fixed for the lifetime of this assembler

        Raises:
            DateFormatError: If the diary naming pattern is invalid
        """
        self.vault = vault
        self.settings = settings
        diary_format, diary_folder = resolve_diary_naming(vault, settings)
        self.matcher = DiaryMatcher(diary_format, diary_folder)

    def diary_files(self) -> list[NoteFile]:
        """Diary notes of the vault, sorted by path."""
        return self.matcher.filter(self.vault.list_notes())

    def build_feed(self) -> list[DiaryEvent]:
        """Build events for every diary note.

        A note that fails to load contributes no events; the others are
        still returned.
        """
        files = self.diary_files()
        logger.info(f"Generating ICS content: {len(files)} diary files")

        events: list[DiaryEvent] = []
        for note in files:
            try:
                events.extend(self.events_for(note))
            except (DiaryIcsError, UnicodeError) as e:
                logger.warning(f"Skipping {note.path}: {e}")
        return events

    def events_for(self, note: NoteFile) -> list[DiaryEvent]:
        """Events for a single diary note, front-matter event first.

        Raises:
            DiaryDateError: If the note's name does not resolve to a date
            VaultReadError: If the note cannot be read or parsed
        """
        event_date = self.matcher.date_of(note)
        content = self.vault.load(note, with_frontmatter=self.settings.include_frontmatter)

        events = []
        if self.settings.include_frontmatter:
            frontmatter_event = self._frontmatter_event(note, content, event_date)
            if frontmatter_event is not None:
                events.append(frontmatter_event)

        events.extend(self._heading_events(note, content, event_date))
        logger.debug(f"Parsed {note.path}: {len(events)} events")
        return events

    def _frontmatter_event(
        self, note: NoteFile, content: NoteContent, event_date: date
    ) -> DiaryEvent | None:
        if content.frontmatter is None:
            return None

        rendered = render_frontmatter(
            content.frontmatter,
            self.settings.frontmatter_title_template,
            self.settings.frontmatter_template,
            note.basename,
        )
        if rendered is None:
            return None

        return DiaryEvent(
            title=rendered.title,
            date=event_date,
            description=rendered.body,
            url=build_deep_link(self.vault.name, note.path),
            source_path=note.path,
        )

    def _heading_events(
        self, note: NoteFile, content: NoteContent, event_date: date
    ) -> list[DiaryEvent]:
        events = []
        entries = extract_entries(
            content.headings, self.settings.heading_depth, content.lines
        )
        for entry in entries:
            description = ""
            if self.settings.include_subheadings and entry.subheadings:
                description = entry.subheadings + "\n\n"
            if self.settings.include_content and entry.content:
                description += entry.content + "\n\n"

            events.append(
                DiaryEvent(
                    title=entry.title,
                    date=event_date,
                    description=description,
                    url=build_deep_link(self.vault.name, note.path, entry.title),
                    source_path=note.path,
                )
            )
        return events


def build_feed(vault: Vault, settings: FeedSettings) -> list[DiaryEvent]:
    """Build the event list for the vault under the given settings."""
    return FeedAssembler(vault, settings).build_feed()
