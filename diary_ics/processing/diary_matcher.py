"""Recognise diary notes and resolve the date they represent."""

import logging
from datetime import date

from diary_ics.exceptions import DiaryDateError
from diary_ics.models.note import NoteFile
from diary_ics.processing.date_format import compile_format, parse_date

logger = logging.getLogger(__name__)

NOTE_EXTENSION = "md"


def normalize_folder(folder: str) -> str:
    """Strip surrounding slashes; "" and "/" both mean the vault root."""
    return folder.strip().strip("/")


class DiaryMatcher:
    """Decides which notes are diary entries under a naming pattern and folder."""

    def __init__(self, diary_format: str, diary_folder: str = ""):
        """
        Initialize DiaryMatcher.

        Args:
            diary_format: Moment-style naming pattern, e.g. ``YYYY-MM-DD``
            diary_folder: Folder the diary lives in ("" or "/" for anywhere)

        Raises:
            DateFormatError: If the naming pattern is invalid
        """
        compile_format(diary_format)
        self.diary_format = diary_format
        self.diary_folder = normalize_folder(diary_folder)

    def in_folder(self, note: NoteFile) -> bool:
        if not self.diary_folder:
            return True
        return note.path.startswith(self.diary_folder + "/")

    def is_diary_file(self, note: NoteFile) -> bool:
        """True if the note is a Markdown file in the diary folder whose name parses as a date."""
        if note.extension != NOTE_EXTENSION:
            return False
        if not self.in_folder(note):
            return False
        return parse_date(note.basename, self.diary_format) is not None

    def date_of(self, note: NoteFile) -> date:
        """Date encoded in the note's file name.

        Raises:
            DiaryDateError: If the name does not parse under the pattern
        """
        parsed = parse_date(note.basename, self.diary_format)
        if parsed is None:
            raise DiaryDateError(
                f"'{note.basename}' does not match diary pattern '{self.diary_format}'"
            )
        return parsed

    def filter(self, notes: list[NoteFile]) -> list[NoteFile]:
        """Keep diary notes, preserving input order."""
        matched = [note for note in notes if self.is_diary_file(note)]
        logger.debug(f"Matched {len(matched)} of {len(notes)} notes as diary files")
        return matched
