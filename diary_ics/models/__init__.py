"""Pydantic models for the diary feed."""

from diary_ics.models.entry import DiaryEntry, RenderedFrontmatter
from diary_ics.models.event import DiaryEvent
from diary_ics.models.note import Heading, NoteFile
from diary_ics.models.settings import FeedSettings, HeadingLevel

__all__ = [
    "DiaryEntry",
    "DiaryEvent",
    "FeedSettings",
    "Heading",
    "HeadingLevel",
    "NoteFile",
    "RenderedFrontmatter",
]
