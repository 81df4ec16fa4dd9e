"""Intermediate records derived from a single diary note."""

from pydantic import BaseModel


class DiaryEntry(BaseModel):
    """A heading-delimited entry of a diary note."""

    title: str
    subheadings: str = ""
    content: str = ""


class RenderedFrontmatter(BaseModel):
    """Title and body produced from a note's front matter."""

    title: str
    body: str
