"""Group a heading outline into diary entries."""

from diary_ics.models.entry import DiaryEntry
from diary_ics.models.note import Heading

SUBHEADING_INDENT = "  "


def format_subheading(heading: Heading, level: int) -> str:
    """Render a sub-heading indented by its depth below the entry level."""
    return SUBHEADING_INDENT * max(heading.level - level - 1, 0) + heading.text


def extract_entries(
    headings: list[Heading], level: int, lines: list[str] | None = None
) -> list[DiaryEntry]:
    """
    Split a note's headings into entries at the given level.

    Each heading at ``level`` opens an entry that runs until the next heading
    at ``level`` (or the end of the file). Deeper headings inside that window
    become the entry's sub-heading block, one per line. Headings before the
    first entry are ignored.

    When the note's ``lines`` are given, each entry also carries the text of
    its window (heading line excluded, sub-heading lines included), stripped
    of surrounding whitespace.

    Args:
        headings: Heading outline, in file order
        level: Heading depth used as the entry boundary (1 or 2)
        lines: Raw note lines the heading line numbers refer to

    Returns:
        Entries in file order (empty if no heading sits at ``level``)
    """
    ordered = sorted(headings, key=lambda h: h.line)
    boundaries = [i for i, heading in enumerate(ordered) if heading.level == level]

    entries = []
    for position, start in enumerate(boundaries):
        has_next = position + 1 < len(boundaries)
        end = boundaries[position + 1] if has_next else len(ordered)
        subheadings = [
            format_subheading(heading, level)
            for heading in ordered[start + 1 : end]
            if heading.level > level
        ]

        content = ""
        if lines is not None:
            stop = ordered[end].line if has_next else len(lines)
            content = "\n".join(lines[ordered[start].line + 1 : stop]).strip()

        entries.append(
            DiaryEntry(
                title=ordered[start].text,
                subheadings="\n".join(subheadings),
                content=content,
            )
        )

    return entries
