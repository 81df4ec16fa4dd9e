"""Render a note's front matter as an event title and body."""

from typing import Any, Mapping

from diary_ics.models.entry import RenderedFrontmatter
from diary_ics.processing.template_utils import (
    has_placeholders,
    stringify,
    substitute_placeholders,
)

RESERVED_FIELDS = frozenset({"position"})
FILENAME_PLACEHOLDER = "filename"
DEFAULT_TITLE_SUFFIX = "[frontmatter]"


def frontmatter_fields(frontmatter: Mapping[str, Any]) -> dict[str, str]:
    """Front-matter fields eligible for display, in map order, as strings.

    Reserved fields and fields with null values are dropped.
    """
    return {
        key: stringify(value)
        for key, value in frontmatter.items()
        if key not in RESERVED_FIELDS and value is not None
    }


def render_body(fields: Mapping[str, str], template: str) -> str:
    """Body text for the front-matter event.

    A template with placeholders is substituted, a template without any is
    used verbatim, and no template lists one ``key: value`` line per field.
    """
    if template:
        if has_placeholders(template):
            return substitute_placeholders(template, fields)
        return template
    return "".join(f"{key}: {value}\n" for key, value in fields.items())


def render_title(fields: Mapping[str, str], template: str, filename: str) -> str:
    """Title for the front-matter event; ``{{filename}}`` names the note."""
    if not template:
        return f"{filename}{DEFAULT_TITLE_SUFFIX}"
    variables = {**fields, FILENAME_PLACEHOLDER: filename}
    return substitute_placeholders(template, variables)


def render_frontmatter(
    frontmatter: Mapping[str, Any],
    title_template: str,
    body_template: str,
    filename: str,
) -> RenderedFrontmatter | None:
    """
    Render title and body for a note's front matter.

    Args:
        frontmatter: Parsed front-matter map
        title_template: Title template ("" for the default title)
        body_template: Body template ("" for one line per field)
        filename: Note basename without extension

    Returns:
        Rendered title and body, or None if the body comes out empty
    """
    fields = frontmatter_fields(frontmatter)
    body = render_body(fields, body_template)
    if not body:
        return None
    return RenderedFrontmatter(title=render_title(fields, title_template, filename), body=body)
