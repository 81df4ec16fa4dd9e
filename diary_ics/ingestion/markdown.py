"""Markdown parsing helpers: heading outline and YAML front matter."""

import re
from typing import Any

import frontmatter

from diary_ics.models.note import Heading

# ATX heading: up to three spaces of indent, 1-6 hashes, text, optional closing hashes
HEADING_PATTERN = re.compile(r"^ {0,3}(#{1,6})[ \t]+(.+?)(?:[ \t]+#+)?[ \t]*$")
FENCE_PATTERN = re.compile(r"^ {0,3}(`{3,}|~{3,})")
FRONTMATTER_DELIMITER = "---"


def frontmatter_line_count(lines: list[str]) -> int:
    """Number of leading lines taken by a front-matter block (0 if none)."""
    if not lines or lines[0].rstrip() != FRONTMATTER_DELIMITER:
        return 0
    for index in range(1, len(lines)):
        if lines[index].rstrip() == FRONTMATTER_DELIMITER:
            return index + 1
    return 0


def parse_headings(text: str) -> list[Heading]:
    """Build the ordered heading outline of a note.

    Lines inside fenced code blocks and the front-matter block are skipped.
    Line numbers are 0-based and count from the top of the file.
    """
    lines = text.splitlines()
    headings: list[Heading] = []
    fence: str | None = None

    for index in range(frontmatter_line_count(lines), len(lines)):
        line = lines[index]

        fence_match = FENCE_PATTERN.match(line)
        if fence_match:
            marker = fence_match.group(1)
            if fence is None:
                fence = marker
            elif marker[0] == fence[0] and len(marker) >= len(fence):
                fence = None
            continue
        if fence is not None:
            continue

        match = HEADING_PATTERN.match(line)
        if match:
            headings.append(
                Heading(text=match.group(2).strip(), level=len(match.group(1)), line=index)
            )

    return headings


def _convert(value: Any) -> Any:
    if isinstance(value, dict):
        return {str(k): _convert(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_convert(item) for item in value]
    return value


def parse_frontmatter(text: str) -> dict[str, Any] | None:
    """Extract the YAML front-matter map of a note.

    Returns:
        The metadata map, or None when the note has no front-matter block

    Raises:
        yaml.YAMLError: If the block exists but is not valid YAML
    """
    if frontmatter_line_count(text.splitlines()) == 0:
        return None

    post = frontmatter.loads(text)
    metadata = post.metadata or {}
    return {str(key): _convert(value) for key, value in metadata.items()}


__all__ = [
    "frontmatter_line_count",
    "parse_frontmatter",
    "parse_headings",
]
