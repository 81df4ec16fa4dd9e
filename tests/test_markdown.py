"""Tests for Markdown heading and front-matter parsing."""

import pytest
import yaml

from diary_ics.ingestion.markdown import (
    frontmatter_line_count,
    parse_frontmatter,
    parse_headings,
)


def test_parse_headings_levels_and_lines():
    """Test heading text, level and 0-based line numbers."""
    text = "# Title\n\nSome text\n## Morning\n### Coffee ###\n"
    headings = parse_headings(text)

    assert [(h.text, h.level, h.line) for h in headings] == [
        ("Title", 1, 0),
        ("Morning", 2, 3),
        ("Coffee", 3, 4),
    ]


def test_parse_headings_requires_space():
    """Test that tags and hashes without a space are not headings."""
    headings = parse_headings("#tag\n####### too deep\n## Real\n")
    assert [h.text for h in headings] == ["Real"]


def test_parse_headings_skips_code_fences():
    """Test that headings inside fenced code are ignored."""
    text = "## Before\n```python\n# comment\n```\n~~~\n## Hidden\n~~~\n## After\n"
    assert [h.text for h in parse_headings(text)] == ["Before", "After"]


def test_parse_headings_skips_frontmatter():
    """Test that the front-matter block is not scanned."""
    text = "---\ntitle: x\n# not a heading\n---\n## Entry\n"
    headings = parse_headings(text)

    assert [h.text for h in headings] == ["Entry"]
    assert headings[0].line == 4


def test_frontmatter_line_count():
    assert frontmatter_line_count(["---", "a: 1", "---", "body"]) == 3
    assert frontmatter_line_count(["body", "---", "a: 1", "---"]) == 0
    assert frontmatter_line_count(["---", "a: 1"]) == 0
    assert frontmatter_line_count([]) == 0


def test_parse_frontmatter():
    """Test reading the metadata map in declaration order."""
    text = "---\nmood: good\nsleep: 7\ntags:\n  - a\n  - b\n---\n## Entry\n"
    metadata = parse_frontmatter(text)

    assert metadata == {"mood": "good", "sleep": 7, "tags": ["a", "b"]}
    assert list(metadata) == ["mood", "sleep", "tags"]


def test_parse_frontmatter_absent():
    """Test notes without a front-matter block."""
    assert parse_frontmatter("## Entry\n") is None
    assert parse_frontmatter("") is None


def test_parse_frontmatter_invalid_yaml():
    """Test that malformed YAML is reported."""
    with pytest.raises(yaml.YAMLError):
        parse_frontmatter("---\nmood: [unclosed\n---\n")
