"""Tests for front-matter templates and rendering."""

from datetime import date

from diary_ics.processing.frontmatter_renderer import (
    frontmatter_fields,
    render_body,
    render_frontmatter,
    render_title,
)
from diary_ics.processing.template_utils import (
    has_placeholders,
    stringify,
    substitute_placeholders,
)


class TestTemplateUtils:
    """Tests for placeholder substitution."""

    def test_has_placeholders(self):
        assert has_placeholders("Mood: {{mood}}") is True
        assert has_placeholders("Mood: {mood}") is False
        assert has_placeholders("") is False

    def test_substitute_known_and_unknown(self):
        """Test that unknown placeholders stay literal."""
        result = substitute_placeholders("{{a}} and {{b}}", {"a": "1"})
        assert result == "1 and {{b}}"

    def test_substitute_repeated(self):
        assert substitute_placeholders("{{a}}-{{a}}", {"a": "x"}) == "x-x"

    def test_substitute_single_pass(self):
        """Test that substituted values are not expanded again."""
        assert substitute_placeholders("{{a}}", {"a": "{{b}}", "b": "no"}) == "{{b}}"

    def test_stringify(self):
        assert stringify(True) == "true"
        assert stringify(False) == "false"
        assert stringify(3) == "3"
        assert stringify(3.0) == "3"
        assert stringify(2.5) == "2.5"
        assert stringify(date(2024, 1, 2)) == "2024-01-02"
        assert stringify(["a", "b", 1]) == "a,b,1"
        assert stringify({"k": "v"}) == '{"k":"v"}'
        assert stringify("plain") == "plain"


class TestFrontmatterFields:
    """Tests for the displayable field map."""

    def test_drops_reserved_and_null(self):
        fields = frontmatter_fields({"mood": "good", "position": {"start": 0}, "empty": None})
        assert fields == {"mood": "good"}

    def test_preserves_order(self):
        fields = frontmatter_fields({"b": 1, "a": 2})
        assert list(fields) == ["b", "a"]


class TestRendering:
    """Tests for title and body rendering."""

    def test_default_body_lists_fields(self):
        assert render_body({"mood": "good", "sleep": "7"}, "") == "mood: good\nsleep: 7\n"

    def test_body_template_with_placeholders(self):
        assert render_body({"mood": "good"}, "Mood: {{mood}}") == "Mood: good"

    def test_body_template_without_placeholders_is_verbatim(self):
        assert render_body({"mood": "good"}, "Static text") == "Static text"

    def test_default_title(self):
        assert render_title({}, "", "2024-01-01") == "2024-01-01[frontmatter]"

    def test_title_template_with_filename(self):
        title = render_title({"mood": "good"}, "{{filename}} ({{mood}})", "2024-01-01")
        assert title == "2024-01-01 (good)"

    def test_filename_placeholder_wins_over_field(self):
        title = render_title({"filename": "field"}, "{{filename}}", "2024-01-01")
        assert title == "2024-01-01"

    def test_render_frontmatter(self):
        rendered = render_frontmatter({"mood": "good"}, "", "", "2024-01-01")
        assert rendered is not None
        assert rendered.title == "2024-01-01[frontmatter]"
        assert rendered.body == "mood: good\n"

    def test_render_frontmatter_empty_body(self):
        """Test that an empty front matter produces no event."""
        assert render_frontmatter({}, "", "", "2024-01-01") is None
        assert render_frontmatter({"position": 1}, "", "", "2024-01-01") is None


def test_weather_template_example():
    """Test substitution with a missing field left literal."""
    rendered = render_frontmatter(
        {"weather": "sunny", "mood": "ok"},
        "",
        "W:{{weather}} M:{{mood}} X:{{missing}}",
        "2024-01-01",
    )
    assert rendered.body == "W:sunny M:ok X:{{missing}}"


def test_reserved_and_null_fields_example():
    rendered = render_frontmatter(
        {"position": {"start": 0, "end": 3}, "mood": None, "weather": "sunny"},
        "",
        "",
        "2024-01-01",
    )
    assert rendered.body == "weather: sunny\n"
