"""Tests for feed settings."""

import json

import pytest

from diary_ics.exceptions import SettingsError
from diary_ics.models.settings import DEFAULT_PORT, FeedSettings, HeadingLevel


def test_defaults():
    """Test FeedSettings default values."""
    settings = FeedSettings()
    assert settings.port == DEFAULT_PORT == 19347
    assert settings.host == "127.0.0.1"
    assert settings.heading_level is HeadingLevel.H2
    assert settings.heading_depth == 2
    assert settings.include_subheadings is True
    assert settings.include_frontmatter is False
    assert settings.include_content is False
    assert settings.frontmatter_title_template == ""
    assert settings.frontmatter_template == ""
    assert settings.diary_format == ""
    assert settings.diary_folder == ""
    assert settings.language == "en"


def test_camel_case_and_snake_case_keys():
    """Test that both key styles populate fields."""
    camel = FeedSettings.model_validate({"headingLevel": "h1", "diaryFolder": "Diary"})
    snake = FeedSettings.model_validate({"heading_level": "h1", "diary_folder": "Diary"})
    assert camel == snake
    assert camel.heading_depth == 1


@pytest.mark.parametrize("port", [0, 65536, -1])
def test_invalid_port(port):
    with pytest.raises(ValueError):
        FeedSettings(port=port)


def test_blank_host_rejected():
    with pytest.raises(ValueError):
        FeedSettings(host="  ")


def test_format_and_folder_are_stripped():
    settings = FeedSettings(diaryFormat=" YYYY-MM-DD ", diaryFolder=" Diary ")
    assert settings.diary_format == "YYYY-MM-DD"
    assert settings.diary_folder == "Diary"


@pytest.mark.parametrize(
    "key,expected",
    [
        ("port", "port"),
        ("heading_level", "heading_level"),
        ("heading-level", "heading_level"),
        ("headingLevel", "heading_level"),
        ("frontmatterTitleTemplate", "frontmatter_title_template"),
    ],
)
def test_resolve_field(key, expected):
    assert FeedSettings.resolve_field(key) == expected


def test_resolve_unknown_field():
    with pytest.raises(SettingsError):
        FeedSettings.resolve_field("colour")


def test_with_updates():
    """Test that updates are validated and coerced."""
    settings = FeedSettings().with_updates(port="8080", include_frontmatter="true")
    assert settings.port == 8080
    assert settings.include_frontmatter is True


def test_with_updates_invalid():
    with pytest.raises(SettingsError):
        FeedSettings().with_updates(port="not-a-port")
    with pytest.raises(SettingsError):
        FeedSettings().with_updates(heading_level="h3")
    with pytest.raises(SettingsError):
        FeedSettings().with_updates(colour="red")


def test_settings_are_frozen():
    settings = FeedSettings()
    with pytest.raises(ValueError):
        settings.port = 1


def test_requires_restart():
    """Test that only host and port changes need a new socket."""
    settings = FeedSettings()
    assert settings.requires_restart(settings.with_updates(port=8080)) is True
    assert settings.requires_restart(settings.with_updates(host="0.0.0.0")) is True
    assert settings.requires_restart(settings.with_updates(heading_level="h1")) is False


def test_save_and_load(tmp_path):
    """Test the JSON file uses camelCase keys and loads back."""
    path = tmp_path / "plugin" / "data.json"
    settings = FeedSettings(port=8080, headingLevel="h1", frontmatterTemplate="{{mood}}")
    settings.save(path)

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["port"] == 8080
    assert data["headingLevel"] == "h1"
    assert data["frontmatterTemplate"] == "{{mood}}"
    assert FeedSettings.load(path) == settings


def test_load_missing_file(tmp_path):
    assert FeedSettings.load(tmp_path / "missing.json") == FeedSettings()


def test_load_partial_file(tmp_path):
    """Test that missing keys take their defaults."""
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"port": 8000}))
    settings = FeedSettings.load(path)
    assert settings.port == 8000
    assert settings.heading_level is HeadingLevel.H2


@pytest.mark.parametrize("content", ["{not json", "[1, 2]", '{"port": "abc"}'])
def test_load_invalid_file(tmp_path, content):
    path = tmp_path / "data.json"
    path.write_text(content)
    with pytest.raises(SettingsError):
        FeedSettings.load(path)
