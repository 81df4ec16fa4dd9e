"""User-facing feed settings."""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from diary_ics.exceptions import SettingsError

logger = logging.getLogger(__name__)

DEFAULT_PORT = 19347


class HeadingLevel(str, Enum):
    """Heading level used as the entry boundary."""

    H1 = "h1"
    H2 = "h2"

    @property
    def depth(self) -> int:
        """Number of leading '#' characters for this level."""
        return 1 if self is HeadingLevel.H1 else 2


class FeedSettings(BaseModel):
    """Feed settings as edited by the user.

    Stored as JSON next to the vault. Keys are written in camelCase so the
    file stays interchangeable with the plugin's own ``data.json``; snake_case
    names are accepted when loading or updating.

    Instances are frozen: a settings change produces a new object, which is
    what the server compares against to decide whether to rebind.
    """

    model_config = {"frozen": True, "populate_by_name": True}

    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    host: str = Field(default="127.0.0.1")
    heading_level: HeadingLevel = Field(default=HeadingLevel.H2, alias="headingLevel")
    include_subheadings: bool = Field(default=True, alias="includeSubheadings")
    include_content: bool = Field(default=False, alias="includeContent")
    include_frontmatter: bool = Field(default=False, alias="includeFrontmatter")
    frontmatter_title_template: str = Field(default="", alias="frontmatterTitleTemplate")
    frontmatter_template: str = Field(default="", alias="frontmatterTemplate")
    diary_format: str = Field(default="", alias="diaryFormat")
    diary_folder: str = Field(default="", alias="diaryFolder")
    language: str = Field(default="en")

    @field_validator("host")
    @classmethod
    def host_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("host must not be empty")
        return v

    @field_validator("diary_format", "diary_folder")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        return v.strip()

    @classmethod
    def resolve_field(cls, key: str) -> str:
        """Field name for a setting key given in snake_case, kebab-case or camelCase.

        Raises:
            SettingsError: If no setting has that name
        """
        normalized = key.strip().replace("-", "_")
        for name, field in cls.model_fields.items():
            if normalized in (name, field.alias):
                return name
        raise SettingsError(f"Unknown setting: {key}")

    @property
    def heading_depth(self) -> int:
        return self.heading_level.depth

    def with_updates(self, **changes: Any) -> "FeedSettings":
        """Return a validated copy with the given fields replaced.

        Raises:
            SettingsError: If a field is unknown or a value fails validation
        """
        known = set(type(self).model_fields)
        unknown = [name for name in changes if name not in known]
        if unknown:
            raise SettingsError(f"Unknown setting(s): {', '.join(sorted(unknown))}")

        data = self.model_dump()
        data.update(changes)
        try:
            return type(self).model_validate(data)
        except ValidationError as e:
            raise SettingsError(f"Invalid settings: {e}") from e

    def requires_restart(self, other: "FeedSettings") -> bool:
        """True if switching to ``other`` needs a new listening socket."""
        return (self.host, self.port) != (other.host, other.port)

    def save(self, path: Path) -> None:
        """Save settings as JSON, creating parent directories as needed."""
        path.parent.mkdir(parents=True, exist_ok=True)
        data = self.model_dump(mode="json", by_alias=True)
        path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        logger.debug(f"Saved settings to {path}")

    @classmethod
    def load(cls, path: Path) -> "FeedSettings":
        """Load settings from JSON, returning defaults if the file is missing.

        Raises:
            SettingsError: If the file is not valid JSON or holds invalid values
        """
        if not path.exists():
            logger.debug(f"No settings file at {path}, using defaults")
            return cls()

        try:
            data = json.loads(path.read_text(encoding="utf-8") or "{}")
        except (OSError, json.JSONDecodeError) as e:
            raise SettingsError(f"Cannot read settings file {path}: {e}") from e

        if not isinstance(data, dict):
            raise SettingsError(f"Settings file {path} must contain a JSON object")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise SettingsError(f"Invalid settings in {path}: {e}") from e
