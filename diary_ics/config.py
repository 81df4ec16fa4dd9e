"""Configuration for the diary feed."""

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

# Settings file location inside the vault, mirroring the plugin data layout
DEFAULT_SETTINGS_RELPATH = Path(".obsidian/plugins/diary-ics/data.json")


class DiaryConfig(BaseModel):
    """Process-level configuration with Pydantic validation.

    User-editable feed options live in ``FeedSettings``; this model only
    locates the vault, the settings file and the logs.
    """

    # Vault
    vault_dir: Path = Field(default=Path("."))
    vault_name: str | None = None

    # Settings
    settings_file: Path | None = None

    # Logging
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="diary_ics.log")

    # Server
    poll_interval: float = Field(default=1.0, gt=0)

    @property
    def settings_path(self) -> Path:
        """Path of the JSON settings file."""
        if self.settings_file is not None:
            return self.settings_file
        return self.vault_dir / DEFAULT_SETTINGS_RELPATH

    @classmethod
    def from_env(cls) -> "DiaryConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv(find_dotenv(usecwd=True))

        config_dict = {}

        # Vault
        if "DIARY_VAULT_DIR" in os.environ:
            config_dict["vault_dir"] = Path(os.environ["DIARY_VAULT_DIR"]).expanduser()
        if "DIARY_VAULT_NAME" in os.environ:
            config_dict["vault_name"] = os.environ["DIARY_VAULT_NAME"]

        # Settings
        if "DIARY_SETTINGS_FILE" in os.environ:
            config_dict["settings_file"] = Path(
                os.environ["DIARY_SETTINGS_FILE"]
            ).expanduser()

        # Logging
        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]

        # Server
        if "DIARY_POLL_INTERVAL" in os.environ:
            try:
                interval = float(os.environ["DIARY_POLL_INTERVAL"])
                if interval > 0:
                    config_dict["poll_interval"] = interval
            except ValueError:
                pass  # Keep default if invalid

        return cls(**config_dict)
