"""Shared CLI context with lazy-initialized dependencies."""

from pathlib import Path

from diary_ics.config import DiaryConfig
from diary_ics.ingestion.vault import Vault
from diary_ics.models.settings import FeedSettings


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        events = build_feed(ctx.vault, ctx.settings)
    """

    def __init__(
        self,
        verbose: bool = False,
        quiet: bool = False,
        vault_dir: Path | None = None,
    ):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging on the console
            quiet: If True, suppress non-error output
            vault_dir: Optional vault directory overriding DIARY_VAULT_DIR
        """
        self.verbose = verbose
        self.quiet = quiet
        self.vault_dir = vault_dir

        # Lazy-loaded dependencies
        self._config: DiaryConfig | None = None
        self._vault: Vault | None = None
        self._settings: FeedSettings | None = None

    @property
    def config(self) -> DiaryConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            config = DiaryConfig.from_env()
            if self.vault_dir is not None:
                config = config.model_copy(update={"vault_dir": self.vault_dir})
            self._config = config
        return self._config

    @property
    def vault(self) -> Vault:
        """Get the vault (lazy-loaded).

        Raises:
            VaultNotFoundError: If the vault directory does not exist
        """
        if self._vault is None:
            self._vault = Vault(self.config.vault_dir, self.config.vault_name)
        return self._vault

    @property
    def settings(self) -> FeedSettings:
        """Get feed settings from the settings file (lazy-loaded).

        Raises:
            SettingsError: If the settings file is invalid
        """
        if self._settings is None:
            self._settings = FeedSettings.load(self.config.settings_path)
        return self._settings

    def save_settings(self, settings: FeedSettings) -> None:
        """Persist settings and make them current for this context."""
        settings.save(self.config.settings_path)
        self._settings = settings


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Returns:
        The global CLI context instance

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context.

    Args:
        ctx: The CLI context instance to set
    """
    global _ctx
    _ctx = ctx
