"""CLI package for the diary feed."""

import logging
import sys

from diary_ics.config import DiaryConfig

FILE_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_LOG_FORMAT = "%(levelname)s: %(message)s"

# Third-party loggers that are chatty at DEBUG/INFO
NOISY_LOGGERS = ("werkzeug", "watchdog")


def _console_level(verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(
    verbose: bool = False, quiet: bool = False, config: DiaryConfig | None = None
) -> None:
    """Log everything to a file and warnings (or more, with ``--verbose``) to stderr.

    Args:
        verbose: Also show info messages (server start/stop, requests)
        quiet: Only show errors
        config: Optional DiaryConfig for log directory/filename settings
    """
    if config is None:
        config = DiaryConfig.from_env()

    config.log_dir.mkdir(parents=True, exist_ok=True)
    log_path = config.log_dir / config.log_filename

    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(CONSOLE_LOG_FORMAT))
    console_handler.setLevel(_console_level(verbose, quiet))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    # Request lines from werkzeug only reach the console with --verbose
    third_party_level = logging.INFO if verbose else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(third_party_level)

    logging.getLogger(__name__).debug(f"Logging to {log_path}")


def main() -> None:
    """Main entry point for the CLI."""
    from cli.parser import app

    app()


__all__ = ["main", "setup_logging"]
