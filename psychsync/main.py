"""Application Bootstrap (Entry Point)."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .cli import app
from .config import get_settings

LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUP_COUNT = 3

# Used when settings cannot be loaded
FALLBACK_LOG_FILE = Path.home() / ".psychsync" / "psychsync.log"
FALLBACK_LOG_LEVEL = "INFO"

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"


def _log_target() -> tuple[Path, str]:
    """Return (log file, level name), falling back if settings are broken."""
    try:
        settings = get_settings()
    except Exception as e:
        print(f"Warning: Failed to load settings for logging: {e}", file=sys.stderr)
        return FALLBACK_LOG_FILE, FALLBACK_LOG_LEVEL
    return settings.log_file, settings.log_level


def setup_logging() -> None:
    """Configure application-wide logging.

    Everything at DEBUG and above goes to a rotating log file; only
    WARNING and above reaches stderr so the TUI stays readable. The root
    level comes from PSYCHSYNC_LOG_LEVEL (default: INFO).
    """
    log_file, log_level = _log_target()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_formatter = logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    file_handler.setFormatter(file_formatter)
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    console_handler.setLevel(logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level))
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)


def main() -> None:
    """Main entry point for the PsychSync CLI."""
    setup_logging()
    app()


if __name__ == "__main__":
    main()
