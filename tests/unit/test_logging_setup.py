"""Unit tests for the logging bootstrap."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Iterator

import pytest

from psychsync import main as entry
from psychsync.config import Settings


@pytest.fixture
def root_logger() -> Iterator[logging.Logger]:
    """Root logger restored to its original handlers and level afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def _added_handlers(root: logging.Logger, before: list[logging.Handler]):
    return [h for h in root.handlers if h not in before]


def test_setup_logging_uses_settings(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, root_logger: logging.Logger
) -> None:
    log_file = tmp_path / "logs" / "psychsync.log"
    settings = Settings(log_file=log_file, log_level="DEBUG")
    monkeypatch.setattr(entry, "get_settings", lambda: settings)
    before = list(root_logger.handlers)

    entry.setup_logging()

    added = _added_handlers(root_logger, before)
    file_handlers = [h for h in added if isinstance(h, RotatingFileHandler)]
    console_handlers = [h for h in added if not isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert len(console_handlers) == 1
    assert file_handlers[0].level == logging.DEBUG
    assert console_handlers[0].level == logging.WARNING
    assert Path(file_handlers[0].baseFilename) == log_file
    assert log_file.parent.is_dir()
    assert root_logger.level == logging.DEBUG


def test_setup_logging_falls_back_when_settings_fail(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    root_logger: logging.Logger,
    capsys: pytest.CaptureFixture[str],
) -> None:
    def broken_settings() -> Settings:
        raise ValueError("bad PSYCHSYNC_LOG_LEVEL")

    fallback = tmp_path / "fallback" / "psychsync.log"
    monkeypatch.setattr(entry, "get_settings", broken_settings)
    monkeypatch.setattr(entry, "FALLBACK_LOG_FILE", fallback)
    before = list(root_logger.handlers)

    entry.setup_logging()

    added = _added_handlers(root_logger, before)
    file_handler = next(h for h in added if isinstance(h, RotatingFileHandler))
    assert Path(file_handler.baseFilename) == fallback
    assert root_logger.level == logging.INFO
    assert "Failed to load settings for logging" in capsys.readouterr().err
