"""
Tests for logging configuration module.

Tests cover:
- Log directory and file creation
- Log level configuration via argument and environment variable
- Per-module logger naming
- Rotation settings
"""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from tasklist.logging_config import (
    setup_logging,
    get_logger,
    resolve_log_level,
    MAX_BYTES,
    BACKUP_COUNT,
)


@pytest.fixture
def mock_log_dir(tmp_path, monkeypatch):
    """Point LOG_DIR and LOG_FILE at a temporary directory."""
    log_dir = tmp_path / ".tasklist" / "logs"
    log_file = log_dir / "tasklist.log"

    monkeypatch.setattr("tasklist.logging_config.LOG_DIR", log_dir)
    monkeypatch.setattr("tasklist.logging_config.LOG_FILE", log_file)

    return log_dir, log_file


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging handlers before and after each test."""
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level

    yield

    for handler in root_logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)


class TestLogSetup:
    """Tests for setup_logging()."""

    def test_creates_directory_and_file(self, mock_log_dir):
        """Test that the log directory and file are created."""
        log_dir, log_file = mock_log_dir
        assert not log_dir.exists()

        setup_logging()

        assert log_dir.is_dir()
        assert log_file.exists()

    def test_installs_single_rotating_handler(self, mock_log_dir):
        """Test that repeated setup does not duplicate handlers."""
        setup_logging()
        setup_logging()

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], RotatingFileHandler)
        assert handlers[0].maxBytes == MAX_BYTES
        assert handlers[0].backupCount == BACKUP_COUNT

    def test_default_level_is_info(self, mock_log_dir):
        setup_logging()

        assert logging.getLogger().level == logging.INFO

    def test_level_argument(self, mock_log_dir):
        setup_logging(log_level="debug")

        assert logging.getLogger().level == logging.DEBUG

    def test_level_from_environment(self, mock_log_dir, monkeypatch):
        monkeypatch.setenv("TASKLIST_LOG_LEVEL", "WARNING")

        setup_logging()

        assert logging.getLogger().level == logging.WARNING

    def test_invalid_level_falls_back_to_info(self, mock_log_dir):
        setup_logging(log_level="LOUD")

        assert logging.getLogger().level == logging.INFO

    def test_messages_reach_file(self, mock_log_dir):
        """Test that module loggers write to the log file."""
        _, log_file = mock_log_dir
        setup_logging()

        get_logger("tasklist.test").info("hello from the test")
        for handler in logging.getLogger().handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "tasklist.test - INFO - hello from the test" in content


class TestResolveLogLevel:
    """Tests for resolve_log_level()."""

    def test_argument_wins_over_environment(self, monkeypatch):
        monkeypatch.setenv("TASKLIST_LOG_LEVEL", "ERROR")

        assert resolve_log_level("debug") == ("DEBUG", logging.DEBUG)

    def test_environment_used_without_argument(self, monkeypatch):
        monkeypatch.setenv("TASKLIST_LOG_LEVEL", "error")

        assert resolve_log_level() == ("ERROR", logging.ERROR)

    def test_default_is_info(self):
        assert resolve_log_level() == ("INFO", logging.INFO)

    def test_unknown_name_is_info(self):
        assert resolve_log_level("chatty") == ("INFO", logging.INFO)


class TestGetLogger:
    """Tests for get_logger()."""

    def test_logger_name(self):
        assert get_logger("tasklist.ui.app").name == "tasklist.ui.app"
