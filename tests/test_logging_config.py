"""Tests for logging setup."""

import logging

from campus_ticketing.utils.logging_config import get_logger, setup_logging


def test_setup_logging_level_and_handlers(monkeypatch):
    """Test that setup installs one console handler at the requested level."""
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    logger = setup_logging(level="debug")
    setup_logging(level="debug")

    assert logger.name == "campus_ticketing"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_setup_logging_from_environment(monkeypatch):
    """Test that LOG_LEVEL is used when no level is given."""
    monkeypatch.setenv("LOG_LEVEL", "ERROR")

    logger = setup_logging()

    assert logger.level == logging.ERROR


def test_setup_logging_with_file(tmp_path, monkeypatch):
    """Test the optional file handler."""
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    log_file = tmp_path / "logs" / "seed.log"

    logger = setup_logging(level="INFO", log_file=str(log_file))
    get_logger("seed").info("hello from the seed")
    for handler in logger.handlers:
        handler.flush()

    assert log_file.exists()
    assert "campus_ticketing.seed - INFO - hello from the seed" in log_file.read_text()


def test_get_logger_names():
    """Test module logger naming."""
    assert get_logger("seed").name == "campus_ticketing.seed"
    assert get_logger("campus_ticketing.storage.registry").name == "campus_ticketing.storage.registry"


def test_setup_logging_numeric_and_unknown_levels(monkeypatch):
    """Test numeric levels and the INFO fallback for unknown names."""
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    assert setup_logging(level=logging.WARNING).level == logging.WARNING
    assert setup_logging(level="chatty").level == logging.INFO
