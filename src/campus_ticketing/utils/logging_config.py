"""Logging setup for the seed command and the registry."""

import logging
import os
from pathlib import Path

LOGGER_NAME = "campus_ticketing"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: str | int | None) -> int:
    """Turn a level name, number or None into a logging constant (INFO if unknown)."""
    if isinstance(level, int):
        return level
    name = level or os.getenv("LOG_LEVEL") or "INFO"
    resolved = logging.getLevelName(name.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(
    level: str | int | None = None, log_file: str | Path | None = None
) -> logging.Logger:
    """Configure the ``campus_ticketing`` logger.

    Calling this again replaces the handlers from the previous call.

    Args:
        level: Level name or number; falls back to ``LOG_LEVEL``, then INFO
        log_file: Optional file that receives the same records as the console

    Returns:
        The package logger
    """
    numeric_level = _resolve_level(level)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    _attach(logger, logging.StreamHandler(), numeric_level)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        _attach(logger, logging.FileHandler(path), numeric_level)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the package logger, e.g. ``get_logger("seed")``."""
    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
