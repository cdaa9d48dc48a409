"""Utility functions for formatting, parsing and logging."""

from .data_helpers import (
    apply_discount,
    format_currency,
    format_game_date,
    parse_bool,
    parse_game_date,
    to_price,
)
from .logging_config import get_logger, setup_logging

__all__ = [
    "apply_discount",
    "format_currency",
    "format_game_date",
    "parse_bool",
    "parse_game_date",
    "to_price",
    "get_logger",
    "setup_logging",
]
