"""Shared fixtures for registry tests."""

import logging
from datetime import datetime

import pytest

from campus_ticketing.models.game import Game, GameType
from campus_ticketing.storage.registry import InMemoryRegistry


@pytest.fixture
def registry():
    """Create an empty registry."""
    return InMemoryRegistry()


@pytest.fixture
def home_game(registry):
    """Register a home game with a declared capacity of 30 seats."""
    game = Game(
        game_name="WVU Tech Women Soccer vs Kokomo University Women Soccer",
        game_date=datetime(2030, 5, 4, 15, 0),
        stadium_name="YMCA Complex",
        game_type=GameType.OUTDOOR,
        is_home_game=True,
        total_seats=30,
    )
    game.add_game(registry)
    return game


@pytest.fixture(autouse=True)
def reset_shared_registry():
    """Make sure no test leaks the process-wide registry into another."""
    InMemoryRegistry.reset_instance()
    yield
    InMemoryRegistry.reset_instance()


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Remove handlers installed by setup_logging during a test."""
    yield
    logger = logging.getLogger("campus_ticketing")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
