"""Data models for users, games and seats."""

from .game import Game, GameType
from .seat import Seat, SeatStatus
from .user import User, UserRole

__all__ = ["Game", "GameType", "Seat", "SeatStatus", "User", "UserRole"]
