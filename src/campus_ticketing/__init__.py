"""Campus Ticketing - in-memory registry and sample data for soccer game tickets."""

__version__ = "0.1.0"
__author__ = "Campus Ticketing Team"
__description__ = "In-memory users, games and seats for a campus ticketing web app"

from .models import Game, GameType, Seat, SeatStatus, User, UserRole
from .storage import InMemoryRegistry, get_registry

__all__ = [
    "Game",
    "GameType",
    "Seat",
    "SeatStatus",
    "User",
    "UserRole",
    "InMemoryRegistry",
    "get_registry",
]
