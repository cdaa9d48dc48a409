"""Game and fixture data models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any

from ..utils.data_helpers import format_game_date

if TYPE_CHECKING:
    from ..storage.registry import InMemoryRegistry


class GameType(Enum):
    """Venue types for a soccer game."""

    OUTDOOR = "OUTDOOR"
    INDOOR = "INDOOR"

    @classmethod
    def from_string(cls, game_type_str: str | None) -> "GameType":
        """Create GameType from string, defaulting to OUTDOOR if unknown."""
        if not game_type_str:
            return cls.OUTDOOR
        try:
            return cls(game_type_str)
        except ValueError:
            for game_type in cls:
                if game_type.value.lower() == game_type_str.strip().lower():
                    return game_type
            return cls.OUTDOOR


@dataclass
class Game:
    """Represents a scheduled soccer game.

    ``game_date`` is timezone-naive local time. ``total_seats`` is the
    declared capacity; the seats actually sold are created separately
    through the registry.
    """

    game_name: str = ""
    game_date: datetime = field(default_factory=datetime.now)
    stadium_name: str = ""
    game_type: GameType = GameType.OUTDOOR
    is_home_game: bool = False
    total_seats: int = 0
    id: int | None = None

    def is_registered(self) -> bool:
        """Check if the registry has assigned an ID to this game."""
        return self.id is not None

    def add_game(self, registry: "InMemoryRegistry") -> int:
        """Add this game to the registry.

        Args:
            registry: Registry that stores the game

        Returns:
            The ID assigned to the game, used when creating its seats
        """
        return registry.add_game(self)

    def is_upcoming(self, now: datetime | None = None) -> bool:
        """Check if the game is in the future."""
        return self.game_date > (now or datetime.now())

    def to_dict(self) -> dict[str, Any]:
        """Convert game to a JSON-serializable dictionary."""
        return {
            "id": self.id,
            "game_name": self.game_name,
            "game_date": format_game_date(self.game_date),
            "stadium_name": self.stadium_name,
            "game_type": self.game_type.value,
            "is_home_game": self.is_home_game,
            "total_seats": self.total_seats,
        }

    def __str__(self) -> str:
        home_away = "home" if self.is_home_game else "away"
        return (
            f"{format_game_date(self.game_date)} {self.game_name} "
            f"@ {self.stadium_name} ({home_away}, {self.game_type.value})"
        )
