"""In-memory registry for users, games and seats."""

import logging
import threading
from datetime import datetime
from decimal import Decimal
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ..models.game import Game, GameType
from ..models.schemas import GameFields, SeatBatch, UserFields, describe_validation_error
from ..models.seat import Seat, SeatStatus
from ..models.user import User, UserRole
from ..utils.data_helpers import to_price
from .exceptions import (
    DuplicateUsernameError,
    EntityNotFoundError,
    InvalidSeatRangeError,
    SeatUnavailableError,
    UnknownGameError,
)

logger = logging.getLogger(__name__)

FieldsT = TypeVar("FieldsT", bound=BaseModel)

FIRST_ID = 1


def _validated(model: type[FieldsT], kind: str, data: dict[str, Any]) -> FieldsT:
    """Validate raw entity fields, raising a plain ValueError on failure."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid {kind} data: {describe_validation_error(e)}") from e


class InMemoryRegistry:
    """Stores users, games and seats keyed by generated integer IDs.

    Each collection has its own ID sequence starting at 1. A single lock
    guards every read-modify-write, so one registry can be shared between
    threads of a web server. Construct it explicitly and pass it around;
    ``get_instance()`` exists for code that needs one process-wide registry.
    """

    _instance: "InMemoryRegistry | None" = None
    _instance_lock = threading.Lock()

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._users: dict[int, User] = {}
        self._games: dict[int, Game] = {}
        self._seats: dict[int, Seat] = {}
        self._seat_ids_by_game: dict[int, list[int]] = {}
        self._user_ids_by_username: dict[str, int] = {}
        self._next_user_id = FIRST_ID
        self._next_game_id = FIRST_ID
        self._next_seat_id = FIRST_ID

    @classmethod
    def get_instance(cls) -> "InMemoryRegistry":
        """Return the shared registry, creating it on first use."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
                    logger.debug("Created shared in-memory registry")
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the shared registry so the next ``get_instance()`` builds a new one."""
        with cls._instance_lock:
            cls._instance = None

    def clear_all_data(self) -> None:
        """Remove every entity and restart all ID sequences at 1."""
        with self._lock:
            counts = self.counts()
            self._users.clear()
            self._games.clear()
            self._seats.clear()
            self._seat_ids_by_game.clear()
            self._user_ids_by_username.clear()
            self._next_user_id = FIRST_ID
            self._next_game_id = FIRST_ID
            self._next_seat_id = FIRST_ID
        logger.info(
            f"Cleared registry ({counts['users']} users, {counts['games']} games, "
            f"{counts['seats']} seats)"
        )

    # Users

    def add_user(self, user: User) -> int:
        """Register a user and assign it the next user ID.

        Args:
            user: Fully populated, not yet registered user

        Returns:
            The new user ID

        Raises:
            ValueError: If the user is already registered or a field is invalid
            DuplicateUsernameError: If the username is taken
        """
        if user.is_registered():
            raise ValueError(f"User '{user.username}' is already registered with ID {user.id}")
        fields = _validated(
            UserFields,
            "user",
            {
                "username": user.username,
                "email": user.email,
                "password": user.password,
                "role": user.role,
            },
        )
        for name, value in fields.model_dump().items():
            setattr(user, name, value)

        with self._lock:
            if user.username in self._user_ids_by_username:
                raise DuplicateUsernameError(user.username)
            user_id = self._next_user_id
            self._next_user_id += 1
            user.id = user_id
            self._users[user_id] = user
            self._user_ids_by_username[user.username] = user_id

        logger.debug(f"Registered user {user.username} with ID {user_id}")
        return user_id

    def create_user(
        self,
        username: str,
        email: str,
        password: str,
        role: UserRole | str = UserRole.REGULAR,
    ) -> User:
        """Build and register a user in one step.

        Returns:
            The registered user, with its ID set
        """
        if isinstance(role, str):
            role = UserRole.from_string(role)
        user = User(username=username, email=email, password=password, role=role)
        self.add_user(user)
        return user

    def get_user(self, user_id: int) -> User | None:
        """Get a user by ID, or None if there is no such user."""
        with self._lock:
            return self._users.get(user_id)

    def find_user_by_username(self, username: str) -> User | None:
        """Get a user by exact username, or None if there is no such user."""
        with self._lock:
            user_id = self._user_ids_by_username.get(username)
            return self._users.get(user_id) if user_id is not None else None

    def list_users(self) -> list[User]:
        """Get all users in ID order."""
        with self._lock:
            return [self._users[user_id] for user_id in sorted(self._users)]

    # Games

    def add_game(self, game: Game) -> int:
        """Register a game and assign it the next game ID.

        Args:
            game: Fully populated, not yet registered game

        Returns:
            The new game ID

        Raises:
            ValueError: If the game is already registered or a field is invalid
        """
        if game.is_registered():
            raise ValueError(f"Game '{game.game_name}' is already registered with ID {game.id}")
        fields = _validated(
            GameFields,
            "game",
            {
                "game_name": game.game_name,
                "game_date": game.game_date,
                "stadium_name": game.stadium_name,
                "game_type": game.game_type,
                "is_home_game": game.is_home_game,
                "total_seats": game.total_seats,
            },
        )
        for name, value in fields.model_dump().items():
            setattr(game, name, value)

        with self._lock:
            game_id = self._next_game_id
            self._next_game_id += 1
            game.id = game_id
            self._games[game_id] = game
            self._seat_ids_by_game[game_id] = []

        logger.debug(f"Registered game '{game.game_name}' with ID {game_id}")
        return game_id

    def create_game(
        self,
        game_name: str,
        game_date: datetime,
        stadium_name: str,
        game_type: GameType | str = GameType.OUTDOOR,
        is_home_game: bool = False,
        total_seats: int = 0,
    ) -> Game:
        """Build and register a game in one step.

        Returns:
            The registered game, with its ID set
        """
        if isinstance(game_type, str):
            game_type = GameType.from_string(game_type)
        game = Game(
            game_name=game_name,
            game_date=game_date,
            stadium_name=stadium_name,
            game_type=game_type,
            is_home_game=is_home_game,
            total_seats=total_seats,
        )
        self.add_game(game)
        return game

    def get_game(self, game_id: int) -> Game | None:
        """Get a game by ID, or None if there is no such game."""
        with self._lock:
            return self._games.get(game_id)

    def list_games(self) -> list[Game]:
        """Get all games ordered by date, then ID."""
        with self._lock:
            games = list(self._games.values())
        return sorted(games, key=lambda game: (game.game_date, game.id))

    # Seats

    def create_seats_for_game(
        self,
        game_id: int,
        row_count: int,
        seats_per_row: int,
        price: Decimal | float | int | str,
    ) -> list[int]:
        """Create a grid of equally priced seats for a game.

        Seats are numbered from 1 in both directions and receive IDs in
        row-major order. Nothing is stored unless the whole batch is valid.

        Args:
            game_id: ID of a registered game
            row_count: Number of rows
            seats_per_row: Number of seats in every row
            price: Price of every seat in the batch

        Returns:
            IDs of the created seats

        Raises:
            InvalidSeatRangeError: If a dimension is not positive or the price is invalid
            UnknownGameError: If the game is not registered
        """
        try:
            batch = SeatBatch(
                game_id=game_id,
                row_count=row_count,
                seats_per_row=seats_per_row,
                price=to_price(price),
            )
        except ValidationError as e:
            raise InvalidSeatRangeError(
                f"Invalid seat batch for game {game_id}: {describe_validation_error(e)}"
            ) from e
        except ValueError as e:
            raise InvalidSeatRangeError(str(e)) from e

        with self._lock:
            game = self._games.get(batch.game_id)
            if game is None:
                raise UnknownGameError(batch.game_id)

            seat_ids = []
            for row_number in range(1, batch.row_count + 1):
                for seat_number in range(1, batch.seats_per_row + 1):
                    seat_id = self._next_seat_id
                    self._next_seat_id += 1
                    self._seats[seat_id] = Seat(
                        game_id=batch.game_id,
                        row_number=row_number,
                        seat_number=seat_number,
                        price=batch.price,
                        id=seat_id,
                    )
                    seat_ids.append(seat_id)
            self._seat_ids_by_game[batch.game_id].extend(seat_ids)
            created_total = len(self._seat_ids_by_game[batch.game_id])

        logger.info(
            f"Created {len(seat_ids)} seats ({batch.row_count}x{batch.seats_per_row}) "
            f"at {batch.price} for game {batch.game_id}"
        )
        if created_total > game.total_seats:
            logger.warning(
                f"Game {batch.game_id} now has {created_total} seats but declares "
                f"a capacity of {game.total_seats}"
            )
        return seat_ids

    def get_seat(self, seat_id: int) -> Seat | None:
        """Get a seat by ID, or None if there is no such seat."""
        with self._lock:
            return self._seats.get(seat_id)

    def get_seats_for_game(self, game_id: int) -> list[Seat]:
        """Get all seats of a game in ID order. Unknown games have no seats."""
        with self._lock:
            return [self._seats[seat_id] for seat_id in self._seat_ids_by_game.get(game_id, [])]

    def get_available_seats(self, game_id: int) -> list[Seat]:
        """Get the seats of a game that can still be reserved."""
        return [seat for seat in self.get_seats_for_game(game_id) if seat.is_available()]

    def count_available_seats(self, game_id: int) -> int:
        """Count the seats of a game that can still be reserved."""
        return len(self.get_available_seats(game_id))

    def reserve_seat(self, seat_id: int) -> Seat:
        """Mark a seat as reserved.

        Raises:
            EntityNotFoundError: If the seat does not exist
            SeatUnavailableError: If the seat is already reserved
        """
        with self._lock:
            seat = self._require_seat(seat_id)
            if not seat.is_available():
                raise SeatUnavailableError(seat_id)
            seat.status = SeatStatus.RESERVED
        logger.debug(f"Reserved seat {seat_id} ({seat.label}) for game {seat.game_id}")
        return seat

    def release_seat(self, seat_id: int) -> Seat:
        """Make a reserved seat available again. Releasing a free seat is a no-op."""
        with self._lock:
            seat = self._require_seat(seat_id)
            seat.status = SeatStatus.AVAILABLE
        logger.debug(f"Released seat {seat_id} ({seat.label}) for game {seat.game_id}")
        return seat

    def quote_price(self, seat_id: int, user_id: int) -> Decimal:
        """Get the price a user pays for a seat after their role discount.

        Raises:
            EntityNotFoundError: If the seat or the user does not exist
        """
        with self._lock:
            seat = self._require_seat(seat_id)
            user = self._users.get(user_id)
            if user is None:
                raise EntityNotFoundError("user", user_id)
        return seat.price_for(user.role)

    def _require_seat(self, seat_id: int) -> Seat:
        seat = self._seats.get(seat_id)
        if seat is None:
            raise EntityNotFoundError("seat", seat_id)
        return seat

    # Reporting

    def counts(self) -> dict[str, int]:
        """Get the number of stored entities per collection."""
        with self._lock:
            return {
                "users": len(self._users),
                "games": len(self._games),
                "seats": len(self._seats),
            }

    def capacity_mismatches(self) -> dict[int, tuple[int, int]]:
        """Find games whose created seat count differs from their declared capacity.

        Returns:
            Mapping of game ID to ``(total_seats, created_seats)``
        """
        with self._lock:
            return {
                game_id: (game.total_seats, len(self._seat_ids_by_game.get(game_id, [])))
                for game_id, game in self._games.items()
                if game.total_seats != len(self._seat_ids_by_game.get(game_id, []))
            }


def get_registry() -> InMemoryRegistry:
    """Return the process-wide registry."""
    return InMemoryRegistry.get_instance()
