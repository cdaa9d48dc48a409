"""Errors raised by the in-memory registry."""


class RegistryError(Exception):
    """Base class for registry errors."""


class DuplicateUsernameError(RegistryError, ValueError):
    """A user with the same username is already registered."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Username '{username}' is already registered")


class UnknownGameError(RegistryError, KeyError):
    """Seats were requested for a game that is not in the registry."""

    def __init__(self, game_id: int):
        self.game_id = game_id
        super().__init__(f"No game with ID {game_id}")

    def __str__(self) -> str:
        return self.args[0]


class InvalidSeatRangeError(RegistryError, ValueError):
    """Seat grid dimensions or price are out of range."""


class EntityNotFoundError(RegistryError, KeyError):
    """A user or seat ID does not exist in the registry."""

    def __init__(self, kind: str, entity_id: int):
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"No {kind} with ID {entity_id}")

    def __str__(self) -> str:
        return self.args[0]


class SeatUnavailableError(RegistryError):
    """The seat is already reserved."""

    def __init__(self, seat_id: int):
        self.seat_id = seat_id
        super().__init__(f"Seat {seat_id} is already reserved")
