"""In-memory entity storage."""

from .exceptions import (
    DuplicateUsernameError,
    EntityNotFoundError,
    InvalidSeatRangeError,
    RegistryError,
    SeatUnavailableError,
    UnknownGameError,
)
from .registry import InMemoryRegistry, get_registry

__all__ = [
    "InMemoryRegistry",
    "get_registry",
    "RegistryError",
    "DuplicateUsernameError",
    "EntityNotFoundError",
    "InvalidSeatRangeError",
    "SeatUnavailableError",
    "UnknownGameError",
]
