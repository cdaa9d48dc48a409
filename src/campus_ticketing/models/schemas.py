"""Validated field sets for creating registry entities."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, ValidationError, field_validator

from .game import GameType
from .user import UserRole


class UserFields(BaseModel):
    """Complete set of fields needed to register a user."""

    username: str = Field(min_length=1)
    email: str = Field(min_length=3)
    password: str = Field(min_length=1)
    role: UserRole = UserRole.REGULAR

    @field_validator("username")
    @classmethod
    def username_has_no_spaces(cls, value: str) -> str:
        if value.strip() != value or " " in value:
            raise ValueError("username must not contain spaces")
        return value

    @field_validator("email")
    @classmethod
    def email_has_at_sign(cls, value: str) -> str:
        if "@" not in value:
            raise ValueError("email must contain '@'")
        return value

    @field_validator("role", mode="before")
    @classmethod
    def role_ignores_case(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value


class GameFields(BaseModel):
    """Complete set of fields needed to register a game."""

    game_name: str = Field(min_length=1)
    game_date: datetime
    stadium_name: str = Field(min_length=1)
    game_type: GameType = GameType.OUTDOOR
    is_home_game: bool = False
    total_seats: int = Field(ge=0)

    @field_validator("game_type", mode="before")
    @classmethod
    def game_type_ignores_case(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("game_date")
    @classmethod
    def game_date_is_naive(cls, value: datetime) -> datetime:
        if value.tzinfo is not None:
            raise ValueError("game_date must not carry a timezone")
        return value


class SeatBatch(BaseModel):
    """Parameters of one seat grid for a game."""

    game_id: int
    row_count: int = Field(gt=0)
    seats_per_row: int = Field(gt=0)
    price: Decimal = Field(ge=0)

    @property
    def size(self) -> int:
        return self.row_count * self.seats_per_row


def describe_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic validation error into one readable line.

    Args:
        error: Error raised by one of the field models

    Returns:
        Messages joined with ``"; "``, each prefixed by its field name
    """
    messages = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "value"
        messages.append(f"{location}: {item['msg']}")
    return "; ".join(messages)
