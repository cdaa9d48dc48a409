"""Seat data models."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from ..utils.data_helpers import apply_discount
from .user import UserRole


class SeatStatus(Enum):
    """Booking status of a single seat."""

    AVAILABLE = "AVAILABLE"
    RESERVED = "RESERVED"


@dataclass
class Seat:
    """Represents one seat for one game.

    Rows and seat numbers are 1-based.
    """

    game_id: int
    row_number: int
    seat_number: int
    price: Decimal
    status: SeatStatus = SeatStatus.AVAILABLE
    id: int | None = None

    @property
    def label(self) -> str:
        """Short display label, e.g. ``R2-S07``."""
        return f"R{self.row_number}-S{self.seat_number:02d}"

    def is_available(self) -> bool:
        """Check if the seat can still be reserved."""
        return self.status is SeatStatus.AVAILABLE

    def price_for(self, role: UserRole) -> Decimal:
        """Calculate the price this seat costs for a given user role."""
        return apply_discount(self.price, role.get_discount_percentage())

    def to_dict(self) -> dict[str, Any]:
        """Convert seat to a JSON-serializable dictionary."""
        return {
            "id": self.id,
            "game_id": self.game_id,
            "row_number": self.row_number,
            "seat_number": self.seat_number,
            "label": self.label,
            "price": str(self.price),
            "status": self.status.value,
            "is_available": self.is_available(),
        }
