"""Tests for the Seat model."""

from decimal import Decimal

from campus_ticketing.models.seat import Seat, SeatStatus
from campus_ticketing.models.user import UserRole


def test_seat_creation():
    """Test Seat creation and basic functionality."""
    seat = Seat(game_id=1, row_number=2, seat_number=7, price=Decimal("20.00"))

    assert seat.status == SeatStatus.AVAILABLE
    assert seat.is_available()
    assert seat.label == "R2-S07"
    assert seat.id is None


def test_reserved_seat_is_not_available():
    """Test availability follows the seat status."""
    seat = Seat(
        game_id=1,
        row_number=1,
        seat_number=1,
        price=Decimal("20.00"),
        status=SeatStatus.RESERVED,
    )

    assert not seat.is_available()


def test_price_for_roles():
    """Test role discounts applied to a seat price."""
    seat = Seat(game_id=1, row_number=1, seat_number=1, price=Decimal("24.00"))

    assert seat.price_for(UserRole.REGULAR) == Decimal("24.00")
    assert seat.price_for(UserRole.STUDENT) == Decimal("21.60")
    assert seat.price_for(UserRole.FACULTY) == Decimal("21.60")
    assert seat.price_for(UserRole.FAMILY) == Decimal("20.40")


def test_discount_rounds_to_cents():
    """Test that discounted prices are rounded half-up to cents."""
    seat = Seat(game_id=1, row_number=1, seat_number=1, price=Decimal("25.05"))

    # 25.05 * 0.85 = 21.2925
    assert seat.price_for(UserRole.FAMILY) == Decimal("21.29")
    # 25.05 * 0.9 = 22.545
    assert seat.price_for(UserRole.STUDENT) == Decimal("22.55")


def test_to_dict():
    """Test seat serialization."""
    seat = Seat(game_id=3, row_number=1, seat_number=10, price=Decimal("30.00"), id=71)

    assert seat.to_dict() == {
        "id": 71,
        "game_id": 3,
        "row_number": 1,
        "seat_number": 10,
        "label": "R1-S10",
        "price": "30.00",
        "status": "AVAILABLE",
        "is_available": True,
    }
