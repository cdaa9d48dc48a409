"""Helper functions for formatting and parsing ticketing data."""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENTS = Decimal("0.01")

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off", ""}


def to_price(value: Decimal | float | int | str) -> Decimal:
    """Convert a monetary value to a Decimal rounded to cents.

    Floats go through ``str`` first so that ``20.1`` becomes ``20.10`` and not
    its binary approximation.

    Args:
        value: Amount as Decimal, number or numeric string

    Returns:
        Decimal quantized to two places

    Raises:
        ValueError: If the value is not a finite number
    """
    if isinstance(value, float):
        value = str(value)
    try:
        price = Decimal(value)
        if not price.is_finite():
            raise ValueError(f"Invalid price '{value}'")
        return price.quantize(CENTS, rounding=ROUND_HALF_UP)
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"Invalid price '{value}'") from e


def apply_discount(price: Decimal, percentage: int | float) -> Decimal:
    """Apply a percentage discount to a price.

    Args:
        price: Full price
        percentage: Discount in percent (0-100)

    Returns:
        Discounted price rounded half-up to cents
    """
    if percentage < 0 or percentage > 100:
        raise ValueError(f"Discount percentage must be between 0 and 100, got {percentage}")
    factor = (Decimal(100) - Decimal(str(percentage))) / Decimal(100)
    return (to_price(price) * factor).quantize(CENTS, rounding=ROUND_HALF_UP)


def format_currency(amount: Decimal | float, currency: str = "$") -> str:
    """Format a monetary amount for display.

    Args:
        amount: Monetary amount
        currency: Currency symbol

    Returns:
        Formatted currency string
    """
    return f"{currency}{to_price(amount):,.2f}"


def format_game_date(value: datetime) -> str:
    """Format a game date as ``YYYY-MM-DD HH:MM``."""
    return value.strftime("%Y-%m-%d %H:%M")


def parse_game_date(date_string: str) -> datetime | None:
    """Parse a game date string to a naive datetime object.

    Args:
        date_string: Date string in ISO or one of the display formats

    Returns:
        Parsed datetime object or None if parsing fails
    """
    if not date_string:
        return None

    date_string = date_string.strip()
    try:
        return datetime.fromisoformat(date_string)
    except ValueError:
        pass

    date_formats = [
        "%Y-%m-%d %H:%M",
        "%Y-%m-%d",
        "%m/%d/%Y %H:%M",
        "%m/%d/%Y",
    ]

    for fmt in date_formats:
        try:
            return datetime.strptime(date_string, fmt)
        except ValueError:
            continue

    return None


def parse_bool(value: str | bool | None, default: bool = False) -> bool:
    """Interpret an environment-style string as a boolean.

    Args:
        value: Raw value such as ``"true"``, ``"0"`` or ``None``
        default: Result when the value is None

    Returns:
        Parsed boolean

    Raises:
        ValueError: If the string is not a recognised boolean
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in _TRUE_STRINGS:
        return True
    if normalized in _FALSE_STRINGS:
        return False
    raise ValueError(f"Cannot interpret '{value}' as a boolean")
