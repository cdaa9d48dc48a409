"""Sample data loaded into the registry at application startup."""

import argparse
import logging
import sys
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from .config import load_settings
from .models.game import Game, GameType
from .models.user import User, UserRole
from .storage.registry import InMemoryRegistry, get_registry
from .utils.data_helpers import format_currency, format_game_date
from .utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

SAMPLE_USERS = [
    ("sf00053", "sf00053@mix.wvu.edu", "Injured25#", UserRole.STUDENT),
    ("mal00036", "mal00036@mix.wvu.edu", "CSMajorGrad27%", UserRole.STUDENT),
    ("faculty", "faculty@mail.wvu.edu", "password", UserRole.FACULTY),
    ("family", "family@gmail.com", "password", UserRole.FAMILY),
    ("regular", "regular@gmail.com", "password", UserRole.REGULAR),
]


@dataclass
class SampleGame:
    """A sample game together with the seat grid created for it."""

    game_name: str
    days_ahead: int
    stadium_name: str
    is_home_game: bool
    total_seats: int
    rows: int
    seats_per_row: int
    price: float
    game_type: GameType = GameType.OUTDOOR


# Declared capacities are larger than the seat grids created for them.
SAMPLE_GAMES = [
    SampleGame(
        "WVU Tech Women Soccer vs Kokomo University Women Soccer",
        7, "YMCA Complex", True, 100, 3, 10, 20.0,
    ),
    SampleGame(
        "WVU Tech Women Soccer vs Bluefield State Women Soccer",
        14, "YMCA Complex", True, 100, 3, 10, 25.0,
    ),
    SampleGame(
        "IU East Women Soccer vs WVU Tech Women Soccer",
        21, "IU East Stadium", False, 80, 2, 10, 30.0,
    ),
    SampleGame(
        "Shaw University Women Soccer vs WVU Tech Women Soccer",
        28, "Shaw University Stadium", False, 50, 2, 5, 35.0,
    ),
]


@dataclass
class SeedSummary:
    """IDs of everything the seed routine registered."""

    user_ids: list[int] = field(default_factory=list)
    game_ids: list[int] = field(default_factory=list)
    seat_ids_by_game: dict[int, list[int]] = field(default_factory=dict)

    @property
    def seat_count(self) -> int:
        return sum(len(seat_ids) for seat_ids in self.seat_ids_by_game.values())


def load_sample_data(
    registry: InMemoryRegistry,
    now: datetime | None = None,
    clear: bool = True,
) -> SeedSummary:
    """Populate a registry with the sample users, games and seats.

    Args:
        registry: Registry to fill
        now: Reference time for game dates (defaults to the current time)
        clear: Remove existing data first so IDs start at 1

    Returns:
        Summary of the registered IDs
    """
    now = now or datetime.now()
    summary = SeedSummary()

    if clear:
        registry.clear_all_data()

    for username, email, password, role in SAMPLE_USERS:
        user = User()
        user.username = username
        user.email = email
        user.password = password
        user.role = role
        summary.user_ids.append(user.register(registry))

    for sample in SAMPLE_GAMES:
        game = Game()
        game.game_name = sample.game_name
        game.game_date = now + timedelta(days=sample.days_ahead)
        game.stadium_name = sample.stadium_name
        game.game_type = sample.game_type
        game.is_home_game = sample.is_home_game
        game.total_seats = sample.total_seats
        game_id = game.add_game(registry)
        summary.game_ids.append(game_id)

        summary.seat_ids_by_game[game_id] = registry.create_seats_for_game(
            game_id, sample.rows, sample.seats_per_row, sample.price
        )

    for game_id, (declared, created) in registry.capacity_mismatches().items():
        logger.warning(
            f"Sample game {game_id} declares {declared} seats but has {created}"
        )

    logger.info(
        f"Loaded sample data: {len(summary.user_ids)} users, "
        f"{len(summary.game_ids)} games, {summary.seat_count} seats"
    )
    return summary


def format_summary(registry: InMemoryRegistry) -> str:
    """Render the registry's games as a plain-text table."""
    lines = [f"{'ID':>3}  {'Date':<16}  {'Seats':>9}  {'Price':>8}  Game"]
    for game in registry.list_games():
        seats = registry.get_seats_for_game(game.id)
        available = registry.count_available_seats(game.id)
        price = format_currency(min(seat.price for seat in seats)) if seats else "-"
        lines.append(
            f"{game.id:>3}  {format_game_date(game.game_date):<16}  "
            f"{available:>4}/{len(seats):<4}  {price:>8}  {game.game_name}"
        )
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Seed the shared registry and print what was loaded."""
    try:
        settings = load_settings()
    except ValueError as e:
        setup_logging()
        logger.error(f"Invalid configuration: {e}")
        return 1

    parser = argparse.ArgumentParser(
        description="Load sample users, games and seats into the in-memory registry",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=settings.log_level,
        help="Logging level (default: LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=settings.log_file,
        help="Optional file to write logs to",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Keep existing registry data instead of clearing it first",
    )
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    registry = get_registry()
    clear = settings.seed_clear and not args.no_clear
    try:
        summary = load_sample_data(registry, clear=clear)
    except ValueError as e:
        logger.error(f"Failed to load sample data: {e}")
        return 1

    print(f"Registered {len(summary.user_ids)} users:")
    for user in registry.list_users():
        print(f"  {user.id:>3}  {user}")
    print()
    print(format_summary(registry))
    return 0


if __name__ == "__main__":
    sys.exit(main())
