"""Environment-based settings."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .utils.data_helpers import parse_bool


@dataclass
class Settings:
    """Runtime settings read from the environment."""

    log_level: str = "INFO"
    log_file: str | None = None
    seed_clear: bool = True


def load_settings(env_file: str | None = None) -> Settings:
    """Load settings from environment variables and an optional ``.env`` file.

    Variables already set in the environment win over the ``.env`` file.

    Args:
        env_file: Path to a dotenv file; defaults to ``.env`` lookup

    Returns:
        Populated Settings instance
    """
    load_dotenv(env_file)

    return Settings(
        log_level=os.getenv("LOG_LEVEL") or "INFO",
        log_file=os.getenv("LOG_FILE") or None,
        seed_clear=parse_bool(os.getenv("TICKETING_SEED_CLEAR"), default=True),
    )
