"""Tests for environment-based settings."""

import os

import pytest

from campus_ticketing.config import Settings, load_settings


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run against a private copy of the environment in an empty directory."""
    environ = {
        key: value
        for key, value in os.environ.items()
        if key not in ("LOG_LEVEL", "LOG_FILE", "TICKETING_SEED_CLEAR")
    }
    monkeypatch.setattr(os, "environ", environ)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_defaults(clean_env):
    """Test settings without any environment variables."""
    settings = load_settings(str(clean_env / "missing.env"))

    assert settings == Settings(log_level="INFO", log_file=None, seed_clear=True)


def test_environment_values(clean_env):
    """Test settings taken from the process environment."""
    os.environ["LOG_LEVEL"] = "DEBUG"
    os.environ["LOG_FILE"] = "logs/seed.log"
    os.environ["TICKETING_SEED_CLEAR"] = "false"

    settings = load_settings(str(clean_env / "missing.env"))

    assert settings.log_level == "DEBUG"
    assert settings.log_file == "logs/seed.log"
    assert settings.seed_clear is False


def test_dotenv_file(clean_env):
    """Test settings loaded from a .env file."""
    env_file = clean_env / ".env"
    env_file.write_text("LOG_LEVEL=WARNING\nTICKETING_SEED_CLEAR=no\n")

    settings = load_settings(str(env_file))

    assert settings.log_level == "WARNING"
    assert settings.seed_clear is False


def test_environment_wins_over_dotenv(clean_env):
    """Test that variables already set are not overridden by the .env file."""
    os.environ["LOG_LEVEL"] = "ERROR"
    env_file = clean_env / ".env"
    env_file.write_text("LOG_LEVEL=WARNING\n")

    assert load_settings(str(env_file)).log_level == "ERROR"
