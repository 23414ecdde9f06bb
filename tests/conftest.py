"""Shared pytest configuration."""

import shutil
from pathlib import Path

import pytest

from trending_scraper.utils.config import reset_settings
from trending_scraper.utils.logging_config import reset_logging


@pytest.fixture(scope="session", autouse=True)
def backup_env_file():
    """Backup .env file during test session to prevent pollution."""
    env_file = Path(".env")
    backup_file = Path(".env.test_backup")

    if env_file.exists():
        shutil.copy(env_file, backup_file)
        env_file.unlink()

    yield

    if backup_file.exists():
        shutil.move(backup_file, env_file)


@pytest.fixture(autouse=True)
def clean_state():
    """Give every test fresh settings and logging."""
    reset_settings()
    reset_logging()
    yield
    reset_settings()
    reset_logging()
