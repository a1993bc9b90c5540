"""
Shared pytest fixtures and configuration for pictorium tests.

This module provides:
- Settings with a short migration ceiling and no probe interval
- In-memory and file-backed SQLite database handles
- Recording fakes for the database handle and sleep function
"""

import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Ensure pictorium package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pictorium.core.database import Database
from pictorium.core.settings import PictoriumSettings, get_settings
from tests._support import FakeDatabase, RecordingSleep


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Mark tests that use a real database as integration tests."""
    for item in items:
        fixtures = set(getattr(item, "fixturenames", ()))
        if fixtures & {"memory_db", "sqlite_db"}:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Drop cached settings so env overrides in one test never leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> PictoriumSettings:
    return PictoriumSettings(
        database_url="sqlite://",
        migration_attempts=5,
        migration_interval=0.0,
    )


@pytest.fixture
def memory_db() -> Generator[Database, None, None]:
    """Private in-memory SQLite database."""
    db = Database("sqlite://")
    yield db
    db.dispose()


@pytest.fixture
def sqlite_db(tmp_path: Path) -> Generator[Database, None, None]:
    """File-backed SQLite database in a temp directory."""
    db = Database(f"sqlite:///{tmp_path / 'library.db'}")
    yield db
    db.dispose()


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def sleep() -> RecordingSleep:
    return RecordingSleep()
