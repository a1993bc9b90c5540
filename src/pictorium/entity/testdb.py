"""Test database bootstrap.

Connects to a test database once per process, resets it and loads the
fixtures once per process, no matter how many suites call in::

    # conftest.py
    from pictorium.entity.testdb import init_test_db, provider

    @pytest.fixture(scope="session")
    def db():
        init_test_db("sqlite:///test.db")
        return provider()
"""

from __future__ import annotations

from pictorium.core.database import Database
from pictorium.core.logging import get_logger
from pictorium.core.settings import PictoriumSettings, get_settings
from pictorium.entity.gate import FixtureGate, ProviderSlot
from pictorium.entity.lifecycle import reset_db
from pictorium.entity.registry import ENTITIES, EntityRegistry

logger = get_logger(__name__)

DEFAULT_SLOT: ProviderSlot[Database] = ProviderSlot()
DEFAULT_GATE = FixtureGate()


def has_provider(slot: ProviderSlot[Database] = DEFAULT_SLOT) -> bool:
    return slot.is_registered


def provider(slot: ProviderSlot[Database] = DEFAULT_SLOT) -> Database:
    """The registered database, raising ``ProviderNotRegisteredError`` if unset."""
    return slot.provider


def init_test_fixtures(
    db: Database,
    *,
    gate: FixtureGate = DEFAULT_GATE,
    registry: EntityRegistry = ENTITIES,
    settings: PictoriumSettings | None = None,
) -> bool:
    """Reset the database and test fixtures once per gate.

    Returns ``True`` for the caller that performed the reset.
    """
    return gate.run(lambda: reset_db(db, True, registry, settings=settings))


def init_test_db(
    dsn: str,
    *,
    slot: ProviderSlot[Database] = DEFAULT_SLOT,
    gate: FixtureGate = DEFAULT_GATE,
    registry: EntityRegistry = ENTITIES,
    settings: PictoriumSettings | None = None,
) -> Database | None:
    """Connect to and completely initialize the test database, fixtures included.

    Returns the new handle, or ``None`` if a provider was already registered.
    In that case fixtures are not touched, but the call blocks until the
    registering caller has finished resetting the database.
    """
    if slot.is_registered:
        gate.wait()
        return None

    settings = settings or get_settings()
    db = Database(dsn, echo=settings.database_echo)
    if not slot.register(db):
        db.dispose()
        gate.wait()
        return None

    logger.info("entity.test_db_registered", url=db.url)
    init_test_fixtures(db, gate=gate, registry=registry, settings=settings)
    return db
