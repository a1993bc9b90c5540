"""
Lifecycle orchestrator - migrate, drop and reset the entity schema.

Manifesto:
    Schema setup happens at process bootstrap or explicit test setup.  Continuing
    after a schema failure is worse than stopping, so every step either succeeds
    or raises a ``FatalSchemaError``.  Nothing here retries above the waiter's own
    probe loop and nothing here terminates the process: the bootstrap caller does.

Architecture:
    ::

        migrate_database()
            provisioner.create_all()      create / verify every table
            waiter.wait_all(registry)     probe until readable
            insert_defaults()             unknown place/country/camera/lens

        drop_tables()
            provisioner.drop_all()

        reset_database(with_fixtures)
            drop_tables() → migrate_database() → [create_test_fixtures]

Examples:
    >>> from pictorium.core.database import Database
    >>> from pictorium.entity.lifecycle import EntityLifecycle
    >>> lifecycle = EntityLifecycle(Database("sqlite://"))
    >>> lifecycle.migrate_database()

Tags:
    lifecycle, migration, schema, bootstrap, fixtures

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from sqlalchemy.orm import Session

from pictorium.core.logging import LogContext, get_logger
from pictorium.core.protocols import SchemaDatabase
from pictorium.core.settings import PictoriumSettings
from pictorium.entity.fixtures import create_test_fixtures
from pictorium.entity.provisioner import TableProvisioner
from pictorium.entity.registry import ENTITIES, EntityRegistry
from pictorium.entity.seeds import DEFAULT_SEEDS
from pictorium.entity.waiter import MigrationWaiter

logger = get_logger(__name__)


class EntityLifecycle:
    """Composes provisioning, waiting and seeding into lifecycle operations.

    Args:
        db: Database handle
        registry: Tables to manage
        waiter: Migration waiter; built from settings when omitted
        seeds: Insert-if-absent default row constructors
        fixtures: Test dataset population routine
        settings: Settings used to build the default waiter
    """

    def __init__(
        self,
        db: SchemaDatabase,
        registry: EntityRegistry = ENTITIES,
        *,
        waiter: MigrationWaiter | None = None,
        seeds: Iterable[Callable[[Session], Any]] = DEFAULT_SEEDS,
        fixtures: Callable[[Session], Any] = create_test_fixtures,
        settings: PictoriumSettings | None = None,
    ) -> None:
        self.db = db
        self.registry = registry
        self.provisioner = TableProvisioner(db, registry)
        self.waiter = waiter or MigrationWaiter.from_settings(db, settings)
        self.seeds = tuple(seeds)
        self.fixtures = fixtures

    def migrate_database(self) -> None:
        """Create all tables, wait until readable, insert default rows."""
        with LogContext(operation="migrate"):
            self.provisioner.create_all()
            self.waiter.wait_all(self.registry)
            self.insert_defaults()

    def insert_defaults(self) -> None:
        with self.db.session() as session:
            for seed in self.seeds:
                seed(session)
        logger.debug("entity.defaults_inserted", seeds=len(self.seeds))

    def drop_tables(self) -> None:
        """Drop every registered table."""
        with LogContext(operation="drop"):
            self.provisioner.drop_all()

    def reset_database(self, with_fixtures: bool = False) -> None:
        """Drop and re-create all tables, optionally loading test fixtures."""
        with LogContext(operation="reset"):
            self.drop_tables()
            self.migrate_database()

            if with_fixtures:
                with self.db.session() as session:
                    self.fixtures(session)

        logger.info("entity.database_reset", fixtures=with_fixtures)


def migrate_db(db: SchemaDatabase, registry: EntityRegistry = ENTITIES, **kwargs: Any) -> None:
    """Create all tables and insert default entities as needed."""
    EntityLifecycle(db, registry, **kwargs).migrate_database()


def drop_tables(db: SchemaDatabase, registry: EntityRegistry = ENTITIES, **kwargs: Any) -> None:
    """Drop database tables for all known entities."""
    EntityLifecycle(db, registry, **kwargs).drop_tables()


def reset_db(
    db: SchemaDatabase,
    with_fixtures: bool = False,
    registry: EntityRegistry = ENTITIES,
    **kwargs: Any,
) -> None:
    """Drop and re-create tables for all known entities, with fixtures if requested."""
    EntityLifecycle(db, registry, **kwargs).reset_database(with_fixtures)
