"""Photo library entities and their schema lifecycle.

Public API::

    from pictorium.entity import ENTITIES, EntityLifecycle, migrate_db, reset_db
"""

from pictorium.entity.fixtures import create_test_fixtures
from pictorium.entity.gate import FixtureGate, ProviderSlot
from pictorium.entity.lifecycle import EntityLifecycle, drop_tables, migrate_db, reset_db
from pictorium.entity.provisioner import TableProvisioner
from pictorium.entity.registry import ENTITIES, EntityRegistry, TableDescriptor
from pictorium.entity.seeds import (
    DEFAULT_SEEDS,
    create_unknown_camera,
    create_unknown_country,
    create_unknown_lens,
    create_unknown_place,
)
from pictorium.entity.waiter import MigrationWaiter, WaitState

__all__ = [
    "ENTITIES",
    "EntityRegistry",
    "TableDescriptor",
    "TableProvisioner",
    "MigrationWaiter",
    "WaitState",
    "EntityLifecycle",
    "migrate_db",
    "drop_tables",
    "reset_db",
    "DEFAULT_SEEDS",
    "create_unknown_place",
    "create_unknown_country",
    "create_unknown_camera",
    "create_unknown_lens",
    "create_test_fixtures",
    "FixtureGate",
    "ProviderSlot",
]
