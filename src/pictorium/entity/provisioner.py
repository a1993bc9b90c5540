"""Table provisioner -- create or drop every registered table.

Schema setup runs at controlled startup or test-init time, so any single
failure is fatal: the provisioner raises a
:class:`~pictorium.core.errors.FatalSchemaError` subclass and stops.  Tables
processed before the failure are left as they are.
"""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from pictorium.core.errors import SchemaCreateError, SchemaDropError
from pictorium.core.logging import get_logger
from pictorium.core.protocols import SchemaDatabase
from pictorium.entity.registry import ENTITIES, EntityRegistry

logger = get_logger(__name__)


class TableProvisioner:
    """Issues create/verify/drop operations for each registered table."""

    def __init__(self, db: SchemaDatabase, registry: EntityRegistry = ENTITIES) -> None:
        self.db = db
        self.registry = registry

    def create_all(self) -> list[str]:
        """Create missing tables and verify existing ones.

        Returns the names of tables that did not exist before.

        Raises:
            SchemaCreateError: On the first table that cannot be created.
        """
        created = []
        for descriptor in self.registry.descriptors():
            try:
                is_new = self.db.create_table(descriptor)
            except SQLAlchemyError as exc:
                logger.error("entity.create_failed", table=descriptor.name, error=str(exc))
                raise SchemaCreateError(descriptor.name, cause=exc) from exc

            if is_new:
                created.append(descriptor.name)
                logger.debug("entity.table_created", table=descriptor.name)
            else:
                logger.debug("entity.table_verified", table=descriptor.name)

        logger.info("entity.tables_created", total=len(self.registry), created=len(created))
        return created

    def drop_all(self) -> None:
        """Drop every registered table that exists.

        Raises:
            SchemaDropError: On the first table that cannot be dropped.
        """
        for descriptor in self.registry.descriptors():
            try:
                self.db.drop_table(descriptor)
            except SQLAlchemyError as exc:
                logger.error("entity.drop_failed", table=descriptor.name, error=str(exc))
                raise SchemaDropError(descriptor.name, cause=exc) from exc
            logger.debug("entity.table_dropped", table=descriptor.name)

        logger.info("entity.tables_dropped", total=len(self.registry))
