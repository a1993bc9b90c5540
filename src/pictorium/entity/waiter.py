"""
Migration waiter - block until every registered table is readable.

A successful ``CREATE TABLE`` at the ORM layer does not guarantee the table can
be queried yet: replicated or clustered backends apply DDL asynchronously, and
some drivers report success for a creation that silently did nothing.  The
waiter closes that gap by probing each table until it answers.

Algorithm:
    ::

        for table in registry (sequentially):
            probe ──ok──► log "entity.table_migrated", next table
              │
            TableNotReadyError
              │
            attempts left? ──no──► MigrationTimeoutError (fatal)
              │ yes
            sleep(interval), probe again

    - A table readable on probe k uses k probes and k - 1 sleeps.
    - No sleep follows the final failed probe.
    - An empty registry returns immediately.

Tags:
    migration, polling, retry, backoff, schema

Doc-Types:
    - API Reference
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

from pictorium.core.errors import ConfigError, MigrationTimeoutError, TableNotReadyError
from pictorium.core.logging import get_logger
from pictorium.core.protocols import SchemaDatabase
from pictorium.core.settings import (
    DEFAULT_MIGRATION_ATTEMPTS,
    DEFAULT_MIGRATION_INTERVAL,
    PictoriumSettings,
    get_settings,
)
from pictorium.entity.registry import EntityRegistry

logger = get_logger(__name__)


@dataclass
class WaitState:
    """Per-table polling state, discarded once the wait ends."""

    table: str
    attempts_remaining: int
    last_error: TableNotReadyError | None = None


class MigrationWaiter:
    """Polls tables until they are observably queryable.

    Args:
        db: Database handle providing ``probe(table)``
        attempts: Probe ceiling per table
        interval: Seconds to sleep after each failed probe
        sleep: Sleep function (injectable for tests)
    """

    def __init__(
        self,
        db: SchemaDatabase,
        *,
        attempts: int = DEFAULT_MIGRATION_ATTEMPTS,
        interval: float = DEFAULT_MIGRATION_INTERVAL,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if attempts < 1:
            raise ConfigError(f"migration attempts must be at least 1, got {attempts}")
        if interval < 0:
            raise ConfigError(f"migration interval must not be negative, got {interval}")
        self.db = db
        self.attempts = attempts
        self.interval = interval
        self._sleep = sleep

    @classmethod
    def from_settings(
        cls,
        db: SchemaDatabase,
        settings: PictoriumSettings | None = None,
        **kwargs,
    ) -> MigrationWaiter:
        settings = settings or get_settings()
        return cls(
            db,
            attempts=settings.migration_attempts,
            interval=settings.migration_interval,
            **kwargs,
        )

    def wait_for(self, table: str) -> int:
        """Block until *table* is readable; return the number of probes used.

        Raises:
            MigrationTimeoutError: If the ceiling is reached without success.
        """
        state = WaitState(table=table, attempts_remaining=self.attempts)

        while True:
            try:
                self.db.probe(table)
            except TableNotReadyError as exc:
                state.last_error = exc
                state.attempts_remaining -= 1
                logger.debug(
                    "entity.table_not_ready",
                    table=table,
                    attempts_remaining=state.attempts_remaining,
                    error=str(exc.cause or exc),
                )
                if state.attempts_remaining == 0:
                    logger.error("entity.migration_failed", table=table, attempts=self.attempts)
                    raise MigrationTimeoutError(
                        table, attempts=self.attempts, cause=state.last_error
                    ) from state.last_error
                self._sleep(self.interval)
                continue

            probes = self.attempts - state.attempts_remaining + 1
            logger.debug("entity.table_migrated", table=table, attempts=probes)
            return probes

    def wait_all(self, registry: EntityRegistry) -> dict[str, int]:
        """Wait for every table in *registry*, one after another."""
        return {name: self.wait_for(name) for name in registry.names()}
