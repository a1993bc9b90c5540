"""
Canonical protocol definitions for pictorium.

Protocols define contracts without inheritance: the lifecycle code depends on
the shape of a database handle, not on SQLAlchemy.  Tests pass recording fakes,
production passes :class:`pictorium.core.database.Database`.

Architecture:
    ::

        protocols.py
        ├── TableDescriptorLike  - named table with a schema-producing model
        └── SchemaDatabase       - create / drop / probe / session

Tags:
    protocol, database, contracts

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TableDescriptorLike(Protocol):
    """Anything with a logical table name and a model class."""

    @property
    def name(self) -> str: ...

    @property
    def model(self) -> type[Any]: ...


@runtime_checkable
class SchemaDatabase(Protocol):
    """Database handle consumed by the entity lifecycle.

    Methods:
        create_table: Create the table, or add columns the live table lacks.
            Returns ``True`` when the table was newly created.
        drop_table: Drop the table if it exists.
        probe: Issue a read-only query against the table.  Raises
            :class:`~pictorium.core.errors.TableNotReadyError` if it fails.
        session: Context manager yielding an ORM session for row insertion.
    """

    def create_table(self, descriptor: TableDescriptorLike) -> bool: ...

    def drop_table(self, descriptor: TableDescriptorLike) -> None: ...

    def probe(self, table: str) -> None: ...

    def session(self) -> AbstractContextManager[Any]: ...


__all__ = ["TableDescriptorLike", "SchemaDatabase"]
