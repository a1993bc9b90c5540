"""Database handle -- create, drop, and probe entity tables.

``Database`` is the concrete :class:`~pictorium.core.protocols.SchemaDatabase`
used outside of tests.  It owns one SQLAlchemy engine and a session factory,
and knows nothing about which tables exist; the entity registry tells it.

Usage
-----
::

    from pictorium.core.database import Database
    from pictorium.entity import ENTITIES

    db = Database("sqlite:///library.db")
    db.create_table(ENTITIES["cameras"])
    db.probe("cameras")

Design
------
- ``create_table`` is create-or-verify: a missing table is created, an existing
  one gets any columns the model declares but the live table lacks.  Columns are
  never altered or removed.
- ``probe`` is a read-only query.  MySQL/MariaDB use ``DESCRIBE``; every other
  dialect selects zero rows.  Driver errors become ``TableNotReadyError``.
- SQLAlchemy errors from create/drop propagate unchanged; the provisioner
  decides they are fatal.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.schema import CreateColumn

from pictorium.core.errors import TableNotReadyError
from pictorium.core.logging import get_logger
from pictorium.core.orm.session import (
    EntitySession,
    create_entity_engine,
    entity_session_factory,
)
from pictorium.core.protocols import TableDescriptorLike
from pictorium.core.settings import PictoriumSettings, get_settings

logger = get_logger(__name__)

_DESCRIBE_DIALECTS = frozenset({"mysql", "mariadb"})


class Database:
    """SQLAlchemy-backed database handle.

    Parameters
    ----------
    url:
        Database URL.  Ignored when *engine* is given.
    engine:
        Pre-built engine to wrap.
    echo:
        Log all SQL statements.
    """

    def __init__(
        self,
        url: str | None = None,
        *,
        engine: Engine | None = None,
        echo: bool = False,
    ) -> None:
        if engine is None:
            if url is None:
                raise ValueError("either url or engine is required")
            engine = create_entity_engine(url, echo=echo)
        self.engine = engine
        self.url = engine.url.render_as_string(hide_password=True)
        self._sessions = entity_session_factory(engine)

    @classmethod
    def from_settings(cls, settings: PictoriumSettings | None = None) -> Database:
        settings = settings or get_settings()
        return cls(settings.database_url, echo=settings.database_echo)

    @property
    def dialect(self) -> str:
        return self.engine.dialect.name

    def quote(self, name: str) -> str:
        return self.engine.dialect.identifier_preparer.quote(name)

    # ------------------------------------------------------------------
    # Schema operations
    # ------------------------------------------------------------------

    def create_table(self, descriptor: TableDescriptorLike) -> bool:
        """Create the descriptor's table, or add its missing columns.

        Returns ``True`` when the table did not exist before.
        """
        table = descriptor.model.__table__
        with self.engine.begin() as conn:
            inspector = inspect(conn)
            if not inspector.has_table(table.name):
                table.create(conn)
                return True

            existing = {column["name"] for column in inspector.get_columns(table.name)}
            missing = [column for column in table.columns if column.name not in existing]
            for column in missing:
                spec = CreateColumn(column).compile(dialect=conn.dialect)
                conn.execute(text(f"ALTER TABLE {self.quote(table.name)} ADD COLUMN {spec}"))
            if missing:
                logger.info(
                    "entity.columns_added",
                    table=table.name,
                    columns=[column.name for column in missing],
                )
            return False

    def drop_table(self, descriptor: TableDescriptorLike) -> None:
        """Drop the descriptor's table if it exists."""
        with self.engine.begin() as conn:
            descriptor.model.__table__.drop(conn, checkfirst=True)

    def probe(self, table: str) -> None:
        """Run a read-only query against *table*.

        Raises
        ------
        TableNotReadyError
            If the query fails for any driver-level reason.
        """
        quoted = self.quote(table)
        if self.dialect in _DESCRIBE_DIALECTS:
            sql = f"DESCRIBE {quoted}"
        else:
            sql = f"SELECT * FROM {quoted} WHERE 1 = 0"
        try:
            with self.engine.connect() as conn:
                conn.execute(text(sql)).fetchall()
        except SQLAlchemyError as exc:
            raise TableNotReadyError(table, cause=exc) from exc

    def table_names(self) -> list[str]:
        """Tables present in the live database, sorted."""
        return sorted(inspect(self.engine).get_table_names())

    # ------------------------------------------------------------------
    # Sessions
    # ------------------------------------------------------------------

    @contextmanager
    def session(self) -> Iterator[EntitySession]:
        """Yield a session that commits on success and rolls back on error."""
        session = self._sessions()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self) -> None:
        self.engine.dispose()

    def __repr__(self) -> str:
        return f"Database({self.url!r})"


__all__ = ["Database"]
