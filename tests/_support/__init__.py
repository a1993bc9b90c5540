"""
Test support utilities for pictorium tests.

Recording fakes for the database handle and the sleep function.  They
satisfy the ``SchemaDatabase`` protocol without touching a real database.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from sqlalchemy.exc import OperationalError

from pictorium.core.errors import TableNotReadyError

NEVER = None


def driver_error(message: str = "simulated driver failure") -> OperationalError:
    return OperationalError("statement", {}, Exception(message))


class FakeSession:
    """Stands in for an ORM session; records what seeds and fixtures add."""

    def __init__(self) -> None:
        self.added: list[Any] = []
        self.committed = False

    def add(self, instance: Any) -> None:
        self.added.append(instance)


class FakeDatabase:
    """Recording fake for ``SchemaDatabase``.

    Args:
        ready_on: table -> probe number on which the table becomes readable
            (``NEVER`` for a table that never does).  Unlisted tables are
            readable on the first probe.
        fail_create: tables whose creation raises a driver error
        fail_drop: tables whose drop raises a driver error
    """

    def __init__(
        self,
        *,
        ready_on: Mapping[str, int | None] | None = None,
        fail_create: set[str] | frozenset[str] = frozenset(),
        fail_drop: set[str] | frozenset[str] = frozenset(),
    ) -> None:
        self.ready_on = dict(ready_on or {})
        self.fail_create = set(fail_create)
        self.fail_drop = set(fail_drop)
        self.tables: set[str] = set()
        self.calls: list[tuple[str, str]] = []
        self.probes: Counter[str] = Counter()
        self.sessions: list[FakeSession] = []

    def calls_of(self, kind: str) -> list[str]:
        return [name for op, name in self.calls if op == kind]

    def create_table(self, descriptor: Any) -> bool:
        self.calls.append(("create", descriptor.name))
        if descriptor.name in self.fail_create:
            raise driver_error(f"cannot create {descriptor.name}")
        is_new = descriptor.name not in self.tables
        self.tables.add(descriptor.name)
        return is_new

    def drop_table(self, descriptor: Any) -> None:
        self.calls.append(("drop", descriptor.name))
        if descriptor.name in self.fail_drop:
            raise driver_error(f"cannot drop {descriptor.name}")
        self.tables.discard(descriptor.name)

    def probe(self, table: str) -> None:
        self.calls.append(("probe", table))
        self.probes[table] += 1
        ready_on = self.ready_on.get(table, 1)
        if ready_on is NEVER or self.probes[table] < ready_on:
            raise TableNotReadyError(table, cause=driver_error(f"no such table: {table}"))

    @contextmanager
    def session(self) -> Iterator[FakeSession]:
        session = FakeSession()
        self.sessions.append(session)
        yield session
        session.committed = True


class RecordingSleep:
    """Callable replacement for ``time.sleep`` that only records."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)

    @property
    def count(self) -> int:
        return len(self.calls)
