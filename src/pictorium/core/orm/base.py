"""Declarative base and mixins for all pictorium ORM models.

Uses SQLAlchemy 2.0 ``DeclarativeBase`` with a ``type_annotation_map``
that maps Python built-in types to portable SA column types.

Mixins
------
* **TimestampMixin** - ``created_at`` / ``updated_at`` set from Python.
"""

from __future__ import annotations

import datetime

from sqlalchemy import Boolean, DateTime, Float, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class EntityBase(DeclarativeBase):
    """Shared declarative base for every pictorium entity.

    * ``str``   → ``String(255)``
    * ``int``   → ``Integer``
    * ``float`` → ``Float``
    * ``bool``  → ``Boolean``
    * ``datetime.datetime`` → ``DateTime``
    """

    type_annotation_map = {
        str: String(255),
        int: Integer,
        float: Float,
        bool: Boolean,
        datetime.datetime: DateTime,
    }


class TimestampMixin:
    """Mixin that adds ``created_at`` and ``updated_at``.

    Python-side defaults keep the columns portable across SQLite and MySQL
    and let ``ALTER TABLE ... ADD COLUMN`` succeed on populated tables.
    """

    created_at: Mapped[datetime.datetime | None] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime.datetime | None] = mapped_column(
        DateTime, default=utcnow, onupdate=utcnow
    )
