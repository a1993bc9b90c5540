"""SQLAlchemy 2.0 ORM layer for pictorium.

Modules
-------
base        EntityBase (declarative base) + TimestampMixin
session     Engine factory, EntitySession, session factory

Tags:
    pictorium, orm, sqlalchemy, declarative

Doc-Types:
    package-overview, module-index
"""

from __future__ import annotations

from pictorium.core.orm.base import EntityBase, TimestampMixin, utcnow
from pictorium.core.orm.session import (
    EntitySession,
    create_entity_engine,
    entity_session_factory,
)

__all__ = [
    "EntityBase",
    "TimestampMixin",
    "utcnow",
    "create_entity_engine",
    "EntitySession",
    "entity_session_factory",
]
