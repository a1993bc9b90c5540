"""
Entity registry - the fixed set of tables this library manages.

Maps each logical table name to a :class:`TableDescriptor` pairing the name with
its schema-producing model.  The registry is built once at import time and is
read-only afterwards; there is no runtime registration.

Examples:
    >>> from pictorium.entity.registry import ENTITIES
    >>> ENTITIES["cameras"].model.__name__
    'Camera'
    >>> "photos" in ENTITIES
    True
    >>> ENTITIES.subset("cameras", "lenses").names()
    ['cameras', 'lenses']

Tags:
    registry, schema, tables, entity

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from sqlalchemy import Table

from pictorium.core.errors import ConfigError
from pictorium.core.orm.base import EntityBase
from pictorium.entity import models


@dataclass(frozen=True)
class TableDescriptor:
    """Static pairing of a logical table name with its model."""

    name: str
    model: type[EntityBase]

    @property
    def table(self) -> Table:
        return self.model.__table__


class EntityRegistry(Mapping[str, TableDescriptor]):
    """Immutable name → descriptor mapping.

    Raises:
        ConfigError: If two descriptors share a name.
    """

    def __init__(self, descriptors: Iterable[TableDescriptor] = ()) -> None:
        entries: dict[str, TableDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.name in entries:
                raise ConfigError(f"duplicate table name: {descriptor.name}")
            entries[descriptor.name] = descriptor
        self._entries = MappingProxyType(entries)

    @classmethod
    def from_models(cls, entities: Mapping[str, type[EntityBase]]) -> EntityRegistry:
        """Build a registry from ``{table name: model}``.

        Each model's ``__tablename__`` must equal its logical name.
        """
        descriptors = []
        for name, model in entities.items():
            tablename = getattr(model, "__tablename__", None)
            if tablename != name:
                raise ConfigError(
                    f"model {model.__name__} maps to {tablename!r}, registered as {name!r}"
                )
            descriptors.append(TableDescriptor(name=name, model=model))
        return cls(descriptors)

    def __getitem__(self, name: str) -> TableDescriptor:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def descriptors(self) -> list[TableDescriptor]:
        return list(self._entries.values())

    def names(self) -> list[str]:
        return list(self._entries)

    def subset(self, *names: str) -> EntityRegistry:
        """Registry restricted to *names* (in the given order)."""
        return EntityRegistry(self[name] for name in names)

    def __repr__(self) -> str:
        return f"EntityRegistry({self.names()!r})"


# List of database entities and their table names.
ENTITIES = EntityRegistry.from_models(
    {
        "accounts": models.Account,
        "files": models.File,
        "files_share": models.FileShare,
        "files_sync": models.FileSync,
        "photos": models.Photo,
        "descriptions": models.Description,
        "places": models.Place,
        "locations": models.Location,
        "cameras": models.Camera,
        "lenses": models.Lens,
        "countries": models.Country,
        "albums": models.Album,
        "photos_albums": models.PhotoAlbum,
        "labels": models.Label,
        "categories": models.Category,
        "photos_labels": models.PhotoLabel,
        "keywords": models.Keyword,
        "photos_keywords": models.PhotoKeyword,
        "links": models.Link,
    }
)

__all__ = ["TableDescriptor", "EntityRegistry", "ENTITIES"]
