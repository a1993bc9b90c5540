"""Default "unknown" rows that other records point at.

Photos without GPS data reference the unknown place and country, photos
without EXIF data reference the unknown camera and lens.  These rows must
exist before anything else is indexed.  Every constructor is insert-if-absent:
calling it again returns the existing row.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from pictorium.core.logging import get_logger
from pictorium.entity.models import Camera, Country, Lens, Place

logger = get_logger(__name__)

T = TypeVar("T")

UNKNOWN_ID = "zz"
UNKNOWN_NAME = "Unknown"


def first_or_create(
    session: Session,
    model: type[T],
    defaults: dict[str, Any] | None = None,
    **keys: Any,
) -> tuple[T, bool]:
    """Return the row matching *keys*, inserting it first if absent.

    Returns ``(instance, created)``.
    """
    instance = session.scalars(select(model).filter_by(**keys)).first()
    if instance is not None:
        return instance, False

    instance = model(**keys, **(defaults or {}))
    session.add(instance)
    session.flush()
    logger.debug("entity.default_created", table=model.__tablename__, keys=keys)
    return instance, True


def create_unknown_place(session: Session) -> Place:
    place, _ = first_or_create(
        session,
        Place,
        defaults={
            "loc_label": UNKNOWN_NAME,
            "loc_city": UNKNOWN_NAME,
            "loc_state": UNKNOWN_NAME,
            "loc_country": UNKNOWN_ID,
        },
        id=UNKNOWN_ID,
    )
    return place


def create_unknown_country(session: Session) -> Country:
    country, _ = first_or_create(
        session,
        Country,
        defaults={"country_slug": UNKNOWN_ID, "country_name": UNKNOWN_NAME},
        id=UNKNOWN_ID,
    )
    return country


def create_unknown_camera(session: Session) -> Camera:
    camera, _ = first_or_create(
        session,
        Camera,
        defaults={"camera_model": UNKNOWN_NAME, "camera_make": ""},
        camera_slug=UNKNOWN_ID,
    )
    return camera


def create_unknown_lens(session: Session) -> Lens:
    lens, _ = first_or_create(
        session,
        Lens,
        defaults={"lens_model": UNKNOWN_NAME, "lens_make": ""},
        lens_slug=UNKNOWN_ID,
    )
    return lens


DEFAULT_SEEDS: tuple[Callable[[Session], Any], ...] = (
    create_unknown_place,
    create_unknown_country,
    create_unknown_camera,
    create_unknown_lens,
)

__all__ = [
    "UNKNOWN_ID",
    "UNKNOWN_NAME",
    "first_or_create",
    "create_unknown_place",
    "create_unknown_country",
    "create_unknown_camera",
    "create_unknown_lens",
    "DEFAULT_SEEDS",
]
