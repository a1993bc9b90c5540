"""SQLAlchemy 2.0 models for every photo library entity.

Each class is the schema-producing type behind one registry entry.  Reference
columns (``photo_id``, ``camera_id``, ...) are plain integers or strings;
no ``ForeignKey`` constraints are declared, so tables can be created and
dropped in any order.

Non-key columns are nullable so that a table created by an older release can
be brought up to date with ``ALTER TABLE ... ADD COLUMN``.

Usage::

    from pictorium.core.orm import EntityBase
    from pictorium.entity.models import Camera

    Camera(camera_slug="canon-eos-6d", camera_make="Canon", camera_model="EOS 6D")
"""

from __future__ import annotations

import datetime

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from pictorium.core.orm.base import EntityBase, TimestampMixin

# =============================================================================
# Accounts & files
# =============================================================================


class Account(TimestampMixin, EntityBase):
    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    acc_name: Mapped[str | None] = mapped_column(default="")
    acc_owner: Mapped[str | None] = mapped_column(default="")
    acc_url: Mapped[str | None] = mapped_column(String(512), default="")
    acc_type: Mapped[str | None] = mapped_column(default="")
    acc_key: Mapped[str | None] = mapped_column(default="")
    acc_user: Mapped[str | None] = mapped_column(default="")
    acc_pass: Mapped[str | None] = mapped_column(default="")
    acc_error: Mapped[str | None] = mapped_column(default="")
    acc_share: Mapped[bool | None] = mapped_column(default=False)
    acc_sync: Mapped[bool | None] = mapped_column(default=False)


class File(TimestampMixin, EntityBase):
    __tablename__ = "files"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    photo_id: Mapped[int | None] = mapped_column(index=True)
    photo_uid: Mapped[str | None] = mapped_column(String(64), index=True)
    file_uid: Mapped[str] = mapped_column(String(64), unique=True)
    file_name: Mapped[str | None] = mapped_column(String(768), default="")
    file_hash: Mapped[str | None] = mapped_column(String(128), index=True)
    file_size: Mapped[int | None] = mapped_column(default=0)
    file_type: Mapped[str | None] = mapped_column(String(32), default="")
    file_mime: Mapped[str | None] = mapped_column(String(64), default="")
    file_primary: Mapped[bool | None] = mapped_column(default=False)
    file_missing: Mapped[bool | None] = mapped_column(default=False)
    file_width: Mapped[int | None] = mapped_column(default=0)
    file_height: Mapped[int | None] = mapped_column(default=0)


class FileShare(TimestampMixin, EntityBase):
    __tablename__ = "files_share"

    file_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    account_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    remote_name: Mapped[str] = mapped_column(primary_key=True)
    status: Mapped[str | None] = mapped_column(String(16), default="new")
    error: Mapped[str | None] = mapped_column(default="")
    errors: Mapped[int | None] = mapped_column(default=0)


class FileSync(TimestampMixin, EntityBase):
    __tablename__ = "files_sync"

    remote_name: Mapped[str] = mapped_column(primary_key=True)
    account_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    file_id: Mapped[int | None] = mapped_column(index=True)
    remote_date: Mapped[datetime.datetime | None]
    remote_size: Mapped[int | None] = mapped_column(default=0)
    status: Mapped[str | None] = mapped_column(String(16), default="new")
    error: Mapped[str | None] = mapped_column(default="")
    errors: Mapped[int | None] = mapped_column(default=0)


# =============================================================================
# Photos
# =============================================================================


class Photo(TimestampMixin, EntityBase):
    __tablename__ = "photos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    photo_uid: Mapped[str] = mapped_column(String(64), unique=True)
    taken_at: Mapped[datetime.datetime | None] = mapped_column(index=True)
    taken_src: Mapped[str | None] = mapped_column(String(8), default="")
    photo_title: Mapped[str | None] = mapped_column(default="")
    photo_path: Mapped[str | None] = mapped_column(String(512), index=True)
    photo_name: Mapped[str | None] = mapped_column(default="")
    photo_favorite: Mapped[bool | None] = mapped_column(default=False)
    photo_private: Mapped[bool | None] = mapped_column(default=False)
    photo_lat: Mapped[float | None] = mapped_column(default=0.0)
    photo_lng: Mapped[float | None] = mapped_column(default=0.0)
    photo_altitude: Mapped[int | None] = mapped_column(default=0)
    photo_iso: Mapped[int | None] = mapped_column(default=0)
    photo_focal_length: Mapped[int | None] = mapped_column(default=0)
    photo_f_number: Mapped[float | None] = mapped_column(default=0.0)
    photo_exposure: Mapped[str | None] = mapped_column(String(64), default="")
    photo_country: Mapped[str | None] = mapped_column(String(2), default="zz")
    photo_year: Mapped[int | None] = mapped_column(default=0)
    photo_month: Mapped[int | None] = mapped_column(default=0)
    camera_id: Mapped[int | None] = mapped_column(index=True)
    camera_serial: Mapped[str | None] = mapped_column(default="")
    lens_id: Mapped[int | None] = mapped_column(index=True)
    place_id: Mapped[str | None] = mapped_column(String(16), default="zz")
    location_id: Mapped[str | None] = mapped_column(String(16), index=True)
    deleted_at: Mapped[datetime.datetime | None]


class Description(EntityBase):
    __tablename__ = "descriptions"

    photo_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    photo_description: Mapped[str | None] = mapped_column(Text)
    photo_keywords: Mapped[str | None] = mapped_column(Text)
    photo_notes: Mapped[str | None] = mapped_column(Text)
    photo_subject: Mapped[str | None] = mapped_column(default="")
    photo_artist: Mapped[str | None] = mapped_column(default="")
    photo_copyright: Mapped[str | None] = mapped_column(default="")
    photo_license: Mapped[str | None] = mapped_column(default="")


# =============================================================================
# Places & geography
# =============================================================================


class Place(TimestampMixin, EntityBase):
    __tablename__ = "places"

    id: Mapped[str] = mapped_column(String(16), primary_key=True)
    loc_label: Mapped[str | None] = mapped_column(String(512), unique=True)
    loc_city: Mapped[str | None] = mapped_column(default="")
    loc_state: Mapped[str | None] = mapped_column(default="")
    loc_country: Mapped[str | None] = mapped_column(String(2), default="")
    loc_keywords: Mapped[str | None] = mapped_column(default="")
    loc_notes: Mapped[str | None] = mapped_column(Text)
    loc_favorite: Mapped[bool | None] = mapped_column(default=False)


class Location(TimestampMixin, EntityBase):
    __tablename__ = "locations"

    id: Mapped[str] = mapped_column(String(16), primary_key=True)
    place_id: Mapped[str | None] = mapped_column(String(16), index=True)
    loc_name: Mapped[str | None] = mapped_column(default="")
    loc_category: Mapped[str | None] = mapped_column(String(64), default="")
    loc_source: Mapped[str | None] = mapped_column(String(16), default="")


class Country(EntityBase):
    __tablename__ = "countries"

    id: Mapped[str] = mapped_column(String(2), primary_key=True)
    country_slug: Mapped[str | None] = mapped_column(unique=True)
    country_name: Mapped[str | None] = mapped_column(default="")
    country_description: Mapped[str | None] = mapped_column(Text)
    country_notes: Mapped[str | None] = mapped_column(Text)
    country_photo_id: Mapped[int | None] = mapped_column(default=0)


# =============================================================================
# Cameras & lenses
# =============================================================================


class Camera(TimestampMixin, EntityBase):
    __tablename__ = "cameras"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    camera_slug: Mapped[str] = mapped_column(unique=True)
    camera_model: Mapped[str | None] = mapped_column(default="")
    camera_make: Mapped[str | None] = mapped_column(default="")
    camera_type: Mapped[str | None] = mapped_column(default="")
    camera_description: Mapped[str | None] = mapped_column(Text)
    camera_notes: Mapped[str | None] = mapped_column(Text)


class Lens(TimestampMixin, EntityBase):
    __tablename__ = "lenses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    lens_slug: Mapped[str] = mapped_column(unique=True)
    lens_model: Mapped[str | None] = mapped_column(default="")
    lens_make: Mapped[str | None] = mapped_column(default="")
    lens_type: Mapped[str | None] = mapped_column(default="")
    lens_description: Mapped[str | None] = mapped_column(Text)
    lens_notes: Mapped[str | None] = mapped_column(Text)


# =============================================================================
# Albums
# =============================================================================


class Album(TimestampMixin, EntityBase):
    __tablename__ = "albums"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    album_uid: Mapped[str] = mapped_column(String(64), unique=True)
    album_slug: Mapped[str | None] = mapped_column(index=True)
    album_name: Mapped[str | None] = mapped_column(default="")
    album_description: Mapped[str | None] = mapped_column(Text)
    album_notes: Mapped[str | None] = mapped_column(Text)
    album_order: Mapped[str | None] = mapped_column(String(32), default="oldest")
    album_template: Mapped[str | None] = mapped_column(default="")
    album_favorite: Mapped[bool | None] = mapped_column(default=False)
    cover_uid: Mapped[str | None] = mapped_column(String(64), default="")


class PhotoAlbum(TimestampMixin, EntityBase):
    __tablename__ = "photos_albums"

    photo_uid: Mapped[str] = mapped_column(String(64), primary_key=True)
    album_uid: Mapped[str] = mapped_column(String(64), primary_key=True)
    order: Mapped[int | None] = mapped_column(default=0)
    hidden: Mapped[bool | None] = mapped_column(default=False)
    missing: Mapped[bool | None] = mapped_column(default=False)


# =============================================================================
# Labels & keywords
# =============================================================================


class Label(TimestampMixin, EntityBase):
    __tablename__ = "labels"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    label_uid: Mapped[str] = mapped_column(String(64), unique=True)
    label_slug: Mapped[str] = mapped_column(unique=True)
    custom_slug: Mapped[str | None] = mapped_column(index=True)
    label_name: Mapped[str | None] = mapped_column(default="")
    label_priority: Mapped[int | None] = mapped_column(default=0)
    label_favorite: Mapped[bool | None] = mapped_column(default=False)
    label_description: Mapped[str | None] = mapped_column(Text)
    label_notes: Mapped[str | None] = mapped_column(Text)
    photo_count: Mapped[int | None] = mapped_column(default=1)


class Category(EntityBase):
    __tablename__ = "categories"

    label_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    category_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)


class PhotoLabel(EntityBase):
    __tablename__ = "photos_labels"

    photo_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    label_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    label_src: Mapped[str | None] = mapped_column(String(8), default="")
    uncertainty: Mapped[int | None] = mapped_column(default=0)


class Keyword(EntityBase):
    __tablename__ = "keywords"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    keyword: Mapped[str] = mapped_column(String(64), unique=True)
    skip: Mapped[bool | None] = mapped_column(default=False)


class PhotoKeyword(EntityBase):
    __tablename__ = "photos_keywords"

    photo_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    keyword_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)


# =============================================================================
# Share links
# =============================================================================


class Link(TimestampMixin, EntityBase):
    __tablename__ = "links"

    link_token: Mapped[str] = mapped_column(String(255), primary_key=True)
    link_password: Mapped[str | None] = mapped_column(default="")
    link_expires: Mapped[datetime.datetime | None]
    share_uid: Mapped[str | None] = mapped_column(String(64), index=True)
    can_comment: Mapped[bool | None] = mapped_column(default=False)
    can_edit: Mapped[bool | None] = mapped_column(default=False)


__all__ = [
    "Account",
    "File",
    "FileShare",
    "FileSync",
    "Photo",
    "Description",
    "Place",
    "Location",
    "Country",
    "Camera",
    "Lens",
    "Album",
    "PhotoAlbum",
    "Label",
    "Category",
    "PhotoLabel",
    "Keyword",
    "PhotoKeyword",
    "Link",
]
