"""Test fixtures -- a small, fully linked photo library.

``create_test_fixtures`` inserts every fixture row after a reset.  Rows carry
explicit primary keys (ids start at 1000 so they never collide with the
default "unknown" rows) and are written with ``session.merge`` so running the
population twice leaves one copy of each row.

Fixture maps are keyed by a readable name so tests can look rows up::

    from pictorium.entity.fixtures import CAMERA_FIXTURES
    CAMERA_FIXTURES["canon-eos-6d"]["id"]  # 1001
"""

from __future__ import annotations

import datetime
from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import Session

from pictorium.core.logging import get_logger
from pictorium.core.orm.base import EntityBase
from pictorium.entity import models

logger = get_logger(__name__)

Fixtures = Mapping[str, dict[str, Any]]

_JAN_2020 = datetime.datetime(2020, 1, 12, 14, 3, 0)
_AUG_2019 = datetime.datetime(2019, 8, 7, 9, 40, 12)


ACCOUNT_FIXTURES: Fixtures = {
    "webdav-dummy": {
        "id": 1000,
        "acc_name": "Test Account",
        "acc_owner": "",
        "acc_url": "http://webdav-dummy/",
        "acc_type": "webdav",
        "acc_share": True,
        "acc_sync": True,
    },
}

CAMERA_FIXTURES: Fixtures = {
    "apple-iphone-se": {
        "id": 1000,
        "camera_slug": "apple-iphone-se",
        "camera_model": "iPhone SE",
        "camera_make": "Apple",
        "camera_type": "phone",
    },
    "canon-eos-6d": {
        "id": 1001,
        "camera_slug": "canon-eos-6d",
        "camera_model": "EOS 6D",
        "camera_make": "Canon",
        "camera_type": "dslr",
    },
}

LENS_FIXTURES: Fixtures = {
    "lens-f-380": {
        "id": 1000,
        "lens_slug": "lens-f-380",
        "lens_model": "Lens f/380",
        "lens_make": "Apple",
    },
    "ef-24-105mm": {
        "id": 1001,
        "lens_slug": "ef-24-105mm",
        "lens_model": "EF24-105mm f/4L IS USM",
        "lens_make": "Canon",
    },
}

COUNTRY_FIXTURES: Fixtures = {
    "germany": {"id": "de", "country_slug": "germany", "country_name": "Germany"},
    "united-states": {"id": "us", "country_slug": "united-states", "country_name": "United States"},
}

PLACE_FIXTURES: Fixtures = {
    "berlin": {
        "id": "de:berlin",
        "loc_label": "Berlin, Germany",
        "loc_city": "Berlin",
        "loc_state": "Berlin",
        "loc_country": "de",
    },
    "new-york": {
        "id": "us:new-york",
        "loc_label": "New York, USA",
        "loc_city": "New York",
        "loc_state": "New York",
        "loc_country": "us",
    },
}

LOCATION_FIXTURES: Fixtures = {
    "brandenburger-tor": {
        "id": "47a851bd4b0c",
        "place_id": "de:berlin",
        "loc_name": "Brandenburger Tor",
        "loc_category": "landmark",
        "loc_source": "manual",
    },
}

PHOTO_FIXTURES: Fixtures = {
    "berlin-gate": {
        "id": 1000,
        "photo_uid": "pt9jtdre2lvl0yh7",
        "taken_at": _JAN_2020,
        "taken_src": "meta",
        "photo_title": "Brandenburger Tor",
        "photo_path": "2020/01",
        "photo_name": "20200112_140300_berlin",
        "photo_lat": 52.5163,
        "photo_lng": 13.3777,
        "photo_country": "de",
        "photo_year": 2020,
        "photo_month": 1,
        "camera_id": 1001,
        "lens_id": 1001,
        "place_id": "de:berlin",
        "location_id": "47a851bd4b0c",
    },
    "unknown-origin": {
        "id": 1001,
        "photo_uid": "pt9jtdre2lvl0y11",
        "taken_at": _AUG_2019,
        "taken_src": "name",
        "photo_title": "Scanned Print",
        "photo_path": "2019/08",
        "photo_name": "scan_0001",
        "photo_country": "zz",
        "photo_year": 2019,
        "photo_month": 8,
        "place_id": "zz",
    },
}

DESCRIPTION_FIXTURES: Fixtures = {
    "berlin-gate": {
        "photo_id": 1000,
        "photo_description": "Brandenburg Gate at noon",
        "photo_keywords": "berlin, gate, landmark",
        "photo_artist": "Test Photographer",
    },
}

FILE_FIXTURES: Fixtures = {
    "berlin-gate.jpg": {
        "id": 1000,
        "photo_id": 1000,
        "photo_uid": "pt9jtdre2lvl0yh7",
        "file_uid": "ft8es39w45bnlqdw",
        "file_name": "2020/01/20200112_140300_berlin.jpg",
        "file_hash": "2cad9168fa6acc5c5c2965ddf6ec465ca42fd818",
        "file_size": 4278906,
        "file_type": "jpg",
        "file_mime": "image/jpeg",
        "file_primary": True,
        "file_width": 3648,
        "file_height": 2736,
    },
    "scan.png": {
        "id": 1001,
        "photo_id": 1001,
        "photo_uid": "pt9jtdre2lvl0y11",
        "file_uid": "ft8es39w45bnlq11",
        "file_name": "2019/08/scan_0001.png",
        "file_hash": "a1b2c3d4e5f60718293a4b5c6d7e8f9012345678",
        "file_size": 921600,
        "file_type": "png",
        "file_mime": "image/png",
        "file_primary": True,
        "file_width": 1280,
        "file_height": 720,
    },
}

FILE_SHARE_FIXTURES: Fixtures = {
    "berlin-gate.jpg": {
        "file_id": 1000,
        "account_id": 1000,
        "remote_name": "/20200112_140300_berlin.jpg",
        "status": "new",
    },
}

FILE_SYNC_FIXTURES: Fixtures = {
    "scan.png": {
        "remote_name": "/scan_0001.png",
        "account_id": 1000,
        "file_id": 1001,
        "remote_size": 921600,
        "status": "new",
    },
}

ALBUM_FIXTURES: Fixtures = {
    "holiday-2030": {
        "id": 1000,
        "album_uid": "at9lxuqxpogaaba7",
        "album_slug": "holiday-2030",
        "album_name": "Holiday 2030",
        "album_favorite": True,
    },
    "berlin-2019": {
        "id": 1001,
        "album_uid": "at9lxuqxpogaaba8",
        "album_slug": "berlin-2019",
        "album_name": "Berlin 2019",
    },
}

PHOTO_ALBUM_FIXTURES: Fixtures = {
    "berlin-gate/berlin-2019": {
        "photo_uid": "pt9jtdre2lvl0yh7",
        "album_uid": "at9lxuqxpogaaba8",
        "order": 0,
    },
}

LABEL_FIXTURES: Fixtures = {
    "landscape": {
        "id": 1000,
        "label_uid": "lt9k3pw1wowuy3c2",
        "label_slug": "landscape",
        "custom_slug": "landscape",
        "label_name": "Landscape",
        "label_priority": 0,
    },
    "building": {
        "id": 1001,
        "label_uid": "lt9k3pw1wowuy3c3",
        "label_slug": "building",
        "custom_slug": "building",
        "label_name": "Building",
        "label_priority": 5,
    },
}

CATEGORY_FIXTURES: Fixtures = {
    "building/landscape": {"label_id": 1001, "category_id": 1000},
}

PHOTO_LABEL_FIXTURES: Fixtures = {
    "berlin-gate/building": {
        "photo_id": 1000,
        "label_id": 1001,
        "label_src": "image",
        "uncertainty": 20,
    },
}

KEYWORD_FIXTURES: Fixtures = {
    "berlin": {"id": 1000, "keyword": "berlin"},
    "gate": {"id": 1001, "keyword": "gate"},
}

PHOTO_KEYWORD_FIXTURES: Fixtures = {
    "berlin-gate/berlin": {"photo_id": 1000, "keyword_id": 1000},
    "berlin-gate/gate": {"photo_id": 1000, "keyword_id": 1001},
}

LINK_FIXTURES: Fixtures = {
    "berlin-2019": {
        "link_token": "1jxf3jfn2k",
        "share_uid": "at9lxuqxpogaaba8",
        "can_comment": True,
    },
}

# Model → fixture rows, in insertion order.
FIXTURES: tuple[tuple[type[EntityBase], Fixtures], ...] = (
    (models.Account, ACCOUNT_FIXTURES),
    (models.Camera, CAMERA_FIXTURES),
    (models.Lens, LENS_FIXTURES),
    (models.Country, COUNTRY_FIXTURES),
    (models.Place, PLACE_FIXTURES),
    (models.Location, LOCATION_FIXTURES),
    (models.Photo, PHOTO_FIXTURES),
    (models.Description, DESCRIPTION_FIXTURES),
    (models.File, FILE_FIXTURES),
    (models.FileShare, FILE_SHARE_FIXTURES),
    (models.FileSync, FILE_SYNC_FIXTURES),
    (models.Album, ALBUM_FIXTURES),
    (models.PhotoAlbum, PHOTO_ALBUM_FIXTURES),
    (models.Label, LABEL_FIXTURES),
    (models.Category, CATEGORY_FIXTURES),
    (models.PhotoLabel, PHOTO_LABEL_FIXTURES),
    (models.Keyword, KEYWORD_FIXTURES),
    (models.PhotoKeyword, PHOTO_KEYWORD_FIXTURES),
    (models.Link, LINK_FIXTURES),
)


def create_test_fixtures(session: Session) -> int:
    """Insert every fixture row; returns the number of rows written."""
    count = 0
    for model, rows in FIXTURES:
        for values in rows.values():
            session.merge(model(**values))
            count += 1
    session.flush()
    logger.info("entity.fixtures_created", rows=count)
    return count
