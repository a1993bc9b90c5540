"""Tests for pictorium.core.database against real SQLite databases."""

import pytest
from sqlalchemy import inspect, select, text
from sqlalchemy.exc import OperationalError

from pictorium.core.database import Database
from pictorium.core.errors import TableNotReadyError
from pictorium.core.protocols import SchemaDatabase
from pictorium.core.settings import PictoriumSettings
from pictorium.entity.models import Camera
from pictorium.entity.registry import ENTITIES


def columns(db: Database, table: str) -> set[str]:
    return {column["name"] for column in inspect(db.engine).get_columns(table)}


class TestConstruction:
    def test_requires_url_or_engine(self):
        with pytest.raises(ValueError):
            Database()

    def test_wraps_existing_engine(self, memory_db):
        other = Database(engine=memory_db.engine)
        assert other.engine is memory_db.engine

    def test_from_settings(self):
        db = Database.from_settings(PictoriumSettings(database_url="sqlite://"))
        assert db.dialect == "sqlite"
        assert db.url == "sqlite://"
        db.dispose()

    def test_repr(self, memory_db):
        assert repr(memory_db) == "Database('sqlite://')"

    def test_satisfies_protocol(self, memory_db):
        assert isinstance(memory_db, SchemaDatabase)


class TestCreateTable:
    def test_creates_missing_table(self, memory_db):
        assert memory_db.create_table(ENTITIES["cameras"]) is True
        assert "cameras" in memory_db.table_names()

    def test_existing_table_is_verified(self, memory_db):
        memory_db.create_table(ENTITIES["cameras"])
        assert memory_db.create_table(ENTITIES["cameras"]) is False

    def test_adds_missing_columns(self, memory_db):
        with memory_db.engine.begin() as conn:
            conn.execute(text("CREATE TABLE cameras (id INTEGER PRIMARY KEY, camera_slug VARCHAR(255))"))
            conn.execute(text("INSERT INTO cameras (id, camera_slug) VALUES (1, 'zz')"))

        assert memory_db.create_table(ENTITIES["cameras"]) is False

        assert columns(memory_db, "cameras") == set(Camera.__table__.columns.keys())
        with memory_db.session() as session:
            assert session.scalars(select(Camera.camera_slug)).all() == ["zz"]

    def test_never_removes_columns(self, memory_db):
        with memory_db.engine.begin() as conn:
            conn.execute(text("CREATE TABLE lenses (id INTEGER PRIMARY KEY, legacy VARCHAR(8))"))
        memory_db.create_table(ENTITIES["lenses"])
        assert "legacy" in columns(memory_db, "lenses")

    def test_driver_error_propagates(self, tmp_path):
        broken = Database(f"sqlite:///{tmp_path / 'missing' / 'x.db'}")
        with pytest.raises(OperationalError):
            broken.create_table(ENTITIES["cameras"])


class TestDropTable:
    def test_drops_table(self, memory_db):
        memory_db.create_table(ENTITIES["albums"])
        memory_db.drop_table(ENTITIES["albums"])
        assert "albums" not in memory_db.table_names()

    def test_missing_table_is_not_an_error(self, memory_db):
        memory_db.drop_table(ENTITIES["albums"])


class TestProbe:
    def test_readable_table(self, memory_db):
        memory_db.create_table(ENTITIES["photos"])
        memory_db.probe("photos")

    def test_missing_table_raises_not_ready(self, memory_db):
        with pytest.raises(TableNotReadyError) as exc_info:
            memory_db.probe("photos")
        assert exc_info.value.table == "photos"
        assert isinstance(exc_info.value.cause, OperationalError)

    def test_probe_does_not_modify(self, sqlite_db):
        sqlite_db.create_table(ENTITIES["keywords"])
        sqlite_db.probe("keywords")
        with sqlite_db.engine.connect() as conn:
            assert conn.execute(text("SELECT COUNT(*) FROM keywords")).scalar() == 0


class TestSession:
    def test_attributes_survive_commit(self, sqlite_db):
        sqlite_db.create_table(ENTITIES["cameras"])
        with sqlite_db.session() as session:
            camera = Camera(camera_slug="apple-iphone-se", camera_model="iPhone SE")
            session.add(camera)
        assert camera.camera_model == "iPhone SE"
        assert camera.id is not None

    def test_commits_on_success(self, sqlite_db):
        sqlite_db.create_table(ENTITIES["cameras"])
        with sqlite_db.session() as session:
            session.add(Camera(camera_slug="canon-eos-6d", camera_model="EOS 6D"))
        with sqlite_db.session() as session:
            assert session.scalars(select(Camera.camera_slug)).all() == ["canon-eos-6d"]

    def test_rolls_back_on_error(self, sqlite_db):
        sqlite_db.create_table(ENTITIES["cameras"])
        with pytest.raises(RuntimeError):
            with sqlite_db.session() as session:
                session.add(Camera(camera_slug="canon-eos-6d"))
                session.flush()
                raise RuntimeError("abort")
        with sqlite_db.session() as session:
            assert session.scalars(select(Camera)).all() == []
