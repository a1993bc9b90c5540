"""Tests for pictorium.entity.testdb -- once-per-process test bootstrap."""

import threading
import time

import pytest
from sqlalchemy import func, select

from pictorium.core.database import Database
from pictorium.core.errors import FatalSchemaError, ProviderNotRegisteredError
from pictorium.entity import models, testdb
from pictorium.entity.gate import FixtureGate, ProviderSlot
from pictorium.entity.lifecycle import reset_db
from pictorium.entity.testdb import has_provider, init_test_db, init_test_fixtures, provider


@pytest.fixture
def slot():
    slot = ProviderSlot()
    yield slot
    if slot.get() is not None:
        slot.get().dispose()


@pytest.fixture
def gate():
    return FixtureGate()


def dsn(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'test.db'}"


class TestInitTestDb:
    def test_first_call_initializes(self, tmp_path, slot, gate, settings):
        db = init_test_db(dsn(tmp_path), slot=slot, gate=gate, settings=settings)

        assert isinstance(db, Database)
        assert has_provider(slot) is True
        assert provider(slot) is db
        assert gate.done is True
        with db.session() as session:
            assert session.scalar(select(func.count()).select_from(models.Photo)) == 2

    def test_second_call_is_noop(self, tmp_path, slot, gate, settings):
        db = init_test_db(dsn(tmp_path), slot=slot, gate=gate, settings=settings)
        with db.session() as session:
            session.add(models.Album(album_uid="extra", album_slug="extra", album_name="Extra"))

        assert init_test_db(dsn(tmp_path), slot=slot, gate=gate, settings=settings) is None
        assert provider(slot) is db
        with db.session() as session:
            assert session.scalar(select(func.count()).select_from(models.Album)) == 3

    def test_fixtures_run_once_per_gate(self, memory_db, gate, settings):
        assert init_test_fixtures(memory_db, gate=gate, settings=settings) is True
        with memory_db.session() as session:
            session.add(models.Keyword(keyword="extra"))
        assert init_test_fixtures(memory_db, gate=gate, settings=settings) is False
        with memory_db.session() as session:
            assert session.scalar(select(func.count()).select_from(models.Keyword)) == 3

    def test_failed_reset_is_fatal_for_later_callers(self, tmp_path, slot, gate, settings):
        blocker = Database(dsn(tmp_path))
        with blocker.engine.begin() as conn:
            conn.exec_driver_sql("CREATE VIEW photos AS SELECT 1 AS id")
        blocker.dispose()

        with pytest.raises(FatalSchemaError):
            init_test_db(dsn(tmp_path), slot=slot, gate=gate, settings=settings)
        with pytest.raises(FatalSchemaError):
            init_test_fixtures(provider(slot), gate=gate, settings=settings)
        with pytest.raises(FatalSchemaError):
            init_test_db(dsn(tmp_path), slot=slot, gate=gate, settings=settings)

    def test_late_caller_waits_for_reset(self, tmp_path, monkeypatch, slot, gate, settings):
        started = threading.Event()

        def slow_reset(*args, **kwargs):
            started.set()
            time.sleep(0.3)
            reset_db(*args, **kwargs)

        monkeypatch.setattr("pictorium.entity.testdb.reset_db", slow_reset)
        first = threading.Thread(
            target=init_test_db,
            args=(dsn(tmp_path),),
            kwargs={"slot": slot, "gate": gate, "settings": settings},
        )
        first.start()
        started.wait()

        assert init_test_db(dsn(tmp_path), slot=slot, gate=gate, settings=settings) is None
        assert gate.done is True
        with provider(slot).session() as session:
            assert session.scalar(select(func.count()).select_from(models.Photo)) == 2
        first.join()

    def test_late_caller_does_not_reset_again(self, tmp_path, monkeypatch, slot, gate, settings):
        resets = []

        def counting_reset(*args, **kwargs):
            resets.append(1)
            reset_db(*args, **kwargs)

        monkeypatch.setattr("pictorium.entity.testdb.reset_db", counting_reset)
        threads = [
            threading.Thread(
                target=init_test_db,
                args=(dsn(tmp_path),),
                kwargs={"slot": slot, "gate": gate, "settings": settings},
            )
            for _ in range(4)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert resets == [1]
        assert has_provider(slot) is True


class TestDefaults:
    def test_process_wide_slot_and_gate(self):
        assert isinstance(testdb.DEFAULT_SLOT, ProviderSlot)
        assert isinstance(testdb.DEFAULT_GATE, FixtureGate)

    def test_unregistered_provider(self, slot):
        assert has_provider(slot) is False
        with pytest.raises(ProviderNotRegisteredError):
            provider(slot)
