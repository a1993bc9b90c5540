"""Tests for pictorium.entity.waiter -- the migration probe loop."""

import pytest

from pictorium.core.errors import ConfigError, MigrationTimeoutError, TableNotReadyError
from pictorium.core.settings import PictoriumSettings
from pictorium.entity.registry import ENTITIES, EntityRegistry
from pictorium.entity.waiter import MigrationWaiter
from tests._support import NEVER, FakeDatabase


def make_waiter(db, sleep, attempts=100, interval=0.05):
    return MigrationWaiter(db, attempts=attempts, interval=interval, sleep=sleep)


class TestWaitFor:
    def test_ready_on_first_probe_never_sleeps(self, fake_db, sleep):
        assert make_waiter(fake_db, sleep).wait_for("photos") == 1
        assert fake_db.probes["photos"] == 1
        assert sleep.count == 0

    @pytest.mark.parametrize("ready_on", [2, 5, 100])
    def test_ready_on_probe_k(self, sleep, ready_on):
        db = FakeDatabase(ready_on={"photos": ready_on})
        assert make_waiter(db, sleep).wait_for("photos") == ready_on
        assert db.probes["photos"] == ready_on
        assert sleep.count == ready_on - 1

    def test_sleeps_for_interval(self, sleep):
        db = FakeDatabase(ready_on={"photos": 3})
        make_waiter(db, sleep, interval=0.25).wait_for("photos")
        assert sleep.calls == [0.25, 0.25]

    def test_never_readable_times_out(self, sleep):
        db = FakeDatabase(ready_on={"photos": NEVER})
        with pytest.raises(MigrationTimeoutError) as exc_info:
            make_waiter(db, sleep).wait_for("photos")

        error = exc_info.value
        assert error.table == "photos"
        assert error.attempts == 100
        assert isinstance(error.cause, TableNotReadyError)
        assert db.probes["photos"] == 100
        assert sleep.count == 99

    def test_ready_on_probe_after_ceiling_times_out(self, sleep):
        db = FakeDatabase(ready_on={"photos": 101})
        with pytest.raises(MigrationTimeoutError):
            make_waiter(db, sleep).wait_for("photos")
        assert db.probes["photos"] == 100

    def test_single_attempt(self, sleep):
        db = FakeDatabase(ready_on={"photos": NEVER})
        with pytest.raises(MigrationTimeoutError):
            make_waiter(db, sleep, attempts=1).wait_for("photos")
        assert db.probes["photos"] == 1
        assert sleep.count == 0

    def test_other_errors_propagate(self, sleep):
        class BrokenDatabase(FakeDatabase):
            def probe(self, table):
                raise RuntimeError("driver exploded")

        with pytest.raises(RuntimeError):
            make_waiter(BrokenDatabase(), sleep).wait_for("photos")
        assert sleep.count == 0


class TestWaitAll:
    def test_empty_registry(self, fake_db, sleep):
        assert make_waiter(fake_db, sleep).wait_all(EntityRegistry()) == {}
        assert fake_db.calls == []
        assert sleep.count == 0

    def test_tables_waited_sequentially(self, sleep):
        db = FakeDatabase(ready_on={"cameras": 3, "lenses": 2})
        registry = ENTITIES.subset("cameras", "lenses")
        assert make_waiter(db, sleep).wait_all(registry) == {"cameras": 3, "lenses": 2}
        assert db.calls_of("probe") == ["cameras"] * 3 + ["lenses"] * 2
        assert sleep.count == 3

    def test_stops_at_first_timeout(self, sleep):
        db = FakeDatabase(ready_on={"files": NEVER})
        with pytest.raises(MigrationTimeoutError):
            make_waiter(db, sleep, attempts=3).wait_all(ENTITIES)
        assert db.calls_of("probe") == ["accounts", "files", "files", "files"]


class TestConfiguration:
    def test_rejects_zero_attempts(self, fake_db):
        with pytest.raises(ConfigError):
            MigrationWaiter(fake_db, attempts=0)

    def test_rejects_negative_interval(self, fake_db):
        with pytest.raises(ConfigError):
            MigrationWaiter(fake_db, interval=-1)

    def test_defaults(self, fake_db):
        waiter = MigrationWaiter(fake_db)
        assert waiter.attempts == 100
        assert waiter.interval == 0.05

    def test_from_settings(self, fake_db, settings, sleep):
        waiter = MigrationWaiter.from_settings(fake_db, settings, sleep=sleep)
        assert waiter.attempts == 5
        assert waiter.interval == 0.0

    def test_against_sqlite(self, memory_db, sleep):
        memory_db.create_table(ENTITIES["photos"])
        assert make_waiter(memory_db, sleep).wait_for("photos") == 1
        with pytest.raises(MigrationTimeoutError):
            make_waiter(memory_db, sleep, attempts=2).wait_for("albums")
        assert sleep.count == 1
