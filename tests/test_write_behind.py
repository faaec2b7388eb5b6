# Area: Store Tests
"""Tests for WriteBehindStore."""

import threading

import pytest

from gamer_pool._store.database import init_database
from gamer_pool._store.repo_gamers import GamerRepository
from gamer_pool._store.write_behind import WriteBehindStore
from gamer_pool.errors import PersistenceError
from gamer_factory import make_gamer


class TestWriteBehindStore:
    """Tests for asynchronous add/delete, drain and error reporting."""

    @pytest.fixture
    def repo(self, tmp_path):
        path = str(tmp_path / "gamers.db")
        init_database(path)
        return GamerRepository(path)

    @pytest.fixture
    def store(self, repo):
        store = WriteBehindStore(repo, buffer_size=4)
        yield store
        store.close()

    def test_add_is_applied_after_drain(self, store, repo):
        alice = make_gamer("alice", 10, 5)
        store.submit_add(alice)
        store.drain()
        assert repo.get_gamer("alice") == alice

    def test_operations_apply_in_submission_order(self, store, repo):
        alice = make_gamer("alice", 10, 5)
        store.submit_add(alice)
        store.submit_delete(alice)
        store.submit_add(make_gamer("bob", 1, 1))
        store.drain()
        assert repo.get_gamer("alice") is None
        assert repo.get_gamer("bob") is not None

    def test_more_submissions_than_buffer(self, store, repo):
        for i in range(20):
            store.submit_add(make_gamer(f"g{i}", i, i))
        store.drain()
        assert repo.count() == 20

    def test_read_gamers(self, store):
        store.submit_add(make_gamer("alice", 10, 5))
        store.drain()
        assert [g.name for g in store.read_gamers()] == ["alice"]

    def test_failures_land_on_error_channel(self, tmp_path):
        broken = GamerRepository(str(tmp_path / "no_table.db"))
        store = WriteBehindStore(broken, buffer_size=2)
        try:
            store.submit_add(make_gamer("alice", 10, 5))
            store.submit_delete(make_gamer("bob", 1, 1))
            store.drain()
            errors = store.pop_errors()
        finally:
            store.close()

        assert [e.operation for e in errors] == ["add", "delete"]
        assert errors[0].gamer_name == "alice"
        assert store.pop_errors() == []

    def test_submit_after_close_raises(self, repo):
        store = WriteBehindStore(repo)
        store.close()
        assert store.closed
        with pytest.raises(PersistenceError):
            store.submit_add(make_gamer("alice", 10, 5))

    def test_close_is_idempotent(self, repo):
        store = WriteBehindStore(repo)
        store.close()
        store.close()

    def test_close_flushes_pending_work(self, repo):
        store = WriteBehindStore(repo, buffer_size=8)
        for i in range(8):
            store.submit_add(make_gamer(f"g{i}", i, i))
        store.close()
        assert repo.count() == 8

    def test_non_positive_buffer_rejected(self, repo):
        with pytest.raises(ValueError):
            WriteBehindStore(repo, buffer_size=0)


class _FlakyRepository(GamerRepository):
    """Repository whose save fails with a non-database error for one name."""

    def save_gamer(self, record):
        if record.name == "boom":
            raise RuntimeError("unexpected failure")
        super().save_gamer(record)


class TestWriteBehindResilience:
    """Tests for worker survival and submit/close races."""

    @pytest.fixture
    def db_path(self, tmp_path):
        path = str(tmp_path / "gamers.db")
        init_database(path)
        return path

    def test_worker_survives_non_database_error(self, db_path):
        repo = _FlakyRepository(db_path)
        store = WriteBehindStore(repo, buffer_size=2)
        try:
            store.submit_add(make_gamer("boom", 1, 1))
            store.drain()
            store.submit_add(make_gamer("alice", 10, 5))
            store.drain()
            errors = store.pop_errors()
        finally:
            store.close()

        assert [e.gamer_name for e in errors] == ["boom"]
        assert "unexpected failure" in str(errors[0])
        assert repo.get_gamer("alice") is not None

    def test_submits_racing_close_are_applied_or_rejected(self, db_path):
        repo = GamerRepository(db_path)
        store = WriteBehindStore(repo, buffer_size=2)
        accepted = []
        rejected = []
        lock = threading.Lock()

        def submitter(prefix):
            for i in range(50):
                name = f"{prefix}-{i}"
                try:
                    store.submit_add(make_gamer(name, i, i))
                except PersistenceError:
                    with lock:
                        rejected.append(name)
                else:
                    with lock:
                        accepted.append(name)

        threads = [threading.Thread(target=submitter, args=(f"t{n}",)) for n in range(4)]
        for t in threads:
            t.start()
        store.close()
        for t in threads:
            t.join(timeout=5)

        assert not any(t.is_alive() for t in threads)
        drainer = threading.Thread(target=store.drain, daemon=True)
        drainer.start()
        drainer.join(timeout=5)
        assert not drainer.is_alive()
        assert len(accepted) + len(rejected) == 200
        assert repo.count() == len(accepted)
