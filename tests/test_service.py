# Area: Service Tests
"""Tests for GamerPoolService."""

import pytest

from gamer_pool._config import ServiceConfig
from gamer_pool.errors import GamerNotFoundError
from gamer_pool.service import GamerPoolService, open_store
from gamer_factory import make_gamer


class TestServiceInMemory:
    """Tests for the service without persistence."""

    @pytest.fixture
    def service(self):
        service = GamerPoolService(ServiceConfig(group_size=2))
        yield service
        service.close()

    def test_add_and_get_gamer(self, service):
        alice = make_gamer("alice", 10, 5)
        service.add_gamer(alice)
        assert service.get_gamer("alice") == alice

    def test_delete_gamer(self, service):
        service.add_gamer(make_gamer("alice", 10, 5))
        removed = service.delete_gamer("alice")
        assert removed.name == "alice"
        with pytest.raises(GamerNotFoundError):
            service.get_gamer("alice")

    def test_delete_missing_gamer_raises(self, service):
        with pytest.raises(GamerNotFoundError):
            service.delete_gamer("ghost")

    def test_get_groups_end_to_end(self, service):
        service.add_gamer(make_gamer("A", 10, 5))
        service.add_gamer(make_gamer("B", 12, 6))
        service.add_gamer(make_gamer("C", 50, 40))

        groups = service.get_groups()

        assert len(groups) == 1
        assert set(groups[0].members) == {"A", "B"}
        assert service.get_group_stats(0).avg_skill == 11
        assert service.get_group_stats(1).is_empty()

    def test_reset_groups_sees_pool_changes(self, service):
        for i in range(4):
            service.add_gamer(make_gamer(f"g{i}", i, i))
        assert len(service.get_groups()) == 2
        service.delete_gamer("g0")
        assert len(service.reset_groups()) == 1

    def test_no_persistence_errors_without_store(self, service):
        assert service.store is None
        assert service.persistence_errors() == []

    def test_invalid_config_rejected(self):
        with pytest.raises(ValueError):
            GamerPoolService(ServiceConfig(buffer_size=-1))


class TestServiceWithStore:
    """Tests for the service with SQLite write-behind."""

    @pytest.fixture
    def config(self, tmp_path):
        return ServiceConfig(group_size=2, store_in_db=True, db_path=str(tmp_path / "gamers.db"))

    def test_open_store_disabled(self):
        assert open_store(ServiceConfig()) is None

    def test_open_store_failure_falls_back_to_memory(self, tmp_path):
        config = ServiceConfig(store_in_db=True, db_path=str(tmp_path))
        service = GamerPoolService.from_config(config)
        assert service.store is None
        service.add_gamer(make_gamer("alice", 1, 1))
        assert service.get_gamer("alice").name == "alice"

    def test_adds_and_deletes_are_persisted(self, config):
        service = GamerPoolService.from_config(config)
        service.add_gamer(make_gamer("alice", 10, 5))
        service.add_gamer(make_gamer("bob", 11, 5))
        service.delete_gamer("bob")
        service.store.drain()
        repo = service.store.repository
        assert repo.get_gamer("alice") is not None
        assert repo.get_gamer("bob") is None
        service.close()

    def test_get_groups_resyncs_from_database(self, config):
        first = GamerPoolService.from_config(config)
        for name, skill in (("a", 1), ("b", 2), ("c", 3), ("d", 4)):
            first.add_gamer(make_gamer(name, skill, 1))
        first.close()

        second = GamerPoolService.from_config(config)
        try:
            groups = second.get_groups()
            assert len(groups) == 2
            assert second.get_gamer("c").skill == 3
            assert second.persistence_errors() == []
        finally:
            second.close()

    def test_reset_groups_does_not_resync(self, config):
        first = GamerPoolService.from_config(config)
        first.add_gamer(make_gamer("a", 1, 1))
        first.add_gamer(make_gamer("b", 2, 1))
        first.close()

        second = GamerPoolService.from_config(config)
        try:
            assert second.reset_groups() == []
        finally:
            second.close()

    def test_open_store_on_existing_database(self, config):
        first = GamerPoolService.from_config(config)
        first.add_gamer(make_gamer("a", 1, 1))
        first.close()

        store = open_store(config)
        try:
            assert store is not None
            assert store.repository.count() == 1
            assert store.repository.get_gamer("a").skill == 1
        finally:
            store.close()
