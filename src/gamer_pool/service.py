# Area: Service
"""
gamer_pool.service — Gamer pool service
=======================================

Wires the pool, the match engine and the optional write-behind store
into the operations a request layer calls.

Usage:
    config = load_config()
    service = GamerPoolService.from_config(config)
    service.add_gamer(GamerRecord(name="alice", skill=10, latency=5))
    groups = service.get_groups()
    stats = service.get_group_stats(0)
    service.close()

In-memory state is authoritative. Persistence runs behind the pool
and its failures are logged, never rolled back into the pool.
"""

import logging
import sqlite3
from typing import List, Optional

from ._config import ServiceConfig, validate_config
from ._store import GamerRepository, WriteBehindStore, init_database
from .engine import MatchEngine
from .errors import PersistenceError
from .pool import GamerPool
from .types import GamerRecord, Group, GroupStatistics

logger = logging.getLogger("gamer_pool.service")


def open_store(config: ServiceConfig) -> Optional[WriteBehindStore]:
    """
    Open the SQLite store described by config.

    Returns:
        A running WriteBehindStore, or None when persistence is off or
        the database cannot be opened
    """
    if not config.store_in_db:
        return None
    repository = GamerRepository(config.db_path)
    try:
        init_database(config.db_path)
        persisted = repository.count()
    except (OSError, sqlite3.Error) as e:
        logger.error(
            f"Could not open database {config.db_path}: {e}. "
            "Continuing with the in-memory pool only"
        )
        return None
    logger.info(f"Gamer store open with {persisted} persisted gamer(s)")
    return WriteBehindStore(repository, config.buffer_size)


class GamerPoolService:
    """
    Facade over pool, engine and store.

    Attributes:
        pool: Registry of known gamers
        engine: Match engine sized from the config
        store: Write-behind store, or None when running in memory only
    """

    def __init__(self, config: ServiceConfig, store: Optional[WriteBehindStore] = None):
        validate_config(config)
        self.config = config
        self.pool = GamerPool()
        self.engine = MatchEngine(config.group_size)
        self.store = store

    @classmethod
    def from_config(cls, config: ServiceConfig) -> "GamerPoolService":
        validate_config(config)
        return cls(config, store=open_store(config))

    # ── Gamers ───────────────────────────────────────────────

    def add_gamer(self, record: GamerRecord) -> None:
        self.pool.add(record)
        logger.info(f"Gamer joined: {record.name} (skill={record.skill}, latency={record.latency})")
        if self.store is not None:
            self.store.submit_add(record)

    def get_gamer(self, name: str) -> GamerRecord:
        return self.pool.get(name)

    def delete_gamer(self, name: str) -> GamerRecord:
        """
        Remove a gamer by name.

        Raises:
            GamerNotFoundError: If no gamer has that name
        """
        record = self.pool.get(name)
        self.pool.delete(record)
        logger.info(f"Gamer left: {name}")
        if self.store is not None:
            self.store.submit_delete(record)
        return record

    # ── Groups ───────────────────────────────────────────────

    def get_groups(self) -> List[Group]:
        """Resynchronise from the store if there is one, then regroup."""
        if self.store is not None:
            self._resync_from_store()
        return self.engine.recalculate(self.pool.snapshot())

    def reset_groups(self) -> List[Group]:
        """Regroup from the in-memory pool."""
        return self.engine.recalculate(self.pool.snapshot())

    def get_group_stats(self, number: int) -> GroupStatistics:
        return self.engine.get_group_stats(number)

    def _resync_from_store(self) -> None:
        self.store.drain()
        try:
            persisted = list(self.store.read_gamers())
        except PersistenceError as e:
            logger.error(f"Reading gamers from the database failed: {e}")
            return
        for record in persisted:
            self.pool.add(record)
        logger.debug(f"Resynchronised {len(persisted)} gamer(s) from the database")

    # ── Lifecycle ────────────────────────────────────────────

    def persistence_errors(self) -> List[PersistenceError]:
        if self.store is None:
            return []
        return self.store.pop_errors()

    def close(self) -> None:
        if self.store is not None:
            self.store.close()
