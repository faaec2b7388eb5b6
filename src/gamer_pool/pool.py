# Area: Core
"""
gamer_pool.pool — Concurrent gamer registry
===========================================

Holds every known gamer keyed by name. All operations are safe to
call from several request threads at once: lookups and snapshots
share the lock, adds and deletes hold it exclusively.
"""

import logging
from typing import Dict

from ._shared.rwlock import ReadWriteLock
from .errors import GamerNotFoundError
from .types import GamerRecord

logger = logging.getLogger("gamer_pool.pool")


class GamerPool:
    """
    Registry of GamerRecord keyed by name.

    A second add with an existing name replaces the stored record
    entirely (last write wins).
    """

    def __init__(self):
        self._pool: Dict[str, GamerRecord] = {}
        self._lock = ReadWriteLock()

    def add(self, record: GamerRecord) -> None:
        with self._lock.write_locked():
            self._pool[record.name] = record
        logger.debug(f"Added gamer {record.name}")

    def get(self, name: str) -> GamerRecord:
        """
        Look up a gamer by name.

        Raises:
            GamerNotFoundError: If no gamer has that name
        """
        with self._lock.read_locked():
            record = self._pool.get(name)
        if record is None:
            raise GamerNotFoundError(name)
        return record

    def delete(self, record: GamerRecord) -> None:
        """Remove the gamer with the record's name; absent names are ignored."""
        with self._lock.write_locked():
            removed = self._pool.pop(record.name, None)
        if removed is not None:
            logger.debug(f"Deleted gamer {record.name}")

    def snapshot(self) -> Dict[str, GamerRecord]:
        """Point-in-time copy; mutating it does not touch the pool."""
        with self._lock.read_locked():
            return dict(self._pool)

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._pool)

    def __contains__(self, name: object) -> bool:
        with self._lock.read_locked():
            return name in self._pool
