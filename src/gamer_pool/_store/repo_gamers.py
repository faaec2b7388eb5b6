# Area: Store
"""
gamer_pool._store.repo_gamers — Gamers Repository
=================================================

Repository for the gamers table. One row per gamer name; saving an
existing name replaces the row.
"""

import sqlite3
from typing import Any, Dict, Iterator, Optional

from pydantic import ValidationError

from .database import BaseRepository
from ..errors import PersistenceError
from ..types import GamerRecord


def _row_to_record(row: Dict[str, Any]) -> GamerRecord:
    return GamerRecord(
        name=row["name"],
        skill=row["skill"],
        latency=row["latency"],
        connect_time=row["connection_time"],
    )


class GamerRepository(BaseRepository):
    """
    Repository for gamers table.

    Handles saving, deleting and reading persisted gamers.
    """

    def save_gamer(self, record: GamerRecord) -> None:
        """
        Save a gamer, replacing any row with the same name.

        Args:
            record: Gamer to persist
        """
        query = """
            INSERT OR REPLACE INTO gamers
            (name, skill, latency, connection_time)
            VALUES (?, ?, ?, ?)
        """
        self._execute(query, (
            record.name, record.skill, record.latency,
            record.connect_time.isoformat(),
        ))

    def delete_gamer(self, name: str) -> None:
        """Delete a gamer by name; missing names are ignored."""
        self._execute("DELETE FROM gamers WHERE name = ?", (name,))

    def get_gamer(self, name: str) -> Optional[GamerRecord]:
        """
        Get a gamer by name.

        Returns:
            The record or None if not found
        """
        row = self._execute_one("SELECT * FROM gamers WHERE name = ?", (name,))
        return _row_to_record(row) if row else None

    def iter_gamers(self) -> Iterator[GamerRecord]:
        """
        Lazily yield every persisted gamer.

        Raises:
            PersistenceError: If the query or a row fails
        """
        try:
            conn = self._get_conn()
        except sqlite3.Error as e:
            raise PersistenceError("read", str(e)) from e
        try:
            cursor = conn.execute(
                "SELECT name, skill, latency, connection_time FROM gamers ORDER BY id"
            )
            for row in cursor:
                yield _row_to_record(dict(row))
        except (sqlite3.Error, ValidationError) as e:
            raise PersistenceError("read", str(e)) from e
        finally:
            conn.close()

    def count(self) -> int:
        row = self._execute_one("SELECT COUNT(*) AS n FROM gamers")
        return row["n"] if row else 0
