# Area: Store
"""
gamer_pool._store.database — Database Initialization
====================================================

SQLite connection handling for gamer persistence. Connections use WAL
mode and a busy timeout because the write-behind worker writes while
request threads read.
"""

import sqlite3
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger("gamer_pool.store.database")

SCHEMA_PATH = Path(__file__).parent / "schema.sql"

# Seconds to wait on a locked database before failing
DB_TIMEOUT = 30.0


def get_connection(db_path: str = "gamers.db") -> sqlite3.Connection:
    """
    Open a configured connection.

    Args:
        db_path: Path to the SQLite database file

    Returns:
        Connection in WAL mode with a dict-friendly row factory
    """
    conn = sqlite3.connect(db_path, timeout=DB_TIMEOUT)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL;")
    return conn


def init_database(db_path: str = "gamers.db") -> None:
    """
    Create the gamers table if it does not exist.

    Args:
        db_path: Path to the SQLite database file
    """
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    conn = get_connection(db_path)
    try:
        conn.executescript(SCHEMA_PATH.read_text(encoding="utf-8"))
        conn.commit()
        logger.info(f"Gamer database ready at {db_path}")
    finally:
        conn.close()


class BaseRepository:
    """
    Base class for database repositories.

    Opens a fresh connection per call, so one repository can be
    shared between request threads and the write-behind worker.
    """

    def __init__(self, db_path: str = "gamers.db"):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        return get_connection(self.db_path)

    def _execute(
        self, query: str, params: tuple = (), fetch: bool = False
    ) -> Optional[list]:
        """
        Run one statement.

        Args:
            query: SQL query string
            params: Query parameters
            fetch: Return rows as dicts instead of committing

        Returns:
            Rows if fetch=True, else None
        """
        conn = self._get_conn()
        try:
            cursor = conn.execute(query, params)
            if fetch:
                return [dict(row) for row in cursor.fetchall()]
            conn.commit()
            return None
        finally:
            conn.close()

    def _execute_one(self, query: str, params: tuple = ()) -> Optional[dict]:
        results = self._execute(query, params, fetch=True)
        return results[0] if results else None
