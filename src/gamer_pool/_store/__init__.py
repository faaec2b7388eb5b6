# Area: Store
"""
Gamer persistence: SQLite repository behind a write-behind queue.
"""

from .database import init_database, get_connection
from .repo_gamers import GamerRepository
from .write_behind import WriteBehindStore, StoreOp, BUFFER_SIZE_DEFAULT

__all__ = [
    "init_database",
    "get_connection",
    "GamerRepository",
    "WriteBehindStore",
    "StoreOp",
    "BUFFER_SIZE_DEFAULT",
]
