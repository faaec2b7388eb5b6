"""
gamer_pool — Real-time matchmaking pool
=======================================

Holds waiting gamers (name, skill, latency) in a shared pool and
batches them into fixed-size groups with a small skill and latency
spread.

Quick Start:
    from gamer_pool import GamerRecord, GamerPool, MatchEngine

    pool = GamerPool()
    pool.add(GamerRecord(name="alice", skill=10, latency=5))
    pool.add(GamerRecord(name="bob", skill=12, latency=6))

    engine = MatchEngine(group_size=2)
    engine.recalculate(pool.snapshot())
    stats = engine.get_group_stats(0)

Service Mode (pool + engine + optional SQLite write-behind):
    from gamer_pool import GamerPoolService, load_config
    service = GamerPoolService.from_config(load_config())
"""

from ._config import ServiceConfig, load_config
from ._shared import setup_logging
from .engine import MatchEngine
from .errors import (
    GamerPoolError,
    GamerNotFoundError,
    MalformedGamerError,
    PersistenceError,
)
from .pool import GamerPool
from .service import GamerPoolService
from .stats import calculate_group_stats
from .types import GamerRecord, Group, GroupStatistics

__all__ = [
    # Main classes
    "GamerPool",
    "MatchEngine",
    "GamerPoolService",
    "calculate_group_stats",
    # Configuration
    "ServiceConfig",
    "load_config",
    "setup_logging",
    # Errors
    "GamerPoolError",
    "GamerNotFoundError",
    "MalformedGamerError",
    "PersistenceError",
    # Types
    "GamerRecord",
    "Group",
    "GroupStatistics",
]
__version__ = "1.0.0"
