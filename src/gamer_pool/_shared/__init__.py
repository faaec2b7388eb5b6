# Area: Shared
"""
Shared utilities used by the pool, engine, store and service.

This package contains:
- Logging configuration
- The readers/writer lock guarding the gamer pool
"""

from .logging_config import setup_logging, log_error
from .rwlock import ReadWriteLock

__all__ = [
    "setup_logging",
    "log_error",
    "ReadWriteLock",
]
