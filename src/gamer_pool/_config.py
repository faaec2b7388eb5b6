# Area: Shared
"""
gamer_pool._config — Service Configuration
==========================================

Resolves service settings from the environment. A ``.env`` file in
the working directory is loaded first; real environment variables
win over it.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from ._store.write_behind import BUFFER_SIZE_DEFAULT

logger = logging.getLogger("gamer_pool.config")

MAX_GROUP_SIZE_DEFAULT = 3
DB_PATH_DEFAULT = "gamers.db"
LOG_FILE_DEFAULT = "gamer_pool.log"

TRUE_VALUES = ("true", "1", "yes", "on")
FALSE_VALUES = ("false", "0", "no", "off")


@dataclass
class ServiceConfig:
    """Resolved settings for one service instance."""
    group_size: int = MAX_GROUP_SIZE_DEFAULT
    store_in_db: bool = False
    buffer_size: int = BUFFER_SIZE_DEFAULT
    db_path: str = DB_PATH_DEFAULT
    log_file: str = LOG_FILE_DEFAULT


def _int_setting(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key, "")
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid value for {key}: {raw!r}; using {default}")
        return default


def _bool_setting(env: Mapping[str, str], key: str, default: bool) -> bool:
    raw = env.get(key, "").strip().lower()
    if not raw:
        return default
    if raw in TRUE_VALUES:
        return True
    if raw in FALSE_VALUES:
        return False
    logger.warning(f"Invalid value for {key}: {raw!r}; using {default}")
    return default


def load_config(
    env: Optional[Mapping[str, str]] = None, dotenv_path: Optional[str] = None
) -> ServiceConfig:
    """
    Build a ServiceConfig from environment variables.

    Args:
        env: Mapping to read instead of os.environ (no .env loading then)
        dotenv_path: Explicit .env file to load before reading os.environ

    Returns:
        Resolved configuration; unparseable values fall back to defaults
    """
    if env is None:
        load_dotenv(dotenv_path)
        env = os.environ

    return ServiceConfig(
        group_size=_int_setting(env, "MAX_GROUP_SIZE", MAX_GROUP_SIZE_DEFAULT),
        store_in_db=_bool_setting(env, "STORE_IN_DB", False),
        buffer_size=_int_setting(env, "BUFFER_SIZE", BUFFER_SIZE_DEFAULT),
        db_path=env.get("DB_PATH") or DB_PATH_DEFAULT,
        log_file=env.get("LOG_FILE") or LOG_FILE_DEFAULT,
    )


def validate_config(config: ServiceConfig) -> None:
    """
    Validate settings that would break the service.

    Raises:
        ValueError: If the buffer size is not positive
    """
    if config.buffer_size <= 0:
        raise ValueError(f"BUFFER_SIZE must be positive, got {config.buffer_size}")
