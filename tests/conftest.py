# Area: Shared Tests
"""Shared fixtures for gamer_pool tests."""

import logging

import pytest


@pytest.fixture
def restore_package_logger():
    """Undo setup_logging() so other tests see default logging."""
    pkg_logger = logging.getLogger("gamer_pool")
    yield pkg_logger
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()
    pkg_logger.propagate = True
    pkg_logger.setLevel(logging.NOTSET)
