# Area: Shared Tests
"""Shared fixtures."""

import logging

import pytest

from league_records import LeagueStore, MemoryStorage


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging() so caplog sees package records in every test."""
    yield
    pkg_logger = logging.getLogger("league_records")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()
    pkg_logger.setLevel(logging.NOTSET)
    pkg_logger.propagate = True


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage):
    return LeagueStore(storage)
