# Area: Storage
"""
Storage - Persisted league records.

This package handles:
- Conversion between League objects and storage records
- In-memory storage
- SQLite storage

A storage is any object with load/save/delete/contains methods keyed
by league name.
"""

from .database import init_database, get_connection, BaseRepository
from .memory import MemoryStorage
from .record import RECORD_VERSION, league_from_record, league_to_record
from .repo_leagues import LeagueRepository

__all__ = [
    "init_database",
    "get_connection",
    "BaseRepository",
    "MemoryStorage",
    "RECORD_VERSION",
    "league_from_record",
    "league_to_record",
    "LeagueRepository",
]
