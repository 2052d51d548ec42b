# Area: Storage
"""
league_records._storage.database — SQLite connection handling
==============================================================

Creates the league database from schema.sql and gives repositories a
short-lived connection per operation.
"""

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Tuple

logger = logging.getLogger("league_records.storage")

SCHEMA_PATH = Path(__file__).parent / "schema.sql"
DEFAULT_DB_PATH = "league_records.db"


def get_connection(db_path: str = DEFAULT_DB_PATH) -> sqlite3.Connection:
    """
    Open a connection whose rows can be read by column name.

    Args:
        db_path: Path to the SQLite database file

    Returns:
        SQLite connection with sqlite3.Row as row factory
    """
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def init_database(db_path: str = DEFAULT_DB_PATH) -> None:
    """
    Create the league tables if they do not exist yet.

    Safe to call on every start; the parent directory is created as well.

    Args:
        db_path: Path to the SQLite database file
    """
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    schema = SCHEMA_PATH.read_text(encoding="utf-8")
    conn = get_connection(db_path)
    try:
        conn.executescript(schema)
        conn.commit()
    finally:
        conn.close()
    logger.debug(f"Database ready at {db_path}")


class BaseRepository:
    """
    Base class for repositories over one SQLite file.

    Every operation runs in its own transaction: committed when the
    block completes, rolled back when it raises.
    """

    def __init__(self, db_path: str = DEFAULT_DB_PATH):
        self.db_path = db_path

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        conn = get_connection(self.db_path)
        try:
            with conn:
                yield conn
        finally:
            conn.close()

    def _write(self, query: str, params: Tuple[Any, ...] = ()) -> int:
        """Run a modifying statement and return the affected row count."""
        with self._transaction() as conn:
            return conn.execute(query, params).rowcount

    def _fetch_one(self, query: str, params: Tuple[Any, ...] = ()) -> Optional[Dict[str, Any]]:
        """Run a query and return its first row as a dict, or None."""
        with self._transaction() as conn:
            row = conn.execute(query, params).fetchone()
        return dict(row) if row is not None else None
