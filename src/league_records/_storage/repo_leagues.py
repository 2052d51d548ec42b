# Area: Storage
"""
league_records._storage.repo_leagues — Leagues Repository
==========================================================

SQLite-backed league storage. Each league is one row holding its
record as JSON text.
"""

import json
from typing import Any, Dict, Optional

from .database import BaseRepository


class LeagueRepository(BaseRepository):
    """
    Repository for the leagues table.

    Implements the same load/save/delete/contains contract as
    MemoryStorage. The table must exist (see init_database).
    """

    def load(self, league_name: str) -> Optional[Dict[str, Any]]:
        """
        Load a league record.

        Args:
            league_name: Unique league name

        Returns:
            The record dict or None if no such league is stored
        """
        row = self._fetch_one(
            "SELECT record_json FROM leagues WHERE name = ?", (league_name,)
        )
        if row is None:
            return None
        return json.loads(row["record_json"])

    def save(self, league_name: str, record: Dict[str, Any]) -> None:
        """
        Insert or update a league record.

        Args:
            league_name: Unique league name
            record: JSON-compatible league record
        """
        query = """
            INSERT INTO leagues (name, record_json)
            VALUES (?, ?)
            ON CONFLICT(name) DO UPDATE SET
                record_json = excluded.record_json,
                updated_at = CURRENT_TIMESTAMP
        """
        self._write(query, (league_name, json.dumps(record, sort_keys=True)))

    def delete(self, league_name: str) -> None:
        """Remove a league record, if present."""
        self._write("DELETE FROM leagues WHERE name = ?", (league_name,))

    def contains(self, league_name: str) -> bool:
        row = self._fetch_one(
            "SELECT 1 AS found FROM leagues WHERE name = ?", (league_name,)
        )
        return row is not None

    def raw(self, league_name: str) -> Optional[str]:
        """Return the stored JSON text of a record."""
        row = self._fetch_one(
            "SELECT record_json FROM leagues WHERE name = ?", (league_name,)
        )
        return row["record_json"] if row else None

