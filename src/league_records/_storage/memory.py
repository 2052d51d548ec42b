# Area: Storage
"""
league_records._storage.memory — In-memory league storage
==========================================================

Dict-backed storage for tests and embedding. Records are kept as JSON
text, so a loaded record never aliases a stored one.
"""

import json
from typing import Any, Dict, Optional


class MemoryStorage:
    """Key-value storage of league records held in a dict."""

    def __init__(self):
        self._records: Dict[str, str] = {}

    def load(self, league_name: str) -> Optional[Dict[str, Any]]:
        raw = self._records.get(league_name)
        return json.loads(raw) if raw is not None else None

    def save(self, league_name: str, record: Dict[str, Any]) -> None:
        self._records[league_name] = json.dumps(record, sort_keys=True)

    def delete(self, league_name: str) -> None:
        self._records.pop(league_name, None)

    def contains(self, league_name: str) -> bool:
        return league_name in self._records

    def raw(self, league_name: str) -> Optional[str]:
        """Return the stored JSON text of a record."""
        return self._records.get(league_name)
