"""
league_records — League Match Records
======================================

Named leagues of players that play best-of matches against each other.
Each game carries a winner and, depending on the league's game type, a
schema-checked payload.

Quick Start:
    from league_records import LeagueStore, MemoryStorage
    store = LeagueStore(MemoryStorage())
    store.create_league("alice", "Chess Club", ["A", "B", "C"], 3, "STANDARD")
    store.add_game("alice", "Chess Club", "A", "B", winner="A")

Persistent storage:
    from league_records import LeagueRepository, LeagueStore, init_database
    init_database("leagues.db")
    store = LeagueStore(LeagueRepository("leagues.db"))

Game types
----------
    STANDARD - winner only, no payload
    SCORED   - winner plus {"winner_score", "loser_score", ...}

Use store.get_game_structure("SCORED") to inspect a payload schema.
"""

from .store import LeagueStore
from ._game_types import GameType, GameSchema
from ._storage import LeagueRepository, MemoryStorage, init_database
from ._shared import setup_logging
from .errors import (
    LeagueRecordsError,
    InvalidBestOf,
    DuplicatePlayer,
    InvalidLeagueName,
    InvalidPlayers,
    InvalidTrustedAccounts,
    UnknownPlayers,
    InvalidContestant,
    Unauthorized,
    LeagueNotFound,
    UnknownGameType,
    PayloadSchemaMismatch,
    CorruptPayload,
    LeagueNameTaken,
    MatchAlreadyDecided,
    LeagueNotFinished,
    CorruptRecord,
)
from .types import GameSnapshot, MatchSnapshot, LeagueSnapshot

__all__ = [
    # Main classes
    "LeagueStore",
    "MemoryStorage",
    "LeagueRepository",
    "init_database",
    "setup_logging",
    # Game types
    "GameType",
    "GameSchema",
    # Errors
    "LeagueRecordsError",
    "InvalidBestOf",
    "DuplicatePlayer",
    "InvalidLeagueName",
    "InvalidPlayers",
    "InvalidTrustedAccounts",
    "UnknownPlayers",
    "InvalidContestant",
    "Unauthorized",
    "LeagueNotFound",
    "UnknownGameType",
    "PayloadSchemaMismatch",
    "CorruptPayload",
    "LeagueNameTaken",
    "MatchAlreadyDecided",
    "LeagueNotFinished",
    "CorruptRecord",
    # Result types
    "GameSnapshot",
    "MatchSnapshot",
    "LeagueSnapshot",
]

__version__ = "1.0.0"
