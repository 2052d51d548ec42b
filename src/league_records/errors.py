# Area: Shared
"""
league_records.errors — Custom exception classes
=================================================

Defines the exception hierarchy for every rejected call.
Each exception stores its context for structured logging and carries a
category so callers can tell caller-correctable input from conflicts
with the stored state.
"""

from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional
import json


# Error categories
INPUT_VALIDATION = "input_validation"
AUTHORIZATION = "authorization"
LOOKUP = "lookup"
SCHEMA = "schema"
STATE_CONFLICT = "state_conflict"
STORAGE = "storage"


class LeagueRecordsError(Exception):
    """Base exception for all league_records errors."""

    category: str = "unknown"

    def __init__(self, message: str, **details: Any):
        self.message = message
        self.details: Dict[str, Any] = details
        super().__init__(message)

    @property
    def error_type(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_type": self.error_type,
            "category": self.category,
            "message": self.message,
            "details": self.details,
        }

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type=self.error_type,
            category=self.category,
            message=self.message,
            details=self.details,
            validation_errors=None,
        )


# ── Input validation ─────────────────────────────────────────


class InvalidBestOf(LeagueRecordsError):
    """Raised when best_of is not a positive odd integer."""

    category = INPUT_VALIDATION

    def __init__(self, best_of: Any):
        self.best_of = best_of
        super().__init__(
            f"best_of must be a positive odd integer, got {best_of!r}",
            best_of=best_of,
        )


class DuplicatePlayer(LeagueRecordsError):
    """Raised when a player name appears more than once in a league."""

    category = INPUT_VALIDATION

    def __init__(self, duplicates: Iterable[str]):
        self.duplicates = sorted(set(duplicates))
        super().__init__(
            f"Duplicate player names: {self.duplicates}",
            duplicates=self.duplicates,
        )


class InvalidLeagueName(LeagueRecordsError):
    """Raised when a league name is too short to be used as a key."""

    category = INPUT_VALIDATION

    def __init__(self, league_name: Any, min_length: int):
        self.league_name = league_name
        super().__init__(
            f"League name must be at least {min_length} chars long, got {league_name!r}",
            league_name=league_name,
            min_length=min_length,
        )


class InvalidPlayers(LeagueRecordsError):
    """Raised when the player list is too short or contains blank names."""

    category = INPUT_VALIDATION

    def __init__(self, reason: str, players: List[Any]):
        self.players = players
        super().__init__(reason, players=players)


class InvalidTrustedAccounts(LeagueRecordsError):
    """Raised when trusted accounts are not a collection of account names."""

    category = INPUT_VALIDATION

    def __init__(self, reason: str, accounts: Any):
        self.accounts = accounts
        super().__init__(reason, accounts=accounts)


class UnknownPlayers(LeagueRecordsError):
    """Raised when a contestant is not part of the league."""

    category = INPUT_VALIDATION

    def __init__(self, league_name: str, unknown: Iterable[str]):
        self.league_name = league_name
        self.unknown = list(unknown)
        super().__init__(
            f"Players not found in league '{league_name}': {self.unknown}",
            league_name=league_name,
            unknown=self.unknown,
        )


class InvalidContestant(LeagueRecordsError):
    """Raised when a game's winner is not one of the match's two players."""

    category = INPUT_VALIDATION

    def __init__(self, winner: str, players: Iterable[str], reason: Optional[str] = None):
        self.winner = winner
        self.players = list(players)
        super().__init__(
            reason or f"Winner '{winner}' is not a contestant of {self.players}",
            winner=winner,
            players=self.players,
        )


# ── Authorization ────────────────────────────────────────────


class Unauthorized(LeagueRecordsError):
    """Raised when the caller may not perform the requested call."""

    category = AUTHORIZATION

    def __init__(self, caller: str, league_name: str, action: str):
        self.caller = caller
        self.league_name = league_name
        self.action = action
        super().__init__(
            f"Caller '{caller}' may not {action} league '{league_name}'",
            caller=caller,
            league_name=league_name,
            action=action,
        )


# ── Lookup ───────────────────────────────────────────────────


class LeagueNotFound(LeagueRecordsError):
    """Raised when no league exists under the given name."""

    category = LOOKUP

    def __init__(self, league_name: str):
        self.league_name = league_name
        super().__init__(f"League '{league_name}' not found", league_name=league_name)


class UnknownGameType(LeagueRecordsError):
    """Raised when a game type is not in the registry."""

    category = LOOKUP

    def __init__(self, game_type: Any, known: Iterable[str] = ()):
        self.game_type = game_type
        self.known = list(known)
        super().__init__(
            f"Unknown game type {game_type!r}, expected one of {self.known}",
            game_type=str(game_type),
            known=self.known,
        )


# ── Schema ───────────────────────────────────────────────────


class PayloadSchemaMismatch(LeagueRecordsError):
    """Raised when a payload does not satisfy the game type's schema."""

    category = SCHEMA

    def __init__(self, game_type: str, validation_errors: List[str]):
        self.game_type = game_type
        self.validation_errors = validation_errors
        super().__init__(
            f"Payload does not match game type '{game_type}': {validation_errors}",
            game_type=game_type,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["validation_errors"] = self.validation_errors
        return data

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type=self.error_type,
            category=self.category,
            message=f"Payload does not match game type '{self.game_type}'",
            details=self.details,
            validation_errors=self.validation_errors,
        )


class CorruptPayload(LeagueRecordsError):
    """Raised when stored payload bytes are not a canonical encoding."""

    category = SCHEMA

    def __init__(self, game_type: str, reason: str):
        self.game_type = game_type
        self.reason = reason
        super().__init__(
            f"Corrupt payload for game type '{game_type}': {reason}",
            game_type=game_type,
        )


# ── State conflicts ──────────────────────────────────────────


class LeagueNameTaken(LeagueRecordsError):
    """Raised when a league with the same name already exists."""

    category = STATE_CONFLICT

    def __init__(self, league_name: str):
        self.league_name = league_name
        super().__init__(
            f"League with name '{league_name}' already exists",
            league_name=league_name,
        )


class MatchAlreadyDecided(LeagueRecordsError):
    """Raised when a game is added to a match that already has a winner."""

    category = STATE_CONFLICT

    def __init__(self, players: Iterable[str], winner: str):
        self.players = list(players)
        self.winner = winner
        super().__init__(
            f"Match {self.players} is already finished, won by '{winner}'",
            players=self.players,
            winner=winner,
        )


class LeagueNotFinished(LeagueRecordsError):
    """Raised when deleting a league with open or unplayed matches."""

    category = STATE_CONFLICT

    def __init__(self, league_name: str, open_pairs: int):
        self.league_name = league_name
        self.open_pairs = open_pairs
        super().__init__(
            f"League '{league_name}' is not finished yet ({open_pairs} matches open)",
            league_name=league_name,
            open_pairs=open_pairs,
        )


# ── Storage ──────────────────────────────────────────────────


class CorruptRecord(LeagueRecordsError):
    """Raised when a persisted league record cannot be loaded."""

    category = STORAGE

    def __init__(self, league_name: str, reason: str):
        self.league_name = league_name
        self.reason = reason
        super().__init__(
            f"Stored record for league '{league_name}' is unreadable: {reason}",
            league_name=league_name,
        )


def _format_error_block(
    error_type: str,
    category: str,
    message: str,
    details: Dict[str, Any],
    validation_errors: Optional[List[str]],
) -> str:
    """Format a structured error block for terminal output."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " CALL REJECTED — NO STATE CHANGED",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Category:     {category}",
        f" Message:      {message}",
    ]

    if details:
        lines.append("")
        lines.append(" ── DETAILS " + "─" * 52)
        lines.append(_indent_json(details))

    if validation_errors:
        lines.append("")
        lines.append(" ── VALIDATION ERRORS " + "─" * 42)
        for error in validation_errors:
            lines.append(f" • {error}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str, sort_keys=True)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {data!r}"
