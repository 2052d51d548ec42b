# Area: Store
"""
league_records.store — League store
====================================

The authorization and lifecycle gate in front of the persisted leagues.

Every call receives the caller identity explicitly. A call loads the
league record from storage, applies the whole mutation to the loaded
League, and writes the record back only after every check passed, so a
rejected call never leaves a partially updated league behind.

Usage:
    from league_records import LeagueStore, MemoryStorage

    store = LeagueStore(MemoryStorage())
    store.create_league("alice", "Chess Club", ["A", "B", "C"], 3, "STANDARD")
    store.add_game("alice", "Chess Club", "A", "B", winner="A")
"""

from __future__ import annotations
import functools
import logging
from typing import Any, Iterable, Optional, Sequence, Tuple, Union

from .errors import (
    LeagueNameTaken,
    LeagueNotFinished,
    LeagueNotFound,
    LeagueRecordsError,
    Unauthorized,
)
from ._game_types import GameSchema, GameType, list_types, schema_of
from ._league import League
from ._storage import league_from_record, league_to_record
from .types import LeagueSnapshot, MatchSnapshot

logger = logging.getLogger("league_records.store")


def _logged_call(action: str):
    """Log rejected calls with their error category, then re-raise."""

    def decorator(method):
        @functools.wraps(method)
        def wrapper(self, *args, **kwargs):
            try:
                return method(self, *args, **kwargs)
            except LeagueRecordsError as e:
                logger.warning(
                    f"{action} rejected ({e.category}): {e.message}",
                    extra={"error_type": e.error_type, "category": e.category},
                )
                raise
        return wrapper

    return decorator


class LeagueStore:
    """
    Create, mutate, read and delete leagues by name.

    Parameters
    ----------
    storage : MemoryStorage, LeagueRepository or compatible
        Durable key-value storage of league records. Must provide
        load(name), save(name, record), delete(name) and contains(name).
    """

    def __init__(self, storage: Any):
        self.storage = storage

    # ──────────────────────────────────────────────────────────────
    # Calls
    # ──────────────────────────────────────────────────────────────

    @_logged_call("create_league")
    def create_league(
        self,
        caller: str,
        league_name: str,
        players: Sequence[str],
        best_of: int,
        game_type: Union[GameType, str],
        trusted_accounts: Iterable[str] = (),
    ) -> LeagueSnapshot:
        """
        Create a new league owned by the caller.

        Raises
        ------
        LeagueNameTaken
            If a league with that name already exists.
        InvalidLeagueName, InvalidBestOf, InvalidPlayers, DuplicatePlayer,
        InvalidTrustedAccounts
            If the league arguments are invalid.
        UnknownGameType
            If the game type is not registered.
        """
        if self.storage.contains(league_name):
            raise LeagueNameTaken(league_name)

        league = League.create(
            name=league_name,
            players=players,
            best_of=best_of,
            game_type=game_type,
            owner=caller,
            trusted_accounts=trusted_accounts,
        )
        self.storage.save(league_name, league_to_record(league))
        logger.info(
            f"League '{league_name}' created by {caller} "
            f"({len(league.players)} players, best of {best_of}, "
            f"{league.properties.game_type.value})",
            extra={"league_name": league_name, "caller": caller},
        )
        return league.to_snapshot()

    @_logged_call("add_game")
    def add_game(
        self,
        caller: str,
        league_name: str,
        player_a: str,
        player_b: str,
        winner: str,
        raw_payload: Any = None,
    ) -> MatchSnapshot:
        """
        Record a game between two league players.

        Returns the snapshot of the updated match.

        Raises
        ------
        LeagueNotFound
            If the league does not exist.
        Unauthorized
            If the caller is neither owner nor trusted account.
        UnknownPlayers, InvalidContestant
            If the contestants or the winner are invalid.
        MatchAlreadyDecided
            If the match between the two players is already won.
        PayloadSchemaMismatch
            If the payload does not fit the league's game type.
        """
        league = self._load(league_name)
        if not league.caller_is_allowed(caller):
            raise Unauthorized(caller, league_name, "add games to")

        match = league.add_game(player_a, player_b, winner, raw_payload)
        self.storage.save(league_name, league_to_record(league))

        logger.info(
            f"Game added to '{league_name}': {player_a} vs {player_b}, won by {winner}"
            + (f"; match won by {match.winner}" if match.is_decided else ""),
            extra={"league_name": league_name, "caller": caller},
        )
        return match.to_snapshot()

    @_logged_call("delete_league")
    def delete_league(self, caller: str, league_name: str, force: bool = False) -> None:
        """
        Delete a league with all its matches and games.

        Only the owner may delete. An unfinished league (open or unplayed
        matches) is only deleted with force=True.

        Raises
        ------
        LeagueNotFound, Unauthorized, LeagueNotFinished
        """
        league = self._load(league_name)
        if not league.caller_is_owner(caller):
            raise Unauthorized(caller, league_name, "delete")

        open_pairs = league.open_match_count()
        if open_pairs and not force:
            raise LeagueNotFinished(league_name, open_pairs)

        self.storage.delete(league_name)
        logger.info(
            f"League '{league_name}' deleted by {caller}"
            + (f" (forced, {open_pairs} matches open)" if open_pairs else ""),
            extra={"league_name": league_name, "caller": caller},
        )

    # ──────────────────────────────────────────────────────────────
    # Views (no caller check, no side effects)
    # ──────────────────────────────────────────────────────────────

    def get_league(self, league_name: str) -> LeagueSnapshot:
        """Return the full league snapshot, or raise LeagueNotFound."""
        return self._load(league_name).to_snapshot()

    def get_game_types(self) -> Tuple[GameType, ...]:
        return list_types()

    def get_game_structure(self, game_type: Union[GameType, str]) -> GameSchema:
        """Return the payload schema of a game type, or raise UnknownGameType."""
        return schema_of(game_type)

    def league_exists(self, league_name: str) -> bool:
        return self.storage.contains(league_name)

    def is_league_finished(self, league_name: str) -> bool:
        return self._load(league_name).is_finished()

    def _load(self, league_name: str) -> League:
        record: Optional[dict] = self.storage.load(league_name)
        if record is None:
            raise LeagueNotFound(league_name)
        return league_from_record(league_name, record)
