# Area: League
"""
league_records._league.league — League aggregate
=================================================

A League holds its players, its properties (best-of count and game
type), its owner and trusted accounts, and the matches played so far.

The player list is fixed at creation. Matches are created lazily on the
first game between two players and are keyed by the unordered pair.
"""

from __future__ import annotations
from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from ..errors import (
    DuplicatePlayer,
    InvalidBestOf,
    InvalidContestant,
    InvalidLeagueName,
    InvalidPlayers,
    InvalidTrustedAccounts,
    UnknownPlayers,
)
from .._game_types import GameType, resolve_game_type
from .game_match import Match, PlayerPair, wins_needed

MIN_LEAGUE_NAME_LENGTH = 3
MIN_PLAYERS = 3


@dataclass(frozen=True)
class LeagueProperties:
    """
    Properties fixed at league creation.

    Attributes:
        best_of: Maximum number of games per match (positive, odd)
        game_type: Game type every game's payload must satisfy
    """

    best_of: int
    game_type: GameType

    @property
    def wins_needed(self) -> int:
        return wins_needed(self.best_of)


class League:
    """
    The league object holding everything together.

    Use `League.create` for new leagues; the constructor trusts its
    arguments and is used when restoring a stored league.
    """

    def __init__(
        self,
        name: str,
        players: Sequence[str],
        properties: LeagueProperties,
        owner: str,
        trusted_accounts: Iterable[str] = (),
        matches: Optional[Iterable[Match]] = None,
    ):
        self.name = name
        self.players: List[str] = list(players)
        self.properties = properties
        self.owner = owner
        self.trusted_accounts = set(trusted_accounts)
        self._matches: Dict[PlayerPair, Match] = {}
        for match in matches or ():
            self._matches[match.pair] = match

    @classmethod
    def create(
        cls,
        name: str,
        players: Sequence[str],
        best_of: int,
        game_type: Union[GameType, str],
        owner: str,
        trusted_accounts: Iterable[str] = (),
    ) -> "League":
        """
        Validate the creation arguments and build an empty league.

        The owner is never stored as a trusted account; owning a league
        already grants every right a trusted account has.

        Raises:
            InvalidLeagueName: If the name is shorter than 3 chars
            InvalidBestOf: If best_of is not a positive odd integer
            InvalidPlayers: If players is a bare string, has fewer than 3
                names or a blank name
            DuplicatePlayer: If a player name repeats
            UnknownGameType: If the game type is not registered
            InvalidTrustedAccounts: If trusted_accounts is a bare string or
                holds a blank name
        """
        if not isinstance(name, str) or len(name.strip()) < MIN_LEAGUE_NAME_LENGTH:
            raise InvalidLeagueName(name, MIN_LEAGUE_NAME_LENGTH)

        if isinstance(best_of, bool) or not isinstance(best_of, int) or best_of < 1 or best_of % 2 == 0:
            raise InvalidBestOf(best_of)

        if isinstance(players, (str, bytes)):
            raise InvalidPlayers(
                f"Players must be a list of names, got a single {type(players).__name__}",
                [players],
            )
        players = list(players)
        if len(players) < MIN_PLAYERS:
            raise InvalidPlayers(
                f"League needs at least {MIN_PLAYERS} players, got {len(players)}", players
            )
        blank = [p for p in players if not isinstance(p, str) or not p.strip()]
        if blank:
            raise InvalidPlayers(f"Player names must be non-empty strings: {blank!r}", players)

        duplicates = [p for p, count in Counter(players).items() if count > 1]
        if duplicates:
            raise DuplicatePlayer(duplicates)

        properties = LeagueProperties(best_of=best_of, game_type=resolve_game_type(game_type))

        if isinstance(trusted_accounts, (str, bytes)):
            raise InvalidTrustedAccounts(
                f"Trusted accounts must be a list of account names, "
                f"got a single {type(trusted_accounts).__name__}",
                trusted_accounts,
            )
        trusted_accounts = list(trusted_accounts)
        invalid = [a for a in trusted_accounts if not isinstance(a, str) or not a.strip()]
        if invalid:
            raise InvalidTrustedAccounts(
                f"Trusted account names must be non-empty strings: {invalid!r}",
                trusted_accounts,
            )
        trusted = {account for account in trusted_accounts if account != owner}
        return cls(name, players, properties, owner, trusted)

    # ── Permissions ──────────────────────────────────────────

    def caller_is_owner(self, caller: str) -> bool:
        return caller == self.owner

    def caller_is_allowed(self, caller: str) -> bool:
        """Owner and trusted accounts may add games."""
        return self.caller_is_owner(caller) or caller in self.trusted_accounts

    # ── Matches ──────────────────────────────────────────────

    @property
    def matches(self) -> List[Match]:
        return list(self._matches.values())

    def pair_for(self, player_a: str, player_b: str) -> PlayerPair:
        """
        Resolve two contestant names into the league's pair key.

        Raises:
            UnknownPlayers: If a name is not in the player list
            InvalidContestant: If both names are the same player
        """
        unknown = [p for p in (player_a, player_b) if p not in self.players]
        if unknown:
            raise UnknownPlayers(self.name, unknown)
        if player_a == player_b:
            raise InvalidContestant(
                player_a,
                (player_a, player_b),
                reason=f"A match needs two distinct players, got '{player_a}' twice",
            )
        return PlayerPair.of(player_a, player_b, self.players)

    def get_match(self, player_a: str, player_b: str) -> Optional[Match]:
        return self._matches.get(self.pair_for(player_a, player_b))

    def add_game(
        self,
        player_a: str,
        player_b: str,
        winner: str,
        raw_payload: Any = None,
    ) -> Match:
        """
        Add a game between two league players.

        The match for the pair is created on the first game and only
        kept if that game was accepted.
        """
        pair = self.pair_for(player_a, player_b)
        match = self._matches.get(pair)
        if match is None:
            match = Match(pair, self.properties.best_of, self.properties.game_type)
            match.add_game(winner, raw_payload)
            self._matches[pair] = match
        else:
            match.add_game(winner, raw_payload)
        return match

    # ── Lifecycle ────────────────────────────────────────────

    @property
    def expected_match_count(self) -> int:
        """Number of matches when every player has met every other."""
        n = len(self.players)
        return n * (n - 1) // 2

    def open_match_count(self) -> int:
        """Pairs that never played plus matches without a winner."""
        decided = sum(1 for match in self._matches.values() if match.is_decided)
        return self.expected_match_count - decided

    def is_finished(self) -> bool:
        return self.open_match_count() == 0

    def to_snapshot(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "owner": self.owner,
            "players": list(self.players),
            "best_of": self.properties.best_of,
            "wins_needed": self.properties.wins_needed,
            "game_type": self.properties.game_type.value,
            "trusted_accounts": sorted(self.trusted_accounts),
            "matches": [match.to_snapshot() for match in self._matches.values()],
            "is_finished": self.is_finished(),
        }
