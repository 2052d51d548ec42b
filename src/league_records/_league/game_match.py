# Area: League
"""
league_records._league.game_match — Best-of match between two players
======================================================================

A Match is the ordered sequence of games between two specific players.
Its winner is derived from the games: the first player to reach
`best_of // 2 + 1` won games wins the match, and the match is terminal
from then on.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from ..errors import InvalidContestant, MatchAlreadyDecided
from .._game_types import GameType
from .game import Game


@dataclass(frozen=True)
class PlayerPair:
    """
    The contestants of a Match.

    The pair is unordered: `first` is always the player listed earlier
    in the league, so (A, B) and (B, A) give equal pairs.
    """

    first: str
    second: str

    @classmethod
    def of(cls, player_a: str, player_b: str, order: Sequence[str]) -> "PlayerPair":
        """Build the pair, ordering both names by their index in `order`."""
        if order.index(player_a) <= order.index(player_b):
            return cls(player_a, player_b)
        return cls(player_b, player_a)

    def __contains__(self, player: object) -> bool:
        return player == self.first or player == self.second

    def as_tuple(self) -> Tuple[str, str]:
        return (self.first, self.second)


def wins_needed(best_of: int) -> int:
    """Number of game wins that decide a best-of-N match."""
    return best_of // 2 + 1


class Match:
    """
    Best-of-N sequence of games between the two players of a pair.

    Args:
        pair: The two contestants
        best_of: League's best-of count (odd)
        game_type: League's declared game type
    """

    def __init__(self, pair: PlayerPair, best_of: int, game_type: GameType):
        self.pair = pair
        self.best_of = best_of
        self.game_type = game_type
        self._games: List[Game] = []

    @classmethod
    def restore(
        cls,
        pair: PlayerPair,
        best_of: int,
        game_type: GameType,
        games: Iterable[Game],
    ) -> "Match":
        """
        Rebuild a match from stored games.

        Replays every game through the same checks as `add_game`, so
        a stored sequence that continues past a decided match raises.
        """
        match = cls(pair, best_of, game_type)
        for game in games:
            match._check_open(game.winner)
            match._games.append(game)
        return match

    @property
    def games(self) -> Tuple[Game, ...]:
        return tuple(self._games)

    @property
    def wins(self) -> Dict[str, int]:
        tally = {self.pair.first: 0, self.pair.second: 0}
        for game in self._games:
            tally[game.winner] += 1
        return tally

    @property
    def winner(self) -> Optional[str]:
        """The match winner, or None while the match is still open."""
        needed = wins_needed(self.best_of)
        for player, won in self.wins.items():
            if won >= needed:
                return player
        return None

    @property
    def is_decided(self) -> bool:
        return self.winner is not None

    def add_game(self, winner: str, raw_payload: Any = None) -> Game:
        """
        Validate and append a game, then re-resolve the match winner.

        Nothing is appended unless every check passes.

        Raises:
            MatchAlreadyDecided: If the match already has a winner
            InvalidContestant: If `winner` is not one of the pair
            PayloadSchemaMismatch: If the payload does not fit the game type
        """
        self._check_open(winner)
        game = Game.from_raw(winner, self.game_type, raw_payload)
        self._games.append(game)
        return game

    def _check_open(self, winner: str) -> None:
        decided_by = self.winner
        if decided_by is not None:
            raise MatchAlreadyDecided(self.pair.as_tuple(), decided_by)
        if winner not in self.pair:
            raise InvalidContestant(winner, self.pair.as_tuple())

    def to_snapshot(self) -> Dict[str, Any]:
        return {
            "players": list(self.pair.as_tuple()),
            "winner": self.winner,
            "wins": self.wins,
            "is_decided": self.is_decided,
            "games": [
                {"winner": game.winner, "payload": game.content(self.game_type)}
                for game in self._games
            ],
        }
