# Area: League
"""
League bookkeeping - Leagues, matches and games.

This package handles:
- League creation rules and permissions
- Lazy match creation per player pair
- Best-of resolution of match winners

It never inspects game type specific payload fields; payloads go
through the game type codec only.
"""

from .game import Game, encode_game_payload
from .game_match import Match, PlayerPair, wins_needed
from .league import League, LeagueProperties, MIN_LEAGUE_NAME_LENGTH, MIN_PLAYERS

__all__ = [
    "Game",
    "encode_game_payload",
    "Match",
    "PlayerPair",
    "wins_needed",
    "League",
    "LeagueProperties",
    "MIN_LEAGUE_NAME_LENGTH",
    "MIN_PLAYERS",
]
