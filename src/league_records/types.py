"""
league_records.types — TypedDict schemas for view results
==========================================================

This module documents the exact structure of the dicts returned by the
LeagueStore views and calls.

All types are exported from the main package:

    from league_records import LeagueSnapshot, MatchSnapshot, ...

Use __annotations__ to inspect fields:

    >>> GameSnapshot.__annotations__
    {'winner': str, 'payload': Optional[Dict[str, Any]]}
"""

from typing import Any, Dict, List, Optional, TypedDict


# ============================================
# get_league() result
# ============================================

class GameSnapshot(TypedDict):
    """One decided game.

    Fields
    ------
    winner : str
        Name of the player who won the game.
    payload : Optional[Dict[str, Any]]
        Decoded payload, e.g. {"winner_score": 3, "loser_score": 1, ...}
        for SCORED leagues. None for games without payload.
    """
    winner: str
    payload: Optional[Dict[str, Any]]


class MatchSnapshot(TypedDict):
    """A best-of match between two players.

    Fields
    ------
    players : List[str]
        The two contestants, in league player order.
    winner : Optional[str]
        Match winner, or None while the match is open.
    wins : Dict[str, int]
        Games won per contestant.
    is_decided : bool
        True once a winner exists; no further games may be added.
    games : List[GameSnapshot]
        Games in the order they were added.
    """
    players: List[str]
    winner: Optional[str]
    wins: Dict[str, int]
    is_decided: bool
    games: List[GameSnapshot]


class LeagueSnapshot(TypedDict):
    """Full state of one league.

    Fields
    ------
    name : str
        Unique league name.
    owner : str
        Caller who created the league.
    players : List[str]
        League players in creation order.
    best_of : int
        Maximum games per match, e.g. 3.
    wins_needed : int
        Game wins that decide a match, best_of // 2 + 1.
    game_type : str
        Registered game type, e.g. "STANDARD".
    trusted_accounts : List[str]
        Callers besides the owner allowed to add games, sorted.
    matches : List[MatchSnapshot]
        Matches played so far; pairs that never met are absent.
    is_finished : bool
        True when every pair of players has a decided match.
    """
    name: str
    owner: str
    players: List[str]
    best_of: int
    wins_needed: int
    game_type: str
    trusted_accounts: List[str]
    matches: List[MatchSnapshot]
    is_finished: bool
