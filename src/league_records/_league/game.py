# Area: League
"""
league_records._league.game — Game record
==========================================

Defines the Game dataclass: one decided game inside a match. The
contestants are given by the containing Match; a Game only stores the
winner and the canonical encoding of its payload.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from ..errors import PayloadSchemaMismatch
from .._game_types import GameType, decode, encode, schema_of


@dataclass(frozen=True)
class Game:
    """
    A single decided game.

    Attributes:
        winner: Name of the contestant who won the game
        payload: Canonical payload bytes, or None if the game has none
    """

    winner: str
    payload: Optional[bytes] = None

    @classmethod
    def from_raw(cls, winner: str, game_type: GameType, raw_payload: Any = None) -> "Game":
        """
        Create a game, validating and encoding its payload.

        An empty mapping counts as no payload.

        Raises:
            PayloadSchemaMismatch: If the payload is missing although the
                game type requires one, present although the type takes
                none, or does not satisfy the schema
        """
        return cls(winner=winner, payload=encode_game_payload(game_type, raw_payload))

    def content(self, game_type: GameType) -> Optional[Dict[str, Any]]:
        """Return the decoded payload, or None if the game has none."""
        if self.payload is None:
            return None
        return decode(game_type, self.payload)


def encode_game_payload(game_type: GameType, raw_payload: Any) -> Optional[bytes]:
    """Apply the payload presence rules, then encode."""
    schema = schema_of(game_type)
    type_name = schema.game_type.value

    absent = raw_payload is None or (
        isinstance(raw_payload, Mapping) and not raw_payload
    )
    if absent:
        if schema.requires_payload:
            missing = [f["name"] for f in schema.fields if f["required"]]
            raise PayloadSchemaMismatch(
                type_name, [f"payload is required, missing fields {missing}"]
            )
        return None

    if not schema.accepts_payload:
        raise PayloadSchemaMismatch(
            type_name, [f"game type {type_name} takes no payload"]
        )
    return encode(game_type, raw_payload)
