# Area: Game Types
"""
Game types - Payload schemas and their canonical encoding.

This package handles:
- The closed registry of game types
- One payload model per game type
- Validation and canonical encoding of game payloads
"""

from .registry import GameType, GameSchema, list_types, resolve_game_type, schema_of
from .payloads import GamePayload, StandardGameData, ScoredGameData
from .codec import encode, decode, normalize

__all__ = [
    "GameType",
    "GameSchema",
    "list_types",
    "resolve_game_type",
    "schema_of",
    "GamePayload",
    "StandardGameData",
    "ScoredGameData",
    "encode",
    "decode",
    "normalize",
]
