# Area: Game Types
"""
league_records._game_types.registry — Game type registry
=========================================================

Enumerates the known game types and the payload schema of each.
The registry is compiled in: adding a game type means adding a
`GameType` member, a payload model and one `_REGISTRY` entry. League
and match code never changes for a new type.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Tuple, Type, Union

from pydantic import BaseModel

from ..errors import UnknownGameType
from .payloads import ScoredGameData, StandardGameData


class GameType(Enum):
    """
    Tag selecting which payload schema a league's games must satisfy.

    STANDARD: no payload, only the winner is recorded
    SCORED:   final score of the game
    """
    STANDARD = "STANDARD"
    SCORED = "SCORED"


@dataclass(frozen=True)
class GameSchema:
    """
    Schema descriptor of one game type.

    Attributes:
        game_type: The game type this schema belongs to
        payload_model: Pydantic model validating the payload
        summary: One-line human readable description
    """

    game_type: GameType
    payload_model: Type[BaseModel]
    summary: str

    @property
    def fields(self) -> List[Dict[str, Any]]:
        """Field names of the payload with their required flag."""
        return [
            {"name": name, "required": info.is_required()}
            for name, info in self.payload_model.model_fields.items()
        ]

    @property
    def accepts_payload(self) -> bool:
        """True if games of this type may carry a payload at all."""
        return bool(self.payload_model.model_fields)

    @property
    def requires_payload(self) -> bool:
        """True if at least one payload field has no default."""
        return any(
            info.is_required() for info in self.payload_model.model_fields.values()
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "game_type": self.game_type.value,
            "summary": self.summary,
            "accepts_payload": self.accepts_payload,
            "requires_payload": self.requires_payload,
            "fields": self.fields,
            "json_schema": self.payload_model.model_json_schema(),
        }


_REGISTRY: Dict[GameType, GameSchema] = {
    GameType.STANDARD: GameSchema(
        game_type=GameType.STANDARD,
        payload_model=StandardGameData,
        summary="Winner only, no additional game data",
    ),
    GameType.SCORED: GameSchema(
        game_type=GameType.SCORED,
        payload_model=ScoredGameData,
        summary="Winner plus the final score of the game",
    ),
}


def list_types() -> Tuple[GameType, ...]:
    """Return all registered game types in registration order."""
    return tuple(_REGISTRY)


def resolve_game_type(game_type: Union[GameType, str]) -> GameType:
    """
    Resolve a game type tag or its string value.

    Raises:
        UnknownGameType: If the value does not name a registered type
    """
    known = [t.value for t in _REGISTRY]
    if isinstance(game_type, GameType):
        resolved = game_type
    elif isinstance(game_type, str):
        try:
            resolved = GameType(game_type.strip().upper())
        except ValueError:
            raise UnknownGameType(game_type, known) from None
    else:
        raise UnknownGameType(game_type, known)

    if resolved not in _REGISTRY:
        raise UnknownGameType(game_type, known)
    return resolved


def schema_of(game_type: Union[GameType, str]) -> GameSchema:
    """Return the schema descriptor of a registered game type."""
    return _REGISTRY[resolve_game_type(game_type)]
