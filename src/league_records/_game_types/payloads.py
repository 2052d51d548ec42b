# Area: Game Types
"""
league_records._game_types.payloads — Payload models per game type
===================================================================

One pydantic model per registered game type. A model describes the
extra data a single game of that type carries beyond its winner.

All models are strict (no type coercion), frozen, and forbid unknown
fields, so a payload either matches its schema exactly or is rejected.
"""

from __future__ import annotations
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class GamePayload(BaseModel):
    """Common configuration for every game payload model."""

    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)


class StandardGameData(GamePayload):
    """A standard game carries no data besides its winner."""


class ScoredGameData(GamePayload):
    """
    Final score of a score-based 1v1 game (e.g. soccer).

    Scores are given from the winner's point of view, so the payload
    stays valid no matter in which order the contestants were named.
    """

    winner_score: int = Field(..., ge=0)
    loser_score: int = Field(..., ge=0)
    overtime: bool = False
    duration_seconds: Optional[int] = Field(default=None, ge=1)
    notes: Optional[str] = Field(default=None, max_length=280)

    @model_validator(mode="after")
    def _winner_not_behind(self) -> "ScoredGameData":
        if self.winner_score < self.loser_score:
            raise ValueError(
                f"winner_score ({self.winner_score}) is lower than "
                f"loser_score ({self.loser_score})"
            )
        return self
