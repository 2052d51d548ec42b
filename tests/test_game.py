# Area: League Tests
"""Tests for Game and the payload presence rules."""

import pytest

from league_records._game_types import GameType, encode
from league_records._league import Game, encode_game_payload
from league_records.errors import PayloadSchemaMismatch


class TestEncodeGamePayload:
    """Tests for encode_game_payload()."""

    def test_standard_without_payload(self):
        assert encode_game_payload(GameType.STANDARD, None) is None

    def test_empty_mapping_counts_as_absent(self):
        assert encode_game_payload(GameType.STANDARD, {}) is None

    def test_standard_rejects_payload(self):
        with pytest.raises(PayloadSchemaMismatch) as exc_info:
            encode_game_payload(GameType.STANDARD, {"score": 1})
        assert exc_info.value.validation_errors == ["game type STANDARD takes no payload"]

    def test_scored_requires_payload(self):
        with pytest.raises(PayloadSchemaMismatch) as exc_info:
            encode_game_payload(GameType.SCORED, None)
        message = exc_info.value.validation_errors[0]
        assert "payload is required" in message
        assert "winner_score" in message and "loser_score" in message

    def test_scored_empty_mapping_is_missing(self):
        with pytest.raises(PayloadSchemaMismatch):
            encode_game_payload(GameType.SCORED, {})

    def test_scored_payload_encoded(self):
        payload = {"winner_score": 2, "loser_score": 1}
        assert encode_game_payload(GameType.SCORED, payload) == encode("SCORED", payload)


class TestGame:
    """Tests for the Game dataclass."""

    def test_from_raw_without_payload(self):
        game = Game.from_raw("A", GameType.STANDARD)
        assert game.winner == "A"
        assert game.payload is None
        assert game.content(GameType.STANDARD) is None

    def test_from_raw_with_payload(self):
        game = Game.from_raw("B", GameType.SCORED, {"winner_score": 4, "loser_score": 4})
        assert isinstance(game.payload, bytes)
        content = game.content(GameType.SCORED)
        assert content["winner_score"] == 4
        assert content["overtime"] is False

    def test_game_is_immutable(self):
        game = Game("A")
        with pytest.raises(AttributeError):
            game.winner = "B"

    def test_invalid_payload_creates_nothing(self):
        with pytest.raises(PayloadSchemaMismatch):
            Game.from_raw("A", GameType.SCORED, {"winner_score": -1, "loser_score": 0})
