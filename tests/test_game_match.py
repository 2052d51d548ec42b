# Area: League Tests
"""Tests for PlayerPair and best-of Match resolution."""

import pytest

from league_records._game_types import GameType
from league_records._league import Game, Match, PlayerPair, wins_needed
from league_records.errors import (
    InvalidContestant,
    MatchAlreadyDecided,
    PayloadSchemaMismatch,
)


PLAYERS = ["A", "B", "C"]


def make_match(best_of=3, game_type=GameType.STANDARD):
    return Match(PlayerPair.of("A", "B", PLAYERS), best_of, game_type)


class TestPlayerPair:
    """Tests for PlayerPair."""

    def test_order_follows_league_order(self):
        assert PlayerPair.of("C", "A", PLAYERS).as_tuple() == ("A", "C")

    def test_unordered_equality(self):
        assert PlayerPair.of("A", "B", PLAYERS) == PlayerPair.of("B", "A", PLAYERS)
        assert hash(PlayerPair.of("A", "B", PLAYERS)) == hash(PlayerPair.of("B", "A", PLAYERS))

    def test_contains(self):
        pair = PlayerPair.of("A", "B", PLAYERS)
        assert "A" in pair
        assert "B" in pair
        assert "C" not in pair


class TestWinsNeeded:
    """Tests for wins_needed()."""

    @pytest.mark.parametrize("best_of,needed", [(1, 1), (3, 2), (5, 3), (7, 4)])
    def test_majority(self, best_of, needed):
        assert wins_needed(best_of) == needed


class TestMatch:
    """Tests for Match."""

    def test_new_match_is_open(self):
        match = make_match()
        assert match.games == ()
        assert match.wins == {"A": 0, "B": 0}
        assert match.winner is None
        assert match.is_decided is False

    def test_best_of_one_decided_by_first_game(self):
        match = make_match(best_of=1)
        match.add_game("B")
        assert match.winner == "B"

    def test_best_of_three(self):
        match = make_match()
        match.add_game("A")
        assert match.winner is None
        match.add_game("B")
        assert match.winner is None
        match.add_game("A")
        assert match.winner == "A"
        assert match.wins == {"A": 2, "B": 1}

    def test_two_straight_wins_decide_best_of_three(self):
        match = make_match()
        match.add_game("B")
        match.add_game("B")
        assert match.winner == "B"
        assert len(match.games) == 2

    def test_decided_match_rejects_more_games(self):
        match = make_match()
        match.add_game("A")
        match.add_game("A")
        with pytest.raises(MatchAlreadyDecided) as exc_info:
            match.add_game("B")
        assert exc_info.value.winner == "A"
        assert len(match.games) == 2

    def test_winner_must_be_contestant(self):
        match = make_match()
        with pytest.raises(InvalidContestant):
            match.add_game("C")
        assert match.games == ()

    def test_decided_checked_before_contestant(self):
        match = make_match(best_of=1)
        match.add_game("A")
        with pytest.raises(MatchAlreadyDecided):
            match.add_game("C")

    def test_bad_payload_appends_nothing(self):
        match = make_match(game_type=GameType.SCORED)
        with pytest.raises(PayloadSchemaMismatch):
            match.add_game("A", {"winner_score": 1})
        assert match.games == ()

    def test_snapshot(self):
        match = make_match(game_type=GameType.SCORED)
        match.add_game("A", {"winner_score": 2, "loser_score": 0})
        snapshot = match.to_snapshot()
        assert snapshot["players"] == ["A", "B"]
        assert snapshot["winner"] is None
        assert snapshot["wins"] == {"A": 1, "B": 0}
        assert snapshot["games"][0]["winner"] == "A"
        assert snapshot["games"][0]["payload"]["winner_score"] == 2


class TestMatchRestore:
    """Tests for Match.restore()."""

    def test_restores_games(self):
        pair = PlayerPair.of("A", "B", PLAYERS)
        match = Match.restore(pair, 3, GameType.STANDARD, [Game("A"), Game("B")])
        assert match.wins == {"A": 1, "B": 1}
        assert match.winner is None

    def test_rejects_games_after_decision(self):
        pair = PlayerPair.of("A", "B", PLAYERS)
        with pytest.raises(MatchAlreadyDecided):
            Match.restore(pair, 3, GameType.STANDARD, [Game("A"), Game("A"), Game("B")])

    def test_rejects_foreign_winner(self):
        pair = PlayerPair.of("A", "B", PLAYERS)
        with pytest.raises(InvalidContestant):
            Match.restore(pair, 3, GameType.STANDARD, [Game("C")])
