# Area: Store Tests
"""Tests for LeagueStore calls and views."""

import logging

import pytest

from league_records import GameType, LeagueStore, MemoryStorage
from league_records.errors import (
    CorruptRecord,
    DuplicatePlayer,
    InvalidBestOf,
    InvalidContestant,
    InvalidTrustedAccounts,
    LeagueNameTaken,
    LeagueNotFinished,
    LeagueNotFound,
    MatchAlreadyDecided,
    PayloadSchemaMismatch,
    Unauthorized,
    UnknownGameType,
    UnknownPlayers,
)


PLAYERS = ["A", "B", "C"]
SCORE = {"winner_score": 3, "loser_score": 1}


@pytest.fixture
def chess(store):
    """Best-of-3 STANDARD league owned by alice, bob trusted."""
    store.create_league("alice", "Chess", PLAYERS, 3, "STANDARD", trusted_accounts=["bob"])
    return store


@pytest.fixture
def cup(store):
    """Best-of-1 SCORED league owned by alice."""
    store.create_league("alice", "Cup", PLAYERS, 1, GameType.SCORED)
    return store


def finish(store, league_name, payload=None):
    for a, b in (("A", "B"), ("A", "C"), ("B", "C")):
        store.add_game("alice", league_name, a, b, a, payload)
        store.add_game("alice", league_name, a, b, a, payload)


class TestCreateLeague:
    """Tests for create_league()."""

    def test_returns_snapshot(self, store):
        snapshot = store.create_league("alice", "Chess", PLAYERS, 3, "STANDARD")
        assert snapshot["name"] == "Chess"
        assert snapshot["owner"] == "alice"
        assert snapshot["players"] == PLAYERS
        assert snapshot["matches"] == []
        assert snapshot["is_finished"] is False

    def test_caller_becomes_owner(self, store):
        store.create_league("carol", "Chess", PLAYERS, 3, "STANDARD")
        assert store.get_league("Chess")["owner"] == "carol"

    def test_name_taken(self, chess):
        with pytest.raises(LeagueNameTaken):
            chess.create_league("bob", "Chess", ["X", "Y", "Z"], 1, "STANDARD")
        assert chess.get_league("Chess")["owner"] == "alice"

    def test_name_taken_checked_first(self, chess):
        with pytest.raises(LeagueNameTaken):
            chess.create_league("bob", "Chess", ["X"], 2, "NOPE")

    def test_even_best_of(self, store):
        with pytest.raises(InvalidBestOf):
            store.create_league("alice", "Chess", PLAYERS, 2, "STANDARD")
        assert not store.league_exists("Chess")

    def test_duplicate_players(self, store):
        with pytest.raises(DuplicatePlayer):
            store.create_league("alice", "Chess", ["A", "B", "B"], 3, "STANDARD")
        assert not store.league_exists("Chess")

    def test_trusted_as_single_string(self, store):
        with pytest.raises(InvalidTrustedAccounts):
            store.create_league("alice", "Chess", PLAYERS, 3, "STANDARD", trusted_accounts="bob")
        assert not store.league_exists("Chess")

    def test_unknown_game_type(self, store):
        with pytest.raises(UnknownGameType):
            store.create_league("alice", "Chess", PLAYERS, 3, "POKER")

    def test_logs_creation(self, store, caplog):
        with caplog.at_level(logging.INFO, logger="league_records"):
            store.create_league("alice", "Chess", PLAYERS, 3, "STANDARD")
        record = next(r for r in caplog.records if "created" in r.getMessage())
        assert record.league_name == "Chess"
        assert record.caller == "alice"


class TestAddGame:
    """Tests for add_game()."""

    def test_owner_adds_game(self, chess):
        snapshot = chess.add_game("alice", "Chess", "A", "B", "A")
        assert snapshot["wins"] == {"A": 1, "B": 0}
        assert snapshot["winner"] is None

    def test_trusted_adds_game(self, chess):
        chess.add_game("bob", "Chess", "A", "B", "B")
        assert chess.get_league("Chess")["matches"][0]["wins"]["B"] == 1

    def test_stranger_rejected(self, chess, storage):
        before = storage.raw("Chess")
        with pytest.raises(Unauthorized) as exc_info:
            chess.add_game("mallory", "Chess", "A", "B", "A")
        assert exc_info.value.category == "authorization"
        assert storage.raw("Chess") == before

    def test_unknown_league(self, store):
        with pytest.raises(LeagueNotFound):
            store.add_game("alice", "Nope", "A", "B", "A")

    def test_unknown_player(self, chess):
        with pytest.raises(UnknownPlayers):
            chess.add_game("alice", "Chess", "A", "Z", "A")

    def test_winner_not_contestant(self, chess, storage):
        before = storage.raw("Chess")
        with pytest.raises(InvalidContestant):
            chess.add_game("alice", "Chess", "A", "B", "C")
        assert storage.raw("Chess") == before

    def test_match_decided_after_wins_needed(self, chess):
        chess.add_game("alice", "Chess", "A", "B", "B")
        snapshot = chess.add_game("alice", "Chess", "B", "A", "B")
        assert snapshot["winner"] == "B"
        assert snapshot["is_decided"] is True

    def test_decided_match_rejects_and_keeps_record(self, chess, storage):
        chess.add_game("alice", "Chess", "A", "B", "A")
        chess.add_game("alice", "Chess", "A", "B", "A")
        before = storage.raw("Chess")
        with pytest.raises(MatchAlreadyDecided):
            chess.add_game("alice", "Chess", "A", "B", "B")
        assert storage.raw("Chess") == before

    def test_standard_rejects_payload(self, chess):
        with pytest.raises(PayloadSchemaMismatch):
            chess.add_game("alice", "Chess", "A", "B", "A", SCORE)

    def test_scored_payload_stored_canonically(self, cup):
        snapshot = cup.add_game("alice", "Cup", "A", "B", "B", {"loser_score": 0, "winner_score": 2})
        assert snapshot["games"][0]["payload"] == {
            "winner_score": 2,
            "loser_score": 0,
            "overtime": False,
            "duration_seconds": None,
            "notes": None,
        }

    def test_scored_requires_payload(self, cup, storage):
        before = storage.raw("Cup")
        with pytest.raises(PayloadSchemaMismatch):
            cup.add_game("alice", "Cup", "A", "B", "A")
        assert storage.raw("Cup") == before
        assert cup.get_league("Cup")["matches"] == []

    def test_scored_schema_mismatch(self, cup):
        with pytest.raises(PayloadSchemaMismatch):
            cup.add_game("alice", "Cup", "A", "B", "A", {"winner_score": 1, "loser_score": 5})

    def test_rejection_logged_as_warning(self, chess, caplog):
        with caplog.at_level(logging.WARNING, logger="league_records"):
            with pytest.raises(Unauthorized):
                chess.add_game("mallory", "Chess", "A", "B", "A")
        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert record.error_type == "Unauthorized"
        assert record.category == "authorization"


class TestDeleteLeague:
    """Tests for delete_league()."""

    def test_owner_deletes_finished_league(self, chess):
        finish(chess, "Chess")
        assert chess.is_league_finished("Chess")
        chess.delete_league("alice", "Chess")
        assert not chess.league_exists("Chess")
        with pytest.raises(LeagueNotFound):
            chess.get_league("Chess")

    def test_unfinished_league_rejected(self, chess):
        chess.add_game("alice", "Chess", "A", "B", "A")
        with pytest.raises(LeagueNotFinished) as exc_info:
            chess.delete_league("alice", "Chess")
        assert exc_info.value.open_pairs == 3
        assert chess.league_exists("Chess")

    def test_force_deletes_unfinished(self, chess):
        chess.delete_league("alice", "Chess", force=True)
        assert not chess.league_exists("Chess")

    def test_trusted_cannot_delete(self, chess):
        finish(chess, "Chess")
        with pytest.raises(Unauthorized):
            chess.delete_league("bob", "Chess")
        assert chess.league_exists("Chess")

    def test_unknown_league(self, store):
        with pytest.raises(LeagueNotFound):
            store.delete_league("alice", "Nope")

    def test_name_reusable_after_delete(self, chess):
        chess.delete_league("alice", "Chess", force=True)
        snapshot = chess.create_league("bob", "Chess", ["X", "Y", "Z"], 5, "SCORED")
        assert snapshot["owner"] == "bob"
        assert snapshot["matches"] == []


class TestViews:
    """Tests for the read-only views."""

    def test_get_league_unknown(self, store):
        with pytest.raises(LeagueNotFound):
            store.get_league("Nope")

    def test_get_game_types(self, store):
        assert store.get_game_types() == (GameType.STANDARD, GameType.SCORED)

    def test_get_game_structure(self, store):
        schema = store.get_game_structure("SCORED")
        assert schema.game_type is GameType.SCORED
        assert schema.requires_payload

    def test_get_game_structure_unknown(self, store):
        with pytest.raises(UnknownGameType):
            store.get_game_structure("NOPE")

    def test_league_exists(self, chess):
        assert chess.league_exists("Chess")
        assert not chess.league_exists("Checkers")

    def test_is_league_finished_unknown(self, store):
        with pytest.raises(LeagueNotFound):
            store.is_league_finished("Nope")

    def test_views_do_not_change_record(self, chess, storage):
        chess.add_game("alice", "Chess", "A", "B", "A")
        before = storage.raw("Chess")
        chess.get_league("Chess")
        chess.is_league_finished("Chess")
        assert storage.raw("Chess") == before

    def test_corrupt_record(self, storage):
        storage.save("Broken", {"version": 99})
        store = LeagueStore(storage)
        with pytest.raises(CorruptRecord):
            store.get_league("Broken")


class TestLeagueIsolation:
    """Leagues never share state."""

    def test_games_only_touch_their_league(self, store):
        store.create_league("alice", "First", PLAYERS, 1, "STANDARD")
        store.create_league("alice", "Second", PLAYERS, 1, "STANDARD")
        store.add_game("alice", "First", "A", "B", "A")
        assert store.get_league("Second")["matches"] == []

    def test_separate_stores_share_nothing(self):
        one = LeagueStore(MemoryStorage())
        two = LeagueStore(MemoryStorage())
        one.create_league("alice", "Chess", PLAYERS, 3, "STANDARD")
        assert not two.league_exists("Chess")
