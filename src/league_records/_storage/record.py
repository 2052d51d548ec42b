# Area: Storage
"""
league_records._storage.record — League record conversion
==========================================================

Converts a League into the JSON-compatible record kept in storage and
back. Payloads stay in their canonical encoding (base64 in the record);
they are never stored in their original untyped form.
"""

from __future__ import annotations
import base64
import binascii
from typing import Any, Dict

from ..errors import CorruptRecord, LeagueRecordsError
from .._game_types import resolve_game_type
from .._league import Game, League, LeagueProperties, Match, PlayerPair

RECORD_VERSION = 1


def league_to_record(league: League) -> Dict[str, Any]:
    """Build the storage record of a league."""
    return {
        "version": RECORD_VERSION,
        "name": league.name,
        "owner": league.owner,
        "players": list(league.players),
        "best_of": league.properties.best_of,
        "game_type": league.properties.game_type.value,
        "trusted_accounts": sorted(league.trusted_accounts),
        "matches": [
            {
                "players": list(match.pair.as_tuple()),
                "games": [
                    {"winner": game.winner, "payload": _encode_bytes(game.payload)}
                    for game in match.games
                ],
            }
            for match in league.matches
        ],
    }


def league_from_record(league_name: str, record: Dict[str, Any]) -> League:
    """
    Rebuild a league from its storage record.

    Raises:
        CorruptRecord: If the record has an unknown version, misses
            fields, holds a non-canonical payload or breaks a league
            invariant
    """
    version = record.get("version") if isinstance(record, dict) else None
    if version != RECORD_VERSION:
        raise CorruptRecord(league_name, f"unsupported record version {version!r}")

    try:
        players = list(record["players"])
        properties = LeagueProperties(
            best_of=int(record["best_of"]),
            game_type=resolve_game_type(record["game_type"]),
        )
        matches = []
        seen = set()
        for entry in record["matches"]:
            first, second = entry["players"]
            if first not in players or second not in players:
                raise CorruptRecord(league_name, f"match between unknown players {entry['players']}")
            if first == second:
                raise CorruptRecord(league_name, f"match of player '{first}' against itself")
            pair = PlayerPair.of(first, second, players)
            if pair in seen:
                raise CorruptRecord(league_name, f"duplicate match for pair {list(pair.as_tuple())}")
            seen.add(pair)
            games = [
                Game(winner=g["winner"], payload=_decode_bytes(g["payload"]))
                for g in entry["games"]
            ]
            for game in games:
                game.content(properties.game_type)
            matches.append(Match.restore(pair, properties.best_of, properties.game_type, games))
        return League(
            name=record["name"],
            players=players,
            properties=properties,
            owner=record["owner"],
            trusted_accounts=record["trusted_accounts"],
            matches=matches,
        )
    except CorruptRecord:
        raise
    except LeagueRecordsError as e:
        raise CorruptRecord(league_name, e.message) from e
    except (KeyError, TypeError, ValueError, binascii.Error) as e:
        raise CorruptRecord(league_name, f"{type(e).__name__}: {e}") from e


def _encode_bytes(payload: Any) -> Any:
    if payload is None:
        return None
    return base64.b64encode(payload).decode("ascii")


def _decode_bytes(value: Any) -> Any:
    if value is None:
        return None
    return base64.b64decode(value, validate=True)
