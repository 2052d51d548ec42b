# Area: Shared
"""
league_records.cli — Command-line interface
============================================

Runs league calls against a SQLite database. Every mutating command
needs a caller identity.

Usage:
    league-records --caller alice create-league "Chess Club" --players A B C --best-of 3
    league-records --caller alice add-game "Chess Club" A B --winner A
    league-records show-league "Chess Club"
    league-records game-structure SCORED

Settings are resolved in this order (later wins):
    1. Built-in defaults
    2. Config file: --config config.json
    3. Environment variables (a .env file is loaded first)
    4. CLI flags
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from ._config import get_log_level, load_config, validate_config
from ._shared import log_call_error, setup_logging
from ._storage import LeagueRepository, init_database
from .errors import LeagueRecordsError
from .store import LeagueStore


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="league-records",
        description="Record best-of match results for named leagues",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  league-records --caller alice create-league Chess --players A B C --best-of 3
  league-records --caller alice add-game Chess A B --winner A
  league-records --caller alice add-game Cup A B --winner B \\
      --payload '{"winner_score": 2, "loser_score": 1}'
  league-records --caller alice delete-league Chess --force
        """,
    )
    parser.add_argument("--config", type=str, help="Path to JSON config file")
    parser.add_argument("--db", dest="db_path", type=str, help="Path to SQLite database")
    parser.add_argument("--caller", type=str, help="Caller identity for mutating commands")
    parser.add_argument("--log-file", dest="log_file", type=str, help="Path to JSON log file")
    parser.add_argument("--verbose", action="store_true", help="Log at INFO level")

    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create-league", help="Create a league owned by the caller")
    create.add_argument("league_name")
    create.add_argument("--players", nargs="+", required=True)
    create.add_argument("--best-of", dest="best_of", type=int, required=True)
    create.add_argument("--game-type", dest="game_type", default="STANDARD")
    create.add_argument("--trusted", nargs="*", default=[], help="Trusted account ids")

    add = sub.add_parser("add-game", help="Add a game to a match")
    add.add_argument("league_name")
    add.add_argument("player_a")
    add.add_argument("player_b")
    add.add_argument("--winner", required=True)
    add.add_argument("--payload", type=str, default=None, help="Game payload as JSON")

    delete = sub.add_parser("delete-league", help="Delete a league (owner only)")
    delete.add_argument("league_name")
    delete.add_argument("--force", action="store_true", help="Delete even if unfinished")

    show = sub.add_parser("show-league", help="Print a league snapshot")
    show.add_argument("league_name")

    sub.add_parser("game-types", help="List registered game types")

    structure = sub.add_parser("game-structure", help="Print a game type's payload schema")
    structure.add_argument("game_type")

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Dict[str, Any]:
    """Merge config file, environment and CLI flags."""
    config = load_config(args.config)
    for key in ("db_path", "caller", "log_file"):
        value = getattr(args, key)
        if value is not None:
            config[key] = value
    if args.verbose:
        config["log_level"] = "INFO"
    return config


def run_command(store: LeagueStore, args: argparse.Namespace, caller: Optional[str]) -> Any:
    """Execute one subcommand and return its JSON-compatible result."""
    if args.command == "create-league":
        return store.create_league(
            caller,
            args.league_name,
            players=args.players,
            best_of=args.best_of,
            game_type=args.game_type,
            trusted_accounts=args.trusted,
        )
    if args.command == "add-game":
        payload = json.loads(args.payload) if args.payload is not None else None
        return store.add_game(
            caller, args.league_name, args.player_a, args.player_b, args.winner, payload
        )
    if args.command == "delete-league":
        store.delete_league(caller, args.league_name, force=args.force)
        return {"deleted": args.league_name}
    if args.command == "show-league":
        return store.get_league(args.league_name)
    if args.command == "game-types":
        return [game_type.value for game_type in store.get_game_types()]
    if args.command == "game-structure":
        return store.get_game_structure(args.game_type).to_dict()
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    load_dotenv()
    args = parse_args(argv)

    try:
        config = build_config(args)
        validate_config(config, args.command)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(config.get("log_file"), get_log_level(config))

    init_database(config["db_path"])
    store = LeagueStore(LeagueRepository(config["db_path"]))

    try:
        result = run_command(store, args, config.get("caller"))
    except json.JSONDecodeError as e:
        print(f"Error: --payload is not valid JSON: {e}", file=sys.stderr)
        return 1
    except LeagueRecordsError as e:
        log_call_error(e)
        return 1

    print(json.dumps(result, indent=2))
    return 0
