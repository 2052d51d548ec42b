# Area: Shared
"""
league_records._config — CLI Configuration
===========================================

Configuration keys, defaults and validation for the command-line host.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULTS: Dict[str, Any] = {
    "db_path": "league_records.db",
    "log_file": "league_records.log",
    "log_level": "WARNING",
}

# Environment variable -> config key
ENV_MAPPINGS = {
    "LEAGUE_RECORDS_DB": "db_path",
    "LEAGUE_RECORDS_CALLER": "caller",
    "LEAGUE_RECORDS_LOG_FILE": "log_file",
    "LEAGUE_RECORDS_LOG_LEVEL": "log_level",
}

# Commands that change stored state and therefore need a caller
MUTATING_COMMANDS = {
    "create-league",
    "add-game",
    "delete-league",
}

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load config from defaults, an optional JSON file, then environment."""
    config: Dict[str, Any] = dict(DEFAULTS)

    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ValueError(f"Config file not found: {config_path}")
        with open(path, encoding="utf-8") as f:
            loaded = json.load(f)
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file must hold a JSON object: {config_path}")
        config.update(loaded)

    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            config[config_key] = os.environ[env_key]

    return config


def validate_config(config: Dict[str, Any], command: str) -> None:
    """
    Validate configuration for a command.

    Args:
        config: Configuration dict
        command: CLI subcommand about to run

    Raises:
        ValueError: If required keys are missing or invalid
    """
    if command in MUTATING_COMMANDS and not config.get("caller"):
        raise ValueError(
            f"Command '{command}' needs a caller identity "
            "(--caller or LEAGUE_RECORDS_CALLER)"
        )
    if not config.get("db_path"):
        raise ValueError("Missing required config key: db_path")
    level = str(config.get("log_level", "")).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Invalid log_level {config.get('log_level')!r}, expected one of {sorted(LOG_LEVELS)}")


def get_log_level(config: Dict[str, Any]) -> int:
    return getattr(logging, str(config.get("log_level", "WARNING")).upper())
