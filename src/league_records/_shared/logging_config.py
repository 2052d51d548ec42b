# Area: Shared
"""
league_records._shared.logging_config — Structured logging setup
=================================================================

Configures dual logging: terminal (colored) + file (JSON lines).
Provides structured logging of rejected calls.
"""

from __future__ import annotations
import logging
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..errors import LeagueRecordsError

# Package logger
logger = logging.getLogger("league_records")


class TerminalFormatter(logging.Formatter):
    """Colored formatter for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # The record is shared with the file handler; restore it afterwards.
        levelname = record.levelname
        color = self.COLORS.get(levelname, self.RESET)
        record.levelname = f"{color}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


class SkipPrintedBlock(logging.Filter):
    """Drop records whose error block was already printed to the terminal."""

    def filter(self, record: logging.LogRecord) -> bool:
        return not getattr(record, "block_printed", False)


class JSONFormatter(logging.Formatter):
    """JSON formatter for file output."""

    EXTRA_FIELDS = ("league_name", "caller", "error_type", "category")

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in self.EXTRA_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                log_data[key] = value
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(
    log_file_path: Optional[str] = "league_records.log",
    level: int = logging.INFO,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str or None
        Path to the JSON log file. None disables file logging.
    level : int
        Logging level. Defaults to INFO.
    """
    pkg_logger = logging.getLogger("league_records")
    pkg_logger.setLevel(level)

    # Remove existing handlers
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()

    # Terminal handler with colors; stdout is reserved for command output
    terminal_handler = logging.StreamHandler(sys.stderr)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    terminal_handler.addFilter(SkipPrintedBlock())
    pkg_logger.addHandler(terminal_handler)

    if log_file_path:
        try:
            log_path = Path(log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            pkg_logger.addHandler(file_handler)
        except OSError as e:
            pkg_logger.warning(f"Could not create log file: {e}")

    # Prevent propagation to root logger
    pkg_logger.propagate = False


def log_call_error(error: "LeagueRecordsError") -> None:
    """
    Log a rejected call in the structured format.

    The framed block goes to stderr; the log record only reaches
    non-terminal handlers such as the JSON file.

    Parameters
    ----------
    error : LeagueRecordsError
        The error that aborted the call.
    """
    # Print to terminal (bypassing logger for exact formatting)
    print(error.format_error_log(), file=sys.stderr)

    logger.error(
        f"Call rejected: {error.error_type}: {error.message}",
        extra={
            "error_type": error.error_type,
            "category": error.category,
            "block_printed": True,
        },
    )
