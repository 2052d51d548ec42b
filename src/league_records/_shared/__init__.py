# Area: Shared
"""
Shared utilities used across the package.

This package contains:
- Logging configuration
"""

from .logging_config import (
    setup_logging,
    log_call_error,
    SkipPrintedBlock,
    TerminalFormatter,
    JSONFormatter,
)

__all__ = [
    "setup_logging",
    "log_call_error",
    "SkipPrintedBlock",
    "TerminalFormatter",
    "JSONFormatter",
]
