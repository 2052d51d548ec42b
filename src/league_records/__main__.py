# Area: Shared
"""Entry point for ``python -m league_records``."""

from .cli import main

raise SystemExit(main())
