#!/usr/bin/env python3
"""Bring the LearnHub schema up to date.

Usage: run_migrations.py [REVISION]   (defaults to "head")
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from learnhub.config import Settings
from learnhub.util.logging import setup_logging
from learnhub.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parents[1] / "alembic.ini"


def main(argv: list[str]) -> int:
    """Upgrade the database to ``argv[0]`` (or head), reporting failures to Logfire."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    target = argv[0] if argv else "head"

    with logfire.span("run_migrations", target=target, environment=settings.environment):
        try:
            command.upgrade(Config(str(ALEMBIC_INI)), target)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                target=target,
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail loudly so the API never starts on a stale schema
            raise

    logfire.info("Database schema up to date", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
