#!/usr/bin/env python3
"""Upgrade the Punchline schema, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py [revision]

The revision defaults to ``head``.
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from punchline.config import Settings
from punchline.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Apply migrations up to ``revision``."""
    settings = Settings()
    configure_logfire(settings, service_name="punchline-migrations")

    with logfire.span("alembic upgrade {revision}", revision=revision):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than start on a stale schema
            raise

    logfire.info("Database migrations completed", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
