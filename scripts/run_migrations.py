#!/usr/bin/env python3
"""Run database migrations with Logfire error tracking.

Usage:
    python scripts/run_migrations.py           # upgrade to head
    python scripts/run_migrations.py -1        # roll back one revision
    python scripts/run_migrations.py base      # roll back everything
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from board.config import Settings
from board.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Run migrations and log any errors to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    target = argv[0] if argv else "head"
    downgrade = target == "base" or target.startswith("-")

    try:
        with logfire.span("run_migrations", target=target, downgrade=downgrade):
            alembic_cfg = Config("alembic.ini")
            if downgrade:
                command.downgrade(alembic_cfg, target)
            else:
                command.upgrade(alembic_cfg, target)

        logfire.info("Database migrations completed successfully", target=target)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails and doesn't start with broken schema
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
