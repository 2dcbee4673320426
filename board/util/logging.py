"""Stdlib logging levels for the board API process.

Application events go through Logfire; this only tames the libraries that
still write to stdlib loggers (uvicorn, SQLAlchemy, asyncpg, alembic).
"""

import logging
import sys

from board.config import Settings

# Libraries that are chatty at INFO and only matter when something breaks.
QUIET_LOGGERS = ("uvicorn.access", "asyncpg", "alembic.runtime.migration")


def setup_logging(settings: Settings) -> None:
    """Configure root logging for ``scripts/start_app.py``.

    SQL statements are echoed at INFO only in debug mode.
    """
    level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("board").info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
