"""Levels for libraries that log through the standard ``logging`` module."""

import logging
import sys

from learnhub.config import Settings

# Library loggers that are noisy at INFO; raised to DEBUG/INFO with ``debug``
QUIET_LOGGERS = {
    "sqlalchemy.engine": logging.INFO,
    "asyncpg": logging.WARNING,
    "uvicorn.access": logging.WARNING,
    "alembic": logging.INFO,
}


def setup_logging(settings: Settings) -> None:
    """Route stdlib logging to stdout.

    Application events go through logfire; this covers uvicorn, SQLAlchemy,
    asyncpg and Alembic.
    """
    level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stdout,
        force=True,
    )

    for name, debug_level in QUIET_LOGGERS.items():
        quiet = debug_level if settings.debug else max(debug_level, logging.WARNING)
        logging.getLogger(name).setLevel(quiet)
