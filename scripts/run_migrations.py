#!/usr/bin/env python3
"""Apply Alembic migrations, reporting failures to Logfire."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from learnhub.config import Settings
from learnhub.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    try:
        logfire.info("Starting database migrations")
        alembic_cfg = Config("alembic.ini")
        alembic_cfg.set_main_option("sqlalchemy.url", settings.database.url)
        command.upgrade(alembic_cfg, "head")
        logfire.info("Database migrations completed")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # The schema must be current before the API starts
        raise


if __name__ == "__main__":
    sys.exit(main())
