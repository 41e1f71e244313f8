#!/usr/bin/env python3
"""Apply database migrations with failures reported to Logfire."""

import sys

import logfire
from alembic import command
from alembic.config import Config
from sqlalchemy.engine import make_url

from remark.config import Settings
from remark.util.observability import configure_logfire


def main() -> int:
    """Upgrade the schema to head."""
    settings = Settings()
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting database migrations",
            database=make_url(settings.database_url).render_as_string(
                hide_password=True
            ),
        )
        command.upgrade(Config("alembic.ini"), "head")
        logfire.info("Database migrations completed successfully")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Fail the deploy instead of serving a stale schema
        raise


if __name__ == "__main__":
    sys.exit(main())
