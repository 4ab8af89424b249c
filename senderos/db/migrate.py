"""Create the reservations schema: ``python -m senderos.db.migrate``."""

import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from senderos.core.database import Base, engine, verify_database_connection
from senderos.core.logging import configure_logging

# Register every table on Base.metadata
from senderos import models  # noqa: F401

logger = logging.getLogger(__name__)


def create_tables() -> None:
    Base.metadata.create_all(bind=engine)


def run_migration() -> int:
    logger.info("Running migrations...")
    try:
        verify_database_connection()
        create_tables()
    except (RuntimeError, SQLAlchemyError):
        logger.exception("Error applying migrations")
        return 1
    logger.info("Migrations applied successfully")
    return 0


if __name__ == "__main__":
    configure_logging()
    sys.exit(run_migration())
