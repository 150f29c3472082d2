# src/wheel_spinner/init_db.py
"""Create the database schema without running migrations."""

import logging

from wheel_spinner.core.logging import configure_logging
from wheel_spinner.core.settings import settings
from wheel_spinner.db.session import create_tables

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Initialize the database by creating all tables."""
    create_tables()
    logger.info("Database initialized at %s", settings.effective_database_url)


if __name__ == "__main__":
    configure_logging()
    init_db()
