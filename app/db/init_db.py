"""
Database initialization.

Creates all tables directly from the SQLModel metadata.  Production
databases are migrated with Alembic; this is for local runs and SQLite.
"""

import logging

from sqlmodel import SQLModel

from app.db.session import engine

logger = logging.getLogger(__name__)


def init_db() -> None:
    """
    Initialize database schema.

    - Imports every model so ``SQLModel.metadata`` knows all tables
    - Creates the tables that do not exist yet
    """
    import app.db.base  # noqa: F401

    logger.info("Creating database tables on %s", engine.url.render_as_string(hide_password=True))
    SQLModel.metadata.create_all(engine)
    logger.info("Database initialization complete")


if __name__ == "__main__":
    from app.core.logging import configure_logging

    configure_logging()
    init_db()
