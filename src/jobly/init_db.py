"""Database initialization script."""

import logging

from sqlalchemy.engine import Engine

from jobly.config import settings
from jobly.database import Base, create_db_engine
from jobly.logging_config import configure_logging
from jobly.models import Company, Job  # noqa: F401

logger = logging.getLogger(__name__)


def init_database(engine: Engine | None = None):
    """
    Initialize the database by creating all tables.

    This function creates all tables defined in the models if they don't exist.
    It's safe to run multiple times as it won't recreate existing tables.

    Args:
        engine: Engine to create tables on (defaults to one for settings.database_url)
    """
    engine = engine or create_db_engine(settings.database_url)
    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Tables ready: %s", ", ".join(Base.metadata.tables.keys()))


if __name__ == "__main__":
    configure_logging(settings.log_level)
    init_database()
