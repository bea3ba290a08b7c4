from sqlalchemy.engine import Engine
from sqlalchemy import inspect
from database import engine as default_engine, Base
import logging

import models  # noqa: F401  registers the tables on Base.metadata

logger = logging.getLogger(__name__)


def init_database(engine: Engine | None = None):
    """
    Create any missing tables.

    Existing tables are left alone, so this is safe to run on every startup.
    """
    engine = engine or default_engine
    existing = set(inspect(engine).get_table_names())
    Base.metadata.create_all(bind=engine)

    created = [t for t in Base.metadata.tables if t not in existing]
    if created:
        logger.info(f"✅ Created tables: {', '.join(created)}")
    else:
        logger.info("Database schema up to date")


if __name__ == "__main__":
    from config.app_config import LOG_LEVEL
    from utils.logging_utils import configure_logging

    configure_logging(LOG_LEVEL)
    init_database()
