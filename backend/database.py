from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from config.app_config import DATABASE_URL, DATA_DIR, SQL_ECHO

Base = declarative_base()


def build_engine(url: str = DATABASE_URL, **kwargs) -> Engine:
    """
    Create an engine for the given URL.

    SQLite connections get foreign keys and a busy timeout; other backends
    get a pre-ping so stale pooled connections are replaced.
    """
    if url.startswith('sqlite'):
        kwargs.setdefault('connect_args', {'check_same_thread': False})
        if ':memory:' not in url:
            DATA_DIR.mkdir(parents=True, exist_ok=True)
    else:
        kwargs.setdefault('pool_pre_ping', True)

    new_engine = create_engine(url, echo=SQL_ECHO, **kwargs)

    if url.startswith('sqlite'):
        @event.listens_for(new_engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA busy_timeout=5000")
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return new_engine


engine = build_engine()
SessionLocal = sessionmaker(bind=engine)


def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
