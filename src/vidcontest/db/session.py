"""Database session management.

Provides engine and session factories keyed by database URL, with
SQLite thread-safety settings for FastAPI concurrency.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from vidcontest.core.settings import get_settings
from vidcontest.db.schema import Base

# Module-level engine cache for connection pooling
_engine_cache: dict[str, Engine] = {}

# Module-level session factory cache
_session_factory_cache: dict[str, sessionmaker] = {}


def _resolve_url(database_url: str | None) -> str:
    if database_url is None:
        database_url = get_settings().database_url
    return database_url


def get_engine(database_url: str | None = None) -> Engine:
    """Get SQLAlchemy engine for the database.

    Engines are cached by URL so subsequent calls share one connection pool.

    For SQLite, uses StaticPool and check_same_thread=False so the engine
    is usable from FastAPI worker threads, and creates the parent directory
    of the database file.

    Args:
        database_url: SQLAlchemy URL. Defaults to the configured URL.

    Returns:
        SQLAlchemy engine instance (cached).
    """
    database_url = _resolve_url(database_url)

    if database_url in _engine_cache:
        return _engine_cache[database_url]

    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        if url.database and url.database != ":memory:":
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
        engine = create_engine(
            database_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(database_url, echo=False, pool_pre_ping=True)

    _engine_cache[database_url] = engine
    return engine


def _get_session_factory(database_url: str | None = None) -> sessionmaker:
    """Get cached session factory for the database."""
    database_url = _resolve_url(database_url)

    if database_url in _session_factory_cache:
        return _session_factory_cache[database_url]

    factory = sessionmaker(bind=get_engine(database_url))
    _session_factory_cache[database_url] = factory
    return factory


def get_session(database_url: str | None = None) -> Session:
    """Get a database session.

    Note: Caller is responsible for closing the session. For automatic
    resource management, use get_db_session() context manager instead.
    """
    factory = _get_session_factory(database_url)
    return factory()


@contextmanager
def get_db_session(database_url: str | None = None) -> Generator[Session, None, None]:
    """Context manager for database sessions with automatic cleanup.

    Commits on successful exit, rolls back on exception, and always
    closes the session.

    Example:
        with get_db_session() as session:
            result = run_aggregation(session)
    """
    session = get_session(database_url)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(database_url: str | None = None) -> None:
    """Create all tables that do not exist yet."""
    engine = get_engine(database_url)
    Base.metadata.create_all(engine)
