"""SQLAlchemy database configuration and connection management.

This module is responsible for:
- Engine creation and configuration
- Session management
- Transaction handling
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.config import get_logger, settings

logger = get_logger(__name__)


def _ensure_sqlite_directory(db_url: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    url = make_url(db_url)
    if url.get_backend_name() != "sqlite":
        return
    database = url.database
    if database and database != ":memory:":
        Path(database).parent.mkdir(parents=True, exist_ok=True)


def create_db_engine(connection_string: str | None = None) -> AsyncEngine:
    """Create async SQLAlchemy engine, applying SQLite pragmas when relevant."""
    db_url = connection_string or settings.database.url

    connect_args = {}
    is_sqlite = db_url.startswith("sqlite")
    if is_sqlite:
        _ensure_sqlite_directory(db_url)
        connect_args = {
            "check_same_thread": False,
            "timeout": float(settings.database.pool_timeout),
        }

    engine = create_async_engine(
        db_url,
        connect_args=connect_args,
        pool_pre_ping=True,
        echo=settings.database.echo,
    )

    if is_sqlite:

        @event.listens_for(engine.sync_engine, "connect")
        def _set_sqlite_pragma(dbapi_connection, _):  # pragma: no cover
            """Set SQLite PRAGMAs on connection creation."""
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys = ON")
            cursor.execute("PRAGMA busy_timeout = 30000")
            cursor.close()

    logger.debug(f"Created database engine for {make_url(db_url).render_as_string()}")
    return engine


# Global engine singleton
_engine: AsyncEngine | None = None

# Global session factory singleton
_session_factory: async_sessionmaker | None = None


def get_engine() -> AsyncEngine:
    """Get or create the global database engine singleton."""
    global _engine
    if _engine is None:
        _engine = create_db_engine()
    return _engine


def create_session_factory(engine: AsyncEngine | None = None) -> async_sessionmaker:
    """Create an async session factory for the given engine.

    Args:
        engine: Optional engine (uses global engine if None)
    """
    return async_sessionmaker(
        bind=engine or get_engine(),
        expire_on_commit=False,
        autoflush=True,
    )


def get_session_factory() -> async_sessionmaker:
    """Get or create the global session factory singleton."""
    global _session_factory
    if _session_factory is None:
        _session_factory = create_session_factory()
    return _session_factory


async def reset_engine(connection_string: str | None = None) -> AsyncEngine:
    """Dispose the current engine and bind the singletons to a new database.

    Used by tests that point the store at a temporary database.
    """
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = create_db_engine(connection_string)
    _session_factory = create_session_factory(_engine)
    return _engine


async def dispose_engine() -> None:
    """Dispose the global engine and forget the singletons.

    Pooled aiosqlite connections are bound to the event loop that opened them,
    so each `asyncio.run` call disposes before its loop closes.
    """
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None


@asynccontextmanager
async def get_session(rollback: bool = True) -> AsyncGenerator[AsyncSession]:
    """Get an asynchronous database session with automatic transaction management.

    The session commits when the context manager exits without an exception.

    Args:
        rollback: If True (default), automatically rolls back on exception.
    """
    session = get_session_factory()()
    try:
        yield session
        await session.commit()
    except Exception:
        if rollback:
            await session.rollback()
        raise
    finally:
        await session.close()


@asynccontextmanager
async def transaction(session: AsyncSession) -> AsyncGenerator[AsyncSession]:
    """Create a savepoint that commits or rolls back independently.

    Example:
        ```python
        async with get_session() as session:
            async with transaction(session):
                session.add(record)
        ```
    """
    async with session.begin_nested():
        yield session
