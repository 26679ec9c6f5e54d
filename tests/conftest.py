import pytest

from src.infrastructure.persistence.database.db_connection import (
    dispose_engine,
    get_session,
    reset_engine,
)
from src.infrastructure.persistence.database.db_models import init_db


@pytest.fixture
def db_url(tmp_path):
    """File-backed SQLite URL in a per-test temporary directory."""
    return f"sqlite+aiosqlite:///{tmp_path / 'pitchmatch-test.db'}"


@pytest.fixture
async def initialize_db(db_url):
    """Point the global engine at a fresh database and create the schema."""
    engine = await reset_engine(db_url)
    try:
        await init_db(engine)
    except Exception as e:
        pytest.fail(f"Database initialization failed: {e}")
    yield engine
    await dispose_engine()


@pytest.fixture
async def db_session(initialize_db):
    """Provide database session with automatic rollback."""
    async with get_session(rollback=True) as session:
        yield session
