"""
Async SQLAlchemy engine & session factory.

``DATABASE_URL`` selects the driver: asyncpg for PostgreSQL deployments,
aiosqlite for local runs and the test suite.
"""

from __future__ import annotations

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.core.config import settings


def _engine_options(database_url: str) -> dict:
    """Pool settings for the backend named in *database_url*."""
    options: dict = {"echo": False, "pool_pre_ping": True}
    if make_url(database_url).get_backend_name() == "postgresql":
        options.update(pool_size=20, max_overflow=10, pool_recycle=300)
    return options


engine = create_async_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)
