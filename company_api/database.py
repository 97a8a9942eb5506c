"""
Database connection for PostgreSQL or local SQLite.

Env vars (set in deployment variables or .env):
    DATABASE_URL  -- full postgres:// connection string
    DATABASE_URL_FALLBACK -- optional sqlite+aiosqlite:///./companies.db for local dev
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from company_api.config import DATABASE_ECHO, DATABASE_URL

engine = create_async_engine(DATABASE_URL, echo=DATABASE_ECHO)
async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


class Base(DeclarativeBase):
    pass


async def init_db(bind: AsyncEngine | None = None):
    """Create all tables (safe to call multiple times)."""
    # Models must be registered on Base.metadata before create_all
    from company_api import models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_session() -> AsyncSession:
    async with async_session() as session:
        yield session
