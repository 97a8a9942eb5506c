from __future__ import annotations

import asyncio
import os
import sys
from pathlib import Path

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'company_api.merge'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Keep the module-level engine away from the working directory
    os.environ.setdefault("DATABASE_URL_FALLBACK", "sqlite+aiosqlite:///:memory:")


@pytest.fixture
def engine(tmp_path):
    from company_api.database import init_db

    # NullPool: every session opens a fresh connection, so the engine can be
    # shared between asyncio.run() calls and the TestClient's event loop.
    eng = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'companies.db'}", poolclass=NullPool)
    asyncio.run(init_db(eng))
    yield eng
    asyncio.run(eng.dispose())


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def seed(session_factory):
    """Insert companies with explicit ids: seed(Company(id=1, ...), ...)."""

    def _seed(*companies):
        async def _run():
            async with session_factory() as session:
                session.add_all(companies)
                await session.commit()

        asyncio.run(_run())

    return _seed
