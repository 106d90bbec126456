"""Shared fixtures for the eventledger test suite."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from eventledger.api.deps import get_db_session
from eventledger.application import Mediator
from eventledger.db import models  # noqa: F401
from eventledger.infrastructure.database import Base, build_engine
from eventledger.main import create_app

from tests.fakes import (
    InMemoryAccountBalanceRepository,
    InMemoryAccountRepository,
    InMemoryLedgerEventRepository,
)


# ---------------------------------------------------------------------------
# In-memory repositories
# ---------------------------------------------------------------------------

@pytest.fixture
def account_repo() -> InMemoryAccountRepository:
    return InMemoryAccountRepository()


@pytest.fixture
def event_repo() -> InMemoryLedgerEventRepository:
    return InMemoryLedgerEventRepository()


@pytest.fixture
def balance_repo() -> InMemoryAccountBalanceRepository:
    return InMemoryAccountBalanceRepository()


@pytest.fixture
def mediator(account_repo, event_repo, balance_repo) -> Mediator:
    return Mediator(account_repo, event_repo, balance_repo)


# ---------------------------------------------------------------------------
# SQLite database
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = build_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


# ---------------------------------------------------------------------------
# HTTP client
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    app = create_app()

    async def _override_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _override_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
