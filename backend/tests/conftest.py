"""Shared fixtures — in-memory SQLite database and gateway."""

import os

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from backoffice.infrastructure.database import Base  # noqa: E402
from backoffice.infrastructure.database.session import enable_sqlite_foreign_keys  # noqa: E402
from backoffice.infrastructure.gateway import SQLAlchemyDataGateway  # noqa: E402


@pytest_asyncio.fixture
async def session_factory():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest.fixture
def db_gateway(session_factory) -> SQLAlchemyDataGateway:
    return SQLAlchemyDataGateway(session_factory)
