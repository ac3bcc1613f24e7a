"""
patient_registry/db/session.py — Async SQLAlchemy session factory.

Uses the asyncpg driver against Postgres and aiosqlite for local SQLite.
Provides get_db() FastAPI dependency for connection-per-request pattern.
"""
from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from patient_registry.config import get_settings
from patient_registry.db.models import Base

settings = get_settings()


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine, picking pool options by backend."""
    # Convert postgresql:// → postgresql+asyncpg:// for async driver
    url = url.replace("postgresql://", "postgresql+asyncpg://", 1)

    kwargs: dict[str, Any] = {"echo": echo}
    if url.startswith("sqlite"):
        # One shared connection so an in-memory database survives across sessions
        kwargs.update(
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    else:
        kwargs.update(
            pool_size=10,
            max_overflow=20,
            pool_pre_ping=True,       # Detect stale connections before use
        )
    return create_async_engine(url, **kwargs)


engine = build_engine(settings.database_url, echo=not settings.is_production)

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def init_models(bind: AsyncEngine = engine) -> None:
    """Create all tables that do not exist yet (dev / tests; prod uses Alembic)."""
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: yields one async session per request."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
