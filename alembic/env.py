"""
alembic/env.py — Async-compatible Alembic environment.

Key design decisions:
- Uses the same SQLAlchemy async drivers as the app (asyncpg / aiosqlite).
- Offline mode (--sql) renders SQL without a database connection.
- The URL comes from DATABASE_URL via the app settings, so migrations and
  the API always target the same database.
- Autogenerate compares against all ORM models imported from patient_registry.db.models.
"""
from __future__ import annotations

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from alembic import context

# ── Import ORM Base so autogenerate discovers all models ─────────────────────
from patient_registry.config import get_settings  # noqa: E402
from patient_registry.db.models import Base  # noqa: E402

# ── Alembic Config object ─────────────────────────────────────────────────────
config = context.config

# Use DATABASE_URL from settings unless the caller already set a URL on the Config.
_db_url = config.get_main_option("sqlalchemy.url") or get_settings().database_url
config.set_main_option(
    "sqlalchemy.url", _db_url.replace("postgresql://", "postgresql+asyncpg://", 1)
)

# Interpret the config file for Python logging.
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# ── Target metadata ───────────────────────────────────────────────────────────
target_metadata = Base.metadata


# ── Offline mode (generates SQL script, no DB connection needed) ──────────────
def run_migrations_offline() -> None:
    """Generate SQL without connecting to the DB (alembic upgrade --sql)."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
    )
    with context.begin_transaction():
        context.run_migrations()


# ── Online mode (connects to DB and applies migrations directly) ──────────────
def do_run_migrations(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,          # detect column type changes
        render_as_batch=connection.dialect.name == "sqlite",
    )
    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """Create an async engine and run migrations inside a sync wrapper."""
    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,    # never pool during migrations
    )
    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)
    await connectable.dispose()


def run_migrations_online() -> None:
    """Entry point for online migration (used by alembic upgrade head)."""
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
