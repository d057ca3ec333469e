"""Asyncpg connection utilities."""
from pathlib import Path
from typing import Optional

import asyncpg

from bookstock.config import Settings
from bookstock.utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_PATH = Path(__file__).parent / "schema.sql"
DROP_SCHEMA_SQL = "DROP TABLE IF EXISTS book"


def _password(settings: Settings) -> Optional[str]:
    # Empty password means trust auth for local development.
    if settings.db_password and settings.db_password.strip():
        return settings.db_password.strip()
    return None


async def create_pool(settings: Settings) -> asyncpg.pool.Pool:
    """Open the connection pool described by settings."""
    pool = await asyncpg.create_pool(
        host=settings.db_host,
        port=settings.db_port,
        user=settings.db_user,
        password=_password(settings),
        database=settings.db_name,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        max_inactive_connection_lifetime=settings.db_conn_max_inactive_lifetime,
        command_timeout=settings.db_query_timeout,
    )
    logger.info("Connected to database %s at %s:%s", settings.db_name, settings.db_host, settings.db_port)
    return pool


async def close_pool(pool: Optional[asyncpg.pool.Pool]) -> None:
    if pool is not None:
        await pool.close()
        logger.info("Database pool closed")


async def run_migrations(pool: asyncpg.pool.Pool, schema_sql: str) -> None:
    async with pool.acquire() as conn:
        await conn.execute(schema_sql)


async def ensure_schema_exists(pool: asyncpg.pool.Pool) -> None:
    """Create the book table if it doesn't exist."""
    await run_migrations(pool, SCHEMA_PATH.read_text())
    logger.info("Database schema ensured")


async def drop_schema(pool: asyncpg.pool.Pool) -> None:
    await run_migrations(pool, DROP_SCHEMA_SQL)
    logger.info("Database schema dropped")
