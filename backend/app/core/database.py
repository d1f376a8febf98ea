from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker, AsyncEngine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool
from typing import Optional

from app.core.config import settings

# Base class for table models
Base = declarative_base()


def get_database_url(url: Optional[str] = None) -> str:
    """Get properly formatted async database URL"""
    db_url = url or settings.DATABASE_URL
    if db_url.startswith("postgresql://"):
        db_url = db_url.replace("postgresql://", "postgresql+asyncpg://")
    elif db_url.startswith("sqlite:///"):
        db_url = db_url.replace("sqlite:///", "sqlite+aiosqlite:///")
    return db_url


def create_engine(url: Optional[str] = None) -> AsyncEngine:
    """
    Create an async engine for the entity store.

    Connection pooling strategy:
    - SQLite: NullPool (required for thread safety)
    - Other backends in development: NullPool (simpler debugging)
    - Other backends in production: default pool with pre-ping
    """
    db_url = get_database_url(url)

    if "sqlite" in db_url:
        return create_async_engine(
            db_url,
            echo=settings.DB_ECHO,
            connect_args={"check_same_thread": False},
            poolclass=NullPool,
        )
    if settings.is_dev_mode():
        return create_async_engine(db_url, echo=settings.DB_ECHO, poolclass=NullPool)
    return create_async_engine(db_url, echo=settings.DB_ECHO, pool_pre_ping=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False
    )


async def init_db(engine: AsyncEngine) -> None:
    """Create tables"""
    # Import table models so they register on Base.metadata
    from app.models import entity_record  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db(engine: AsyncEngine) -> None:
    await engine.dispose()
