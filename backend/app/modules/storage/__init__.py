"""
Storage Module - Entity Store

Backends:
- memory:   MemoryStore, process lifetime only (default, tests)
- database: DatabaseStore, SQLAlchemy async (SQLite/PostgreSQL)

The app builds one store in its lifespan and keeps it on app.state.store;
handlers receive it through the get_store dependency.
"""

from typing import Optional

from fastapi import Request

from app.core.config import settings
from app.core.logging_config import logger
from .base import EntityStore
from .memory_store import MemoryStore
from .db_store import DatabaseStore


def build_store(backend: Optional[str] = None, url: Optional[str] = None) -> EntityStore:
    """Create the store selected by STORAGE_BACKEND"""
    backend = (backend or settings.STORAGE_BACKEND).lower()
    if backend == "memory":
        logger.info("[Storage] Using in-memory entity store")
        return MemoryStore()
    if backend == "database":
        logger.info("[Storage] Using database entity store")
        return DatabaseStore(url)
    raise ValueError(f"Unknown STORAGE_BACKEND '{backend}' (expected 'memory' or 'database')")


def get_store(request: Request) -> EntityStore:
    """FastAPI dependency returning the application's store"""
    return request.app.state.store


__all__ = [
    "EntityStore",
    "MemoryStore",
    "DatabaseStore",
    "build_store",
    "get_store",
]
