"""
Entity Store - keyed storage for every record the API manages.

Ids are integers assigned per kind, starting at 1 and never reused.
Backends implement a handful of unlocked primitives; the public methods
here add timestamps, merging and the write lock, so every backend
shares the same semantics:

    create -> get / get_by_startup / list -> update -> delete
    upsert_by_parent: create-or-merge for one-per-startup kinds
"""

import asyncio
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from app.core.exceptions import NotFoundError
from app.core.logging_config import logger
from app.models.base import Record
from app.models.kinds import EntityKind, model_for

# Fields the store owns; partial updates may not overwrite them
PROTECTED_FIELDS = ("id", "created_at", "updated_at")


class EntityStore(ABC):
    """Abstract entity store"""

    def __init__(self):
        # Serializes writes so id allocation and create-or-merge never interleave
        self._write_lock = asyncio.Lock()

    # ==========================================
    # Backend primitives
    # ==========================================

    @abstractmethod
    async def _next_id(self, kind: EntityKind) -> int:
        """Reserve the next id for `kind`"""

    @abstractmethod
    async def _insert(self, kind: EntityKind, record: Record) -> None:
        ...

    @abstractmethod
    async def _replace(self, kind: EntityKind, record: Record) -> None:
        ...

    @abstractmethod
    async def _fetch(self, kind: EntityKind, entity_id: int) -> Optional[Record]:
        ...

    @abstractmethod
    async def _query(self, kind: EntityKind, filters: Dict[str, Any]) -> List[Record]:
        """
        Candidate records for `filters`, ordered by id.
        Backends may pre-filter on indexed fields; the caller re-checks every filter.
        """

    @abstractmethod
    async def _remove(self, kind: EntityKind, entity_id: int) -> bool:
        ...

    async def initialize(self) -> None:
        """Prepare the backend (create tables etc.)"""

    async def close(self) -> None:
        """Release backend resources"""

    # ==========================================
    # Public API
    # ==========================================

    async def create(self, kind: EntityKind, data: Dict[str, Any]) -> Record:
        async with self._write_lock:
            return await self._create(EntityKind(kind), data)

    async def get(self, kind: EntityKind, entity_id: int) -> Optional[Record]:
        return await self._fetch(EntityKind(kind), entity_id)

    async def get_by_startup(self, kind: EntityKind, startup_id: int) -> Optional[Record]:
        matches = await self.list(kind, startup_id=startup_id)
        return matches[0] if matches else None

    async def list(self, kind: EntityKind, **filters: Any) -> List[Record]:
        candidates = await self._query(EntityKind(kind), filters)
        return [
            record for record in candidates
            if all(getattr(record, key, None) == value for key, value in filters.items())
        ]

    async def count(self, kind: EntityKind, **filters: Any) -> int:
        return len(await self.list(kind, **filters))

    async def update(self, kind: EntityKind, entity_id: int, partial: Dict[str, Any]) -> Record:
        kind = EntityKind(kind)
        async with self._write_lock:
            existing = await self._fetch(kind, entity_id)
            if existing is None:
                raise NotFoundError(kind.label, entity_id)
            return await self._merge(kind, existing, partial)

    async def increment(self, kind: EntityKind, entity_id: int, field: str, amount: int = 1) -> Record:
        """Bump a counter field (likes, views) without losing concurrent bumps"""
        kind = EntityKind(kind)
        async with self._write_lock:
            existing = await self._fetch(kind, entity_id)
            if existing is None:
                raise NotFoundError(kind.label, entity_id)
            return await self._merge(kind, existing, {field: getattr(existing, field) + amount})

    async def update_by_startup(self, kind: EntityKind, startup_id: int, partial: Dict[str, Any]) -> Record:
        kind = EntityKind(kind)
        async with self._write_lock:
            existing = await self.get_by_startup(kind, startup_id)
            if existing is None:
                raise NotFoundError(kind.label)
            return await self._merge(kind, existing, partial)

    async def upsert_by_parent(
        self,
        kind: EntityKind,
        startup_id: int,
        data: Dict[str, Any],
        partial: Optional[Dict[str, Any]] = None,
    ) -> Tuple[Record, bool]:
        """
        Create the startup's row for `kind` from `data`, or merge `partial`
        (default: `data`) into the existing one.

        Returns (record, created). The lookup and the write happen under the
        write lock, so concurrent calls can never produce a second row.
        """
        kind = EntityKind(kind)
        async with self._write_lock:
            existing = await self.get_by_startup(kind, startup_id)
            if existing is not None:
                changes = data if partial is None else partial
                return await self._merge(kind, existing, changes), False
            record = await self._create(kind, {**data, "startup_id": startup_id})
            return record, True

    async def create_if_absent(
        self,
        kind: EntityKind,
        startup_id: int,
        data: Dict[str, Any],
    ) -> Tuple[Record, bool]:
        """Create the startup's row for `kind` unless one exists; returns (record, created)"""
        kind = EntityKind(kind)
        async with self._write_lock:
            existing = await self.get_by_startup(kind, startup_id)
            if existing is not None:
                return existing, False
            record = await self._create(kind, {**data, "startup_id": startup_id})
            return record, True

    async def delete(self, kind: EntityKind, entity_id: int) -> bool:
        kind = EntityKind(kind)
        async with self._write_lock:
            removed = await self._remove(kind, entity_id)
        if removed:
            logger.log_store_operation("delete", kind.value, entity_id)
        return removed

    # ==========================================
    # Helpers (caller holds the write lock)
    # ==========================================

    async def _create(self, kind: EntityKind, data: Dict[str, Any]) -> Record:
        model_cls = model_for(kind)
        now = datetime.utcnow()

        values = {k: v for k, v in data.items() if k not in PROTECTED_FIELDS}
        values["created_at"] = now
        if "updated_at" in model_cls.model_fields:
            values["updated_at"] = now

        # Validate before reserving an id so bad input never burns one
        model_cls.model_validate({**values, "id": 0})
        values["id"] = await self._next_id(kind)
        record = model_cls.model_validate(values)

        await self._insert(kind, record)
        logger.log_store_operation("create", kind.value, record.id)
        return record

    async def _merge(self, kind: EntityKind, existing: Record, partial: Dict[str, Any]) -> Record:
        model_cls = model_for(kind)

        values = existing.model_dump()
        values.update({k: v for k, v in partial.items() if k not in PROTECTED_FIELDS})
        if "updated_at" in model_cls.model_fields:
            values["updated_at"] = datetime.utcnow()

        record = model_cls.model_validate(values)
        await self._replace(kind, record)
        logger.log_store_operation("update", kind.value, record.id)
        return record
