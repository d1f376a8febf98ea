"""
SQLAlchemy-backed entity store.

Every record is one row of `entity_records` (kind, id, JSON document).
Works with any SQLAlchemy async driver; SQLite via aiosqlite by default.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import select, delete

from app.core.database import create_engine, create_session_factory, init_db, close_db
from app.core.exceptions import StorageError
from app.core.logging_config import logger
from app.models.base import Record
from app.models.entity_record import EntityRecord, EntitySequence
from app.models.kinds import EntityKind, model_for
from app.modules.storage.base import EntityStore

# Filters that map onto indexed columns
INDEXED_FILTERS = ("startup_id", "user_id")


class DatabaseStore(EntityStore):
    """Entity store over a single document table"""

    def __init__(self, url: Optional[str] = None):
        super().__init__()
        self.engine = create_engine(url)
        self.session_factory = create_session_factory(self.engine)

    async def initialize(self) -> None:
        await init_db(self.engine)
        logger.info(f"[DatabaseStore] Ready at {self.engine.url.render_as_string(hide_password=True)}")

    async def close(self) -> None:
        await close_db(self.engine)

    @staticmethod
    def _to_record(kind: EntityKind, row: EntityRecord) -> Record:
        return model_for(kind).model_validate(row.data)

    async def _next_id(self, kind: EntityKind) -> int:
        async with self.session_factory() as session, session.begin():
            sequence = await session.get(EntitySequence, kind.value)
            if sequence is None:
                sequence = EntitySequence(kind=kind.value, last_id=0)
                session.add(sequence)
            sequence.last_id += 1
            next_id = sequence.last_id
        return next_id

    async def _insert(self, kind: EntityKind, record: Record) -> None:
        async with self.session_factory() as session, session.begin():
            session.add(EntityRecord(
                kind=kind.value,
                id=record.id,
                startup_id=getattr(record, "startup_id", None),
                user_id=getattr(record, "user_id", None),
                data=record.model_dump(mode="json"),
                created_at=record.created_at,
                updated_at=getattr(record, "updated_at", None) or record.created_at,
            ))

    async def _replace(self, kind: EntityKind, record: Record) -> None:
        async with self.session_factory() as session, session.begin():
            row = await session.get(EntityRecord, (kind.value, record.id))
            if row is None:
                raise StorageError(f"{kind.value}#{record.id} vanished during update")
            row.data = record.model_dump(mode="json")
            row.startup_id = getattr(record, "startup_id", None)
            row.user_id = getattr(record, "user_id", None)
            row.updated_at = getattr(record, "updated_at", None) or row.updated_at

    async def _fetch(self, kind: EntityKind, entity_id: int) -> Optional[Record]:
        async with self.session_factory() as session:
            row = await session.get(EntityRecord, (kind.value, entity_id))
            return self._to_record(kind, row) if row is not None else None

    async def _query(self, kind: EntityKind, filters: Dict[str, Any]) -> List[Record]:
        stmt = select(EntityRecord).where(EntityRecord.kind == kind.value)
        for field in INDEXED_FILTERS:
            if filters.get(field) is not None:
                stmt = stmt.where(getattr(EntityRecord, field) == filters[field])
        stmt = stmt.order_by(EntityRecord.id)

        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [self._to_record(kind, row) for row in result.scalars().all()]

    async def _remove(self, kind: EntityKind, entity_id: int) -> bool:
        async with self.session_factory() as session, session.begin():
            result = await session.execute(
                delete(EntityRecord).where(
                    EntityRecord.kind == kind.value,
                    EntityRecord.id == entity_id,
                )
            )
            return result.rowcount > 0
