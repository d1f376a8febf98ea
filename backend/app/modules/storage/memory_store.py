"""
In-memory entity store.

Process-lifetime only: everything is lost on restart. Used for local
development and as the test backend.
"""

from collections import defaultdict
from typing import Any, Dict, List, Optional

from app.models.base import Record
from app.models.kinds import EntityKind
from app.modules.storage.base import EntityStore


class MemoryStore(EntityStore):
    """Dict-per-kind store with per-kind id counters"""

    def __init__(self):
        super().__init__()
        self._records: Dict[EntityKind, Dict[int, Record]] = defaultdict(dict)
        self._counters: Dict[EntityKind, int] = defaultdict(int)

    async def _next_id(self, kind: EntityKind) -> int:
        self._counters[kind] += 1
        return self._counters[kind]

    async def _insert(self, kind: EntityKind, record: Record) -> None:
        self._records[kind][record.id] = record.model_copy(deep=True)

    async def _replace(self, kind: EntityKind, record: Record) -> None:
        self._records[kind][record.id] = record.model_copy(deep=True)

    async def _fetch(self, kind: EntityKind, entity_id: int) -> Optional[Record]:
        record = self._records[kind].get(entity_id)
        return record.model_copy(deep=True) if record is not None else None

    async def _query(self, kind: EntityKind, filters: Dict[str, Any]) -> List[Record]:
        return [
            self._records[kind][entity_id].model_copy(deep=True)
            for entity_id in sorted(self._records[kind])
        ]

    async def _remove(self, kind: EntityKind, entity_id: int) -> bool:
        return self._records[kind].pop(entity_id, None) is not None
