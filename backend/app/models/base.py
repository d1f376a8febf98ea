from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    """Base for every stored entity. The store assigns `id` and `created_at`."""

    model_config = ConfigDict(from_attributes=True, extra="ignore")

    id: int = 0
    created_at: Optional[datetime] = None


class TimestampedRecord(Record):
    """Record whose `updated_at` the store refreshes on every update"""

    updated_at: Optional[datetime] = None


class StartupScopedRecord(TimestampedRecord):
    """Record that belongs to exactly one startup"""

    startup_id: int
