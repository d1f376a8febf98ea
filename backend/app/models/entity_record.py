from sqlalchemy import Column, String, Integer, DateTime, JSON, Index
from datetime import datetime

from app.core.database import Base


class EntityRecord(Base):
    """
    One stored entity of any kind.

    The full record lives in `data`; `startup_id` and `user_id` are copied
    out of it so parent lookups can use an index.
    """
    __tablename__ = "entity_records"

    __table_args__ = (
        Index('ix_entity_records_kind_startup', 'kind', 'startup_id'),
        Index('ix_entity_records_kind_user', 'kind', 'user_id'),
    )

    kind = Column(String(50), primary_key=True)
    id = Column(Integer, primary_key=True, autoincrement=False)
    startup_id = Column(Integer, nullable=True)
    user_id = Column(Integer, nullable=True)
    data = Column(JSON, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<EntityRecord {self.kind}#{self.id}>"


class EntitySequence(Base):
    """Last id handed out per kind; ids are never reused after a delete"""
    __tablename__ = "entity_sequences"

    kind = Column(String(50), primary_key=True)
    last_id = Column(Integer, nullable=False, default=0)
