import enum
from typing import Optional

from app.models.base import Record


class NotificationType(str, enum.Enum):
    COMMENT = "comment"
    SYSTEM = "system"


class Notification(Record):
    user_id: int
    type: NotificationType
    message: str
    read: bool = False
    related_entity_id: Optional[int] = None
    related_entity_type: Optional[str] = None
