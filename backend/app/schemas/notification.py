from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime

from app.models.notification import NotificationType


class NotificationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    type: NotificationType
    message: str
    read: bool
    related_entity_id: Optional[int] = None
    related_entity_type: Optional[str] = None
    created_at: datetime


class MarkAllReadResponse(BaseModel):
    updated: int
