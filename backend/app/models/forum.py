from typing import List

from pydantic import Field

from app.models.base import TimestampedRecord


class ForumPost(TimestampedRecord):
    user_id: int
    title: str
    content: str
    category: str
    tags: List[str] = Field(default_factory=list)
    likes: int = 0
    views: int = 0


class ForumComment(TimestampedRecord):
    post_id: int
    user_id: int
    content: str
    likes: int = 0
