from typing import Optional

from app.core.logging_config import logger
from app.models.forum import ForumPost
from app.models.kinds import EntityKind
from app.models.notification import Notification, NotificationType
from app.models.user import User
from app.modules.storage.base import EntityStore


async def notify(
    store: EntityStore,
    user_id: int,
    message: str,
    type: NotificationType = NotificationType.SYSTEM,
    related_entity_id: Optional[int] = None,
    related_entity_type: Optional[str] = None,
) -> Notification:
    """Queue an unread notification for a user"""
    notification = await store.create(EntityKind.NOTIFICATION, {
        "user_id": user_id,
        "type": type,
        "message": message,
        "read": False,
        "related_entity_id": related_entity_id,
        "related_entity_type": related_entity_type,
    })
    logger.info(f"[Notifications] Notified user {user_id} ({type.value}) about {related_entity_type}:{related_entity_id}")
    return notification


async def notify_post_comment(store: EntityStore, post: ForumPost, commenter: User) -> Optional[Notification]:
    """Tell a post's author about a new comment; commenting on your own post is silent"""
    if post.user_id == commenter.id:
        return None

    return await notify(
        store,
        user_id=post.user_id,
        message=f'{commenter.username} commented on your post "{post.title}"',
        type=NotificationType.COMMENT,
        related_entity_id=post.id,
        related_entity_type="post",
    )
