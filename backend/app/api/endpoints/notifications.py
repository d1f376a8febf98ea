from fastapi import APIRouter, Depends, Response, status
from typing import List

from app.core.exceptions import NotFoundError
from app.models.kinds import EntityKind
from app.models.notification import Notification
from app.models.user import User
from app.modules.auth.dependencies import ensure_author, get_current_user
from app.modules.storage import EntityStore, get_store
from app.schemas.notification import MarkAllReadResponse, NotificationResponse

router = APIRouter()


async def _get_own_notification(store: EntityStore, notification_id: int, user: User) -> Notification:
    notification = await store.get(EntityKind.NOTIFICATION, notification_id)
    if not notification:
        raise NotFoundError("Notification", notification_id)
    ensure_author(notification, user, "access")
    return notification


@router.get("", response_model=List[NotificationResponse])
async def list_notifications(
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    return await store.list(EntityKind.NOTIFICATION, user_id=current_user.id)


@router.get("/unread", response_model=List[NotificationResponse])
async def list_unread_notifications(
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    return await store.list(EntityKind.NOTIFICATION, user_id=current_user.id, read=False)


# Declared before /{notification_id}/read so "read-all" is never taken for an id
@router.put("/read-all", response_model=MarkAllReadResponse)
async def mark_all_read(
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    unread = await store.list(EntityKind.NOTIFICATION, user_id=current_user.id, read=False)
    for notification in unread:
        await store.update(EntityKind.NOTIFICATION, notification.id, {"read": True})
    return MarkAllReadResponse(updated=len(unread))


@router.put("/{notification_id}/read", response_model=NotificationResponse)
async def mark_read(
    notification_id: int,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    notification = await _get_own_notification(store, notification_id, current_user)
    if notification.read:
        return notification
    return await store.update(EntityKind.NOTIFICATION, notification.id, {"read": True})


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_notification(
    notification_id: int,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    notification = await _get_own_notification(store, notification_id, current_user)
    await store.delete(EntityKind.NOTIFICATION, notification.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
