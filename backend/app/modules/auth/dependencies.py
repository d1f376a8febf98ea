from fastapi import Depends, Path, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Optional

from app.core.exceptions import ForbiddenError, NotFoundError, UnauthorizedError
from app.core.logging_config import set_user_id
from app.core.security import decode_token, get_token_subject
from app.models.kinds import EntityKind
from app.models.startup import Startup
from app.models.task import Task
from app.models.user import User
from app.modules.storage import EntityStore, get_store

# auto_error=False so a missing header is a 401 rather than HTTPBearer's 403
security = HTTPBearer(auto_error=False)


async def _load_user(request: Request, token: str, store: EntityStore) -> User:
    payload = decode_token(token)
    user_id = get_token_subject(payload, expected_type="access")

    user = await store.get(EntityKind.USER, user_id)
    if not user:
        raise UnauthorizedError("User not found")

    if not user.is_active:
        raise ForbiddenError("User account is inactive")

    # Used by the rate limiter key and by log context
    request.state.user_id = user.id
    set_user_id(user.id)
    return user


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    store: EntityStore = Depends(get_store),
) -> User:
    """Get current authenticated user"""
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Not authenticated")
    return await _load_user(request, credentials.credentials, store)


# ==================== Ownership Guards ====================

async def ensure_startup_owner(store: EntityStore, user: User, startup_id: int) -> Startup:
    """
    Resolve a startup and check the requester owns it.

    404 when the startup does not exist, 403 when it belongs to someone else.
    """
    startup = await store.get(EntityKind.STARTUP, startup_id)
    if not startup:
        raise NotFoundError("Startup", startup_id)

    if startup.user_id != user.id:
        raise ForbiddenError("You do not have access to this startup")

    return startup


def ensure_author(record, user: User, action: str = "modify") -> None:
    """Forum posts, comments and notifications may only be changed by their owner"""
    if record.user_id != user.id:
        raise ForbiddenError(f"You can only {action} your own content")


async def get_owned_startup(
    startup_id: int = Path(..., description="Startup ID"),
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
) -> Startup:
    """
    Get startup with ownership verification.

    Usage:
        @router.get("/{startup_id}")
        async def get_startup(startup: Startup = Depends(get_owned_startup)):
            return startup
    """
    return await ensure_startup_owner(store, current_user, startup_id)


async def get_owned_task(
    task_id: int = Path(..., description="Task ID"),
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
) -> Task:
    """
    Get task, deriving ownership from its parent startup on every call.

    404 when the task does not exist; 403 when the parent startup is missing
    or owned by someone else.
    """
    task = await store.get(EntityKind.TASK, task_id)
    if not task:
        raise NotFoundError("Task", task_id)

    startup = await store.get(EntityKind.STARTUP, task.startup_id)
    if not startup or startup.user_id != current_user.id:
        raise ForbiddenError("You do not have access to this task")

    return task
