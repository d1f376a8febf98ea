# Authentication module

from app.modules.auth.dependencies import (
    get_current_user,
    get_owned_startup,
    get_owned_task,
    ensure_startup_owner,
    ensure_author,
)

__all__ = [
    "get_current_user",
    "get_owned_startup",
    "get_owned_task",
    "ensure_startup_owner",
    "ensure_author",
]
