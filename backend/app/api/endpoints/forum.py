"""
Community forum.

Reads are public. Writes need a signed-in user, and only the author may
edit or delete a post or comment. Commenting on someone else's post
notifies that post's author.
"""

from fastapi import APIRouter, Depends, Response, status
from typing import List

from app.core.exceptions import NotFoundError
from app.core.logging_config import logger
from app.models.forum import ForumComment, ForumPost
from app.models.kinds import EntityKind
from app.models.user import User
from app.modules.auth.dependencies import ensure_author, get_current_user
from app.modules.storage import EntityStore, get_store
from app.schemas.forum import (
    CommentCreate,
    CommentResponse,
    CommentUpdate,
    PostCreate,
    PostDetailResponse,
    PostResponse,
    PostUpdate,
)
from app.services.notification_service import notify_post_comment

router = APIRouter()


async def _get_post(store: EntityStore, post_id: int) -> ForumPost:
    post = await store.get(EntityKind.FORUM_POST, post_id)
    if not post:
        raise NotFoundError(EntityKind.FORUM_POST.label, post_id)
    return post


async def _get_comment(store: EntityStore, comment_id: int) -> ForumComment:
    comment = await store.get(EntityKind.FORUM_COMMENT, comment_id)
    if not comment:
        raise NotFoundError(EntityKind.FORUM_COMMENT.label, comment_id)
    return comment


# ==================== Posts ====================

@router.get("/posts", response_model=List[PostResponse])
async def list_posts(store: EntityStore = Depends(get_store)):
    return await store.list(EntityKind.FORUM_POST)


@router.get("/posts/category/{category}", response_model=List[PostResponse])
async def list_posts_by_category(category: str, store: EntityStore = Depends(get_store)):
    return await store.list(EntityKind.FORUM_POST, category=category)


@router.get("/posts/user/{user_id}", response_model=List[PostResponse])
async def list_posts_by_user(user_id: int, store: EntityStore = Depends(get_store)):
    return await store.list(EntityKind.FORUM_POST, user_id=user_id)


@router.get("/posts/{post_id}", response_model=PostDetailResponse)
async def get_post(post_id: int, store: EntityStore = Depends(get_store)):
    """Single post with its comments; every read counts as a view"""
    post = await store.increment(EntityKind.FORUM_POST, post_id, "views")
    comments = await store.list(EntityKind.FORUM_COMMENT, post_id=post_id)
    return PostDetailResponse(
        **post.model_dump(),
        comments=[CommentResponse.model_validate(c) for c in comments],
    )


@router.post("/posts", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    post_data: PostCreate,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    post = await store.create(EntityKind.FORUM_POST, {
        **post_data.model_dump(),
        "user_id": current_user.id,
        "likes": 0,
        "views": 0,
    })
    logger.info(f"[Forum] User {current_user.id} created post {post.id} in '{post.category}'")
    return post


@router.put("/posts/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: int,
    updates: PostUpdate,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    post = await _get_post(store, post_id)
    ensure_author(post, current_user, "update")

    changes = updates.model_dump(exclude_unset=True, exclude_none=True)
    if not changes:
        return post
    return await store.update(EntityKind.FORUM_POST, post.id, changes)


@router.delete("/posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: int,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    """Delete a post together with its comments"""
    post = await _get_post(store, post_id)
    ensure_author(post, current_user, "delete")

    comments = await store.list(EntityKind.FORUM_COMMENT, post_id=post.id)
    for comment in comments:
        await store.delete(EntityKind.FORUM_COMMENT, comment.id)
    await store.delete(EntityKind.FORUM_POST, post.id)

    logger.info(f"[Forum] Deleted post {post.id} and {len(comments)} comments")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/posts/{post_id}/like", response_model=PostResponse)
async def like_post(
    post_id: int,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    await _get_post(store, post_id)
    return await store.increment(EntityKind.FORUM_POST, post_id, "likes")


# ==================== Comments ====================

@router.get("/posts/{post_id}/comments", response_model=List[CommentResponse])
async def list_comments(post_id: int, store: EntityStore = Depends(get_store)):
    return await store.list(EntityKind.FORUM_COMMENT, post_id=post_id)


@router.post(
    "/posts/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: int,
    comment_data: CommentCreate,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    post = await _get_post(store, post_id)

    comment = await store.create(EntityKind.FORUM_COMMENT, {
        "post_id": post.id,
        "user_id": current_user.id,
        "content": comment_data.content,
        "likes": 0,
    })
    await notify_post_comment(store, post, current_user)
    return comment


@router.put("/comments/{comment_id}", response_model=CommentResponse)
async def update_comment(
    comment_id: int,
    updates: CommentUpdate,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    comment = await _get_comment(store, comment_id)
    ensure_author(comment, current_user, "update")
    return await store.update(EntityKind.FORUM_COMMENT, comment.id, {"content": updates.content})


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: int,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    comment = await _get_comment(store, comment_id)
    ensure_author(comment, current_user, "delete")
    await store.delete(EntityKind.FORUM_COMMENT, comment.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/comments/{comment_id}/like", response_model=CommentResponse)
async def like_comment(
    comment_id: int,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    await _get_comment(store, comment_id)
    return await store.increment(EntityKind.FORUM_COMMENT, comment_id, "likes")
