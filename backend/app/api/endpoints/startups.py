from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import PlainTextResponse
from typing import List

from app.core.logging_config import logger
from app.models.kinds import EntityKind
from app.models.startup import Startup
from app.models.user import User
from app.modules.auth.dependencies import get_current_user, get_owned_startup
from app.modules.storage import EntityStore, get_store
from app.schemas.startup import (
    StartupCreate,
    StartupExport,
    StartupProgressResponse,
    StartupResponse,
    StartupUpdate,
)
from app.services.progress_service import section_statuses
from app.services.startup_export import StartupExportService

router = APIRouter()


@router.get("", response_model=List[StartupResponse])
async def list_startups(
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    """List the signed-in user's startups"""
    return await store.list(EntityKind.STARTUP, user_id=current_user.id)


@router.post("", response_model=StartupResponse, status_code=status.HTTP_201_CREATED)
async def create_startup(
    startup_data: StartupCreate,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    """Create a startup owned by the signed-in user, starting at 0% progress"""
    startup = await store.create(EntityKind.STARTUP, {
        **startup_data.model_dump(),
        "user_id": current_user.id,
        "progress": 0,
    })
    logger.info(f"[Startups] Created startup {startup.id} '{startup.name}' for user {current_user.id}")
    return startup


@router.get("/{startup_id}", response_model=StartupResponse)
async def get_startup(startup: Startup = Depends(get_owned_startup)):
    return startup


@router.patch("/{startup_id}", response_model=StartupResponse)
async def update_startup(
    updates: StartupUpdate,
    startup: Startup = Depends(get_owned_startup),
    store: EntityStore = Depends(get_store),
):
    """Update name, description, industry or stage; progress is never client-settable"""
    changes = updates.model_dump(exclude_unset=True, exclude_none=True)
    if not changes:
        return startup
    return await store.update(EntityKind.STARTUP, startup.id, changes)


@router.delete("/{startup_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_startup(
    startup: Startup = Depends(get_owned_startup),
    store: EntityStore = Depends(get_store),
):
    """Delete the startup record. Sections and tasks are left in the store."""
    await store.delete(EntityKind.STARTUP, startup.id)
    logger.info(f"[Startups] Deleted startup {startup.id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{startup_id}/progress", response_model=StartupProgressResponse)
async def get_startup_progress(
    startup: Startup = Depends(get_owned_startup),
    store: EntityStore = Depends(get_store),
):
    """Stored progress plus which planning sections are filled in"""
    sections = await section_statuses(store, startup.id)
    return StartupProgressResponse(
        startup_id=startup.id,
        progress=startup.progress,
        completed_sections=sum(1 for section in sections if section.completed),
        total_sections=len(sections),
        sections=sections,
    )


@router.get("/{startup_id}/export", response_model=StartupExport)
async def export_startup(
    format: str = Query("json", pattern="^(json|markdown)$"),
    startup: Startup = Depends(get_owned_startup),
    store: EntityStore = Depends(get_store),
):
    """Export the whole plan as JSON or as a markdown business plan"""
    service = StartupExportService(store)
    if format == "markdown":
        return PlainTextResponse(
            await service.render_markdown(startup),
            media_type="text/markdown",
        )
    return await service.build_export(startup)
