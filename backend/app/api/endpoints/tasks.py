from fastapi import APIRouter, Depends, Response, status
from typing import List

from app.core.logging_config import logger
from app.models.kinds import EntityKind
from app.models.startup import Startup
from app.models.task import Task
from app.modules.auth.dependencies import get_owned_startup, get_owned_task
from app.modules.storage import EntityStore, get_store
from app.schemas.task import TaskCreate, TaskUpdate

router = APIRouter()


@router.get("/startups/{startup_id}/tasks", response_model=List[Task])
async def list_tasks(
    startup: Startup = Depends(get_owned_startup),
    store: EntityStore = Depends(get_store),
):
    """All tasks for a startup, oldest first"""
    return await store.list(EntityKind.TASK, startup_id=startup.id)


@router.post("/startups/{startup_id}/tasks", response_model=Task, status_code=status.HTTP_201_CREATED)
async def create_task(
    task_data: TaskCreate,
    startup: Startup = Depends(get_owned_startup),
    store: EntityStore = Depends(get_store),
):
    task = await store.create(EntityKind.TASK, {
        **task_data.model_dump(),
        "startup_id": startup.id,
    })
    logger.info(f"[Tasks] Created task {task.id} for startup {startup.id}")
    return task


@router.patch("/tasks/{task_id}", response_model=Task)
async def update_task(
    updates: TaskUpdate,
    task: Task = Depends(get_owned_task),
    store: EntityStore = Depends(get_store),
):
    """Partial update; ownership is checked through the parent startup"""
    changes = updates.model_dump(exclude_unset=True)
    # Only description and due_date may be cleared
    changes = {
        key: value for key, value in changes.items()
        if value is not None or key in ("description", "due_date")
    }
    if not changes:
        return task
    return await store.update(EntityKind.TASK, task.id, changes)


@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(
    task: Task = Depends(get_owned_task),
    store: EntityStore = Depends(get_store),
):
    await store.delete(EntityKind.TASK, task.id)
    logger.info(f"[Tasks] Deleted task {task.id} from startup {task.startup_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
