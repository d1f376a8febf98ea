"""
Extended planning artifacts - roadmap, funding strategy and friends.

One row per startup per kind, like the wizard sections, but with
explicit verbs:

    GET  /startup-features/{kind}/{startup_id}   404 when absent
    POST /startup-features/{kind}                body carries startup_id; 409 if one exists
    PUT  /startup-features/{kind}/{startup_id}   merge update; 404 when absent

These artifacts do not count toward startup progress.
"""

from fastapi import APIRouter, Depends, status
from typing import Dict, List, Type

from pydantic import BaseModel

from app.core.exceptions import ConflictError, NotFoundError
from app.core.logging_config import logger
from app.models.base import Record
from app.models.kinds import EntityKind, model_for
from app.models.startup import Startup
from app.models.startup_feature import Milestone, Roadmap
from app.models.user import User
from app.modules.auth.dependencies import ensure_startup_owner, get_current_user, get_owned_startup
from app.modules.storage import EntityStore, get_store
from app.schemas.startup_feature import (
    FeatureDocumentCreate,
    FeatureDocumentUpdate,
    MilestoneStatusUpdate,
    MilestoneTaskUpdate,
    RoadmapCreate,
    RoadmapUpdate,
)

router = APIRouter()

FEATURE_ROUTES: Dict[EntityKind, str] = {
    EntityKind.ROADMAP: "roadmap",
    EntityKind.FUNDING_STRATEGY: "funding-strategy",
    EntityKind.SCALABILITY_PLAN: "scalability-plan",
    EntityKind.LAUNCH_TOOLKIT: "launch-toolkit",
    EntityKind.LEGAL_PACK: "legal-pack",
    EntityKind.MARKETING_PLAN: "marketing-plan",
    EntityKind.BRANDING_KIT: "branding-kit",
}


async def _get_feature(store: EntityStore, kind: EntityKind, startup_id: int) -> Record:
    feature = await store.get_by_startup(kind, startup_id)
    if feature is None:
        raise NotFoundError(kind.label)
    return feature


def _register_feature(kind: EntityKind, create_model: Type[BaseModel], update_model: Type[BaseModel]) -> None:
    segment = FEATURE_ROUTES[kind]
    record_model = model_for(kind)

    async def get_feature(
        startup: Startup = Depends(get_owned_startup),
        store: EntityStore = Depends(get_store),
    ):
        return await _get_feature(store, kind, startup.id)

    async def create_feature(
        payload: create_model,
        current_user: User = Depends(get_current_user),
        store: EntityStore = Depends(get_store),
    ):
        startup = await ensure_startup_owner(store, current_user, payload.startup_id)
        data = payload.model_dump(exclude={"startup_id"})

        record, created = await store.create_if_absent(kind, startup.id, data)
        if not created:
            raise ConflictError(f"A {kind.label.lower()} already exists for this startup")

        logger.info(f"[Features] Created {kind.value} for startup {startup.id}")
        return record

    async def update_feature(
        payload: update_model,
        startup: Startup = Depends(get_owned_startup),
        store: EntityStore = Depends(get_store),
    ):
        changes = payload.model_dump(exclude_unset=True)
        # title may not be cleared; description and content may
        if changes.get("title", "") is None:
            changes.pop("title")
        return await store.update_by_startup(kind, startup.id, changes)

    get_feature.__name__ = f"get_{kind.value}"
    create_feature.__name__ = f"create_{kind.value}"
    update_feature.__name__ = f"update_{kind.value}"

    router.add_api_route(
        f"/{segment}/{{startup_id}}", get_feature, methods=["GET"],
        response_model=record_model, summary=f"Get {kind.label.lower()}",
    )
    router.add_api_route(
        f"/{segment}", create_feature, methods=["POST"],
        response_model=record_model, status_code=status.HTTP_201_CREATED,
        summary=f"Create {kind.label.lower()}",
    )
    router.add_api_route(
        f"/{segment}/{{startup_id}}", update_feature, methods=["PUT"],
        response_model=record_model, summary=f"Update {kind.label.lower()}",
    )


# ==================== Roadmap milestones ====================

def _find_milestone(milestones: List[Milestone], milestone_id: str) -> Milestone:
    for milestone in milestones:
        if milestone.id == milestone_id:
            return milestone
    raise NotFoundError("Milestone", milestone_id)


@router.put("/roadmap/{startup_id}/milestone/{milestone_id}", response_model=Roadmap)
async def update_milestone_status(
    milestone_id: str,
    payload: MilestoneStatusUpdate,
    startup: Startup = Depends(get_owned_startup),
    store: EntityStore = Depends(get_store),
):
    roadmap = await _get_feature(store, EntityKind.ROADMAP, startup.id)
    milestones = [m.model_copy(deep=True) for m in roadmap.milestones]

    _find_milestone(milestones, milestone_id).status = payload.status

    return await store.update_by_startup(
        EntityKind.ROADMAP, startup.id,
        {"milestones": [m.model_dump() for m in milestones]},
    )


@router.put(
    "/roadmap/{startup_id}/milestone/{milestone_id}/task/{task_id}",
    response_model=Roadmap,
)
async def update_milestone_task(
    milestone_id: str,
    task_id: str,
    payload: MilestoneTaskUpdate,
    startup: Startup = Depends(get_owned_startup),
    store: EntityStore = Depends(get_store),
):
    """Tick or untick one task on a milestone's checklist"""
    roadmap = await _get_feature(store, EntityKind.ROADMAP, startup.id)
    milestones = [m.model_copy(deep=True) for m in roadmap.milestones]

    milestone = _find_milestone(milestones, milestone_id)
    for task in milestone.tasks:
        if task.id == task_id:
            task.completed = payload.completed
            break
    else:
        raise NotFoundError("Milestone task", task_id)

    return await store.update_by_startup(
        EntityKind.ROADMAP, startup.id,
        {"milestones": [m.model_dump() for m in milestones]},
    )


_register_feature(EntityKind.ROADMAP, RoadmapCreate, RoadmapUpdate)
for _kind in (
    EntityKind.FUNDING_STRATEGY,
    EntityKind.SCALABILITY_PLAN,
    EntityKind.LAUNCH_TOOLKIT,
    EntityKind.LEGAL_PACK,
    EntityKind.MARKETING_PLAN,
    EntityKind.BRANDING_KIT,
):
    _register_feature(_kind, FeatureDocumentCreate, FeatureDocumentUpdate)
