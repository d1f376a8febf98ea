"""
Planning section endpoints - the six wizard steps.

For each section X:
    GET  /startups/{startup_id}/X   the section, or 404
    POST /startups/{startup_id}/X   create (201) or merge into the existing row (200)

A create triggers a progress recalculation; an update never does.
"""

from fastapi import APIRouter, Depends, Response, status
from typing import Type

from pydantic import BaseModel

from app.core.exceptions import NotFoundError
from app.core.logging_config import logger
from app.models.base import Record
from app.models.kinds import EntityKind
from app.models.planning import (
    BusinessModel,
    Competitor,
    Mvp,
    RevenueModel,
    StartupIdea,
    TargetAudience,
)
from app.models.startup import Startup
from app.modules.auth.dependencies import get_owned_startup
from app.modules.storage import EntityStore, get_store
from app.schemas.planning import (
    BusinessModelInput,
    CompetitorInput,
    MvpInput,
    RevenueModelInput,
    StartupIdeaInput,
    TargetAudienceInput,
)
from app.services.progress_service import SECTION_ROUTES, recalculate_progress

router = APIRouter()


async def save_section(
    store: EntityStore,
    kind: EntityKind,
    startup: Startup,
    payload: BaseModel,
    response: Response,
) -> Record:
    """Upsert one section row and report 201 on create, 200 on update"""
    # Defaults only fill in on create; updates merge what the client sent
    record, created = await store.upsert_by_parent(
        kind,
        startup.id,
        payload.model_dump(),
        partial=payload.model_dump(exclude_unset=True),
    )

    if created:
        response.status_code = status.HTTP_201_CREATED
        logger.info(f"[Planning] Created {kind.value} for startup {startup.id}")
        await recalculate_progress(store, startup.id)
    else:
        response.status_code = status.HTTP_200_OK
        logger.info(f"[Planning] Updated {kind.value} for startup {startup.id}")

    return record


def _register_section(kind: EntityKind, input_model: Type[BaseModel], record_model: Type[Record]) -> None:
    path = f"/{{startup_id}}/{SECTION_ROUTES[kind]}"

    async def get_section(
        startup: Startup = Depends(get_owned_startup),
        store: EntityStore = Depends(get_store),
    ):
        section = await store.get_by_startup(kind, startup.id)
        if section is None:
            raise NotFoundError(kind.label)
        return section

    async def post_section(
        payload: input_model,
        response: Response,
        startup: Startup = Depends(get_owned_startup),
        store: EntityStore = Depends(get_store),
    ):
        return await save_section(store, kind, startup, payload, response)

    get_section.__name__ = f"get_{kind.value}"
    post_section.__name__ = f"save_{kind.value}"

    router.add_api_route(
        path, get_section, methods=["GET"], response_model=record_model,
        summary=f"Get {kind.label.lower()}",
    )
    router.add_api_route(
        path, post_section, methods=["POST"], response_model=record_model,
        status_code=status.HTTP_200_OK, summary=f"Create or update {kind.label.lower()}",
        responses={201: {"description": "Section created"}},
    )


_register_section(EntityKind.STARTUP_IDEA, StartupIdeaInput, StartupIdea)
_register_section(EntityKind.TARGET_AUDIENCE, TargetAudienceInput, TargetAudience)
_register_section(EntityKind.BUSINESS_MODEL, BusinessModelInput, BusinessModel)
_register_section(EntityKind.COMPETITOR, CompetitorInput, Competitor)
_register_section(EntityKind.REVENUE_MODEL, RevenueModelInput, RevenueModel)
_register_section(EntityKind.MVP, MvpInput, Mvp)
