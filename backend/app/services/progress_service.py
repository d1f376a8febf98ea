"""
Progress Service - startup completion percentage.

progress = floor(100 * sections_present / 6) over the six core planning
sections, giving 0, 16, 33, 50, 66, 83 or 100. Recalculated only after a
section is created; updates to an existing section cannot change it.
"""

from typing import List, Optional

from app.core.logging_config import logger
from app.models.kinds import CORE_SECTION_KINDS, EntityKind
from app.models.startup import Startup
from app.modules.storage.base import EntityStore
from app.schemas.startup import SectionStatus

# URL segment for each core section, in wizard order
SECTION_ROUTES = {
    EntityKind.STARTUP_IDEA: "idea",
    EntityKind.TARGET_AUDIENCE: "audience",
    EntityKind.BUSINESS_MODEL: "business-model",
    EntityKind.COMPETITOR: "competition",
    EntityKind.REVENUE_MODEL: "revenue",
    EntityKind.MVP: "mvp",
}


def compute_progress(present: int, total: int = len(CORE_SECTION_KINDS)) -> int:
    """Integer percentage, rounded down"""
    if total <= 0:
        return 0
    return (100 * present) // total


async def section_statuses(store: EntityStore, startup_id: int) -> List[SectionStatus]:
    statuses = []
    for kind in CORE_SECTION_KINDS:
        section = await store.get_by_startup(kind, startup_id)
        statuses.append(SectionStatus(
            key=SECTION_ROUTES[kind],
            label=kind.label,
            completed=section is not None,
        ))
    return statuses


async def recalculate_progress(store: EntityStore, startup_id: int) -> Optional[Startup]:
    """
    Recompute and persist a startup's progress.

    Best effort: a missing startup is a no-op and any failure is logged and
    swallowed, so the request that triggered it still succeeds.
    """
    try:
        startup = await store.get(EntityKind.STARTUP, startup_id)
        if startup is None:
            logger.warning(f"[Progress] Startup {startup_id} not found, skipping recalculation")
            return None

        statuses = await section_statuses(store, startup_id)
        present = sum(1 for status in statuses if status.completed)
        progress = compute_progress(present)

        updated = await store.update(EntityKind.STARTUP, startup_id, {"progress": progress})
        logger.info(f"[Progress] Startup {startup_id}: {present}/{len(statuses)} sections -> {progress}%")
        return updated

    except Exception as e:
        logger.warning(
            f"[Progress] Recalculation failed for startup {startup_id}: {type(e).__name__}: {e}",
            exc_info=True,
        )
        return None
