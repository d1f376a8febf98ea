"""
Startup Export Service - everything recorded for one startup.

Two renderings:
- JSON: startup, planning sections, extended artifacts and tasks
- Markdown: a readable business plan built from the planning sections
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from app.core.logging_config import logger
from app.models.kinds import CORE_SECTION_KINDS, FEATURE_KINDS, EntityKind
from app.models.startup import Startup
from app.modules.storage.base import EntityStore
from app.schemas.startup import StartupExport, StartupResponse

# Fields every record carries that add nothing to an export
_BOOKKEEPING = {"id", "startup_id", "created_at", "updated_at"}


def _section_payload(record) -> Optional[Dict[str, Any]]:
    if record is None:
        return None
    return record.model_dump(mode="json", exclude=_BOOKKEEPING)


def _bullets(items: List[Any]) -> List[str]:
    return [f"- {item}" for item in items if item]


class StartupExportService:
    """Collects a startup's plan from the store"""

    def __init__(self, store: EntityStore):
        self.store = store

    async def build_export(self, startup: Startup) -> StartupExport:
        sections = {}
        for kind in CORE_SECTION_KINDS:
            sections[kind.value] = _section_payload(await self.store.get_by_startup(kind, startup.id))

        features = {}
        for kind in FEATURE_KINDS:
            features[kind.value] = _section_payload(await self.store.get_by_startup(kind, startup.id))

        tasks = await self.store.list(EntityKind.TASK, startup_id=startup.id)

        logger.info(
            f"[Export] Startup {startup.id}: "
            f"{sum(1 for s in sections.values() if s)} sections, "
            f"{sum(1 for f in features.values() if f)} artifacts, {len(tasks)} tasks"
        )

        return StartupExport(
            startup=StartupResponse.model_validate(startup),
            sections=sections,
            features=features,
            tasks=[task.model_dump(mode="json") for task in tasks],
            exported_at=datetime.utcnow(),
        )

    async def render_markdown(self, startup: Startup) -> str:
        export = await self.build_export(startup)
        return render_business_plan(export)


def render_business_plan(export: StartupExport) -> str:
    """Render the planning sections as a markdown business plan"""
    startup = export.startup
    sections = export.sections
    lines = [
        f"# {startup.name}",
        "",
        startup.description,
        "",
        f"**Industry:** {startup.industry}  ",
        f"**Stage:** {startup.stage}  ",
        f"**Plan completion:** {startup.progress}%",
    ]

    idea = sections.get(EntityKind.STARTUP_IDEA.value)
    if idea:
        lines += [
            "", "## The Idea", "",
            f"**Problem:** {idea['problem_statement']}", "",
            f"**Solution:** {idea['solution']}", "",
            f"**Unique value proposition:** {idea['unique_value_proposition']}", "",
            f"**Target industry:** {idea['target_industry']}",
        ]
        if idea.get("target_market_size"):
            lines += ["", f"**Market size:** {idea['target_market_size']}"]

    audience = sections.get(EntityKind.TARGET_AUDIENCE.value)
    if audience:
        demographics = audience["demographics"]
        psychographics = audience["psychographics"]
        lines += ["", "## Target Audience", ""]
        if audience.get("summary"):
            lines += [audience["summary"], ""]
        lines += _bullets([
            demographics.get("age_range") and f"Age range: {demographics['age_range']}",
            demographics.get("location") and f"Location: {demographics['location']}",
            demographics.get("occupation") and f"Occupation: {demographics['occupation']}",
            psychographics.get("pain_points") and f"Pain points: {psychographics['pain_points']}",
            psychographics.get("goals") and f"Goals: {psychographics['goals']}",
        ])

    model = sections.get(EntityKind.BUSINESS_MODEL.value)
    if model:
        lines += ["", "## Business Model", "", f"**Model:** {model['model_type']}"]
        if model.get("value_proposition"):
            lines += ["", model["value_proposition"]]
        if model.get("channels"):
            lines += ["", "### Channels", ""] + _bullets(model["channels"])
        if model.get("key_activities"):
            lines += ["", "### Key Activities", ""] + _bullets(model["key_activities"])

    competition = sections.get(EntityKind.COMPETITOR.value)
    if competition:
        lines += ["", "## Competition", ""]
        lines += _bullets([c.get("name") for c in competition.get("competitor_data", [])])
        swot = competition.get("swot_analysis") or {}
        for heading in ("strengths", "weaknesses", "opportunities", "threats"):
            if swot.get(heading):
                lines += ["", f"### {heading.capitalize()}", ""] + _bullets(swot[heading])
        if competition.get("market_positioning"):
            lines += ["", f"**Positioning:** {competition['market_positioning']}"]

    revenue = sections.get(EntityKind.REVENUE_MODEL.value)
    if revenue:
        lines += ["", "## Revenue", ""]
        lines += _bullets([
            stream.get("name") and f"{stream['name']}: {stream.get('description') or ''}".rstrip(": ")
            for stream in revenue.get("revenue_streams", [])
        ])
        if revenue.get("pricing_strategy"):
            lines += ["", f"**Pricing:** {revenue['pricing_strategy']}"]

    mvp = sections.get(EntityKind.MVP.value)
    if mvp:
        lines += ["", "## MVP", ""]
        lines += _bullets([
            feature.get("name") and f"{feature['name']} ({feature.get('priority') or 'unprioritized'})"
            for feature in mvp.get("features", [])
        ])
        if mvp.get("timeline"):
            lines += ["", "### Timeline", ""]
            lines += _bullets([
                step.get("milestone") and f"{step['milestone']} - {step.get('delivery_date') or 'TBD'}"
                for step in mvp["timeline"]
            ])

    if export.tasks:
        lines += ["", "## Open Tasks", ""]
        lines += _bullets([
            f"[{task['status']}] {task['title']}"
            for task in export.tasks if task["status"] != "completed"
        ])

    lines += ["", f"_Exported {export.exported_at:%Y-%m-%d %H:%M} UTC_", ""]
    return "\n".join(lines)
