"""
Unit Tests for Startup Export Service
"""
import pytest

from app.models.kinds import EntityKind
from app.modules.storage import MemoryStore
from app.services.startup_export import StartupExportService, render_business_plan


@pytest.fixture
async def populated():
    store = MemoryStore()
    startup = await store.create(EntityKind.STARTUP, {
        'user_id': 1,
        'name': 'Leftover',
        'description': 'Rescue food from cafes',
        'industry': 'Food',
        'stage': 'mvp',
        'progress': 33,
    })
    await store.upsert_by_parent(EntityKind.STARTUP_IDEA, startup.id, {
        'problem_statement': 'Cafes bin good food',
        'solution': 'Discounted bundles',
        'unique_value_proposition': 'Zero waste',
        'target_industry': 'Food',
    })
    await store.upsert_by_parent(EntityKind.COMPETITOR, startup.id, {
        'competitor_data': [{'name': 'TooGoodToGo'}],
        'swot_analysis': {'threats': ['Copycats']},
    })
    await store.create_if_absent(EntityKind.ROADMAP, startup.id, {'title': 'Year one'})
    await store.create(EntityKind.TASK, {'startup_id': startup.id, 'title': 'Sign first cafe'})
    await store.create(EntityKind.TASK, {'startup_id': startup.id, 'title': 'Done already', 'status': 'completed'})
    return store, startup


class TestBuildExport:

    @pytest.mark.asyncio
    async def test_includes_present_and_missing_sections(self, populated):
        store, startup = populated

        export = await StartupExportService(store).build_export(startup)

        assert export.startup.name == 'Leftover'
        assert export.sections['startup_idea']['solution'] == 'Discounted bundles'
        assert export.sections['mvp'] is None
        assert export.features['roadmap']['title'] == 'Year one'
        assert export.features['branding_kit'] is None
        assert len(export.tasks) == 2

    @pytest.mark.asyncio
    async def test_strips_bookkeeping_fields(self, populated):
        store, startup = populated

        export = await StartupExportService(store).build_export(startup)

        assert 'id' not in export.sections['startup_idea']
        assert 'startup_id' not in export.sections['startup_idea']


class TestRenderBusinessPlan:

    @pytest.mark.asyncio
    async def test_markdown_contains_sections_and_open_tasks(self, populated):
        store, startup = populated

        markdown = render_business_plan(await StartupExportService(store).build_export(startup))

        assert markdown.startswith('# Leftover')
        assert '**Plan completion:** 33%' in markdown
        assert '## The Idea' in markdown
        assert '- TooGoodToGo' in markdown
        assert '### Threats' in markdown
        assert '[pending] Sign first cafe' in markdown
        assert 'Done already' not in markdown
        assert '## MVP' not in markdown
