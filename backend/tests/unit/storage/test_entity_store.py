"""
Entity store contract tests
Run against both backends: MemoryStore and DatabaseStore on a temp SQLite file
"""
import asyncio
import pytest

from app.core.exceptions import NotFoundError
from app.models.kinds import EntityKind
from app.models.startup import Startup
from app.modules.storage import DatabaseStore, MemoryStore


@pytest.fixture(params=['memory', 'database'])
async def entity_store(request, tmp_path):
    if request.param == 'memory':
        backend = MemoryStore()
    else:
        backend = DatabaseStore(f"sqlite+aiosqlite:///{tmp_path / 'store.db'}")
    await backend.initialize()
    yield backend
    await backend.close()


def startup_fields(**overrides) -> dict:
    data = {
        'user_id': 1,
        'name': 'Acme',
        'description': 'Rockets for everyone',
        'industry': 'Aerospace',
        'stage': 'idea',
    }
    data.update(overrides)
    return data


class TestCreateAndGet:

    @pytest.mark.asyncio
    async def test_ids_start_at_one_per_kind(self, entity_store):
        first = await entity_store.create(EntityKind.STARTUP, startup_fields())
        second = await entity_store.create(EntityKind.STARTUP, startup_fields(name='Beta'))
        task = await entity_store.create(EntityKind.TASK, {'startup_id': first.id, 'title': 'Call'})

        assert (first.id, second.id) == (1, 2)
        assert task.id == 1

    @pytest.mark.asyncio
    async def test_create_stamps_timestamps(self, entity_store):
        startup = await entity_store.create(EntityKind.STARTUP, startup_fields())

        assert startup.created_at is not None
        assert startup.updated_at == startup.created_at

    @pytest.mark.asyncio
    async def test_client_supplied_id_is_ignored(self, entity_store):
        startup = await entity_store.create(EntityKind.STARTUP, startup_fields(id=99))

        assert startup.id == 1

    @pytest.mark.asyncio
    async def test_get_returns_typed_record(self, entity_store):
        created = await entity_store.create(EntityKind.STARTUP, startup_fields())

        fetched = await entity_store.get(EntityKind.STARTUP, created.id)

        assert isinstance(fetched, Startup)
        assert fetched.name == 'Acme'

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, entity_store):
        assert await entity_store.get(EntityKind.STARTUP, 42) is None

    @pytest.mark.asyncio
    async def test_invalid_data_does_not_burn_an_id(self, entity_store):
        with pytest.raises(Exception):
            await entity_store.create(EntityKind.STARTUP, {'name': 'missing fields'})

        startup = await entity_store.create(EntityKind.STARTUP, startup_fields())
        assert startup.id == 1


class TestListAndFilter:

    @pytest.mark.asyncio
    async def test_list_filters_by_equality(self, entity_store):
        await entity_store.create(EntityKind.STARTUP, startup_fields(user_id=1))
        await entity_store.create(EntityKind.STARTUP, startup_fields(user_id=2))
        await entity_store.create(EntityKind.STARTUP, startup_fields(user_id=1, stage='mvp'))

        mine = await entity_store.list(EntityKind.STARTUP, user_id=1)
        mvp = await entity_store.list(EntityKind.STARTUP, user_id=1, stage='mvp')

        assert [s.id for s in mine] == [1, 3]
        assert [s.id for s in mvp] == [3]

    @pytest.mark.asyncio
    async def test_get_by_startup(self, entity_store):
        await entity_store.create(EntityKind.STARTUP_IDEA, {
            'startup_id': 7,
            'problem_statement': 'p',
            'solution': 's',
            'unique_value_proposition': 'u',
            'target_industry': 't',
        })

        assert (await entity_store.get_by_startup(EntityKind.STARTUP_IDEA, 7)).solution == 's'
        assert await entity_store.get_by_startup(EntityKind.STARTUP_IDEA, 8) is None

    @pytest.mark.asyncio
    async def test_returned_records_are_copies(self, entity_store):
        created = await entity_store.create(EntityKind.STARTUP, startup_fields())
        created.name = 'mutated'

        fetched = await entity_store.get(EntityKind.STARTUP, created.id)

        assert fetched.name == 'Acme'


class TestUpdate:

    @pytest.mark.asyncio
    async def test_update_merges_fields(self, entity_store):
        startup = await entity_store.create(EntityKind.STARTUP, startup_fields())

        updated = await entity_store.update(EntityKind.STARTUP, startup.id, {'stage': 'growth'})

        assert updated.stage == 'growth'
        assert updated.name == 'Acme'
        assert updated.created_at == startup.created_at
        assert updated.updated_at >= startup.updated_at

    @pytest.mark.asyncio
    async def test_update_cannot_change_id(self, entity_store):
        startup = await entity_store.create(EntityKind.STARTUP, startup_fields())

        updated = await entity_store.update(EntityKind.STARTUP, startup.id, {'id': 50})

        assert updated.id == startup.id

    @pytest.mark.asyncio
    async def test_update_missing_raises_not_found(self, entity_store):
        with pytest.raises(NotFoundError):
            await entity_store.update(EntityKind.STARTUP, 404, {'stage': 'x'})

    @pytest.mark.asyncio
    async def test_increment_counter(self, entity_store):
        post = await entity_store.create(EntityKind.FORUM_POST, {
            'user_id': 1, 'title': 't', 'content': 'c', 'category': 'General',
        })

        await asyncio.gather(*[
            entity_store.increment(EntityKind.FORUM_POST, post.id, 'likes') for _ in range(5)
        ])

        assert (await entity_store.get(EntityKind.FORUM_POST, post.id)).likes == 5


class TestUpsertByParent:

    @pytest.mark.asyncio
    async def test_first_call_creates(self, entity_store):
        record, created = await entity_store.upsert_by_parent(
            EntityKind.BUSINESS_MODEL, 3, {'model_type': 'SaaS'},
        )

        assert created is True
        assert record.startup_id == 3

    @pytest.mark.asyncio
    async def test_second_call_merges_into_same_row(self, entity_store):
        first, _ = await entity_store.upsert_by_parent(
            EntityKind.BUSINESS_MODEL, 3, {'model_type': 'SaaS', 'channels': ['web']},
        )
        second, created = await entity_store.upsert_by_parent(
            EntityKind.BUSINESS_MODEL, 3, {'model_type': 'Marketplace', 'channels': []},
            partial={'model_type': 'Marketplace'},
        )

        assert created is False
        assert second.id == first.id
        assert second.model_type == 'Marketplace'
        assert second.channels == ['web']
        assert await entity_store.count(EntityKind.BUSINESS_MODEL, startup_id=3) == 1

    @pytest.mark.asyncio
    async def test_concurrent_upserts_produce_one_row(self, entity_store):
        results = await asyncio.gather(*[
            entity_store.upsert_by_parent(EntityKind.BUSINESS_MODEL, 5, {'model_type': f'm{i}'})
            for i in range(5)
        ])

        assert sum(1 for _, created in results if created) == 1
        assert await entity_store.count(EntityKind.BUSINESS_MODEL, startup_id=5) == 1

    @pytest.mark.asyncio
    async def test_create_if_absent_keeps_existing(self, entity_store):
        first, created = await entity_store.create_if_absent(EntityKind.LEGAL_PACK, 2, {'title': 'Docs'})
        again, created_again = await entity_store.create_if_absent(EntityKind.LEGAL_PACK, 2, {'title': 'Other'})

        assert created is True
        assert created_again is False
        assert again.id == first.id
        assert again.title == 'Docs'


class TestDelete:

    @pytest.mark.asyncio
    async def test_delete_removes_only_target(self, entity_store):
        keep = await entity_store.create(EntityKind.TASK, {'startup_id': 1, 'title': 'keep'})
        drop = await entity_store.create(EntityKind.TASK, {'startup_id': 1, 'title': 'drop'})

        assert await entity_store.delete(EntityKind.TASK, drop.id) is True

        remaining = await entity_store.list(EntityKind.TASK, startup_id=1)
        assert [t.id for t in remaining] == [keep.id]

    @pytest.mark.asyncio
    async def test_delete_missing_returns_false(self, entity_store):
        assert await entity_store.delete(EntityKind.TASK, 12345) is False

    @pytest.mark.asyncio
    async def test_ids_not_reused_after_delete(self, entity_store):
        task = await entity_store.create(EntityKind.TASK, {'startup_id': 1, 'title': 'a'})
        await entity_store.delete(EntityKind.TASK, task.id)

        replacement = await entity_store.create(EntityKind.TASK, {'startup_id': 1, 'title': 'b'})

        assert replacement.id == task.id + 1
