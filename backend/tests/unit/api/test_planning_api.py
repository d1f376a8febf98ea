"""
Unit Tests for Planning Section Endpoints
Tests for: upsert semantics, progress recalculation, ownership
"""
import pytest
from httpx import AsyncClient

from app.models.kinds import EntityKind

SECTIONS = ['idea', 'audience', 'business-model', 'competition', 'revenue', 'mvp']


class TestSectionUpsert:

    @pytest.mark.asyncio
    async def test_get_before_create_is_404(self, client: AsyncClient, auth_headers, test_startup):
        response = await client.get(f"/api/startups/{test_startup['id']}/idea", headers=auth_headers)

        assert response.status_code == 404
        assert 'not found' in response.json()['message']

    @pytest.mark.asyncio
    async def test_first_post_creates(self, client: AsyncClient, auth_headers, test_startup, idea_data):
        startup_id = test_startup['id']

        response = await client.post(f'/api/startups/{startup_id}/idea', json=idea_data, headers=auth_headers)

        assert response.status_code == 201
        data = response.json()
        assert data['startup_id'] == startup_id
        assert data['solution'] == idea_data['solution']
        assert data['target_market_size'] is None

    @pytest.mark.asyncio
    async def test_second_post_updates_same_row(self, client: AsyncClient, store, auth_headers, test_startup, idea_data):
        startup_id = test_startup['id']
        first = await client.post(f'/api/startups/{startup_id}/idea', json=idea_data, headers=auth_headers)

        second = await client.post(
            f'/api/startups/{startup_id}/idea',
            json={**idea_data, 'solution': 'Subscription boxes'},
            headers=auth_headers,
        )

        assert second.status_code == 200
        assert second.json()['id'] == first.json()['id']
        assert second.json()['solution'] == 'Subscription boxes'
        assert await store.count(EntityKind.STARTUP_IDEA, startup_id=startup_id) == 1

    @pytest.mark.asyncio
    async def test_update_keeps_fields_not_resent(self, client: AsyncClient, auth_headers, test_startup, idea_data):
        startup_id = test_startup['id']
        await client.post(
            f'/api/startups/{startup_id}/idea',
            json={**idea_data, 'target_market_size': '$2B'},
            headers=auth_headers,
        )

        response = await client.post(f'/api/startups/{startup_id}/idea', json=idea_data, headers=auth_headers)

        assert response.json()['target_market_size'] == '$2B'

    @pytest.mark.asyncio
    async def test_get_after_create(self, client: AsyncClient, auth_headers, test_startup, section_payloads):
        startup_id = test_startup['id']
        await client.post(
            f'/api/startups/{startup_id}/competition', json=section_payloads['competition'], headers=auth_headers,
        )

        response = await client.get(f'/api/startups/{startup_id}/competition', headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data['competitor_data'][0]['name'] == 'TooGoodToGo'
        assert data['swot_analysis']['strengths'] == ['Local focus']
        assert data['swot_analysis']['threats'] == []

    @pytest.mark.asyncio
    async def test_invalid_body(self, client: AsyncClient, auth_headers, test_startup):
        response = await client.post(
            f"/api/startups/{test_startup['id']}/idea", json={'solution': 'only this'}, headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()['error'] == 'Validation failed'


class TestProgress:

    @pytest.mark.asyncio
    async def test_each_new_section_raises_progress(self, client: AsyncClient, auth_headers, test_startup, section_payloads):
        startup_id = test_startup['id']
        expected = [16, 33, 50, 66, 83, 100]

        for section, progress in zip(SECTIONS, expected):
            response = await client.post(
                f'/api/startups/{startup_id}/{section}', json=section_payloads[section], headers=auth_headers,
            )
            assert response.status_code == 201

            startup = await client.get(f'/api/startups/{startup_id}', headers=auth_headers)
            assert startup.json()['progress'] == progress

    @pytest.mark.asyncio
    async def test_update_does_not_change_progress(self, client: AsyncClient, auth_headers, test_startup, idea_data):
        startup_id = test_startup['id']
        await client.post(f'/api/startups/{startup_id}/idea', json=idea_data, headers=auth_headers)
        await client.post(f'/api/startups/{startup_id}/idea', json=idea_data, headers=auth_headers)

        startup = await client.get(f'/api/startups/{startup_id}', headers=auth_headers)

        assert startup.json()['progress'] == 16


class TestOwnership:

    @pytest.mark.asyncio
    @pytest.mark.parametrize('section', SECTIONS)
    async def test_other_user_cannot_read(self, client: AsyncClient, other_auth_headers, test_startup, section):
        response = await client.get(f"/api/startups/{test_startup['id']}/{section}", headers=other_auth_headers)

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_other_user_cannot_write(
        self, client: AsyncClient, store, other_auth_headers, test_startup, idea_data,
    ):
        response = await client.post(
            f"/api/startups/{test_startup['id']}/idea", json=idea_data, headers=other_auth_headers,
        )

        assert response.status_code == 403
        assert await store.get_by_startup(EntityKind.STARTUP_IDEA, test_startup['id']) is None

    @pytest.mark.asyncio
    async def test_missing_startup(self, client: AsyncClient, auth_headers, idea_data):
        response = await client.post('/api/startups/404/idea', json=idea_data, headers=auth_headers)

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_unauthenticated(self, client: AsyncClient, test_startup):
        response = await client.get(f"/api/startups/{test_startup['id']}/idea")

        assert response.status_code == 401
