"""
Unit Tests for Notification Endpoints
"""
import pytest
from httpx import AsyncClient

from app.services.notification_service import notify


@pytest.fixture
async def notifications(store, test_user):
    return [
        await notify(store, test_user.id, 'Welcome aboard'),
        await notify(store, test_user.id, 'Your plan is 50% done'),
    ]


class TestNotifications:

    @pytest.mark.asyncio
    async def test_requires_auth(self, client: AsyncClient):
        response = await client.get('/api/notifications')

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_list_only_own(self, client: AsyncClient, store, auth_headers, other_user, notifications):
        await notify(store, other_user.id, 'Not yours')

        response = await client.get('/api/notifications', headers=auth_headers)

        assert response.status_code == 200
        assert [n['message'] for n in response.json()] == ['Welcome aboard', 'Your plan is 50% done']

    @pytest.mark.asyncio
    async def test_mark_read(self, client: AsyncClient, auth_headers, notifications):
        target = notifications[0]

        response = await client.put(f'/api/notifications/{target.id}/read', headers=auth_headers)
        unread = await client.get('/api/notifications/unread', headers=auth_headers)

        assert response.status_code == 200
        assert response.json()['read'] is True
        assert [n['id'] for n in unread.json()] == [notifications[1].id]

    @pytest.mark.asyncio
    async def test_mark_read_someone_elses(self, client: AsyncClient, other_auth_headers, notifications):
        response = await client.put(f'/api/notifications/{notifications[0].id}/read', headers=other_auth_headers)

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_mark_read_missing(self, client: AsyncClient, auth_headers):
        response = await client.put('/api/notifications/999/read', headers=auth_headers)

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_mark_all_read(self, client: AsyncClient, auth_headers, notifications):
        response = await client.put('/api/notifications/read-all', headers=auth_headers)
        again = await client.put('/api/notifications/read-all', headers=auth_headers)
        unread = await client.get('/api/notifications/unread', headers=auth_headers)

        assert response.json() == {'updated': 2}
        assert again.json() == {'updated': 0}
        assert unread.json() == []

    @pytest.mark.asyncio
    async def test_delete(self, client: AsyncClient, auth_headers, other_auth_headers, notifications):
        forbidden = await client.delete(f'/api/notifications/{notifications[0].id}', headers=other_auth_headers)
        response = await client.delete(f'/api/notifications/{notifications[0].id}', headers=auth_headers)
        remaining = await client.get('/api/notifications', headers=auth_headers)

        assert forbidden.status_code == 403
        assert response.status_code == 204
        assert len(remaining.json()) == 1
