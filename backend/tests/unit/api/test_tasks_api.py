"""
Unit Tests for Task Endpoints
"""
import pytest
from httpx import AsyncClient


@pytest.fixture
async def task(client: AsyncClient, auth_headers, test_startup) -> dict:
    response = await client.post(
        f"/api/startups/{test_startup['id']}/tasks",
        json={'title': 'Interview ten cafe owners', 'priority': 'high', 'due_date': '2026-11-30'},
        headers=auth_headers,
    )
    assert response.status_code == 201
    return response.json()


class TestTaskCrud:

    @pytest.mark.asyncio
    async def test_create_defaults(self, client: AsyncClient, auth_headers, test_startup):
        response = await client.post(
            f"/api/startups/{test_startup['id']}/tasks", json={'title': 'Register company'}, headers=auth_headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data['status'] == 'pending'
        assert data['priority'] == 'medium'
        assert data['startup_id'] == test_startup['id']

    @pytest.mark.asyncio
    async def test_create_rejects_unknown_status(self, client: AsyncClient, auth_headers, test_startup):
        response = await client.post(
            f"/api/startups/{test_startup['id']}/tasks",
            json={'title': 'x', 'status': 'someday'},
            headers=auth_headers,
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_list(self, client: AsyncClient, auth_headers, test_startup, task):
        response = await client.get(f"/api/startups/{test_startup['id']}/tasks", headers=auth_headers)

        assert response.status_code == 200
        assert [t['id'] for t in response.json()] == [task['id']]
        assert response.json()[0]['due_date'] == '2026-11-30'

    @pytest.mark.asyncio
    async def test_patch(self, client: AsyncClient, auth_headers, task):
        response = await client.patch(
            f"/api/tasks/{task['id']}", json={'status': 'in-progress'}, headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()['status'] == 'in-progress'
        assert response.json()['title'] == task['title']

    @pytest.mark.asyncio
    async def test_patch_can_clear_due_date(self, client: AsyncClient, auth_headers, task):
        response = await client.patch(f"/api/tasks/{task['id']}", json={'due_date': None}, headers=auth_headers)

        assert response.json()['due_date'] is None

    @pytest.mark.asyncio
    async def test_delete_removes_only_that_task(self, client: AsyncClient, auth_headers, test_startup, task):
        sibling = await client.post(
            f"/api/startups/{test_startup['id']}/tasks", json={'title': 'Sibling'}, headers=auth_headers,
        )

        response = await client.delete(f"/api/tasks/{task['id']}", headers=auth_headers)

        assert response.status_code == 204
        remaining = await client.get(f"/api/startups/{test_startup['id']}/tasks", headers=auth_headers)
        assert [t['id'] for t in remaining.json()] == [sibling.json()['id']]

    @pytest.mark.asyncio
    async def test_delete_missing(self, client: AsyncClient, auth_headers):
        response = await client.delete('/api/tasks/9999', headers=auth_headers)

        assert response.status_code == 404


class TestTaskOwnership:

    @pytest.mark.asyncio
    async def test_other_user_cannot_list(self, client: AsyncClient, other_auth_headers, test_startup, task):
        response = await client.get(f"/api/startups/{test_startup['id']}/tasks", headers=other_auth_headers)

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_other_user_cannot_patch(self, client: AsyncClient, other_auth_headers, task):
        response = await client.patch(f"/api/tasks/{task['id']}", json={'title': 'hijack'}, headers=other_auth_headers)

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, client: AsyncClient, auth_headers, other_auth_headers, task):
        response = await client.delete(f"/api/tasks/{task['id']}", headers=other_auth_headers)

        assert response.status_code == 403
        still_there = await client.patch(f"/api/tasks/{task['id']}", json={}, headers=auth_headers)
        assert still_there.status_code == 200

    @pytest.mark.asyncio
    async def test_orphaned_task_is_forbidden(self, client: AsyncClient, auth_headers, test_startup, task):
        await client.delete(f"/api/startups/{test_startup['id']}", headers=auth_headers)

        response = await client.patch(f"/api/tasks/{task['id']}", json={'title': 'x'}, headers=auth_headers)

        assert response.status_code == 403
