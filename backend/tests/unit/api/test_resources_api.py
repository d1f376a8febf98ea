"""
Unit Tests for the Resource Library
"""
import pytest
from httpx import AsyncClient

from app.db import SAMPLE_RESOURCES


class TestResources:

    @pytest.mark.asyncio
    async def test_list_is_public(self, client: AsyncClient):
        response = await client.get('/api/resources')

        assert response.status_code == 200
        assert len(response.json()) == len(SAMPLE_RESOURCES)

    @pytest.mark.asyncio
    async def test_filter_by_category(self, client: AsyncClient):
        response = await client.get('/api/resources/category/Business Plan Templates')

        titles = {r['title'] for r in response.json()}
        assert titles == {'Standard Business Plan Template', 'Tech Startup Plan Template'}

    @pytest.mark.asyncio
    async def test_industry_filter_includes_untagged(self, client: AsyncClient):
        response = await client.get('/api/resources/industry/Technology')

        resources = response.json()
        assert len(resources) == len(SAMPLE_RESOURCES)
        assert {r['industry'] for r in resources} == {'Technology', None}

    @pytest.mark.asyncio
    async def test_industry_filter_excludes_other_industries(self, client: AsyncClient):
        response = await client.get('/api/resources/industry/Healthcare')

        resources = response.json()
        assert all(r['industry'] is None for r in resources)
        assert 'Tech Startup Plan Template' not in {r['title'] for r in resources}

    @pytest.mark.asyncio
    async def test_get_by_id(self, client: AsyncClient):
        response = await client.get('/api/resources/1')

        assert response.status_code == 200
        assert response.json()['format'] == 'markdown'

    @pytest.mark.asyncio
    async def test_get_missing(self, client: AsyncClient):
        response = await client.get('/api/resources/999')

        assert response.status_code == 404
        assert response.json()['message'] == 'Resource not found'

    @pytest.mark.asyncio
    async def test_read_only(self, client: AsyncClient, auth_headers):
        response = await client.post('/api/resources', json={'title': 'x'}, headers=auth_headers)

        assert response.status_code == 405
