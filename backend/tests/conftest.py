"""
Startup Launchpad - Test Configuration and Fixtures
"""
import os
from typing import AsyncGenerator, Dict
import pytest
from httpx import AsyncClient, ASGITransport
from faker import Faker

# Set testing environment before the app reads its settings
os.environ['ENVIRONMENT'] = 'testing'
os.environ['STORAGE_BACKEND'] = 'memory'
os.environ['RATE_LIMIT_ENABLED'] = 'false'
os.environ['BCRYPT_ROUNDS'] = '4'
os.environ['JWT_SECRET_KEY'] = 'test-jwt-secret-key-for-testing'
os.environ['ANTHROPIC_API_KEY'] = 'test-api-key'
os.environ['LOG_LEVEL'] = 'WARNING'
os.environ['LOG_FILE'] = ''

from app.main import app
from app.core.security import create_access_token, get_password_hash
from app.db import seed_resources
from app.models.kinds import EntityKind
from app.models.user import User
from app.modules.storage import MemoryStore
from app.services.ai_service import AIService, get_ai_service
from mocks.mock_ai import MockAIClient

fake = Faker()

TEST_PASSWORD = 'testpassword123'


@pytest.fixture
async def store() -> AsyncGenerator[MemoryStore, None]:
    """Fresh in-memory store with the resource library seeded"""
    memory_store = MemoryStore()
    await memory_store.initialize()
    await seed_resources(memory_store)
    yield memory_store
    await memory_store.close()


@pytest.fixture
def mock_ai_client() -> MockAIClient:
    return MockAIClient()


@pytest.fixture
async def client(store: MemoryStore, mock_ai_client: MockAIClient) -> AsyncGenerator[AsyncClient, None]:
    """Test client bound to the fresh store, with the completion service mocked"""
    app.state.store = store
    app.dependency_overrides[get_ai_service] = lambda: AIService(mock_ai_client)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url='http://test') as ac:
        yield ac

    app.dependency_overrides.clear()


async def make_user(store: MemoryStore, **overrides) -> User:
    data = {
        'username': fake.unique.user_name().replace('.', '_')[:40],
        'email': fake.unique.email(),
        'full_name': fake.name(),
        'hashed_password': get_password_hash(TEST_PASSWORD),
    }
    data.update(overrides)
    return await store.create(EntityKind.USER, data)


def headers_for(user: User) -> Dict[str, str]:
    token = create_access_token({'sub': user.id, 'username': user.username})
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
async def test_user(store: MemoryStore) -> User:
    """Create a test user"""
    return await make_user(store)


@pytest.fixture
async def other_user(store: MemoryStore) -> User:
    """A second account, for ownership checks"""
    return await make_user(store)


@pytest.fixture
def auth_headers(test_user: User) -> dict:
    """Generate authentication headers for test user"""
    return headers_for(test_user)


@pytest.fixture
def other_auth_headers(other_user: User) -> dict:
    return headers_for(other_user)


@pytest.fixture
def account_factory(store: MemoryStore):
    """Create extra users on demand; returns (user, auth headers)"""
    async def _create(**overrides):
        user = await make_user(store, **overrides)
        return user, headers_for(user)
    return _create


@pytest.fixture
def test_user_data() -> dict:
    """Registration payload for a brand-new account"""
    return {
        'username': fake.unique.user_name().replace('.', '_')[:40],
        'email': fake.unique.email(),
        'password': 'SecurePassword123!',
        'full_name': fake.name(),
    }


@pytest.fixture
def startup_data() -> dict:
    return {
        'name': fake.company(),
        'description': fake.catch_phrase(),
        'industry': 'Technology',
        'stage': 'idea',
    }


@pytest.fixture
async def test_startup(client: AsyncClient, auth_headers: dict, startup_data: dict) -> dict:
    """A startup owned by test_user, created through the API"""
    response = await client.post('/api/startups', json=startup_data, headers=auth_headers)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def idea_data() -> dict:
    return {
        'problem_statement': 'Small cafes waste food at closing time',
        'solution': 'A marketplace for discounted end-of-day bundles',
        'unique_value_proposition': 'Zero-waste pricing in one tap',
        'target_industry': 'Food',
    }


@pytest.fixture
def section_payloads(idea_data: dict) -> Dict[str, dict]:
    """A valid body for each of the six wizard sections, keyed by route segment"""
    return {
        'idea': idea_data,
        'audience': {
            'demographics': {'age_range': '25-40', 'location': 'Urban'},
            'psychographics': {'interests': ['sustainability'], 'pain_points': 'High prices'},
            'buying_behavior': {'purchase_channels': ['mobile']},
        },
        'business-model': {'model_type': 'Marketplace', 'channels': ['App store']},
        'competition': {
            'competitor_data': [{'name': 'TooGoodToGo'}],
            'swot_analysis': {'strengths': ['Local focus']},
        },
        'revenue': {
            'revenue_streams': [{'name': 'Commission', 'estimated_percentage': 15}],
            'pricing_strategy': 'Take rate',
        },
        'mvp': {
            'features': [{'name': 'Bundle listing', 'priority': 'high'}],
            'resources': ['2 engineers'],
        },
    }
