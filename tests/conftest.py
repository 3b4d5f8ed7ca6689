"""
Pytest fixtures for marketplace service tests
"""

import pytest
from typing import Dict, Any
from fastapi.testclient import TestClient

from marketplace.main import create_app
from marketplace.schemas.user import UserCreateSchema
from marketplace.services.auth_service import AuthService
from marketplace.services.profile_service import ProfileService
from marketplace.utils.config import AppConfig
from marketplace.utils.store import MarketplaceStore

# Configure pytest-asyncio mode for version 1.x
pytest_plugins = ('pytest_asyncio',)


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "asyncio: mark test as an asyncio test."
    )


@pytest.fixture
def store() -> MarketplaceStore:
    """Fresh empty store"""
    return MarketplaceStore()


@pytest.fixture
def auth_service(store) -> AuthService:
    return AuthService(store)


@pytest.fixture
def profile_service(store) -> ProfileService:
    return ProfileService(store)


@pytest.fixture
def app_config() -> AppConfig:
    """Configuration independent of the environment"""
    return AppConfig(_env_file=None, log_level="WARNING")


@pytest.fixture
def client(store, app_config):
    """Test client over an application bound to the test store"""
    app = create_app(store=store, config=app_config)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_registration() -> Dict[str, Any]:
    """Registration payload as sent by the web client"""
    return {
        "email": "jane@example.com",
        "password": "secret-pass",
        "firstName": "Jane",
        "lastName": "Doe",
        "phone": "+15550100"
    }


@pytest.fixture
def sample_account_data(sample_registration) -> UserCreateSchema:
    return UserCreateSchema(**sample_registration)


@pytest.fixture
def registered(client, sample_registration) -> Dict[str, Any]:
    """Register the sample account over HTTP and return the response body"""
    response = client.post("/api/register", json=sample_registration)
    assert response.status_code == 200
    return response.json()
