"""
Shared fixtures for the roster test suite.
"""
import pytest
from fastapi.testclient import TestClient

from roster import config
from roster.app import app
from roster.modules.users.api import get_user_service
from roster.modules.users.domain.user import UserPayload
from roster.modules.users.repositories.user_repository import UserRepository
from roster.modules.users.services.user_service import UserService
from roster.modules.users.services.provisioning import seed_users


@pytest.fixture
def repository():
    """Empty in-memory user store."""
    return UserRepository()


@pytest.fixture
def service(repository):
    """User service over an empty store."""
    return UserService(repository)


@pytest.fixture
def seeded_service(service):
    """User service holding the two default users (ids 1 and 2)."""
    seed_users(service)
    return service


@pytest.fixture
def payload():
    """Factory for user payloads."""
    def _payload(name="Carol White", email="carol.white@techhive.com", role="Engineer"):
        return UserPayload(name=name, email=email, role=role)
    return _payload


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {config.API_TOKEN}"}


@pytest.fixture
def client(seeded_service):
    """Test client wired to a fresh seeded service."""
    app.dependency_overrides[get_user_service] = lambda: seeded_service
    yield TestClient(app)
    app.dependency_overrides.clear()
