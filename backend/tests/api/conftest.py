"""
Fixtures for API tests.

Routes run against the real application with services swapped out
through FastAPI's dependency_overrides.
"""

import pytest
from fastapi.testclient import TestClient

from api import app as petpal_app
from api.dependencies import get_token_service, get_user_repository


@pytest.fixture
def app(token_service, user_store):
    """The application, verifying tokens with the test secret."""
    petpal_app.dependency_overrides[get_token_service] = lambda: token_service
    petpal_app.dependency_overrides[get_user_repository] = lambda: user_store
    yield petpal_app
    petpal_app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def admin_headers(user_store, make_user, make_token) -> dict[str, str]:
    """Headers for user 99, an administrator in the user store."""
    user_store.add(make_user(99, email="admin@example.com", is_admin=True))
    return {"Authorization": f"Bearer {make_token(user_id=99, is_admin=True)}"}
