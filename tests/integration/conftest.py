"""
Integration test fixtures. Overrides get_repository and get_resolver so API tests
run against a temporary data directory with generation served from the library.
"""
import pytest


@pytest.fixture
def resolver(settings):
    from api.services.course_resolver import CourseContentResolver
    return CourseContentResolver(None, [], settings)


@pytest.fixture
def api_client(repo, resolver, settings):
    """FastAPI TestClient over a temporary repository."""
    from fastapi.testclient import TestClient
    from api.api import app
    from api.config import get_repository, get_settings
    from api.services.course_resolver import get_resolver
    app.dependency_overrides[get_repository] = lambda: repo
    app.dependency_overrides[get_resolver] = lambda: resolver
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


def register(client, name="Test User", email="test@example.com", password="testpass123"):
    return client.post("/api/auth/register", json={"name": name, "email": email, "password": password})


@pytest.fixture
def auth_headers(api_client):
    """Bearer headers for a freshly registered user."""
    response = register(api_client)
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def other_auth_headers(api_client):
    response = register(api_client, name="Other User", email="other@example.com")
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['token']}"}
