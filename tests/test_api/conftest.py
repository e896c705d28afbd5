# tests/test_api/conftest.py
import pytest
from fastapi.testclient import TestClient

from api.main import app
from core.sa.database import get_db

@pytest.fixture
def client(database):
    """Test client whose requests use the test database."""
    def override_get_db():
        session = database.get_session()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()

@pytest.fixture
def other_client(client):
    """A second browser with its own session cookie."""
    return TestClient(app)

@pytest.fixture
def alice_client(client, reference_catalog):
    response = client.post("/login", json={"name": "Alice", "cardnum": 7})
    assert response.json() == {"success": True}
    return client
