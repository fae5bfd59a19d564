# File: tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from users_api.core.config import Settings
from users_api.main import create_application


@pytest.fixture
def settings(tmp_path):
    return Settings(database_url=f"sqlite:///{tmp_path / 'users.db'}")


@pytest.fixture
def app(settings):
    return create_application(settings)


@pytest.fixture
def client(app):
    # Entering the client runs the lifespan, which opens the store
    with TestClient(app) as c:
        yield c


@pytest.fixture
def store(client, app):
    return app.state.user_store


@pytest.fixture
def john(client):
    resp = client.post(
        "/users",
        json={"name": "John Doe", "email": "john@example.com", "address": "123 Main St"},
    )
    assert resp.status_code == 200
    return resp.json()
