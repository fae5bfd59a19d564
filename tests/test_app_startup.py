# File: tests/test_app_startup.py

import logging

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from users_api.core.config import Settings
from users_api.core.errors import StorageError
from users_api.main import create_application


def test_startup_fails_when_database_cannot_be_opened(tmp_path):
    settings = Settings(database_url=f"sqlite:///{tmp_path / 'missing' / 'users.db'}")
    app = create_application(settings)
    with pytest.raises(StorageError):
        with TestClient(app):
            pass


def test_data_survives_restart(settings):
    with TestClient(create_application(settings)) as client:
        user_id = client.post(
            "/users",
            json={"name": "John Doe", "email": "john@example.com", "address": "123 Main St"},
        ).json()["id"]

    with TestClient(create_application(settings)) as client:
        resp = client.get(f"/users/{user_id}")
        assert resp.status_code == 200
        assert resp.json()["user"]["name"] == "John Doe"


def test_settings_port_is_coerced_to_int():
    assert Settings(port="8080").port == 8080


def test_settings_parse_cors_origins_and_log_level():
    settings = Settings(cors_origins="http://a.test, http://b.test,", log_level="debug")
    assert settings.cors_origins == ["http://a.test", "http://b.test"]
    assert settings.log_level == "DEBUG"


def test_table_creation_failure_is_logged_but_not_fatal(tmp_path, caplog):
    db_file = tmp_path / "readonly.db"
    db_file.touch()
    settings = Settings(database_url=f"sqlite:///file:{db_file}?mode=ro&uri=true")

    with caplog.at_level(logging.ERROR, logger="users_api.db.init_db"):
        with TestClient(create_application(settings)) as client:
            resp = client.get("/users")

    assert "Table creation error" in caplog.text
    assert resp.status_code == 500
    assert resp.json() == {"error": "no such table: users"}


def test_settings_from_env_overrides_defaults():
    settings = Settings.from_env(
        {"PORT": "8081", "USERS_API_DATABASE_URL": "sqlite:///./other.db"}
    )
    assert settings.port == 8081
    assert settings.database_url == "sqlite:///./other.db"
    assert settings.cors_origins == ["*"]
    assert Settings.from_env({}).port == 3000


def test_settings_from_env_rejects_bad_port():
    with pytest.raises(ValidationError):
        Settings.from_env({"PORT": "not-a-port"})
