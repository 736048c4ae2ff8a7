from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from tasktracker.app import create_app, get_container
from tasktracker.infrastructure.db import Database
from tasktracker.shared.config import AppConfig, DatabaseConfig, ResilienceConfig, SecurityConfig

TEST_SECRET = "test-secret-key-that-is-long-enough-0123456789"


@pytest.fixture()
def app_config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        app_env="test",
        secret_key=TEST_SECRET,
        database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'tasks.db'}", pool_timeout=5.0),
        resilience=ResilienceConfig(max_retries=0),
        security=SecurityConfig(enable_rate_limit=False),
    )


@pytest.fixture()
def database(app_config: AppConfig) -> Iterator[Database]:
    db = Database(app_config.database)
    db.init_schema()
    yield db
    db.dispose()


@pytest.fixture()
def app(app_config: AppConfig) -> Iterator[Flask]:
    application = create_app(app_config)
    yield application
    get_container(application).close()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


def register(
    client: FlaskClient,
    username: str = "alice",
    email: str = "alice@example.com",
    password: str = "secret123",
) -> dict:
    response = client.post(
        "/api/auth/register",
        json={"username": username, "email": email, "password": password},
    )
    assert response.status_code == 201, response.get_json()
    return response.get_json()


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
