from __future__ import annotations

from datetime import UTC, datetime
from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from tasktracker.application.use_cases.users.register_user import RegisterUserUseCase
from tasktracker.domain.users.entities import User
from tasktracker.domain.users.exceptions import InvalidCredentialsError
from tasktracker.interfaces.http.controllers.auth_controller import AuthController
from tasktracker.shared.errors import UnauthenticatedError
from tasktracker.shared.middleware.error_handler import configure_error_handling
from tasktracker.shared.middleware.rate_limit import InMemoryRateLimiter


def _user(username: str = "alice", email: str = "alice@example.com") -> User:
    return User(
        id="user-1",
        username=username,
        email=email,
        password_hash="hash",
        created_at=datetime.now(UTC),
    )


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


def test_register_endpoint_returns_user_and_token(flask_app: Flask) -> None:
    register_called: dict[str, tuple[str, str, str]] = {}

    class StubRegister:
        def execute(self, username: str, email: str, password: str) -> tuple[User, str]:
            register_called["args"] = (username, email, password)
            return _user(username, email), "token123"

    controller = AuthController(
        register_use_case=cast(RegisterUserUseCase, StubRegister()),
        login_use_case=MagicMock(),
        access_guard=MagicMock(),
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/register",
            json={"username": "alice", "email": "Alice@Example.com", "password": "secret123"},
        )

    assert response.status_code == 201
    assert register_called["args"] == ("alice", "alice@example.com", "secret123")
    assert response.get_json() == {
        "user": {"id": "user-1", "username": "alice", "email": "alice@example.com"},
        "token": "token123",
    }
    assert "password_hash" not in response.get_data(as_text=True)


def test_register_invalid_payload_returns_400_with_fields(flask_app: Flask) -> None:
    register = MagicMock()
    controller = AuthController(
        register_use_case=register, login_use_case=MagicMock(), access_guard=MagicMock()
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/register",
            json={"username": "al", "email": "nope", "password": "123"},
        )

    assert response.status_code == 400
    payload = response.get_json()
    assert payload["error"] == "validation_error"
    assert payload["context"]["fields"] == ["email", "password", "username"]
    register.execute.assert_not_called()


def test_register_rejects_non_json_body(flask_app: Flask) -> None:
    controller = AuthController(
        register_use_case=MagicMock(), login_use_case=MagicMock(), access_guard=MagicMock()
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/auth/register", data="username=alice")

    assert response.status_code == 400
    assert response.get_json()["error"] == "validation_error"


def test_login_failure_is_401(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = InvalidCredentialsError()
    controller = AuthController(
        register_use_case=MagicMock(), login_use_case=login, access_guard=MagicMock()
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/login", json={"email": "alice@example.com", "password": "wrong"}
        )

    assert response.status_code == 401
    assert response.get_json()["error"] == "invalid_credentials"


def test_login_is_rate_limited(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = InvalidCredentialsError()
    controller = AuthController(
        register_use_case=MagicMock(),
        login_use_case=login,
        access_guard=MagicMock(),
        rate_limiter=InMemoryRateLimiter(limit=2, window_seconds=60),
    )
    flask_app.register_blueprint(controller.as_blueprint())

    body = {"email": "alice@example.com", "password": "wrong"}
    with flask_app.test_client() as client:
        statuses = [client.post("/api/auth/login", json=body).status_code for _ in range(3)]

    assert statuses == [401, 401, 429]
    assert login.execute.call_count == 2


def test_me_requires_token(flask_app: Flask) -> None:
    guard = MagicMock()
    guard.resolve.side_effect = UnauthenticatedError()
    controller = AuthController(
        register_use_case=MagicMock(), login_use_case=MagicMock(), access_guard=guard
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.get("/api/auth/me")

    assert response.status_code == 401
    guard.resolve.assert_called_once_with(None)


def test_me_returns_current_user(flask_app: Flask) -> None:
    guard = MagicMock()
    guard.resolve.return_value = _user()
    controller = AuthController(
        register_use_case=MagicMock(), login_use_case=MagicMock(), access_guard=guard
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.get("/api/auth/me", headers={"Authorization": "Bearer t"})

    assert response.status_code == 200
    assert response.get_json()["user"]["username"] == "alice"
    guard.resolve.assert_called_once_with("Bearer t")


def test_rotating_forwarded_for_does_not_reset_the_limit(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = InvalidCredentialsError()
    limiter = InMemoryRateLimiter(limit=2, window_seconds=60)
    controller = AuthController(
        register_use_case=MagicMock(),
        login_use_case=login,
        access_guard=MagicMock(),
        rate_limiter=limiter,
    )
    flask_app.register_blueprint(controller.as_blueprint())

    body = {"email": "alice@example.com", "password": "wrong"}
    with flask_app.test_client() as client:
        statuses = [
            client.post(
                "/api/auth/login", json=body, headers={"X-Forwarded-For": f"10.0.0.{i}"}
            ).status_code
            for i in range(20)
        ]

    assert statuses[:2] == [401, 401]
    assert set(statuses[2:]) == {429}
    assert limiter.bucket_count() == 1
