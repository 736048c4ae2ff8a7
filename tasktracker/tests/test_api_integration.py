from __future__ import annotations

from datetime import datetime

from flask.testing import FlaskClient

from tasktracker.tests.conftest import bearer, register


def _create(client: FlaskClient, token: str, **body) -> dict:
    response = client.post("/api/tasks", json=body, headers=bearer(token))
    assert response.status_code == 201, response.get_json()
    return response.get_json()


def _stats(client: FlaskClient, token: str) -> dict:
    response = client.get("/api/tasks/stats", headers=bearer(token))
    assert response.status_code == 200
    return response.get_json()


def test_register_login_and_me(client: FlaskClient) -> None:
    registered = register(client)
    assert set(registered["user"]) == {"id", "username", "email"}

    login = client.post(
        "/api/auth/login", json={"email": "ALICE@example.com", "password": "secret123"}
    )
    assert login.status_code == 200
    token = login.get_json()["token"]

    me = client.get("/api/auth/me", headers=bearer(token))
    assert me.status_code == 200
    assert me.get_json()["user"] == registered["user"]


def test_duplicate_registration_is_conflict(client: FlaskClient) -> None:
    register(client)

    response = client.post(
        "/api/auth/register",
        json={"username": "alice2", "email": "Alice@Example.com", "password": "secret123"},
    )

    assert response.status_code == 409
    assert response.get_json()["error"] == "user_already_exists"


def test_login_failures_are_indistinguishable(client: FlaskClient) -> None:
    register(client)

    wrong_password = client.post(
        "/api/auth/login", json={"email": "alice@example.com", "password": "nope-nope"}
    )
    unknown_email = client.post(
        "/api/auth/login", json={"email": "ghost@example.com", "password": "secret123"}
    )

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.get_json() == unknown_email.get_json()


def test_task_lifecycle_updates_stats(client: FlaskClient) -> None:
    token = register(client)["token"]

    task = _create(client, token, title="Ship release", priority="high")
    assert task["completed"] is False
    assert task["description"] == ""
    assert task["dueDate"] is None
    assert _stats(client, token) == {"total": 1, "completed": 0, "pending": 1, "highPriority": 1}

    updated = client.put(
        f"/api/tasks/{task['id']}", json={"completed": True}, headers=bearer(token)
    )
    assert updated.status_code == 200
    body = updated.get_json()
    assert body["completed"] is True
    assert body["title"] == "Ship release"
    assert body["priority"] == "high"
    assert body["createdAt"] == task["createdAt"]
    assert _stats(client, token) == {"total": 1, "completed": 1, "pending": 0, "highPriority": 1}

    deleted = client.delete(f"/api/tasks/{task['id']}", headers=bearer(token))
    assert deleted.status_code == 200
    assert deleted.get_json() == {"success": True}
    assert client.get("/api/tasks", headers=bearer(token)).get_json() == []

    again = client.delete(f"/api/tasks/{task['id']}", headers=bearer(token))
    assert again.status_code == 404


def test_tasks_are_isolated_between_users(client: FlaskClient) -> None:
    alice = register(client)["token"]
    bob = register(client, "bob", "bob@example.com")["token"]
    task = _create(client, alice, title="Alice only")

    assert client.get("/api/tasks", headers=bearer(bob)).get_json() == []
    for method in ("get", "put", "patch", "delete"):
        kwargs = {"json": {"title": "mine now"}} if method in ("put", "patch") else {}
        response = getattr(client, method)(
            f"/api/tasks/{task['id']}", headers=bearer(bob), **kwargs
        )
        assert response.status_code == 404, method

    still = client.get(f"/api/tasks/{task['id']}", headers=bearer(alice)).get_json()
    assert still["title"] == "Alice only"
    assert _stats(client, bob)["total"] == 0


def test_owner_in_body_is_rejected(client: FlaskClient) -> None:
    alice = register(client)
    bob = register(client, "bob", "bob@example.com")

    response = client.post(
        "/api/tasks",
        json={"title": "sneaky", "ownerId": bob["user"]["id"]},
        headers=bearer(alice["token"]),
    )

    assert response.status_code == 400
    assert response.get_json()["context"]["fields"] == ["ownerId"]
    assert client.get("/api/tasks", headers=bearer(bob["token"])).get_json() == []


def test_update_rejects_immutable_fields(client: FlaskClient) -> None:
    token = register(client)["token"]
    task = _create(client, token, title="fixed")

    response = client.patch(
        f"/api/tasks/{task['id']}",
        json={"createdAt": "2000-01-01T00:00:00Z"},
        headers=bearer(token),
    )

    assert response.status_code == 400
    assert "createdAt" in response.get_json()["context"]["fields"]


def test_create_validation_errors(client: FlaskClient) -> None:
    token = register(client)["token"]

    blank = client.post("/api/tasks", json={"title": "   "}, headers=bearer(token))
    bad_priority = client.post(
        "/api/tasks", json={"title": "x", "priority": "urgent"}, headers=bearer(token)
    )
    coerced = client.post(
        "/api/tasks", json={"title": "x", "completed": "yes"}, headers=bearer(token)
    )

    assert blank.status_code == 400
    assert blank.get_json()["context"]["fields"] == ["title"]
    assert bad_priority.status_code == 400
    assert bad_priority.get_json()["context"]["fields"] == ["priority"]
    assert coerced.status_code == 400


def test_due_date_is_returned_in_utc(client: FlaskClient) -> None:
    token = register(client)["token"]

    task = _create(client, token, title="deadline", dueDate="2025-06-01T10:00:00+02:00")

    assert task["dueDate"] == "2025-06-01T08:00:00Z"

    cleared = client.patch(
        f"/api/tasks/{task['id']}", json={"dueDate": None}, headers=bearer(token)
    ).get_json()
    assert cleared["dueDate"] is None


def test_list_is_newest_first(client: FlaskClient) -> None:
    token = register(client)["token"]
    first = _create(client, token, title="first")
    second = _create(client, token, title="second")

    listed = client.get("/api/tasks", headers=bearer(token)).get_json()

    expected = sorted(
        [first, second],
        key=lambda t: (datetime.fromisoformat(t["createdAt"]), t["id"]),
        reverse=True,
    )
    assert [t["id"] for t in listed] == [t["id"] for t in expected]


def test_unauthenticated_requests_get_identical_401(client: FlaskClient) -> None:
    responses = [
        client.get("/api/tasks"),
        client.get("/api/tasks", headers={"Authorization": "Token abc"}),
        client.get("/api/tasks", headers=bearer("forged.token")),
        client.get("/api/tasks/stats", headers=bearer("")),
    ]

    assert {r.status_code for r in responses} == {401}
    assert all(r.get_json() == responses[0].get_json() for r in responses)


def test_health_and_request_id(client: FlaskClient) -> None:
    response = client.get("/api/health", headers={"X-Request-ID": "req-42"})

    assert response.status_code == 200
    assert response.get_json() == {"ok": True, "database": "ok"}
    assert response.headers["X-Request-ID"] == "req-42"
    assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_unknown_route_is_json_404(client: FlaskClient) -> None:
    response = client.get("/api/nope")

    assert response.status_code == 404
    assert response.get_json()["error"] == "not_found"


def test_created_task_lists_back_with_defaults(client: FlaskClient) -> None:
    token = register(client)["token"]
    _create(client, token, title="Buy milk", priority="high")

    (task,) = client.get("/api/tasks", headers=bearer(token)).get_json()

    assert task["title"] == "Buy milk"
    assert task["priority"] == "high"
    assert task["completed"] is False
    assert task["description"] == ""
    assert task["ownerId"] == client.get("/api/auth/me", headers=bearer(token)).get_json()[
        "user"
    ]["id"]


def test_register_create_and_complete_scenario(client: FlaskClient) -> None:
    registered = register(client, "alice", "a@x.com", "secret1")
    token = registered["token"]
    assert token
    assert registered["user"]["email"] == "a@x.com"

    task = _create(client, token, title="Write report", priority="high")
    assert task["completed"] is False
    assert _stats(client, token) == {"total": 1, "completed": 0, "pending": 1, "highPriority": 1}

    updated = client.put(
        f"/api/tasks/{task['id']}", json={"completed": True}, headers=bearer(token)
    )
    assert updated.status_code == 200
    assert _stats(client, token) == {"total": 1, "completed": 1, "pending": 0, "highPriority": 1}
