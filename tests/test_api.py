"""
Integration tests for the todos HTTP API
"""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient


def create(client, title="Test Todo"):
    response = client.post("/api/todos", json={"title": title})
    assert response.status_code == 201
    return response.json()


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


class TestListTodos:
    def test_returns_empty_array_initially(self, client):
        response = client.get("/api/todos")

        assert response.status_code == 200
        assert response.json() == []

    def test_returns_records_in_creation_order(self, client):
        create(client, "first")
        create(client, "second")

        titles = [t["title"] for t in client.get("/api/todos").json()]
        assert titles == ["first", "second"]


class TestCreateTodo:
    def test_creates_record(self, client):
        body = create(client, "Test Todo")

        assert set(body) == {"id", "title", "completed", "createdAt"}
        assert body["title"] == "Test Todo"
        assert body["completed"] is False
        assert isinstance(body["id"], int)
        datetime.fromisoformat(body["createdAt"].replace("Z", "+00:00"))

    @pytest.mark.parametrize("payload", [{}, {"title": ""}, {"title": "   "}, {"title": None}])
    def test_rejects_missing_or_blank_title(self, client, payload):
        response = client.post("/api/todos", json=payload)

        assert response.status_code == 400
        assert response.json() == {"error": "Title is required"}
        assert client.get("/api/todos").json() == []

    def test_rejects_non_string_title(self, client):
        response = client.post("/api/todos", json={"title": 12})

        assert response.status_code == 400
        assert "error" in response.json()

    def test_rejects_malformed_json(self, client):
        response = client.post(
            "/api/todos",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert "error" in response.json()

    def test_rejects_missing_body(self, client):
        response = client.post("/api/todos")

        assert response.status_code == 400
        assert response.json() == {"error": "Title is required"}

    def test_ids_increase_even_after_delete(self, client):
        first = create(client, "First Todo")
        client.delete(f"/api/todos/{first['id']}")
        second = create(client, "Second Todo")

        assert second["id"] > first["id"]


class TestUpdateTodo:
    def test_updates_title(self, client):
        todo = create(client, "Original Title")

        response = client.put(f"/api/todos/{todo['id']}", json={"title": "Updated Title"})

        assert response.status_code == 200
        assert response.json()["title"] == "Updated Title"
        assert response.json()["id"] == todo["id"]
        assert response.json()["createdAt"] == todo["createdAt"]

    def test_does_not_change_completed(self, client):
        todo = create(client)
        client.patch(f"/api/todos/{todo['id']}/toggle")

        response = client.put(f"/api/todos/{todo['id']}", json={"title": "New Title"})

        assert response.json()["completed"] is True

    def test_empty_body_keeps_record(self, client):
        todo = create(client, "Same")

        response = client.put(f"/api/todos/{todo['id']}", json={})

        assert response.status_code == 200
        assert response.json()["title"] == "Same"

    def test_blank_title_is_rejected(self, client):
        todo = create(client, "Same")

        response = client.put(f"/api/todos/{todo['id']}", json={"title": ""})

        assert response.status_code == 400
        assert "error" in response.json()

    def test_unknown_id(self, client):
        response = client.put("/api/todos/99999", json={"title": "Updated Title"})

        assert response.status_code == 404
        assert response.json() == {"error": "Todo not found"}


class TestToggleTodo:
    def test_toggles_back_and_forth(self, client):
        todo = create(client)

        first = client.patch(f"/api/todos/{todo['id']}/toggle")
        second = client.patch(f"/api/todos/{todo['id']}/toggle")

        assert first.status_code == 200
        assert first.json()["completed"] is True
        assert second.status_code == 200
        assert second.json()["completed"] is False

    def test_unknown_id(self, client):
        response = client.patch("/api/todos/99999/toggle")

        assert response.status_code == 404
        assert "error" in response.json()


class TestDeleteTodo:
    def test_deletes_record(self, client):
        todo = create(client)

        response = client.delete(f"/api/todos/{todo['id']}")

        assert response.status_code == 200
        assert response.json() == {"message": "Todo deleted"}
        assert all(t["id"] != todo["id"] for t in client.get("/api/todos").json())

    def test_unknown_id(self, client):
        response = client.delete("/api/todos/99999")

        assert response.status_code == 404
        assert "error" in response.json()


class TestErrorHandling:
    @pytest.mark.parametrize("method, path", [
        ("PUT", "/api/todos/abc"),
        ("PATCH", "/api/todos/abc/toggle"),
        ("DELETE", "/api/todos/abc"),
    ])
    def test_non_integer_id_is_not_found(self, client, method, path):
        response = client.request(method, path, json={"title": "x"} if method == "PUT" else None)

        assert response.status_code == 404
        assert response.json() == {"error": "Todo not found"}

    def test_body_errors_stay_bad_requests(self, client):
        todo = create(client)

        response = client.put(f"/api/todos/{todo['id']}", json={"title": 12})

        assert response.status_code == 400
        assert "error" in response.json()

    def test_unknown_route_uses_error_shape(self, client):
        response = client.get("/api/nope")

        assert response.status_code == 404
        assert "error" in response.json()

    def test_wrong_method_uses_error_shape(self, client):
        response = client.post("/health")

        assert response.status_code == 405
        assert "error" in response.json()

    def test_unexpected_exception_returns_500(self, app, repo, monkeypatch):
        def boom():
            raise RuntimeError("store exploded")

        monkeypatch.setattr(repo, "list", boom)
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/api/todos")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    def test_unexpected_exception_keeps_cors_headers(self, app, repo, monkeypatch):
        def boom():
            raise RuntimeError("store exploded")

        monkeypatch.setattr(repo, "list", boom)
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/api/todos", headers={"Origin": "http://localhost:3000"})

        assert response.status_code == 500
        assert "access-control-allow-origin" in response.headers
        assert response.json() == {"error": "Internal server error"}


def test_stores_are_isolated_per_app():
    from todo_app.main import create_app

    one = TestClient(create_app())
    two = TestClient(create_app())
    create(one, "only in one")

    assert two.get("/api/todos").json() == []


def test_end_to_end_scenario(client):
    created = client.post("/api/todos", json={"title": "Buy milk"})
    assert created.status_code == 201
    todo = created.json()
    assert todo["completed"] is False

    toggled = client.patch(f"/api/todos/{todo['id']}/toggle").json()
    assert toggled["completed"] is True

    toggled = client.patch(f"/api/todos/{todo['id']}/toggle").json()
    assert toggled["completed"] is False

    renamed = client.put(f"/api/todos/{todo['id']}", json={"title": "Buy oat milk"})
    assert renamed.status_code == 200
    assert renamed.json()["title"] == "Buy oat milk"
    assert renamed.json()["completed"] is False

    deleted = client.delete(f"/api/todos/{todo['id']}")
    assert deleted.status_code == 200

    ids = [t["id"] for t in client.get("/api/todos").json()]
    assert todo["id"] not in ids


def test_openapi_schema_is_generated(client):
    schema = client.get("/openapi.json").json()

    assert "/api/todos" in schema["paths"]
    assert "/api/todos/{todo_id}/toggle" in schema["paths"]
