import pytest
from fastapi.testclient import TestClient

from user_todos.main import app
from user_todos.store import Store, get_store


@pytest.fixture
def store():
    """A fresh, empty store per test."""
    return Store(todo_quota=10)


@pytest.fixture
def client(store):
    """TestClient whose requests all hit the per-test store."""
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_store, None)


@pytest.fixture
def create_user(client):
    """Factory creating a user through the API and returning its JSON."""

    def _create(name="Ana", username="ana"):
        res = client.post("/users", json={"name": name, "username": username})
        assert res.status_code == 201
        return res.json()

    return _create


@pytest.fixture
def create_todo(client):
    """Factory creating a todo for `username` through the API and returning its JSON."""

    def _create(username="ana", title="Buy milk", deadline="2025-01-01"):
        res = client.post(
            "/todos",
            json={"title": title, "deadline": deadline},
            headers={"username": username},
        )
        assert res.status_code == 201
        return res.json()

    return _create
