from uuid import UUID


class TestHealth:
    def test_health_check(self, client, create_user):
        create_user()
        res = client.get("/")
        assert res.status_code == 200
        data = res.json()
        assert data["message"] == "Healthy"
        assert data["users"] == 1


class TestCreateUser:
    def test_fresh_user_is_not_pro_and_has_no_todos(self, client):
        res = client.post("/users", json={"name": "Ana", "username": "ana"})
        assert res.status_code == 201
        user = res.json()
        assert user["name"] == "Ana"
        assert user["username"] == "ana"
        assert user["pro"] is False
        assert user["todos"] == []
        UUID(user["id"])

    def test_duplicate_username_is_rejected_without_mutation(self, client, store, create_user):
        create_user(name="Ana", username="ana")
        res = client.post("/users", json={"name": "Another Ana", "username": "ana"})
        assert res.status_code == 400
        assert res.json() == {"error": "Username already exists"}
        assert len(store.users) == 1
        assert store.users[0]["name"] == "Ana"

    def test_missing_fields_use_validation_envelope(self, client, store):
        res = client.post("/users", json={"name": "Nameless"})
        assert res.status_code == 422
        body = res.json()
        assert body.get("error") == "ValidationError"
        assert body.get("message") == "Request validation failed"
        assert isinstance(body.get("detail"), list)
        assert store.users == []


class TestReadUsers:
    def test_list_users_returns_full_objects(self, client, create_user, create_todo):
        create_user(name="Ana", username="ana")
        create_user(name="Bruno", username="bruno")
        create_todo(username="ana")

        res = client.get("/users")
        assert res.status_code == 200
        users = res.json()
        assert [u["username"] for u in users] == ["ana", "bruno"]
        assert len(users[0]["todos"]) == 1
        assert users[1]["todos"] == []

    def test_list_users_empty(self, client):
        res = client.get("/users")
        assert res.status_code == 200
        assert res.json() == []

    def test_get_user_by_id(self, client, create_user):
        user = create_user()
        res = client.get(f"/users/{user['id']}")
        assert res.status_code == 200
        assert res.json() == user

    def test_get_unknown_user(self, client):
        res = client.get("/users/8a1c7b5e-3b4f-4c59-9d7e-2f1e0a6b9c31")
        assert res.status_code == 404
        assert res.json() == {"error": "user not found"}


class TestProPlan:
    def test_activate_pro_once(self, client, create_user):
        user = create_user()
        res = client.patch(f"/users/{user['id']}/pro")
        assert res.status_code == 200
        assert res.json()["pro"] is True

        res_again = client.patch(f"/users/{user['id']}/pro")
        assert res_again.status_code == 400
        assert res_again.json() == {"error": "Pro plan is already activated."}

        assert client.get(f"/users/{user['id']}").json()["pro"] is True

    def test_activate_pro_unknown_user(self, client):
        res = client.patch("/users/does-not-exist/pro")
        assert res.status_code == 404
        assert res.json() == {"error": "user not found"}

    def test_pro_user_has_no_todo_quota(self, client, create_user, create_todo):
        user = create_user()
        client.patch(f"/users/{user['id']}/pro")
        for i in range(12):
            create_todo(title=f"Task {i}")
        res = client.get("/todos", headers={"username": "ana"})
        assert len(res.json()) == 12


class TestLogging:
    def test_logging_is_configured_on_startup(self, monkeypatch):
        from fastapi.testclient import TestClient

        from user_todos import main

        levels = []
        monkeypatch.setattr(main, "configure_logging", levels.append)
        with TestClient(main.app):
            pass
        assert levels == [main._settings.log_level]
