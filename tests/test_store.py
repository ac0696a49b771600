from datetime import datetime, timezone

from user_todos.models import new_todo, new_user
from user_todos.store import Store

DEADLINE = datetime(2025, 1, 1, tzinfo=timezone.utc)


def seeded_store():
    store = Store()
    ana = store.add_user(new_user("Ana", "ana"))
    bruno = store.add_user(new_user("Bruno", "bruno"))
    todo = store.add_todo(ana, new_todo("Buy milk", DEADLINE))
    return store, ana, bruno, todo


class TestUserLookups:
    def test_find_by_username_and_id(self):
        store, ana, bruno, _ = seeded_store()
        assert store.find_user_by_username("bruno") is bruno
        assert store.find_user_by_id(ana["id"]) is ana
        assert store.find_user_by_username("nobody") is None
        assert store.find_user_by_id("nope") is None
        assert store.find_user_by_username(None) is None

    def test_exists(self):
        store, ana, _, _ = seeded_store()
        assert store.user_exists_by_username("ana")
        assert not store.user_exists_by_username("ANA")
        assert store.user_exists_by_id(ana["id"])
        assert not store.user_exists_by_id("nope")


class TestTodoLookups:
    def test_list_todos(self):
        store, ana, bruno, todo = seeded_store()
        assert store.list_todos("ana") == [todo]
        assert store.list_todos("bruno") == []
        assert store.list_todos("nobody") is None

    def test_list_todos_by_user_id(self):
        store, ana, bruno, todo = seeded_store()
        assert store.list_todos_by_user_id(ana["id"]) == [todo]
        assert store.list_todos_by_user_id(bruno["id"]) == []
        assert store.list_todos_by_user_id("nope") is None

    def test_todo_lookups_are_scoped_by_username(self):
        store, _, _, todo = seeded_store()
        assert store.todo_exists("ana", todo["id"])
        assert store.find_todo("ana", todo["id"]) is todo
        assert not store.todo_exists("bruno", todo["id"])
        assert store.find_todo("bruno", todo["id"]) is None
        assert not store.todo_exists("nobody", todo["id"])
        assert store.find_todo("nobody", todo["id"]) is None


class TestMutations:
    def test_new_entities_have_defaults(self):
        user = new_user("Ana", "ana")
        assert user["pro"] is False
        assert user["todos"] == []
        todo = new_todo("Buy milk", DEADLINE)
        assert todo["done"] is False
        assert todo["created_at"].tzinfo is not None
        assert new_todo("Buy milk", DEADLINE)["id"] != todo["id"]

    def test_remove_todo(self):
        store, ana, _, todo = seeded_store()
        assert store.remove_todo(ana, todo) is True
        assert ana["todos"] == []
        assert store.remove_todo(ana, todo) is False

    def test_remove_todo_of_other_user(self):
        store, _, bruno, todo = seeded_store()
        assert store.remove_todo(bruno, todo) is False
