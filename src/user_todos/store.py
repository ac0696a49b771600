from __future__ import annotations

import logging
from threading import Lock, RLock
from typing import List, Optional

from .models import TodoEntity, UserEntity
from .settings import get_settings

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class Store:
    """
    Process-resident collection of users and the todos they own.

    Lookups are linear scans returning the first match. Nothing is copied:
    entities handed out are the live objects, and handlers mutate them in
    place. Callers that read-then-write (duplicate username, todo quota) must
    hold `lock` for the whole sequence.
    """

    def __init__(self, todo_quota: int = 10) -> None:
        self.lock = RLock()
        self.todo_quota = todo_quota
        self._users: List[UserEntity] = []

    @property
    def users(self) -> List[UserEntity]:
        return self._users

    # Users

    def find_user_by_username(self, username: Optional[str]) -> Optional[UserEntity]:
        return next((u for u in self._users if u["username"] == username), None)

    def find_user_by_id(self, user_id: Optional[str]) -> Optional[UserEntity]:
        return next((u for u in self._users if u["id"] == user_id), None)

    def user_exists_by_username(self, username: Optional[str]) -> bool:
        return any(u["username"] == username for u in self._users)

    def user_exists_by_id(self, user_id: Optional[str]) -> bool:
        return any(u["id"] == user_id for u in self._users)

    # Todos

    def list_todos(self, username: Optional[str]) -> Optional[List[TodoEntity]]:
        """Return the user's todos, or None when no user has this username."""
        user = self.find_user_by_username(username)
        if user is None:
            return None
        return user["todos"]

    def list_todos_by_user_id(self, user_id: Optional[str]) -> Optional[List[TodoEntity]]:
        """
        Return the user's todos, or None when no user has this id.

        No route resolves todos by user id; kept alongside `list_todos` as
        part of the lookup API.
        """
        user = self.find_user_by_id(user_id)
        if user is None:
            return None
        return user["todos"]

    def todo_exists(self, username: Optional[str], todo_id: str) -> bool:
        todos = self.list_todos(username)
        if todos is None:
            return False
        return any(t["id"] == todo_id for t in todos)

    def find_todo(self, username: Optional[str], todo_id: str) -> Optional[TodoEntity]:
        """
        Return the todo with this id among the given user's todos.

        Todos are always scoped by owner: a todo belonging to another user is
        reported as missing.
        """
        todos = self.list_todos(username)
        if todos is None:
            return None
        return next((t for t in todos if t["id"] == todo_id), None)

    # Mutations

    def add_user(self, user: UserEntity) -> UserEntity:
        with self.lock:
            self._users.append(user)
        logger.info("Created user %s (%s)", user["username"], user["id"])
        return user

    def add_todo(self, user: UserEntity, todo: TodoEntity) -> TodoEntity:
        with self.lock:
            user["todos"].append(todo)
        logger.info("Created todo %s for user %s", todo["id"], user["username"])
        return todo

    def remove_todo(self, user: UserEntity, todo: TodoEntity) -> bool:
        """Remove exactly this todo object from the user's todos. Return False if absent."""
        with self.lock:
            for index, candidate in enumerate(user["todos"]):
                if candidate is todo:
                    del user["todos"][index]
                    break
            else:
                return False
        logger.info("Deleted todo %s of user %s", todo["id"], user["username"])
        return True


_store: Optional[Store] = None
_store_lock = Lock()


# PUBLIC_INTERFACE
def get_store() -> Store:
    """
    FastAPI dependency returning the process-wide store.

    The store is created lazily with the configured todo quota. Tests swap it
    for a fresh instance through `app.dependency_overrides[get_store]`.
    """
    global _store
    if _store is None:
        with _store_lock:
            if _store is None:
                _store = Store(todo_quota=get_settings().todo_quota)
    return _store
