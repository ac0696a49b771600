from __future__ import annotations

from datetime import datetime, timezone
from typing import List, TypedDict
from uuid import uuid4


# PUBLIC_INTERFACE
class TodoEntity(TypedDict):
    """
    A lightweight domain model representing a Todo item held in memory.

    Fields:
    - id: UUID4 string, unique within the owning user's todos
    - title: Short title, overwritten on update
    - deadline: Aware datetime, overwritten on update
    - done: Completion flag; only ever goes from False to True
    - created_at: UTC creation timestamp (never changes)
    """

    id: str
    title: str
    deadline: datetime
    done: bool
    created_at: datetime


# PUBLIC_INTERFACE
class UserEntity(TypedDict):
    """
    A user account and the todos it owns.

    Fields:
    - id: UUID4 string assigned at creation
    - name: Display name
    - username: Unique across all users; also the identity sent in the
      `username` request header
    - pro: Pro plan flag; only ever goes from False to True
    - todos: Ordered todos owned exclusively by this user
    """

    id: str
    name: str
    username: str
    pro: bool
    todos: List[TodoEntity]


def _now() -> datetime:
    return datetime.now(timezone.utc)


# PUBLIC_INTERFACE
def new_user(name: str, username: str) -> UserEntity:
    """Build a fresh, non-pro user with no todos."""
    return {
        "id": str(uuid4()),
        "name": name,
        "username": username,
        "pro": False,
        "todos": [],
    }


# PUBLIC_INTERFACE
def new_todo(title: str, deadline: datetime) -> TodoEntity:
    """Build a fresh, not-done todo stamped with the current time."""
    return {
        "id": str(uuid4()),
        "title": title,
        "deadline": deadline,
        "done": False,
        "created_at": _now(),
    }
