from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Header, status

from ..errors import NotFoundError
from ..models import new_todo
from ..schemas import ErrorOut, TodoCreate, TodoOut
from ..store import Store, get_store
from ..validation import (
    TODO_NOT_FOUND,
    RequestContext,
    require_todo,
    require_todo_quota,
    require_user,
    run_checks,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
)

_LIST_CHECKS = (require_user,)
_GET_CHECKS = (require_user, require_todo)
_CREATE_CHECKS = (require_user, require_todo_quota)
_UPDATE_CHECKS = (require_todo,)
_DONE_CHECKS = (require_todo,)
_DELETE_CHECKS = (require_user, require_todo)

_USER_ERRORS = {404: {"model": ErrorOut, "description": "User not found"}}
_TODO_ERRORS = {
    400: {"model": ErrorOut, "description": "Invalid id"},
    404: {"model": ErrorOut, "description": "User or todo not found"},
}


def _username_header(username: Optional[str] = Header(default=None, description="Username of the acting user")) -> Optional[str]:
    """
    Dependency wrapper for the `username` header to keep signatures clean.
    """
    return username


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[TodoOut],
    summary="List Todos",
    description="List the todos of the user named in the `username` header.",
    responses=_USER_ERRORS,
)
def list_todos(
    username: Optional[str] = Depends(_username_header),
    store: Store = Depends(get_store),
) -> List[TodoOut]:
    """
    List the requesting user's todos in creation order.
    """
    with store.lock:
        ctx = run_checks(store, RequestContext(username=username), _LIST_CHECKS)
        return [TodoOut(**todo) for todo in ctx.user["todos"]]  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.get(
    "/{todo_id}",
    response_model=TodoOut,
    summary="Get Todo",
    description="Get a single todo of the requesting user by ID.",
    responses=_TODO_ERRORS,
)
def get_todo(
    todo_id: str,
    username: Optional[str] = Depends(_username_header),
    store: Store = Depends(get_store),
) -> TodoOut:
    """
    Retrieve a single todo by its ID.
    """
    with store.lock:
        ctx = run_checks(store, RequestContext(username=username, path_id=todo_id), _GET_CHECKS)
        return TodoOut(**ctx.todo)  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TodoOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create Todo",
    description="Create a todo for the requesting user. Free users are limited to a fixed number of todos.",
    responses={
        201: {"description": "Todo created successfully"},
        403: {"model": ErrorOut, "description": "Todo quota reached"},
        **_USER_ERRORS,
    },
)
def create_todo(
    payload: TodoCreate,
    username: Optional[str] = Depends(_username_header),
    store: Store = Depends(get_store),
) -> TodoOut:
    """
    Create a new Todo.
    """
    with store.lock:
        ctx = run_checks(store, RequestContext(username=username), _CREATE_CHECKS)
        todo = store.add_todo(ctx.user, new_todo(payload.title, payload.deadline))
        return TodoOut(**todo)  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.put(
    "/{todo_id}",
    response_model=TodoOut,
    summary="Update Todo",
    description="Overwrite title and deadline of an existing todo.",
    responses=_TODO_ERRORS,
)
def update_todo(
    todo_id: str,
    payload: TodoCreate,
    username: Optional[str] = Depends(_username_header),
    store: Store = Depends(get_store),
) -> TodoOut:
    """
    Replace title and deadline in place. `done` and `created_at` are left alone.
    """
    with store.lock:
        ctx = run_checks(store, RequestContext(username=username, path_id=todo_id), _UPDATE_CHECKS)
        todo = ctx.todo
        todo["title"] = payload.title
        todo["deadline"] = payload.deadline
        return TodoOut(**todo)  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.patch(
    "/{todo_id}/done",
    response_model=TodoOut,
    summary="Mark Todo Done",
    description="Mark a todo as done. Marking an already done todo is not an error.",
    responses=_TODO_ERRORS,
)
def mark_todo_done(
    todo_id: str,
    username: Optional[str] = Depends(_username_header),
    store: Store = Depends(get_store),
) -> TodoOut:
    """
    Set `done` to true.
    """
    with store.lock:
        ctx = run_checks(store, RequestContext(username=username, path_id=todo_id), _DONE_CHECKS)
        todo = ctx.todo
        todo["done"] = True
        return TodoOut(**todo)  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.delete(
    "/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Todo",
    description="Delete a todo of the requesting user by ID.",
    responses={
        204: {"description": "Todo deleted"},
        **_TODO_ERRORS,
    },
)
def delete_todo(
    todo_id: str,
    username: Optional[str] = Depends(_username_header),
    store: Store = Depends(get_store),
) -> None:
    """
    Delete a Todo. Returns 204 on success, 404 if not found.
    """
    with store.lock:
        ctx = run_checks(store, RequestContext(username=username, path_id=todo_id), _DELETE_CHECKS)
        if not store.remove_todo(ctx.user, ctx.todo):
            raise NotFoundError(TODO_NOT_FOUND)
    return None
