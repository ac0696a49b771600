"""
Validation chain run before route handlers.

Each check takes the store and the current request context and either raises
an `ApiError` or returns a new context with the entities it resolved. Routes
declare their checks as an ordered tuple and pass it to `run_checks`, which
stops at the first failure.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Iterable, Optional

from .errors import ForbiddenError, InvalidInputError, NotFoundError
from .models import TodoEntity, UserEntity
from .store import Store
from .utils import is_valid_uuid

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "user not found"
TODO_NOT_FOUND = "todo not found"
INVALID_ID = "invalid id"
QUOTA_EXCEEDED = "cannot create new todo"


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class RequestContext:
    """
    Inputs of a request plus whatever the checks resolved so far.

    - username: value of the `username` header, if any
    - path_id: the `{id}` path parameter, if the route has one
    - user / todo: entities attached by successful checks
    """

    username: Optional[str] = None
    path_id: Optional[str] = None
    user: Optional[UserEntity] = None
    todo: Optional[TodoEntity] = None


Check = Callable[[Store, RequestContext], RequestContext]


# PUBLIC_INTERFACE
def require_user(store: Store, ctx: RequestContext) -> RequestContext:
    """Resolve the user named by the `username` header."""
    user = store.find_user_by_username(ctx.username)
    if user is None:
        logger.info("Rejected request: no user with username %r", ctx.username)
        raise NotFoundError(USER_NOT_FOUND)
    return replace(ctx, user=user)


# PUBLIC_INTERFACE
def require_todo_quota(store: Store, ctx: RequestContext) -> RequestContext:
    """Allow pro users, or users holding fewer todos than the store's quota."""
    user = ctx.user
    if user is None:
        raise NotFoundError(USER_NOT_FOUND)
    if not user["pro"] and len(user["todos"]) >= store.todo_quota:
        logger.info("Rejected request: user %s reached the quota of %d todos", user["username"], store.todo_quota)
        raise ForbiddenError(QUOTA_EXCEEDED)
    return ctx


# PUBLIC_INTERFACE
def require_todo(store: Store, ctx: RequestContext) -> RequestContext:
    """
    Resolve the todo named by the path id among the requesting user's todos.

    The id format is checked before any lookup. Attaches both the owner and
    the todo.
    """
    if not is_valid_uuid(ctx.path_id):
        logger.info("Rejected request: malformed todo id %r", ctx.path_id)
        raise InvalidInputError(INVALID_ID)

    user = store.find_user_by_username(ctx.username)
    if user is None:
        logger.info("Rejected request: no user with username %r", ctx.username)
        raise NotFoundError(USER_NOT_FOUND)

    todo = store.find_todo(ctx.username, ctx.path_id)
    if todo is None:
        logger.info("Rejected request: user %s has no todo %s", ctx.username, ctx.path_id)
        raise NotFoundError(TODO_NOT_FOUND)

    return replace(ctx, user=user, todo=todo)


# PUBLIC_INTERFACE
def require_user_by_id(store: Store, ctx: RequestContext) -> RequestContext:
    """Resolve the user named by the path id."""
    user = store.find_user_by_id(ctx.path_id)
    if user is None:
        logger.info("Rejected request: no user with id %r", ctx.path_id)
        raise NotFoundError(USER_NOT_FOUND)
    return replace(ctx, user=user)


# PUBLIC_INTERFACE
def run_checks(store: Store, ctx: RequestContext, checks: Iterable[Check]) -> RequestContext:
    """Apply checks in order, threading the context through. The first failure propagates."""
    for check in checks:
        ctx = check(store, ctx)
    return ctx
