from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, status

from ..errors import InvalidInputError
from ..models import new_user
from ..schemas import ErrorOut, UserCreate, UserOut
from ..store import Store, get_store
from ..validation import RequestContext, require_user_by_id, run_checks

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/users",
    tags=["users"],
)

_USER_BY_ID_CHECKS = (require_user_by_id,)


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[UserOut],
    summary="List Users",
    description="Return every user with all of its todos.",
)
def list_users(store: Store = Depends(get_store)) -> List[UserOut]:
    """
    List all users.
    """
    with store.lock:
        return [UserOut(**user) for user in store.users]  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.get(
    "/{user_id}",
    response_model=UserOut,
    summary="Get User",
    description="Get a single user by ID.",
    responses={
        200: {"description": "User found"},
        404: {"model": ErrorOut, "description": "User not found"},
    },
)
def get_user(user_id: str, store: Store = Depends(get_store)) -> UserOut:
    """
    Retrieve a single user by its ID.
    """
    with store.lock:
        ctx = run_checks(store, RequestContext(path_id=user_id), _USER_BY_ID_CHECKS)
        return UserOut(**ctx.user)  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=UserOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create User",
    description="Create a user account. Usernames must be unique.",
    responses={
        201: {"description": "User created successfully"},
        400: {"model": ErrorOut, "description": "Username already exists"},
    },
)
def create_user(payload: UserCreate, store: Store = Depends(get_store)) -> UserOut:
    """
    Create a new, non-pro user with no todos.
    """
    with store.lock:
        if store.user_exists_by_username(payload.username):
            logger.info("Rejected user creation: username %r already taken", payload.username)
            raise InvalidInputError("Username already exists")
        user = store.add_user(new_user(payload.name, payload.username))
        return UserOut(**user)  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.patch(
    "/{user_id}/pro",
    response_model=UserOut,
    summary="Activate Pro Plan",
    description="Switch a user to the pro plan, lifting the todo quota.",
    responses={
        200: {"description": "Pro plan activated"},
        400: {"model": ErrorOut, "description": "Pro plan is already activated"},
        404: {"model": ErrorOut, "description": "User not found"},
    },
)
def activate_pro(user_id: str, store: Store = Depends(get_store)) -> UserOut:
    """
    Activate the pro plan. There is no way back to the free plan.
    """
    with store.lock:
        ctx = run_checks(store, RequestContext(path_id=user_id), _USER_BY_ID_CHECKS)
        user = ctx.user
        if user["pro"]:
            raise InvalidInputError("Pro plan is already activated.")
        user["pro"] = True
        logger.info("Activated pro plan for user %s", user["username"])
        return UserOut(**user)  # type: ignore[arg-type]
