# File: users_api/api/routes_users.py

"""
CRUD endpoints for the users table.

Each route makes exactly one store call. Store failures propagate as
``StorageError`` (500) and zero-row matches as ``UserNotFound`` (404); both
are rendered by the handlers in ``users_api.core.errors``.
"""

from fastapi import APIRouter, Depends

from users_api.api.deps import get_store, get_user_id, read_user_payload
from users_api.core.errors import UserNotFound
from users_api.schemas.user import (
    ErrorBody,
    Message,
    UserCreated,
    UserEnvelope,
    UserList,
    UserPayload,
    UserRead,
)
from users_api.services.user_store import UserStore

router = APIRouter()

STORAGE_FAILURE = {500: {"model": ErrorBody, "description": "Statement failed"}}
NOT_FOUND = {404: {"model": ErrorBody, "description": "User not found"}}


@router.post(
    "",
    response_model=UserCreated,
    responses=STORAGE_FAILURE,
    summary="Create a user",
)
def create_user(
    payload: UserPayload = Depends(read_user_payload),
    store: UserStore = Depends(get_store),
):
    new_id = store.insert(payload.name, payload.email, payload.address)
    return UserCreated(id=new_id, **payload.model_dump())


@router.get(
    "",
    response_model=UserList,
    responses=STORAGE_FAILURE,
    summary="List all users",
)
def list_users(store: UserStore = Depends(get_store)):
    users = store.select_all()
    return UserList(users=[UserRead.model_validate(u) for u in users])


@router.get(
    "/{user_id}",
    response_model=UserEnvelope,
    responses={**NOT_FOUND, **STORAGE_FAILURE},
    summary="Get a user by id",
)
def get_user(
    user_id: int = Depends(get_user_id),
    store: UserStore = Depends(get_store),
):
    user = store.select_by_id(user_id)
    if user is None:
        raise UserNotFound()
    return UserEnvelope(user=UserRead.model_validate(user))


@router.put(
    "/{user_id}",
    response_model=Message,
    responses={**NOT_FOUND, **STORAGE_FAILURE},
    summary="Replace a user's name, email and address",
)
def update_user(
    user_id: int = Depends(get_user_id),
    payload: UserPayload = Depends(read_user_payload),
    store: UserStore = Depends(get_store),
):
    changed = store.update_by_id(user_id, payload.name, payload.email, payload.address)
    if changed == 0:
        raise UserNotFound()
    return Message(message="User updated successfully")


@router.delete(
    "/{user_id}",
    response_model=Message,
    responses={**NOT_FOUND, **STORAGE_FAILURE},
    summary="Delete a user",
)
def delete_user(
    user_id: int = Depends(get_user_id),
    store: UserStore = Depends(get_store),
):
    if store.delete_by_id(user_id) == 0:
        raise UserNotFound()
    return Message(message="User deleted successfully")
