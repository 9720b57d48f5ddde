"""User list endpoints backed by the in-memory store."""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from sample_api.api.dependencies import get_user_store
from sample_api.exceptions import NotFoundError
from sample_api.services.user_store import User, UserStore

router = APIRouter(tags=["users"])


class CreateUserRequest(BaseModel):
    """Both fields are checked for presence by the store, not by the schema."""

    name: Any = None
    email: Any = None


class UserListResponse(BaseModel):
    success: bool = True
    count: int
    data: list[User]


class UserResponse(BaseModel):
    success: bool = True
    data: User


@router.get("/users", response_model=UserListResponse)
async def list_users(store: UserStore = Depends(get_user_store)) -> UserListResponse:
    users = store.list_users()
    return UserListResponse(count=len(users), data=users)


@router.post("/users", response_model=UserResponse, status_code=201)
async def create_user(
    payload: Optional[CreateUserRequest] = None,
    store: UserStore = Depends(get_user_store),
) -> UserResponse:
    payload = payload or CreateUserRequest()
    return UserResponse(data=store.create(payload.name, payload.email))


@router.get("/users/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, store: UserStore = Depends(get_user_store)) -> UserResponse:
    try:
        numeric_id = int(user_id)
    except ValueError:
        raise NotFoundError("User not found") from None
    return UserResponse(data=store.get(numeric_id))
