# ruff: noqa: TC001
from __future__ import annotations

from fastapi import APIRouter, Query, status

from expense_manager.api.deps import AdminDep, AuthDep, ensure_self_or_admin
from expense_manager.exceptions import NotFoundError
from expense_manager.models.enums import UserRole, UserStatus
from expense_manager.schemas.profile import ProfileResponse, UpdateProfileRequest
from expense_manager.schemas.user import (
    CreateUserRequest,
    UpdateUserStatusRequest,
    UserListResponse,
    UserResponse,
)
from expense_manager.services import profile as profile_service
from expense_manager.services import user as user_service
from expense_manager.store import StoreDep

users_router = APIRouter(prefix="/users", tags=["users"])


@users_router.get("", response_model=UserListResponse)
async def list_users(
    store: StoreDep,
    auth: AdminDep,
    role: UserRole | None = Query(default=None),
    status_filter: UserStatus | None = Query(default=None, alias="status"),
) -> UserListResponse:
    """List users, optionally filtered by role and status (admin only)."""
    users = await user_service.get_all_users(store)
    items = [
        user_service.build_user_response(u)
        for u in users
        if (role is None or u.role == role) and (status_filter is None or u.status == status_filter)
    ]
    return UserListResponse(items=items, total=len(items))


@users_router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: CreateUserRequest,
    store: StoreDep,
    auth: AdminDep,
) -> UserResponse:
    """Add a user (admin only)."""
    user = await user_service.create_user(store, payload)
    return user_service.build_user_response(user)


@users_router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    store: StoreDep,
    auth: AuthDep,
) -> UserResponse:
    """Get a single user."""
    user = await user_service.get_user_by_id(store, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user_service.build_user_response(user)


@users_router.patch("/{user_id}/status", response_model=UserResponse)
async def update_user_status(
    user_id: str,
    payload: UpdateUserStatusRequest,
    store: StoreDep,
    auth: AdminDep,
) -> UserResponse:
    """Activate or deactivate a user (admin only)."""
    user = await user_service.update_user_status(store, user_id, payload.status)
    return user_service.build_user_response(user)


@users_router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: str,
    store: StoreDep,
    auth: AdminDep,
) -> None:
    """Delete a user (admin only)."""
    await user_service.delete_user(store, user_id)


@users_router.get("/{user_id}/profile", response_model=ProfileResponse)
async def get_profile(
    user_id: str,
    store: StoreDep,
    auth: AuthDep,
) -> ProfileResponse:
    """Get a user's profile (self or admin)."""
    ensure_self_or_admin(auth, user_id)
    profile = await profile_service.get_user_profile(store, user_id)
    if profile is None:
        raise NotFoundError("User not found")
    return profile


@users_router.patch("/{user_id}/profile", response_model=ProfileResponse)
async def update_profile(
    user_id: str,
    payload: UpdateProfileRequest,
    store: StoreDep,
    auth: AuthDep,
) -> ProfileResponse:
    """Edit a user's profile (self or admin)."""
    ensure_self_or_admin(auth, user_id)
    return await profile_service.update_user_profile(store, user_id, payload)
