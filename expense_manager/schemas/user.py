# ruff: noqa: TC003
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from expense_manager.models.enums import UserRole, UserStatus


class CreateUserRequest(BaseModel):
    """Request body for adding a user (admin only)."""

    name: str = Field(min_length=1, max_length=200)
    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    role: UserRole = UserRole.EMPLOYEE
    status: UserStatus = UserStatus.ACTIVE


class UpdateUserStatusRequest(BaseModel):
    """Request body for activating or deactivating a user."""

    status: UserStatus


class UserResponse(BaseModel):
    """Response schema for a user."""

    id: str
    name: str
    email: str
    role: UserRole
    status: UserStatus
    created_at: datetime


class UserListResponse(BaseModel):
    """List of users."""

    items: list[UserResponse]
    total: int
