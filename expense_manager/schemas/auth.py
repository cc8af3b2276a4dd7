from __future__ import annotations

from pydantic import BaseModel, Field

from expense_manager.models.enums import UserRole


class AuthContext(BaseModel):
    """Dev auth context extracted from request headers."""

    user_id: str | None = None
    role: UserRole = UserRole.EMPLOYEE


class LoginRequest(BaseModel):
    """Mock login: any credentials are accepted for the chosen role."""

    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)
    role: UserRole = UserRole.EMPLOYEE


class SignupRequest(BaseModel):
    """Mock signup form."""

    name: str = Field(min_length=1, max_length=200)
    email: str = Field(min_length=1, max_length=255)
    password: str
    confirm_password: str


class SessionResponse(BaseModel):
    """Result of a mock login or signup."""

    email: str
    name: str | None = None
    role: UserRole
    dashboard: str
