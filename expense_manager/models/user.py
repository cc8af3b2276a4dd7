from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from expense_manager.models.base import new_id, now_utc
from expense_manager.models.enums import UserRole, UserStatus


class User(BaseModel):
    """An account known to the mock store."""

    id: str = Field(default_factory=lambda: new_id("user"))
    name: str
    email: str
    role: UserRole = UserRole.EMPLOYEE
    status: UserStatus = UserStatus.ACTIVE
    created_at: datetime = Field(default_factory=now_utc)


class UserProfile(BaseModel):
    """Contact and organisation details kept alongside a user."""

    user_id: str
    phone: str | None = None
    department: str | None = None
    manager: str | None = None
    company: str | None = None
    currency: str = "USD"
