from __future__ import annotations

from pydantic import BaseModel, Field

from expense_manager.models.enums import UserRole


class UpdateProfileRequest(BaseModel):
    """Editable profile fields. Role cannot be changed here."""

    name: str | None = Field(default=None, min_length=1, max_length=200)
    email: str | None = Field(default=None, min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    phone: str | None = Field(default=None, max_length=50)
    department: str | None = Field(default=None, max_length=100)
    manager: str | None = Field(default=None, max_length=200)
    company: str | None = Field(default=None, max_length=200)
    currency: str | None = Field(default=None, min_length=3, max_length=3)


class ProfileResponse(BaseModel):
    """A user's record merged with their profile details."""

    id: str
    name: str
    email: str
    role: UserRole
    phone: str | None
    department: str | None
    manager: str | None
    company: str | None
    currency: str
