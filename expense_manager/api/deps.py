# ruff: noqa: B008
from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Header

from expense_manager.exceptions import AppError, ForbiddenError
from expense_manager.models import UserRole
from expense_manager.schemas.auth import AuthContext


async def get_auth_context(
    x_role: UserRole = Header(default=UserRole.EMPLOYEE),
    x_user_id: str | None = Header(default=None),
) -> AuthContext:
    """Extract dev auth context from request headers."""
    return AuthContext(user_id=x_user_id, role=x_role)


AuthDep = Annotated[AuthContext, Depends(get_auth_context)]


async def require_admin(
    auth: AuthDep,
) -> AuthContext:
    """Require admin role for the request."""
    if auth.role != UserRole.ADMIN:
        raise ForbiddenError("Admin access required")
    return auth


AdminDep = Annotated[AuthContext, Depends(require_admin)]


async def require_reviewer(
    auth: AuthDep,
) -> AuthContext:
    """Require manager or admin role for the request."""
    if auth.role not in (UserRole.MANAGER, UserRole.ADMIN):
        raise ForbiddenError("Manager or admin access required")
    return auth


ReviewerDep = Annotated[AuthContext, Depends(require_reviewer)]


async def require_manager(
    auth: AuthDep,
) -> AuthContext:
    """Require manager role for the request."""
    if auth.role != UserRole.MANAGER:
        raise ForbiddenError("Manager access required")
    return auth


ManagerDep = Annotated[AuthContext, Depends(require_manager)]


async def require_user_id(
    auth: AuthDep,
) -> str:
    """Return the caller's user id, which some views need to scope results."""
    if not auth.user_id:
        raise AppError("X-User-Id header required", status_code=400)
    return auth.user_id


CurrentUserIdDep = Annotated[str, Depends(require_user_id)]


def ensure_self_or_admin(auth: AuthContext, user_id: str) -> None:
    """Allow a user to act on their own record; admins may act on anyone's."""
    if auth.role != UserRole.ADMIN and auth.user_id != user_id:
        raise ForbiddenError("You can only access your own profile")
