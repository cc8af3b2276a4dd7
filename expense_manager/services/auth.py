"""Mock login and signup. No credential is checked or stored."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from expense_manager.exceptions import AppError
from expense_manager.models import UserRole
from expense_manager.schemas.auth import SessionResponse
from expense_manager.services.latency import simulate_latency

if TYPE_CHECKING:
    from expense_manager.schemas.auth import LoginRequest, SignupRequest

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


def dashboard_for(role: UserRole) -> str:
    """Path of the dashboard a role lands on after login."""
    return f"/dashboards/{role.value}"


async def login(payload: LoginRequest) -> SessionResponse:
    """Accept any credentials and open a session for the selected role."""
    await simulate_latency("login")
    logger.info("Login as %s", payload.role.value)
    return SessionResponse(email=payload.email, role=payload.role, dashboard=dashboard_for(payload.role))


async def signup(payload: SignupRequest) -> SessionResponse:
    """Validate the signup form and open an employee session."""
    if payload.password != payload.confirm_password:
        raise AppError("Passwords do not match", status_code=400)
    if len(payload.password) < MIN_PASSWORD_LENGTH:
        raise AppError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters", status_code=400)

    await simulate_latency("signup")
    logger.info("Signup for %s", payload.email)
    return SessionResponse(
        email=payload.email,
        name=payload.name,
        role=UserRole.EMPLOYEE,
        dashboard=dashboard_for(UserRole.EMPLOYEE),
    )
