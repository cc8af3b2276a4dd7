# ruff: noqa: TC001
from __future__ import annotations

from fastapi import APIRouter

from expense_manager.schemas.auth import LoginRequest, SessionResponse, SignupRequest
from expense_manager.services import auth as auth_service

auth_router = APIRouter(prefix="/auth", tags=["auth"])


@auth_router.post("/login", response_model=SessionResponse)
async def login(payload: LoginRequest) -> SessionResponse:
    """Mock login: any email and password work for the selected role."""
    return await auth_service.login(payload)


@auth_router.post("/signup", response_model=SessionResponse)
async def signup(payload: SignupRequest) -> SessionResponse:
    """Mock signup: validates the form and signs in as an employee."""
    return await auth_service.signup(payload)
