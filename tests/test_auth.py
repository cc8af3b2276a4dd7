"""Tests for mock login and signup."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from httpx import AsyncClient


@pytest.mark.parametrize("role", ["employee", "manager", "admin"])
async def test_login_accepts_any_role(async_client: AsyncClient, role: str) -> None:
    resp = await async_client.post(
        "/auth/login",
        json={"email": "anyone@example.com", "password": "whatever", "role": role},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["role"] == role
    assert data["email"] == "anyone@example.com"
    assert data["dashboard"] == f"/dashboards/{role}"


async def test_login_defaults_to_employee(async_client: AsyncClient) -> None:
    resp = await async_client.post("/auth/login", json={"email": "a@b.c", "password": "x"})
    assert resp.json()["role"] == "employee"


async def test_login_unknown_role(async_client: AsyncClient) -> None:
    resp = await async_client.post("/auth/login", json={"email": "a@b.c", "password": "x", "role": "owner"})
    assert resp.status_code == 422


async def test_signup_signs_in_as_employee(async_client: AsyncClient) -> None:
    resp = await async_client.post(
        "/auth/signup",
        json={"name": "New Hire", "email": "new@company.com", "password": "secret1", "confirm_password": "secret1"},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["role"] == "employee"
    assert data["name"] == "New Hire"
    assert data["dashboard"] == "/dashboards/employee"


async def test_signup_password_mismatch(async_client: AsyncClient) -> None:
    resp = await async_client.post(
        "/auth/signup",
        json={"name": "New Hire", "email": "new@company.com", "password": "secret1", "confirm_password": "secret2"},
    )
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Passwords do not match"


async def test_signup_short_password(async_client: AsyncClient) -> None:
    resp = await async_client.post(
        "/auth/signup",
        json={"name": "New Hire", "email": "new@company.com", "password": "abc", "confirm_password": "abc"},
    )
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Password must be at least 6 characters"
