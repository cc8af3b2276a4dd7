"""Integration tests for user management: list, create, status changes, delete."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import pytest

from expense_manager.exceptions import ConflictError, NotFoundError
from expense_manager.fixtures import DAVID_ID, JOHN_ID
from expense_manager.models import UserRole, UserStatus
from expense_manager.schemas.user import CreateUserRequest
from expense_manager.services import user as user_service

if TYPE_CHECKING:
    from httpx import AsyncClient

    from expense_manager.store import InMemoryStore

ADMIN_HEADERS = {"X-Role": "admin"}
MANAGER_HEADERS = {"X-Role": "manager"}
EMPLOYEE_HEADERS = {"X-Role": "employee", "X-User-Id": JOHN_ID}
BASE_URL = "/users"


def _user_payload(
    name: str = "Priya Patel",
    email: str = "priya@company.com",
    role: str = "employee",
) -> dict:
    return {"name": name, "email": email, "role": role}


# ---------------------------------------------------------------------------
# List / get
# ---------------------------------------------------------------------------


async def test_list_users(async_client: AsyncClient) -> None:
    resp = await async_client.get(BASE_URL, headers=ADMIN_HEADERS)
    assert resp.status_code == 200
    data = resp.json()
    assert data["total"] == 5
    assert [u["id"] for u in data["items"]] == ["user-001", "user-002", "user-003", "user-004", "user-005"]


async def test_list_users_filters(async_client: AsyncClient) -> None:
    resp = await async_client.get(f"{BASE_URL}?role=employee&status=active", headers=ADMIN_HEADERS)
    data = resp.json()
    assert data["total"] == 2
    assert {u["name"] for u in data["items"]} == {"John Smith", "Mike Davis"}


@pytest.mark.parametrize("headers", [MANAGER_HEADERS, EMPLOYEE_HEADERS])
async def test_list_users_admin_only(async_client: AsyncClient, headers: dict) -> None:
    resp = await async_client.get(BASE_URL, headers=headers)
    assert resp.status_code == 403
    assert resp.json()["detail"] == "Admin access required"


async def test_get_user(async_client: AsyncClient) -> None:
    resp = await async_client.get(f"{BASE_URL}/{JOHN_ID}", headers=EMPLOYEE_HEADERS)
    assert resp.status_code == 200
    data = resp.json()
    assert data["email"] == "john@company.com"
    assert data["role"] == "employee"
    assert data["status"] == "active"


async def test_get_user_not_found(async_client: AsyncClient) -> None:
    resp = await async_client.get(f"{BASE_URL}/user-999", headers=EMPLOYEE_HEADERS)
    assert resp.status_code == 404


async def test_invalid_role_header(async_client: AsyncClient) -> None:
    resp = await async_client.get(BASE_URL, headers={"X-Role": "superuser"})
    assert resp.status_code == 422


# ---------------------------------------------------------------------------
# Create
# ---------------------------------------------------------------------------


async def test_create_user(async_client: AsyncClient) -> None:
    resp = await async_client.post(BASE_URL, json=_user_payload(role="manager"), headers=ADMIN_HEADERS)
    assert resp.status_code == 201
    data = resp.json()
    assert data["id"].startswith("user-")
    assert data["name"] == "Priya Patel"
    assert data["role"] == "manager"
    assert data["status"] == "active"
    assert data["created_at"] is not None


async def test_create_user_appended_last(async_client: AsyncClient, store: InMemoryStore) -> None:
    resp = await async_client.post(BASE_URL, json=_user_payload(), headers=ADMIN_HEADERS)
    assert store.users[-1].id == resp.json()["id"]
    assert resp.json()["id"] in store.profiles


async def test_create_user_duplicate_email(async_client: AsyncClient, store: InMemoryStore) -> None:
    resp = await async_client.post(BASE_URL, json=_user_payload(email="john@company.com"), headers=ADMIN_HEADERS)
    assert resp.status_code == 409
    assert resp.json()["detail"] == "Email already exists"
    assert len(store.users) == 5


async def test_create_user_invalid_email(async_client: AsyncClient) -> None:
    resp = await async_client.post(BASE_URL, json=_user_payload(email="not-an-email"), headers=ADMIN_HEADERS)
    assert resp.status_code == 422


async def test_create_user_admin_only(async_client: AsyncClient) -> None:
    resp = await async_client.post(BASE_URL, json=_user_payload(), headers=MANAGER_HEADERS)
    assert resp.status_code == 403


# ---------------------------------------------------------------------------
# Status / delete
# ---------------------------------------------------------------------------


async def test_update_user_status(async_client: AsyncClient) -> None:
    resp = await async_client.patch(f"{BASE_URL}/{DAVID_ID}/status", json={"status": "active"}, headers=ADMIN_HEADERS)
    assert resp.status_code == 200
    assert resp.json()["status"] == "active"

    resp = await async_client.patch(f"{BASE_URL}/{DAVID_ID}/status", json={"status": "inactive"}, headers=ADMIN_HEADERS)
    assert resp.json()["status"] == "inactive"


async def test_update_user_status_not_found(async_client: AsyncClient) -> None:
    resp = await async_client.patch(f"{BASE_URL}/user-999/status", json={"status": "active"}, headers=ADMIN_HEADERS)
    assert resp.status_code == 404
    assert resp.json()["detail"] == "User not found"


async def test_delete_user(async_client: AsyncClient, store: InMemoryStore) -> None:
    resp = await async_client.delete(f"{BASE_URL}/{DAVID_ID}", headers=ADMIN_HEADERS)
    assert resp.status_code == 204
    assert store.find_user_index(DAVID_ID) is None
    assert DAVID_ID not in store.profiles
    # Their expenses stay behind.
    assert any(e.employee_id == DAVID_ID for e in store.expenses)

    resp = await async_client.get(f"{BASE_URL}/{DAVID_ID}", headers=ADMIN_HEADERS)
    assert resp.status_code == 404


async def test_delete_user_twice(async_client: AsyncClient) -> None:
    assert (await async_client.delete(f"{BASE_URL}/{DAVID_ID}", headers=ADMIN_HEADERS)).status_code == 204
    resp = await async_client.delete(f"{BASE_URL}/{DAVID_ID}", headers=ADMIN_HEADERS)
    assert resp.status_code == 404


# ---------------------------------------------------------------------------
# Service layer
# ---------------------------------------------------------------------------


async def test_service_get_user_by_id_missing(store: InMemoryStore) -> None:
    assert await user_service.get_user_by_id(store, "user-999") is None


async def test_service_email_uniqueness_is_exact(store: InMemoryStore) -> None:
    with pytest.raises(ConflictError):
        await user_service.create_user(store, CreateUserRequest(name="Dup", email="sarah@company.com"))
    user = await user_service.create_user(store, CreateUserRequest(name="Other", email="Sarah@company.com"))
    assert user.role == UserRole.EMPLOYEE


async def test_service_update_status_missing(store: InMemoryStore) -> None:
    with pytest.raises(NotFoundError):
        await user_service.update_user_status(store, "user-999", UserStatus.INACTIVE)


@pytest.mark.usefixtures("fast_latency")
async def test_service_overlapping_creates_keep_email_unique(store: InMemoryStore) -> None:
    payload = CreateUserRequest(name="Priya Patel", email="priya@company.com")
    results = await asyncio.gather(
        user_service.create_user(store, payload),
        user_service.create_user(store, payload),
        return_exceptions=True,
    )
    assert sum(isinstance(r, ConflictError) for r in results) == 1
    assert [u.email for u in store.users].count("priya@company.com") == 1
