"""Tests for the workflow settings singleton."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from expense_manager.models import ApprovalRequirement, ExpenseStatus
from expense_manager.schemas.workflow import UpdateWorkflowSettingsRequest
from expense_manager.services import expense as expense_service
from expense_manager.services import workflow as workflow_service

if TYPE_CHECKING:
    from httpx import AsyncClient

    from expense_manager.store import InMemoryStore

ADMIN_HEADERS = {"X-Role": "admin"}
MANAGER_HEADERS = {"X-Role": "manager"}
URL = "/workflow-settings"


async def test_get_workflow_settings(async_client: AsyncClient) -> None:
    resp = await async_client.get(URL, headers=MANAGER_HEADERS)
    assert resp.status_code == 200
    assert resp.json() == {
        "auto_approve_threshold": "100.00",
        "require_manager_approval": "always",
        "approval_sequence": ["manager", "admin"],
    }


async def test_partial_update_keeps_other_fields(async_client: AsyncClient) -> None:
    resp = await async_client.patch(URL, json={"auto_approve_threshold": "250.00"}, headers=ADMIN_HEADERS)
    assert resp.status_code == 200
    data = resp.json()
    assert data["auto_approve_threshold"] == "250.00"
    assert data["require_manager_approval"] == "always"
    assert data["approval_sequence"] == ["manager", "admin"]


async def test_update_mode_and_sequence(async_client: AsyncClient) -> None:
    resp = await async_client.patch(
        URL,
        json={"require_manager_approval": "threshold", "approval_sequence": ["admin"]},
        headers=ADMIN_HEADERS,
    )
    data = resp.json()
    assert data["require_manager_approval"] == "threshold"
    assert data["approval_sequence"] == ["admin"]

    again = await async_client.get(URL, headers=ADMIN_HEADERS)
    assert again.json() == data


async def test_update_rejects_bad_values(async_client: AsyncClient) -> None:
    for body in (
        {"auto_approve_threshold": "-1"},
        {"require_manager_approval": "sometimes"},
        {"approval_sequence": ["cfo"]},
    ):
        resp = await async_client.patch(URL, json=body, headers=ADMIN_HEADERS)
        assert resp.status_code == 422, body


async def test_update_admin_only(async_client: AsyncClient) -> None:
    resp = await async_client.patch(URL, json={"auto_approve_threshold": "5"}, headers=MANAGER_HEADERS)
    assert resp.status_code == 403


async def test_get_returns_copy(store: InMemoryStore) -> None:
    settings = await workflow_service.get_workflow_settings(store)
    settings.approval_sequence.clear()
    assert len(store.workflow.approval_sequence) == 2


async def test_settings_do_not_affect_reviews(store: InMemoryStore) -> None:
    """Reviews succeed regardless of the configured approval policy."""
    await workflow_service.update_workflow_settings(
        store,
        UpdateWorkflowSettingsRequest(
            auto_approve_threshold=Decimal("1000"),
            require_manager_approval=ApprovalRequirement.NEVER,
            approval_sequence=[],
        ),
    )
    assert store.workflow.approval_sequence == []
    expense = await expense_service.reject_expense(store, "exp-001", "Emily Brown")
    assert expense.status == ExpenseStatus.REJECTED
