# ruff: noqa: TC001
from __future__ import annotations

from fastapi import APIRouter

from expense_manager.api.deps import AdminDep, AuthDep
from expense_manager.schemas.workflow import UpdateWorkflowSettingsRequest, WorkflowSettingsResponse
from expense_manager.services import workflow as workflow_service
from expense_manager.store import StoreDep

workflow_router = APIRouter(prefix="/workflow-settings", tags=["workflow"])


@workflow_router.get("", response_model=WorkflowSettingsResponse)
async def get_workflow_settings(
    store: StoreDep,
    auth: AuthDep,
) -> WorkflowSettingsResponse:
    """Get the approval workflow settings."""
    settings = await workflow_service.get_workflow_settings(store)
    return workflow_service.build_workflow_response(settings)


@workflow_router.patch("", response_model=WorkflowSettingsResponse)
async def update_workflow_settings(
    payload: UpdateWorkflowSettingsRequest,
    store: StoreDep,
    auth: AdminDep,
) -> WorkflowSettingsResponse:
    """Update some or all workflow settings (admin only)."""
    settings = await workflow_service.update_workflow_settings(store, payload)
    return workflow_service.build_workflow_response(settings)
