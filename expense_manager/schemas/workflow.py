# ruff: noqa: TC003
from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from expense_manager.models.enums import ApprovalRequirement, UserRole


class UpdateWorkflowSettingsRequest(BaseModel):
    """Partial update of workflow settings; omitted fields keep their value."""

    auto_approve_threshold: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    require_manager_approval: ApprovalRequirement | None = None
    approval_sequence: list[UserRole] | None = Field(default=None, max_length=10)


class WorkflowSettingsResponse(BaseModel):
    """Response schema for the workflow settings singleton."""

    auto_approve_threshold: Decimal
    require_manager_approval: ApprovalRequirement
    approval_sequence: list[UserRole]
