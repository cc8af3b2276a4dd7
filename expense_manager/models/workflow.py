from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from expense_manager.models.enums import ApprovalRequirement, UserRole


class WorkflowSettings(BaseModel):
    """Singleton approval policy. Stored and returned, never applied to reviews."""

    auto_approve_threshold: Decimal = Field(default=Decimal("100.00"), ge=0)
    require_manager_approval: ApprovalRequirement = ApprovalRequirement.ALWAYS
    approval_sequence: list[UserRole] = Field(default_factory=lambda: [UserRole.MANAGER, UserRole.ADMIN])
