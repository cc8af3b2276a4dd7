from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel

from expense_manager.schemas.expense import ExpenseResponse
from expense_manager.schemas.workflow import WorkflowSettingsResponse


class EmployeeDashboardResponse(BaseModel):
    """The caller's own expenses and running totals."""

    employee_id: str
    expenses: list[ExpenseResponse]
    total_submitted: int
    pending_amount: Decimal
    approved_amount: Decimal


class ManagerDashboardResponse(BaseModel):
    """Expenses waiting for review."""

    pending: list[ExpenseResponse]
    pending_count: int
    pending_amount: Decimal


class AdminDashboardResponse(BaseModel):
    """User counts and the current workflow settings."""

    total_users: int
    active_users: int
    managers: int
    employees: int
    admins: int
    workflow: WorkflowSettingsResponse
