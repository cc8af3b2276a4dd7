from __future__ import annotations

from typing import TYPE_CHECKING

from expense_manager.models import ExpenseStatus, UserRole, UserStatus
from expense_manager.schemas.dashboard import (
    AdminDashboardResponse,
    EmployeeDashboardResponse,
    ManagerDashboardResponse,
)
from expense_manager.services import expense as expense_service
from expense_manager.services import user as user_service
from expense_manager.services import workflow as workflow_service
from expense_manager.services.analytics import total_amount

if TYPE_CHECKING:
    from expense_manager.store import InMemoryStore


async def employee_dashboard(store: InMemoryStore, employee_id: str) -> EmployeeDashboardResponse:
    expenses = await expense_service.get_expenses_by_employee(store, employee_id)
    return EmployeeDashboardResponse(
        employee_id=employee_id,
        expenses=[expense_service.build_expense_response(e) for e in expenses],
        total_submitted=len(expenses),
        pending_amount=total_amount(e for e in expenses if e.status == ExpenseStatus.PENDING),
        approved_amount=total_amount(e for e in expenses if e.status == ExpenseStatus.APPROVED),
    )


async def manager_dashboard(store: InMemoryStore) -> ManagerDashboardResponse:
    pending = await expense_service.get_expenses_by_status(store, ExpenseStatus.PENDING)
    return ManagerDashboardResponse(
        pending=[expense_service.build_expense_response(e) for e in pending],
        pending_count=len(pending),
        pending_amount=total_amount(pending),
    )


async def admin_dashboard(store: InMemoryStore) -> AdminDashboardResponse:
    users = await user_service.get_all_users(store)
    settings = await workflow_service.get_workflow_settings(store)
    return AdminDashboardResponse(
        total_users=len(users),
        active_users=sum(1 for u in users if u.status == UserStatus.ACTIVE),
        managers=sum(1 for u in users if u.role == UserRole.MANAGER),
        employees=sum(1 for u in users if u.role == UserRole.EMPLOYEE),
        admins=sum(1 for u in users if u.role == UserRole.ADMIN),
        workflow=workflow_service.build_workflow_response(settings),
    )
