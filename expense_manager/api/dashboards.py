from __future__ import annotations

from fastapi import APIRouter

from expense_manager.api.deps import AdminDep, CurrentUserIdDep, ManagerDep
from expense_manager.schemas.dashboard import (
    AdminDashboardResponse,
    EmployeeDashboardResponse,
    ManagerDashboardResponse,
)
from expense_manager.services import dashboard as dashboard_service
from expense_manager.store import StoreDep

dashboards_router = APIRouter(prefix="/dashboards", tags=["dashboards"])


@dashboards_router.get("/employee", response_model=EmployeeDashboardResponse)
async def employee_dashboard(
    store: StoreDep,
    user_id: CurrentUserIdDep,
) -> EmployeeDashboardResponse:
    """The caller's submitted expenses and totals."""
    return await dashboard_service.employee_dashboard(store, user_id)


@dashboards_router.get("/manager", response_model=ManagerDashboardResponse)
async def manager_dashboard(
    store: StoreDep,
    auth: ManagerDep,
) -> ManagerDashboardResponse:
    """Pending expenses awaiting review (manager only)."""
    return await dashboard_service.manager_dashboard(store)


@dashboards_router.get("/admin", response_model=AdminDashboardResponse)
async def admin_dashboard(
    store: StoreDep,
    auth: AdminDep,
) -> AdminDashboardResponse:
    """User counts and workflow settings (admin only)."""
    return await dashboard_service.admin_dashboard(store)
