from fastapi import APIRouter

from expense_manager.api.analytics import analytics_router
from expense_manager.api.auth import auth_router
from expense_manager.api.dashboards import dashboards_router
from expense_manager.api.expenses import employee_expenses_router, expenses_router
from expense_manager.api.users import users_router
from expense_manager.api.workflow import workflow_router

api_router = APIRouter()
api_router.include_router(auth_router)
api_router.include_router(expenses_router)
api_router.include_router(employee_expenses_router)
api_router.include_router(users_router)
api_router.include_router(workflow_router)
api_router.include_router(analytics_router)
api_router.include_router(dashboards_router)
