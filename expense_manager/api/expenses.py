# ruff: noqa: B008, TC001, TC003
from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from expense_manager.api.deps import AuthDep, ReviewerDep
from expense_manager.exceptions import AppError
from expense_manager.models.enums import ExpenseSortKey, ExpenseStatus, SortOrder
from expense_manager.schemas.auth import AuthContext
from expense_manager.schemas.expense import (
    CreateExpenseRequest,
    ExpenseListResponse,
    ExpenseQuery,
    ExpenseResponse,
    ReviewExpenseRequest,
)
from expense_manager.services import expense as expense_service
from expense_manager.store import InMemoryStore, StoreDep

expenses_router = APIRouter(prefix="/expenses", tags=["expenses"])
employee_expenses_router = APIRouter(prefix="/employees/{employee_id}/expenses", tags=["expenses"])


def _expense_query(
    status_filter: ExpenseStatus | None = Query(default=None, alias="status"),
    category: str | None = Query(default=None),
    employee_id: str | None = Query(default=None),
    date_from: date | None = Query(default=None),
    date_to: date | None = Query(default=None),
    sort_by: ExpenseSortKey = Query(default=ExpenseSortKey.SUBMITTED_AT),
    order: SortOrder = Query(default=SortOrder.DESC),
    offset: int = Query(default=0, ge=0),
    limit: int = Query(default=50, ge=1, le=100),
) -> ExpenseQuery:
    try:
        return ExpenseQuery(
            status=status_filter,
            category=category,
            employee_id=employee_id,
            date_from=date_from,
            date_to=date_to,
            sort_by=sort_by,
            order=order,
            offset=offset,
            limit=limit,
        )
    except ValidationError as exc:
        raise RequestValidationError(exc.errors()) from None


def _reviewer_name(store: InMemoryStore, auth: AuthContext, payload: ReviewExpenseRequest) -> str:
    """Use the name from the body, else the display name of the calling user."""
    if payload.reviewed_by:
        return payload.reviewed_by
    index = store.find_user_index(auth.user_id) if auth.user_id else None
    if index is None:
        raise AppError("reviewed_by is required unless X-User-Id names a known user", status_code=400)
    return store.users[index].name


@expenses_router.get("", response_model=ExpenseListResponse)
async def list_expenses(
    store: StoreDep,
    auth: ReviewerDep,
    query: ExpenseQuery = Depends(_expense_query),
) -> ExpenseListResponse:
    """List expenses with filters and sorting (manager or admin)."""
    return await expense_service.query_expenses(store, query)


@expenses_router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def create_expense(
    payload: CreateExpenseRequest,
    store: StoreDep,
    auth: AuthDep,
) -> ExpenseResponse:
    """Submit a new expense."""
    expense = await expense_service.create_expense(store, payload)
    return expense_service.build_expense_response(expense)


@expenses_router.get("/{expense_id}", response_model=ExpenseResponse)
async def get_expense(
    expense_id: str,
    store: StoreDep,
    auth: AuthDep,
) -> ExpenseResponse:
    """Get a single expense."""
    expense = await expense_service.get_expense(store, expense_id)
    return expense_service.build_expense_response(expense)


@expenses_router.post("/{expense_id}/approve", response_model=ExpenseResponse)
async def approve_expense(
    expense_id: str,
    payload: ReviewExpenseRequest,
    store: StoreDep,
    auth: ReviewerDep,
) -> ExpenseResponse:
    """Approve a pending expense (manager or admin)."""
    expense = await expense_service.approve_expense(store, expense_id, _reviewer_name(store, auth, payload))
    return expense_service.build_expense_response(expense)


@expenses_router.post("/{expense_id}/reject", response_model=ExpenseResponse)
async def reject_expense(
    expense_id: str,
    payload: ReviewExpenseRequest,
    store: StoreDep,
    auth: ReviewerDep,
) -> ExpenseResponse:
    """Reject a pending expense (manager or admin)."""
    expense = await expense_service.reject_expense(store, expense_id, _reviewer_name(store, auth, payload))
    return expense_service.build_expense_response(expense)


@employee_expenses_router.get("", response_model=ExpenseListResponse)
async def list_employee_expenses(
    employee_id: str,
    store: StoreDep,
    auth: AuthDep,
) -> ExpenseListResponse:
    """List the expenses submitted by one employee."""
    expenses = await expense_service.get_expenses_by_employee(store, employee_id)
    items = [expense_service.build_expense_response(e) for e in expenses]
    return ExpenseListResponse(items=items, total=len(items))
