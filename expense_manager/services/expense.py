from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from expense_manager.exceptions import AppError, NotFoundError
from expense_manager.models import Expense, ExpenseStatus, now_utc
from expense_manager.schemas.expense import ExpenseListResponse, ExpenseResponse
from expense_manager.services.filtering import apply_query
from expense_manager.services.latency import simulate_latency

if TYPE_CHECKING:
    from expense_manager.schemas.expense import CreateExpenseRequest, ExpenseQuery
    from expense_manager.store import InMemoryStore

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def build_expense_response(expense: Expense) -> ExpenseResponse:
    """Map an expense record to its response schema."""
    return ExpenseResponse(
        id=expense.id,
        employee_id=expense.employee_id,
        employee_name=expense.employee_name,
        amount=expense.amount,
        category=expense.category,
        description=expense.description,
        date=expense.date,
        status=expense.status,
        submitted_at=expense.submitted_at,
        reviewed_at=expense.reviewed_at,
        reviewed_by=expense.reviewed_by,
    )


def _get_expense_or_404(store: InMemoryStore, expense_id: str) -> tuple[int, Expense]:
    index = store.find_expense_index(expense_id)
    if index is None:
        raise NotFoundError("Expense not found")
    return index, store.expenses[index]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


async def get_all_expenses(store: InMemoryStore) -> list[Expense]:
    """Return every expense, newest submission first."""
    await simulate_latency("get_all_expenses")
    return list(store.expenses)


async def get_expenses_by_employee(store: InMemoryStore, employee_id: str) -> list[Expense]:
    """Return the expenses submitted by one employee."""
    await simulate_latency("get_expenses_by_employee")
    return [e for e in store.expenses if e.employee_id == employee_id]


async def get_expenses_by_status(store: InMemoryStore, status: ExpenseStatus) -> list[Expense]:
    """Return the expenses currently in ``status``."""
    await simulate_latency("get_expenses_by_status")
    return [e for e in store.expenses if e.status == status]


async def get_expense(store: InMemoryStore, expense_id: str) -> Expense:
    """Return one expense. Raises 404 if not found."""
    await simulate_latency("get_expense")
    _, expense = _get_expense_or_404(store, expense_id)
    return expense


async def query_expenses(store: InMemoryStore, query: ExpenseQuery) -> ExpenseListResponse:
    """List expenses filtered by status, category, employee and date range, then sorted."""
    await simulate_latency("query_expenses")
    page, total = apply_query(store.expenses, query)
    return ExpenseListResponse(items=[build_expense_response(e) for e in page], total=total)


async def create_expense(store: InMemoryStore, payload: CreateExpenseRequest) -> Expense:
    """Submit a new expense in PENDING state."""
    await simulate_latency("create_expense")
    expense = Expense(
        employee_id=payload.employee_id,
        employee_name=payload.employee_name,
        amount=payload.amount,
        category=payload.category,
        description=payload.description,
        date=payload.date,
        status=ExpenseStatus.PENDING,
        submitted_at=now_utc(),
    )
    store.expenses.insert(0, expense)
    logger.info("Expense %s submitted by %s for %s", expense.id, expense.employee_id, expense.amount)
    return expense


async def update_expense_status(
    store: InMemoryStore,
    expense_id: str,
    status: ExpenseStatus,
    reviewed_by: str,
) -> Expense:
    """Approve or reject a pending expense.

    The transition happens at most once: a reviewed expense keeps its
    original decision, review time and reviewer. Workflow settings are not
    consulted.
    """
    if status == ExpenseStatus.PENDING:
        raise AppError("Expenses can only be approved or rejected", status_code=400)

    await simulate_latency("update_expense_status")
    index, expense = _get_expense_or_404(store, expense_id)
    if expense.is_reviewed:
        raise AppError("Only pending expenses can be reviewed", status_code=400)

    updated = expense.model_copy(
        update={
            "status": status,
            "reviewed_at": now_utc(),
            "reviewed_by": reviewed_by,
        }
    )
    store.expenses[index] = updated
    logger.info("Expense %s %s by %s", expense_id, status.value, reviewed_by)
    return updated


async def approve_expense(store: InMemoryStore, expense_id: str, reviewed_by: str) -> Expense:
    """Approve a pending expense."""
    return await update_expense_status(store, expense_id, ExpenseStatus.APPROVED, reviewed_by)


async def reject_expense(store: InMemoryStore, expense_id: str, reviewed_by: str) -> Expense:
    """Reject a pending expense."""
    return await update_expense_status(store, expense_id, ExpenseStatus.REJECTED, reviewed_by)
