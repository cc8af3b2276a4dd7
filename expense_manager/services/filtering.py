"""Pure filter/sort helpers for expense listings.

Nothing here touches the store: the same expenses and the same query always
produce the same result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from expense_manager.models.enums import ExpenseSortKey, SortOrder

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from expense_manager.models import Expense
    from expense_manager.schemas.expense import ExpenseQuery

_SORT_KEYS: dict[ExpenseSortKey, Callable[[Expense], Any]] = {
    ExpenseSortKey.DATE: lambda e: e.date,
    ExpenseSortKey.AMOUNT: lambda e: e.amount,
    ExpenseSortKey.SUBMITTED_AT: lambda e: e.submitted_at,
    ExpenseSortKey.EMPLOYEE_NAME: lambda e: e.employee_name.casefold(),
    ExpenseSortKey.CATEGORY: lambda e: e.category.casefold(),
    ExpenseSortKey.STATUS: lambda e: e.status.value,
}


def matches(expense: Expense, query: ExpenseQuery) -> bool:
    """Return True when ``expense`` satisfies every criterion set on ``query``."""
    if query.status is not None and expense.status != query.status:
        return False
    if query.category is not None and expense.category.casefold() != query.category.casefold():
        return False
    if query.employee_id is not None and expense.employee_id != query.employee_id:
        return False
    if query.date_from is not None and expense.date < query.date_from:
        return False
    if query.date_to is not None and expense.date > query.date_to:
        return False
    return True


def filter_expenses(expenses: Iterable[Expense], query: ExpenseQuery) -> list[Expense]:
    """Keep the expenses matching ``query``, preserving input order."""
    return [e for e in expenses if matches(e, query)]


def sort_expenses(
    expenses: Iterable[Expense],
    sort_by: ExpenseSortKey = ExpenseSortKey.SUBMITTED_AT,
    order: SortOrder = SortOrder.DESC,
) -> list[Expense]:
    """Stable sort by ``sort_by``; ties keep id order so results are deterministic."""
    by_id = sorted(expenses, key=lambda e: e.id)
    return sorted(by_id, key=_SORT_KEYS[sort_by], reverse=order == SortOrder.DESC)


def apply_query(expenses: Iterable[Expense], query: ExpenseQuery) -> tuple[list[Expense], int]:
    """Filter, sort and paginate. Returns the page and the unpaginated total."""
    selected = sort_expenses(filter_expenses(expenses, query), query.sort_by, query.order)
    return selected[query.offset : query.offset + query.limit], len(selected)
